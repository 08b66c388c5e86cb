"""SQL template utilities for ``:name`` placeholders."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from canvas_data_sql.errors import TemplateReadError, TemplateWriteError

# `::` is a cast in Redshift/Postgres, never a placeholder.
_ANY_PLACEHOLDER = re.compile(r"(?<!:):([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class Placeholder:
    name: str
    position: int

    @property
    def end(self) -> int:
        return self.position + len(self.name) + 1


def scan_placeholders(text: str, names: Iterable[str]) -> list[Placeholder]:
    """Locate every literal ``:name`` occurrence for the given names.

    At each position the longest matching name wins, so ``:yearly`` is never
    read as ``:year`` followed by ``ly``. Occurrences are returned in text order
    and never overlap.
    """

    ordered = sorted({name for name in names if name}, key=lambda n: (-len(n), n))
    if not ordered or not text:
        return []

    pattern = re.compile(":(" + "|".join(re.escape(name) for name in ordered) + ")")
    return [Placeholder(name=match.group(1), position=match.start()) for match in pattern.finditer(text)]


def substitute_tokens(text: str, tokens: Mapping[str, object]) -> str:
    """Replace every ``:name`` in text with ``str(tokens[name])``.

    Values are inserted verbatim: no quoting, no escaping, and no re-scanning of
    inserted text. Placeholders without a mapped value are left in place.
    """

    occurrences = scan_placeholders(text, tokens.keys())
    if not occurrences:
        return text

    parts: list[str] = []
    cursor = 0
    for occurrence in occurrences:
        parts.append(text[cursor : occurrence.position])
        parts.append(str(tokens[occurrence.name]))
        cursor = occurrence.end
    parts.append(text[cursor:])
    return "".join(parts)


def find_unresolved_placeholders(text: str) -> list[str]:
    """Return the distinct ``:identifier`` names still present in text, in order."""

    seen: dict[str, None] = {}
    for match in _ANY_PLACEHOLDER.finditer(text):
        seen.setdefault(match.group(1), None)
    return list(seen)


def load_template(path: str | Path) -> str:
    """Read a SQL template as UTF-8 text."""

    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateReadError(f"Unable to read SQL template {file_path}: {exc}", path=file_path) from exc


def write_sql(path: str | Path, text: str) -> Path:
    """Write rendered SQL to path, overwriting any previous content.

    The write is not atomic; a failure mid-write can leave a partial file.
    """

    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise TemplateWriteError(f"Unable to write SQL file {file_path}: {exc}", path=file_path) from exc
    return file_path

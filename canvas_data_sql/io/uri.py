from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse


@dataclass(frozen=True)
class ParsedUri:
    scheme: str
    authority: str
    path: str


def parse_uri(uri: str) -> ParsedUri:
    if not uri:
        raise ValueError("uri is required")
    parsed = urlparse(uri)
    if not parsed.scheme:
        raise ValueError(f"URI missing scheme: {uri}")
    authority = parsed.netloc
    path = parsed.path.lstrip("/")
    return ParsedUri(scheme=parsed.scheme, authority=authority, path=path)


def normalize_base_uri(uri: str) -> str:
    """Validate a storage base URI and drop trailing slashes."""

    value = (uri or "").strip()
    parsed = parse_uri(value)
    if not parsed.authority:
        raise ValueError(f"URI missing bucket or host: {uri}")
    return value.rstrip("/")


def join_uri(base_uri: str, key: str) -> str:
    base = base_uri.rstrip("/")
    k = key.lstrip("/")
    return f"{base}/{k}"

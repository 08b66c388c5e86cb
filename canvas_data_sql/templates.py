"""Render the Redshift bootstrap SQL scripts from ``db_templates``."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from canvas_data_sql.config import CanvasDataConfig
from canvas_data_sql.errors import TemplateReadError, TemplateWriteError
from canvas_data_sql.io.sql import (
    find_unresolved_placeholders,
    load_template,
    substitute_tokens,
    write_sql,
)
from canvas_data_sql.io.uri import join_uri
from canvas_data_sql.observability import log_event, render_log_fields
from canvas_data_sql.storage import HashGenerator

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "db_templates"
DB_CREATION = "dbCreation"
DB_REPOINT = "dbRepoint"


@dataclass(frozen=True)
class BootstrapTemplate:
    name: str
    template_path: Path
    output_path: Path


def default_bootstrap_templates(
    template_dir: str | Path | None = None,
    output_dir: str | Path | None = None,
) -> list[BootstrapTemplate]:
    """Return the creation and repoint pairs, in the order they must run."""

    source = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
    target = Path(output_dir) if output_dir else source
    return [
        BootstrapTemplate(
            name=name,
            template_path=source / f"{name}.template",
            output_path=target / f"{name}.sql",
        )
        for name in (DB_CREATION, DB_REPOINT)
    ]


class TemplateRenderer:
    """Fill Canvas Data bootstrap templates from configuration and a daily hash."""

    def __init__(self, config: CanvasDataConfig, hash_generator: HashGenerator) -> None:
        self.config = config
        self.hash_generator = hash_generator

    def build_token_map(self, daily_hash: str) -> dict[str, str]:
        return {
            "externalDatabase": self.config.external_database,
            "s3Location": join_uri(self.config.s3_location, daily_hash),
            "iamRole": self.config.iam_role,
        }

    def render(
        self,
        template_path: str | Path,
        output_path: str | Path,
        *,
        daily_hash: str | None = None,
    ) -> Path:
        """Render one template into output_path.

        A read failure is logged and re-raised before any hash is generated or
        anything is written.
        """

        try:
            template = load_template(template_path)
        except TemplateReadError:
            logger.error("An error occurred when reading the SQL template %s", template_path)
            raise

        if daily_hash is None:
            daily_hash = self.hash_generator.generate_hash()
        rendered = substitute_tokens(template, self.build_token_map(daily_hash))

        unresolved = find_unresolved_placeholders(rendered)
        if unresolved:
            logger.debug("Placeholders left unresolved in %s: %s", template_path, ", ".join(unresolved))

        try:
            written = write_sql(output_path, rendered)
        except TemplateWriteError:
            logger.error("An error occurred when writing the generated SQL file %s", output_path)
            raise

        log_event(
            logger,
            "Successfully generated the canvas data SQL file",
            **render_log_fields(template=template_path, output=written, daily_hash=daily_hash),
        )
        return written


def create_redshift_templates(
    renderer: TemplateRenderer,
    templates: Sequence[BootstrapTemplate] | None = None,
    *,
    share_hash: bool | None = None,
) -> list[Path]:
    """Render the bootstrap scripts in order, stopping at the first failure.

    By default every render draws its own hash from the generator, so the
    scripts may point at different snapshot locations when the generator is not
    stable across calls. ``share_hash=True`` draws one hash for all of them.
    ``None`` defers to ``config.share_daily_hash``.
    """

    if templates is None:
        templates = default_bootstrap_templates()
    if share_hash is None:
        share_hash = renderer.config.share_daily_hash

    shared_hash = renderer.hash_generator.generate_hash() if share_hash else None

    outputs: list[Path] = []
    for template in templates:
        outputs.append(
            renderer.render(template.template_path, template.output_path, daily_hash=shared_hash)
        )
    return outputs

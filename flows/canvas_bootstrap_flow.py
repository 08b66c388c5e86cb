"""Prefect flow that renders the Canvas Data Redshift bootstrap scripts."""

from __future__ import annotations

import os

from prefect import flow, task

from canvas_data_sql.config import CanvasDataConfig, load_canvas_data_config
from canvas_data_sql.storage import DailyHashGenerator, StaticHashGenerator
from canvas_data_sql.templates import (
    TemplateRenderer,
    create_redshift_templates,
    default_bootstrap_templates,
)

DEFAULT_OUTPUT_DIR = os.getenv("CANVAS_DATA_SQL_OUTPUT_DIR") or None


def _build_renderer(config: CanvasDataConfig, daily_hash: str | None) -> TemplateRenderer:
    if daily_hash:
        return TemplateRenderer(config, StaticHashGenerator(daily_hash))
    return TemplateRenderer(config, DailyHashGenerator(config.hash_timezone))


@task(task_run_name="render-bootstrap-scripts")
def render_bootstrap_scripts(
    *,
    config: CanvasDataConfig,
    template_dir: str | None = None,
    output_dir: str | None = None,
    daily_hash: str | None = None,
) -> list[str]:
    renderer = _build_renderer(config, daily_hash)
    templates = default_bootstrap_templates(template_dir, output_dir)
    return [str(path) for path in create_redshift_templates(renderer, templates)]


@flow(name="canvas_bootstrap_flow")
def canvas_bootstrap_flow(
    config_path: str | None = None,
    template_dir: str | None = None,
    output_dir: str | None = DEFAULT_OUTPUT_DIR,
    daily_hash: str | None = None,
) -> list[str]:
    config = load_canvas_data_config(config_path)
    return render_bootstrap_scripts.submit(
        config=config,
        template_dir=template_dir,
        output_dir=output_dir,
        daily_hash=daily_hash,
    ).result()


if __name__ == "__main__":
    canvas_bootstrap_flow()

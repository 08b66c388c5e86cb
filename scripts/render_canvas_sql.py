#!/usr/bin/env python3
"""Render Canvas Data SQL without an orchestrator.

``bootstrap`` writes the Redshift creation and repoint scripts;
``enrollments`` prints the enrollment lookup query for a term and UIDs.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from canvas_data_sql.config import load_canvas_data_config
from canvas_data_sql.enrollments import build_enrollments_sql, build_parameterized_enrollments_sql
from canvas_data_sql.errors import CanvasDataSqlError
from canvas_data_sql.storage import DailyHashGenerator, StaticHashGenerator
from canvas_data_sql.templates import (
    TemplateRenderer,
    create_redshift_templates,
    default_bootstrap_templates,
)

logger = logging.getLogger(__name__)


def _split_uids(values: list[str] | None) -> list[str]:
    if not values:
        return []
    uids: list[str] = []
    for raw in values:
        for item in str(raw).split(","):
            item = item.strip()
            if item:
                uids.append(item)
    return uids


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render Canvas Data SQL scripts.")
    parser.add_argument("--config", type=Path, default=None, help="YAML config path")
    subparsers = parser.add_subparsers(dest="command", required=True)

    bootstrap = subparsers.add_parser("bootstrap", help="render dbCreation/dbRepoint scripts")
    bootstrap.add_argument("--template-dir", type=Path, default=None)
    bootstrap.add_argument("--output-dir", type=Path, default=None)
    bootstrap.add_argument("--hash", dest="daily_hash", type=str, default=None, help="fixed snapshot hash")
    bootstrap.add_argument(
        "--share-hash",
        action="store_true",
        default=None,
        help="use one hash for both scripts (overrides config)",
    )

    enrollments = subparsers.add_parser("enrollments", help="print enrollment lookup SQL")
    enrollments.add_argument("--year", type=int, required=True)
    enrollments.add_argument("--semester", type=str, required=True, help="B, C, D or spring/summer/fall")
    enrollments.add_argument("--uids", action="append", required=True, help="comma-separated UIDs")
    enrollments.add_argument("--bind", action="store_true", help="emit qmark SQL plus parameters")
    return parser


def _run_bootstrap(args: argparse.Namespace) -> int:
    config = load_canvas_data_config(args.config)
    if args.daily_hash:
        hash_generator = StaticHashGenerator(args.daily_hash)
    else:
        hash_generator = DailyHashGenerator(config.hash_timezone)

    renderer = TemplateRenderer(config, hash_generator)
    templates = default_bootstrap_templates(args.template_dir, args.output_dir)
    outputs = create_redshift_templates(renderer, templates, share_hash=args.share_hash)
    for output in outputs:
        print(output)
    return 0


def _run_enrollments(args: argparse.Namespace) -> int:
    config = load_canvas_data_config(args.config)
    uids = _split_uids(args.uids)
    if args.bind:
        query = build_parameterized_enrollments_sql(
            args.year, args.semester, uids, terms=config.enrollment_terms
        )
        print(query.sql)
        print(query.parameters)
        return 0

    print(build_enrollments_sql(args.year, args.semester, uids, terms=config.enrollment_terms))
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = build_parser().parse_args(argv)

    try:
        if args.command == "bootstrap":
            return _run_bootstrap(args)
        return _run_enrollments(args)
    except (CanvasDataSqlError, ValueError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())

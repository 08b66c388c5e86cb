"""Stable public imports for `canvas_data_sql`.

Prefer importing from these symbols in flows and scripts. Lower-level helpers
should be imported from their submodules explicitly.
"""

from canvas_data_sql.config import CanvasDataConfig, load_canvas_data_config
from canvas_data_sql.enrollments import (
    EnrollmentsQuery,
    Semester,
    build_enrollments_sql,
    build_parameterized_enrollments_sql,
    format_uid_list,
    resolve_enrollment_term_id,
)
from canvas_data_sql.errors import (
    CanvasDataSqlError,
    ConfigError,
    EnrollmentTermNotFoundError,
    TemplateReadError,
    TemplateWriteError,
)
from canvas_data_sql.io.sql import substitute_tokens
from canvas_data_sql.storage import DailyHashGenerator, HashGenerator, StaticHashGenerator
from canvas_data_sql.templates import (
    BootstrapTemplate,
    TemplateRenderer,
    create_redshift_templates,
    default_bootstrap_templates,
)

__all__ = [
    "BootstrapTemplate",
    "CanvasDataConfig",
    "CanvasDataSqlError",
    "ConfigError",
    "DailyHashGenerator",
    "EnrollmentTermNotFoundError",
    "EnrollmentsQuery",
    "HashGenerator",
    "Semester",
    "StaticHashGenerator",
    "TemplateReadError",
    "TemplateRenderer",
    "TemplateWriteError",
    "build_enrollments_sql",
    "build_parameterized_enrollments_sql",
    "create_redshift_templates",
    "default_bootstrap_templates",
    "format_uid_list",
    "load_canvas_data_config",
    "resolve_enrollment_term_id",
    "substitute_tokens",
]

"""Canvas Data configuration (env-first, YAML fallback).

Values are read from the namespaced key path ``dataLake.canvasData`` of a YAML
file and may be overridden by ``CANVAS_DATA_*`` environment variables.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytz
import yaml

from canvas_data_sql.constants import (
    CONFIG_NAMESPACE,
    ENROLLMENT_TERMS,
    ENROLLMENT_TERMS_NAMESPACE,
)
from canvas_data_sql.errors import ConfigError
from canvas_data_sql.io.uri import normalize_base_uri
from canvas_data_sql.storage import DEFAULT_HASH_TIMEZONE

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = REPO_ROOT / "config" / "default.yaml"

CONFIG_PATH_ENV = "CANVAS_DATA_CONFIG"
ENV_KEYS = {
    "externalDatabase": "CANVAS_DATA_EXTERNAL_DATABASE",
    "s3Location": "CANVAS_DATA_S3_LOCATION",
    "iamRole": "CANVAS_DATA_IAM_ROLE",
    "shareDailyHash": "CANVAS_DATA_SHARE_DAILY_HASH",
    "hashTimezone": "CANVAS_DATA_HASH_TIMEZONE",
}
REQUIRED_KEYS = ("externalDatabase", "s3Location", "iamRole")


@dataclass(frozen=True)
class CanvasDataConfig:
    external_database: str
    s3_location: str
    iam_role: str
    share_daily_hash: bool = False
    hash_timezone: str = DEFAULT_HASH_TIMEZONE
    enrollment_terms: Mapping[str, int] = field(default_factory=lambda: dict(ENROLLMENT_TERMS))


def _parse_bool(value: Any, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "y"}:
        return True
    if text in {"0", "false", "no", "n"}:
        return False
    raise ConfigError(f"Invalid boolean value: {value!r}")


def _get_path(payload: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    current: Any = payload
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def load_yaml_config(path: str | Path) -> dict[str, Any]:
    """Load a YAML config file; a missing file yields an empty mapping."""

    file_path = Path(path)
    if not file_path.exists():
        logger.info("Config file %s not found; relying on environment.", file_path)
        return {}

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed config file {file_path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {file_path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {file_path} must contain a mapping")
    return raw


def _merge_enrollment_terms(raw: Any) -> dict[str, int]:
    terms = dict(ENROLLMENT_TERMS)
    if raw is None:
        return terms
    if not isinstance(raw, Mapping):
        raise ConfigError("bCourses.enrollmentTerms must be a mapping")
    for key, value in raw.items():
        try:
            terms[str(key).strip()] = int(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid enrollment term id for {key}: {value!r}") from exc
    return terms


def load_canvas_data_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> CanvasDataConfig:
    """Resolve Canvas Data settings.

    Priority: explicit ``CANVAS_DATA_*`` env vars, then the YAML file at ``path``
    (or ``$CANVAS_DATA_CONFIG``, or ``config/default.yaml``).
    """

    env = dict(os.environ) if env is None else dict(env)
    config_path = path or env.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
    payload = load_yaml_config(config_path)

    section = _get_path(payload, CONFIG_NAMESPACE) or {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"{'.'.join(CONFIG_NAMESPACE)} must be a mapping")

    values: dict[str, Any] = dict(section)
    for key, env_name in ENV_KEYS.items():
        raw = env.get(env_name)
        if raw is not None and raw.strip():
            values[key] = raw.strip()

    missing = [key for key in REQUIRED_KEYS if not str(values.get(key) or "").strip()]
    if missing:
        dotted = ", ".join(f"{'.'.join(CONFIG_NAMESPACE)}.{key}" for key in missing)
        raise ConfigError(f"Missing Canvas Data configuration: {dotted}")

    try:
        s3_location = normalize_base_uri(str(values["s3Location"]))
    except ValueError as exc:
        raise ConfigError(f"Invalid s3Location: {exc}") from exc

    hash_timezone = str(values.get("hashTimezone") or DEFAULT_HASH_TIMEZONE).strip()
    try:
        pytz.timezone(hash_timezone)
    except pytz.UnknownTimeZoneError as exc:
        raise ConfigError(f"Unknown hashTimezone: {hash_timezone}") from exc

    return CanvasDataConfig(
        external_database=str(values["externalDatabase"]).strip(),
        s3_location=s3_location,
        iam_role=str(values["iamRole"]).strip(),
        share_daily_hash=_parse_bool(values.get("shareDailyHash"), default=False),
        hash_timezone=hash_timezone,
        enrollment_terms=_merge_enrollment_terms(_get_path(payload, ENROLLMENT_TERMS_NAMESPACE)),
    )

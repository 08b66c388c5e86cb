"""Text and location helpers shared by the renderer and the query builder."""

from canvas_data_sql.io.sql import (
    Placeholder,
    find_unresolved_placeholders,
    load_template,
    scan_placeholders,
    substitute_tokens,
    write_sql,
)
from canvas_data_sql.io.uri import ParsedUri, join_uri, normalize_base_uri, parse_uri

__all__ = [
    "ParsedUri",
    "Placeholder",
    "find_unresolved_placeholders",
    "join_uri",
    "load_template",
    "normalize_base_uri",
    "parse_uri",
    "scan_placeholders",
    "substitute_tokens",
    "write_sql",
]

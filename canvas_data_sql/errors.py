from __future__ import annotations


class CanvasDataSqlError(Exception):
    """Base error for canvas_data_sql."""


class ConfigError(CanvasDataSqlError, ValueError):
    """Raised when Canvas Data configuration is missing or malformed."""


class TemplateIOError(CanvasDataSqlError, OSError):
    """Raised when a template or rendered SQL file cannot be accessed."""

    def __init__(self, message: str, *, path: object = None) -> None:
        super().__init__(message)
        self.path = path


class TemplateReadError(TemplateIOError):
    """Raised when a SQL template is missing or unreadable."""


class TemplateWriteError(TemplateIOError):
    """Raised when rendered SQL cannot be written to its destination."""


class EnrollmentTermNotFoundError(CanvasDataSqlError, LookupError):
    """Raised when no enrollment term id exists for a (year, semester) pair."""

    def __init__(self, year: object, semester_code: str) -> None:
        super().__init__(f"No bCourses termId available for {year}{semester_code}")
        self.year = year
        self.semester_code = semester_code

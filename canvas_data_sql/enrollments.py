"""Ad-hoc enrollment lookup SQL for the lakeview Canvas Data database."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from canvas_data_sql.constants import ENROLLMENT_TERMS
from canvas_data_sql.errors import EnrollmentTermNotFoundError
from canvas_data_sql.io.sql import substitute_tokens

ENROLLMENTS_SQL_TEMPLATE = """
    SELECT
      DISTINCT(p.unique_name, c.canvas_id),
      p.unique_name AS uid,
      u.name person_name,
      c.canvas_id AS canvas_course_id,
      c.name AS course_name,
      c.code as course_code,
      :year as year,
      ':semesterCode' as semesterCode
    FROM user_dim u
      JOIN enrollment_fact e ON e.user_id = u.id
      JOIN course_dim c ON c.id = e.course_id
      JOIN pseudonym_dim p ON p.user_id = u.id
    WHERE
      e.enrollment_term_id = :enrollmentTermId
      AND
      p.unique_name IN (:uids)
    ORDER BY
      p.unique_name,
      c.canvas_id
"""


class Semester(str, Enum):
    SPRING = "B"
    SUMMER = "C"
    FALL = "D"


def parse_semester_code(value: str | Semester) -> Semester:
    """Accept a letter code ('D') or a name ('fall')."""

    if isinstance(value, Semester):
        return value
    text = str(value or "").strip()
    for semester in Semester:
        if text.upper() == semester.value or text.upper() == semester.name:
            return semester
    raise ValueError(f"Unknown semester code: {value!r} (expected B, C or D)")


def _term_semester(year: int | str, semester_code: str | Semester) -> Semester:
    try:
        return parse_semester_code(semester_code)
    except ValueError as exc:
        raise EnrollmentTermNotFoundError(year, str(semester_code)) from exc


def enrollment_term_key(year: int | str, semester_code: str | Semester) -> str:
    return f"{year}{parse_semester_code(semester_code).value}"


def resolve_enrollment_term_id(
    year: int | str,
    semester_code: str | Semester,
    terms: Mapping[str, int] = ENROLLMENT_TERMS,
) -> int:
    semester = _term_semester(year, semester_code)
    term_id = terms.get(enrollment_term_key(year, semester))
    if not term_id:
        raise EnrollmentTermNotFoundError(year, semester.value)
    return term_id


def quote_literal(value: object) -> str:
    """Quote a value as a SQL string literal, doubling embedded quotes."""

    return "'" + str(value).replace("'", "''") + "'"


def format_uid_list(uids: Sequence[object]) -> str:
    """Render UIDs as the body of an ``IN (...)`` list, e.g. ``'123', '456'``.

    Embedded quotes are doubled, so ids containing `'` differ from a plain
    join-then-wrap of the raw values.
    """

    if isinstance(uids, (str, bytes)):
        raise TypeError("uids must be a sequence of identifiers, not a single string")
    if not uids:
        raise ValueError("At least one uid is required")
    return ", ".join(quote_literal(uid) for uid in uids)


def build_enrollments_sql(
    year: int | str,
    semester_code: str | Semester,
    uids: Sequence[object],
    *,
    terms: Mapping[str, int] = ENROLLMENT_TERMS,
) -> str:
    """Build the enrollments SELECT for a term and a set of UIDs.

    Raises:
        EnrollmentTermNotFoundError: no term id exists for ``(year, semester_code)``.
    """

    semester = _term_semester(year, semester_code)
    term_id = resolve_enrollment_term_id(year, semester, terms)

    token_map = {
        "year": year,
        "semesterCode": semester.value,
        "enrollmentTermId": term_id,
        "uids": format_uid_list(uids),
    }
    return substitute_tokens(ENROLLMENTS_SQL_TEMPLATE, token_map)


@dataclass(frozen=True)
class EnrollmentsQuery:
    sql: str
    parameters: list[object]


def build_parameterized_enrollments_sql(
    year: int | str,
    semester_code: str | Semester,
    uids: Sequence[object],
    *,
    terms: Mapping[str, int] = ENROLLMENT_TERMS,
) -> EnrollmentsQuery:
    """Same query with qmark (``?``) parameters for drivers that support binding."""

    semester = _term_semester(year, semester_code)
    term_id = resolve_enrollment_term_id(year, semester, terms)
    if isinstance(uids, (str, bytes)):
        raise TypeError("uids must be a sequence of identifiers, not a single string")
    if not uids:
        raise ValueError("At least one uid is required")

    token_map = {
        "year": "?",
        "semesterCode": semester.value,
        "enrollmentTermId": "?",
        "uids": ", ".join("?" for _ in uids),
    }
    sql = substitute_tokens(ENROLLMENTS_SQL_TEMPLATE, token_map)
    parameters: list[object] = [int(year), term_id, *[str(uid) for uid in uids]]
    return EnrollmentsQuery(sql=sql, parameters=parameters)

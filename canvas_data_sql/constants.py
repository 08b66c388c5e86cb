"""Static bCourses lookup tables."""

from __future__ import annotations

# Canvas enrollment_term_id keyed by "<year><semester code>".
ENROLLMENT_TERMS: dict[str, int] = {
    "2016D": 5368,
    "2017B": 5492,
    "2017C": 5493,
    "2017D": 5494,
    "2018B": 5495,
    "2018C": 5496,
    "2018D": 5497,
}

CONFIG_NAMESPACE = ("dataLake", "canvasData")
ENROLLMENT_TERMS_NAMESPACE = ("bCourses", "enrollmentTerms")

from __future__ import annotations

import logging

from canvas_data_sql.observability import log_event

logger = logging.getLogger("tests.observability")


def test_log_event_appends_non_empty_fields(caplog) -> None:
    caplog.set_level(logging.INFO)

    log_event(logger, "render", template="a.template", output=None, hash="  ")

    assert caplog.records[-1].getMessage() == "render template=a.template"


def test_log_event_respects_level(caplog) -> None:
    caplog.set_level(logging.WARNING)

    log_event(logger, "quiet", stage="x")
    log_event(logger, "loud", level=logging.ERROR, stage="y")

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["loud stage=y"]

from __future__ import annotations

import json

import pytest
import structlog

from courseware.core.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> None:
    yield
    structlog.reset_defaults()


def test_configure_logging_renders_json_events() -> None:
    configure_logging("INFO", "json")
    renderer = structlog.get_config()["processors"][-1]

    assert isinstance(renderer, structlog.processors.JSONRenderer)
    rendered = renderer(None, "info", {"event": "quiz_submission_scored", "quiz_id": 21})
    assert json.loads(rendered) == {"event": "quiz_submission_scored", "quiz_id": 21}


@pytest.mark.parametrize("log_format", ["console", " Console "])
def test_configure_logging_console_format(log_format: str) -> None:
    configure_logging("DEBUG", log_format)
    renderer = structlog.get_config()["processors"][-1]

    assert isinstance(renderer, structlog.dev.ConsoleRenderer)
    rendered = renderer(None, "warning", {"event": "exam_exercise_not_found", "exercise_id": 404})
    assert "exam_exercise_not_found" in rendered
    assert "exercise_id=404" in rendered


def test_configure_logging_includes_logger_name_and_timestamp() -> None:
    configure_logging()
    processors = structlog.get_config()["processors"]

    assert structlog.stdlib.add_logger_name in processors
    assert any(isinstance(processor, structlog.processors.TimeStamper) for processor in processors)

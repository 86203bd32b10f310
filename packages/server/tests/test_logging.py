"""
Logging configuration tests.
"""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from app.core.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_structlog():
    yield
    # Later tests must not write to this test's captured stdout.
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_debug(self, capsys):
        configure_logging("debug", "json")
        structlog.get_logger().debug("tracker.test_event", project_id=7)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "tracker.test_event"
        assert record["level"] == "debug"
        assert record["project_id"] == 7
        assert "timestamp" in record
        assert logging.getLogger("uvicorn").level == logging.DEBUG

    def test_text_warning_filters_info(self, capsys):
        configure_logging("warning", "text")
        log = structlog.get_logger()
        log.info("tracker.hidden")
        log.warning("tracker.shown")

        out = capsys.readouterr().out
        assert "tracker.hidden" not in out
        assert "tracker.shown" in out
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            configure_logging("chatty", "json")

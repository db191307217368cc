import logging

import pytest

from screencopy.logging.logger import Log, _ContextFormatter


def _format(message: str, **extra: object) -> str:
    record = logging.makeLogRecord({"msg": message, "levelname": "INFO", **extra})
    return _ContextFormatter("%(message)s").format(record)


class TestContextFormatter:
    def test_plain_message_without_context(self) -> None:
        assert _format("Run started") == "Run started"

    def test_appends_sorted_context_pairs(self) -> None:
        line = _format("Screen failed", stage="recognition", file_name="a.png")
        assert line == "Screen failed | file_name=a.png stage=recognition"


class TestLog:
    def test_passes_context_as_extra(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="screencopy"):
            Log.info("Removed screen", file_name="a.png")
        assert caplog.records[-1].file_name == "a.png"
        assert caplog.records[-1].getMessage() == "Removed screen"

    def test_configure_sets_level(self) -> None:
        Log.configure("warning")
        assert logging.getLogger("screencopy").level == logging.WARNING
        Log.configure("info")

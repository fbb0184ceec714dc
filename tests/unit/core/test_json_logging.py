import json
import logging
import sys
from unittest.mock import patch

from active_sessions.logging.json import (
    CustomJsonFormatter,
    SensitiveDataFilter,
    configure_logging,
)
from active_sessions.logging.logger import get_logger, is_configured


def _record(msg="Test message", level=logging.INFO, exc_info=None, **extra):
    record = logging.LogRecord(
        name="active_sessions.tracker",
        level=level,
        pathname="/test/path.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.__dict__.update(extra)
    return record


class TestSensitiveDataFilter:
    def test_redacts_matching_keys(self):
        sdf = SensitiveDataFilter(["session", "token"])

        filtered = sdf.filter(
            {"session_id": "abc123", "api_token": "t", "category": "customer"}
        )

        assert filtered == {
            "session_id": "[REDACTED]",
            "api_token": "[REDACTED]",
            "category": "customer",
        }

    def test_handles_nested_objects(self):
        sdf = SensitiveDataFilter(["password"])

        filtered = sdf.filter({"user": {"name": "jo", "password_hint": "pet"}})

        assert filtered == {"user": {"name": "jo", "password_hint": "[REDACTED]"}}

    def test_empty_patterns_keep_everything(self):
        data = {"session_id": "abc"}
        assert SensitiveDataFilter([]).filter(data) == data


class TestCustomJsonFormatter:
    """Test custom JSON formatter functionality."""

    @patch("socket.gethostname", return_value="test-host")
    @patch("os.getpid", return_value=12345)
    def test_format_basic_record(self, mock_getpid, mock_gethostname):
        formatter = CustomJsonFormatter(
            service="session-tracker", environment="test", redaction_patterns=[]
        )

        parsed = json.loads(formatter.format(_record()))

        assert parsed["service"] == "session-tracker"
        assert parsed["hostname"] == "test-host"
        assert parsed["pid"] == 12345
        assert parsed["environment"] == "test"
        assert parsed["levelname"] == "INFO"
        assert parsed["message"] == "Test message"
        assert "timestamp" in parsed

    def test_session_id_extra_is_redacted(self):
        formatter = CustomJsonFormatter(
            service="session-tracker",
            environment="test",
            redaction_patterns=["session"],
        )

        parsed = json.loads(
            formatter.format(_record(session_id="abc123", bucket="minute_04"))
        )

        assert parsed["session_id"] == "[REDACTED]"
        assert parsed["bucket"] == "minute_04"

    def test_format_record_with_exception(self):
        formatter = CustomJsonFormatter(
            service="session-tracker", environment="test", redaction_patterns=[]
        )
        try:
            raise ConnectionError("store down")
        except ConnectionError:
            record = _record("failed", logging.WARNING, exc_info=sys.exc_info())

        parsed = json.loads(formatter.format(record))

        assert parsed["exception"]["type"] == "ConnectionError"
        assert parsed["exception"]["message"] == "store down"
        assert isinstance(parsed["exception"]["stack"], list)


class TestConfigureLogging:
    def test_installs_single_json_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configured = configure_logging(
                service="session-tracker",
                environment="test",
                level="DEBUG",
                redaction_patterns=["session"],
            )

            assert configured is root
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)
            assert root.level == logging.DEBUG
            assert is_configured()
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_falls_back_to_settings(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging()
            formatter = root.handlers[0].formatter
            assert formatter.service_name == "session-tracker"
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)


def test_get_logger_returns_named_logger():
    logger = get_logger("active_sessions.test", auto_configure=False)
    assert logger.name == "active_sessions.test"

"""Tests for logging_config module."""

import io
import json
import logging

import pytest

from cert_identity.lib.logging_config import (
    LOG_FIELDS,
    LOG_FORMAT,
    LOGGER,
    CustomJsonFormatter,
    build_handler,
    configure_log_level,
)


class TestCustomJsonFormatter:
    """Tests for CustomJsonFormatter."""

    def test_only_allowed_fields(self) -> None:
        """Output keeps the focused field set with level renamed."""
        formatter = CustomJsonFormatter(fmt=LOG_FORMAT, timestamp=True)
        record = logging.LogRecord(
            name="cert_identity",
            level=logging.INFO,
            pathname=__file__,
            lineno=12,
            msg="Identity check for '%s'",
            args=("example.com",),
            exc_info=None,
            func="verify_certificate",
        )

        payload = json.loads(formatter.format(record))

        assert set(payload) <= LOG_FIELDS
        assert payload["level"] == "INFO"
        assert payload["message"] == "Identity check for 'example.com'"
        assert payload["funcName"] == "verify_certificate"
        assert "name" not in payload


class TestLogger:
    """Tests for the shared LOGGER."""

    def test_singleton_configuration(self) -> None:
        """Logger has one JSON handler and does not propagate."""
        assert LOGGER.name == "cert_identity"
        assert LOGGER.propagate is False
        assert len(LOGGER.handlers) == 1
        assert isinstance(LOGGER.handlers[0].formatter, CustomJsonFormatter)

    def test_configure_log_level(self) -> None:
        """configure_log_level changes verbosity."""
        previous = LOGGER.level
        try:
            configure_log_level(logging.DEBUG)
            assert LOGGER.level == logging.DEBUG
            configure_log_level("WARNING")
            assert LOGGER.level == logging.WARNING
        finally:
            LOGGER.setLevel(previous)

    def test_configure_log_level_unknown_name(self) -> None:
        """Unknown level names are rejected."""
        with pytest.raises(ValueError):
            configure_log_level("CHATTY")


class TestBuildHandler:
    """Tests for build_handler."""

    def test_writes_json_lines(self) -> None:
        """Handler writes one JSON object per record to the given stream."""
        stream = io.StringIO()
        logger = logging.getLogger("cert_identity.test_build_handler")
        logger.addHandler(build_handler(stream))
        logger.setLevel(logging.INFO)
        logger.propagate = False
        try:
            logger.info("Certificate identity matches host: %s", "example.com")
        finally:
            logger.handlers.clear()

        payload = json.loads(stream.getvalue().strip())
        assert payload["message"] == "Certificate identity matches host: example.com"
        assert payload["level"] == "INFO"
        assert payload["funcName"] == "test_writes_json_lines"

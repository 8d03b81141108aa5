"""JSON logging for certificate identity checks.

All modules log through the shared LOGGER. Records are emitted as one JSON
object per line, reduced to LOG_FIELDS, so verification decisions can be
grepped or shipped to a log pipeline without noise.
"""

import logging
from typing import IO

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "cert_identity"
LOG_FORMAT = "%(timestamp)s %(levelname)s %(funcName)s %(lineno)d %(message)s"
LOG_FIELDS = frozenset({"timestamp", "level", "message", "exc_info", "funcName", "lineno"})


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter emitting LOG_FIELDS only, with levelname shown as level."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")

        for key in [key for key in log_record if key not in LOG_FIELDS]:
            del log_record[key]


def build_handler(stream: IO[str] | None = None) -> logging.Handler:
    """Return stream handler (stderr by default) formatting records as JSON."""
    handler = logging.StreamHandler(stream)
    handler.setFormatter(CustomJsonFormatter(fmt=LOG_FORMAT, timestamp=True))
    return handler


def _setup_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)

    # Module reloads must not stack handlers
    if not logger.handlers:
        logger.addHandler(build_handler())
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger


def configure_log_level(level: int | str) -> None:
    """Set verbosity of the shared logger, e.g. logging.DEBUG or "WARNING".

    Raises:
        ValueError: If level is an unknown level name
    """
    LOGGER.setLevel(level)


LOGGER = _setup_logger()

"""
Logging setup for the mission encoder.

Records go to stderr (stdout is reserved for command output) as JSON lines by
default. Every record carries a trace_id; code working on one replay blob logs
with the replay identifier so all lines about that blob can be grouped.

Environment Variables:
    MISSION_ENCODER_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL - default: INFO
    MISSION_ENCODER_LOG_FORMAT: json or text - default: json
"""

import logging
import os
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s (trace_id=%(trace_id)s)"
_JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s"


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "text":
        return logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return JsonFormatter(
        _JSON_FIELDS,
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
    )


def setup_logging(stream: Optional[TextIO] = None) -> None:
    """
    Install a single handler on the root logger.

    Unknown level names fall back to INFO; any format other than "text" means JSON.
    Calling again replaces the previous handler.
    """
    level_name = os.getenv("MISSION_ENCODER_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name) if level_name in _LEVELS else logging.INFO
    log_format = os.getenv("MISSION_ENCODER_LOG_FORMAT", "json").lower()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())
    handler.setFormatter(_build_formatter(log_format))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    # boto3/botocore are chatty at INFO
    for name in ("boto3", "botocore", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """Logger whose records carry trace_id (typically str(blob.replay_id))."""
    return logging.LoggerAdapter(logging.getLogger(name), {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """Fills in trace_id = "N/A" for records logged without an adapter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True

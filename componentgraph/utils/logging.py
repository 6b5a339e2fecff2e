"""Centralized logging configuration using Loguru with NDJSON output.

This module provides the single logger every componentgraph module imports.
Human-readable lines go to stderr so JSON written to stdout by the CLI stays
clean; JSON mode emits one object per line for machine consumption.

Usage:
    from componentgraph.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if COMPONENTGRAPH_LOG_LEVEL=DEBUG

Environment Variables:
    COMPONENTGRAPH_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    COMPONENTGRAPH_LOG_JSON: 0|1 (default: 0, human-readable)
    COMPONENTGRAPH_LOG_FILE: path to NDJSON log file (optional)
    COMPONENTGRAPH_REQUEST_ID: correlation ID for a run
"""

import json
import os
import sys
import uuid

from loguru import logger

# Remove default handler
logger.remove()

# Numeric levels written in JSON mode
JSON_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "SUCCESS": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_log_level = os.environ.get("COMPONENTGRAPH_LOG_LEVEL", "INFO").upper()
_json_mode = os.environ.get("COMPONENTGRAPH_LOG_JSON", "0") == "1"
_log_file = os.environ.get("COMPONENTGRAPH_LOG_FILE")
_request_id = os.environ.get("COMPONENTGRAPH_REQUEST_ID") or str(uuid.uuid4())


def _record_to_json(record) -> str:
    """Serialize a loguru record as a single NDJSON line."""
    entry = {
        "level": JSON_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
        "request_id": record["extra"].get("request_id", _request_id),
    }

    for key, value in record["extra"].items():
        if key != "request_id":
            entry[key] = value

    if record["exception"]:
        entry["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    return json.dumps(entry, default=str)


def json_sink(message):
    """Write NDJSON records to stderr.

    CRITICAL: Never call logger.* inside a sink - causes infinite recursion
    """
    sys.stderr.write(_record_to_json(message.record) + "\n")
    sys.stderr.flush()


# No emojis - Windows CP1252 compatibility
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")

if _json_mode:
    logger.add(json_sink, level=_log_level, colorize=False)
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:
    def _file_sink(message):
        """Append NDJSON to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_record_to_json(message.record) + "\n")

    logger.add(_file_sink, level="DEBUG")


def get_request_id() -> str:
    """Get the current request ID for correlation."""
    return _request_id


__all__ = [
    "logger",
    "get_request_id",
    "json_sink",
]

"""Logging configuration for idforge.

Records are written as JSON (default) or plain text. Every record emitted
while a person is being generated carries the generation_id of that call, so
the debug output of one generate() can be picked out of a busy log.

Environment:
    IDFORGE_LOG_LEVEL   DEBUG, INFO, WARNING or ERROR (default: INFO)
    IDFORGE_LOG_FORMAT  json or text (default: json)
"""

import logging
import os
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Optional

from pythonjsonlogger.json import JsonFormatter


SERVICE_NAME = "idforge"
NO_GENERATION = "-"

JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(generation_id)s] %(message)s"

# Field renames applied to JSON records
_RENAMED_FIELDS = {"levelname": "level", "asctime": "timestamp"}

generation_id_var: ContextVar[str] = ContextVar("generation_id", default="")


def get_generation_id() -> str:
    """Identifier of the generate() call running in this context, or ""."""
    return generation_id_var.get()


@contextmanager
def generation_context(generation_id: Optional[str] = None) -> Iterator[str]:
    """Tag every record logged inside the block with one generation id.

    Args:
        generation_id: Explicit id; a short random hex id is drawn when omitted.

    Yields:
        The active generation id. The previous id is restored on exit.
    """
    token = generation_id_var.set(generation_id or uuid.uuid4().hex[:12])
    try:
        yield generation_id_var.get()
    finally:
        generation_id_var.reset(token)


class GenerationContextFilter(logging.Filter):
    """Copy the active generation id onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.generation_id = get_generation_id() or NO_GENERATION
        return True


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter emitting level/timestamp keys and the service name."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        for old, new in _RENAMED_FIELDS.items():
            if old in log_record:
                log_record[new] = log_record.pop(old)

        log_record["service"] = SERVICE_NAME
        log_record["generation_id"] = getattr(record, "generation_id", NO_GENERATION)


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return CustomJsonFormatter(fmt=JSON_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Install a single stdout handler on the root logger.

    Args:
        level: Log level name. Defaults to IDFORGE_LOG_LEVEL or INFO.
        json_format: Emit JSON records. Defaults to IDFORGE_LOG_FORMAT == "json".
    """
    if level is None:
        level = os.getenv("IDFORGE_LOG_LEVEL", "INFO").upper()
    if json_format is None:
        json_format = os.getenv("IDFORGE_LOG_FORMAT", "json").lower() == "json"

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(GenerationContextFilter())
    handler.setFormatter(_build_formatter(json_format))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Module logger; use get_logger(__name__)."""
    return logging.getLogger(name)

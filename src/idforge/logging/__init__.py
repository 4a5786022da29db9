"""Logging configuration module for idforge."""

from idforge.logging.setup import (
    generation_context,
    get_generation_id,
    get_logger,
    setup_logging,
)

__all__ = ["generation_context", "get_generation_id", "get_logger", "setup_logging"]

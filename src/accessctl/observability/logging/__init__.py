"""Observability – structured logging helpers."""
from accessctl.observability.logging.factory import configure_logging
from accessctl.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]

"""Logging setup for weektime applications."""

from weektime.observability.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]

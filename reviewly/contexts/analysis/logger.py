"""
Analysis context logger.

Provides logging interface for analysis context with automatic [analysis] prefix.
All analysis modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[analysis]"


def _log_info(message: str) -> None:
    """Log info message with [analysis] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [analysis] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")

"""
Summarizing context logger.

Provides logging interface for summarizing context with automatic [summary] prefix.
All summarizing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from reviewly.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[summary]"


def setup_summary_logger(log_dir: Path, input_name: str = None, console: bool = True) -> Path:
    """
    Setup logger for a summarization session.

    Args:
        log_dir: Directory for this session
        input_name: Item source recorded in the provenance header
        console: Also log INFO and above to the console

    Returns:
        Path to log file

    Example:
        from reviewly.contexts.summarizing.logger import setup_summary_logger

        log_file = setup_summary_logger(log_dir, input_name="items.yaml")
    """
    return _setup_logger(
        context_name="summary",
        log_dir=log_dir,
        extra_provenance={"Input": input_name} if input_name else None,
        console=console,
    )


# Wrapper functions with automatic [summary] prefix


def _log_info(message: str) -> None:
    """Log info message with [summary] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [summary] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [summary] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level summarizing helpers


def log_summary_result(result) -> None:
    """
    Log the outcome of one generate_auto_summary() run.

    Args:
        result: AutoSummaryResult
    """
    _log_success(
        f"Summarized {result.metadata.total_items} items into "
        f"{len(result.categories)} categories "
        f"(confidence {result.metadata.confidence:.2f})"
    )
    if result.leading_category:
        _log_info(f"Leading category: {result.leading_category.category}")
    for category in result.categories:
        _log_debug(
            f"  {category.category}: {category.total_items} items, "
            f"importance={category.importance}, growth={category.trends.growth}"
        )

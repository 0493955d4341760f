"""
Figures context logger.

Provides logging interface for figure commands with automatic [figure] prefix.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[figure]"


def _log_info(message: str) -> None:
    """Log info message with [figure] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [figure] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [figure] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_figure_start(command: str, source: Path, output: Path) -> None:
    """Log start of a figure build."""
    _log_info(f"Building {command} figure: {source}")
    _log_debug(f"  Output: {output}")


def log_figure_done(command: str, output: Path, elapsed_time: float) -> None:
    _log_success(f"{command}: wrote {output} ({elapsed_time:.2f}s)")

"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path
from typing import List

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_process_start(argv: List[str], cwd: Path) -> None:
    """Log an external tool invocation."""
    _log_info(f"Running {argv[0]}")
    _log_debug(f"  Command: {' '.join(argv)}")
    _log_debug(f"  Directory: {cwd}")


def log_process_result(tool: str, returncode: int, elapsed_time: float) -> None:
    """Log how an external tool invocation ended."""
    if returncode == 0:
        _log_debug(f"{tool} finished ({elapsed_time:.2f}s)")
    else:
        _log_error(f"{tool} exited with status {returncode} ({elapsed_time:.2f}s)")


def log_cleanup(removed: List[Path], kept: bool = False) -> None:
    """Log the outcome of a temporary file cleanup."""
    if kept:
        _log_warning(f"Keeping {len(removed)} temporary file(s):")
        for path in removed:
            _log_warning(f"  {path.name}")
        return

    _log_debug(f"Removed {len(removed)} temporary file(s)")
    for path in removed:
        _log_debug(f"  {path.name}")

"""
Shared utilities for texfig.

- Logger configuration and provenance headers
"""

from texfig.utils.logger import log_provenance, setup_logger

__all__ = ["log_provenance", "setup_logger"]

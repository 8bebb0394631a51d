"""
Shared utilities module.

This module contains settings and logging configuration used across the package.
"""

from tryresult.shared.config import Settings, get_settings
from tryresult.shared.logging_config import configure_logging, get_logger

__all__ = ["Settings", "get_settings", "configure_logging", "get_logger"]

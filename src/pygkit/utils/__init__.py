"""Utility modules for pygkit.

Provides:
- logger: get_logger for logging
"""

from pygkit.utils.logger import get_logger

__all__ = [
    "get_logger",
]

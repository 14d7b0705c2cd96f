"""Utility modules for sexpline.

Provides:
- logger: get_logger for logging
"""

from sexpline.utils.logger import get_logger

__all__ = [
    "get_logger",
]

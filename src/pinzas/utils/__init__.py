"""Utility modules for Pinzas.

Provides:
- logger: get_logger for logging
"""

from pinzas.utils.logger import get_logger

__all__ = [
    "get_logger",
]

"""Utility modules for sclex.

Provides:
- logger: get_logger for logging
"""

from sclex.utils.logger import get_logger

__all__ = ["get_logger"]

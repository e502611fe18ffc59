"""Utility modules for parsingstream.

Provides:
- logger: get_logger for logging
"""

from parsingstream.utils.logger import get_logger

__all__ = ["get_logger"]

"""Utility modules for autolinker.

Provides:
- logger: get_logger for logging
- text: escape_attr for attribute values
"""

from autolinker.utils.logger import get_logger
from autolinker.utils.text import escape_attr

__all__ = [
    "escape_attr",
    "get_logger",
]

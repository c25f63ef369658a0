"""Utility modules for iniscan.

Provides:
- text: trim, trim_value for opt-in whitespace trimming
- logger: get_logger for logging
"""

from iniscan.utils.logger import get_logger
from iniscan.utils.text import trim, trim_value

__all__ = [
    "get_logger",
    "trim",
    "trim_value",
]

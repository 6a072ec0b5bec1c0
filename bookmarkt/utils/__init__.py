"""
Utility modules for bookmarkt.

This package contains logging setup and command-line argument validation.
"""

from .logging_setup import setup_logging
from .validation import ValidationError

__all__ = [
    "setup_logging",
    "ValidationError",
]

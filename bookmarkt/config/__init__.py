"""
Configuration for bookmarkt.
"""

from .pydantic_config import (
    BookmarktConfig,
    ConfigurationManager,
    LoggingConfig,
    OutputConfig,
    ParserConfig,
    format_config_error,
)

__all__ = [
    "BookmarktConfig",
    "ConfigurationManager",
    "LoggingConfig",
    "OutputConfig",
    "ParserConfig",
    "format_config_error",
]

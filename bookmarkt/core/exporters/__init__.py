"""
Document exporters.

This module provides exporters for the JSON projection and for
Netscape HTML markup.
"""

from .base import DocumentExporter, ExportResult, ExportError
from .json_exporter import JSONExporter, to_dict, to_json
from .html_exporter import HTMLExporter

__all__ = [
    "DocumentExporter",
    "ExportResult",
    "ExportError",
    "JSONExporter",
    "HTMLExporter",
    "to_dict",
    "to_json",
    "EXPORTERS",
    "get_exporter",
]


# Format registry for easy access
EXPORTERS = {
    "json": JSONExporter,
    "html": HTMLExporter,
    "htm": HTMLExporter,
}


def get_exporter(format_name: str) -> type:
    """
    Get an exporter class by format name.

    Args:
        format_name: Name of the format (json, html)

    Returns:
        Exporter class for the specified format

    Raises:
        ValueError: If format is not supported
    """
    format_lower = format_name.lower()
    if format_lower not in EXPORTERS:
        supported = ", ".join(sorted(set(EXPORTERS.keys()) - {"htm"}))
        raise ValueError(
            f"Unsupported export format: {format_name}. "
            f"Supported formats: {supported}"
        )
    return EXPORTERS[format_lower]

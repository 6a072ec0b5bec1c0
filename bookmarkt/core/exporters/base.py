"""
Base classes for document exporters.

This module provides the abstract base class and common utilities
for all export formats.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

from ..data_models import Document


@dataclass
class ExportResult:
    """
    Result of an export operation.

    Attributes:
        path: Path to the exported file
        count: Number of bookmarks exported
        format_name: Name of the export format used
        exported_at: Timestamp of the export
        additional_info: Any format-specific additional information
        warnings: List of non-fatal warnings during export
    """

    path: Path
    count: int
    format_name: str
    exported_at: datetime = field(default_factory=datetime.now)
    additional_info: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"ExportResult(format={self.format_name}, "
            f"count={self.count}, path={self.path})"
        )


class ExportError(Exception):
    """
    Exception raised when export fails.

    Attributes:
        message: Error description
        format_name: Name of the export format
        path: Target path if available
        original_error: Underlying exception if any
    """

    def __init__(
        self,
        message: str,
        format_name: Optional[str] = None,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.format_name = format_name
        self.path = path
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []
        if self.format_name:
            parts.append(f"[{self.format_name}]")
        parts.append(self.message)
        if self.path:
            parts.append(f"(path: {self.path})")
        if self.original_error:
            parts.append(f"Caused by: {type(self.original_error).__name__}: {self.original_error}")
        return " ".join(parts)


class DocumentExporter(ABC):
    """
    Abstract base class for document exporters.

    All exporters must implement render() and define format_name and
    file_extension. export() writes the rendered text to disk.

    Example:
        >>> exporter = JSONExporter()
        >>> result = exporter.export(document, Path("output.json"))
        >>> print(f"Exported {result.count} bookmarks to {result.path}")
    """

    def __init__(self):
        """Initialize the exporter."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def render(self, document: Document) -> str:
        """
        Render a document in this format.

        Args:
            document: Document to render

        Returns:
            The rendered text
        """
        pass

    @property
    @abstractmethod
    def format_name(self) -> str:
        """
        Human-readable name of the export format.

        Returns:
            Format name string (e.g., "JSON", "HTML")
        """
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """
        Default file extension for this format.

        Returns:
            Extension string without leading dot (e.g., "json", "html")
        """
        pass

    def validate_document(self, document: Document) -> List[str]:
        """
        Look for things worth warning about before export.

        Args:
            document: Document to check

        Returns:
            List of warning messages for any issues found
        """
        warnings = []

        if not document.children:
            warnings.append("Document has no bookmarks or folders")
            return warnings

        bookmarks = document.get_bookmarks()

        no_url_count = sum(1 for b in bookmarks if not b.href)
        if no_url_count > 0:
            warnings.append(f"{no_url_count} bookmark(s) have no URL")

        no_title_count = sum(1 for b in bookmarks if not b.title)
        if no_title_count > 0:
            warnings.append(f"{no_title_count} bookmark(s) have no title")

        return warnings

    def prepare_output_path(self, output_path: Union[str, Path]) -> Path:
        """
        Prepare and validate the output path.

        Args:
            output_path: Target path for export

        Returns:
            Validated Path object

        Raises:
            ExportError: If the parent directory cannot be created
        """
        path = Path(output_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            raise ExportError(
                f"Permission denied creating path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )
        except OSError as e:
            raise ExportError(
                f"Failed to prepare output path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        return path

    def export(self, document: Document, output_path: Union[str, Path]) -> ExportResult:
        """
        Export a document to the specified path.

        Args:
            document: Document to export
            output_path: Target path for the export

        Returns:
            ExportResult with details about the export

        Raises:
            ExportError: If export fails
        """
        warnings = self.validate_document(document)
        for warning in warnings:
            self.logger.warning(warning)

        path = self.prepare_output_path(output_path)

        try:
            content = self.render(document)

            with open(path, "w", encoding="utf-8") as f:
                f.write(content)

        except PermissionError as e:
            raise ExportError(
                f"Permission denied writing to {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )
        except OSError as e:
            raise ExportError(
                f"Failed to export {self.format_name}: {e}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        count = len(document.get_bookmarks())
        self.logger.info(f"Exported {count} bookmarks to {path}")

        return ExportResult(
            path=path,
            count=count,
            format_name=self.format_name,
            additional_info={
                "folders": len(document.get_folders()),
                "file_size": path.stat().st_size,
            },
            warnings=warnings,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_name})"

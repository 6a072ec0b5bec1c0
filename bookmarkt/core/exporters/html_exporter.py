"""
Netscape HTML document exporter.
"""

from .base import DocumentExporter
from ..data_models import Document
from ..netscape_generator import render_document


class HTMLExporter(DocumentExporter):
    """Export documents back to Netscape bookmark markup."""

    @property
    def format_name(self) -> str:
        return "HTML"

    @property
    def file_extension(self) -> str:
        return "html"

    def render(self, document: Document) -> str:
        return render_document(document)

"""Guidebook - content lookups for a markdown documentation site."""

from guidebook.core.content import ContentIndex, Pagination
from guidebook.core.documents import Document, DocumentLoader, MarkdownDocumentLoader
from guidebook.core.pages import ConceptPage, QuickStartPage
from guidebook.errors import DocumentError, GuidebookError, MissingConceptError

__all__ = [
    "ConceptPage",
    "ContentIndex",
    "Document",
    "DocumentError",
    "DocumentLoader",
    "GuidebookError",
    "MarkdownDocumentLoader",
    "MissingConceptError",
    "Pagination",
    "QuickStartPage",
]

"""Typed pages built from document front matter."""

from dataclasses import dataclass, field
from typing import TypedDict

from guidebook.core.documents import Document
from guidebook.errors import DocumentError


class QuickStartPageDict(TypedDict):
    """Dictionary representation of a quick start page."""

    title: str
    order: int
    href: str | None


class ConceptPageDict(TypedDict):
    """Dictionary representation of a concept page."""

    title: str
    id: str
    readMore: list[str]
    related: list[str]
    href: str | None


@dataclass(frozen=True)
class QuickStartPage:
    """Page in the linearly ordered quick start sequence."""

    title: str
    order: int
    document: Document | None = field(default=None, repr=False, compare=False)

    @property
    def href(self) -> str | None:
        return self.document.href if self.document is not None else None

    @classmethod
    def from_document(cls, document: Document) -> "QuickStartPage":
        """Create page from document front matter.

        Raises:
            DocumentError: If title or order is missing or has the wrong type
        """
        front_matter = document.front_matter
        title = _require_str(document, "title")

        order = front_matter.get("order")
        # bool is an int subclass but never a valid position
        if isinstance(order, bool) or not isinstance(order, int):
            raise DocumentError(f"{document.filename}: front matter 'order' must be an integer")

        return cls(title=title, order=order, document=document)

    def to_dict(self) -> QuickStartPageDict:
        """Convert to dictionary for JSON serialization."""
        return {"title": self.title, "order": self.order, "href": self.href}


@dataclass(frozen=True)
class ConceptPage:
    """Reference page addressable by a stable id."""

    title: str
    id: str
    read_more: tuple[str, ...] = ()
    related: tuple[str, ...] = ()
    document: Document | None = field(default=None, repr=False, compare=False)

    @property
    def href(self) -> str | None:
        return self.document.href if self.document is not None else None

    @classmethod
    def from_document(cls, document: Document) -> "ConceptPage":
        """Create page from document front matter.

        The optional ``readMore`` and ``related`` keys must be lists of
        strings when present.

        Raises:
            DocumentError: If a field is missing or has the wrong type
        """
        return cls(
            title=_require_str(document, "title"),
            id=_require_str(document, "id"),
            read_more=_optional_str_list(document, "readMore"),
            related=_optional_str_list(document, "related"),
            document=document,
        )

    def to_dict(self) -> ConceptPageDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "id": self.id,
            "readMore": list(self.read_more),
            "related": list(self.related),
            "href": self.href,
        }


def _require_str(document: Document, key: str) -> str:
    value = document.front_matter.get(key)
    if not isinstance(value, str):
        raise DocumentError(f"{document.filename}: front matter '{key}' must be a string")
    return value


def _optional_str_list(document: Document, key: str) -> tuple[str, ...]:
    value = document.front_matter.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DocumentError(f"{document.filename}: front matter '{key}' must be a list of strings")
    return tuple(value)

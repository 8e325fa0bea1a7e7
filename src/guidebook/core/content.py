"""Content index over quick start and concept pages.

The index is built once from a document loader and then only read.
Lookups scan the collections in loader order, so duplicate orders or
ids resolve to the first page the loader returned.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from guidebook.core.documents import DocumentLoader
from guidebook.core.pages import ConceptPage, QuickStartPage
from guidebook.errors import MissingConceptError

logger = logging.getLogger(__name__)

QUICK_START_FOLDER = "~/pages/start"
CONCEPTS_FOLDER = "~/pages/concepts"


@dataclass(frozen=True)
class Pagination:
    """Neighbouring quick start pages."""

    previous: QuickStartPage | None
    next: QuickStartPage | None


class ContentIndex:
    """Immutable lookups over the two page collections.

    Holds the quick start pages in loader order together with a copy
    sorted by order, and the concept pages in loader order.
    """

    __slots__ = ("_concept_pages", "_quick_start_pages", "_sorted_quick_start_pages")

    def __init__(
        self,
        quick_start_pages: Iterable[QuickStartPage],
        concept_pages: Iterable[ConceptPage],
    ) -> None:
        """Initialize index.

        Args:
            quick_start_pages: Quick start pages in loader order
            concept_pages: Concept pages in loader order
        """
        self._quick_start_pages = tuple(quick_start_pages)
        # sorted() is stable, ties keep loader order
        self._sorted_quick_start_pages = tuple(
            sorted(self._quick_start_pages, key=lambda page: page.order),
        )
        self._concept_pages = tuple(concept_pages)

    @classmethod
    def load(
        cls,
        loader: DocumentLoader,
        *,
        quick_start_folder: str = QUICK_START_FOLDER,
        concepts_folder: str = CONCEPTS_FOLDER,
    ) -> "ContentIndex":
        """Build index from documents supplied by a loader.

        Args:
            loader: Document loading capability
            quick_start_folder: Logical folder with quick start pages
            concepts_folder: Logical folder with concept pages

        Returns:
            ContentIndex over the loaded pages

        Raises:
            DocumentError: If a document has invalid front matter
        """
        quick_start_pages = [
            QuickStartPage.from_document(doc) for doc in loader.load(quick_start_folder)
        ]
        concept_pages = [ConceptPage.from_document(doc) for doc in loader.load(concepts_folder)]

        logger.info(
            f"Content index built: {len(quick_start_pages)} quick start pages, "
            f"{len(concept_pages)} concept pages",
        )
        return cls(quick_start_pages, concept_pages)

    @property
    def sorted_quick_start_pages(self) -> tuple[QuickStartPage, ...]:
        """Quick start pages in ascending order."""
        return self._sorted_quick_start_pages

    @property
    def concept_pages(self) -> tuple[ConceptPage, ...]:
        """Concept pages in loader order."""
        return self._concept_pages

    def get_quick_start_page(self, order: int) -> QuickStartPage | None:
        """Get quick start page by order.

        Returns:
            First page with the given order, None if not found
        """
        return next((page for page in self._quick_start_pages if page.order == order), None)

    def get_previous(self, order: int) -> QuickStartPage | None:
        """Get the quick start page that comes before the given order."""
        return self.get_quick_start_page(order - 1)

    def get_next(self, order: int) -> QuickStartPage | None:
        """Get the quick start page that comes after the given order."""
        return self.get_quick_start_page(order + 1)

    def get_pagination(self, order: int) -> Pagination:
        """Get previous and next pages for the given order."""
        return Pagination(previous=self.get_previous(order), next=self.get_next(order))

    def get_concept_page(self, concept_id: str) -> ConceptPage | None:
        """Get concept page by id.

        Returns:
            First page with the given id, None if not found
        """
        return next((page for page in self._concept_pages if page.id == concept_id), None)

    def related_concept_pages(self, ids: Sequence[str]) -> list[ConceptPage]:
        """Resolve concept ids to pages.

        Args:
            ids: Concept ids in the order they should be returned

        Returns:
            One page per id, in the same order as ids

        Raises:
            MissingConceptError: If any id has no matching page. Every
                missing id is reported; no partial result is returned.
        """
        pages: list[ConceptPage] = []
        missing: list[str] = []
        for concept_id in ids:
            page = self.get_concept_page(concept_id)
            if page is None:
                missing.append(concept_id)
            else:
                pages.append(page)

        if missing:
            raise MissingConceptError(missing)
        return pages

"""Error types for content loading and lookups."""

from collections.abc import Iterable


class GuidebookError(Exception):
    """Base class for Guidebook content errors."""


class DocumentError(GuidebookError, ValueError):
    """Document could not be loaded or its front matter is invalid."""


class MissingConceptError(GuidebookError, LookupError):
    """One or more concept ids have no matching concept page."""

    def __init__(self, missing_ids: Iterable[str]) -> None:
        self.missing_ids = tuple(missing_ids)
        joined = ", ".join(repr(i) for i in self.missing_ids)
        super().__init__(f"Concept page not found for id(s): {joined}")

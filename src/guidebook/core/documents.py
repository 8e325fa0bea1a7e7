"""Markdown documents with YAML front matter.

Documents are produced by a loader given a logical folder identifier.
Folder identifiers use "~/" as an alias for the content root, so
"~/pages/start" means the "pages/start" directory under the root.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

import yaml

from guidebook.errors import DocumentError

logger = logging.getLogger(__name__)

ROOT_ALIAS = "~/"

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n?---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


@dataclass(frozen=True)
class Document:
    """Markdown document with parsed front matter.

    The body is kept as raw markdown and is never rendered here.
    """

    front_matter: Mapping[str, object] = field(hash=False)
    content: str = field(repr=False)
    filename: Path
    href: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.front_matter, MappingProxyType):
            object.__setattr__(self, "front_matter", MappingProxyType(dict(self.front_matter)))


class DocumentLoader(Protocol):
    """Capability that loads every document in a logical folder."""

    def load(self, folder: str) -> list[Document]: ...


def parse_front_matter(text: str) -> tuple[dict[str, object], str]:
    """Split YAML front matter from a markdown body.

    Args:
        text: Full markdown file contents

    Returns:
        Tuple of (front matter mapping, body). The mapping is empty when the
        text has no front matter block.

    Raises:
        DocumentError: If the block is not valid YAML or not a mapping
    """
    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise DocumentError(f"Invalid front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DocumentError("Front matter must be a mapping")

    return {str(k): v for k, v in data.items()}, text[match.end():]


class MarkdownDocumentLoader:
    """Loads markdown documents from folders under a content root.

    Documents in a folder are returned in ascending filename order.
    """

    def __init__(self, root_dir: Path, pages_dir: str = "pages") -> None:
        """Initialize loader.

        Args:
            root_dir: Directory that "~/" refers to
            pages_dir: Pages directory relative to root_dir, used to derive hrefs
        """
        self._root_dir = root_dir
        self._pages_dir = root_dir / pages_dir

    @property
    def root_dir(self) -> Path:
        """Content root directory."""
        return self._root_dir

    def resolve_folder(self, folder: str) -> Path:
        """Resolve a logical folder identifier to a directory path."""
        if folder.startswith(ROOT_ALIAS):
            folder = folder[len(ROOT_ALIAS):]
        return self._root_dir / folder

    def load(self, folder: str) -> list[Document]:
        """Load all markdown documents directly inside a folder.

        Args:
            folder: Logical folder identifier (e.g., "~/pages/start")

        Returns:
            Documents sorted by filename

        Raises:
            DocumentError: If the folder is missing or a document is invalid
        """
        directory = self.resolve_folder(folder)
        if not directory.is_dir():
            raise DocumentError(f"Content folder not found: {directory}")

        documents = [self._load_file(path) for path in sorted(directory.glob("*.md"))]
        logger.info(f"Loaded {len(documents)} documents from {folder}")
        return documents

    def _load_file(self, path: Path) -> Document:
        logger.debug(f"Loading document {path}")
        try:
            # utf-8-sig drops a leading BOM so the front matter block still matches
            text = path.read_text(encoding="utf-8-sig")
            front_matter, content = parse_front_matter(text)
        except (DocumentError, OSError, UnicodeDecodeError) as e:
            raise DocumentError(f"{path}: {e}") from e

        return Document(
            front_matter=front_matter,
            content=content,
            filename=path,
            href=self._href_for(path),
        )

    def _href_for(self, path: Path) -> str | None:
        """Derive site URL from file location.

        "pages/start/intro.md" becomes "/start/intro" and index files
        collapse to their directory.
        """
        try:
            relative = path.relative_to(self._pages_dir).with_suffix("")
        except ValueError:
            return None

        if relative.name == "index":
            relative = relative.parent
        href = relative.as_posix()
        return "/" if href == "." else f"/{href}"

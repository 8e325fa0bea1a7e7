"""Shared test fixtures."""

from pathlib import Path

import pytest
from guidebook.config import Config, ContentConfig, ServerConfig
from guidebook.core.content import CONCEPTS_FOLDER, QUICK_START_FOLDER, ContentIndex
from guidebook.core.documents import Document


class InMemoryLoader:
    """Document loader backed by a folder -> documents mapping."""

    def __init__(self, folders: dict[str, list[Document]]) -> None:
        self.folders = folders
        self.calls: list[str] = []

    def load(self, folder: str) -> list[Document]:
        self.calls.append(folder)
        return list(self.folders.get(folder, []))


def make_document(name: str, **front_matter: object) -> Document:
    return Document(
        front_matter=front_matter,
        content=f"# {front_matter.get('title', name)}\n",
        filename=Path(f"{name}.md"),
        href=f"/{name}",
    )


def write_page(directory: Path, name: str, front_matter: str, body: str = "Body.") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.md"
    path.write_text(f"---\n{front_matter}---\n\n{body}\n", encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Create content root with quick start and concept pages.

    Filenames are chosen so loader order differs from page order.
    """
    root = tmp_path / "src"
    start = root / "pages" / "start"
    concepts = root / "pages" / "concepts"

    write_page(start, "a-run", "title: Run\norder: 3\n")
    write_page(start, "b-intro", "title: Intro\norder: 1\n")
    write_page(start, "c-setup", "title: Setup\norder: 2\n")

    write_page(
        concepts,
        "document",
        "title: Document\nid: document\nrelated:\n  - front-matter\n",
    )
    write_page(
        concepts,
        "front-matter",
        "title: Front Matter\nid: front-matter\nreadMore:\n  - https://yaml.org\n",
    )
    write_page(concepts, "broken", "title: Broken\nid: broken\nrelated:\n  - nowhere\n")
    return root


@pytest.fixture
def test_config(content_root: Path) -> Config:
    """Create a test configuration pointing at content_root."""
    return Config(
        server=ServerConfig(),
        content=ContentConfig(root_dir=content_root),
    )


@pytest.fixture
def loader() -> InMemoryLoader:
    """In-memory loader with the Intro/Setup/Run sequence stored out of order."""
    return InMemoryLoader(
        {
            QUICK_START_FOLDER: [
                make_document("setup", title="Setup", order=2),
                make_document("run", title="Run", order=3),
                make_document("intro", title="Intro", order=1),
            ],
            CONCEPTS_FOLDER: [
                make_document("b", title="Concept B", id="b"),
                make_document("a", title="Concept A", id="a", related=["b"]),
            ],
        },
    )


@pytest.fixture
def index(loader: InMemoryLoader) -> ContentIndex:
    return ContentIndex.load(loader)

"""Shared test fixtures."""

from pathlib import Path

import pytest

from docsift import Document


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a clean directory for each test."""
    return tmp_path


@pytest.fixture
def doc_tree(temp_dir: Path) -> Path:
    """Create a small nested tree of markdown and other files."""
    (temp_dir / "a").mkdir()
    (temp_dir / "b" / "deep").mkdir(parents=True)
    (temp_dir / "a" / "x.md").write_text("hello world")
    (temp_dir / "b" / "y.md").write_text("goodbye")
    (temp_dir / "b" / "deep" / "z.md").write_text("Hello again\nsecond line\n")
    (temp_dir / "b" / "notes.txt").write_text("hello from a text file")
    (temp_dir / "top.md").write_text("top level")
    return temp_dir


@pytest.fixture
def documents() -> list[Document]:
    """Documents matching the two-file scenario."""
    return [
        Document(path="a/x.md", content="hello world"),
        Document(path="b/y.md", content="goodbye"),
    ]

"""Document discovery and loading."""

import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from docsift._errors import LoadError

DEFAULT_SUFFIXES: tuple[str, ...] = (".md",)


@dataclass(frozen=True, slots=True)
class Document:
    """A text file captured at load time."""

    path: str
    content: str


def _raise_walk_error(error: OSError) -> None:
    raise LoadError(
        f"Cannot list directory {error.filename}: {error.strerror}",
        error.filename,
    ) from error


def _iter_matching_paths(root: str, suffixes: tuple[str, ...]) -> Iterator[str]:
    """
    Yield matching file paths in walk order.

    Each directory's files come in name order before its subdirectories
    are descended, also in name order. Symlinked directories are not
    followed; every other matching entry, dangling symlinks included, is
    yielded so that reading it can fail the load.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            if name.endswith(suffixes):
                yield os.path.join(dirpath, name)


def _read_document(path: str, encoding: str) -> Document:
    try:
        with open(path, encoding=encoding, errors="surrogateescape", newline="") as handle:
            content = handle.read()
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e.strerror or e}", path) from e
    except UnicodeDecodeError as e:
        raise LoadError(f"Cannot decode {path} as {encoding}: {e.reason}", path) from e
    except LookupError as e:
        raise LoadError(f"Unknown encoding {encoding!r}", path) from e
    return Document(path=path, content=content)


def load_documents(
    root: str | Path,
    suffixes: Sequence[str] = DEFAULT_SUFFIXES,
    encoding: str = "utf-8",
) -> list[Document]:
    """
    Load every file under root whose name ends with one of suffixes.

    Loading is fail-fast: the first unreadable directory or file aborts
    the whole load.

    Args:
        root: Directory to walk (depth-unbounded)
        suffixes: Case-sensitive filename suffixes to select, e.g. (".md",)
        encoding: Text encoding; undecodable bytes are kept via surrogateescape

    Returns:
        Documents in traversal order

    Raises:
        LoadError: If the root is not a directory or anything cannot be read
    """
    root_str = os.fspath(root)
    if not os.path.exists(root_str):
        raise LoadError(f"Root directory does not exist: {root_str}", root_str)
    if not os.path.isdir(root_str):
        raise LoadError(f"Root is not a directory: {root_str}", root_str)

    suffix_filter = tuple(suffixes)
    documents: list[Document] = []
    for path in _iter_matching_paths(root_str, suffix_filter):
        documents.append(_read_document(path, encoding))
        logger.debug("Loaded {}", path)

    logger.info("Loaded {} documents from {}", len(documents), root_str)
    return documents

"""Literal substring search over loaded documents."""

from collections.abc import Iterable

from docsift._store import Document


def matches(document: Document, term: str) -> bool:
    """Check whether term occurs in the document's path or content."""
    return term in document.path or term in document.content


def search_documents(documents: Iterable[Document], term: str) -> list[Document]:
    """
    Filter documents down to those containing term.

    Matching is case-sensitive and literal. Input order is preserved and
    the returned list holds the same Document objects, not copies. An
    empty term matches everything; callers decide whether to search.

    Args:
        documents: Documents to scan, in canonical order
        term: Substring to look for

    Returns:
        Matching documents in input order
    """
    return [doc for doc in documents if matches(doc, term)]

"""
Document filters applied while ranking.

A filter decides, per posting, whether a document takes part in a query.
All the accepted call forms of ``SearchServer.find_top_documents`` are
normalized to a :class:`DocumentFilter` by :func:`as_document_filter`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, Union

from search_server.document import DocumentStatus

Predicate = Callable[[int, DocumentStatus, int], bool]


class DocumentFilter(Protocol):
    """Protocol implemented by document filters."""

    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:  # pragma: no cover - interface definition
        ...


class StatusFilter:
    """Accepts documents whose status equals ``status`` exactly."""

    def __init__(self, status: DocumentStatus = DocumentStatus.ACTUAL):
        self.status = status

    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return status == self.status

    def __repr__(self) -> str:
        return f"StatusFilter({self.status})"


class PredicateFilter:
    """Wraps an arbitrary ``(document_id, status, rating) -> bool`` callable."""

    def __init__(self, predicate: Predicate):
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate).__name__}.")
        self.predicate = predicate

    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return bool(self.predicate(document_id, status, rating))

    def __repr__(self) -> str:
        return f"PredicateFilter({self.predicate!r})"


class AcceptAll:
    """Accepts every document."""

    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return True

    def __repr__(self) -> str:
        return "AcceptAll()"


FilterLike = Union[DocumentStatus, Predicate, DocumentFilter, None]


def as_document_filter(document_filter: FilterLike) -> DocumentFilter:
    """Normalize a status, predicate or ``None`` into a :class:`DocumentFilter`."""
    if document_filter is None:
        return AcceptAll()
    if isinstance(document_filter, DocumentStatus):
        return StatusFilter(document_filter)
    if isinstance(document_filter, (StatusFilter, PredicateFilter, AcceptAll)):
        return document_filter
    return PredicateFilter(document_filter)

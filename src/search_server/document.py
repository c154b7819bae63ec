"""Document records returned by the search server."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    """Lifecycle status attached to every indexed document."""

    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


@dataclass(frozen=True)
class Document:
    """
    A ranked search hit.

    Attributes:
        id (int): Caller-assigned document id.
        relevance (float): TF-IDF relevance of the document for the query.
        rating (int): Average rating computed when the document was added.
    """

    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Arithmetic mean of the ratings, truncated toward zero.

    Returns 0 for an empty sequence, so ``[2, 3, 4] -> 3`` and ``[-3, 8] -> 2``.
    """
    if len(ratings) == 0:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient

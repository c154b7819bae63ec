"""
Fixed-size pagination over ordered sequences.

Usage:
    for page in paginate(server.find_top_documents("fluffy cat"), 2):
        print(page)
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from numbers import Integral
from typing import Generic, TypeVar

T = TypeVar("T")


class Page(Generic[T]):
    """A contiguous window ``[start, stop)`` of a source sequence."""

    def __init__(self, items: Sequence[T], start: int, stop: int):
        self._items = items
        self.start = start
        self.stop = stop

    def __len__(self) -> int:
        return self.stop - self.start

    def __iter__(self) -> Iterator[T]:
        for index in range(self.start, self.stop):
            yield self._items[index]

    def __str__(self) -> str:
        return "".join(f"{{ {item} }}" for item in self)

    def __repr__(self) -> str:
        return f"Page(start={self.start}, stop={self.stop})"


class Paginator(Generic[T]):
    """
    Lazy, restartable sequence of pages.

    Every page holds ``page_size`` items except the last one, which holds the
    remainder. Pages are built on iteration, so each ``iter()`` starts over.
    """

    def __init__(self, items: Sequence[T], page_size: int):
        if isinstance(page_size, bool) or not isinstance(page_size, Integral) or page_size <= 0:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}.")
        self._items = items
        self.page_size = int(page_size)

    def __len__(self) -> int:
        return -(-len(self._items) // self.page_size)

    def __iter__(self) -> Iterator[Page[T]]:
        total = len(self._items)
        for start in range(0, total, self.page_size):
            yield Page(self._items, start, min(start + self.page_size, total))


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    """Split ``items`` into pages of ``page_size``."""
    return Paginator(items, page_size)

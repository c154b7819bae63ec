"""
Single-writer / multiple-reader access to a :class:`SearchServer`.

Readers run concurrently with each other and never alongside a writer.
Waiting writers block new readers so a steady read load cannot starve them.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from search_server.document import Document, DocumentStatus
from search_server.filters import FilterLike
from search_server.search_server import SearchServer

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Writer-preferring readers-writer lock built on a condition variable."""

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._condition:
            while self._writer_active or self._writers_waiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1
            self._writer_active = True
        try:
            yield
        finally:
            with self._condition:
                self._writer_active = False
                self._condition.notify_all()


class SynchronizedSearchServer:
    """Thread-safe facade delegating to a wrapped :class:`SearchServer`."""

    def __init__(self, server: SearchServer | None = None):
        self._server = server if server is not None else SearchServer()
        self._lock = ReadWriteLock()
        logger.debug("Synchronized search server over %d documents", len(self._server))

    def set_stop_words(self, text: str) -> None:
        with self._lock.write_locked():
            self._server.set_stop_words(text)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        with self._lock.write_locked():
            self._server.add_document(document_id, document, status, ratings)

    def find_top_documents(self, raw_query: str, document_filter: FilterLike = DocumentStatus.ACTUAL) -> list[Document]:
        with self._lock.read_locked():
            return self._server.find_top_documents(raw_query, document_filter)

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        with self._lock.read_locked():
            return self._server.match_document(raw_query, document_id)

    def get_document_count(self) -> int:
        with self._lock.read_locked():
            return self._server.get_document_count()

    def get_word_frequencies(self, document_id: int) -> dict[str, float]:
        with self._lock.read_locked():
            return self._server.get_word_frequencies(document_id)

"""
In-memory TF-IDF search server.

The server keeps an inverted index mapping each word to the term frequency it
has in every document containing it, together with a rating and a status per
document. Queries are ranked by classic TF-IDF:

    tf(w, d)  = count(w in d) / len(d)          (stop-words removed)
    idf(w)    = ln(N / df(w))
    rel(d, q) = sum(tf(w, d) * idf(w) for w in plus_words(q))

Documents containing any minus-word of the query are dropped from the result
regardless of the active filter.

Usage:
    from search_server import DocumentStatus, SearchServer

    server = SearchServer("and in on")
    server.add_document(0, "white cat and fancy collar", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
    for document in server.find_top_documents("fluffy groomed cat"):
        print(document)
"""

from __future__ import annotations

import logging
import math
import os
from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key

import numpy as np

from search_server.document import Document, DocumentStatus, compute_average_rating
from search_server.errors import DocumentNotFoundError, DuplicateDocumentIdError, InvalidQueryError
from search_server.filters import DocumentFilter, FilterLike, as_document_filter
from search_server.tokenizer import split_into_words, split_into_words_no_stop

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

# Maximum number of documents returned by a single query
DEFAULT_MAX_RESULT_DOCUMENT_COUNT = int(os.environ.get("SEARCH_SERVER_MAX_RESULTS", "5"))

# Relevances closer than this (absolute) are ordered by rating instead
DEFAULT_RELEVANCE_EPSILON = float(os.environ.get("SEARCH_SERVER_RELEVANCE_EPSILON", "1e-6"))


@dataclass(frozen=True)
class SearchParameters:
    """
    Ranking parameters.

    Attributes:
        max_result_document_count (int): Upper bound on the length of a result list.
        relevance_epsilon (float): Absolute tolerance under which two relevances tie.
    """

    max_result_document_count: int = DEFAULT_MAX_RESULT_DOCUMENT_COUNT
    relevance_epsilon: float = DEFAULT_RELEVANCE_EPSILON

    def __post_init__(self) -> None:
        if isinstance(self.max_result_document_count, bool) or not isinstance(self.max_result_document_count, int):
            raise ValueError("max_result_document_count must be an integer.")
        if self.max_result_document_count <= 0:
            raise ValueError("max_result_document_count must be positive.")
        if math.isnan(self.relevance_epsilon) or self.relevance_epsilon < 0:
            raise ValueError("relevance_epsilon must be non-negative.")


# =============================================================================
# Query
# =============================================================================


@dataclass(frozen=True)
class Query:
    """Parsed query: words that add relevance and words that veto a document."""

    plus_words: frozenset[str] = field(default_factory=frozenset)
    minus_words: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class _DocumentData:
    rating: int
    status: DocumentStatus


# =============================================================================
# Search Server
# =============================================================================


class SearchServer:
    """
    Inverted index over short text documents with TF-IDF ranking.

    Args:
        stop_words (str | Iterable[str] | None): Initial stop-words, either as a
            space separated string or as an iterable of words.
        max_result_document_count (int | None): Overrides the result cap.
        relevance_epsilon (float | None): Overrides the relevance tie tolerance.

    The server is single-threaded; see :mod:`search_server.locking` for a
    wrapper that serializes writers against readers.
    """

    def __init__(
        self,
        stop_words: str | Iterable[str] | None = None,
        *,
        max_result_document_count: int | None = None,
        relevance_epsilon: float | None = None,
    ):
        overrides = {}
        if max_result_document_count is not None:
            overrides["max_result_document_count"] = max_result_document_count
        if relevance_epsilon is not None:
            overrides["relevance_epsilon"] = relevance_epsilon
        self.parameters = SearchParameters(**overrides)

        self._stop_words: set[str] = set()
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._document_to_word_freqs: dict[int, dict[str, float]] = {}
        self._documents: dict[int, _DocumentData] = {}

        if stop_words is not None:
            if isinstance(stop_words, str):
                self.set_stop_words(stop_words)
            else:
                self._add_stop_words(stop_words)

    # ----- Container protocol -----

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._documents))

    @property
    def stop_words(self) -> frozenset[str]:
        return frozenset(self._stop_words)

    # ----- Mutation -----

    def set_stop_words(self, text: str) -> None:
        """Add every space separated word of ``text`` to the stop-word set."""
        self._add_stop_words(split_into_words(text))

    def _add_stop_words(self, words: Iterable[str]) -> None:
        before = len(self._stop_words)
        for word in words:
            if word:
                self._stop_words.add(word)
        logger.debug("Stop-words: %d added, %d total", len(self._stop_words) - before, len(self._stop_words))

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        """
        Index a document.

        Each non stop-word adds ``1 / word_count`` to its term frequency in the
        document. A document made only of stop-words is registered with its
        rating and status but contributes nothing to the index.

        Raises:
            DuplicateDocumentIdError: If ``document_id`` has already been added.
        """
        if document_id in self._documents:
            raise DuplicateDocumentIdError(document_id)

        words = split_into_words_no_stop(document, self._stop_words)
        word_freqs: dict[str, float] = {}
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                word_freqs[word] = word_freqs.get(word, 0.0) + inv_word_count
            for word, term_freq in word_freqs.items():
                self._word_to_document_freqs.setdefault(word, {})[document_id] = term_freq

        self._document_to_word_freqs[document_id] = word_freqs
        self._documents[document_id] = _DocumentData(compute_average_rating(ratings), status)
        logger.debug(
            "Added document %d (%s): %d words, %d unique",
            document_id,
            status.name,
            len(words),
            len(word_freqs),
        )

    # ----- Queries -----

    def get_document_count(self) -> int:
        return len(self._documents)

    def get_word_frequencies(self, document_id: int) -> dict[str, float]:
        """Term frequencies of a document as a fresh ``{word: tf}`` dict."""
        if document_id not in self._documents:
            raise DocumentNotFoundError(document_id)
        return dict(self._document_to_word_freqs[document_id])

    def find_top_documents(self, raw_query: str, document_filter: FilterLike = DocumentStatus.ACTUAL) -> list[Document]:
        """
        Rank documents for a query.

        Args:
            raw_query: Space separated words; a word prefixed by ``-`` is a minus-word.
            document_filter: A :class:`DocumentStatus` to match exactly, a
                ``(document_id, status, rating) -> bool`` callable, or ``None``
                to accept every document. Defaults to ``DocumentStatus.ACTUAL``.

        Returns:
            At most ``max_result_document_count`` documents, by relevance
            descending and by rating descending among near-equal relevances.

        Raises:
            InvalidQueryError: If the query holds a malformed minus-word.
        """
        query = self.parse_query(raw_query)
        matched_documents = self._find_all_documents(query, as_document_filter(document_filter))

        epsilon = self.parameters.relevance_epsilon

        def compare(lhs: Document, rhs: Document) -> int:
            if abs(lhs.relevance - rhs.relevance) < epsilon:
                return rhs.rating - lhs.rating
            return -1 if lhs.relevance > rhs.relevance else 1

        matched_documents.sort(key=cmp_to_key(compare))
        del matched_documents[self.parameters.max_result_document_count :]

        logger.debug(
            "Query %r: %d plus-words, %d minus-words, %d results",
            raw_query,
            len(query.plus_words),
            len(query.minus_words),
            len(matched_documents),
        )
        return matched_documents

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """
        Plus-words of the query found in a document, with the document status.

        The word list is sorted and is empty when the document holds any
        minus-word of the query.

        Raises:
            DocumentNotFoundError: If ``document_id`` was never added.
            InvalidQueryError: If the query holds a malformed minus-word.
        """
        if document_id not in self._documents:
            raise DocumentNotFoundError(document_id)
        query = self.parse_query(raw_query)
        status = self._documents[document_id].status
        word_freqs = self._document_to_word_freqs[document_id]

        if any(word in word_freqs for word in query.minus_words):
            return [], status
        return sorted(word for word in query.plus_words if word in word_freqs), status

    # ----- Query parsing -----

    def is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def parse_query(self, raw_query: str) -> Query:
        """
        Split a raw query into plus-words and minus-words.

        Stop-words are dropped from both sets. A bare ``-`` or a word starting
        with ``--`` is rejected.

        Raises:
            InvalidQueryError: On a malformed minus-word.
        """
        plus_words: set[str] = set()
        minus_words: set[str] = set()
        for token in split_into_words(raw_query):
            word, is_minus = self._parse_query_word(token)
            if self.is_stop_word(word):
                continue
            if is_minus:
                minus_words.add(word)
            else:
                plus_words.add(word)
        return Query(frozenset(plus_words), frozenset(minus_words))

    @staticmethod
    def _parse_query_word(token: str) -> tuple[str, bool]:
        if not token.startswith("-"):
            return token, False
        word = token[1:]
        if not word:
            raise InvalidQueryError(token, "no word after the minus sign")
        if word.startswith("-"):
            raise InvalidQueryError(token, "more than one minus sign")
        return word, True

    # ----- Ranking -----

    def _inverse_document_freq(self, word: str) -> float:
        # Only called for indexed words, so the posting list is non-empty
        return math.log(self.get_document_count() / len(self._word_to_document_freqs[word]))

    def _find_all_documents(self, query: Query, document_filter: DocumentFilter) -> list[Document]:
        document_to_relevance: dict[int, float] = defaultdict(float)
        for word in query.plus_words:
            postings = self._word_to_document_freqs.get(word)
            if not postings:
                continue
            idf = self._inverse_document_freq(word)
            # Ids stay Python ints, only the term frequencies are vectorized
            weights = np.fromiter(postings.values(), dtype=np.float64, count=len(postings)) * idf
            for document_id, weight in zip(postings, weights.tolist()):
                data = self._documents[document_id]
                if document_filter(document_id, data.status, data.rating):
                    document_to_relevance[document_id] += weight

        # Linear in the size of each minus-word's posting list
        for word in query.minus_words:
            for document_id in self._word_to_document_freqs.get(word, ()):
                document_to_relevance.pop(document_id, None)

        return [
            Document(document_id, relevance, self._documents[document_id].rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

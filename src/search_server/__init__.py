"""
Minimal in-memory full-text search engine.

- tokenizer: whitespace splitting and stop-word removal
- search_server: inverted index and TF-IDF ranking
- filters: status and predicate document filters
- paginator: fixed-size result pages
- locking: single-writer / multiple-reader wrapper
"""

from search_server.document import Document, DocumentStatus, compute_average_rating
from search_server.errors import (
    DocumentNotFoundError,
    DuplicateDocumentIdError,
    InvalidQueryError,
    SearchServerError,
)
from search_server.filters import AcceptAll, DocumentFilter, PredicateFilter, StatusFilter
from search_server.locking import ReadWriteLock, SynchronizedSearchServer
from search_server.paginator import Page, Paginator, paginate
from search_server.search_server import Query, SearchParameters, SearchServer
from search_server.tokenizer import split_into_words, split_into_words_no_stop

__all__ = [
    "AcceptAll",
    "Document",
    "DocumentFilter",
    "DocumentNotFoundError",
    "DocumentStatus",
    "DuplicateDocumentIdError",
    "InvalidQueryError",
    "Page",
    "Paginator",
    "PredicateFilter",
    "Query",
    "ReadWriteLock",
    "SearchParameters",
    "SearchServer",
    "SearchServerError",
    "StatusFilter",
    "SynchronizedSearchServer",
    "compute_average_rating",
    "paginate",
    "split_into_words",
    "split_into_words_no_stop",
]

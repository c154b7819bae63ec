"""
Command line driver for the search server.

Reads a corpus and a query from stdin, one logical field per line:

    <stop words>
    <document count n>
    <document 0>
    ...
    <document n-1>
    <query>

Documents get ids ``0..n-1``, status ACTUAL and no ratings.

Run with:
    search-server < input.txt
    search-server --status banned --page-size 2 < input.txt
    search-server --demo
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from search_server.document import Document, DocumentStatus
from search_server.errors import SearchServerError
from search_server.paginator import paginate
from search_server.search_server import DEFAULT_MAX_RESULT_DOCUMENT_COUNT, SearchServer

logger = logging.getLogger(__name__)

DEMO_STOP_WORDS = "и в на"
DEMO_DOCUMENTS: list[tuple[int, str, DocumentStatus, list[int]]] = [
    (0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3]),
    (1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7]),
    (2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1]),
    (3, "ухоженный скворец евгений", DocumentStatus.BANNED, [9]),
]
DEMO_QUERY = "пушистый ухоженный кот"


def read_line(stream: TextIO) -> str:
    """Read one line without its trailing newline; empty string at EOF."""
    return stream.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO) -> int:
    line = read_line(stream)
    try:
        return int(line.strip())
    except ValueError:
        raise ValueError(f"Expected a document count, got {line!r}.") from None


def load_server(stream: TextIO, max_results: int | None = None) -> tuple[SearchServer, str]:
    """Build a server from the line-based input format and return it with the query."""
    server = SearchServer(max_result_document_count=max_results)
    server.set_stop_words(read_line(stream))
    document_count = read_line_with_number(stream)
    for document_id in range(document_count):
        server.add_document(document_id, read_line(stream), DocumentStatus.ACTUAL, [])
    return server, read_line(stream)


def print_documents(documents: Sequence[Document], page_size: int | None = None) -> None:
    if page_size is None:
        for document in documents:
            print(document)
        return
    for page in paginate(documents, page_size):
        print(page)
        print("Page break")


def run_demo(max_results: int | None = None) -> None:
    server = SearchServer(DEMO_STOP_WORDS, max_result_document_count=max_results)
    for document_id, text, status, ratings in DEMO_DOCUMENTS:
        server.add_document(document_id, text, status, ratings)

    print("ACTUAL by default:")
    print_documents(server.find_top_documents(DEMO_QUERY))
    print("BANNED:")
    print_documents(server.find_top_documents(DEMO_QUERY, DocumentStatus.BANNED))
    print("Even ids:")
    print_documents(server.find_top_documents(DEMO_QUERY, lambda document_id, status, rating: document_id % 2 == 0))


def _parse_status(value: str) -> DocumentStatus:
    try:
        return DocumentStatus[value.upper()]
    except KeyError:
        choices = ", ".join(status.name.lower() for status in DocumentStatus)
        raise argparse.ArgumentTypeError(f"invalid status {value!r} (choose from {choices})") from None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="search-server",
        description="Rank documents read from stdin against a keyword query.",
    )
    parser.add_argument("--demo", action="store_true", help="Run the built-in demonstration corpus.")
    parser.add_argument(
        "--status",
        type=_parse_status,
        default=DocumentStatus.ACTUAL,
        help="Only return documents with this status (default: actual).",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help=f"Maximum number of results (default: {DEFAULT_MAX_RESULT_DOCUMENT_COUNT}).",
    )
    parser.add_argument("--page-size", type=int, default=None, help="Group results into pages of this size.")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.demo:
            run_demo(args.max_results)
            return 0
        server, query = load_server(sys.stdin, args.max_results)
        logger.info("Loaded %d documents", server.get_document_count())
        print_documents(server.find_top_documents(query, args.status), args.page_size)
    except (SearchServerError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

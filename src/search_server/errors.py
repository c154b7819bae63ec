"""Exceptions raised by the search server."""


class SearchServerError(Exception):
    """Base class for all search server errors."""


class DuplicateDocumentIdError(SearchServerError, ValueError):
    """A document with the same id has already been added."""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(f"Document {document_id} has already been added.")


class DocumentNotFoundError(SearchServerError, KeyError):
    """The requested document id was never added."""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(document_id)

    def __str__(self) -> str:
        return f"Document {self.document_id} not found."


class InvalidQueryError(SearchServerError, ValueError):
    """A query token cannot be parsed into a plus-word or a minus-word."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid query word {token!r}: {reason}.")

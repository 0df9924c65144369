"""
Exceptions raised by the catalog store.

Each error carries a machine-readable ``code`` that the GraphQL layer
copies into the ``extensions`` of the error it returns to the client.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog errors."""

    code = "CATALOG_ERROR"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class BookNotFoundError(CatalogError):
    """No book with the requested id exists."""

    code = "NOT_FOUND"

    def __init__(self, book_id: str) -> None:
        super().__init__("Book not found")
        self.book_id = book_id


class InvalidBookInputError(CatalogError):
    """Input for a create or update was rejected."""

    code = "INVALID_INPUT"

    def __init__(self, message: str, code: str = "INVALID_INPUT", field: Optional[str] = None) -> None:
        super().__init__(message, code=code)
        self.field = field

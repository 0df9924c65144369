"""
In-memory data store for the catalogue API.

``BookStore`` owns the ordered list of ``Book`` records for the lifetime
of the process. Nothing is persisted; a restart brings back the sample
data and nothing else. The application factory creates one store and
hands it to the GraphQL layer, and tests create a fresh store each.

Lookups are linear scans over the list. All access goes through a
``threading.Lock`` so that overlapping requests see a consistent list,
and identifiers come from a counter owned by the store so that they are
never reused after a deletion.
"""

from __future__ import annotations

import datetime
import itertools
import logging
import threading
from typing import Iterable, List, Optional

from .errors import BookNotFoundError, InvalidBookInputError
from .schemas import Book, BookCreate, BookUpdate


logger = logging.getLogger(__name__)

# Loaded into a new store when ``seed=True``.
SAMPLE_BOOKS = [
    {
        "id": "1",
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "year": 1925,
        "genre": "Novel",
    },
    {
        "id": "2",
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "year": 1960,
        "genre": "Southern Gothic",
    },
]

REQUIRED_FIELDS = ("title", "author")


def _norm(s: Optional[str]) -> str:
    """Lowercase a string for case-insensitive comparison.

    ``None`` becomes an empty string. Whitespace is kept so that a
    query such as ``" lee"`` only matches where a space precedes it.
    """
    return (s or "").lower()


def current_year() -> int:
    return datetime.date.today().year


def validate_year(year: Optional[int]) -> None:
    """Check that ``year`` lies between 0 and next year, inclusive.

    Parameters
    ----------
    year : Optional[int]
        The publication year to check. ``None`` means no year and is
        always accepted.

    Raises
    ------
    InvalidBookInputError
        With code ``YEAR_OUT_OF_RANGE`` when the year is outside the
        accepted range.
    """
    if year is None:
        return
    upper = current_year() + 1
    if year < 0 or year > upper:
        raise InvalidBookInputError(
            f"Year must be between 0 and {upper}, got {year}",
            code="YEAR_OUT_OF_RANGE",
            field="year",
        )


class BookStore:
    """Ordered, in-memory collection of books."""

    def __init__(self, books: Optional[Iterable[Book]] = None, seed: bool = False) -> None:
        self._lock = threading.Lock()
        self._books: List[Book] = []
        if seed:
            self._books.extend(Book(**entry) for entry in SAMPLE_BOOKS)
        if books is not None:
            self._books.extend(books)
        seen = set()
        for book in self._books:
            if book.id in seen:
                raise ValueError(f"Duplicate book id: {book.id}")
            seen.add(book.id)
        # Continue after the largest numeric id already present.
        start = max((int(b.id) for b in self._books if b.id.isdigit()), default=0) + 1
        self._ids = itertools.count(start)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: str) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    def list_books(self) -> List[Book]:
        """Return every book in insertion order.

        The returned list is a copy; changing it does not change the
        store.
        """
        with self._lock:
            return list(self._books)

    def get_book(self, book_id: str) -> Book:
        """Return the book with the given id.

        Raises
        ------
        BookNotFoundError
            When no book has this id.
        """
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                raise BookNotFoundError(book_id)
            return self._books[index]

    def search_books(self, query: str) -> List[Book]:
        """Return books whose title or author contains ``query``.

        Matching is case-insensitive and keeps catalog order. An empty
        query matches every book; no match gives an empty list.
        """
        nq = _norm(query)
        with self._lock:
            return [
                b for b in self._books
                if nq in _norm(b.title) or nq in _norm(b.author)
            ]

    def add_book(self, data: BookCreate) -> Book:
        """Validate ``data``, assign an id and append the new book.

        Raises
        ------
        InvalidBookInputError
            When ``year`` is out of range.
        """
        validate_year(data.year)
        with self._lock:
            book = Book(id=str(next(self._ids)), **data.model_dump())
            self._books.append(book)
        logger.info("Added book %s (%r)", book.id, book.title)
        return book

    def update_book(self, book_id: str, data: BookUpdate) -> Optional[Book]:
        """Overwrite the supplied fields of an existing book.

        Only fields present in ``data.model_fields_set`` are applied;
        everything else keeps its previous value. Returns the updated
        book, or ``None`` when no book has this id, whatever the input
        holds. Unlike ``get_book`` a missing id is not an error here.

        Raises
        ------
        InvalidBookInputError
            When ``year`` is out of range, or ``title``/``author`` is
            explicitly set to ``None``.
        """
        changes = data.model_dump(exclude_unset=True)
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None
            for name in REQUIRED_FIELDS:
                if name in changes and changes[name] is None:
                    raise InvalidBookInputError(
                        f"Field '{name}' cannot be null",
                        code="REQUIRED_FIELD",
                        field=name,
                    )
            if "year" in changes:
                validate_year(changes["year"])
            updated = self._books[index].model_copy(update=changes)
            self._books[index] = updated
        logger.info("Updated book %s: %s", book_id, sorted(changes))
        return updated

    def delete_book(self, book_id: str) -> bool:
        """Remove a book by id.

        Returns ``True`` if a book was removed, ``False`` if the id was
        not present (the catalog is then left unchanged).
        """
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return False
            del self._books[index]
        logger.info("Deleted book %s", book_id)
        return True

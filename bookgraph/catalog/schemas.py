"""
Pydantic schema definitions for the catalog module.

The ``Book`` model is the record held by the store. ``BookCreate``
carries the fields a client may send when adding a book; ``title`` and
``author`` are required there. ``BookUpdate`` makes every field
optional so that an update can name only the fields it wants to change.
Which fields were actually supplied is read from ``model_fields_set``,
so an explicit ``None`` (clear the value) is different from an omitted
field (keep the value).
"""

from typing import Optional

from pydantic import BaseModel


class Book(BaseModel):
    """A single catalog entry.

    ``id`` is assigned by the store and never taken from client input.
    ``year`` and ``genre`` are optional and default to ``None``.
    """

    id: str
    title: str
    author: str
    year: Optional[int] = None
    genre: Optional[str] = None


class BookCreate(BaseModel):
    """Fields accepted when adding a book."""

    title: str
    author: str
    year: Optional[int] = None
    genre: Optional[str] = None


class BookUpdate(BaseModel):
    """Partial set of fields for updating a book.

    There is no ``id`` field here: identifiers are immutable.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None

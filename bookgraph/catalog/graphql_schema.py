"""
GraphQL schema for the catalogue.

Query root:
- books                     : every book, in catalog order
- book(id)                  : one book, NOT_FOUND error when missing
- searchBooks(query)        : books whose title or author contains query

Mutation root:
- addBook(input)            : create a book, returns it
- updateBook(id, input)     : merge supplied fields, null when missing
- deleteBook(id)            : true when removed, false when missing

Resolvers read the ``BookStore`` from ``info.context["store"]``; the
router module puts it there. Store errors are turned into GraphQL
errors whose ``extensions.code`` carries the error code.
"""

import dataclasses
import logging
from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from .errors import CatalogError
from .schemas import Book, BookCreate, BookUpdate
from .store import BookStore


logger = logging.getLogger(__name__)


@strawberry.type(name="Book", description="A book in the catalog.")
class BookType:
    id: strawberry.ID
    title: str
    author: str
    year: Optional[int] = None
    genre: Optional[str] = None

    @classmethod
    def from_model(cls, book: Book) -> "BookType":
        return cls(
            id=strawberry.ID(book.id),
            title=book.title,
            author=book.author,
            year=book.year,
            genre=book.genre,
        )


@strawberry.input(description="Fields for a new book.")
class BookInput:
    title: str
    author: str
    year: Optional[int] = None
    genre: Optional[str] = None


@strawberry.input(description="Fields to change on an existing book. Omitted fields are kept.")
class BookUpdateInput:
    title: Optional[str] = strawberry.UNSET
    author: Optional[str] = strawberry.UNSET
    year: Optional[int] = strawberry.UNSET
    genre: Optional[str] = strawberry.UNSET


def _store(info: Info) -> BookStore:
    return info.context["store"]


def _to_graphql_error(exc: CatalogError) -> GraphQLError:
    logger.warning("%s: %s", exc.code, exc)
    return GraphQLError(str(exc), extensions={"code": exc.code})


def _supplied_fields(data: BookUpdateInput) -> dict:
    """Return the input fields the client actually sent."""
    return {
        f.name: getattr(data, f.name)
        for f in dataclasses.fields(data)
        if getattr(data, f.name) is not strawberry.UNSET
    }


@strawberry.type
class Query:
    @strawberry.field(description="All books in catalog order.")
    def books(self, info: Info) -> List[BookType]:
        return [BookType.from_model(b) for b in _store(info).list_books()]

    @strawberry.field(description="A single book by id.")
    def book(self, info: Info, id: strawberry.ID) -> Optional[BookType]:
        try:
            return BookType.from_model(_store(info).get_book(str(id)))
        except CatalogError as exc:
            raise _to_graphql_error(exc) from exc

    @strawberry.field(description="Books whose title or author contains the query, ignoring case.")
    def search_books(self, info: Info, query: str) -> List[BookType]:
        return [BookType.from_model(b) for b in _store(info).search_books(query)]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Add a book to the catalog.")
    def add_book(self, info: Info, input: BookInput) -> BookType:
        data = BookCreate(
            title=input.title,
            author=input.author,
            year=input.year,
            genre=input.genre,
        )
        try:
            return BookType.from_model(_store(info).add_book(data))
        except CatalogError as exc:
            raise _to_graphql_error(exc) from exc

    @strawberry.mutation(description="Update a book. Returns null when the id does not exist.")
    def update_book(self, info: Info, id: strawberry.ID, input: BookUpdateInput) -> Optional[BookType]:
        data = BookUpdate(**_supplied_fields(input))
        try:
            book = _store(info).update_book(str(id), data)
        except CatalogError as exc:
            raise _to_graphql_error(exc) from exc
        if book is None:
            return None
        return BookType.from_model(book)

    @strawberry.mutation(description="Delete a book. Returns false when the id does not exist.")
    def delete_book(self, info: Info, id: strawberry.ID) -> bool:
        return _store(info).delete_book(str(id))


schema = strawberry.Schema(query=Query, mutation=Mutation)

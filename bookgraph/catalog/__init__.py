"""
Catalog package for the book catalog API.

This package holds the in-memory store of books, the pydantic schemas
for its records and inputs, and the GraphQL schema and router that
expose the store over HTTP. Queries list, fetch and search books;
mutations add, update and delete them.
"""

from .errors import BookNotFoundError, CatalogError, InvalidBookInputError  # noqa: F401
from .router import create_graphql_router  # noqa: F401
from .store import BookStore  # noqa: F401

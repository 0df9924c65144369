"""Book catalog GraphQL API: an in-memory catalog of books served over FastAPI."""

"""Shared fixtures: a fresh seeded store and an app/client bound to it."""
import pytest
from fastapi.testclient import TestClient

from bookgraph.catalog import BookStore
from bookgraph.config import Settings
from bookgraph.main import create_app


@pytest.fixture
def store():
    return BookStore(seed=True)


@pytest.fixture
def client(store):
    app = create_app(Settings(), store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def gql(client):
    """POST a GraphQL document and return the decoded response body."""

    def _run(query, variables=None):
        resp = client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert resp.status_code == 200
        return resp.json()

    return _run

"""Test the GraphQL endpoint end to end."""
import datetime

from fastapi.testclient import TestClient

from bookgraph.config import Settings
from bookgraph.main import create_app


BOOK_FIELDS = "id title author year genre"


def test_health_check(client):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["books"] == 2
    assert body["graphql"] == "/graphql"


def test_books_query(gql):
    result = gql(f"{{ books {{ {BOOK_FIELDS} }} }}")
    assert "errors" not in result
    assert result["data"]["books"] == [
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


def test_book_query(gql):
    result = gql('query ($id: ID!) { book(id: $id) { title } }', {"id": "2"})
    assert result["data"]["book"] == {"title": "To Kill a Mockingbird"}


def test_book_not_found_is_error(gql):
    result = gql('{ book(id: "42") { id } }')
    assert result["data"]["book"] is None
    [error] = result["errors"]
    assert error["message"] == "Book not found"
    assert error["extensions"]["code"] == "NOT_FOUND"
    assert error["path"] == ["book"]


def test_search_books(gql):
    result = gql('{ searchBooks(query: "lee") { id title } }')
    assert result["data"]["searchBooks"] == [{"id": "2", "title": "To Kill a Mockingbird"}]

    result = gql('{ searchBooks(query: "GATSBY") { id } }')
    assert result["data"]["searchBooks"] == [{"id": "1"}]

    result = gql('{ searchBooks(query: "") { id } }')
    assert [b["id"] for b in result["data"]["searchBooks"]] == ["1", "2"]


def test_search_requires_query_argument(gql):
    result = gql("{ searchBooks { id } }")
    assert result["data"] is None
    assert result["errors"]


def test_add_book(gql, store):
    result = gql(
        f"mutation ($input: BookInput!) {{ addBook(input: $input) {{ {BOOK_FIELDS} }} }}",
        {"input": {"title": "Beloved", "author": "Toni Morrison", "year": 1987}},
    )
    assert "errors" not in result
    book = result["data"]["addBook"]
    assert book["id"] == "3"
    assert book["title"] == "Beloved"
    assert book["genre"] is None
    assert len(store) == 3


def test_add_book_requires_title_and_author(gql, store):
    result = gql('mutation { addBook(input: {title: "Only a title"}) { id } }')
    assert result["errors"]
    assert len(store) == 2


def test_add_book_year_out_of_range(gql, store):
    year = datetime.date.today().year + 2
    result = gql(
        "mutation ($input: BookInput!) { addBook(input: $input) { id } }",
        {"input": {"title": "X", "author": "Y", "year": year}},
    )
    assert result["data"] is None
    [error] = result["errors"]
    assert error["extensions"]["code"] == "YEAR_OUT_OF_RANGE"
    assert len(store) == 2


def test_update_book_merges_fields(gql):
    result = gql(
        f'mutation {{ updateBook(id: "1", input: {{genre: "Tragedy"}}) {{ {BOOK_FIELDS} }} }}'
    )
    assert result["data"]["updateBook"] == {
        "id": "1",
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "year": 1925,
        "genre": "Tragedy",
    }


def test_update_book_null_clears_field(gql):
    result = gql('mutation { updateBook(id: "2", input: {year: null}) { year genre } }')
    assert result["data"]["updateBook"] == {"year": None, "genre": "Southern Gothic"}


def test_update_book_null_title_rejected(gql, store):
    result = gql('mutation { updateBook(id: "2", input: {title: null}) { id } }')
    [error] = result["errors"]
    assert error["extensions"]["code"] == "REQUIRED_FIELD"
    assert store.get_book("2").title == "To Kill a Mockingbird"


def test_update_missing_book_returns_null(gql):
    result = gql('mutation { updateBook(id: "42", input: {title: "Z"}) { id } }')
    assert "errors" not in result
    assert result["data"]["updateBook"] is None


def test_update_missing_book_with_invalid_input_returns_null(gql):
    result = gql('mutation { updateBook(id: "42", input: {title: null}) { id } }')
    assert "errors" not in result
    assert result["data"]["updateBook"] is None

    result = gql('mutation { updateBook(id: "42", input: {year: 99999}) { id } }')
    assert "errors" not in result
    assert result["data"]["updateBook"] is None


def test_delete_book(gql):
    result = gql('mutation { deleteBook(id: "1") }')
    assert result["data"]["deleteBook"] is True

    result = gql('{ book(id: "1") { id } }')
    assert result["errors"][0]["extensions"]["code"] == "NOT_FOUND"

    result = gql('mutation { deleteBook(id: "1") }')
    assert result["data"]["deleteBook"] is False


def test_search_then_delete_flow(gql):
    result = gql('{ searchBooks(query: "lee") { id title author year } }')
    assert result["data"]["searchBooks"] == [
        {"id": "2", "title": "To Kill a Mockingbird", "author": "Harper Lee", "year": 1960}
    ]
    assert gql('mutation { deleteBook(id: "1") }')["data"]["deleteBook"] is True
    assert gql('{ book(id: "1") { id } }')["errors"][0]["extensions"]["code"] == "NOT_FOUND"
    assert [b["id"] for b in gql("{ books { id } }")["data"]["books"]] == ["2"]


def test_graphiql_served_to_browsers(client):
    resp = client.get("/graphql", headers={"Accept": "text/html"})
    assert resp.status_code == 200
    assert "graphiql" in resp.text.lower()


def test_custom_path_and_unseeded_store(monkeypatch):
    monkeypatch.setenv("GRAPHQL_PATH", "/api/graphql")
    monkeypatch.setenv("SEED_SAMPLE_BOOKS", "false")
    app = create_app(Settings())
    with TestClient(app) as c:
        resp = c.post("/api/graphql", json={"query": "{ books { id } }"})
    assert resp.json()["data"]["books"] == []

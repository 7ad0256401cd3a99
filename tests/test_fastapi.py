# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Tests for the FastAPI integration."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from flux.errors import MissingRequestParameterError
from flux.filters import ArrayDataProvider, Pagination, TransformFilter
from flux.middleware import pagination_headers, transform_action
from flux.transformer import register_transformer

from entries import ENTRIES, EntryTransformer


def create_app() -> FastAPI:
    entries_filter = TransformFilter(actions={"view": EntryTransformer, "*": "entry"})
    app = FastAPI()

    @app.api_route("/entries", methods=["GET", "HEAD"])
    @transform_action(entries_filter)
    async def list_entries(request: Request, page: int = 1):
        return ArrayDataProvider(ENTRIES, Pagination(page=page, page_size=2))

    @app.get("/entries/{index}")
    @transform_action(entries_filter, action_id="view")
    def view_entry(index: int, request: Request):
        return ENTRIES[index]

    @app.get("/raw")
    @transform_action(TransformFilter())
    def raw(request: Request):
        return {"untouched": True}

    return app


@pytest.fixture
def client() -> TestClient:
    """Test client with the "entry" handle registered."""
    register_transformer("entry", {"class": EntryTransformer, "with_body": False})
    return TestClient(create_app())


class TestTransformAction:
    """Endpoints decorated with transform_action."""

    def test_collection_with_pagination_headers(self, client):
        response = client.get("/entries")
        assert response.status_code == 200
        assert response.json() == {
            "data": [{"id": 10, "title": "Hello"}, {"id": 11, "title": "Again"}],
        }
        assert response.headers["X-Pagination-Total-Count"] == "3"
        assert response.headers["X-Pagination-Page-Count"] == "2"
        assert response.headers["X-Pagination-Current-Page"] == "1"
        assert response.headers["X-Pagination-Per-Page"] == "2"

    def test_second_page_with_fields(self, client):
        response = client.get("/entries", params={"page": 2, "fields": "id"})
        assert response.json() == {"data": [{"id": 12}]}
        assert response.headers["X-Pagination-Current-Page"] == "2"

    def test_single_item_with_includes(self, client):
        response = client.get("/entries/1", params={"includes": "author", "excludes": "body"})
        assert response.status_code == 200
        assert response.json() == {
            "id": 11,
            "title": "Again",
            "author": {"id": 2, "name": "Bob", "email": "bob@example.com"},
        }

    def test_head_has_no_body(self, client):
        response = client.head("/entries")
        assert response.status_code == 200
        # Servers drop HEAD bodies; the filter itself returns None
        assert response.content in (b"", b"null")

    def test_no_transformer_passes_through(self, client):
        assert client.get("/raw").json() == {"untouched": True}

    def test_endpoint_without_request_rejected(self):
        with pytest.raises(MissingRequestParameterError):

            @transform_action(TransformFilter())
            def no_request():
                return {}


class TestPaginationHeaders:
    def test_unpaginated_provider(self):
        assert pagination_headers(ArrayDataProvider(ENTRIES)) == {}

    def test_empty_provider_has_one_page(self):
        headers = pagination_headers(ArrayDataProvider([], Pagination(page_size=10)))
        assert headers["X-Pagination-Total-Count"] == "0"
        assert headers["X-Pagination-Page-Count"] == "1"

"""Tests for the Supabase REST client."""

from __future__ import annotations

import httpx
import pytest

from config import ConfigError
from services.supabase_client import CatalogError, SupabaseClient
from tests.conftest import SUPABASE_KEY, RecordingHandler


def test_missing_configuration_raises() -> None:
    with pytest.raises(ConfigError):
        SupabaseClient(None, "key")
    with pytest.raises(ConfigError):
        SupabaseClient("https://demo.supabase.co", "")


def test_select_builds_postgrest_query(make_client) -> None:
    handler = RecordingHandler({("GET", "popular_albums"): httpx.Response(200, json=[{"id": "a"}])})
    client = make_client(handler)

    rows = client.select("popular_albums", order="popularity_score", descending=True, limit=20,
                         filters={"artist": "Nina Simone"})

    assert rows == [{"id": "a"}]
    request = handler.requests[0]
    assert request.url.path == "/rest/v1/popular_albums"
    assert request.url.params["select"] == "*"
    assert request.url.params["order"] == "popularity_score.desc"
    assert request.url.params["limit"] == "20"
    assert request.url.params["artist"] == "eq.Nina Simone"
    assert request.headers["apikey"] == SUPABASE_KEY
    assert request.headers["authorization"] == f"Bearer {SUPABASE_KEY}"


def test_insert_asks_for_representation(make_client) -> None:
    handler = RecordingHandler({("POST", "made_for_you"): httpx.Response(201, json=[{"id": "p1"}])})
    client = make_client(handler)

    row = client.insert("made_for_you", {"title": "Daily Mix"})

    assert row == {"id": "p1"}
    assert handler.requests[0].headers["prefer"] == "return=representation"
    assert handler.body() == {"title": "Daily Mix"}


def test_update_filters_by_id(make_client) -> None:
    handler = RecordingHandler({("PATCH", "popular_albums"): httpx.Response(200, json=[{"id": "a1"}])})
    client = make_client(handler)

    client.update("popular_albums", "a1", {"popularity_score": 99})

    assert handler.requests[0].url.params["id"] == "eq.a1"


def test_update_of_missing_row_raises(make_client) -> None:
    handler = RecordingHandler({("PATCH", "popular_albums"): httpx.Response(200, json=[])})
    with pytest.raises(CatalogError) as excinfo:
        make_client(handler).update("popular_albums", "nope", {"popularity_score": 1})
    assert excinfo.value.status_code == 404


def test_delete(make_client) -> None:
    handler = RecordingHandler({("DELETE", "recently_played"): httpx.Response(204)})
    make_client(handler).delete("recently_played", "rp1")
    assert handler.requests[0].method == "DELETE"
    assert handler.requests[0].url.params["id"] == "eq.rp1"


def test_error_status_raises_catalog_error(make_client) -> None:
    handler = RecordingHandler({("GET", "recently_played"): httpx.Response(500, json={"message": "boom"})})
    with pytest.raises(CatalogError) as excinfo:
        make_client(handler).select("recently_played")
    assert excinfo.value.status_code == 500
    assert "boom" in str(excinfo.value)


def test_transport_error_raises_catalog_error(make_client) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CatalogError):
        make_client(refuse).select("recently_played")


def test_test_connection(make_client) -> None:
    ok = RecordingHandler({("GET", "recently_played"): httpx.Response(200, json=[])})
    assert make_client(ok).test_connection() is True
    assert make_client(RecordingHandler({})).test_connection() is False


def test_validate_schema_reports_missing_tables(make_client) -> None:
    handler = RecordingHandler({
        ("GET", "recently_played"): httpx.Response(200, json=[]),
        ("GET", "popular_albums"): httpx.Response(200, json=[]),
    })
    assert make_client(handler).validate_schema() == (False, ["made_for_you"])

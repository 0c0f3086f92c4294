from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from services.catalog import CatalogService
from services.supabase_client import SupabaseClient

SUPABASE_URL = "https://demo.supabase.co"
SUPABASE_KEY = "anon-key"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replies from a route table."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response | Callable[[httpx.Request], httpx.Response]]):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        table = request.url.path.rsplit("/", 1)[-1]
        route = self.routes.get((request.method, table))
        if route is None:
            return httpx.Response(404, json={"message": f'relation "public.{table}" does not exist'})
        if callable(route):
            return route(request)
        return httpx.Response(route.status_code, headers=route.headers, content=route.content)

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def make_client() -> Callable[[RecordingHandler], SupabaseClient]:
    clients = []

    def factory(handler: RecordingHandler) -> SupabaseClient:
        client = SupabaseClient(SUPABASE_URL, SUPABASE_KEY, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def make_catalog(make_client) -> Callable[[RecordingHandler], CatalogService]:
    def factory(handler: RecordingHandler) -> CatalogService:
        return CatalogService(make_client(handler))

    return factory

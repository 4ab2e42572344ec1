"""Shared fixtures.

Two ways to stand in for the site API:
- ``ScriptedApi`` behind ``httpx.MockTransport`` when a test needs to count
  calls, fail on purpose, or hold a request in flight
- the in-memory development backend behind ``httpx.ASGITransport`` for
  end-to-end flows
"""

import asyncio
import json
from collections.abc import Callable

import httpx
import pytest
import pytest_asyncio

from site_cache.api.app import create_app
from site_cache.api.storage import SiteStorage
from site_cache.repositories import HttpApiClient, InMemoryCacheStore, InMemoryNotifier, RequestCache

BASE_URL = "http://testserver"


class ScriptedApi:
    """Answers requests from a route table and records every call.

    Routes map "METHOD /path" to a status and JSON body, or to a callable
    taking the request. A route listed in ``held`` waits until ``release()``.
    """

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, object] | Callable[[httpx.Request], httpx.Response]] = {}
        self.calls: list[httpx.Request] = []
        self.held: set[str] = set()
        self.received = asyncio.Event()
        self._gate = asyncio.Event()

    def route(self, method: str, path: str, status: int = 200, body: object = None) -> None:
        self.routes[f"{method} {path}"] = (status, body)

    def hold(self, method: str, path: str) -> None:
        self.held.add(f"{method} {path}")

    def release(self) -> None:
        self._gate.set()

    def count(self, method: str, path: str) -> int:
        return sum(1 for r in self.calls if r.method == method and r.url.path == path)

    def last_body(self, method: str, path: str) -> object:
        for request in reversed(self.calls):
            if request.method == method and request.url.path == path:
                return json.loads(request.content) if request.content else None
        return None

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        route_key = f"{request.method} {request.url.path}"
        self.received.set()

        if route_key in self.held:
            await self._gate.wait()

        route = self.routes.get(route_key)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if callable(route):
            return route(request)
        status, body = route
        return httpx.Response(status, json=body)


@pytest.fixture
def scripted_api() -> ScriptedApi:
    return ScriptedApi()


@pytest_asyncio.fixture
async def scripted_client(scripted_api):
    """HttpApiClient whose requests are answered by scripted_api."""
    http = httpx.AsyncClient(transport=httpx.MockTransport(scripted_api))
    client = HttpApiClient(base_url=BASE_URL, client=http, request_cache=RequestCache(ttl=300, max_entries=100))
    yield client
    await client.close()


@pytest.fixture
def site_storage() -> SiteStorage:
    """Backend storage seeded with three testimonials and two config entries."""
    storage = SiteStorage()
    for order, name in enumerate(["Ana", "Bruno", "Carla"]):
        storage.create_item(
            "testimonials",
            {"name": name, "service": "Therapy", "testimonial": "Great", "order": order},
        )
    storage.set_config("faq_section", {"badge": "FAQ", "title": "Questions", "description": "Answers"})
    storage.set_config("maintenance_mode", {"isEnabled": False, "title": "Back soon", "message": "Updating"})
    return storage


@pytest_asyncio.fixture
async def backend_client(site_storage):
    """HttpApiClient talking to the in-memory development backend."""
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=create_app(site_storage)))
    client = HttpApiClient(base_url=BASE_URL, client=http, request_cache=RequestCache(ttl=300, max_entries=100))
    yield client
    await client.close()


@pytest.fixture
def store() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture
def notifier() -> InMemoryNotifier:
    return InMemoryNotifier()

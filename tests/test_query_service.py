"""
Tests for cache-first reads.
"""

import asyncio

import pytest

from site_cache.dto.config_values import SectionTextsEntry
from site_cache.services import QueryService

KEY = "/api/admin/testimonials"


@pytest.mark.asyncio
async def test_fetch_hits_network_once(store, scripted_api, scripted_client):
    scripted_api.route("GET", KEY, body=[{"id": 1, "order": 0}])
    queries = QueryService(store, scripted_client)

    first = await queries.fetch(KEY)
    scripted_client.clear_request_cache()
    second = await queries.fetch(KEY)

    assert second is first
    assert scripted_api.count("GET", KEY) == 1


@pytest.mark.asyncio
async def test_concurrent_fetches_agree(store, scripted_api, scripted_client):
    scripted_api.route("GET", KEY, body=[{"id": 1, "order": 0}])
    scripted_api.hold("GET", KEY)
    queries = QueryService(store, scripted_client)

    first = asyncio.create_task(queries.fetch(KEY))
    second = asyncio.create_task(queries.fetch(KEY))
    await asyncio.wait_for(scripted_api.received.wait(), timeout=1)
    await asyncio.sleep(0)
    scripted_api.release()
    a, b = await asyncio.gather(first, second)

    assert a is b
    assert scripted_api.count("GET", KEY) == 1


@pytest.mark.asyncio
async def test_refetch_respects_request_cache_unless_fresh(store, scripted_api, scripted_client):
    scripted_api.route("GET", KEY, body=[{"id": 1, "order": 0}])
    queries = QueryService(store, scripted_client)
    await queries.fetch(KEY)

    scripted_api.route("GET", KEY, body=[{"id": 1, "order": 0}, {"id": 2, "order": 1}])
    cached = await queries.refetch(KEY)
    fresh = await queries.refetch(KEY, fresh=True)

    assert len(cached) == 1
    assert len(fresh) == 2
    assert queries.read(KEY) is fresh
    assert scripted_api.count("GET", KEY) == 2


@pytest.mark.asyncio
async def test_ordered_lists(store, site_storage, backend_client):
    site_storage.update_item("testimonials", 2, {"isActive": False})
    queries = QueryService(store, backend_client)

    assert [e["id"] for e in await queries.ordered(KEY)] == [1, 2, 3]
    assert [e["id"] for e in await queries.ordered(KEY, only_active=True)] == [1, 3]


@pytest.mark.asyncio
async def test_ordered_tolerates_non_list_payload(store, scripted_api, scripted_client):
    scripted_api.route("GET", KEY, body={"error": "unexpected"})
    queries = QueryService(store, scripted_client)

    assert await queries.ordered(KEY) == []


@pytest.mark.asyncio
async def test_typed_config_reads(store, backend_client):
    queries = QueryService(store, backend_client)

    assert queries.read("/api/config") is None
    entry = await queries.config("faq_section", public=True)

    assert isinstance(entry, SectionTextsEntry)
    assert entry.value.title == "Questions"
    assert await queries.config("general_info") is None
    assert store.has("/api/admin/config")

"""
Tests for the in-memory cache store.
"""

from site_cache.protocols import CacheStore
from site_cache.repositories import InMemoryCacheStore


def test_satisfies_protocol(store):
    assert isinstance(store, CacheStore)


def test_read_missing_key(store):
    assert store.get("/api/admin/faq") is None
    assert store.get_entry("/api/admin/faq") is None
    assert store.has("/api/admin/faq") is False


def test_set_value_and_updater(store):
    store.set("/api/admin/faq", [{"id": 1}])
    result = store.set("/api/admin/faq", lambda old: [*old, {"id": 2}])

    assert result == [{"id": 1}, {"id": 2}]
    assert store.get("/api/admin/faq") == [{"id": 1}, {"id": 2}]


def test_updater_sees_none_when_absent(store):
    seen = []
    store.set("/api/admin/faq", lambda old: seen.append(old) or [])

    assert seen == [None]
    assert store.get("/api/admin/faq") == []


def test_entry_carries_timestamp_in_milliseconds():
    store = InMemoryCacheStore(clock=lambda: 1_700_000_000.5)
    store.set("/api/config", [])

    entry = store.get_entry("/api/config")

    assert entry.query_key == "/api/config"
    assert entry.timestamp == 1_700_000_000_500


def test_listeners_fire_only_on_identity_change(store):
    events = []
    store.subscribe("/api/admin/faq", lambda key, value: events.append(value))
    items = [{"id": 1}]

    store.set("/api/admin/faq", items)
    store.set("/api/admin/faq", lambda old: old)
    store.set("/api/admin/faq", items)
    store.set("/api/admin/faq", [{"id": 1}])

    assert len(events) == 2
    assert events[0] is items


def test_listeners_are_scoped_to_their_key(store):
    events = []
    store.subscribe("/api/admin/faq", lambda key, value: events.append(key))

    store.set("/api/admin/services", [])

    assert events == []


def test_unsubscribe(store):
    events = []
    unsubscribe = store.subscribe("/api/config", lambda key, value: events.append(value))

    store.set("/api/config", [1])
    unsubscribe()
    store.set("/api/config", [2])
    unsubscribe()

    assert events == [[1]]


def test_remove_notifies_with_none(store):
    events = []
    store.set("/api/testimonials", [])
    store.subscribe("/api/testimonials", lambda key, value: events.append(value))

    assert store.remove("/api/testimonials") is True
    assert store.remove("/api/testimonials") is False
    assert events == [None]
    assert store.has("/api/testimonials") is False


def test_keys_and_clear(store):
    store.set("/api/config", [])
    store.set("/api/admin/config", [])

    assert store.keys() == ["/api/config", "/api/admin/config"]
    assert store.clear() == 2
    assert store.keys() == []


def test_separate_instances_do_not_share_state():
    first = InMemoryCacheStore()
    second = InMemoryCacheStore()

    first.set("/api/config", [])

    assert second.has("/api/config") is False

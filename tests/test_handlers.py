"""
Tests for mutation outcome notifications.
"""

import pytest

from site_cache.dto import ReorderItem
from site_cache.entities import EntityUpdate
from site_cache.exceptions import MutationError
from site_cache.handlers import ConfigHandler, ManagerHandler
from site_cache.protocols import Notifier
from site_cache.repositories import InMemoryNotifier
from site_cache.services import ConfigService, ListMutationService, QueryService

KEY = "/api/admin/testimonials"


@pytest.fixture
def manager(store, backend_client, notifier):
    service = ListMutationService(store, backend_client, KEY, "Testimonial", ["/api/testimonials"])
    return ManagerHandler(service, notifier)


@pytest.mark.asyncio
async def test_success_notifications(manager, notifier):
    created = await manager.create_mutation.mutate({"name": "Dani"})
    await manager.reorder_mutation.mutate([ReorderItem(id=created["id"], order=0)])
    await manager.delete_mutation.mutate(created["id"])

    titles = [n.title for n in notifier.active]
    assert titles == ["Testimonial created!", "Order updated!", "Testimonial removed!"]
    assert notifier.active[1].description == "Testimonial reordered successfully."
    assert all(n.variant == "default" for n in notifier.active)


@pytest.mark.asyncio
async def test_failed_update_notification(manager, notifier):
    with pytest.raises(MutationError):
        await manager.update_mutation.mutate(EntityUpdate(id=99, data={"name": "Nobody"}))

    [notification] = notifier.active
    assert notification.title == "Could not update Testimonial"
    assert notification.variant == "destructive"
    assert notification.description.endswith("Please try again.")
    assert "reverted" not in notification.description


@pytest.mark.asyncio
async def test_failed_reorder_mentions_revert(store, scripted_api, scripted_client, notifier):
    scripted_api.route("PUT", f"{KEY}/reorder", status=500, body={"error": "write failed"})
    store.set(KEY, [{"id": 1, "order": 0}, {"id": 2, "order": 1}])
    manager = ManagerHandler(ListMutationService(store, scripted_client, KEY, "Testimonial"), notifier)

    with pytest.raises(MutationError):
        await manager.reorder_mutation.mutate([ReorderItem(id=2, order=0)])

    [notification] = notifier.active
    assert notification.title == "Could not reorder Testimonial"
    assert "The order was reverted" in notification.description


def test_is_pending_is_false_when_idle(manager):
    assert manager.is_pending is False
    assert len(manager.mutations) == 4


@pytest.mark.asyncio
async def test_config_notifications(store, backend_client, notifier):
    service = ConfigService(store, backend_client)
    ConfigHandler(service, notifier)
    await QueryService(store, backend_client).fetch("/api/admin/config")

    await service.upsert("faq_section", {"title": "FAQ"})
    await service.delete("faq_section")
    with pytest.raises(MutationError):
        await service.delete("faq_section")

    assert [(n.title, n.variant) for n in notifier.active] == [
        ("Settings saved!", "default"),
        ("Settings removed!", "default"),
        ("Could not delete 'faq_section'", "destructive"),
    ]
    assert notifier.active[0].description == "'faq_section' was updated successfully."


def test_notifier_dismiss_and_limit():
    notifier = InMemoryNotifier(limit=2)
    assert isinstance(notifier, Notifier)

    first = notifier.notify("One")
    second = notifier.notify("Two")
    third = notifier.notify("Three", "details", variant="destructive")

    assert [n.id for n in notifier.active] == [second.id, third.id]
    assert notifier.dismiss(first.id) is False
    assert notifier.dismiss(second.id) is True
    assert [n.title for n in notifier.active] == ["Three"]

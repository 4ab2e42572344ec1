#!/usr/bin/env python3
"""
Demo script for site cache.

This script runs the admin-side cache against the in-memory development
backend: cache-first reads, mutations written straight into the cache,
and an optimistic reorder with and without a failing server.
"""

import asyncio

import httpx

from site_cache import (
    ConfigHandler,
    ConfigService,
    HttpApiClient,
    InMemoryCacheStore,
    InMemoryNotifier,
    ListMutationService,
    ManagerHandler,
    MutationError,
    QueryService,
)
from site_cache.api.app import create_app
from site_cache.api.storage import SiteStorage
from site_cache.logging import setup_logging

ADMIN_KEY = "/api/admin/testimonials"
PUBLIC_KEY = "/api/testimonials"


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def print_list(label: str, items: list[dict]) -> None:
    names = ", ".join(f"{item['name']}({item['order']})" for item in items)
    print(f"  {label}: {names}")


def seeded_storage() -> SiteStorage:
    storage = SiteStorage()
    for order, name in enumerate(["Ana", "Bruno", "Carla"]):
        storage.create_item("testimonials", {"name": name, "testimonial": "Great sessions", "order": order})
    storage.set_config("faq_section", {"badge": "FAQ", "title": "Questions", "description": ""})
    return storage


async def demo_queries(queries: QueryService) -> None:
    """Demonstrate cache-first reads."""
    print_section("Cache-first Queries")

    items = await queries.ordered(ADMIN_KEY)
    print_list("Fetched", items)

    again = await queries.ordered(ADMIN_KEY)
    print(f"  Second read served from cache store: {again == items}")

    faq = await queries.config("faq_section")
    print(f"  faq_section title: {faq.value.title!r}")


async def demo_mutations(testimonials: ListMutationService, configs: ConfigService, queries: QueryService) -> None:
    """Demonstrate create, update, delete and config upsert."""
    print_section("Mutations")

    created = await testimonials.create({"name": "Dani", "testimonial": "Very welcoming", "order": 1})
    print_list("After create", queries.read(ADMIN_KEY))

    await testimonials.update(created["id"], {"name": "Daniela"})
    print_list("After update", queries.read(ADMIN_KEY))

    await testimonials.delete(created["id"])
    print_list("After delete", queries.read(ADMIN_KEY))

    await configs.upsert("faq_section", {"title": "Common questions"})
    print(f"  faq_section title: {configs.get('faq_section').value.title!r}")


async def demo_reorder(store: InMemoryCacheStore, testimonials: ListMutationService, queries: QueryService) -> None:
    """Demonstrate optimistic reorder and rollback."""
    print_section("Optimistic Reorder")

    await queries.fetch(PUBLIC_KEY)
    result = await testimonials.reorder([{"id": 3, "order": 0}])
    print_list("Confirmed order", result)
    print(f"  Public list evicted: {queries.read(PUBLIC_KEY) is None}")

    print("\n  Reordering a collection whose server write fails...")
    broken_api = httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "write failed"}))
    async with HttpApiClient(base_url="http://site", client=httpx.AsyncClient(transport=broken_api)) as client:
        failing = ListMutationService(store, client, ADMIN_KEY, "Testimonial")
        try:
            await failing.reorder([{"id": 2, "order": 0}])
        except MutationError as e:
            print(f"  ✗ {e.message}")
            print(f"  Rolled back: {e.rolled_back}")
    print_list("Order after rollback", queries.read(ADMIN_KEY))


async def run() -> None:
    store = InMemoryCacheStore()
    notifier = InMemoryNotifier()
    transport = httpx.ASGITransport(app=create_app(seeded_storage()))

    async with HttpApiClient(base_url="http://site", client=httpx.AsyncClient(transport=transport)) as client:
        queries = QueryService(store, client)
        testimonials = ListMutationService(store, client, ADMIN_KEY, "Testimonial", [PUBLIC_KEY])
        configs = ConfigService(store, client)
        ManagerHandler(testimonials, notifier)
        ConfigHandler(configs, notifier)

        await demo_queries(queries)
        await demo_mutations(testimonials, configs, queries)
        await demo_reorder(store, testimonials, queries)

    print_section("Notifications")
    for notification in notifier.active:
        marker = "✗" if notification.variant == "destructive" else "✓"
        print(f"  {marker} {notification.title} {notification.description}".rstrip())


def main() -> None:
    """Run all demos."""
    setup_logging("WARNING")
    print("\n🚀 Site Cache Demo")
    print("=" * 70)
    print("This demo runs the admin cache against the in-memory development API")

    try:
        asyncio.run(run())

        print("\n" + "=" * 70)
        print("✅ Demo completed successfully!")
        print("=" * 70)

    except Exception as e:
        print(f"\n❌ Error: {e}")


if __name__ == "__main__":
    main()

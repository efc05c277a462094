"""Tests for bulk assignment of the well-known products to a category."""

from unittest.mock import AsyncMock

import pytest

from app.client.assigner import CATEGORY_PRODUCT_IDS, CategoryAssigner, product_ids_for
from app.client.cache import QueryCache
from app.client.notify import InMemoryNotifier, NotificationKind


class RecordingCache(QueryCache):
    def __init__(self, events):
        super().__init__()
        self.events = events

    def invalidate(self, prefix):
        self.events.append(("invalidate", prefix))
        return super().invalidate(prefix)


class RecordingNotifier(InMemoryNotifier):
    def __init__(self, events):
        super().__init__()
        self.events = events

    def notify(self, kind, title, message):
        self.events.append(("notify", NotificationKind(kind)))
        super().notify(kind, title, message)


@pytest.fixture
def events():
    return []


@pytest.fixture
def api(events):
    api = AsyncMock()

    async def assign(ids, slug):
        events.append(("assign", list(ids), slug))
        return True

    api.assign_products_to_category.side_effect = assign
    return api


@pytest.fixture
def assigner(api, events):
    return CategoryAssigner(api, RecordingCache(events), RecordingNotifier(events))


def test_static_table():
    assert product_ids_for("microsaas") == [1, 9, 13, 14, 16]
    assert product_ids_for("nocode") == [2, 3, 7, 11]
    assert product_ids_for("games") == []
    assert product_ids_for(None) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("slug", sorted(CATEGORY_PRODUCT_IDS))
async def test_known_slug_uses_documented_ids(assigner, api, slug):
    assert await assigner.assign(slug, slug.title()) is True

    api.assign_products_to_category.assert_awaited_once_with(CATEGORY_PRODUCT_IDS[slug], slug)


@pytest.mark.asyncio
async def test_success_orders_side_effects(assigner, events):
    assigner.cache.set(("products", "category", "microsaas"), [])
    assigner.cache.set(("products", "category", "nocode"), [])

    assert await assigner.assign("microsaas", "Micro SaaS") is True

    assert events == [
        ("notify", NotificationKind.INFO),
        ("assign", [1, 9, 13, 14, 16], "microsaas"),
        ("notify", NotificationKind.SUCCESS),
        ("invalidate", ("products", "category", "microsaas")),
    ]
    assert assigner.cache.keys() == [("products", "category", "nocode")]
    assert assigner.notifier.notifications[-1].message == (
        "Products assigned to Micro SaaS category successfully!"
    )


@pytest.mark.asyncio
async def test_failure_result_skips_invalidation(assigner, api, events):
    api.assign_products_to_category.side_effect = None
    api.assign_products_to_category.return_value = False

    assert await assigner.assign("microsaas", "Micro SaaS") is False

    assert assigner.notifier.kinds == [NotificationKind.INFO, NotificationKind.ERROR]
    assert assigner.notifier.notifications[-1].message == "Failed to assign products to Micro SaaS category"
    assert not any(event[0] == "invalidate" for event in events)


@pytest.mark.asyncio
async def test_exception_is_reported(assigner, api, events):
    api.assign_products_to_category.side_effect = ConnectionError("offline")

    assert await assigner.assign("nocode", "No-Code") is False

    assert assigner.notifier.kinds == [NotificationKind.INFO, NotificationKind.ERROR]
    assert assigner.notifier.notifications[-1].message == "Failed to assign products to category"
    assert not any(event[0] == "invalidate" for event in events)


@pytest.mark.asyncio
@pytest.mark.parametrize("slug", ["games", "", None])
async def test_unknown_slug_is_silent(assigner, api, events, slug):
    assert await assigner.assign(slug, "Games") is False

    api.assign_products_to_category.assert_not_called()
    assert events == []

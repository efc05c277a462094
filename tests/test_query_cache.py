"""Tests for the prefix-invalidated query cache."""

import asyncio

import pytest

from app.client.cache import QueryCache


@pytest.mark.asyncio
async def test_fetch_loads_once():
    cache = QueryCache()
    calls = []

    async def loader():
        calls.append(1)
        return ["a"]

    assert await cache.fetch(("products",), loader) == ["a"]
    assert await cache.fetch(("products",), loader) == ["a"]
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_invalidate_forces_reload():
    cache = QueryCache()
    values = iter([1, 2])

    async def loader():
        return next(values)

    assert await cache.fetch(("products",), loader) == 1
    cache.invalidate(("products",))
    assert await cache.fetch(("products",), loader) == 2


def test_invalidate_by_prefix():
    cache = QueryCache()
    cache.set(("products",), "all")
    cache.set(("products", "category", "microsaas"), "micro")
    cache.set(("products", "category", "nocode"), "nocode")
    cache.set(("products", "categoryId", 3), "by id")
    cache.set(("categories",), "cats")

    removed = cache.invalidate(("products", "category"))

    assert removed == 2
    assert set(cache.keys()) == {("products",), ("products", "categoryId", 3), ("categories",)}


def test_prefix_matches_whole_elements_only():
    cache = QueryCache()
    cache.set(("products", "categoryId", 1), "x")

    # "category" is a prefix of the string "categoryId" but not of the key
    assert cache.invalidate(("products", "category")) == 0
    assert ("products", "categoryId", 1) in cache


def test_string_keys_rejected():
    cache = QueryCache()

    with pytest.raises(TypeError):
        cache.invalidate("products")
    with pytest.raises(TypeError):
        cache.set("products", [])


def test_get_and_clear():
    cache = QueryCache()
    cache.set(("categories",), ["art"])

    assert cache.get(("categories",)) == ["art"]
    assert cache.get(("missing",), default=[]) == []

    cache.clear()
    assert cache.keys() == []


@pytest.mark.asyncio
async def test_invalidation_during_load_discards_result():
    cache = QueryCache()
    key = ("products", "category", "microsaas")
    release = asyncio.Event()

    async def slow_loader():
        await release.wait()
        return ["stale-empty-row"]

    async def fresh_loader():
        return ["fresh"]

    pending = asyncio.create_task(cache.fetch(key, slow_loader))
    await asyncio.sleep(0)

    cache.invalidate(("products", "category", "microsaas"))
    release.set()

    # The caller that started the load still gets its value
    assert await pending == ["stale-empty-row"]
    assert key not in cache
    assert await cache.fetch(key, fresh_loader) == ["fresh"]


@pytest.mark.asyncio
async def test_unrelated_invalidation_keeps_loaded_result():
    cache = QueryCache()
    release = asyncio.Event()

    async def loader():
        await release.wait()
        return ["row"]

    pending = asyncio.create_task(cache.fetch(("products", "category", "nocode"), loader))
    await asyncio.sleep(0)

    cache.invalidate(("products", "category", "microsaas"))
    release.set()

    assert await pending == ["row"]
    assert cache.get(("products", "category", "nocode")) == ["row"]

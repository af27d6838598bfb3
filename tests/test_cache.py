"""Tests for the result cache."""

import asyncio
from datetime import timedelta

import pytest

from nutrition_engine.services.cache import InMemoryCacheStore, ResultCache
from tests.conftest import FailingCacheStore, FakeWallClock


def test_generate_key_ignores_param_order_and_nulls() -> None:
    first = ResultCache.generate_key({"name": "rice", "amount": 1.0, "unit": "cup"})
    second = ResultCache.generate_key(
        {"unit": "cup", "owner": None, "amount": 1.0, "name": "rice"}
    )

    assert first == second
    assert len(first) == 32
    assert first != ResultCache.generate_key({"name": "rice", "amount": 2.0, "unit": "cup"})


def test_set_then_get_roundtrip(result_cache: ResultCache) -> None:
    async def scenario() -> object:
        stored = await result_cache.set("key-1", {"calories": 10})
        assert stored
        return await result_cache.get("key-1")

    assert asyncio.run(scenario()) == {"calories": 10}


def test_expired_entry_is_deleted_on_read() -> None:
    clock = FakeWallClock()
    store = InMemoryCacheStore()
    cache = ResultCache(store, clock=clock)

    async def scenario() -> object:
        await cache.set("key-1", {"calories": 10}, ttl_seconds=60)
        clock.now += timedelta(seconds=61)
        return await cache.get("key-1")

    assert asyncio.run(scenario()) is None
    assert store.get("key-1") is None


def test_entry_at_exact_expiry_is_still_visible() -> None:
    clock = FakeWallClock()
    cache = ResultCache(InMemoryCacheStore(), clock=clock)

    async def scenario() -> object:
        await cache.set("key-1", "value", ttl_seconds=60)
        clock.now += timedelta(seconds=60)
        return await cache.get("key-1")

    assert asyncio.run(scenario()) == "value"


def test_owner_scoped_entries_hidden_from_other_owners(result_cache: ResultCache) -> None:
    async def scenario() -> tuple[object, object, object]:
        await result_cache.set("key-1", "mine", owner_id="user-1")
        return (
            await result_cache.get("key-1", owner_id="user-1"),
            await result_cache.get("key-1", owner_id="user-2"),
            await result_cache.get("key-1"),
        )

    assert asyncio.run(scenario()) == ("mine", None, "mine")


def test_bulk_deletes_by_tag_owner_and_expiry() -> None:
    clock = FakeWallClock()
    cache = ResultCache(InMemoryCacheStore(), clock=clock)

    async def scenario() -> tuple[int, int, int]:
        await cache.set("a", 1, tags=("ingredient-nutrition",))
        await cache.set("b", 2, tags=("ingredient-nutrition",), owner_id="user-1")
        await cache.set("c", 3, owner_id="user-1")
        await cache.set("d", 4, ttl_seconds=10)
        by_tag = await cache.clear_by_tag("ingredient-nutrition")
        by_owner = await cache.clear_owner("user-1")
        clock.now += timedelta(seconds=11)
        expired = await cache.purge_expired()
        return by_tag, by_owner, expired

    assert asyncio.run(scenario()) == (2, 1, 1)


def test_delete_where_requires_a_filter() -> None:
    with pytest.raises(ValueError, match="at least one filter"):
        InMemoryCacheStore().delete_where()


def test_store_failures_degrade_to_misses() -> None:
    cache = ResultCache(FailingCacheStore())

    async def scenario() -> tuple[object, bool, int]:
        value = await cache.get("key-1")
        stored = await cache.set("key-1", {"calories": 1})
        await cache.delete("key-1")
        cleared = await cache.clear_by_tag("ingredient-nutrition")
        return value, stored, cleared

    assert asyncio.run(scenario()) == (None, False, 0)

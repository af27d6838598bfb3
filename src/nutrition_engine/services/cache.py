"""Result cache with expire-on-read semantics."""

import asyncio
import hashlib
import json
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

_logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 86400


@dataclass(frozen=True)
class CacheEntry:
    """A cached payload with its expiry and optional owner and tags."""

    key: str
    data: object
    created_at: datetime
    expires_at: datetime
    owner_id: str | None = None
    tags: tuple[str, ...] = ()

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at


class CacheStore(Protocol):
    """Key/value storage backing the result cache."""

    def get(self, key: str) -> CacheEntry | None:
        """Return the stored entry, expired or not."""

    def put(self, entry: CacheEntry) -> None:
        """Insert or replace an entry."""

    def delete(self, key: str) -> None:
        """Delete an entry if present."""

    def delete_where(
        self,
        *,
        tag: str | None = None,
        owner_id: str | None = None,
        expired_before: datetime | None = None,
    ) -> int:
        """Delete entries matching every given filter and return the count."""


@dataclass
class InMemoryCacheStore(CacheStore):
    """Dictionary-backed store for tests and local runs."""

    _entries: dict[str, CacheEntry]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    def put(self, entry: CacheEntry) -> None:
        self._entries[entry.key] = entry

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def delete_where(
        self,
        *,
        tag: str | None = None,
        owner_id: str | None = None,
        expired_before: datetime | None = None,
    ) -> int:
        if tag is None and owner_id is None and expired_before is None:
            raise ValueError("delete_where requires at least one filter")
        matched = [
            key
            for key, entry in self._entries.items()
            if (tag is None or tag in entry.tags)
            and (owner_id is None or entry.owner_id == owner_id)
            and (expired_before is None or entry.expires_at < expired_before)
        ]
        for key in matched:
            del self._entries[key]
        return len(matched)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ResultCache:
    """Async cache facade whose failures degrade to misses.

    Store calls run in worker threads so a batch of lookups can overlap.
    Expired entries are deleted by the read that finds them.
    """

    store: CacheStore
    clock: Callable[[], datetime] = _utc_now
    default_ttl_seconds: int = DEFAULT_TTL_SECONDS

    @staticmethod
    def generate_key(params: Mapping[str, object]) -> str:
        """Hash the non-null params in sorted-key JSON form."""
        normalized = {
            key: params[key] for key in sorted(params) if params[key] is not None
        }
        encoded = json.dumps(normalized, sort_keys=True, separators=(",", ":"))
        return hashlib.md5(encoded.encode("utf-8"), usedforsecurity=False).hexdigest()

    async def get(self, key: str, owner_id: str | None = None) -> object | None:
        """Return cached data if present, unexpired and visible to the owner."""
        try:
            entry = await asyncio.to_thread(self.store.get, key)
        except Exception:
            _logger.warning("Cache read failed: key=%s", key, exc_info=True)
            return None
        if entry is None:
            return None
        if entry.is_expired(self.clock()):
            await self.delete(key)
            return None
        if owner_id is not None and entry.owner_id not in {None, owner_id}:
            return None
        return entry.data

    async def set(
        self,
        key: str,
        data: object,
        ttl_seconds: int | None = None,
        owner_id: str | None = None,
        tags: Iterable[str] = (),
    ) -> bool:
        """Store data and return whether the write succeeded."""
        now = self.clock()
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        entry = CacheEntry(
            key=key,
            data=data,
            created_at=now,
            expires_at=now + timedelta(seconds=ttl),
            owner_id=owner_id,
            tags=tuple(tags),
        )
        try:
            await asyncio.to_thread(self.store.put, entry)
        except Exception:
            _logger.warning("Cache write failed: key=%s", key, exc_info=True)
            return False
        return True

    async def delete(self, key: str) -> None:
        try:
            await asyncio.to_thread(self.store.delete, key)
        except Exception:
            _logger.warning("Cache delete failed: key=%s", key, exc_info=True)

    async def clear_by_tag(self, tag: str) -> int:
        """Delete every entry carrying the tag."""
        return await self._delete_where("tag", tag=tag)

    async def clear_owner(self, owner_id: str) -> int:
        """Delete every entry owned by owner_id."""
        return await self._delete_where("owner", owner_id=owner_id)

    async def purge_expired(self) -> int:
        """Delete entries that expired before now."""
        return await self._delete_where("expired", expired_before=self.clock())

    async def _delete_where(self, action: str, **filters: object) -> int:
        try:
            deleted = await asyncio.to_thread(self.store.delete_where, **filters)
        except Exception:
            _logger.warning("Cache bulk delete failed: %s", action, exc_info=True)
            return 0
        _logger.info("Cache bulk delete: %s removed=%s", action, deleted)
        return deleted

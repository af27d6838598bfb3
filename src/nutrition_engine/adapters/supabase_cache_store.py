"""Supabase-backed result cache store."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from nutrition_engine.services.cache import CacheEntry, CacheStore

_COLUMNS = "key, data, created_at, expires_at, owner_id, tags"


@dataclass
class SupabaseCacheStore(CacheStore):
    """Supabase implementation for cached nutrition results."""

    client: Client
    table: str = "nutrition_cache"

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry for a key, if present."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return CacheEntry(
            key=row["key"],
            data=row.get("data"),
            created_at=datetime.fromisoformat(row["created_at"]),
            expires_at=datetime.fromisoformat(row["expires_at"]),
            owner_id=row.get("owner_id"),
            tags=tuple(row.get("tags") or ()),
        )

    def put(self, entry: CacheEntry) -> None:
        """Insert or replace the row for the entry key."""
        self.client.table(self.table).upsert(
            {
                "key": entry.key,
                "data": entry.data,
                "created_at": entry.created_at.isoformat(),
                "expires_at": entry.expires_at.isoformat(),
                "owner_id": entry.owner_id,
                "tags": list(entry.tags),
            },
            on_conflict="key",
        ).execute()

    def delete(self, key: str) -> None:
        self.client.table(self.table).delete().eq("key", key).execute()

    def delete_where(
        self,
        *,
        tag: str | None = None,
        owner_id: str | None = None,
        expired_before: datetime | None = None,
    ) -> int:
        """Delete rows matching every given filter and return the count."""
        if tag is None and owner_id is None and expired_before is None:
            raise ValueError("delete_where requires at least one filter")
        query = self.client.table(self.table).delete()
        if tag is not None:
            query = query.contains("tags", [tag])
        if owner_id is not None:
            query = query.eq("owner_id", owner_id)
        if expired_before is not None:
            query = query.lt("expires_at", expired_before.isoformat())
        response = query.execute()
        return len(response.data or [])

"""Supabase-backed key-value storage."""

from dataclasses import dataclass

from supabase import Client

from pantry_tracker.services.storage import KeyValueStorage


@dataclass
class SupabaseStorage(KeyValueStorage):
    """Stores each collection as one JSON row keyed by name."""

    client: Client
    table: str = "kv_store"

    def get(self, key: str, default: object) -> object:
        """Return the stored value for a key, if present."""
        response = (
            self.client.table(self.table)
            .select("key, value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return default
        value = response.data[0].get("value")
        return default if value is None else value

    def set(self, key: str, value: object) -> None:
        """Insert or replace the row for a key."""
        response = (
            self.client.table(self.table)
            .upsert({"key": key, "value": value}, on_conflict="key")
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to store {key} in Supabase")

"""Key-value storage abstractions for per-user collections."""

import copy
from dataclasses import dataclass
from typing import Protocol

PROFILE_KEY = "user_profile"


class KeyValueStorage(Protocol):
    """Durable storage holding one JSON-compatible value per key."""

    def get(self, key: str, default: object) -> object:
        """Return the stored value, or ``default`` when the key is absent."""

    def set(self, key: str, value: object) -> None:
        """Replace the value stored under a key."""


def ingredients_key(user_id: str) -> str:
    """Return the storage key for a user's ingredients."""
    return f"ingredients_{user_id}"


def consumptions_key(user_id: str) -> str:
    """Return the storage key for a user's consumption records."""
    return f"consumptions_{user_id}"


def daily_statuses_key(user_id: str) -> str:
    """Return the storage key for a user's daily statuses."""
    return f"daily_statuses_{user_id}"


@dataclass
class InMemoryStorage(KeyValueStorage):
    """Process-local storage used when no database is configured."""

    _values: dict[str, object]

    def __init__(self) -> None:
        self._values = {}

    def get(self, key: str, default: object) -> object:
        """Return a copy of the stored value so callers cannot mutate it."""
        if key not in self._values:
            return default
        return copy.deepcopy(self._values[key])

    def set(self, key: str, value: object) -> None:
        """Store a copy of the value."""
        self._values[key] = copy.deepcopy(value)

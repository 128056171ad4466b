"""Domain models for inventory statistics."""

from dataclasses import dataclass

from pantry_tracker.domain.inventory import Category


@dataclass(frozen=True)
class CategoryCount:
    """Active item count for one category."""

    category: Category
    label: str
    count: int


@dataclass(frozen=True)
class InventorySummary:
    """Counts derived from the active inventory."""

    total: int
    expiring_soon: int
    expired: int
    per_category: list[CategoryCount]


@dataclass(frozen=True)
class ActivityTotals:
    """Lifetime counters for a user."""

    ingredients_entered: int
    consumption_count: int
    consumed_quantity: float
    discard_count: int
    cooked_days: int

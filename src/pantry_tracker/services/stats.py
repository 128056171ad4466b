"""Statistics derived from the current inventory."""

from dataclasses import dataclass

from pantry_tracker.domain.inventory import (
    Category,
    ConsumptionReason,
    DailyActivityStatus,
    Ingredient,
)
from pantry_tracker.domain.stats import ActivityTotals, CategoryCount, InventorySummary
from pantry_tracker.services.activity import DailyActivityService
from pantry_tracker.services.categories import CATEGORY_LABELS
from pantry_tracker.services.inventory import InventoryService
from pantry_tracker.services.ledger import ConsumptionLedger
from pantry_tracker.services.timemath import Clock, remaining_days

EXPIRING_SOON_DAYS = 3


@dataclass
class StatsService:
    """Service for computing inventory risk and activity counters."""

    inventory: InventoryService
    ledger: ConsumptionLedger
    activity: DailyActivityService
    clock: Clock
    expiring_soon_days: int = EXPIRING_SOON_DAYS

    def summarize(self, user_id: str) -> InventorySummary:
        """Return totals, risk counts and per-category counts."""
        now = self.clock()
        active = self.inventory.list_active(user_id)
        expiring_soon = 0
        expired = 0
        counts = dict.fromkeys(Category, 0)
        for ingredient in active:
            days = remaining_days(ingredient.expiry_date, now)
            if days < 0:
                expired += 1
            elif days <= self.expiring_soon_days:
                expiring_soon += 1
            counts[ingredient.category] += 1

        return InventorySummary(
            total=len(active),
            expiring_soon=expiring_soon,
            expired=expired,
            per_category=[
                CategoryCount(
                    category=category, label=CATEGORY_LABELS[category], count=count
                )
                for category, count in counts.items()
            ],
        )

    def at_risk(self, user_id: str) -> list[Ingredient]:
        """Return active ingredients that are expired or expiring soon."""
        now = self.clock()
        risky = [
            ingredient
            for ingredient in self.inventory.list_active(user_id)
            if remaining_days(ingredient.expiry_date, now) <= self.expiring_soon_days
        ]
        return sorted(risky, key=lambda ingredient: ingredient.expiry_date)

    def activity_totals(self, user_id: str) -> ActivityTotals:
        """Return lifetime counters for a user."""
        records = self.ledger.list_records(user_id)
        statuses = self.activity.list_statuses(user_id)
        return ActivityTotals(
            ingredients_entered=len(self.inventory.list_all(user_id)),
            consumption_count=len(records),
            consumed_quantity=sum(record.consumed_quantity for record in records),
            discard_count=sum(
                1 for record in records if record.reason is ConsumptionReason.DISCARD
            ),
            cooked_days=sum(
                1
                for status in statuses
                if status.status is DailyActivityStatus.COOKED
            ),
        )

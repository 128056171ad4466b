"""Append-only log of consumption events."""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from pantry_tracker.domain.inventory import (
    ConsumptionReason,
    ConsumptionRecord,
    Ingredient,
)
from pantry_tracker.services.records import (
    as_rows,
    consumption_to_row,
    parse_consumption,
)
from pantry_tracker.services.storage import KeyValueStorage, consumptions_key

_logger = logging.getLogger(__name__)


@dataclass
class ConsumptionLedger:
    """Records every quantity removed from a user's inventory."""

    storage: KeyValueStorage

    def append(
        self,
        ingredient: Ingredient,
        quantity: float,
        reason: ConsumptionReason,
        consumed_at: datetime,
    ) -> ConsumptionRecord:
        """Create a record for an ingredient and persist the collection."""
        record = ConsumptionRecord(
            id=uuid4(),
            ingredient_id=ingredient.id,
            user_id=ingredient.user_id,
            consumed_quantity=quantity,
            quantity_unit=ingredient.quantity_unit,
            consumed_at=consumed_at,
            reason=reason,
        )
        key = consumptions_key(ingredient.user_id)
        rows = as_rows(key, self.storage.get(key, []))
        rows.insert(0, consumption_to_row(record))
        self.storage.set(key, rows)
        _logger.info(
            "Consumption recorded: ingredient=%s quantity=%s reason=%s",
            ingredient.id,
            quantity,
            reason.value,
        )
        return record

    def list_records(
        self, user_id: str, ingredient_id: UUID | None = None
    ) -> list[ConsumptionRecord]:
        """Return records for a user, newest first."""
        key = consumptions_key(user_id)
        rows = as_rows(key, self.storage.get(key, []))
        records = [parse_consumption(row) for row in rows]
        if ingredient_id is None:
            return records
        return [record for record in records if record.ingredient_id == ingredient_id]

"""Ingredient lifecycle: creation, consumption and active views."""

import logging
import math
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import TypeVar
from uuid import UUID, uuid4

from pantry_tracker.domain.errors import NotFoundError, ValidationError
from pantry_tracker.domain.inventory import (
    Category,
    ConsumptionReason,
    ConsumptionRecord,
    Ingredient,
    IngredientStatus,
    QuantityUnit,
    ShelfLifeUnit,
)
from pantry_tracker.services.activity import DailyActivityService
from pantry_tracker.services.categories import classify
from pantry_tracker.services.ledger import ConsumptionLedger
from pantry_tracker.services.records import (
    as_rows,
    ingredient_to_row,
    parse_ingredient,
)
from pantry_tracker.services.storage import KeyValueStorage, ingredients_key
from pantry_tracker.services.timemath import Clock, add_duration

_logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)


@dataclass
class InventoryService:
    """Owns a user's ingredients and the rules for depleting them."""

    storage: KeyValueStorage
    ledger: ConsumptionLedger
    activity: DailyActivityService
    clock: Clock

    def create(  # noqa: PLR0913
        self,
        user_id: str,
        name: str,
        category: Category | None,
        production_date: date,
        shelf_life_value: int,
        shelf_life_unit: ShelfLifeUnit,
        initial_quantity: float,
        quantity_unit: QuantityUnit,
    ) -> Ingredient:
        """Validate and store a new active ingredient.

        When ``category`` is None it is suggested from the name.
        """
        cleaned_name = name.strip()
        if not cleaned_name:
            raise ValidationError("Ingredient name is required")
        _require_positive("shelf_life_value", shelf_life_value)
        if int(shelf_life_value) != shelf_life_value:
            raise ValidationError(
                "Shelf life must be a whole number",
                details={"shelf_life_value": shelf_life_value},
            )
        _require_positive("initial_quantity", initial_quantity)
        unit = _coerce(ShelfLifeUnit, shelf_life_unit, "shelf_life_unit")
        resolved_category = (
            classify(cleaned_name)
            if category is None
            else _coerce(Category, category, "category")
        )
        resolved_quantity_unit = _coerce(QuantityUnit, quantity_unit, "quantity_unit")
        try:
            expiry_date = add_duration(production_date, int(shelf_life_value), unit)
        except (OverflowError, ValueError) as exc:
            raise ValidationError(
                "Shelf life is out of range",
                details={
                    "shelf_life_value": shelf_life_value,
                    "shelf_life_unit": unit.value,
                },
            ) from exc

        ingredient = Ingredient(
            id=uuid4(),
            user_id=user_id,
            name=cleaned_name,
            category=resolved_category,
            production_date=production_date,
            shelf_life_value=int(shelf_life_value),
            shelf_life_unit=unit,
            expiry_date=expiry_date,
            initial_quantity=initial_quantity,
            current_quantity=initial_quantity,
            quantity_unit=resolved_quantity_unit,
            status=IngredientStatus.ACTIVE,
            created_at=self.clock(),
        )
        key = ingredients_key(user_id)
        rows = as_rows(key, self.storage.get(key, []))
        rows.insert(0, ingredient_to_row(ingredient))
        self.storage.set(key, rows)
        _logger.info(
            "Ingredient created: user=%s id=%s category=%s expiry=%s",
            user_id,
            ingredient.id,
            ingredient.category.value,
            ingredient.expiry_date,
        )
        return ingredient

    def consume(
        self,
        user_id: str,
        ingredient_id: UUID,
        quantity: float,
        reason: ConsumptionReason,
    ) -> ConsumptionRecord:
        """Remove a quantity from an active ingredient.

        Requests larger than the remaining quantity are capped at what is left.
        """
        key = ingredients_key(user_id)
        rows = as_rows(key, self.storage.get(key, []))
        index, ingredient = _find_active(rows, ingredient_id)
        _require_positive("quantity", quantity)

        consumed = min(quantity, ingredient.current_quantity)
        remaining = ingredient.current_quantity - consumed
        status = IngredientStatus.ACTIVE
        if remaining <= 0:
            remaining = 0
            status = IngredientStatus.CONSUMED
        updated = replace(ingredient, current_quantity=remaining, status=status)
        rows[index] = ingredient_to_row(updated)
        self.storage.set(key, rows)

        now = self.clock()
        today = now.date()
        first_today = self.activity.get(user_id, today) is None
        record = self.ledger.append(updated, consumed, reason, now)
        self.activity.record_consumption(user_id, today, first_today)
        if status is IngredientStatus.CONSUMED:
            _logger.info("Ingredient used up: user=%s id=%s", user_id, ingredient_id)
        return record

    def get(self, user_id: str, ingredient_id: UUID) -> Ingredient:
        """Return an ingredient of any status by id."""
        for ingredient in self.list_all(user_id):
            if ingredient.id == ingredient_id:
                return ingredient
        raise NotFoundError(
            "Ingredient not found", details={"ingredient_id": str(ingredient_id)}
        )

    def list_all(self, user_id: str) -> list[Ingredient]:
        """Return every ingredient ever entered, most recent first."""
        key = ingredients_key(user_id)
        rows = as_rows(key, self.storage.get(key, []))
        return [parse_ingredient(row) for row in rows]

    def list_active(
        self, user_id: str, category: Category | None = None
    ) -> list[Ingredient]:
        """Return active ingredients, most recent first."""
        return [
            ingredient
            for ingredient in self.list_all(user_id)
            if ingredient.is_active
            and (category is None or ingredient.category is category)
        ]


def _require_positive(field: str, value: object) -> None:
    # NaN and infinities fail the isfinite check, so they never reach arithmetic.
    if (
        isinstance(value, bool)
        or not isinstance(value, int | float)
        or not math.isfinite(value)
        or value <= 0
    ):
        raise ValidationError(
            f"{field} must be a positive finite number", details={field: value}
        )


def _coerce(enum_type: type[_E], value: object, field: str) -> _E:
    try:
        return enum_type(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown {field}", details={field: value}) from exc


def _find_active(
    rows: list[dict[str, object]], ingredient_id: UUID
) -> tuple[int, Ingredient]:
    for index, row in enumerate(rows):
        ingredient = parse_ingredient(row)
        if ingredient.id == ingredient_id and ingredient.is_active:
            return index, ingredient
    raise NotFoundError(
        "No active ingredient with this id",
        details={"ingredient_id": str(ingredient_id)},
    )

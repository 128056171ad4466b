"""Models for label extraction results and ingredient drafts."""

import math
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pantry_tracker.domain.inventory import Category, QuantityUnit, ShelfLifeUnit


class LabelDraft(BaseModel):
    """Best-effort fields read from a food package label.

    A field with an unexpected type is dropped to None instead of failing the
    whole model, so one unreadable field does not discard the others.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    category: str | None = None
    production_date: str | None = Field(default=None, alias="productionDate")
    shelf_life_value: float | None = Field(default=None, alias="shelfLifeValue")
    shelf_life_unit: str | None = Field(default=None, alias="shelfLifeUnit")

    @field_validator(
        "name", "category", "production_date", "shelf_life_unit", mode="before"
    )
    @classmethod
    def _text_or_none(cls, value: object) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("shelf_life_value", mode="before")
    @classmethod
    def _finite_number_or_none(cls, value: object) -> float | None:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return None
        if not math.isfinite(value):
            return None
        return float(value)


@dataclass
class IngredientDraft:
    """An ingredient entry form that has not been submitted yet."""

    user_id: str
    production_date: date
    name: str = ""
    category: Category = Category.OTHERS
    category_locked: bool = False
    shelf_life_value: int = 7
    shelf_life_unit: ShelfLifeUnit = ShelfLifeUnit.DAY
    quantity: float = 1
    quantity_unit: QuantityUnit = QuantityUnit.PCS
    is_open: bool = True
    id: UUID = field(default_factory=uuid4)

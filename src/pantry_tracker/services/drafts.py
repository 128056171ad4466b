"""Ingredient entry drafts with auto-classification and label pre-fill."""

import logging
from dataclasses import dataclass
from datetime import date

from pantry_tracker.domain.errors import ValidationError
from pantry_tracker.domain.inventory import Category, Ingredient, ShelfLifeUnit
from pantry_tracker.domain.labels import IngredientDraft, LabelDraft
from pantry_tracker.services.categories import classify, parse_category
from pantry_tracker.services.inventory import InventoryService
from pantry_tracker.services.labels import LabelExtractionService
from pantry_tracker.services.timemath import Clock

_logger = logging.getLogger(__name__)


@dataclass
class DraftService:
    """Guides a draft from opening to submission."""

    inventory: InventoryService
    labels: LabelExtractionService
    clock: Clock

    def open_draft(self, user_id: str) -> IngredientDraft:
        """Start a draft with today's date as production date."""
        return IngredientDraft(user_id=user_id, production_date=self.clock().date())

    def set_name(self, draft: IngredientDraft, name: str) -> None:
        """Update the name and re-suggest the category unless chosen by hand."""
        draft.name = name
        if draft.category_locked or not name:
            return
        suggested = classify(name)
        if suggested is not Category.OTHERS:
            draft.category = suggested

    def choose_category(self, draft: IngredientDraft, category: Category) -> None:
        """Set the category explicitly; later name edits keep it."""
        draft.category = category
        draft.category_locked = True

    def apply_label(self, draft: IngredientDraft, label: LabelDraft) -> bool:
        """Merge extracted fields into an open draft.

        Returns False without touching the draft when it is already closed.
        """
        if not draft.is_open:
            _logger.info("Discarding label result for closed draft %s", draft.id)
            return False
        if label.name:
            draft.name = label.name
        if label.category:
            draft.category = parse_category(label.category)
        production_date = _parse_date(label.production_date)
        if production_date is not None:
            draft.production_date = production_date
        if label.shelf_life_value is not None and label.shelf_life_value >= 1:
            draft.shelf_life_value = int(label.shelf_life_value)
        unit = _parse_unit(label.shelf_life_unit)
        if unit is not None:
            draft.shelf_life_unit = unit
        return True

    async def scan_label(self, draft: IngredientDraft, image_bytes: bytes) -> bool:
        """Read a label image and merge whatever was found into the draft."""
        label = await self.labels.extract(image_bytes)
        if label is None:
            return False
        return self.apply_label(draft, label)

    def submit(self, draft: IngredientDraft) -> Ingredient:
        """Create the ingredient and close the draft."""
        if not draft.is_open:
            raise ValidationError("Draft is already closed")
        ingredient = self.inventory.create(
            user_id=draft.user_id,
            name=draft.name,
            category=draft.category,
            production_date=draft.production_date,
            shelf_life_value=draft.shelf_life_value,
            shelf_life_unit=draft.shelf_life_unit,
            initial_quantity=draft.quantity,
            quantity_unit=draft.quantity_unit,
        )
        draft.is_open = False
        return ingredient

    def abandon(self, draft: IngredientDraft) -> None:
        """Close the draft without creating anything."""
        draft.is_open = False


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        _logger.info("Ignoring unreadable production date: %s", value)
        return None


def _parse_unit(value: str | None) -> ShelfLifeUnit | None:
    if not value:
        return None
    cleaned = value.strip().lower()
    for unit in ShelfLifeUnit:
        if unit.value == cleaned:
            return unit
    return None

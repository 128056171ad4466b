"""Row conversion between domain entities and stored collections."""

from datetime import date, datetime
from uuid import UUID

from pantry_tracker.domain.inventory import (
    Category,
    ConsumptionReason,
    ConsumptionRecord,
    DailyActivityStatus,
    DailyStatus,
    Ingredient,
    IngredientStatus,
    QuantityUnit,
    ShelfLifeUnit,
    UserProfile,
)


def ingredient_to_row(ingredient: Ingredient) -> dict[str, object]:
    return {
        "id": str(ingredient.id),
        "userId": ingredient.user_id,
        "name": ingredient.name,
        "category": ingredient.category.value,
        "productionDate": ingredient.production_date.isoformat(),
        "shelfLifeValue": ingredient.shelf_life_value,
        "shelfLifeUnit": ingredient.shelf_life_unit.value,
        "expiryDate": ingredient.expiry_date.isoformat(),
        "initialQuantity": ingredient.initial_quantity,
        "currentQuantity": ingredient.current_quantity,
        "quantityUnit": ingredient.quantity_unit.value,
        "status": ingredient.status.value,
        "createdAt": ingredient.created_at.isoformat(),
    }


def parse_ingredient(row: dict[str, object]) -> Ingredient:
    return Ingredient(
        id=UUID(str(row["id"])),
        user_id=str(row["userId"]),
        name=str(row.get("name", "")),
        category=Category(row.get("category", Category.OTHERS.value)),
        production_date=date.fromisoformat(str(row["productionDate"])),
        shelf_life_value=int(row["shelfLifeValue"]),
        shelf_life_unit=ShelfLifeUnit(row["shelfLifeUnit"]),
        expiry_date=date.fromisoformat(str(row["expiryDate"])),
        initial_quantity=float(row["initialQuantity"]),
        current_quantity=float(row["currentQuantity"]),
        quantity_unit=QuantityUnit(row.get("quantityUnit", QuantityUnit.PCS.value)),
        status=IngredientStatus(row.get("status", IngredientStatus.ACTIVE.value)),
        created_at=datetime.fromisoformat(str(row["createdAt"])),
    )


def consumption_to_row(record: ConsumptionRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "ingredientId": str(record.ingredient_id),
        "userId": record.user_id,
        "consumedQuantity": record.consumed_quantity,
        "quantityUnit": record.quantity_unit.value,
        "consumedAt": record.consumed_at.isoformat(),
        "reason": record.reason.value,
    }


def parse_consumption(row: dict[str, object]) -> ConsumptionRecord:
    return ConsumptionRecord(
        id=UUID(str(row["id"])),
        ingredient_id=UUID(str(row["ingredientId"])),
        user_id=str(row["userId"]),
        consumed_quantity=float(row["consumedQuantity"]),
        quantity_unit=QuantityUnit(row.get("quantityUnit", QuantityUnit.PCS.value)),
        consumed_at=datetime.fromisoformat(str(row["consumedAt"])),
        reason=ConsumptionReason(row.get("reason", ConsumptionReason.OTHER.value)),
    )


def daily_status_to_row(status: DailyStatus) -> dict[str, object]:
    return {
        "id": str(status.id),
        "userId": status.user_id,
        "date": status.day.isoformat(),
        "status": status.status.value,
    }


def parse_daily_status(row: dict[str, object]) -> DailyStatus:
    return DailyStatus(
        id=UUID(str(row["id"])),
        user_id=str(row["userId"]),
        day=date.fromisoformat(str(row["date"])),
        status=DailyActivityStatus(row["status"]),
    )


def profile_to_row(profile: UserProfile) -> dict[str, object]:
    return {"id": profile.id, "name": profile.name, "avatar": profile.avatar}


def parse_profile(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        avatar=str(row.get("avatar", "")),
    )


def as_rows(key: str, value: object) -> list[dict[str, object]]:
    """Return the stored rows for a key.

    Raises RuntimeError when the stored value is not a list of rows, so a
    corrupted collection is never overwritten.
    """
    if not isinstance(value, list):
        raise RuntimeError(f"Stored collection {key} is corrupted")
    if not all(isinstance(row, dict) for row in value):
        raise RuntimeError(f"Stored collection {key} is corrupted")
    return value

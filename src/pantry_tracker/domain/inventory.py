"""Domain models for the perishable food inventory."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class Category(str, Enum):
    """Fixed food categories, in display order."""

    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    DAIRY = "dairy"
    MEAT = "meat"
    FISH = "fish"
    OTHERS = "others"


class ShelfLifeUnit(str, Enum):
    """Units a shelf life can be expressed in."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class QuantityUnit(str, Enum):
    """Units a stored quantity can be expressed in."""

    G = "g"
    ML = "ml"
    PCS = "pcs"


class IngredientStatus(str, Enum):
    """Lifecycle status of an ingredient."""

    ACTIVE = "active"
    CONSUMED = "consumed"
    DISCARDED = "discarded"


class ConsumptionReason(str, Enum):
    """Why a quantity left the inventory."""

    COOKING = "cooking"
    REMINDER = "reminder"
    DISCARD = "discard"
    OTHER = "other"


class DailyActivityStatus(str, Enum):
    """What happened in the kitchen on a given day."""

    COOKED = "cooked"
    NOT_AT_HOME = "not_at_home"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class Ingredient:
    """A tracked food unit owned by a user."""

    id: UUID
    user_id: str
    name: str
    category: Category
    production_date: date
    shelf_life_value: int
    shelf_life_unit: ShelfLifeUnit
    expiry_date: date
    initial_quantity: float
    current_quantity: float
    quantity_unit: QuantityUnit
    status: IngredientStatus
    created_at: datetime

    @property
    def is_active(self) -> bool:
        """Return whether the ingredient still counts as stock."""
        return self.status is IngredientStatus.ACTIVE


@dataclass(frozen=True)
class ConsumptionRecord:
    """Immutable record of a quantity taken from an ingredient."""

    id: UUID
    ingredient_id: UUID
    user_id: str
    consumed_quantity: float
    quantity_unit: QuantityUnit
    consumed_at: datetime
    reason: ConsumptionReason


@dataclass(frozen=True)
class DailyStatus:
    """Cooking activity for one user on one calendar day."""

    id: UUID
    user_id: str
    day: date
    status: DailyActivityStatus


@dataclass(frozen=True)
class UserProfile:
    """Owner of the inventory collections."""

    id: str
    name: str
    avatar: str


DEFAULT_PROFILE = UserProfile(id="user_1", name="默认用户", avatar="👤")

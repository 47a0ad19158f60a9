"""Domain models for weekly menus."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

from meal_planner.domain.catalog import DishIngredientLine, Unit

DayKey = Literal[
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]


@dataclass(frozen=True)
class DishItem:
    """A dish placed on a day, by portion or by target cooked weight.

    ``custom_ingredients`` replaces the dish's lines for this placement only.
    """

    dish_id: str
    portion: float | None = None
    grams: float | None = None
    custom_ingredients: tuple[DishIngredientLine, ...] | None = None
    id: str | None = None


@dataclass(frozen=True)
class IngredientItem:
    """A standalone ingredient placed on a day."""

    ingredient_id: str
    quantity: float
    unit: Unit
    id: str | None = None


MenuItem = DishItem | IngredientItem
WeeklyMenu = Mapping[str, Mapping[DayKey, Sequence[MenuItem]]]

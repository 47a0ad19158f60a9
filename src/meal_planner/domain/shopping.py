"""Domain models for shopping lists."""

from dataclasses import dataclass

from meal_planner.domain.catalog import Unit

UNKNOWN_QUANTITY = "?"


@dataclass(frozen=True)
class ShoppingListRow:
    """Purchase requirement for one ingredient over a week.

    ``to_buy`` is grams or whole pieces depending on ``unit``, or
    ``UNKNOWN_QUANTITY`` when a piece ingredient has no piece weight.
    """

    ingredient_id: str
    name: str
    unit: Unit
    required_grams: float
    to_buy: int | str
    cost: float
    remainder_grams: float = 0.0

    @property
    def resolved(self) -> bool:
        return self.to_buy != UNKNOWN_QUANTITY


@dataclass(frozen=True)
class ShoppingList:
    """Shopping list rows and their total cost."""

    rows: tuple[ShoppingListRow, ...]
    total_cost: float

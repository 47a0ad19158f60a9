"""Shopping list aggregation over a weekly menu."""

import logging
import math
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from meal_planner.domain.catalog import Catalog, Ingredient
from meal_planner.domain.menu import WeeklyMenu
from meal_planner.domain.shopping import UNKNOWN_QUANTITY, ShoppingList, ShoppingListRow
from meal_planner.services.menu import MenuService

_logger = logging.getLogger(__name__)

GRAMS_STEP = 10
# Quotients are rounded before ceil so float noise does not buy an extra unit.
_CEIL_PRECISION = 6


@dataclass
class ShoppingListService:
    """Builds a purchasable shopping list from weekly menus."""

    menu_service: MenuService

    def build(
        self,
        weekly_menu: WeeklyMenu,
        active_profile_ids: Iterable[str],
        catalog: Catalog,
    ) -> ShoppingList:
        """Sum raw grams per ingredient for active profiles and round up."""
        contributions: dict[str, list[float]] = defaultdict(list)
        for profile_id in dict.fromkeys(active_profile_ids):
            profile_menu = weekly_menu.get(profile_id) or {}
            for items in profile_menu.values():
                for item in items:
                    requirements = self.menu_service.raw_requirements(item, catalog)
                    for ingredient_id, raw_grams in requirements:
                        contributions[ingredient_id].append(raw_grams)

        rows = []
        for ingredient_id, grams in contributions.items():
            ingredient = catalog.ingredient(ingredient_id)
            if ingredient is None:
                continue
            rows.append(_build_row(ingredient, math.fsum(grams)))
        rows.sort(key=lambda row: (row.name, row.ingredient_id))

        total_cost = math.fsum(row.cost for row in rows)
        _logger.debug(
            "Shopping list built: rows=%s total_cost=%.2f", len(rows), total_cost
        )
        return ShoppingList(rows=tuple(rows), total_cost=total_cost)


def _build_row(ingredient: Ingredient, total_grams: float) -> ShoppingListRow:
    price = ingredient.price or 0.0
    if ingredient.unit == "grams":
        to_buy = _ceil(total_grams / GRAMS_STEP) * GRAMS_STEP
        return ShoppingListRow(
            ingredient_id=ingredient.id,
            name=ingredient.name,
            unit=ingredient.unit,
            required_grams=total_grams,
            to_buy=to_buy,
            cost=price / 1000 * to_buy,
        )

    grams_per_piece = ingredient.grams_per_piece
    if not grams_per_piece or grams_per_piece <= 0:
        return ShoppingListRow(
            ingredient_id=ingredient.id,
            name=ingredient.name,
            unit=ingredient.unit,
            required_grams=total_grams,
            to_buy=UNKNOWN_QUANTITY,
            cost=0.0,
        )

    pieces = _ceil(total_grams / grams_per_piece)
    return ShoppingListRow(
        ingredient_id=ingredient.id,
        name=ingredient.name,
        unit=ingredient.unit,
        required_grams=total_grams,
        to_buy=pieces,
        cost=price * pieces,
        remainder_grams=max(0.0, pieces * grams_per_piece - total_grams),
    )


def _ceil(value: float) -> int:
    return math.ceil(round(value, _CEIL_PRECISION))

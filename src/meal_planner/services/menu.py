"""Menu item resolution and daily totals."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import assert_never

from meal_planner.domain.catalog import Catalog, DishIngredientLine
from meal_planner.domain.menu import DishItem, IngredientItem, MenuItem
from meal_planner.domain.nutrition import NutritionTotals
from meal_planner.services.nutrition import NutritionService

_logger = logging.getLogger(__name__)


@dataclass
class MenuService:
    """Resolves menu items placed on a day into nutrition totals."""

    nutrition_service: NutritionService

    def resolve_item(self, item: MenuItem, catalog: Catalog) -> NutritionTotals:
        """Return totals for one menu item; unknown references resolve to zero."""
        if isinstance(item, IngredientItem):
            ingredient = catalog.ingredient(item.ingredient_id)
            if ingredient is None:
                _logger.debug("Skipping unknown ingredient_id=%s", item.ingredient_id)
                return NutritionTotals.zero()
            result = self.nutrition_service.ingredient_nutrition(
                _standalone_line(item), ingredient
            )
            return NutritionTotals(
                kcal=result.kcal,
                protein=result.protein,
                fat=result.fat,
                carbs=result.carbs,
                price=result.price,
                total_weight=result.weight,
            )
        if isinstance(item, DishItem):
            lines = self._dish_lines(item, catalog)
            if lines is None:
                return NutritionTotals.zero()
            base = self.nutrition_service.lines_totals(lines, catalog)
            return base.scaled(_scale_factor(item, base))
        assert_never(item)

    def day_totals(
        self, items: Iterable[MenuItem], catalog: Catalog
    ) -> NutritionTotals:
        """Sum resolved totals for every item of a day."""
        total = NutritionTotals.zero()
        for item in items:
            resolved = self.resolve_item(item, catalog)
            total = NutritionTotals(
                kcal=total.kcal + resolved.kcal,
                protein=total.protein + resolved.protein,
                fat=total.fat + resolved.fat,
                carbs=total.carbs + resolved.carbs,
                price=total.price + resolved.price,
                total_weight=total.total_weight + resolved.total_weight,
            )
        return total

    def raw_requirements(
        self, item: MenuItem, catalog: Catalog
    ) -> list[tuple[str, float]]:
        """Return (ingredient_id, raw grams) pairs needed to cook a menu item."""
        if isinstance(item, IngredientItem):
            ingredient = catalog.ingredient(item.ingredient_id)
            if ingredient is None:
                _logger.debug("Skipping unknown ingredient_id=%s", item.ingredient_id)
                return []
            result = self.nutrition_service.ingredient_nutrition(
                _standalone_line(item), ingredient
            )
            return [(ingredient.id, result.raw_weight)]
        if isinstance(item, DishItem):
            lines = self._dish_lines(item, catalog)
            if not lines:
                return []
            base = self.nutrition_service.lines_totals(lines, catalog)
            factor = _scale_factor(item, base)
            requirements = []
            for line in lines:
                ingredient = catalog.ingredient(line.ingredient_id)
                if ingredient is None:
                    continue
                result = self.nutrition_service.ingredient_nutrition(
                    line, ingredient, factor, line.cooking_method
                )
                requirements.append((ingredient.id, result.raw_weight))
            return requirements
        assert_never(item)

    @staticmethod
    def _dish_lines(
        item: DishItem, catalog: Catalog
    ) -> tuple[DishIngredientLine, ...] | None:
        dish = catalog.dish(item.dish_id)
        if dish is None:
            _logger.debug("Skipping unknown dish_id=%s", item.dish_id)
            return None
        if item.custom_ingredients:
            return item.custom_ingredients
        return dish.ingredients


def _standalone_line(item: IngredientItem) -> DishIngredientLine:
    return DishIngredientLine(
        ingredient_id=item.ingredient_id,
        quantity=item.quantity,
        unit=item.unit,
    )


def _scale_factor(item: DishItem, base: NutritionTotals) -> float:
    """Scale a dish to a target cooked weight, or by portion."""
    if item.grams:
        if base.total_weight <= 0:
            return 0.0
        return item.grams / base.total_weight
    return item.portion or 1.0

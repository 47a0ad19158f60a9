"""Nutrition service for ingredient lines and dishes."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from meal_planner.domain.catalog import Catalog, Dish, DishIngredientLine, Ingredient
from meal_planner.domain.nutrition import IngredientNutrition, NutritionTotals
from meal_planner.services.cooking import RAW, CookingConverter

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Computes calories, macros, price and weight for lines and dishes."""

    converter: CookingConverter = field(default_factory=CookingConverter)

    def ingredient_nutrition(
        self,
        line: DishIngredientLine | None,
        ingredient: Ingredient | None,
        portion_multiplier: float = 1.0,
        cooking_method: str | None = None,
    ) -> IngredientNutrition:
        """Compute nutrition for one line against its ingredient record.

        The line quantity is the cooked amount. Macros are concentrated by the
        cooking yield, while price follows the raw weight that is bought.
        """
        if line is None or ingredient is None:
            return IngredientNutrition.zero()

        quantity = (line.quantity or 0.0) * portion_multiplier
        if line.unit == "grams":
            cooked_weight = quantity
        else:
            cooked_weight = quantity * (ingredient.grams_per_piece or 0.0)

        method = cooking_method or line.cooking_method or RAW
        raw_weight = self.converter.raw_weight(cooked_weight, method)
        macros = self.converter.cooked_macros(ingredient.macros_per_100g, method)
        portion = macros.scaled(cooked_weight / 100)

        return IngredientNutrition(
            kcal=portion.kcal,
            protein=portion.protein,
            fat=portion.fat,
            carbs=portion.carbs,
            price=_raw_price(ingredient, raw_weight),
            weight=cooked_weight,
            raw_weight=raw_weight,
        )

    def lines_totals(
        self,
        lines: Iterable[DishIngredientLine],
        catalog: Catalog,
        portion_multiplier: float = 1.0,
    ) -> NutritionTotals:
        """Sum the nutrition of ingredient lines at a portion multiplier."""
        total = NutritionTotals.zero()
        for line in lines:
            ingredient = catalog.ingredient(line.ingredient_id)
            if ingredient is None:
                _logger.debug("Unknown ingredient_id=%s", line.ingredient_id)
            result = self.ingredient_nutrition(
                line, ingredient, portion_multiplier, line.cooking_method
            )
            total = NutritionTotals(
                kcal=total.kcal + result.kcal,
                protein=total.protein + result.protein,
                fat=total.fat + result.fat,
                carbs=total.carbs + result.carbs,
                price=total.price + result.price,
                total_weight=total.total_weight + result.weight,
            )
        return total

    def dish_totals(
        self, dish: Dish | None, catalog: Catalog, portion_multiplier: float = 1.0
    ) -> NutritionTotals:
        """Return totals for a dish, or zeros when the dish is missing."""
        if dish is None or not dish.ingredients:
            return NutritionTotals.zero()
        return self.lines_totals(dish.ingredients, catalog, portion_multiplier)

    @staticmethod
    def per_100g(totals: NutritionTotals) -> NutritionTotals:
        """Express totals per 100 g of finished weight."""
        if totals.total_weight <= 0:
            return NutritionTotals.zero()
        return totals.scaled(100 / totals.total_weight)


def _raw_price(ingredient: Ingredient, raw_weight: float) -> float:
    price = ingredient.price or 0.0
    if ingredient.unit == "grams":
        return price / 1000 * raw_weight
    if ingredient.grams_per_piece and ingredient.grams_per_piece > 0:
        return price * (raw_weight / ingredient.grams_per_piece)
    return 0.0

"""Tests for ingredient line and dish nutrition."""

import math

import pytest

from meal_planner.domain.catalog import Catalog, Dish, DishIngredientLine
from meal_planner.domain.nutrition import IngredientNutrition, NutritionTotals
from meal_planner.services.nutrition import NutritionService
from tests.conftest import CHICKEN, CHICKEN_WITH_RICE, EGG, LEMON


def test_fried_chicken_scenario(nutrition_service: NutritionService) -> None:
    line = DishIngredientLine("chicken", 150, "grams", "fried")

    result = nutrition_service.ingredient_nutrition(line, CHICKEN)

    assert result.weight == 150
    assert result.raw_weight == pytest.approx(214.2857, rel=1e-5)
    assert result.price == pytest.approx(42.857, rel=1e-4)
    assert result.kcal == pytest.approx(353.571, rel=1e-5)
    assert result.protein == pytest.approx(66.4286, rel=1e-5)
    assert result.carbs == 0


def test_price_follows_raw_weight(nutrition_service: NutritionService) -> None:
    line = DishIngredientLine("chicken", 100, "grams", "boiled")

    result = nutrition_service.ingredient_nutrition(line, CHICKEN)

    assert result.raw_weight == pytest.approx(142.857, rel=1e-5)
    assert result.price == pytest.approx(200 / 1000 * result.raw_weight)


def test_raw_line_uses_reference_macros(nutrition_service: NutritionService) -> None:
    line = DishIngredientLine("chicken", 200, "grams")

    result = nutrition_service.ingredient_nutrition(line, CHICKEN)

    assert result.kcal == pytest.approx(330)
    assert result.price == pytest.approx(40)
    assert result.weight == result.raw_weight == 200


def test_pieces_convert_through_piece_weight(
    nutrition_service: NutritionService,
) -> None:
    line = DishIngredientLine("egg", 1, "pieces", "boiled")

    result = nutrition_service.ingredient_nutrition(line, EGG)

    assert result.weight == 50
    assert result.raw_weight == pytest.approx(71.4286, rel=1e-5)
    assert result.price == pytest.approx(12 * 71.4286 / 50, rel=1e-5)


def test_pieces_without_piece_weight_are_zero(
    nutrition_service: NutritionService,
) -> None:
    line = DishIngredientLine("lemon", 2, "pieces")

    result = nutrition_service.ingredient_nutrition(line, LEMON)

    assert result == IngredientNutrition.zero()


def test_portion_multiplier_and_method_override(
    nutrition_service: NutritionService,
) -> None:
    line = DishIngredientLine("chicken", 100, "grams", "raw")

    result = nutrition_service.ingredient_nutrition(
        line, CHICKEN, portion_multiplier=1.5, cooking_method="fried"
    )

    assert result.weight == 150
    assert result.kcal == pytest.approx(353.571, rel=1e-5)


def test_missing_ingredient_returns_zero(nutrition_service: NutritionService) -> None:
    line = DishIngredientLine("unknown", 100, "grams")

    assert nutrition_service.ingredient_nutrition(line, None) == (
        IngredientNutrition.zero()
    )
    assert nutrition_service.ingredient_nutrition(None, CHICKEN) == (
        IngredientNutrition.zero()
    )


def test_dish_totals_sum_lines(
    nutrition_service: NutritionService, catalog: Catalog
) -> None:
    totals = nutrition_service.dish_totals(CHICKEN_WITH_RICE, catalog)

    assert totals.total_weight == pytest.approx(350)
    assert totals.kcal == pytest.approx(725)
    assert totals.price == pytest.approx(71.4286, rel=1e-5)


def test_dish_totals_scale_with_portion(
    nutrition_service: NutritionService, catalog: Catalog
) -> None:
    totals = nutrition_service.dish_totals(CHICKEN_WITH_RICE, catalog, 0.5)

    assert totals.total_weight == pytest.approx(175)
    assert totals.kcal == pytest.approx(362.5)


def test_dish_totals_skip_unknown_ingredients(
    nutrition_service: NutritionService, catalog: Catalog
) -> None:
    dish = Dish(
        id="d",
        name="Mystery",
        ingredients=(
            DishIngredientLine("chicken", 100, "grams"),
            DishIngredientLine("missing", 500, "grams"),
        ),
    )

    totals = nutrition_service.dish_totals(dish, catalog)

    assert totals.total_weight == 100
    assert totals.kcal == pytest.approx(165)


def test_empty_or_missing_dish_is_zero(
    nutrition_service: NutritionService, catalog: Catalog
) -> None:
    assert nutrition_service.dish_totals(None, catalog) == NutritionTotals.zero()
    assert nutrition_service.dish_totals(
        Dish(id="e", name="Empty"), catalog
    ) == NutritionTotals.zero()


def test_per_100g(nutrition_service: NutritionService, catalog: Catalog) -> None:
    totals = nutrition_service.dish_totals(CHICKEN_WITH_RICE, catalog)

    per_100g = nutrition_service.per_100g(totals)

    assert per_100g.total_weight == pytest.approx(100)
    assert per_100g.kcal == pytest.approx(725 / 3.5)


def test_per_100g_of_weightless_totals_is_zero() -> None:
    per_100g = NutritionService.per_100g(NutritionTotals(10, 1, 1, 1, 5, 0))

    assert per_100g == NutritionTotals.zero()
    assert not any(math.isnan(value) for value in vars(per_100g).values())

"""Tests for the cooking converter."""

import pytest

from meal_planner.domain.nutrition import MacroProfile
from meal_planner.services.cooking import CookingConverter


@pytest.mark.parametrize(
    ("method", "ratio"),
    [("raw", 1.0), ("fried", 0.7), ("boiled", 0.7), ("baked", 0.7)],
)
def test_default_yield_ratios(method: str, ratio: float) -> None:
    assert CookingConverter().yield_ratio(method) == ratio


def test_unknown_or_missing_method_is_raw() -> None:
    converter = CookingConverter()

    assert converter.yield_ratio(None) == 1.0
    assert converter.yield_ratio("") == 1.0
    assert converter.yield_ratio("smoked") == 1.0


def test_non_positive_ratio_is_treated_as_one() -> None:
    converter = CookingConverter(ratios={"raw": 1.0, "grilled": 0.0, "steamed": -1})

    assert converter.yield_ratio("grilled") == 1.0
    assert converter.yield_ratio("steamed") == 1.0
    assert converter.raw_weight(100, "grilled") == 100


def test_weights_convert_both_ways() -> None:
    converter = CookingConverter()

    raw = converter.raw_weight(150, "fried")

    assert raw == pytest.approx(214.2857, rel=1e-5)
    assert converter.cooked_weight(raw, "fried") == pytest.approx(150)


@pytest.mark.parametrize("method", ["raw", "fried", "boiled", "baked"])
def test_macro_conversion_round_trips(method: str) -> None:
    converter = CookingConverter()
    raw = MacroProfile(kcal=165, protein=31, fat=3.6, carbs=0)

    restored = converter.raw_macros(converter.cooked_macros(raw, method), method)

    assert restored.kcal == pytest.approx(raw.kcal)
    assert restored.protein == pytest.approx(raw.protein)
    assert restored.fat == pytest.approx(raw.fat)
    assert restored.carbs == pytest.approx(raw.carbs)


def test_cooking_concentrates_macros() -> None:
    cooked = CookingConverter().cooked_macros(
        MacroProfile(kcal=165, protein=31, fat=3.6, carbs=0), "fried"
    )

    assert cooked.kcal == pytest.approx(235.714, rel=1e-5)


def test_with_overrides_keeps_other_defaults() -> None:
    converter = CookingConverter.with_overrides({"fried": 0.65, "steamed": 0.9})

    assert converter.yield_ratio("fried") == 0.65
    assert converter.yield_ratio("steamed") == 0.9
    assert converter.yield_ratio("boiled") == 0.7
    assert converter.yield_ratio("raw") == 1.0

"""Classify how far a consumed amount deviates from its target."""

from typing import Literal

from meal_planner.domain.profiles import MacroField, Profile

NutrientClass = Literal["good", "bad", "neutral"]

# mode -> nutrient -> acceptable (low, high) relative deviation from target
_DEVIATION_BANDS: dict[str, dict[str, tuple[float, float]]] = {
    "maintenance": {
        "kcal": (-0.2, 0.1),
        "fat": (-0.1, 0.1),
        "carbs": (-0.1, 0.1),
    },
    "cutting": {
        "kcal": (-0.15, 0.05),
        "protein": (-0.05, 0.4),
        "fat": (-0.1, 0.1),
    },
    "bulking": {
        "kcal": (-0.05, 0.15),
        "fat": (-0.1, 0.1),
        "carbs": (-0.15, 0.15),
    },
}

MAINTENANCE_MIN_PROTEIN_PER_KG = 1.8
BULKING_MIN_PROTEIN_PER_KG = 2.2
BULKING_MAX_PROTEIN_DEVIATION = 0.4
CUTTING_MIN_CARBS_G = 75
CUTTING_MAX_CARBS_DEVIATION = 0.1


def classify_nutrient(
    nutrient: MacroField,
    value: float,
    target: float,
    profile: Profile | None,
) -> NutrientClass:
    """Return whether a value is within the profile mode's acceptable band."""
    if profile is None or target == 0:
        return "neutral"

    deviation = (value - target) / target
    weight = profile.weight if profile.weight and profile.weight > 0 else None
    mode = profile.nutrition_mode
    if mode not in _DEVIATION_BANDS:
        mode = "maintenance"

    if mode == "maintenance" and nutrient == "protein":
        return _good_if(
            weight is not None and value >= MAINTENANCE_MIN_PROTEIN_PER_KG * weight
        )
    if mode == "bulking" and nutrient == "protein":
        return _good_if(
            weight is not None
            and value >= BULKING_MIN_PROTEIN_PER_KG * weight
            and deviation <= BULKING_MAX_PROTEIN_DEVIATION
        )
    if mode == "cutting" and nutrient == "carbs":
        return _good_if(
            value >= CUTTING_MIN_CARBS_G and deviation <= CUTTING_MAX_CARBS_DEVIATION
        )

    band = _DEVIATION_BANDS[mode].get(nutrient)
    if band is None:
        return "neutral"
    low, high = band
    return _good_if(low <= deviation <= high)


def _good_if(condition: bool) -> NutrientClass:
    return "good" if condition else "bad"

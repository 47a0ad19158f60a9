"""Domain models for nutrition profiles."""

from dataclasses import dataclass
from typing import Literal

Gender = Literal["male", "female"]
NutritionMode = Literal["maintenance", "cutting", "bulking"]
MacroField = Literal["kcal", "protein", "fat", "carbs"]

ACTIVITY_LEVELS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "high": 1.725,
    "extreme": 1.9,
}


@dataclass(frozen=True)
class Profile:
    """Physiology and target settings for one person."""

    id: str
    name: str
    weight: float | None
    height: float | None
    age: float | None
    gender: Gender = "female"
    activity: float | None = ACTIVITY_LEVELS["light"]
    nutrition_mode: NutritionMode = "maintenance"
    use_custom_targets: bool = False
    custom_kcal: float | None = None
    custom_protein: float | None = None
    custom_fat: float | None = None
    custom_carbs: float | None = None
    lock_kcal: bool = False
    lock_protein: bool = False
    lock_fat: bool = False
    lock_carbs: bool = False

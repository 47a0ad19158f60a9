"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroProfile:
    """Calories and macronutrients, usually per 100 g."""

    kcal: float
    protein: float
    fat: float
    carbs: float

    def scaled(self, factor: float) -> "MacroProfile":
        """Return the profile multiplied by a factor."""
        return MacroProfile(
            kcal=self.kcal * factor,
            protein=self.protein * factor,
            fat=self.fat * factor,
            carbs=self.carbs * factor,
        )


@dataclass(frozen=True)
class IngredientNutrition:
    """Nutrition, price and weights for one ingredient line.

    ``weight`` is the cooked weight on the plate, ``raw_weight`` the weight
    that has to be bought.
    """

    kcal: float
    protein: float
    fat: float
    carbs: float
    price: float
    weight: float
    raw_weight: float

    @classmethod
    def zero(cls) -> "IngredientNutrition":
        return cls(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class NutritionTotals:
    """Aggregated totals for a dish, menu item or day."""

    kcal: float
    protein: float
    fat: float
    carbs: float
    price: float
    total_weight: float

    @classmethod
    def zero(cls) -> "NutritionTotals":
        return cls(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def scaled(self, factor: float) -> "NutritionTotals":
        """Return the totals multiplied by a factor."""
        return NutritionTotals(
            kcal=self.kcal * factor,
            protein=self.protein * factor,
            fat=self.fat * factor,
            carbs=self.carbs * factor,
            price=self.price * factor,
            total_weight=self.total_weight * factor,
        )


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie and macro targets for a profile."""

    kcal: float
    protein: float
    fat: float
    carbs: float

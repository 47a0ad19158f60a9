"""Daily nutrition targets and custom target balancing."""

import logging
import math
from dataclasses import dataclass, replace

from meal_planner.domain.nutrition import NutritionTargets
from meal_planner.domain.profiles import (
    ACTIVITY_LEVELS,
    MacroField,
    NutritionMode,
    Profile,
)

_logger = logging.getLogger(__name__)

KCAL_PER_GRAM = {"protein": 4, "fat": 9, "carbs": 4}

# Macro that absorbs a calorie mismatch first when it is unlocked.
BALANCE_PRIORITY: tuple[MacroField, ...] = ("carbs", "fat", "protein")

_MODE_FACTORS: dict[str, tuple[float, float, float]] = {
    # mode: (kcal factor, protein g/kg, fat g/kg)
    "maintenance": (1.0, 2.0, 0.8),
    "cutting": (0.8, 2.0, 0.8),
    "bulking": (1.2, 2.5, 0.7),
}

_CONSISTENT_KCAL_DELTA = 0.5


def calculate_bmr(profile: Profile) -> float:
    """Return the Mifflin-St Jeor BMR, or 0 for incomplete physiology."""
    weight, height, age = profile.weight, profile.height, profile.age
    if not weight or not height or not age:
        return 0.0
    if weight <= 0 or height <= 0 or age <= 0:
        return 0.0
    base = 10 * weight + 6.25 * height - 5 * age
    return base + 5 if profile.gender == "male" else base - 161


@dataclass
class TargetService:
    """Service deriving daily targets from profile settings."""

    default_activity: float = ACTIVITY_LEVELS["light"]

    def formula_target(
        self, profile: Profile, mode: NutritionMode | None = None
    ) -> NutritionTargets:
        """Return the formula target for a mode, ignoring custom values."""
        tdee = calculate_bmr(profile) * (profile.activity or self.default_activity)
        resolved_mode = mode or profile.nutrition_mode or "maintenance"
        kcal_factor, protein_factor, fat_factor = _MODE_FACTORS.get(
            resolved_mode, _MODE_FACTORS["maintenance"]
        )
        weight = profile.weight if profile.weight and profile.weight > 0 else 0.0
        kcal = tdee * kcal_factor
        protein = weight * protein_factor
        fat = weight * fat_factor
        carbs = (kcal - protein * 4 - fat * 9) / 4
        return NutritionTargets(kcal=kcal, protein=protein, fat=fat, carbs=carbs)

    def target(self, profile: Profile) -> NutritionTargets:
        """Return custom targets when valid, otherwise the formula target."""
        if profile.use_custom_targets:
            custom = _valid_custom_targets(profile)
            if custom is not None:
                return custom
            _logger.debug("Invalid custom targets for profile=%s", profile.id)
        return self.formula_target(profile)

    def rebalance(
        self, profile: Profile, changed_field: MacroField | None = None
    ) -> Profile:
        """Reconcile custom kcal with custom macros, honoring locks.

        The first unlocked macro in ``BALANCE_PRIORITY`` that was not just
        edited absorbs the calorie difference. An edited kcal value is kept
        as entered; an edited macro makes kcal follow the macros.
        """
        values: dict[str, float] = {
            "kcal": profile.custom_kcal or 0.0,
            "protein": profile.custom_protein or 0.0,
            "fat": profile.custom_fat or 0.0,
            "carbs": profile.custom_carbs or 0.0,
        }
        if not any(values.values()):
            seed = self.formula_target(profile, mode="maintenance")
            values = {
                "kcal": seed.kcal,
                "protein": seed.protein,
                "fat": seed.fat,
                "carbs": seed.carbs,
            }
        for name in KCAL_PER_GRAM:
            values[name] = max(0.0, values[name])

        macro_kcal = _macro_kcal(values)
        if not values["kcal"] and macro_kcal > 0:
            values["kcal"] = macro_kcal

        diff = values["kcal"] - macro_kcal
        if abs(diff) >= _CONSISTENT_KCAL_DELTA:
            adjustable = [
                name
                for name in _unlocked_macros(profile)
                if name != changed_field
            ]
            if not adjustable:
                values["kcal"] = macro_kcal
            else:
                name = adjustable[0]
                values[name] = max(0.0, values[name] + diff / KCAL_PER_GRAM[name])
                if changed_field != "kcal":
                    values["kcal"] = _macro_kcal(values)

        return replace(
            profile,
            custom_kcal=_round_half_up(values["kcal"]),
            custom_protein=_round_half_up(values["protein"]),
            custom_fat=_round_half_up(values["fat"]),
            custom_carbs=_round_half_up(values["carbs"]),
        )

    def enable_custom_targets(self, profile: Profile) -> Profile:
        """Switch to custom targets seeded from the maintenance formula."""
        seed = self.formula_target(profile, mode="maintenance")
        seeded = replace(
            profile,
            use_custom_targets=True,
            custom_kcal=_round_half_up(seed.kcal),
            custom_protein=_round_half_up(seed.protein),
            custom_fat=_round_half_up(seed.fat),
            custom_carbs=_round_half_up(seed.carbs),
            lock_kcal=False,
            lock_protein=False,
            lock_fat=False,
            lock_carbs=False,
        )
        return self.rebalance(seeded)

    @staticmethod
    def disable_custom_targets(profile: Profile) -> Profile:
        """Switch back to formula targets, keeping stored custom values."""
        return replace(profile, use_custom_targets=False)

    def update_custom_target(
        self, profile: Profile, field: MacroField, value: float | None
    ) -> Profile:
        """Store an edited custom value and rebalance around it."""
        updated = replace(profile, **{f"custom_{field}": value})
        if not updated.use_custom_targets:
            return updated
        return self.rebalance(updated, changed_field=field)

    def set_lock(self, profile: Profile, field: MacroField, locked: bool) -> Profile:
        """Lock or unlock a custom value and rebalance."""
        updated = replace(profile, **{f"lock_{field}": locked})
        if not updated.use_custom_targets:
            return updated
        return self.rebalance(updated)


def _valid_custom_targets(profile: Profile) -> NutritionTargets | None:
    kcal = profile.custom_kcal
    macros = (profile.custom_protein, profile.custom_fat, profile.custom_carbs)
    if kcal is None or kcal <= 0:
        return None
    if any(value is None or value < 0 for value in macros):
        return None
    protein, fat, carbs = macros
    return NutritionTargets(kcal=kcal, protein=protein, fat=fat, carbs=carbs)


def _unlocked_macros(profile: Profile) -> list[MacroField]:
    locks = {
        "carbs": profile.lock_carbs,
        "fat": profile.lock_fat,
        "protein": profile.lock_protein,
    }
    return [name for name in BALANCE_PRIORITY if not locks[name]]


def _macro_kcal(values: dict[str, float]) -> float:
    return sum(values[name] * per_gram for name, per_gram in KCAL_PER_GRAM.items())


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)

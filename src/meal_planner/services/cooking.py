"""Raw/cooked weight conversion by cooking method."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from meal_planner.domain.nutrition import MacroProfile

RAW = "raw"

# Cooked grams obtained from one raw gram; ~30% is lost when cooking.
DEFAULT_YIELD_RATIOS: dict[str, float] = {
    "raw": 1.0,
    "fried": 0.7,
    "boiled": 0.7,
    "baked": 0.7,
}


@dataclass(frozen=True)
class CookingConverter:
    """Converts weights and macros using a method -> yield ratio table."""

    ratios: Mapping[str, float] = field(
        default_factory=lambda: dict(DEFAULT_YIELD_RATIOS)
    )

    @classmethod
    def with_overrides(cls, overrides: Mapping[str, float]) -> "CookingConverter":
        """Create a converter from the default table updated by overrides."""
        return cls(ratios={**DEFAULT_YIELD_RATIOS, **overrides})

    def yield_ratio(self, method: str | None) -> float:
        """Return the cooked/raw ratio, falling back to raw for unknown methods."""
        ratio = self.ratios.get(method or RAW)
        if ratio is None:
            ratio = self.ratios.get(RAW, 1.0)
        if ratio <= 0:
            return 1.0
        return ratio

    def raw_weight(self, cooked_weight: float, method: str | None) -> float:
        """Return the raw weight needed for a cooked weight."""
        return cooked_weight / self.yield_ratio(method)

    def cooked_weight(self, raw_weight: float, method: str | None) -> float:
        """Return the cooked weight produced from a raw weight."""
        return raw_weight * self.yield_ratio(method)

    def cooked_macros(
        self, per_100g_raw: MacroProfile, method: str | None
    ) -> MacroProfile:
        """Convert per-100g-raw macros to per-100g-cooked macros."""
        return per_100g_raw.scaled(1 / self.yield_ratio(method))

    def raw_macros(
        self, per_100g_cooked: MacroProfile, method: str | None
    ) -> MacroProfile:
        """Convert per-100g-cooked macros back to per-100g-raw macros."""
        return per_100g_cooked.scaled(self.yield_ratio(method))

"""Dish listing with search and ranking by derived totals."""

from dataclasses import dataclass
from typing import Literal

from meal_planner.domain.catalog import Catalog, Dish
from meal_planner.domain.nutrition import NutritionTotals
from meal_planner.services.nutrition import NutritionService

DishSort = Literal[
    "name-asc",
    "name-desc",
    "kcal-desc",
    "protein-desc",
    "protein100-desc",
    "price-asc",
]


@dataclass(frozen=True)
class DishSummary:
    """A dish with its single-portion totals and per-100g values."""

    dish: Dish
    totals: NutritionTotals
    per_100g: NutritionTotals


@dataclass
class DishListingService:
    """Lists catalog dishes filtered by name and ranked by a sort key."""

    nutrition_service: NutritionService

    def summarize(self, dish: Dish, catalog: Catalog) -> DishSummary:
        """Return totals for one portion of a dish and its per-100g values."""
        totals = self.nutrition_service.dish_totals(dish, catalog)
        return DishSummary(
            dish=dish, totals=totals, per_100g=self.nutrition_service.per_100g(totals)
        )

    def list_dishes(
        self, catalog: Catalog, query: str | None = None, sort: DishSort = "name-asc"
    ) -> list[DishSummary]:
        """Return dishes whose name contains the query, ranked by ``sort``.

        Unknown sort keys fall back to name order.
        """
        term = (query or "").strip().casefold()
        summaries = [
            self.summarize(dish, catalog)
            for dish in catalog.dishes.values()
            if not term or term in (dish.name or "").casefold()
        ]
        return self._rank(summaries, sort)

    @staticmethod
    def _rank(summaries: list[DishSummary], sort: DishSort) -> list[DishSummary]:
        if sort == "kcal-desc":
            return sorted(summaries, key=lambda item: item.totals.kcal, reverse=True)
        if sort == "protein-desc":
            return sorted(
                summaries, key=lambda item: item.totals.protein, reverse=True
            )
        if sort == "protein100-desc":
            return sorted(
                summaries, key=lambda item: item.per_100g.protein, reverse=True
            )
        if sort == "price-asc":
            return sorted(summaries, key=lambda item: item.totals.price)
        return sorted(
            summaries,
            key=lambda item: (item.dish.name or "").casefold(),
            reverse=sort == "name-desc",
        )

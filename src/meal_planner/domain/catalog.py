"""Domain models for the ingredient and dish catalogs."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from meal_planner.domain.nutrition import MacroProfile

Unit = Literal["grams", "pieces"]


@dataclass(frozen=True)
class Ingredient:
    """Reference record for an ingredient.

    Macros are per 100 g of raw ingredient. ``price`` is per 1000 g when
    ``unit`` is grams and per piece when it is pieces.
    """

    id: str
    name: str
    unit: Unit
    price: float
    kcal: float
    protein: float
    fat: float
    carbs: float
    grams_per_piece: float | None = None

    @property
    def macros_per_100g(self) -> MacroProfile:
        return MacroProfile(
            kcal=self.kcal or 0.0,
            protein=self.protein or 0.0,
            fat=self.fat or 0.0,
            carbs=self.carbs or 0.0,
        )


@dataclass(frozen=True)
class DishIngredientLine:
    """Cooked amount of an ingredient used in a dish."""

    ingredient_id: str
    quantity: float
    unit: Unit
    cooking_method: str | None = "raw"


@dataclass(frozen=True)
class Dish:
    """A composed dish referencing catalog ingredients."""

    id: str
    name: str
    ingredients: tuple[DishIngredientLine, ...] = ()
    cooking_time: int | None = None
    recipe: str = ""


@dataclass(frozen=True)
class Catalog:
    """Read-only snapshot of ingredients and dishes indexed by id."""

    ingredients: dict[str, Ingredient] = field(default_factory=dict)
    dishes: dict[str, Dish] = field(default_factory=dict)

    @classmethod
    def build(
        cls, ingredients: Iterable[Ingredient], dishes: Iterable[Dish] = ()
    ) -> "Catalog":
        """Index ingredient and dish records by id."""
        return cls(
            ingredients={ingredient.id: ingredient for ingredient in ingredients},
            dishes={dish.id: dish for dish in dishes},
        )

    def ingredient(self, ingredient_id: str) -> Ingredient | None:
        return self.ingredients.get(ingredient_id)

    def dish(self, dish_id: str) -> Dish | None:
        return self.dishes.get(dish_id)

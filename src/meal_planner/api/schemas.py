"""Pydantic models for API payloads."""

from dataclasses import asdict
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from pydantic.alias_generators import to_camel

from meal_planner.domain.catalog import (
    Catalog,
    Dish,
    DishIngredientLine,
    Ingredient,
    Unit,
)
from meal_planner.domain.menu import DayKey, DishItem, IngredientItem, MenuItem
from meal_planner.domain.nutrition import (
    IngredientNutrition,
    NutritionTargets,
    NutritionTotals,
)
from meal_planner.domain.profiles import Gender, MacroField, NutritionMode, Profile
from meal_planner.domain.shopping import ShoppingList
from meal_planner.services.dishes import DishSort, DishSummary


class CamelModel(BaseModel):
    """Base model accepting camelCase or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IngredientPayload(CamelModel):
    """Ingredient reference record, macros per 100 g raw."""

    id: str
    name: str = ""
    unit: Unit = "grams"
    price: float = Field(default=0.0, ge=0)
    grams_per_piece: float | None = Field(default=None, ge=0)
    kcal: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)

    def to_domain(self) -> Ingredient:
        return Ingredient(
            id=self.id,
            name=self.name,
            unit=self.unit,
            price=self.price,
            grams_per_piece=self.grams_per_piece,
            kcal=self.kcal,
            protein=self.protein,
            fat=self.fat,
            carbs=self.carbs,
        )


class DishIngredientLinePayload(CamelModel):
    """Cooked amount of an ingredient within a dish."""

    ingredient_id: str
    quantity: float = Field(ge=0)
    unit: Unit = "grams"
    cooking_method: str | None = "raw"

    def to_domain(self) -> DishIngredientLine:
        return DishIngredientLine(
            ingredient_id=self.ingredient_id,
            quantity=self.quantity,
            unit=self.unit,
            cooking_method=self.cooking_method,
        )


class DishPayload(CamelModel):
    """Dish record with its ingredient lines."""

    id: str
    name: str = ""
    cooking_time: int | None = None
    recipe: str = ""
    ingredients: list[DishIngredientLinePayload] = Field(default_factory=list)

    def to_domain(self) -> Dish:
        return Dish(
            id=self.id,
            name=self.name,
            cooking_time=self.cooking_time,
            recipe=self.recipe,
            ingredients=tuple(line.to_domain() for line in self.ingredients),
        )


class DishItemPayload(CamelModel):
    """Menu entry referencing a dish."""

    item_type: Literal["dish"] = "dish"
    id: str | None = None
    dish_id: str
    portion: float | None = Field(default=None, ge=0)
    grams: float | None = Field(default=None, ge=0)
    custom_ingredients: list[DishIngredientLinePayload] | None = None

    def to_domain(self) -> DishItem:
        custom = None
        if self.custom_ingredients is not None:
            custom = tuple(line.to_domain() for line in self.custom_ingredients)
        return DishItem(
            dish_id=self.dish_id,
            portion=self.portion,
            grams=self.grams,
            custom_ingredients=custom,
            id=self.id,
        )


class IngredientItemPayload(CamelModel):
    """Menu entry referencing a standalone ingredient."""

    item_type: Literal["ingredient"] = "ingredient"
    id: str | None = None
    ingredient_id: str
    quantity: float = Field(ge=0)
    unit: Unit = "grams"

    def to_domain(self) -> IngredientItem:
        return IngredientItem(
            ingredient_id=self.ingredient_id,
            quantity=self.quantity,
            unit=self.unit,
            id=self.id,
        )


def _menu_item_kind(value: object) -> str | None:
    """Return the menu item tag, inferring it from reference ids if absent."""
    if isinstance(value, dict):
        kind = value.get("itemType") or value.get("item_type")
        if kind:
            return str(kind)
        if value.get("dishId") or value.get("dish_id"):
            return "dish"
        return "ingredient"
    return getattr(value, "item_type", None)


MenuItemPayload = Annotated[
    Annotated[DishItemPayload, Tag("dish")]
    | Annotated[IngredientItemPayload, Tag("ingredient")],
    Discriminator(_menu_item_kind),
]


class ProfilePayload(CamelModel):
    """Profile physiology and target settings."""

    id: str
    name: str = ""
    weight: float | None = None
    height: float | None = None
    age: float | None = None
    gender: Gender = "female"
    activity: float | None = None
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

    def to_domain(self) -> Profile:
        return Profile(**self.model_dump())

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfilePayload":
        return cls(**asdict(profile))


class CatalogRequest(CamelModel):
    """Base request carrying catalog snapshots."""

    ingredients: list[IngredientPayload] = Field(default_factory=list)
    dishes: list[DishPayload] = Field(default_factory=list)

    def catalog(self) -> Catalog:
        return Catalog.build(
            (ingredient.to_domain() for ingredient in self.ingredients),
            (dish.to_domain() for dish in self.dishes),
        )


class IngredientLineRequest(CamelModel):
    """Request to resolve a single ingredient line."""

    line: DishIngredientLinePayload
    ingredient: IngredientPayload | None = None
    portion_multiplier: float = Field(default=1.0, ge=0)
    cooking_method: str | None = None


class DishRequest(CatalogRequest):
    """Request to total a dish at a portion multiplier."""

    dish: DishPayload
    portion_multiplier: float = Field(default=1.0, ge=0)


class DishListRequest(CatalogRequest):
    """Request to search and rank the catalog dishes."""

    query: str | None = None
    sort: DishSort = "name-asc"


class MenuItemRequest(CatalogRequest):
    """Request to resolve one menu item."""

    item: MenuItemPayload


class MenuDayRequest(CatalogRequest):
    """Request to total a day of menu items, optionally against a profile."""

    items: list[MenuItemPayload] = Field(default_factory=list)
    profile: ProfilePayload | None = None


class ShoppingListRequest(CatalogRequest):
    """Request to build a weekly shopping list."""

    weekly_menu: dict[str, dict[DayKey, list[MenuItemPayload]]] = Field(
        default_factory=dict
    )
    active_profile_ids: list[str] = Field(default_factory=list)

    def menu(self) -> dict[str, dict[DayKey, list[MenuItem]]]:
        return {
            profile_id: {
                day: [item.to_domain() for item in items]
                for day, items in days.items()
            }
            for profile_id, days in self.weekly_menu.items()
        }


class TargetRequest(CamelModel):
    """Request for a profile's daily targets."""

    profile: ProfilePayload


class CustomTargetRequest(CamelModel):
    """Request to change a profile's custom targets.

    ``action`` is one of ``edit``, ``lock``, ``enable``, ``disable``.
    """

    profile: ProfilePayload
    action: str
    field: MacroField | None = None
    value: float | None = None
    locked: bool = True


def serialize_nutrition(result: IngredientNutrition) -> dict[str, float]:
    return {
        "kcal": result.kcal,
        "protein": result.protein,
        "fat": result.fat,
        "carbs": result.carbs,
        "price": result.price,
        "weight": result.weight,
        "rawWeight": result.raw_weight,
    }


def serialize_totals(totals: NutritionTotals) -> dict[str, float]:
    return {
        "kcal": totals.kcal,
        "protein": totals.protein,
        "fat": totals.fat,
        "carbs": totals.carbs,
        "price": totals.price,
        "totalWeight": totals.total_weight,
    }


def serialize_targets(targets: NutritionTargets) -> dict[str, float]:
    return {
        "kcal": targets.kcal,
        "protein": targets.protein,
        "fat": targets.fat,
        "carbs": targets.carbs,
    }


def serialize_shopping_list(shopping_list: ShoppingList) -> dict[str, object]:
    return {
        "rows": [
            {
                "ingredientId": row.ingredient_id,
                "name": row.name,
                "unit": row.unit,
                "requiredGrams": row.required_grams,
                "toBuy": row.to_buy,
                "cost": row.cost,
                "remainder": row.remainder_grams,
            }
            for row in shopping_list.rows
        ],
        "totalCost": shopping_list.total_cost,
    }


def serialize_dish_summary(summary: DishSummary) -> dict[str, object]:
    return {
        "id": summary.dish.id,
        "name": summary.dish.name,
        "cookingTime": summary.dish.cooking_time,
        "totals": serialize_totals(summary.totals),
        "per100g": serialize_totals(summary.per_100g),
    }

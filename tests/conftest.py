"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from meal_planner.api.app import create_app
from meal_planner.config import Settings
from meal_planner.containers import AppContainer, build_container
from meal_planner.domain.catalog import Catalog, Dish, DishIngredientLine, Ingredient
from meal_planner.domain.profiles import Profile
from meal_planner.services.cooking import CookingConverter
from meal_planner.services.menu import MenuService
from meal_planner.services.nutrition import NutritionService
from meal_planner.services.shopping import ShoppingListService
from meal_planner.services.targets import TargetService

CHICKEN = Ingredient(
    id="chicken",
    name="Chicken breast",
    unit="grams",
    price=200,
    kcal=165,
    protein=31,
    fat=3.6,
    carbs=0,
)
RICE = Ingredient(
    id="rice",
    name="Rice",
    unit="grams",
    price=100,
    kcal=130,
    protein=2.7,
    fat=0.3,
    carbs=28,
)
BUCKWHEAT = Ingredient(
    id="buckwheat",
    name="Buckwheat",
    unit="grams",
    price=100,
    kcal=343,
    protein=13.3,
    fat=3.4,
    carbs=71.5,
)
EGG = Ingredient(
    id="egg",
    name="Egg",
    unit="pieces",
    price=12,
    grams_per_piece=50,
    kcal=155,
    protein=13,
    fat=11,
    carbs=1.1,
)
LEMON = Ingredient(
    id="lemon",
    name="Lemon",
    unit="pieces",
    price=30,
    kcal=29,
    protein=1.1,
    fat=0.3,
    carbs=9.3,
)

CHICKEN_WITH_RICE = Dish(
    id="chicken-rice",
    name="Chicken with rice",
    cooking_time=30,
    recipe="Fry the chicken, boil the rice.",
    ingredients=(
        DishIngredientLine("chicken", 150, "grams", "fried"),
        DishIngredientLine("rice", 200, "grams", "boiled"),
    ),
)
EMPTY_DISH = Dish(id="empty", name="Nothing yet")


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.build(
        [CHICKEN, RICE, BUCKWHEAT, EGG, LEMON], [CHICKEN_WITH_RICE, EMPTY_DISH]
    )


@pytest.fixture
def nutrition_service() -> NutritionService:
    return NutritionService(CookingConverter())


@pytest.fixture
def menu_service(nutrition_service: NutritionService) -> MenuService:
    return MenuService(nutrition_service)


@pytest.fixture
def shopping_list_service(menu_service: MenuService) -> ShoppingListService:
    return ShoppingListService(menu_service)


@pytest.fixture
def target_service() -> TargetService:
    return TargetService()


@pytest.fixture
def male_profile() -> Profile:
    return Profile(
        id="p1",
        name="Alex",
        weight=70,
        height=180,
        age=30,
        gender="male",
        activity=1.375,
        nutrition_mode="maintenance",
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))

"""Dependency container wiring for the application."""

from dataclasses import dataclass

from meal_planner.config import Settings, parse_yield_overrides
from meal_planner.services.cooking import CookingConverter
from meal_planner.services.dishes import DishListingService
from meal_planner.services.menu import MenuService
from meal_planner.services.nutrition import NutritionService
from meal_planner.services.shopping import ShoppingListService
from meal_planner.services.targets import TargetService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    converter: CookingConverter
    nutrition_service: NutritionService
    dish_listing_service: DishListingService
    menu_service: MenuService
    target_service: TargetService
    shopping_list_service: ShoppingListService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    converter = CookingConverter.with_overrides(
        parse_yield_overrides(resolved_settings.cooking_yield_overrides)
    )
    nutrition_service = NutritionService(converter)
    dish_listing_service = DishListingService(nutrition_service)
    menu_service = MenuService(nutrition_service)
    target_service = TargetService(default_activity=resolved_settings.default_activity)
    shopping_list_service = ShoppingListService(menu_service)

    return AppContainer(
        settings=resolved_settings,
        converter=converter,
        nutrition_service=nutrition_service,
        dish_listing_service=dish_listing_service,
        menu_service=menu_service,
        target_service=target_service,
        shopping_list_service=shopping_list_service,
    )

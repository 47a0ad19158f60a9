"""Ingredient line and dish nutrition endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from meal_planner.api.schemas import (
    DishListRequest,
    DishRequest,
    IngredientLineRequest,
    serialize_dish_summary,
    serialize_nutrition,
    serialize_totals,
)

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


@router.post("/ingredient-line")
async def ingredient_line(
    payload: IngredientLineRequest, request: Request
) -> dict[str, float]:
    """Return nutrition, price and weights for one ingredient line."""
    container: AppContainer = request.app.state.container
    ingredient = payload.ingredient.to_domain() if payload.ingredient else None
    result = container.nutrition_service.ingredient_nutrition(
        payload.line.to_domain(),
        ingredient,
        payload.portion_multiplier,
        payload.cooking_method,
    )
    return serialize_nutrition(result)


@router.post("/dish")
async def dish_totals(payload: DishRequest, request: Request) -> dict[str, object]:
    """Return dish totals and the derived per-100g values."""
    container: AppContainer = request.app.state.container
    service = container.nutrition_service
    totals = service.dish_totals(
        payload.dish.to_domain(), payload.catalog(), payload.portion_multiplier
    )
    return {
        "totals": serialize_totals(totals),
        "per100g": serialize_totals(service.per_100g(totals)),
    }


@router.post("/dishes")
async def list_dishes(payload: DishListRequest, request: Request) -> dict[str, object]:
    """Search catalog dishes by name and rank them by derived totals."""
    container: AppContainer = request.app.state.container
    summaries = container.dish_listing_service.list_dishes(
        payload.catalog(), payload.query, payload.sort
    )
    return {"dishes": [serialize_dish_summary(summary) for summary in summaries]}

"""Menu resolution and shopping list endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from meal_planner.api.schemas import (
    MenuDayRequest,
    MenuItemRequest,
    ShoppingListRequest,
    serialize_shopping_list,
    serialize_targets,
    serialize_totals,
)
from meal_planner.services.classification import classify_nutrient

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/menu", tags=["menu"])
_logger = logging.getLogger(__name__)


@router.post("/item")
async def menu_item(payload: MenuItemRequest, request: Request) -> dict[str, float]:
    """Resolve one menu item into totals."""
    container: AppContainer = request.app.state.container
    totals = container.menu_service.resolve_item(
        payload.item.to_domain(), payload.catalog()
    )
    return serialize_totals(totals)


@router.post("/day")
async def menu_day(payload: MenuDayRequest, request: Request) -> dict[str, object]:
    """Total a day of menu items and compare against the profile target."""
    container: AppContainer = request.app.state.container
    totals = container.menu_service.day_totals(
        [item.to_domain() for item in payload.items], payload.catalog()
    )
    response: dict[str, object] = {"totals": serialize_totals(totals)}
    if payload.profile is None:
        return response

    profile = payload.profile.to_domain()
    target = container.target_service.target(profile)
    consumed = serialize_totals(totals)
    planned = serialize_targets(target)
    response["target"] = planned
    response["classes"] = {
        nutrient: classify_nutrient(nutrient, consumed[nutrient], value, profile)
        for nutrient, value in planned.items()
    }
    return response


@router.post("/shopping-list")
async def shopping_list(
    payload: ShoppingListRequest, request: Request
) -> dict[str, object]:
    """Build the purchasable shopping list for active profiles."""
    container: AppContainer = request.app.state.container
    result = container.shopping_list_service.build(
        payload.menu(), payload.active_profile_ids, payload.catalog()
    )
    unresolved = [row.name for row in result.rows if not row.resolved]
    if unresolved:
        _logger.info("Shopping list has unresolved piece weights: %s", unresolved)
    return serialize_shopping_list(result)

"""Profile target endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from meal_planner.api.schemas import (
    CustomTargetRequest,
    ProfilePayload,
    TargetRequest,
    serialize_targets,
)

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post("/target")
async def profile_target(payload: TargetRequest, request: Request) -> dict[str, float]:
    """Return the daily target for a profile."""
    container: AppContainer = request.app.state.container
    target = container.target_service.target(payload.profile.to_domain())
    return serialize_targets(target)


@router.post("/custom-targets")
async def custom_targets(
    payload: CustomTargetRequest, request: Request
) -> dict[str, object]:
    """Apply a custom target action and return the rebalanced profile."""
    container: AppContainer = request.app.state.container
    service = container.target_service
    profile = payload.profile.to_domain()

    if payload.action == "enable":
        updated = service.enable_custom_targets(profile)
    elif payload.action == "disable":
        updated = service.disable_custom_targets(profile)
    elif payload.action in {"edit", "lock"}:
        if payload.field is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="field is required",
            )
        if payload.action == "edit":
            updated = service.update_custom_target(
                profile, payload.field, payload.value
            )
        else:
            updated = service.set_lock(profile, payload.field, payload.locked)
    else:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown action: {payload.action}",
        )

    return {
        "profile": ProfilePayload.from_domain(updated).model_dump(by_alias=True),
        "target": serialize_targets(service.target(updated)),
    }

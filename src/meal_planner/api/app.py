"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from meal_planner.api.menu import router as menu_router
from meal_planner.api.nutrition import router as nutrition_router
from meal_planner.api.profiles import router as profiles_router
from meal_planner.app_logging import configure_logging
from meal_planner.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Meal Planner")
    app.state.container = container

    app.include_router(nutrition_router)
    app.include_router(menu_router)
    app.include_router(profiles_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "Meal planner API ready (environment=%s)", container.settings.environment
    )
    return app

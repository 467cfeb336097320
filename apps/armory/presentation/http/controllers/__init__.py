"""HTTP Controllers."""

from apps.armory.presentation.http.controllers.characters import router as characters_router
from apps.armory.presentation.http.controllers.health import router as health_router
from apps.armory.presentation.http.controllers.sampling import router as sampling_router

__all__ = ["characters_router", "health_router", "sampling_router"]

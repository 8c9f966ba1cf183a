"""API routers for the REST API."""

from cutplan.web.routers.optimize import router as optimize_router
from cutplan.web.routers.profiles import router as profiles_router
from cutplan.web.routers.projects import router as projects_router
from cutplan.web.routers.templates import router as templates_router
from cutplan.web.routers.validate import router as validate_router

__all__ = [
    "optimize_router",
    "profiles_router",
    "projects_router",
    "templates_router",
    "validate_router",
]

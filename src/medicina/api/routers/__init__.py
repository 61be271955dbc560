"""API routers."""

from .dashboard import router as dashboard_router
from .documents import router as documents_router
from .health import router as health_router
from .records import doctors_router, hospitals_router, patients_router
from .settings import router as settings_router

__all__ = [
    "health_router",
    "patients_router",
    "doctors_router",
    "hospitals_router",
    "settings_router",
    "dashboard_router",
    "documents_router",
]

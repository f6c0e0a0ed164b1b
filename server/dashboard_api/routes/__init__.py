"""API route modules."""
from .biomarkers import router as biomarkers_router
from .summary import router as summary_router

__all__ = [
    "biomarkers_router",
    "summary_router",
]

"""API Routers for nutricache."""

from .stats import router as stats_router
from .cache import router as cache_router
from .children import router as children_router

__all__ = [
    "stats_router",
    "cache_router",
    "children_router",
]

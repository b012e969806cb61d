"""Services for nutricache."""

from .cache import ResponseCache
from .backend import BackendClient
from .nutrition import NutritionService

__all__ = ["ResponseCache", "BackendClient", "NutritionService"]

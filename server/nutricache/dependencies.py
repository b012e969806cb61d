"""FastAPI dependencies resolving the objects owned by the application."""

from fastapi import Request

from .config import Settings
from .services.cache import ResponseCache
from .services.nutrition import NutritionService


def get_app_settings(request: Request) -> Settings:
    """The settings the app was created with."""
    return request.app.state.settings


def get_cache(request: Request) -> ResponseCache:
    """The single cache instance created in the app lifespan."""
    return request.app.state.cache


def get_nutrition_service(request: Request) -> NutritionService:
    return request.app.state.nutrition

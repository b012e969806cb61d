"""Child nutrition endpoints served through the response cache."""

from typing import Optional
from pydantic import BaseModel, Field
from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_nutrition_service
from ..errors import BackendError
from ..services.nutrition import NutritionService

router = APIRouter(tags=["children"])


class Preferences(BaseModel):
    """Preferred foods per meal."""
    desayuno: list[str] = Field(default_factory=list)
    almuerzo: list[str] = Field(default_factory=list)
    cena: list[str] = Field(default_factory=list)
    snacks: list[str] = Field(default_factory=list)


def _as_http_error(exc: BackendError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.detail)


@router.get("/ninos/{child_id}/perfil-nutricional")
async def get_nutritional_profile(
    child_id: int,
    refresh: Optional[str] = Query(None),
    service: NutritionService = Depends(get_nutrition_service),
):
    """Get the child's current nutritional profile."""
    try:
        return await service.profile(child_id, refresh=refresh == "1")
    except BackendError as exc:
        raise _as_http_error(exc) from exc


@router.post("/ninos/{child_id}/perfil-nutricional/calcular")
async def calculate_nutritional_profile(
    child_id: int,
    service: NutritionService = Depends(get_nutrition_service),
):
    """Ask the backend to recompute the profile."""
    try:
        return await service.recalculate_profile(child_id)
    except BackendError as exc:
        raise _as_http_error(exc) from exc


@router.get("/ninos/{child_id}/preferencias")
async def get_preferences(
    child_id: int,
    refresh: Optional[str] = Query(None),
    service: NutritionService = Depends(get_nutrition_service),
):
    """Get the child's meal preferences."""
    try:
        return await service.preferences(child_id, refresh=refresh == "1")
    except BackendError as exc:
        raise _as_http_error(exc) from exc


@router.post("/ninos/{child_id}/preferencias")
async def save_preferences(
    child_id: int,
    preferences: Preferences,
    service: NutritionService = Depends(get_nutrition_service),
):
    """Save meal preferences and drop the child's cached entries."""
    try:
        return await service.save_preferences(child_id, preferences.model_dump())
    except BackendError as exc:
        raise _as_http_error(exc) from exc

"""Cached access to a child's nutritional profile and meal preferences."""

from ..config import Settings
from .backend import BackendClient
from .cache import ResponseCache


def profile_key(child_id: int) -> str:
    return f"perfil-{child_id}"


def preferences_key(child_id: int) -> str:
    return f"preferencias-{child_id}"


class NutritionService:
    """Read-through cache in front of the backend's derived-data endpoints.

    Writes go straight to the backend and then drop the affected entries, so
    the next read fetches the fresh value.
    """

    def __init__(self, cache: ResponseCache, client: BackendClient, settings: Settings):
        self.cache = cache
        self.client = client
        self.settings = settings

    async def profile(self, child_id: int, refresh: bool = False) -> dict:
        key = profile_key(child_id)
        if refresh:
            self.cache.invalidate(key)
        return await self.cache.fetch(
            key,
            lambda: self.client.get_nutritional_profile(child_id, silent_errors=True),
            ttl=self.settings.profile_cache_ttl,
        )

    async def recalculate_profile(self, child_id: int) -> dict:
        result = await self.client.calculate_nutritional_profile(child_id)
        self.cache.invalidate(profile_key(child_id))
        return result

    async def preferences(self, child_id: int, refresh: bool = False) -> dict:
        key = preferences_key(child_id)
        if refresh:
            self.cache.invalidate(key)
        return await self.cache.fetch(
            key,
            lambda: self.client.get_preferences(child_id, silent_errors=True),
            ttl=self.settings.preferences_cache_ttl,
        )

    async def save_preferences(self, child_id: int, preferences: dict) -> dict:
        result = await self.client.save_preferences(child_id, preferences)
        self.forget_child(child_id)
        return result

    def forget_child(self, child_id: int) -> None:
        self.cache.invalidate(profile_key(child_id))
        self.cache.invalidate(preferences_key(child_id))

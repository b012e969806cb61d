"""HTTP client for the nutrition backend."""

from typing import Any, Optional
import httpx

from ..config import Settings
from ..errors import BackendError, UnauthorizedError
from ..logging import get_logger

logger = get_logger(__name__)


class BackendClient:
    """Thin async wrapper over the backend's JSON endpoints."""

    def __init__(self, settings: Settings, http: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._http = http or httpx.AsyncClient(timeout=settings.request_timeout)

    def api_url(self, endpoint: str) -> str:
        return f"{self.settings.api_root}{endpoint}"

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.settings.api_token:
            headers["Authorization"] = f"Bearer {self.settings.api_token}"
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[dict] = None,
        silent_errors: bool = False,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises BackendError for transport failures and non-2xx answers, with
        the backend's ``detail`` message when it sends one.
        """
        url = self.api_url(endpoint)
        try:
            response = await self._http.request(
                method,
                url,
                json=json,
                params=params,
                headers=self._headers(),
            )
        except httpx.HTTPError as exc:
            if not silent_errors:
                logger.error(
                    "backend request failed: %s %s: %s", method, url, exc,
                    extra={"event": "backend_error", "method": method, "url": url, "status_code": 502},
                )
            raise BackendError(502, f"Backend unreachable: {exc}") from exc

        if response.is_success:
            return response.json()

        try:
            detail = response.json().get("detail")
        except (ValueError, AttributeError):
            detail = None
        detail = detail or f"HTTP error! status: {response.status_code}"

        if not silent_errors:
            logger.error(
                "backend request failed: %s %s: %s", method, url, detail,
                extra={
                    "event": "backend_error",
                    "method": method,
                    "url": url,
                    "status_code": response.status_code,
                },
            )

        if response.status_code == 401:
            raise UnauthorizedError(detail)
        raise BackendError(response.status_code, detail)

    async def get_nutritional_profile(self, child_id: int, silent_errors: bool = False) -> dict:
        return await self.request(
            "GET",
            f"/planes-comidas/ninos/{child_id}/perfil-nutricional",
            silent_errors=silent_errors,
        )

    async def calculate_nutritional_profile(self, child_id: int) -> dict:
        return await self.request("POST", f"/planes-comidas/ninos/{child_id}/calcular-perfil")

    async def get_preferences(self, child_id: int, silent_errors: bool = False) -> dict:
        return await self.request(
            "GET",
            f"/preferencias/ninos/{child_id}",
            silent_errors=silent_errors,
        )

    async def save_preferences(self, child_id: int, preferences: dict) -> dict:
        return await self.request("POST", f"/preferencias/ninos/{child_id}", json=preferences)

    async def aclose(self) -> None:
        await self._http.aclose()

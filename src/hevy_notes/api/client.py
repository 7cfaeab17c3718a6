"""
Hevy API client.

Implements:
- Recent workout listing
- Single workout detail

Any failure (transport error, non-200 status, malformed payload) is logged
and reported to callers as ``None``; nothing is retried.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ..config import DEFAULT_API_BASE_URL, Settings
from ..exceptions import ConfigurationError, FetchError
from ..models.workouts import RemoteWorkout, WorkoutPage

logger = logging.getLogger(__name__)


class HevyClient:
    """
    Async client for the Hevy public API.

    Usage:
        async with HevyClient(api_key) as client:
            page = await client.get_workouts(limit=10)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HevyClient":
        """Build a client from settings; the API key is required."""
        if not settings.api_key:
            raise ConfigurationError(
                "Hevy API key is not configured. Set HEVY_API_KEY.",
                setting="api_key",
            )
        return cls(
            settings.api_key,
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
            transport=transport,
        )

    def get_auth_headers(self) -> Dict[str, str]:
        """Headers sent with every request."""
        return {
            "api-key": self.api_key,
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client is not None and not self._http_client.is_closed:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "HevyClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method
            endpoint: API endpoint (e.g., "/workouts")
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            FetchError: On transport errors, non-200 responses or invalid JSON
        """
        url = f"{self.base_url}{endpoint}"
        client = await self._get_client()

        try:
            response = await client.request(
                method,
                url,
                headers=self.get_auth_headers(),
                params=params,
            )
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {endpoint} failed: {e}", endpoint) from e

        if response.status_code != 200:
            raise FetchError(
                f"Hevy API returned HTTP {response.status_code} for {endpoint}",
                endpoint,
                response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"Invalid JSON from {endpoint}", endpoint, 200) from e

    async def get_workouts(self, limit: int = 10, page: int = 1) -> Optional[WorkoutPage]:
        """
        Get the most recent workouts.

        Args:
            limit: Workouts per page
            page: Page number

        Returns:
            WorkoutPage, or None if the workouts could not be fetched
        """
        try:
            data = await self._request(
                "GET",
                "/workouts",
                params={"page": page, "pageSize": limit},
            )
            return WorkoutPage.model_validate(data)
        except FetchError as e:
            logger.warning(f"Could not fetch workouts: {e.message}")
            return None
        except ValidationError as e:
            logger.warning(f"Malformed workout list payload: {e.error_count()} errors")
            return None

    async def get_workout(self, workout_id: str) -> Optional[RemoteWorkout]:
        """Get a single workout with exercises and sets, or None on failure."""
        try:
            data = await self._request("GET", f"/workouts/{workout_id}")
            return RemoteWorkout.model_validate(data)
        except FetchError as e:
            logger.warning(f"Could not fetch workout {workout_id}: {e.message}")
            return None
        except ValidationError as e:
            logger.warning(f"Malformed payload for workout {workout_id}: {e.error_count()} errors")
            return None

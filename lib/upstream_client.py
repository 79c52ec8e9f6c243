# =============================================================================
# lib/upstream_client.py - City & Weather Upstream Client
# =============================================================================
# Async wrapper around the two third-party REST services:
# - city-insights:       GET {CITY_API_BASE_URL}/{cityId}/insights?apiKey=...
# - weather-predictions: GET {WEATHER_API_BASE_URL}?lat=..&lon=..&apiKey=...
#
# Every call returns a Result (lib/result.py) instead of raising, so the
# handlers branch explicitly on NOT_FOUND vs UPSTREAM failures.
# No caching and no retries: each call hits the network exactly once.
#
# Usage:
#   client = UpstreamClient.from_settings(settings)
#   result = await client.fetch_city_info("42")
#   await client.aclose()
# =============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from lib.result import Failure, Result

if TYPE_CHECKING:
    from app.config import Settings

logger = logging.getLogger(__name__)


class UpstreamClient:
    """
    Client for the city-insights and weather-predictions services.

    Holds one httpx.AsyncClient (connection pool) for the process lifetime.
    A client passed in by the caller is not closed by aclose().

    Every request is bounded by `timeout` seconds (UPSTREAM_TIMEOUT_SECONDS,
    default 10). An expired timeout is reported as an UPSTREAM failure, so
    the caller answers 500 instead of waiting on a hung service.
    """

    def __init__(
        self,
        api_key: str,
        city_base_url: str,
        weather_base_url: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._city_base_url = city_base_url.rstrip("/")
        self._weather_base_url = weather_base_url.rstrip("/")
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> UpstreamClient:
        """Build a client from application settings."""
        return cls(
            api_key=settings.API_KEY,
            city_base_url=settings.CITY_API_BASE_URL,
            weather_base_url=settings.WEATHER_API_BASE_URL,
            timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
            http_client=http_client,
        )

    async def aclose(self) -> None:
        """Close the underlying connection pool if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    async def fetch_city_info(self, city_id: str) -> Result[Any]:
        """
        Fetch raw city insights.

        Returns:
            Result with the parsed JSON payload, or a failure:
            - NOT_FOUND if the service answers 404
            - UPSTREAM for any other non-success status, network error
              or non-JSON body
        """
        url = f"{self._city_base_url}/{quote(city_id, safe='')}/insights"
        return await self._get(
            url,
            params={"apiKey": self._api_key},
            service="city-insights",
            not_found=Failure.city_not_found(city_id),
        )

    async def fetch_weather(self, lat: float, lon: float) -> Result[Any]:
        """
        Fetch raw weather predictions around a coordinate.

        Returns:
            Result with the parsed JSON payload, or an UPSTREAM failure
            for any non-success status, network error or non-JSON body
        """
        return await self._get(
            self._weather_base_url,
            params={
                "lat": _format_coordinate(lat),
                "lon": _format_coordinate(lon),
                "apiKey": self._api_key,
            },
            service="weather-predictions",
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _get(
        self,
        url: str,
        params: dict[str, str],
        service: str,
        not_found: Failure | None = None,
    ) -> Result[Any]:
        try:
            response = await self._http.get(url, params=params)
        except httpx.HTTPError as e:
            # Never log params: they carry the API key
            return Result.fail(Failure.upstream(
                f"{service} request to {url} failed: {e.__class__.__name__}: {e}"
            ))

        logger.debug(f"{service} GET {response.request.url.path} -> {response.status_code}")

        if response.status_code == 404 and not_found is not None:
            return Result.fail(not_found)

        if not response.is_success:
            return Result.fail(Failure.upstream(
                f"{service} error: HTTP {response.status_code} {response.reason_phrase} "
                f"for {response.request.url.path}"
            ))

        try:
            return Result.success(response.json())
        except ValueError as e:
            return Result.fail(Failure.upstream(
                f"{service} returned a non-JSON body for {response.request.url.path}: {e}"
            ))


def _format_coordinate(value: float) -> str:
    """Render 2.0 as "2" and keep full precision otherwise."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))

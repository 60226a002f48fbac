"""HTTP client for the WeatherBug XML API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from .config import DEFAULT_BASE_URL, WeatherBugConfig
from .data import Alert, Forecasts, Location, Station, bind, bind_single
from .data.xml import Node, parse_document
from .errors import (
    WeatherBugConnectionError,
    WeatherBugResponseError,
    WeatherBugTimeout,
)

_LOGGER = logging.getLogger(__name__)


class WeatherBugHttpClient:
    """HTTP client wrapper for WeatherBug API endpoints.

    Transport failures are raised as ``WeatherBugServiceError`` subclasses.
    Once a document has been fetched, binding never raises: records that
    cannot be built are left out of the result.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_code: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        unit_type: int = 0,
        timeout: float = 10.0,
    ) -> None:
        self._session = session
        self._api_code = api_code
        self._base_url = base_url.rstrip("/")
        self._unit_type = unit_type
        self._timeout = timeout

    @classmethod
    def from_config(
        cls, session: aiohttp.ClientSession, config: WeatherBugConfig
    ) -> WeatherBugHttpClient:
        """Create a client from loaded configuration."""
        return cls(
            session,
            config.api_code,
            base_url=config.base_url,
            unit_type=config.unit_type,
            timeout=config.timeout,
        )

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}/{endpoint}"

    def _params(self, **params: Any) -> dict[str, str]:
        merged = {"ACode": self._api_code, "unittype": self._unit_type, **params}
        return {key: str(value) for key, value in merged.items() if value is not None}

    async def fetch_document(self, endpoint: str, **params: Any) -> Node:
        """Fetch an endpoint and parse the response into its root element.

        Args:
            endpoint: Endpoint file name, e.g. "getStationsXML.aspx".
            **params: Query parameters; ``None`` values are omitted.

        Raises:
            WeatherBugResponseError: If the API returns a non-200 status.
            WeatherBugParseError: If the body is not well-formed XML.
            WeatherBugTimeout: If the request times out.
            WeatherBugConnectionError: If the network request fails.
        """
        url = self._url(endpoint)
        try:
            async with self._session.get(
                url,
                params=self._params(**params),
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                if resp.status != 200:
                    raise WeatherBugResponseError(
                        resp.status, f"{endpoint} failed with non-200 response"
                    )
                body = await resp.read()
        except TimeoutError as err:
            raise WeatherBugTimeout(f"{endpoint} request timed out") from err
        except aiohttp.ClientError as err:
            raise WeatherBugConnectionError(f"{endpoint} request failed") from err

        _LOGGER.debug("Fetched %s (%d bytes)", endpoint, len(body))
        return parse_document(body)

    async def search_locations(self, search: str) -> list[Location]:
        """Search cities by name or ZIP code."""
        root = await self.fetch_document("getLocationsXML.aspx", SearchString=search)
        return bind(root, "aws:locations/aws:location", Location)

    async def fetch_stations(
        self, *, zip_code: int | None = None, city_code: int | None = None
    ) -> list[Station]:
        """Fetch the stations near a U.S. ZIP code or a non-U.S. city code."""
        root = await self.fetch_document(
            "getStationsXML.aspx", zipCode=zip_code, cityCode=city_code
        )
        return bind(root, "aws:stations/aws:station", Station)

    async def fetch_alerts(self, zip_code: int) -> list[Alert]:
        """Fetch the active severe weather alerts for a ZIP code."""
        root = await self.fetch_document("getAlertsXML.aspx", zipCode=zip_code)
        return bind(root, "aws:alerts/aws:alert", Alert)

    async def fetch_forecasts(
        self, *, zip_code: int | None = None, city_code: int | None = None
    ) -> Forecasts | None:
        """Fetch the daily forecasts for a ZIP code or city code."""
        root = await self.fetch_document(
            "getForecastRSS.aspx", zipCode=zip_code, cityCode=city_code
        )
        return bind_single(root, ".", Forecasts)

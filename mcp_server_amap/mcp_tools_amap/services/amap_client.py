from __future__ import annotations

import logging
from typing import Optional, Type, TypeVar
from urllib.parse import quote_plus, urlencode

import requests
from pydantic import ValidationError

from ..core.config import AMapSettings
from ..core.schemas import (
    AMapEnvelope,
    DistrictResponse,
    DrivingResponse,
    GeocodeResponse,
    WeatherResponse,
)

logger = logging.getLogger(__name__)

WEATHER_PATH = "/v3/weather/weatherInfo"
DRIVING_PATH = "/v5/direction/driving"
GEOCODE_PATH = "/v3/geocode/geo"
DISTRICT_PATH = "/v3/config/district"

# 0 = AMap's default "fastest" driving strategy.
DRIVING_STRATEGY = "0"

T = TypeVar("T", bound=AMapEnvelope)


class AMapClient:
    """Thin client for the four AMap web service endpoints we use.

    Notes:
    - One GET per call; no retry, no backoff, no caching.
    - Every failure (network, HTTP status, JSON, schema) collapses into ``None``.
      Callers treat that as "data unavailable".
    """

    def __init__(self, settings: AMapSettings, session: Optional[requests.Session] = None) -> None:
        self.settings = settings
        self.session = session or requests.Session()

    # -- endpoint builders --------------------------------------------------

    def _url(self, path: str, params: dict) -> str:
        query = urlencode({"key": self.settings.api_key, **params})
        return f"{self.settings.base_url.rstrip('/')}{path}?{query}"

    def weather_url(self, city_code: str) -> str:
        return self._url(WEATHER_PATH, {"city": city_code, "extensions": "all"})

    def driving_url(self, origin: str, destination: str) -> str:
        return self._url(
            DRIVING_PATH,
            {"origin": origin, "destination": destination, "strategy": DRIVING_STRATEGY},
        )

    def geocode_url(self, address: str) -> str:
        return self._url(GEOCODE_PATH, {"address": address})

    def district_url(self, keyword: str) -> str:
        return self._url(DISTRICT_PATH, {"keywords": keyword, "subdistrict": "0"})

    # -- fetching -----------------------------------------------------------

    def fetch_json(self, url: str, model: Type[T]) -> Optional[T]:
        """GET ``url`` and parse the body into ``model``; ``None`` on any failure."""
        safe_url = self._redact(url)
        try:
            r = self.session.get(url, timeout=self.settings.timeout_seconds)
            r.raise_for_status()
            data = r.json()
        except ValueError:
            logger.warning("AMap returned non-JSON body: %s", safe_url)
            return None
        except requests.RequestException as exc:
            logger.warning("AMap request failed: %s (%s)", safe_url, exc.__class__.__name__)
            return None

        try:
            return model.model_validate(data)
        except ValidationError as exc:
            logger.warning("AMap payload did not match %s: %s (%d errors)", model.__name__, safe_url, exc.error_count())
            return None

    def weather(self, city_code: str) -> Optional[WeatherResponse]:
        return self.fetch_json(self.weather_url(city_code), WeatherResponse)

    def driving(self, origin: str, destination: str) -> Optional[DrivingResponse]:
        return self.fetch_json(self.driving_url(origin, destination), DrivingResponse)

    def geocode(self, address: str) -> Optional[GeocodeResponse]:
        return self.fetch_json(self.geocode_url(address), GeocodeResponse)

    def district(self, keyword: str) -> Optional[DistrictResponse]:
        return self.fetch_json(self.district_url(keyword), DistrictResponse)

    def _redact(self, url: str) -> str:
        key = self.settings.api_key
        if not key:
            return url
        return url.replace(f"key={quote_plus(key)}", "key=***")

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from mcp_tools_amap.core.config import AMapSettings
from mcp_tools_amap.services.amap_client import AMapClient
from mcp_tools_amap.services.resolver import LocationResolver

BASE_URL = "https://amap.test"
WEATHER_URL = f"{BASE_URL}/v3/weather/weatherInfo"
DRIVING_URL = f"{BASE_URL}/v5/direction/driving"
GEOCODE_URL = f"{BASE_URL}/v3/geocode/geo"
DISTRICT_URL = f"{BASE_URL}/v3/config/district"

TEST_KEY = "test-key-123"


def ok(**payload: Any) -> Dict[str, Any]:
    return {"status": "1", "info": "OK", "infocode": "10000", **payload}


def error(info: str = "INVALID_USER_KEY", infocode: str = "10001") -> Dict[str, Any]:
    return {"status": "0", "info": info, "infocode": infocode}


def geocode_payload(*candidates: Dict[str, str]) -> Dict[str, Any]:
    return ok(count=str(len(candidates)), geocodes=list(candidates))


def geocode(address: str, adcode: str = "", location: str = "") -> Dict[str, Any]:
    return {
        "formatted_address": address,
        "country": "中国",
        "province": "北京市",
        "city": "北京市",
        "district": [],
        "adcode": adcode,
        "location": location,
        "level": "兴趣点",
    }


def cast(**overrides: str) -> Dict[str, str]:
    data = {
        "date": "2024-01-01",
        "week": "1",
        "dayweather": "晴",
        "nightweather": "多云",
        "daytemp": "5",
        "nighttemp": "-3",
        "daywind": "北",
        "nightwind": "西北",
        "daypower": "1-3",
        "nightpower": "1-3",
        "daytemp_float": "5.0",
        "nighttemp_float": "-3.0",
    }
    data.update(overrides)
    return data


def forecast(casts: List[Dict[str, str]], **overrides: str) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "city": "北京市",
        "adcode": "110000",
        "province": "北京",
        "reporttime": "2024-01-01 08:00:00",
        "casts": casts,
    }
    data.update(overrides)
    return data


def step(instruction: str, distance: str, road_name: Any = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "instruction": instruction,
        "orientation": "东",
        "step_distance": distance,
    }
    if road_name is not None:
        data["road_name"] = road_name
    return data


def driving_payload(distance: str, taxi_cost: str, steps: List[Dict[str, Any]]) -> Dict[str, Any]:
    return ok(
        count="1",
        route={
            "origin": "116.378620,39.865036",
            "destination": "116.321592,39.894912",
            "taxi_cost": taxi_cost,
            "paths": [{"distance": distance, "restriction": "0", "steps": steps}],
        },
    )


def by_query(param: str, table: Dict[str, Dict[str, Any]]):
    """requests_mock json callback answering by one query-string parameter."""

    def _callback(request, context):
        value = request.qs.get(param, [""])[0]
        return table[value]

    return _callback


@pytest.fixture
def settings() -> AMapSettings:
    return AMapSettings(api_key=TEST_KEY, base_url=BASE_URL, timeout_seconds=5.0)


@pytest.fixture
def client(settings: AMapSettings) -> AMapClient:
    return AMapClient(settings)


@pytest.fixture
def resolver(client: AMapClient) -> LocationResolver:
    return LocationResolver(client)

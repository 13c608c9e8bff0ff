"""Weather forecast pipeline (AMap weatherInfo, extensions=all).

city name -> area code (geocoder, then district lookup) -> forecast -> text.
Every failure ends in exactly one user-facing message; nothing is raised.
"""

from __future__ import annotations

import logging

from ..utils.formatting import format_weather_report
from .amap_client import AMapClient
from .resolver import LocationResolver

logger = logging.getLogger(__name__)

MSG_CITY_NOT_FOUND = "未找到城市: {city}"
MSG_FETCH_FAILED = "获取天气数据失败"
MSG_PROVIDER_ERROR = "请求错误: {info} (代码: {infocode})"
MSG_NO_FORECAST = "未找到城市 {city} 的天气预报"


def get_weather_text(city: str, client: AMapClient, resolver: LocationResolver) -> str:
    code = resolver.resolve_city_code(city)
    if code is None:
        return MSG_CITY_NOT_FOUND.format(city=city)

    resp = client.weather(code.adcode)
    if resp is None:
        return MSG_FETCH_FAILED

    if not resp.ok:
        logger.info("AMap weather error for %s: %s (%s)", code.adcode, resp.info, resp.infocode)
        return MSG_PROVIDER_ERROR.format(info=resp.info, infocode=resp.infocode)

    if not resp.forecasts:
        return MSG_NO_FORECAST.format(city=city)

    return format_weather_report(city, resp.forecasts)

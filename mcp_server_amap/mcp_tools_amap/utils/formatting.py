from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import List

from ..core.schemas import DrivingRoute, DrivingStep, WeatherCast, WeatherForecast


def format_weather_forecast(forecast: WeatherForecast) -> str:
    """Render one forecast block: location header, report time, daily stanzas."""
    city_info = f"{forecast.province} {forecast.city} ({forecast.adcode})"
    report_time = f"报告时间: {forecast.reporttime}"
    casts = "\n".join(_format_cast(c) for c in forecast.casts)
    return f"{city_info}\n{report_time}\n\n{casts}"


def _format_cast(cast: WeatherCast) -> str:
    return "\n".join(
        [
            f"日期: {cast.date} (星期{cast.week})",
            f"白天: {cast.dayweather}, {cast.daytemp}°C, {cast.daywind}风 {cast.daypower}级",
            f"夜间: {cast.nightweather}, {cast.nighttemp}°C, {cast.nightwind}风 {cast.nightpower}级",
            "---",
        ]
    )


def format_weather_report(city: str, forecasts: List[WeatherForecast]) -> str:
    blocks = "\n\n".join(format_weather_forecast(f) for f in forecasts)
    return f"{city} 未来天气预报:\n\n{blocks}"


def format_distance_km(meters: str) -> str:
    """Meters -> kilometers with one decimal, rounding half up (12350 -> "12.4")."""
    try:
        m = Decimal(str(meters).strip() or "0")
        if not m.is_finite():
            return "0.0"
        km = (m / Decimal(1000)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # unparseable, or too large to hold at one decimal
        return "0.0"
    return f"{km}"


def format_driving_route(route: DrivingRoute, origin_label: str, dest_label: str) -> str:
    """Render the first path of ``route``. Callers guarantee ``route.paths`` is non-empty."""
    path = route.paths[0]

    header = f"从 {origin_label} 到 {dest_label}"
    summary = f"总距离: {format_distance_km(path.distance)}公里 | 预计打车费用: {route.taxi_cost}元"
    steps = "\n".join(_format_step(i, s) for i, s in enumerate(path.steps, start=1))
    return f"{header}\n{summary}\n\n导航指引:\n{steps}"


def _format_step(index: int, step: DrivingStep) -> str:
    parts = [f"{index}."]
    if step.road_name:
        parts.append(f"沿{step.road_name}")
    parts.append(step.instruction)
    parts.append(f"({step.step_distance}米)")
    return " ".join(parts)


def format_route_report(route: DrivingRoute, origin_label: str, dest_label: str) -> str:
    return f"驾车路线规划结果:\n\n{format_driving_route(route, origin_label, dest_label)}"

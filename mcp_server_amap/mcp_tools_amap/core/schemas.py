from __future__ import annotations

from typing import Any, List, Optional, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_str(value: Any) -> Any:
    # AMap renders empty scalar fields as [] instead of "".
    if value is None or value == []:
        return ""
    return value


class AMapModel(BaseModel):
    """Base for AMap payload objects.

    AMap is loose about empty values: ``str`` fields accept the ``[]``
    placeholder, list fields accept ``null`` and optional sub-objects accept
    ``[]``. Numeric values are accepted where AMap usually sends strings.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_blank(cls, value: Any, info) -> Any:
        field = cls.model_fields.get(info.field_name)
        if field is None:
            return value
        annotation = field.annotation
        if annotation is str:
            return _blank_to_str(value)
        origin = get_origin(annotation)
        if origin is list and value is None:
            return []
        if origin is Union and type(None) in get_args(annotation) and value == []:
            return None
        return value


class AMapEnvelope(AMapModel):
    """Top-level fields present on every AMap web service response."""
    status: str
    info: str = ""
    infocode: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "1"


# ---------------------------------------------------------------------------
# Weather (/v3/weather/weatherInfo, extensions=all)
# ---------------------------------------------------------------------------

class WeatherCast(AMapModel):
    """One day of a multi-day forecast."""
    date: str = ""
    week: str = ""
    dayweather: str = ""
    nightweather: str = ""
    daytemp: str = ""
    nighttemp: str = ""
    daywind: str = ""
    nightwind: str = ""
    daypower: str = ""
    nightpower: str = ""


class WeatherForecast(AMapModel):
    city: str = ""
    adcode: str = ""
    province: str = ""
    reporttime: str = ""
    casts: List[WeatherCast] = Field(default_factory=list)


class WeatherResponse(AMapEnvelope):
    forecasts: List[WeatherForecast] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Driving (/v5/direction/driving)
# ---------------------------------------------------------------------------

class DrivingStep(AMapModel):
    instruction: str = ""
    orientation: str = ""
    road_name: Optional[str] = None
    step_distance: str = ""

    @field_validator("road_name", mode="before")
    @classmethod
    def _empty_road(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
        if value == [] or value == "":
            return None
        return value


class DrivingPath(AMapModel):
    distance: str = "0"
    restriction: str = ""
    steps: List[DrivingStep] = Field(default_factory=list)


class DrivingRoute(AMapModel):
    origin: str = ""
    destination: str = ""
    taxi_cost: str = ""
    paths: List[DrivingPath] = Field(default_factory=list)


class DrivingResponse(AMapEnvelope):
    route: Optional[DrivingRoute] = None


# ---------------------------------------------------------------------------
# Geocoding (/v3/geocode/geo) and districts (/v3/config/district)
# ---------------------------------------------------------------------------

class Geocode(AMapModel):
    formatted_address: str = ""
    province: str = ""
    city: str = ""
    adcode: str = ""
    location: str = ""


class GeocodeResponse(AMapEnvelope):
    geocodes: List[Geocode] = Field(default_factory=list)


class District(AMapModel):
    name: str = ""
    adcode: str = ""
    center: str = ""
    level: str = ""


class DistrictResponse(AMapEnvelope):
    districts: List[District] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Resolved identifiers
# ---------------------------------------------------------------------------

class AreaCode(BaseModel):
    """Administrative region code, the weather endpoint's location key."""
    adcode: str


class Coordinate(BaseModel):
    """A resolved place for routing.

    ``location`` is AMap's "lon,lat" string; ``label`` is the provider's
    normalized address, used for display instead of the user's raw input.
    """
    location: str
    label: str

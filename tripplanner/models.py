# tripplanner/models.py
"""
Request-scoped value objects. None of them outlive a single search and
none are mutated after construction.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

WEATHER_ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"
MAX_PHOTOS = 6


class Intent(str, Enum):
    GENERAL = "general"
    ATTRACTIONS = "attractions"


class ResolvedVia(str, Enum):
    DIRECT = "direct"
    SEARCH_FALLBACK = "search_fallback"
    NOT_FOUND = "not_found"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class DestinationQuery(FrozenModel):
    raw_text: str
    intent: Intent = Intent.GENERAL


def to_celsius(value: float, units: str) -> float:
    """Convert a provider temperature in `units` (OpenWeatherMap naming) to Celsius."""
    if units == "metric":
        return float(value)
    if units == "imperial":
        return (float(value) - 32.0) * 5.0 / 9.0
    if units == "standard":
        return float(value) - 273.15
    raise ValueError(f"Unknown weather units: {units!r}")


class WeatherRecord(FrozenModel):
    temperature_c: float
    condition_text: str
    icon_code: str
    humidity_pct: float
    wind_speed_ms: float
    visibility_km: float

    @property
    def icon_url(self) -> str:
        return WEATHER_ICON_URL.format(icon=self.icon_code)

    @classmethod
    def from_provider(cls, data: Dict[str, Any], units: str = "metric") -> "WeatherRecord":
        """Build a record from raw OpenWeatherMap JSON requested with `units`."""
        main = data.get("main", {})
        weather_list = data.get("weather") or [{}]
        wind = data.get("wind", {})
        visibility_m = data.get("visibility") or 0

        return cls(
            temperature_c=round(to_celsius(main["temp"], units), 1),
            condition_text=weather_list[0].get("description", ""),
            icon_code=weather_list[0].get("icon", ""),
            humidity_pct=main.get("humidity", 0),
            wind_speed_ms=wind.get("speed", 0),
            visibility_km=round(visibility_m / 1000, 1),
        )


class PhotoTag(FrozenModel):
    type: str = ""
    title: str = ""


class PhotoRecord(FrozenModel):
    image_url: str
    alt_text: Optional[str] = None
    tags: List[PhotoTag] = Field(default_factory=list)
    link_url: str = ""
    display_label: str = Field(..., min_length=1)


class DestinationSummary(FrozenModel):
    title: str
    extract: str
    resolved_via: ResolvedVia

    @classmethod
    def not_found(cls) -> "DestinationSummary":
        return cls(
            title="Not found.",
            extract="No specific history found.",
            resolved_via=ResolvedVia.NOT_FOUND,
        )


class SearchResultBundle(FrozenModel):
    destination: str
    weather: Optional[WeatherRecord] = None
    photos: List[PhotoRecord] = Field(default_factory=list, max_length=MAX_PHOTOS)
    summary: DestinationSummary

# tripplanner/config.py
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import Misconfigured

load_dotenv()  # for local development; the Streamlit view passes st.secrets in instead

PLACEHOLDER_KEYS = frozenset(
    {
        "YOUR_OPENWEATHER_API_KEY_HERE",
        "YOUR_UNSPLASH_API_KEY_HERE",
        "NOT_CONFIGURED",
    }
)

DEFAULT_USER_AGENT = "tripplanner/1.0 (destination lookup)"
WEATHER_UNITS = ("metric", "standard", "imperial")


@dataclass(frozen=True)
class Settings:
    openweather_api_key: Optional[str] = None
    unsplash_access_key: Optional[str] = None
    weather_units: str = "metric"
    http_timeout: float = 10.0
    photos_per_page: int = 30
    wikipedia_lang: str = "en"
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"

    def __post_init__(self):
        if self.weather_units not in WEATHER_UNITS:
            raise Misconfigured(
                f"WEATHER_UNITS must be one of {', '.join(WEATHER_UNITS)}; got {self.weather_units!r}."
            )

    def require_openweather_key(self) -> str:
        return _require(self.openweather_api_key, "OPENWEATHER_API_KEY", "OpenWeatherMap")

    def require_unsplash_key(self) -> str:
        return _require(self.unsplash_access_key, "UNSPLASH_ACCESS_KEY", "Unsplash")


def _require(value: Optional[str], env_name: str, service: str) -> str:
    if not is_configured(value):
        raise Misconfigured(
            f"{service} API key not configured. Set {env_name} in the environment or .env file."
        )
    return value.strip()


def is_configured(value: Optional[str]) -> bool:
    """True when `value` looks like a real key rather than an empty or template value."""
    if not value or not value.strip():
        return False
    return value.strip() not in PLACEHOLDER_KEYS


def load_settings(source: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from `source` (defaults to the process environment).

    Keys are not validated here; a missing key only fails once a request
    that needs it is issued, so the encyclopedia lookup keeps working.
    """
    env = os.environ if source is None else source
    return Settings(
        openweather_api_key=env.get("OPENWEATHER_API_KEY"),
        unsplash_access_key=env.get("UNSPLASH_ACCESS_KEY") or env.get("UNSPLASH_API_KEY"),
        weather_units=env.get("WEATHER_UNITS", "metric").strip().lower(),
        http_timeout=float(env.get("HTTP_TIMEOUT", "10")),
        photos_per_page=int(env.get("PHOTOS_PER_PAGE", "30")),
        wikipedia_lang=env.get("WIKIPEDIA_LANG", "en"),
        user_agent=env.get("TRIPPLANNER_USER_AGENT", DEFAULT_USER_AGENT),
        log_level=env.get("LOG_LEVEL", "INFO"),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()

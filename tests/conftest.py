from typing import Any, Dict, List, Optional, Tuple

import pytest

from tripplanner.config import Settings
from tripplanner.transport import JsonResponse

SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/"
SEARCH_URL = "https://en.wikipedia.org/w/api.php"
WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
PHOTOS_URL = "https://api.unsplash.com/search/photos"


class FakeTransport:
    """
    Stand-in for `Transport` keyed by exact URL.

    A route value is a JsonResponse or an exception instance to raise.
    """

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = dict(routes or {})
        self.calls: List[Tuple[str, Optional[dict]]] = []

    async def fetch_json(self, url: str, params: Optional[dict] = None) -> JsonResponse:
        self.calls.append((url, params))
        try:
            result = self.routes[url]
        except KeyError:
            raise AssertionError(f"unexpected request to {url}")
        if isinstance(result, BaseException):
            raise result
        return result

    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]


def weather_body(temp: float = 21.4) -> dict:
    return {
        "main": {"temp": temp, "humidity": 64},
        "weather": [{"description": "scattered clouds", "icon": "03d"}],
        "wind": {"speed": 3.6},
        "visibility": 10000,
    }


def photo_item(alt: Optional[str], tags: Optional[list] = None, n: int = 0) -> dict:
    return {
        "urls": {"regular": f"https://images.example/{n}.jpg"},
        "alt_description": alt,
        "tags": tags or [],
        "links": {"html": f"https://unsplash.example/photos/{n}"},
    }


@pytest.fixture
def settings():
    return Settings(openweather_api_key="ow-test-key", unsplash_access_key="us-test-key")


@pytest.fixture
def ok_weather():
    return JsonResponse(200, weather_body())

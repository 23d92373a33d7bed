# tripplanner/providers.py
"""
Thin clients for the three providers: OpenWeatherMap, Unsplash and
Wikipedia. Keys arrive through `Settings`; nothing here reads the
environment.
"""
import logging
from typing import Any, Dict, List
from urllib.parse import quote

from .config import Settings
from .errors import NotFound, TransportFailure, Unauthorized
from .models import Intent, WeatherRecord
from .queries import build_photo_query
from .regions import is_subregion
from .transport import JsonResponse, Transport

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
UNSPLASH_SEARCH_URL = "https://api.unsplash.com/search/photos"


class WeatherClient:
    def __init__(self, settings: Settings, transport: Transport):
        self.settings = settings
        self.transport = transport

    async def fetch_raw(self, destination: str) -> JsonResponse:
        params = {
            "q": destination,
            "appid": self.settings.require_openweather_key(),
            "units": self.settings.weather_units,
        }
        return await self.transport.fetch_json(OPENWEATHER_URL, params=params)

    async def current(self, destination: str) -> WeatherRecord:
        resp = await self.fetch_raw(destination)
        if resp.status == 401:
            raise Unauthorized("Invalid API key. Please check your OpenWeatherMap API key.")
        if resp.status == 404:
            raise NotFound("City not found. Please check the spelling and try again.")
        if not resp.ok:
            logger.error("Weather lookup for %r returned status %s", destination, resp.status)
            raise TransportFailure(f"Weather service error: {resp.status}")
        try:
            return WeatherRecord.from_provider(resp.body, units=self.settings.weather_units)
        except (KeyError, TypeError, ValueError) as exc:
            raise TransportFailure("Weather service returned an unexpected payload") from exc


class PhotoClient:
    def __init__(self, settings: Settings, transport: Transport):
        self.settings = settings
        self.transport = transport

    async def fetch_raw(self, destination: str, intent: Intent = Intent.GENERAL) -> JsonResponse:
        query = build_photo_query(destination, intent, is_subregion(destination))
        params = {
            "query": query,
            "client_id": self.settings.require_unsplash_key(),
            "per_page": self.settings.photos_per_page,
            "orientation": "landscape",
            "order_by": "relevant",
        }
        return await self.transport.fetch_json(UNSPLASH_SEARCH_URL, params=params)

    async def search(self, destination: str, intent: Intent = Intent.GENERAL) -> List[Dict[str, Any]]:
        """Raw result items in provider relevance order."""
        resp = await self.fetch_raw(destination, intent)
        if resp.status == 401:
            raise Unauthorized("Invalid API key. Please check your Unsplash API key.")
        if not resp.ok:
            logger.error("Photo search for %r returned status %s", destination, resp.status)
            raise TransportFailure(f"Photo service error: {resp.status}")
        return (resp.body or {}).get("results") or []


def is_summary_miss(resp: JsonResponse) -> bool:
    """Wikipedia signals a miss with a 404 or an `Internal error` payload."""
    if resp.status == 404:
        return True
    body = resp.body if isinstance(resp.body, dict) else {}
    return body.get("type") == "Internal error"


class EncyclopediaClient:
    """Wikipedia REST summary + MediaWiki full-text search. No key required."""

    def __init__(self, settings: Settings, transport: Transport):
        self.transport = transport
        lang = settings.wikipedia_lang
        self.summary_url = f"https://{lang}.wikipedia.org/api/rest_v1/page/summary/"
        self.search_url = f"https://{lang}.wikipedia.org/w/api.php"

    async def summary(self, title: str) -> JsonResponse:
        """REST page summary; a miss is returned to the caller, other errors raise."""
        resp = await self.transport.fetch_json(self.summary_url + quote(title, safe=""))
        if not resp.ok and not is_summary_miss(resp):
            logger.error("Wikipedia summary for %r returned status %s", title, resp.status)
            raise TransportFailure(f"Encyclopedia service error: {resp.status}")
        return resp

    async def search_titles(self, text: str) -> List[str]:
        params = {
            "action": "query",
            "list": "search",
            "srsearch": text,
            "format": "json",
        }
        resp = await self.transport.fetch_json(self.search_url, params=params)
        if not resp.ok:
            logger.error("Wikipedia search for %r returned status %s", text, resp.status)
            raise TransportFailure(f"Encyclopedia search error: {resp.status}")
        hits = ((resp.body or {}).get("query") or {}).get("search") or []
        return [hit["title"] for hit in hits if hit.get("title")]

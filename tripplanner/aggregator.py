# tripplanner/aggregator.py
import asyncio
import logging
from typing import Any, Dict, Optional

from .config import Settings, get_settings
from .errors import TransportFailure
from .landmarks import label_photo
from .models import (
    DestinationQuery,
    DestinationSummary,
    Intent,
    MAX_PHOTOS,
    PhotoRecord,
    PhotoTag,
    SearchResultBundle,
)
from .providers import EncyclopediaClient, PhotoClient, WeatherClient
from .resolver import DestinationResolver
from .transport import Transport

logger = logging.getLogger(__name__)


def to_photo_record(item: Dict[str, Any], destination: str) -> PhotoRecord:
    tags = [
        PhotoTag(type=t.get("type") or "", title=t.get("title") or "")
        for t in item.get("tags") or []
    ]
    return PhotoRecord(
        image_url=(item.get("urls") or {}).get("regular", ""),
        alt_text=item.get("alt_description"),
        tags=tags,
        link_url=(item.get("links") or {}).get("html", ""),
        display_label=label_photo(item, destination),
    )


class ResultAggregator:
    def __init__(
        self,
        weather: WeatherClient,
        photos: PhotoClient,
        resolver: DestinationResolver,
    ):
        self.weather = weather
        self.photos = photos
        self.resolver = resolver

    async def _destination_info(self, destination: str) -> DestinationSummary:
        try:
            return await self.resolver.resolve(destination)
        except TransportFailure as exc:
            # Shown to the user as "not found", kept distinct in the logs.
            logger.warning("Destination info for %r unavailable: %s", destination, exc)
            return DestinationSummary.not_found()

    async def search(self, destination: str, intent: Intent = Intent.GENERAL) -> SearchResultBundle:
        """
        Fetch weather, photos and destination info concurrently.

        Weather or photo failures abort the whole search; no partial bundle
        is returned.
        """
        query = DestinationQuery(raw_text=destination.strip(), intent=intent)
        destination, intent = query.raw_text, query.intent
        info_task = asyncio.ensure_future(self._destination_info(destination))
        try:
            weather, results = await asyncio.gather(
                self.weather.current(destination),
                self.photos.search(destination, intent),
            )
        except BaseException:
            info_task.cancel()
            raise

        summary = await info_task
        photos = [to_photo_record(item, destination) for item in results[:MAX_PHOTOS]]
        logger.info(
            "Search %r (%s): %d photos, summary via %s",
            destination,
            intent.value,
            len(photos),
            summary.resolved_via.value,
        )
        return SearchResultBundle(
            destination=destination,
            weather=weather,
            photos=photos,
            summary=summary,
        )


def build_aggregator(
    settings: Optional[Settings] = None,
    transport: Optional[Transport] = None,
) -> ResultAggregator:
    settings = settings or get_settings()
    transport = transport or Transport(timeout=settings.http_timeout, user_agent=settings.user_agent)
    return ResultAggregator(
        weather=WeatherClient(settings, transport),
        photos=PhotoClient(settings, transport),
        resolver=DestinationResolver(EncyclopediaClient(settings, transport)),
    )


def search_sync(
    destination: str,
    intent: Intent = Intent.GENERAL,
    aggregator: Optional[ResultAggregator] = None,
) -> SearchResultBundle:
    """
    Synchronous wrapper for Streamlit.
    """
    aggregator = aggregator or build_aggregator()
    return asyncio.run(aggregator.search(destination, intent))

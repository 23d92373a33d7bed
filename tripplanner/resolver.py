# tripplanner/resolver.py
import logging
from dataclasses import dataclass
from typing import Any, Dict

from .models import DestinationSummary, ResolvedVia
from .providers import EncyclopediaClient, is_summary_miss

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {"extract": "No specific history found.", "title": "Not found."}


@dataclass(frozen=True)
class Resolution:
    """Final provider body plus how it was reached."""

    body: Dict[str, Any]
    resolved_via: ResolvedVia
    fallback_title: str

    def to_summary(self) -> DestinationSummary:
        if self.resolved_via is ResolvedVia.NOT_FOUND:
            return DestinationSummary.not_found()
        return DestinationSummary(
            title=self.body.get("title") or self.fallback_title,
            extract=self.body.get("extract") or "",
            resolved_via=self.resolved_via,
        )


def _as_dict(body: Any) -> Dict[str, Any]:
    return body if isinstance(body, dict) else {}


def _not_found(destination: str) -> Resolution:
    return Resolution(dict(NOT_FOUND_BODY), ResolvedVia.NOT_FOUND, destination)


class DestinationResolver:
    """
    Two-stage encyclopedia lookup: direct title summary first, then a
    full-text search whose top hit is summarised instead.

    Transport errors and unexpected provider statuses are not caught here;
    only a provider-reported miss turns into the NOT_FOUND sentinel.
    """

    def __init__(self, encyclopedia: EncyclopediaClient):
        self.encyclopedia = encyclopedia

    async def lookup(self, destination: str) -> Resolution:
        resp = await self.encyclopedia.summary(destination)
        if not is_summary_miss(resp):
            return Resolution(_as_dict(resp.body), ResolvedVia.DIRECT, destination)

        logger.info("Direct summary for %r missed; trying full-text search", destination)
        titles = await self.encyclopedia.search_titles(destination)
        if not titles:
            logger.info("Search returned no results for %r", destination)
            return _not_found(destination)

        top_title = titles[0]
        logger.info("Using top search hit %r for %r", top_title, destination)
        resp = await self.encyclopedia.summary(top_title)
        if is_summary_miss(resp):
            logger.info("Summary for top hit %r missed as well", top_title)
            return _not_found(destination)
        return Resolution(_as_dict(resp.body), ResolvedVia.SEARCH_FALLBACK, top_title)

    async def resolve(self, destination: str) -> DestinationSummary:
        return (await self.lookup(destination)).to_summary()

import asyncio

import pytest

from conftest import PHOTOS_URL, SEARCH_URL, SUMMARY_URL, WEATHER_URL, FakeTransport, photo_item
from tripplanner.config import Settings
from tripplanner.errors import Misconfigured, NotFound, TransportFailure, Unauthorized
from tripplanner.models import Intent
from tripplanner.providers import EncyclopediaClient, PhotoClient, WeatherClient
from tripplanner.transport import JsonResponse


def test_weather_current_parses_record(settings, ok_weather):
    transport = FakeTransport({WEATHER_URL: ok_weather})
    record = asyncio.run(WeatherClient(settings, transport).current("Paris"))

    assert record.temperature_c == 21.4
    _, params = transport.calls[0]
    assert params == {"q": "Paris", "appid": "ow-test-key", "units": "metric"}


@pytest.mark.parametrize(
    "status, error",
    [(401, Unauthorized), (404, NotFound), (500, TransportFailure)],
)
def test_weather_status_errors(settings, status, error):
    transport = FakeTransport({WEATHER_URL: JsonResponse(status, {"cod": status})})
    with pytest.raises(error):
        asyncio.run(WeatherClient(settings, transport).current("Nowhere"))


def test_weather_malformed_payload(settings):
    transport = FakeTransport({WEATHER_URL: JsonResponse(200, {"weather": []})})
    with pytest.raises(TransportFailure):
        asyncio.run(WeatherClient(settings, transport).current("Paris"))


def test_weather_without_key_never_hits_network():
    transport = FakeTransport()
    client = WeatherClient(Settings(openweather_api_key="NOT_CONFIGURED"), transport)
    with pytest.raises(Misconfigured):
        asyncio.run(client.current("Paris"))
    assert transport.calls == []


def test_photo_query_uses_region_qualifier(settings):
    transport = FakeTransport({PHOTOS_URL: JsonResponse(200, {"results": []})})
    asyncio.run(PhotoClient(settings, transport).search("Kerala", Intent.ATTRACTIONS))

    _, params = transport.calls[0]
    assert params["query"] == '"Kerala" "India" tourist attractions landmarks monuments temples'
    assert params["client_id"] == "us-test-key"
    assert params["per_page"] == 30
    assert params["orientation"] == "landscape"
    assert params["order_by"] == "relevant"


def test_photo_search_returns_raw_results(settings):
    items = [photo_item("a", n=i) for i in range(3)]
    transport = FakeTransport({PHOTOS_URL: JsonResponse(200, {"results": items})})
    assert asyncio.run(PhotoClient(settings, transport).search("Paris")) == items


def test_photo_search_unauthorized(settings):
    transport = FakeTransport({PHOTOS_URL: JsonResponse(401, {"errors": ["OAuth error"]})})
    with pytest.raises(Unauthorized):
        asyncio.run(PhotoClient(settings, transport).search("Paris"))


def test_encyclopedia_summary_quotes_title(settings):
    url = SUMMARY_URL + "New%20York%2FCity"
    transport = FakeTransport({url: JsonResponse(200, {"title": "New York City"})})
    resp = asyncio.run(EncyclopediaClient(settings, transport).summary("New York/City"))
    assert resp.body["title"] == "New York City"


def test_encyclopedia_search_titles(settings):
    body = {"query": {"search": [{"title": "Jaipur"}, {"title": "Jaipur district"}]}}
    transport = FakeTransport({SEARCH_URL: JsonResponse(200, body)})
    titles = asyncio.run(EncyclopediaClient(settings, transport).search_titles("jaipur city"))

    assert titles == ["Jaipur", "Jaipur district"]
    _, params = transport.calls[0]
    assert params["srsearch"] == "jaipur city"
    assert params["list"] == "search"


def test_encyclopedia_search_without_query_block(settings):
    transport = FakeTransport({SEARCH_URL: JsonResponse(200, {"batchcomplete": ""})})
    assert asyncio.run(EncyclopediaClient(settings, transport).search_titles("zz")) == []


def test_encyclopedia_summary_passes_misses_through(settings):
    transport = FakeTransport({SUMMARY_URL + "Atlantis": JsonResponse(404, {"type": "not_found"})})
    resp = asyncio.run(EncyclopediaClient(settings, transport).summary("Atlantis"))
    assert resp.status == 404


@pytest.mark.parametrize("status", [429, 500, 503])
def test_encyclopedia_summary_error_status(settings, status):
    transport = FakeTransport({SUMMARY_URL + "Paris": JsonResponse(status, {"title": "Error"})})
    with pytest.raises(TransportFailure):
        asyncio.run(EncyclopediaClient(settings, transport).summary("Paris"))


def test_encyclopedia_search_error_status(settings):
    transport = FakeTransport({SEARCH_URL: JsonResponse(500, {"error": {"code": "internal_api_error"}})})
    with pytest.raises(TransportFailure):
        asyncio.run(EncyclopediaClient(settings, transport).search_titles("Paris"))

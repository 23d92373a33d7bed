import asyncio
from unittest.mock import MagicMock

import pytest
import requests

from tripplanner.errors import TransportFailure
from tripplanner.transport import JsonResponse, Transport, redact


def _session(status=200, body=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status
    resp.url = "https://api.example/endpoint?appid=secret"
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    session = MagicMock()
    session.headers = {}
    session.get.return_value = resp
    return session


def test_fetch_json_returns_status_and_body():
    session = _session(404, {"title": "Not found."})
    transport = Transport(timeout=3.0, session=session)

    resp = asyncio.run(transport.fetch_json("https://api.example/endpoint", params={"q": "x"}))

    assert resp == JsonResponse(404, {"title": "Not found."})
    assert not resp.ok
    session.get.assert_called_once_with("https://api.example/endpoint", params={"q": "x"}, timeout=3.0)


def test_user_agent_set_on_session():
    session = _session()
    Transport(user_agent="tripplanner-tests", session=session)
    assert session.headers["User-Agent"] == "tripplanner-tests"


def test_network_error_becomes_transport_failure():
    session = MagicMock()
    session.headers = {}
    session.get.side_effect = requests.ConnectionError("dns failure")
    transport = Transport(session=session)

    with pytest.raises(TransportFailure):
        transport.get_json("https://api.example/endpoint")


def test_non_json_body_becomes_transport_failure():
    transport = Transport(session=_session(200, json_error=ValueError("no json")))
    with pytest.raises(TransportFailure) as excinfo:
        transport.get_json("https://api.example/endpoint")
    assert "status 200" in excinfo.value.message


def test_redact_hides_keys():
    url = "https://api.example/weather?q=Paris&appid=abc123&units=metric"
    assert redact(url) == "https://api.example/weather?q=Paris&appid=<redacted>&units=metric"
    assert redact("https://x/photos?client_id=zzz") == "https://x/photos?client_id=<redacted>"

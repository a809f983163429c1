from __future__ import annotations

import asyncio

import httpx
import pytest
from pydantic import BaseModel

from music_exporter.adapters.http import HttpClient, HttpConfig
from music_exporter.domain.errors import MusicExporterError, ParseError, TransportError
from tests.support.fakes import RecordingTransport


class Greeting(BaseModel):
    message: str


def _get(transport: httpx.AsyncBaseTransport, **kwargs: object) -> Greeting:
    async def scenario() -> Greeting:
        config = HttpConfig(name="Test", base_url="https://api.example")
        async with HttpClient(config, transport=transport) as http:
            return await http.get_model(
                "/hello",
                Greeting,
                what="greeting",
                **kwargs,  # type: ignore[arg-type]
            )

    return asyncio.run(scenario())


def test_get_model_parses_json_and_sends_params() -> None:
    transport = RecordingTransport(lambda _request: httpx.Response(200, json={"message": "hi"}))

    greeting = _get(transport, params={"limit": 50}, headers={"cookie": "arl=1"})

    assert greeting == Greeting(message="hi")
    (request,) = transport.requests
    assert request.url == httpx.URL("https://api.example/hello?limit=50")
    assert request.headers["cookie"] == "arl=1"
    assert request.headers["Accept"] == "application/json"


def test_non_success_status_is_transport_error() -> None:
    transport = RecordingTransport(lambda _request: httpx.Response(503, text="down"))

    with pytest.raises(TransportError, match=r"Test: failed to get greeting \(503\)") as excinfo:
        _get(transport)

    assert excinfo.value.status_code == 503


def test_network_failure_is_transport_error_with_cause() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as excinfo:
        _get(httpx.MockTransport(handler))

    assert isinstance(excinfo.value.cause, httpx.ConnectError)
    assert excinfo.value.status_code is None
    assert "caused by: connection refused" in str(excinfo.value)


def test_invalid_body_is_parse_error() -> None:
    transport = RecordingTransport(lambda _request: httpx.Response(200, text="<html>"))

    with pytest.raises(ParseError, match="failed to parse greeting"):
        _get(transport)


def test_errors_share_the_exporter_base() -> None:
    assert issubclass(TransportError, MusicExporterError)
    assert issubclass(ParseError, MusicExporterError)

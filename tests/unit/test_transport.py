from __future__ import annotations

import logging

import httpx
import pytest

from eonet_client.core.errors import EonetTransportError
from eonet_client.core.transport import SyncTransport
from tests.shared.transport import Response, SyncSequencedClient, build_config

URL = "https://eonet.sci.gsfc.nasa.gov/api/v3/categories"


def test_fetch_returns_body_bytes():
    client = SyncSequencedClient([Response(200, b'{"title": "ok"}')])
    transport = SyncTransport(build_config(), client=client)
    assert transport.fetch(URL) == b'{"title": "ok"}'
    assert client.urls == [URL]


@pytest.mark.parametrize("http_status", [301, 404, 500, 503])
def test_fetch_returns_body_for_non_2xx_status(http_status):
    client = SyncSequencedClient([Response(http_status, b"upstream says no")])
    transport = SyncTransport(build_config(), client=client)
    assert transport.fetch(URL) == b"upstream says no"


@pytest.mark.parametrize(
    "step",
    [
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
        RuntimeError("network down"),
        Response(200, httpx.ReadError("connection reset while reading body")),
    ],
    ids=["connect", "timeout", "generic", "body-read"],
)
def test_fetch_wraps_failures_in_transport_error(step):
    client = SyncSequencedClient([step])
    transport = SyncTransport(build_config(), client=client)
    with pytest.raises(EonetTransportError) as excinfo:
        transport.fetch(URL)
    assert excinfo.value.cause == "network"
    assert excinfo.value.__cause__ is not None
    assert client.calls == 1


def test_fetch_does_not_retry():
    client = SyncSequencedClient([RuntimeError("down"), Response(200, b"{}")])
    transport = SyncTransport(build_config(), client=client)
    with pytest.raises(EonetTransportError):
        transport.fetch(URL)
    assert client.calls == 1
    assert len(client.steps) == 1


def test_fetch_after_close_raises():
    transport = SyncTransport(build_config(), client=SyncSequencedClient([]))
    transport.close()
    with pytest.raises(EonetTransportError, match="already closed"):
        transport.fetch(URL)


def test_close_leaves_injected_client_open():
    client = SyncSequencedClient([])
    transport = SyncTransport(build_config(), client=client)
    transport.close()
    assert client.closed is False


def test_fetch_logs_network_error(caplog):
    caplog.set_level(logging.DEBUG, logger="eonet_client")
    transport = SyncTransport(build_config(), client=SyncSequencedClient([RuntimeError("down")]))
    with pytest.raises(EonetTransportError):
        transport.fetch(URL)
    assert any("request network error" in record.getMessage() for record in caplog.records)
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_transport_can_initialize_and_close_with_real_httpx_client():
    transport = SyncTransport(build_config())
    transport.close()

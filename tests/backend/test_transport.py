"""Tests for the websocket transport adapter and wire helpers."""

import asyncio
import math

import pytest
from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK

from gatewire.protocol.wire import encode_frame
from gatewire.transport.base import GatewayTransport, TransportError
from gatewire.transport.websocket import WebSocketTransport


class FakeConnection:
    """Stands in for an open websockets client connection."""

    def __init__(self, error: Exception | None = None) -> None:
        self.messages: list[str] = []
        self.error = error

    async def send(self, message):
        if self.error is not None:
            raise self.error
        self.messages.append(message)


class TestWire:
    def test_compact_encoding(self):
        assert encode_frame({"op": 1, "d": None}) == '{"op":1,"d":null}'

    def test_non_ascii_kept(self):
        assert encode_frame({"d": {"query": "é"}}) == '{"d":{"query":"é"}}'

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            encode_frame({"d": math.nan})


class TestWebSocketTransport:
    def test_satisfies_protocol(self):
        assert isinstance(WebSocketTransport(FakeConnection()), GatewayTransport)

    def test_sends_one_text_message(self):
        conn = FakeConnection()
        transport = WebSocketTransport(conn)
        asyncio.run(transport.send_json({"op": 1, "d": 5}))
        assert conn.messages == ['{"op":1,"d":5}']

    def test_connection_closed_wrapped(self):
        cause = ConnectionClosedOK(None, None)
        transport = WebSocketTransport(FakeConnection(error=cause))
        with pytest.raises(TransportError) as excinfo:
            asyncio.run(transport.send_json({"op": 1, "d": None}))
        assert excinfo.value.__cause__ is cause

    def test_connection_error_wrapped(self):
        transport = WebSocketTransport(FakeConnection(error=ConnectionClosedError(None, None)))
        with pytest.raises(TransportError):
            asyncio.run(transport.send_json({"op": 1, "d": None}))

    def test_os_error_wrapped(self):
        transport = WebSocketTransport(FakeConnection(error=BrokenPipeError("pipe")))
        with pytest.raises(TransportError):
            asyncio.run(transport.send_json({"op": 1, "d": None}))

    def test_unserializable_payload_not_sent(self):
        conn = FakeConnection()
        transport = WebSocketTransport(conn)
        with pytest.raises(TransportError) as excinfo:
            asyncio.run(transport.send_json({"op": 1, "d": object()}))
        assert isinstance(excinfo.value.__cause__, TypeError)
        assert conn.messages == []

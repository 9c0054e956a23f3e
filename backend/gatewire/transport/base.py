"""Transport contract consumed by the gateway send operations."""

from typing import Any, Protocol, runtime_checkable


class TransportError(Exception):
    """A frame could not be sent. The original error is ``__cause__``."""


@runtime_checkable
class GatewayTransport(Protocol):
    """An already-connected, single-writer gateway connection."""

    async def send_json(self, payload: dict[str, Any]) -> None:
        """Serialize and transmit one frame, raising TransportError on failure."""
        ...

"""Gateway transport backed by a ``websockets`` client connection.

The connection is opened and closed by the caller; this adapter only
writes frames to it.
"""

import logging
from typing import Any

from websockets.exceptions import WebSocketException

from ..protocol.wire import encode_frame
from .base import TransportError

logger = logging.getLogger(__name__)


class WebSocketTransport:
    """Send JSON frames over an open websocket connection.

    No locking: callers serialise access to one connection.
    """

    def __init__(self, connection: Any) -> None:
        self._connection = connection

    async def send_json(self, payload: dict[str, Any]) -> None:
        """Encode ``payload`` completely, then send it as one text message."""
        try:
            text = encode_frame(payload)
        except (TypeError, ValueError) as exc:
            raise TransportError(f"Failed to encode frame: {exc}") from exc

        try:
            await self._connection.send(text)
        except WebSocketException as exc:
            # Covers ConnectionClosed and protocol errors
            logger.debug("Websocket send failed: %s", exc)
            raise TransportError(str(exc)) from exc
        except OSError as exc:
            logger.debug("Socket write failed: %s", exc)
            raise TransportError(str(exc)) from exc

"""Gateway wire helper: one JSON object per websocket text message."""

import json
from typing import Any


def encode_frame(payload: dict[str, Any]) -> str:
    """Serialize a frame payload to compact JSON text.

    Raises TypeError / ValueError for values JSON cannot represent.
    """
    return json.dumps(
        payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False,
    )

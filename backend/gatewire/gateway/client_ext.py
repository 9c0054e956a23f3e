"""Gateway send operations: build one frame and hand it to the transport.

Each operation awaits exactly one ``transport.send_json`` and propagates any
TransportError unchanged. Nothing is retried, buffered or awaited from the
peer; acknowledgements arrive through the inbound dispatcher.
"""

import logging
import time
from typing import Callable, SupportsInt

from ..config import settings
from ..protocol.commands import (
    build_heartbeat,
    build_identify,
    build_presence_update,
    build_request_guild_members,
    build_resume,
)
from ..protocol.filters import NO_FILTER, ChunkGuildFilter
from ..schemas.gateway import CurrentPresence, GatewayFrame, ShardInfo
from ..transport.base import GatewayTransport

logger = logging.getLogger(__name__)


async def _send(transport: GatewayTransport, frame: GatewayFrame) -> None:
    await transport.send_json(frame.to_payload())


async def send_chunk_guild(
    transport: GatewayTransport,
    guild_id: SupportsInt,
    shard_info: ShardInfo,
    limit: int | None = None,
    chunk_filter: ChunkGuildFilter = NO_FILTER,
    nonce: str | None = None,
) -> None:
    """Request member chunks for a guild."""
    logger.debug("[Shard %s] Requesting member chunks", list(shard_info))
    frame = build_request_guild_members(guild_id, limit, chunk_filter, nonce)
    await _send(transport, frame)


async def send_heartbeat(
    transport: GatewayTransport,
    shard_info: ShardInfo,
    seq: int | None,
) -> None:
    logger.debug("[Shard %s] Sending heartbeat d: %s", list(shard_info), seq)
    await _send(transport, build_heartbeat(seq))


async def send_identify(
    transport: GatewayTransport,
    shard_info: ShardInfo,
    token: str,
    intents: SupportsInt,
    *,
    include_intents: bool | None = None,
) -> None:
    """Identify a new session.

    ``include_intents`` defaults to ``settings.identify_include_intents``.
    """
    if include_intents is None:
        include_intents = settings.identify_include_intents
    logger.debug("[Shard %s] Identifying", list(shard_info))
    await _send(transport, build_identify(token, intents, include_intents))


async def send_presence_update(
    transport: GatewayTransport,
    shard_info: ShardInfo,
    current_presence: CurrentPresence,
    *,
    clock: Callable[[], int] = time.time_ns,
) -> None:
    """Update presence.

    ``since`` is read from ``clock`` in epoch nanoseconds on every call,
    never cached.
    """
    since = clock()
    logger.debug("[Shard %s] Sending presence update", list(shard_info))
    await _send(transport, build_presence_update(current_presence, since))


async def send_resume(
    transport: GatewayTransport,
    shard_info: ShardInfo,
    session_id: str,
    seq: int,
    token: str,
) -> None:
    logger.debug("[Shard %s] Sending resume; seq: %s", list(shard_info), seq)
    await _send(transport, build_resume(session_id, seq, token))


class GatewayCommands:
    """The send operations bound to one shard's transport.

    Like the functions it wraps, this holds no session state: sequence
    numbers, session ids and tokens are passed on every call.
    """

    def __init__(self, transport: GatewayTransport, shard_info: ShardInfo) -> None:
        self.transport = transport
        self.shard_info = shard_info

    async def request_members(
        self,
        guild_id: SupportsInt,
        limit: int | None = None,
        chunk_filter: ChunkGuildFilter = NO_FILTER,
        nonce: str | None = None,
    ) -> None:
        await send_chunk_guild(
            self.transport, guild_id, self.shard_info, limit, chunk_filter, nonce,
        )

    async def heartbeat(self, seq: int | None) -> None:
        await send_heartbeat(self.transport, self.shard_info, seq)

    async def identify(
        self,
        token: str,
        intents: SupportsInt,
        *,
        include_intents: bool | None = None,
    ) -> None:
        await send_identify(
            self.transport, self.shard_info, token, intents,
            include_intents=include_intents,
        )

    async def update_presence(
        self,
        current_presence: CurrentPresence,
        *,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        await send_presence_update(
            self.transport, self.shard_info, current_presence, clock=clock,
        )

    async def resume(self, session_id: str, seq: int, token: str) -> None:
        await send_resume(self.transport, self.shard_info, session_id, seq, token)

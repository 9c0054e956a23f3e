"""Frame builders for the five outbound gateway commands.

Builders are pure: they take typed arguments and return a GatewayFrame.
Sending and clock sampling happen in ``gateway.client_ext``.
"""

from typing import SupportsInt

from ..schemas.gateway import CurrentPresence, GatewayFrame
from .constants import (
    CAPABILITIES,
    DEFAULT_CHUNK_LIMIT,
    DEFAULT_CHUNK_NONCE,
    IDENTIFY_PROPERTIES,
    LARGE_THRESHOLD,
    OpCode,
)
from .filters import NO_FILTER, ChunkGuildFilter, resolve_chunk_filter


def build_request_guild_members(
    guild_id: SupportsInt,
    limit: int | None = None,
    chunk_filter: ChunkGuildFilter = NO_FILTER,
    nonce: str | None = None,
) -> GatewayFrame:
    """Build a GetGuildMembers frame.

    ``guild_id`` is sent as a decimal string since snowflakes exceed the
    safe-integer range of some JSON parsers. An absent ``limit`` becomes 0
    (no cap) and an absent ``nonce`` becomes "". No upper bound is applied
    to ``limit``; the peer enforces its own.
    """
    body = {
        "guild_id": str(int(guild_id)),
        "limit": DEFAULT_CHUNK_LIMIT if limit is None else limit,
        "nonce": DEFAULT_CHUNK_NONCE if nonce is None else nonce,
    }
    body.update(resolve_chunk_filter(chunk_filter))
    return GatewayFrame(op=OpCode.GET_GUILD_MEMBERS, d=body)


def build_heartbeat(seq: int | None) -> GatewayFrame:
    """Build a Heartbeat frame. ``d`` is the bare sequence number or null."""
    return GatewayFrame(op=OpCode.HEARTBEAT, d=seq)


def build_identify(
    token: str,
    intents: SupportsInt,
    include_intents: bool = False,
) -> GatewayFrame:
    """Build an Identify frame.

    The properties block is the fixed client fingerprint. ``intents`` is
    only embedded when ``include_intents`` is set.
    """
    body = {
        "token": token,
        "capabilities": CAPABILITIES,
        "properties": dict(IDENTIFY_PROPERTIES),
        "compress": True,
        "large_threshold": LARGE_THRESHOLD,
    }
    if include_intents:
        body["intents"] = int(intents)
    return GatewayFrame(op=OpCode.IDENTIFY, d=body)


def build_presence_update(presence: CurrentPresence, since: int) -> GatewayFrame:
    """Build a StatusUpdate frame; ``since`` is epoch nanoseconds."""
    activity, status = presence
    return GatewayFrame(
        op=OpCode.STATUS_UPDATE,
        d={
            "afk": False,
            "since": since,
            "status": status.render(),
            "game": activity.render() if activity is not None else None,
        },
    )


def build_resume(session_id: str, seq: int, token: str) -> GatewayFrame:
    """Build a Resume frame. Values are passed through unchecked."""
    return GatewayFrame(
        op=OpCode.RESUME,
        d={"session_id": session_id, "seq": seq, "token": token},
    )

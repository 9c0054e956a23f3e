"""Pydantic schemas for gateway frames and presence values."""

from enum import Enum, IntEnum, IntFlag
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..protocol.constants import OpCode

# (shard index, shard count); carried for logging only
ShardInfo = tuple[int, int]


class GatewayIntents(IntFlag):
    """Gateway intents bitmask. Passed through verbatim, never interpreted."""
    GUILDS = 1 << 0
    GUILD_MEMBERS = 1 << 1
    GUILD_MODERATION = 1 << 2
    GUILD_EMOJIS_AND_STICKERS = 1 << 3
    GUILD_INTEGRATIONS = 1 << 4
    GUILD_WEBHOOKS = 1 << 5
    GUILD_INVITES = 1 << 6
    GUILD_VOICE_STATES = 1 << 7
    GUILD_PRESENCES = 1 << 8
    GUILD_MESSAGES = 1 << 9
    GUILD_MESSAGE_REACTIONS = 1 << 10
    GUILD_MESSAGE_TYPING = 1 << 11
    DIRECT_MESSAGES = 1 << 12
    DIRECT_MESSAGE_REACTIONS = 1 << 13
    DIRECT_MESSAGE_TYPING = 1 << 14
    MESSAGE_CONTENT = 1 << 15


class ActivityType(IntEnum):
    PLAYING = 0
    STREAMING = 1
    LISTENING = 2
    WATCHING = 3
    CUSTOM = 4
    COMPETING = 5


class OnlineStatus(str, Enum):
    ONLINE = "online"
    DO_NOT_DISTURB = "dnd"
    IDLE = "idle"
    INVISIBLE = "invisible"
    OFFLINE = "offline"

    def render(self) -> str:
        """Wire string for the ``status`` field."""
        return self.value


class Activity(BaseModel):
    """Activity shown alongside a presence update."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ActivityType = ActivityType.PLAYING
    url: str | None = None

    def render(self) -> dict[str, Any]:
        return {"name": self.name, "type": int(self.kind), "url": self.url}


CurrentPresence = tuple[Activity | None, OnlineStatus]


class GatewayFrame(BaseModel):
    """Outbound frame envelope: ``{"op": <int>, "d": <body>}``."""

    model_config = ConfigDict(frozen=True)

    op: OpCode
    d: Any = None

    def to_payload(self) -> dict[str, Any]:
        """Plain dict for the transport. ``d`` is always present, null included."""
        return {"op": int(self.op), "d": self.d}

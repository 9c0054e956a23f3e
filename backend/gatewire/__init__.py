"""Client-side command encoder for sharded gateway connections."""

from .gateway.client_ext import (
    GatewayCommands,
    send_chunk_guild,
    send_heartbeat,
    send_identify,
    send_presence_update,
    send_resume,
)
from .protocol.constants import OpCode
from .protocol.filters import (
    NO_FILTER,
    ChunkGuildFilter,
    NoFilter,
    QueryFilter,
    UserIdsFilter,
)
from .schemas.gateway import (
    Activity,
    ActivityType,
    CurrentPresence,
    GatewayFrame,
    GatewayIntents,
    OnlineStatus,
    ShardInfo,
)
from .transport.base import GatewayTransport, TransportError

__version__ = "0.1.0"

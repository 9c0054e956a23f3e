"""Protocol constants for the gateway connection.

The opcode table is shared with the inbound dispatcher; import it from here
rather than redefining the numbers.
"""

from enum import IntEnum


class OpCode(IntEnum):
    """Gateway opcodes carried in the ``op`` field of every frame."""
    DISPATCH = 0
    HEARTBEAT = 1
    IDENTIFY = 2
    STATUS_UPDATE = 3
    VOICE_STATE_UPDATE = 4
    VOICE_SERVER_PING = 5
    RESUME = 6
    RECONNECT = 7
    GET_GUILD_MEMBERS = 8
    INVALID_SESSION = 9
    HELLO = 10
    HEARTBEAT_ACK = 11


# Identify fingerprint (the peer fingerprints clients by this block)
CAPABILITIES = 8189
BROWSER_VERSION = "112.0.0.0"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    f"(KHTML, like Gecko) Chrome/{BROWSER_VERSION} Safari/537.36"
)
LARGE_THRESHOLD = 250

IDENTIFY_PROPERTIES = {
    "os": "Windows",
    "browser": "Chrome",
    "device": "",
    "system_locale": "en-US",
    "browser_user_agent": USER_AGENT,
    "browser_version": BROWSER_VERSION,
    "os_version": "10",
    "referrer": "",
    "referring_domain": "",
    "release_channel": "stable",
}

# Member chunk request defaults: limit 0 means "no cap"
DEFAULT_CHUNK_LIMIT = 0
DEFAULT_CHUNK_NONCE = ""

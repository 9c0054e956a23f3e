"""Member chunk filters and their resolution into request body fields.

The peer expects exactly one of ``query`` or ``user_ids`` in a member
chunk request. "No filter" is sent as an empty ``query``, not an absent one.
"""

from dataclasses import dataclass
from typing import Any, Iterable, SupportsInt, assert_never


@dataclass(frozen=True)
class NoFilter:
    """Request every member."""


@dataclass(frozen=True)
class QueryFilter:
    """Members whose name starts with ``text``."""

    text: str


@dataclass(frozen=True)
class UserIdsFilter:
    """An explicit list of member ids, kept in caller order."""

    user_ids: tuple[int, ...]

    @classmethod
    def of(cls, user_ids: Iterable[SupportsInt]) -> "UserIdsFilter":
        return cls(tuple(int(user_id) for user_id in user_ids))


ChunkGuildFilter = NoFilter | QueryFilter | UserIdsFilter

NO_FILTER = NoFilter()


def resolve_chunk_filter(chunk_filter: ChunkGuildFilter) -> dict[str, Any]:
    """Return the body fields implied by a chunk filter."""
    match chunk_filter:
        case NoFilter():
            return {"query": ""}
        case QueryFilter(text=text):
            return {"query": text}
        case UserIdsFilter(user_ids=user_ids):
            return {"user_ids": [int(user_id) for user_id in user_ids]}
        case _:
            assert_never(chunk_filter)

"""Store keys, key prefixes and id encoding used by the movie module."""

from __future__ import annotations

import struct

MODULE_NAME = "movie"
STORE_KEY = MODULE_NAME
ROUTER_KEY = MODULE_NAME
MEM_STORE_KEY = "mem_movie"

MOVIE_KEY = "Movie/value/"
MOVIE_COUNT_KEY = "Movie/count/"

REVIEW_KEY = "Review/value/"
REVIEW_COUNT_KEY = "Review/count/"

REVIEWS_ALLOCATION_KEY_PREFIX = "ReviewsAllocation/value/"
TITTLE_ALLOCATION_KEY_PREFIX = "TittleAllocation/value/"

UINT64_MAX = 2**64 - 1

_UINT64 = struct.Struct(">Q")


def key_prefix(p: str) -> bytes:
    """Return the raw bytes of a key prefix."""
    return p.encode("utf-8")


def id_to_bytes(value: int) -> bytes:
    """Encode an unsigned 64-bit id as 8 big-endian bytes."""
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"id {value} does not fit in an unsigned 64-bit integer")
    return _UINT64.pack(value)


def id_from_bytes(data: bytes) -> int:
    """Decode the first 8 big-endian bytes of ``data`` as an unsigned id."""
    if len(data) < _UINT64.size:
        raise ValueError(f"need at least {_UINT64.size} bytes, got {len(data)}")
    return _UINT64.unpack_from(data)[0]


def reviews_allocation_key(movie_id: int) -> bytes:
    """Store key of the reviews allocation of a movie."""
    return id_to_bytes(movie_id) + b"/"


def tittle_allocation_key(movie_title: str) -> bytes:
    """Store key of the allocation of a movie title."""
    return movie_title.encode("utf-8") + b"/"
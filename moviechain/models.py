"""Records kept in the movie store and their byte encoding."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from typing import TypeVar


@dataclass
class Movie:
    creator: str = ""
    id: int = 0
    title: str = ""
    plot: str = ""
    year: int = 0
    genre: str = ""
    language: str = ""
    is_published: bool = False


@dataclass
class Review:
    creator: str = ""
    id: int = 0
    movie_id: int = 0
    star: int = 0
    comment: str = ""


@dataclass
class TittleAllocation:
    movie_title: str = ""
    movie_id: int = 0


@dataclass
class ReviewsAllocation:
    movie_id: int = 0
    review_ids: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class Params:
    """Module parameters; the module currently defines none."""

    def validate(self) -> None:
        """Check that every parameter has been given a value."""
        for param in dataclasses.fields(self):
            if getattr(self, param.name) is None:
                raise ValueError(f"parameter {param.name} is not set")

    def __str__(self) -> str:
        return "{}\n"


def default_params() -> Params:
    return Params()


_RECORD_TYPES = (Movie, Review, TittleAllocation, ReviewsAllocation, Params)

_R = TypeVar("_R")


def encode(record) -> bytes:
    """Serialise a record to canonical bytes."""
    if not isinstance(record, _RECORD_TYPES):
        raise TypeError(f"cannot encode {type(record).__name__}")
    payload = dataclasses.asdict(record)
    return json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")


def decode(record_type: type[_R], data: bytes) -> _R:
    """Rebuild a record of ``record_type`` from bytes made by :func:`encode`."""
    if record_type not in _RECORD_TYPES:
        raise TypeError(f"cannot decode {getattr(record_type, '__name__', record_type)}")
    payload = json.loads(data)
    if not isinstance(payload, dict):
        raise ValueError(f"malformed {record_type.__name__} record")
    try:
        return record_type(**payload)
    except TypeError as exc:
        raise ValueError(f"malformed {record_type.__name__} record: {exc}") from exc
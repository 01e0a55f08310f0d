"""Transaction messages of the movie module and address handling."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import ClassVar

from .errors import InvalidAddressError, InvalidValueError
from .keys import ROUTER_KEY

ACCOUNT_ADDRESS_PREFIX = "cosmos"

TYPE_MSG_CREATE_MOVIE = "create_movie"
TYPE_MSG_UPDATE_MOVIE = "update_movie"
TYPE_MSG_DELETE_MOVIE = "delete_movie"
TYPE_MSG_CREATE_REVIEW = "create_review"
TYPE_MSG_UPDATE_REVIEW = "update_review"
TYPE_MSG_DELETE_REVIEW = "delete_review"

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_MAX_BECH32_LENGTH = 1023
_MAX_ADDRESS_LENGTH = 255


def _polymod(values: list[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                chk ^= generator
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _checksum(hrp: str, data: list[int]) -> list[int]:
    pm = _polymod(_hrp_expand(hrp) + data + [0] * 6) ^ 1
    return [(pm >> 5 * (5 - i)) & 31 for i in range(6)]


def _convert_bits(data, from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out: list[int] = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value >> from_bits:
            raise ValueError("invalid data range")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or (acc << (to_bits - bits)) & maxv:
        raise ValueError("invalid padding")
    return out


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode bytes as a bech32 string with the human-readable part ``hrp``."""
    if not hrp:
        raise ValueError("empty human-readable part")
    hrp = hrp.lower()
    values = _convert_bits(data, 8, 5, True)
    return hrp + "1" + "".join(_CHARSET[v] for v in values + _checksum(hrp, values))


def _bech32_decode(bech: str) -> tuple[str, bytes]:
    if not 8 <= len(bech) <= _MAX_BECH32_LENGTH:
        raise ValueError(f"invalid bech32 string length {len(bech)}")
    if any(not 33 <= ord(c) <= 126 for c in bech):
        raise ValueError("invalid character in string")
    lower = bech.lower()
    if bech != lower and bech != bech.upper():
        raise ValueError("string not all lowercase or all uppercase")
    pos = lower.rfind("1")
    if pos < 1 or pos + 7 > len(lower):
        raise ValueError(f"invalid separator index {pos}")
    hrp, data_part = lower[:pos], lower[pos + 1:]
    invalid = [c for c in data_part if c not in _CHARSET]
    if invalid:
        raise ValueError(f"invalid character not part of charset: {invalid[0]!r}")
    values = [_CHARSET.index(c) for c in data_part]
    if _polymod(_hrp_expand(hrp) + values) != 1:
        raise ValueError("invalid checksum")
    return hrp, bytes(_convert_bits(values[:-6], 5, 8, False))


def acc_address_from_bech32(address: str) -> bytes:
    """Decode an account address, raising ``ValueError`` if it is not valid."""
    if not address.strip():
        raise ValueError("empty address string is not allowed")
    hrp, data = _bech32_decode(address)
    if hrp != ACCOUNT_ADDRESS_PREFIX:
        raise ValueError(f"invalid Bech32 prefix; expected {ACCOUNT_ADDRESS_PREFIX}, got {hrp}")
    if not data:
        raise ValueError("addresses cannot be empty: unknown address")
    if len(data) > _MAX_ADDRESS_LENGTH:
        raise ValueError(
            f"address max length is {_MAX_ADDRESS_LENGTH}, got {len(data)}: unknown address"
        )
    return data


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _json_value(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    return value


def _sign_bytes(msg) -> bytes:
    payload = {_camel(f.name): _json_value(getattr(msg, f.name)) for f in fields(msg)}
    return json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")


def _check_creator(creator: str) -> None:
    try:
        acc_address_from_bech32(creator)
    except ValueError as exc:
        raise InvalidAddressError(f"invalid creator address ({exc})") from exc


def _check_star(star: int) -> None:
    if not 1 <= star <= 5:
        raise InvalidValueError("Star should be between 1 and 5")


@dataclass
class MsgCreateMovie:
    AMINO_NAME: ClassVar[str] = "movie/CreateMovie"

    creator: str = ""
    title: str = ""
    plot: str = ""
    year: int = 0
    genre: str = ""
    language: str = ""
    is_published: bool = False

    def route(self) -> str:
        return ROUTER_KEY

    def type(self) -> str:
        return TYPE_MSG_CREATE_MOVIE

    def get_signers(self) -> list[bytes]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sign_bytes(self)

    def validate_basic(self) -> None:
        _check_creator(self.creator)


@dataclass
class MsgUpdateMovie:
    AMINO_NAME: ClassVar[str] = "movie/UpdateMovie"

    creator: str = ""
    id: int = 0
    title: str = ""
    plot: str = ""
    year: int = 0
    genre: str = ""
    language: str = ""
    is_published: bool = False

    def route(self) -> str:
        return ROUTER_KEY

    def type(self) -> str:
        return TYPE_MSG_UPDATE_MOVIE

    def get_signers(self) -> list[bytes]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sign_bytes(self)

    def validate_basic(self) -> None:
        _check_creator(self.creator)


@dataclass
class MsgDeleteMovie:
    AMINO_NAME: ClassVar[str] = "movie/DeleteMovie"

    creator: str = ""
    id: int = 0

    def route(self) -> str:
        return ROUTER_KEY

    def type(self) -> str:
        return TYPE_MSG_DELETE_MOVIE

    def get_signers(self) -> list[bytes]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sign_bytes(self)

    def validate_basic(self) -> None:
        _check_creator(self.creator)


@dataclass
class MsgCreateReview:
    AMINO_NAME: ClassVar[str] = "movie/CreateReview"

    creator: str = ""
    movie_id: int = 0
    star: int = 0
    comment: str = ""

    def route(self) -> str:
        return ROUTER_KEY

    def type(self) -> str:
        return TYPE_MSG_CREATE_REVIEW

    def get_signers(self) -> list[bytes]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sign_bytes(self)

    def validate_basic(self) -> None:
        _check_creator(self.creator)
        _check_star(self.star)


@dataclass
class MsgUpdateReview:
    AMINO_NAME: ClassVar[str] = "movie/UpdateReview"

    creator: str = ""
    id: int = 0
    movie_id: int = 0
    star: int = 0
    comment: str = ""

    def route(self) -> str:
        return ROUTER_KEY

    def type(self) -> str:
        return TYPE_MSG_UPDATE_REVIEW

    def get_signers(self) -> list[bytes]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sign_bytes(self)

    def validate_basic(self) -> None:
        _check_creator(self.creator)
        _check_star(self.star)


@dataclass
class MsgDeleteReview:
    AMINO_NAME: ClassVar[str] = "movie/DeleteReview"

    creator: str = ""
    id: int = 0

    def route(self) -> str:
        return ROUTER_KEY

    def type(self) -> str:
        return TYPE_MSG_DELETE_REVIEW

    def get_signers(self) -> list[bytes]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sign_bytes(self)

    def validate_basic(self) -> None:
        _check_creator(self.creator)


MSG_TYPES: dict[str, type] = {
    cls.AMINO_NAME: cls
    for cls in (
        MsgCreateMovie,
        MsgUpdateMovie,
        MsgDeleteMovie,
        MsgCreateReview,
        MsgUpdateReview,
        MsgDeleteReview,
    )
}
"""Ordered in-memory key-value store, prefixed views and pagination."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from sortedcontainers import SortedDict

DEFAULT_LIMIT = 100


def _check_key(key: bytes) -> None:
    if not isinstance(key, (bytes, bytearray)):
        raise TypeError(f"store keys must be bytes, not {type(key).__name__}")
    if not key:
        raise ValueError("key is nil")


def _check_value(value: bytes) -> None:
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"store values must be bytes, not {type(value).__name__}")


class KVStore:
    """A byte-keyed store that iterates its keys in ascending order."""

    def __init__(self) -> None:
        self._data: SortedDict = SortedDict()

    def get(self, key: bytes) -> bytes | None:
        """Return the value under ``key``, or ``None`` if there is none."""
        _check_key(key)
        return self._data.get(bytes(key))

    def set(self, key: bytes, value: bytes) -> None:
        _check_key(key)
        _check_value(value)
        self._data[bytes(key)] = bytes(value)

    def delete(self, key: bytes) -> None:
        _check_key(key)
        self._data.pop(bytes(key), None)

    def items(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """Yield ``(key, value)`` pairs whose key starts with ``prefix``, in key order."""
        prefix = bytes(prefix)
        found = []
        for key in self._data.irange(minimum=prefix):
            if not key.startswith(prefix):
                break
            found.append((key, self._data[key]))
        return iter(found)

    def prefixed(self, prefix: bytes) -> PrefixStore:
        """Return a view of this store restricted to keys under ``prefix``."""
        return PrefixStore(self, prefix)

    def __len__(self) -> int:
        return len(self._data)


class PrefixStore:
    """A view of a :class:`KVStore` in which every key carries a fixed prefix."""

    def __init__(self, parent: KVStore, prefix: bytes) -> None:
        self.parent = parent
        self.prefix = bytes(prefix)

    def get(self, key: bytes) -> bytes | None:
        return self.parent.get(self.prefix + bytes(key))

    def set(self, key: bytes, value: bytes) -> None:
        self.parent.set(self.prefix + bytes(key), value)

    def delete(self, key: bytes) -> None:
        self.parent.delete(self.prefix + bytes(key))

    def items(self, prefix: bytes = b"") -> Iterator[tuple[bytes, bytes]]:
        """Yield pairs under ``prefix`` with the view's own prefix removed."""
        cut = len(self.prefix)
        return ((key[cut:], value) for key, value in self.parent.items(self.prefix + bytes(prefix)))


@dataclass
class PageRequest:
    key: bytes = b""
    offset: int = 0
    limit: int = 0
    count_total: bool = False


@dataclass
class PageResponse:
    next_key: bytes | None = None
    total: int = 0


def paginate(
    store: KVStore | PrefixStore, page_request: PageRequest | None
) -> tuple[list[tuple[bytes, bytes]], PageResponse]:
    """Return one page of ``store`` and the response describing the next page.

    Either a start key or an offset may be given, not both. A limit of zero
    means the default limit and turns on counting of the total.
    """
    request = page_request or PageRequest()
    key = bytes(request.key or b"")
    offset = request.offset
    limit = request.limit
    count_total = request.count_total

    if offset > 0 and key:
        raise ValueError("invalid request, either offset or key is expected, got both")

    if limit == 0:
        limit = DEFAULT_LIMIT
        count_total = True

    page: list[tuple[bytes, bytes]] = []

    if key:
        next_key = None
        for item_key, value in store.items():
            if item_key < key:
                continue
            if len(page) == limit:
                next_key = item_key
                break
            page.append((item_key, value))
        return page, PageResponse(next_key=next_key)

    end = offset + limit
    count = 0
    next_key = None
    for item_key, value in store.items():
        count += 1
        if count <= offset:
            continue
        if count <= end:
            page.append((item_key, value))
        elif count == end + 1:
            next_key = item_key
            if not count_total:
                break

    return page, PageResponse(next_key=next_key, total=count if count_total else 0)
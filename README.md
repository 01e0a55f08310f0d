# moviechain

A small registry of movies and their reviews, kept in an ordered
in-memory key-value store. It enforces the rules of a shared ledger:

- every movie title is unique;
- only the creator of a movie or review may change or delete it;
- published movies, and movies that have reviews, cannot be deleted;
- each creator may review a given movie only once;
- a review cannot be moved to a different movie.

Messages also carry a basic validity check (`validate_basic`): the
creator must be a bech32 address with the `cosmos` prefix, and review
stars must run from 1 to 5. The message handlers do not run this check
themselves; call it before handing a message over.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it

```python
from moviechain.store import KVStore, PageRequest
from moviechain.keeper import Keeper
from moviechain.msg_server import MsgServer
from moviechain.query import QueryServer
from moviechain.messages import MsgCreateMovie, MsgCreateReview
from moviechain.errors import MovieTitleAlreadyExistError

keeper = Keeper(KVStore())
server = MsgServer(keeper)
queries = QueryServer(keeper)

movie_id = server.create_movie(MsgCreateMovie(creator="alice", title="Your Name"))
review_id = server.create_review(MsgCreateReview(creator="bob", movie_id=movie_id, star=5))

try:
    server.create_movie(MsgCreateMovie(creator="carol", title="Your Name"))
except MovieTitleAlreadyExistError as err:
    print(err)  # movie with this title is already exist

page = queries.movie_all(PageRequest(limit=10, count_total=True))
print([m.title for m in page.items], page.pagination.total)
```

`create_movie` and `create_review` return the new record's id; the
update and delete handlers return nothing and raise on any rule
violation. Every such error is a subclass of
`moviechain.errors.ModuleError`, so callers can catch the specific error
or all of them at once. Each error class has a `code`, a `codespace` and
a `description`; an optional context string is put in front of the
description when the error is printed.

Paginated queries take a `PageRequest` with either a start `key` or an
`offset` (not both), a `limit`, and `count_total`. A limit of zero means
a limit of 100 and turns on counting. The result is a `Page` with
`items` and a `PageResponse` holding `next_key` and `total`.

Addresses can be built and checked with the helpers in
`moviechain.messages`:

```python
from moviechain.messages import MsgCreateReview, acc_address_from_bech32, bech32_encode

address = bech32_encode("cosmos", bytes(20))
assert acc_address_from_bech32(address) == bytes(20)
MsgCreateReview(creator=address, star=3).validate_basic()
```

## Modules

- `moviechain.keys` builds the store keys and encodes ids as big-endian
  unsigned 64-bit integers (`id_to_bytes`, `id_from_bytes`).
- `moviechain.models` defines `Movie`, `Review`, `TittleAllocation`,
  `ReviewsAllocation` and `Params`, and `encode`/`decode` them as
  canonical JSON bytes for storage.
- `moviechain.messages` holds the six transaction messages
  (`MsgCreateMovie`, `MsgUpdateMovie`, `MsgDeleteMovie`,
  `MsgCreateReview`, `MsgUpdateReview`, `MsgDeleteReview`) with their
  route, type, signers, sign bytes and basic validation.
- `moviechain.genesis` holds `GenesisState`, whose `validate` raises
  `GenesisError` on duplicated ids or indexes and on ids at or above the
  stored counts.
- `moviechain.store` provides `KVStore`, `PrefixStore` and `paginate`.
- `moviechain.keeper` is the state access layer: counters, records, the
  title index and the per-movie and per-creator review indexes.
- `moviechain.msg_server` applies messages to state.
- `moviechain.query` answers single-record and paginated queries.

## What it does not do

- State lives only in memory; nothing is written to disk.
- There is no command-line tool and no network or RPC server; the
  handlers and queries are plain Python calls.
- A `GenesisState` can be validated but is not loaded into or exported
  from a `Keeper`.
- Messages are not signed or verified; `get_sign_bytes` only produces
  the bytes that would be signed.
- Deleting a movie or review does not update the title or review
  indexes.
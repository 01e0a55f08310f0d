"""Read-only queries over the movie module's state."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, TypeVar

from .errors import InternalError, InvalidRequestError, KeyNotFoundError, NotFoundError
from .keeper import Keeper
from .keys import (
    MOVIE_KEY,
    REVIEW_KEY,
    REVIEWS_ALLOCATION_KEY_PREFIX,
    TITTLE_ALLOCATION_KEY_PREFIX,
    key_prefix,
)
from .models import Movie, Params, Review, ReviewsAllocation, TittleAllocation, decode
from .store import PageRequest, PageResponse, paginate

T = TypeVar("T")

_NO_FIELDS: Mapping = MappingProxyType({})


@dataclass
class Page(Generic[T]):
    """One page of records and the description of the next page."""

    items: list[T] = field(default_factory=list)
    pagination: PageResponse = field(default_factory=PageResponse)


class QueryServer:
    """Answers queries from the state held by a keeper."""

    def __init__(self, keeper: Keeper) -> None:
        self.keeper = keeper

    def params(self, request: Mapping | None = _NO_FIELDS) -> Params:
        """Return the module parameters; ``None`` is an invalid request."""
        if request is None:
            raise InvalidRequestError()
        return self.keeper.get_params()

    def movie(self, movie_id: int | None) -> Movie:
        if movie_id is None:
            raise InvalidRequestError()
        found = self.keeper.get_movie(movie_id)
        if found is None:
            raise KeyNotFoundError()
        return found

    def movie_all(self, pagination: PageRequest | None = None) -> Page[Movie]:
        return self._page(Movie, MOVIE_KEY, pagination)

    def review(self, review_id: int | None) -> Review:
        if review_id is None:
            raise InvalidRequestError()
        found = self.keeper.get_review(review_id)
        if found is None:
            raise KeyNotFoundError()
        return found

    def review_all(self, pagination: PageRequest | None = None) -> Page[Review]:
        return self._page(Review, REVIEW_KEY, pagination)

    def reviews_allocation(self, movie_id: int | None) -> ReviewsAllocation:
        if movie_id is None:
            raise InvalidRequestError()
        found = self.keeper.get_reviews_allocation(movie_id)
        if found is None:
            raise NotFoundError()
        return found

    def reviews_allocation_all(
        self, pagination: PageRequest | None = None
    ) -> Page[ReviewsAllocation]:
        return self._page(ReviewsAllocation, REVIEWS_ALLOCATION_KEY_PREFIX, pagination)

    def tittle_allocation(self, movie_title: str | None) -> TittleAllocation:
        if movie_title is None:
            raise InvalidRequestError()
        found = self.keeper.get_tittle_allocation(movie_title)
        if found is None:
            raise NotFoundError()
        return found

    def tittle_allocation_all(
        self, pagination: PageRequest | None = None
    ) -> Page[TittleAllocation]:
        return self._page(TittleAllocation, TITTLE_ALLOCATION_KEY_PREFIX, pagination)

    def _page(self, record_type: type[T], prefix: str, pagination: PageRequest | None) -> Page[T]:
        if pagination is not None and not isinstance(pagination, PageRequest):
            raise InvalidRequestError()
        view = self.keeper.store.prefixed(key_prefix(prefix))
        try:
            entries, response = paginate(view, pagination)
            items = [decode(record_type, value) for _, value in entries]
        except ValueError as exc:
            raise InternalError(str(exc)) from exc
        return Page(items=items, pagination=response)
"""State keeper of the movie module: records, counters and indexes."""

from __future__ import annotations

import dataclasses
import logging

from .keys import (
    MODULE_NAME,
    MOVIE_COUNT_KEY,
    MOVIE_KEY,
    REVIEW_COUNT_KEY,
    REVIEW_KEY,
    REVIEWS_ALLOCATION_KEY_PREFIX,
    TITTLE_ALLOCATION_KEY_PREFIX,
    id_from_bytes,
    id_to_bytes,
    key_prefix,
    reviews_allocation_key,
    tittle_allocation_key,
)
from .models import (
    Movie,
    Params,
    Review,
    ReviewsAllocation,
    TittleAllocation,
    decode,
    default_params,
    encode,
)
from .store import KVStore, PrefixStore


class Keeper:
    """Reads and writes the module's records in a key-value store."""

    def __init__(self, store: KVStore | None = None) -> None:
        self.store = store if store is not None else KVStore()
        self._params = default_params()

    def logger(self) -> logging.LoggerAdapter:
        return logging.LoggerAdapter(logging.getLogger(__name__), {"module": f"x/{MODULE_NAME}"})

    def _view(self, prefix: str) -> PrefixStore:
        return self.store.prefixed(key_prefix(prefix))

    def _get_count(self, key: str) -> int:
        data = self.store.get(key_prefix(key))
        return 0 if data is None else id_from_bytes(data)

    def _set_count(self, key: str, count: int) -> None:
        self.store.set(key_prefix(key), id_to_bytes(count))

    # movies

    def get_movie_count(self) -> int:
        return self._get_count(MOVIE_COUNT_KEY)

    def set_movie_count(self, count: int) -> None:
        self._set_count(MOVIE_COUNT_KEY, count)

    def append_movie(self, movie: Movie) -> int:
        """Store ``movie`` under the next free id and return that id."""
        count = self.get_movie_count()
        stored = dataclasses.replace(movie, id=count)
        self._view(MOVIE_KEY).set(id_to_bytes(count), encode(stored))
        self.set_movie_count(count + 1)
        return count

    def set_movie(self, movie: Movie) -> None:
        self._view(MOVIE_KEY).set(id_to_bytes(movie.id), encode(movie))

    def get_movie(self, movie_id: int) -> Movie | None:
        data = self._view(MOVIE_KEY).get(id_to_bytes(movie_id))
        return None if data is None else decode(Movie, data)

    def remove_movie(self, movie_id: int) -> None:
        self._view(MOVIE_KEY).delete(id_to_bytes(movie_id))

    def all_movies(self) -> list[Movie]:
        return [decode(Movie, value) for _, value in self._view(MOVIE_KEY).items()]

    # reviews

    def get_review_count(self) -> int:
        return self._get_count(REVIEW_COUNT_KEY)

    def set_review_count(self, count: int) -> None:
        self._set_count(REVIEW_COUNT_KEY, count)

    def append_review(self, review: Review) -> int:
        """Store ``review`` under the next free id and return that id."""
        count = self.get_review_count()
        stored = dataclasses.replace(review, id=count)
        self._view(REVIEW_KEY).set(id_to_bytes(count), encode(stored))
        self.set_review_count(count + 1)
        return count

    def set_review(self, review: Review) -> None:
        self._view(REVIEW_KEY).set(id_to_bytes(review.id), encode(review))

    def get_review(self, review_id: int) -> Review | None:
        data = self._view(REVIEW_KEY).get(id_to_bytes(review_id))
        return None if data is None else decode(Review, data)

    def remove_review(self, review_id: int) -> None:
        self._view(REVIEW_KEY).delete(id_to_bytes(review_id))

    def all_reviews(self) -> list[Review]:
        return [decode(Review, value) for _, value in self._view(REVIEW_KEY).items()]

    # reviews allocations

    @staticmethod
    def _creator_prefix(creator: str) -> str:
        return REVIEWS_ALLOCATION_KEY_PREFIX + creator + "/"

    def set_reviews_allocation(self, allocation: ReviewsAllocation) -> None:
        self._view(REVIEWS_ALLOCATION_KEY_PREFIX).set(
            reviews_allocation_key(allocation.movie_id), encode(allocation)
        )

    def set_reviews_allocation_by_creator(
        self, allocation: ReviewsAllocation, creator: str
    ) -> None:
        self._view(self._creator_prefix(creator)).set(
            reviews_allocation_key(allocation.movie_id), encode(allocation)
        )

    def get_reviews_allocation(self, movie_id: int) -> ReviewsAllocation | None:
        data = self._view(REVIEWS_ALLOCATION_KEY_PREFIX).get(reviews_allocation_key(movie_id))
        return None if data is None else decode(ReviewsAllocation, data)

    def get_reviews_allocation_by_creator(
        self, movie_id: int, creator: str
    ) -> ReviewsAllocation | None:
        data = self._view(self._creator_prefix(creator)).get(reviews_allocation_key(movie_id))
        return None if data is None else decode(ReviewsAllocation, data)

    def remove_reviews_allocation(self, movie_id: int) -> None:
        self._view(REVIEWS_ALLOCATION_KEY_PREFIX).delete(reviews_allocation_key(movie_id))

    def all_reviews_allocations(self) -> list[ReviewsAllocation]:
        """Every allocation under the allocation prefix, per-creator ones included."""
        return [
            decode(ReviewsAllocation, value)
            for _, value in self._view(REVIEWS_ALLOCATION_KEY_PREFIX).items()
        ]

    # title allocations

    def set_tittle_allocation(self, allocation: TittleAllocation) -> None:
        self._view(TITTLE_ALLOCATION_KEY_PREFIX).set(
            tittle_allocation_key(allocation.movie_title), encode(allocation)
        )

    def get_tittle_allocation(self, movie_title: str) -> TittleAllocation | None:
        data = self._view(TITTLE_ALLOCATION_KEY_PREFIX).get(tittle_allocation_key(movie_title))
        return None if data is None else decode(TittleAllocation, data)

    def remove_tittle_allocation(self, movie_title: str) -> None:
        self._view(TITTLE_ALLOCATION_KEY_PREFIX).delete(tittle_allocation_key(movie_title))

    def all_tittle_allocations(self) -> list[TittleAllocation]:
        return [
            decode(TittleAllocation, value)
            for _, value in self._view(TITTLE_ALLOCATION_KEY_PREFIX).items()
        ]

    # params

    def get_params(self) -> Params:
        return self._params

    def set_params(self, params: Params) -> None:
        params.validate()
        self._params = params
"""Genesis state of the movie module and its validation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .keys import reviews_allocation_key, tittle_allocation_key
from .models import Movie, Params, Review, ReviewsAllocation, TittleAllocation, default_params

DEFAULT_INDEX = 1


class GenesisError(ValueError):
    """Raised when a genesis state is inconsistent."""


@dataclass
class GenesisState:
    params: Params = field(default_factory=default_params)
    movie_list: list[Movie] = field(default_factory=list)
    movie_count: int = 0
    review_list: list[Review] = field(default_factory=list)
    review_count: int = 0
    tittle_allocation_list: list[TittleAllocation] = field(default_factory=list)
    reviews_allocation_list: list[ReviewsAllocation] = field(default_factory=list)

    def validate(self) -> None:
        """Raise :class:`GenesisError` on the first inconsistency found."""
        movie_ids: set[int] = set()
        for movie in self.movie_list:
            if movie.id in movie_ids:
                raise GenesisError("duplicated id for movie")
            if movie.id >= self.movie_count:
                raise GenesisError("movie id should be lower or equal than the last id")
            movie_ids.add(movie.id)

        review_ids: set[int] = set()
        for review in self.review_list:
            if review.id in review_ids:
                raise GenesisError("duplicated id for review")
            if review.id >= self.review_count:
                raise GenesisError("review id should be lower or equal than the last id")
            review_ids.add(review.id)

        title_keys: set[bytes] = set()
        for allocation in self.tittle_allocation_list:
            key = tittle_allocation_key(allocation.movie_title)
            if key in title_keys:
                raise GenesisError("duplicated index for tittleAllocation")
            title_keys.add(key)

        allocation_keys: set[bytes] = set()
        for allocation in self.reviews_allocation_list:
            key = reviews_allocation_key(allocation.movie_id)
            if key in allocation_keys:
                raise GenesisError("duplicated index for reviewsAllocation")
            allocation_keys.add(key)

        self.params.validate()


def default_genesis() -> GenesisState:
    return GenesisState()
"""Transaction handlers of the movie module."""

from __future__ import annotations

from .errors import (
    ActionIsNotPermittedError,
    CannotDeletePublishedMovieError,
    CannotDeleteReviewedMovieError,
    KeyNotFoundError,
    MovieDoesNotExistError,
    MovieTitleAlreadyExistError,
    ReviewAlreadyExistError,
    UnauthorizedError,
)
from .keeper import Keeper
from .messages import (
    MsgCreateMovie,
    MsgCreateReview,
    MsgDeleteMovie,
    MsgDeleteReview,
    MsgUpdateMovie,
    MsgUpdateReview,
)
from .models import Movie, Review, ReviewsAllocation, TittleAllocation


class MsgServer:
    """Applies movie and review messages to the state held by a keeper."""

    def __init__(self, keeper: Keeper) -> None:
        self.keeper = keeper

    # movies

    def create_movie(self, msg: MsgCreateMovie) -> int:
        """Store a new movie and return its id; titles must be unique."""
        movie = Movie(
            creator=msg.creator,
            title=msg.title,
            plot=msg.plot,
            year=msg.year,
            genre=msg.genre,
            language=msg.language,
            is_published=msg.is_published,
        )
        if self.keeper.get_tittle_allocation(msg.title) is not None:
            raise MovieTitleAlreadyExistError()

        movie_id = self.keeper.append_movie(movie)
        self.keeper.set_tittle_allocation(
            TittleAllocation(movie_title=msg.title, movie_id=movie_id)
        )
        return movie_id

    def update_movie(self, msg: MsgUpdateMovie) -> None:
        """Replace a movie owned by the message's creator."""
        movie = Movie(
            creator=msg.creator,
            id=msg.id,
            title=msg.title,
            plot=msg.plot,
            year=msg.year,
            genre=msg.genre,
            language=msg.language,
            is_published=msg.is_published,
        )
        self._owned_movie(msg.id, msg.creator)

        allocation = self.keeper.get_tittle_allocation(msg.title)
        if allocation is not None and allocation.movie_id != msg.id:
            raise MovieTitleAlreadyExistError()

        self.keeper.set_movie(movie)
        self.keeper.set_tittle_allocation(TittleAllocation(movie_title=msg.title, movie_id=msg.id))

    def delete_movie(self, msg: MsgDeleteMovie) -> None:
        """Remove an unpublished, unreviewed movie owned by the message's creator."""
        stored = self._owned_movie(msg.id, msg.creator)

        if stored.is_published:
            raise CannotDeletePublishedMovieError()

        reviews = self.keeper.get_reviews_allocation(stored.id)
        if reviews is not None and reviews.review_ids:
            raise CannotDeleteReviewedMovieError()

        self.keeper.remove_movie(msg.id)

    def _owned_movie(self, movie_id: int, creator: str) -> Movie:
        stored = self.keeper.get_movie(movie_id)
        if stored is None:
            raise KeyNotFoundError(f"key {movie_id} doesn't exist")
        if creator != stored.creator:
            raise UnauthorizedError("incorrect owner")
        return stored

    # reviews

    def create_review(self, msg: MsgCreateReview) -> int:
        """Store a review of an existing movie, one per creator, and return its id."""
        review = Review(
            creator=msg.creator,
            movie_id=msg.movie_id,
            star=msg.star,
            comment=msg.comment,
        )
        if self.keeper.get_movie(msg.movie_id) is None:
            raise MovieDoesNotExistError(
                f"Can't create review since movie with id {msg.movie_id} doesn't exist"
            )

        own = self.keeper.get_reviews_allocation_by_creator(msg.movie_id, msg.creator)
        if own is not None and own.review_ids:
            raise ReviewAlreadyExistError(
                f"You have already reviewed movie with Id {msg.movie_id}"
            )

        review_id = self.keeper.append_review(review)
        self._record_review(msg.movie_id, review_id)
        self._record_review_by_creator(msg.movie_id, msg.creator, review_id)
        return review_id

    def _record_review(self, movie_id: int, review_id: int) -> None:
        current = self.keeper.get_reviews_allocation(movie_id)
        review_ids = [*(current.review_ids if current else []), review_id]
        self.keeper.set_reviews_allocation(
            ReviewsAllocation(movie_id=movie_id, review_ids=review_ids)
        )

    def _record_review_by_creator(self, movie_id: int, creator: str, review_id: int) -> None:
        current = self.keeper.get_reviews_allocation_by_creator(movie_id, creator)
        review_ids = [*(current.review_ids if current else []), review_id]
        self.keeper.set_reviews_allocation_by_creator(
            ReviewsAllocation(movie_id=movie_id, review_ids=review_ids), creator
        )

    def update_review(self, msg: MsgUpdateReview) -> None:
        """Replace a review owned by the message's creator; its movie cannot change."""
        review = Review(
            creator=msg.creator,
            id=msg.id,
            movie_id=msg.movie_id,
            star=msg.star,
            comment=msg.comment,
        )
        stored = self.keeper.get_review(msg.id)
        if stored is None:
            raise KeyNotFoundError(f"key {msg.id} doesn't exist")
        if stored.movie_id != msg.movie_id:
            raise ActionIsNotPermittedError(
                "can't update value of MovieId from the previous review"
            )
        if msg.creator != stored.creator:
            raise UnauthorizedError("incorrect owner")
        if self.keeper.get_movie(msg.movie_id) is None:
            raise MovieDoesNotExistError(
                f"Can't update review since movie with id {msg.movie_id} doesn't exist"
            )

        self.keeper.set_review(review)

    def delete_review(self, msg: MsgDeleteReview) -> None:
        """Remove a review owned by the message's creator."""
        stored = self.keeper.get_review(msg.id)
        if stored is None:
            raise KeyNotFoundError(f"key {msg.id} doesn't exist")
        if msg.creator != stored.creator:
            raise UnauthorizedError("incorrect owner")

        self.keeper.remove_review(msg.id)
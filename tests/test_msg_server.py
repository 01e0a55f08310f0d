import pytest

from moviechain.errors import (
    ActionIsNotPermittedError,
    CannotDeletePublishedMovieError,
    CannotDeleteReviewedMovieError,
    KeyNotFoundError,
    MovieTitleAlreadyExistError,
    UnauthorizedError,
)
from moviechain.keeper import Keeper
from moviechain.messages import (
    MsgCreateMovie,
    MsgCreateReview,
    MsgDeleteMovie,
    MsgDeleteReview,
    MsgUpdateMovie,
    MsgUpdateReview,
)
from moviechain.msg_server import MsgServer

CREATOR = "A"


@pytest.fixture
def server():
    return MsgServer(Keeper())


def test_fresh_server_starts_ids_at_zero(server):
    assert server.create_movie(MsgCreateMovie(creator=CREATOR)) == 0
    assert server.keeper.get_movie_count() == 1


def test_create_movie_increments_ids(server):
    for i in range(5):
        movie_id = server.create_movie(
            MsgCreateMovie(creator=CREATOR, title=f"Kimi No Na wa {i}")
        )
        assert movie_id == i


def test_create_movie_records_title_allocation(server):
    movie_id = server.create_movie(MsgCreateMovie(creator=CREATOR, title="Gintama"))
    allocation = server.keeper.get_tittle_allocation("Gintama")
    assert allocation.movie_id == movie_id


@pytest.mark.parametrize(
    "request_msg, error",
    [
        (MsgUpdateMovie(creator=CREATOR), None),
        (MsgUpdateMovie(creator="B"), UnauthorizedError),
        (MsgUpdateMovie(creator=CREATOR, id=10), KeyNotFoundError),
    ],
)
def test_update_movie(server, request_msg, error):
    server.create_movie(MsgCreateMovie(creator=CREATOR))
    if error is None:
        assert server.update_movie(request_msg) is None
        assert server.keeper.get_movie(0).creator == CREATOR
    else:
        with pytest.raises(error):
            server.update_movie(request_msg)


def test_update_movie_changes_stored_record(server):
    movie_id = server.create_movie(MsgCreateMovie(creator=CREATOR, title="Old"))
    server.update_movie(MsgUpdateMovie(creator=CREATOR, id=movie_id, title="New", year=2016))
    stored = server.keeper.get_movie(movie_id)
    assert stored.title == "New"
    assert stored.year == 2016


def test_update_missing_movie_message(server):
    server.create_movie(MsgCreateMovie(creator=CREATOR))
    with pytest.raises(KeyNotFoundError) as info:
        server.update_movie(MsgUpdateMovie(creator=CREATOR, id=10))
    assert str(info.value) == "key 10 doesn't exist: key not found"


@pytest.mark.parametrize(
    "request_msg, error",
    [
        (MsgDeleteMovie(creator=CREATOR), None),
        (MsgDeleteMovie(creator="B"), UnauthorizedError),
        (MsgDeleteMovie(creator=CREATOR, id=10), KeyNotFoundError),
    ],
)
def test_delete_movie(server, request_msg, error):
    server.create_movie(MsgCreateMovie(creator=CREATOR))
    if error is None:
        server.delete_movie(request_msg)
        assert server.keeper.get_movie(0) is None
    else:
        with pytest.raises(error):
            server.delete_movie(request_msg)
        assert server.keeper.get_movie(0) is not None


def test_create_duplicate_title(server):
    server.create_movie(MsgCreateMovie(creator=CREATOR, title="Kimi No Na wa"))
    with pytest.raises(MovieTitleAlreadyExistError) as info:
        server.create_movie(MsgCreateMovie(creator=CREATOR, title="Kimi No Na wa"))
    assert str(info.value) == "movie with this title is already exist"
    assert server.keeper.get_movie_count() == 1


def test_update_duplicate_title(server):
    first = server.create_movie(MsgCreateMovie(creator=CREATOR, title="Kimi No Na wa"))
    server.create_movie(MsgCreateMovie(creator=CREATOR, title="Gintama"))

    server.update_movie(MsgUpdateMovie(creator=CREATOR, id=first, title="Kimi No Na wa"))
    server.update_movie(
        MsgUpdateMovie(creator=CREATOR, id=first, title="Kimi No Na wa (Updated)")
    )
    assert server.keeper.get_movie(first).title == "Kimi No Na wa (Updated)"

    with pytest.raises(MovieTitleAlreadyExistError) as info:
        server.update_movie(MsgUpdateMovie(creator=CREATOR, id=first, title="Gintama"))
    assert str(info.value) == "movie with this title is already exist"


@pytest.mark.parametrize(
    "index, is_published, reviewed, error",
    [
        (0, True, False, CannotDeletePublishedMovieError),
        (1, False, True, CannotDeleteReviewedMovieError),
        (2, False, False, None),
    ],
)
def test_delete_movie_rules(server, index, is_published, reviewed, error):
    movie_id = server.create_movie(
        MsgCreateMovie(creator=CREATOR, title=f"Kimi No Na wa {index}", is_published=is_published)
    )
    if reviewed:
        server.create_review(
            MsgCreateReview(
                creator=CREATOR,
                movie_id=movie_id,
                star=5,
                comment="Kimi No Na Wa is a heartwarming and visually stunning anime masterpiece",
            )
        )
    if error is None:
        server.delete_movie(MsgDeleteMovie(creator=CREATOR, id=movie_id))
        assert server.keeper.get_movie(movie_id) is None
    else:
        with pytest.raises(error):
            server.delete_movie(MsgDeleteMovie(creator=CREATOR, id=movie_id))


def test_create_review_increments_ids(server):
    movie_id = server.create_movie(MsgCreateMovie(creator="A"))
    for expected, reviewer in enumerate(["reviewer 1", "reviewer 2", "reviewer 3"]):
        assert server.create_review(MsgCreateReview(creator=reviewer, movie_id=movie_id)) == expected
    assert server.keeper.get_reviews_allocation(movie_id).review_ids == [0, 1, 2]


def test_create_review_missing_movie(server):
    movie_id = server.create_movie(MsgCreateMovie(creator=CREATOR)) + 10
    with pytest.raises(Exception) as info:
        server.create_review(MsgCreateReview(creator=CREATOR, movie_id=movie_id))
    assert (
        str(info.value)
        == f"Can't create review since movie with id {movie_id} doesn't exist: movie doesn't exist"
    )


def test_cannot_review_same_movie_twice(server):
    movie_id = server.create_movie(MsgCreateMovie(creator=CREATOR))
    server.create_review(MsgCreateReview(creator=CREATOR, movie_id=movie_id))
    with pytest.raises(Exception) as info:
        server.create_review(MsgCreateReview(creator=CREATOR, movie_id=movie_id))
    assert (
        str(info.value)
        == f"You have already reviewed movie with Id {movie_id}: review already exist"
    )


def test_different_creators_review_same_movie(server):
    movie_id = server.create_movie(MsgCreateMovie(creator="A"))
    assert server.create_review(MsgCreateReview(creator="A", movie_id=movie_id)) == 0
    assert server.create_review(MsgCreateReview(creator="B", movie_id=movie_id)) == 1


def test_same_creator_reviews_different_movies(server):
    first = server.create_movie(MsgCreateMovie(creator=CREATOR, title="Kimi No Na Wa"))
    assert server.create_review(MsgCreateReview(creator=CREATOR, movie_id=first)) == 0
    second = server.create_movie(MsgCreateMovie(creator=CREATOR, title="Gintama"))
    assert server.create_review(MsgCreateReview(creator=CREATOR, movie_id=second)) == 1


@pytest.mark.parametrize(
    "request_msg, error",
    [
        (MsgUpdateReview(creator=CREATOR), None),
        (MsgUpdateReview(creator="B"), UnauthorizedError),
        (MsgUpdateReview(creator=CREATOR, id=10), KeyNotFoundError),
    ],
)
def test_update_review(server, request_msg, error):
    movie_id = server.create_movie(MsgCreateMovie(creator=CREATOR))
    server.create_review(MsgCreateReview(creator=CREATOR, movie_id=movie_id))
    request_msg.movie_id = movie_id
    request_msg.comment = "updated"
    if error is None:
        server.update_review(request_msg)
        assert server.keeper.get_review(0).comment == "updated"
    else:
        with pytest.raises(error):
            server.update_review(request_msg)
        assert server.keeper.get_review(0).comment == ""


def test_cannot_update_review_movie_id(server):
    first = server.create_movie(MsgCreateMovie(creator=CREATOR))
    second = server.create_movie(MsgCreateMovie(creator=CREATOR, title="Mappa"))
    review_id = server.create_review(MsgCreateReview(creator=CREATOR, movie_id=first))
    with pytest.raises(ActionIsNotPermittedError):
        server.update_review(MsgUpdateReview(creator=CREATOR, id=review_id, movie_id=second))


@pytest.mark.parametrize(
    "request_msg, error",
    [
        (MsgDeleteReview(creator=CREATOR), None),
        (MsgDeleteReview(creator="B"), UnauthorizedError),
        (MsgDeleteReview(creator=CREATOR, id=10), KeyNotFoundError),
    ],
)
def test_delete_review(server, request_msg, error):
    movie_id = server.create_movie(MsgCreateMovie(creator=CREATOR))
    server.create_review(MsgCreateReview(creator=CREATOR, movie_id=movie_id))
    if error is None:
        server.delete_review(request_msg)
        assert server.keeper.get_review(0) is None
    else:
        with pytest.raises(error):
            server.delete_review(request_msg)
        assert server.keeper.get_review(0) is not None
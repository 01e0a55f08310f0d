import pytest

from moviechain.models import (
    Movie,
    Params,
    Review,
    ReviewsAllocation,
    TittleAllocation,
    decode,
    default_params,
    encode,
)

RECORDS = [
    Movie(creator="A", id=3, title="Gintama", plot="p", year=2006, genre="comedy",
          language="ja", is_published=True),
    Movie(),
    Review(creator="B", id=1, movie_id=3, star=5, comment="great"),
    TittleAllocation(movie_title="Gintama", movie_id=3),
    ReviewsAllocation(movie_id=3, review_ids=[0, 4, 9]),
    ReviewsAllocation(),
    Params(),
]


@pytest.mark.parametrize("record", RECORDS)
def test_round_trip(record):
    assert decode(type(record), encode(record)) == record


def test_encoding_is_deterministic():
    first = Movie(creator="A", title="X")
    second = Movie(title="X", creator="A")
    assert encode(first) == encode(second)
    assert encode(first) != encode(Movie(creator="A", title="Y"))


def test_decode_rejects_garbage():
    with pytest.raises(ValueError):
        decode(Movie, b"not json")
    with pytest.raises(ValueError):
        decode(Movie, b"[1, 2]")
    with pytest.raises(ValueError):
        decode(Review, encode(Movie()))


def test_unknown_types_rejected():
    with pytest.raises(TypeError):
        encode({"id": 1})
    with pytest.raises(TypeError):
        decode(dict, b"{}")


def test_default_params():
    params = default_params()
    assert params == Params()
    assert params.validate() is None
    assert str(params) == "{}\n"


def test_reviews_allocation_lists_are_independent():
    first = ReviewsAllocation()
    second = ReviewsAllocation()
    first.review_ids.append(1)
    assert second.review_ids == []
import pytest
from unittest.mock import MagicMock

from movieCatalog.core.catalog import MovieCatalog
from movieCatalog.core.form import MovieForm
from movieCatalog.core.models import Movie


def make_movie(movie_id: str, title: str, genre: str, rating=5, **extra) -> Movie:
    return Movie(
        id=movie_id,
        title=title,
        description=extra.get("description", f"About {title}"),
        genre=genre,
        rating=rating,
        release_date=extra.get("release_date", "2020-01-01T00:00:00.000Z"),
        image_url=extra.get("image_url"),
    )


@pytest.fixture
def movies():
    return [
        make_movie("1", "Spirited Away", "Animation", 9),
        make_movie("2", "alien", "Horror", 8.5),
        make_movie("3", "Paddington", "Family", "7"),
        make_movie("4", "The Thing", "Horror", 8),
    ]


@pytest.fixture
def catalog(movies):
    return MovieCatalog(movies)


@pytest.fixture
def filled_form():
    return MovieForm(
        title="Heat",
        description="Cops and robbers",
        genre="Crime",
        rating="8.3",
        release_date="1995-12-15",
    )


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.list_movies.return_value = []
    return client

"""core.catalog
In-memory list of Movie records + the derived search / sort view.

The stored list is only ever replaced or edited through `MovieCatalog`;
`visible_movies` builds a new list every call and never mutates it.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Sequence

from movieCatalog.utils import normalize
from movieCatalog.core.models import Movie


class SortKey(str, Enum):
    NONE   = ""
    TITLE  = "title"
    GENRE  = "genre"
    RATING = "rating"

    @classmethod
    def parse(cls, value: "str | SortKey | None") -> "SortKey":
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            raise ValueError(f"Unknown sort key: {value!r}") from None


def filter_movies(movies: Iterable[Movie], search: str | None) -> List[Movie]:
    """Case-insensitive substring match on title OR genre; an empty term matches all.

    The term is not stripped: "star " only matches text containing "star ".
    """
    if not search:
        return list(movies)
    term = search.casefold()
    return [
        m for m in movies
        if term in (m.title or "").casefold() or term in (m.genre or "").casefold()
    ]


def _rating_key(movie: Movie):
    value = movie.rating_value
    # numeric ratings first (highest first), non-numeric ones last
    return (value is None, -(value or 0.0))


def sort_movies(movies: Iterable[Movie], sort_by: "str | SortKey | None") -> List[Movie]:
    """Stable sort: title/genre ascending, rating descending, NONE keeps order."""
    key = SortKey.parse(sort_by)
    if key is SortKey.TITLE:
        return sorted(movies, key=lambda m: (normalize(m.title), m.title))
    if key is SortKey.GENRE:
        return sorted(movies, key=lambda m: (normalize(m.genre), m.genre))
    if key is SortKey.RATING:
        return sorted(movies, key=_rating_key)
    return list(movies)


def visible_movies(movies: Iterable[Movie], search: str | None = "",
                   sort_by: "str | SortKey | None" = SortKey.NONE) -> List[Movie]:
    return sort_movies(filter_movies(movies, search), sort_by)


class MovieCatalog:
    """Ordered cache of the server's records, rebuilt on every fetch."""

    def __init__(self, movies: Iterable[Movie] = ()) -> None:
        self._movies: List[Movie] = list(movies)

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self):
        return iter(self._movies)

    def __contains__(self, movie_id: object) -> bool:
        return any(m.id == movie_id for m in self._movies)

    @property
    def movies(self) -> List[Movie]:
        return list(self._movies)

    def get(self, movie_id: str) -> Movie | None:
        return next((m for m in self._movies if m.id == movie_id), None)

    # ───────────────────────────── writers ──────────────────────────
    def replace_all(self, movies: Sequence[Movie]) -> None:
        self._movies = list(movies)

    def add(self, movie: Movie) -> None:
        """Append *movie*; an existing record with the same id is replaced instead."""
        if movie.id and movie.id in self:
            self.replace(movie.id, movie)
        else:
            self._movies.append(movie)

    def replace(self, movie_id: str, movie: Movie) -> bool:
        """Swap the record whose id is *movie_id*; False if it is not cached."""
        for i, existing in enumerate(self._movies):
            if existing.id == movie_id:
                self._movies[i] = movie
                return True
        return False

    def remove(self, movie_id: str) -> bool:
        before = len(self._movies)
        self._movies = [m for m in self._movies if m.id != movie_id]
        return len(self._movies) != before

    # ───────────────────────────── readers ──────────────────────────
    def visible(self, search: str | None = "", sort_by: "str | SortKey | None" = SortKey.NONE) -> List[Movie]:
        return visible_movies(self._movies, search, sort_by)

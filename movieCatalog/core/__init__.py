"""
core
~~~~
Qt-free state for the catalog: the Movie model, the form and the cached
list with its search / sort view.

`core.service` (the facade tying these to the API) is imported by path,
it depends on `api_clients` which in turn needs `core.models`.
"""

from movieCatalog.core.models  import Movie
from movieCatalog.core.form    import MovieForm, MovieValidationError
from movieCatalog.core.catalog import MovieCatalog, SortKey, filter_movies, sort_movies, visible_movies

__all__ = [
    "Movie", "MovieForm", "MovieValidationError",
    "MovieCatalog", "SortKey", "filter_movies", "sort_movies", "visible_movies",
]

import pytest

from movieCatalog.core.catalog import MovieCatalog, SortKey, filter_movies, sort_movies, visible_movies
from tests.conftest import make_movie


def titles(movies):
    return [m.title for m in movies]


class TestFilter:
    def test_matches_title_case_insensitively(self, movies):
        assert titles(filter_movies(movies, "SPIRIT")) == ["Spirited Away"]

    def test_matches_genre_substring(self, movies):
        assert titles(filter_movies(movies, "horr")) == ["alien", "The Thing"]

    def test_empty_search_keeps_everything_in_order(self, movies):
        assert filter_movies(movies, "") == movies
        assert filter_movies(movies, None) == movies

    def test_search_term_is_not_stripped(self):
        rows = [make_movie("a", "Star Wars", "Sci-Fi"), make_movie("b", "Stardust", "Fantasy")]

        assert titles(filter_movies(rows, "star ")) == ["Star Wars"]
        assert filter_movies(rows, "   ") == []

    def test_no_match_is_empty(self, movies):
        assert filter_movies(movies, "western") == []


class TestSort:
    def test_rating_is_descending_numeric(self, movies):
        # "7" (string from the API) still sorts as a number
        assert titles(sort_movies(movies, "rating")) == ["Spirited Away", "alien", "The Thing", "Paddington"]

    def test_title_is_ascending_ignoring_case(self, movies):
        assert titles(sort_movies(movies, SortKey.TITLE)) == ["alien", "Paddington", "Spirited Away", "The Thing"]

    def test_genre_is_ascending_and_stable(self, movies):
        assert titles(sort_movies(movies, "genre")) == ["Spirited Away", "Paddington", "alien", "The Thing"]

    def test_no_sort_keeps_fetched_order(self, movies):
        assert sort_movies(movies, "") == movies

    def test_nan_and_infinite_ratings_sort_as_non_numeric(self):
        rows = [make_movie("a", "A", "X", 3), make_movie("b", "B", "X", "NaN"),
                make_movie("c", "C", "X", 9), make_movie("d", "D", "X", 5),
                make_movie("e", "E", "X", float("inf"))]

        assert titles(sort_movies(rows, "rating")) == ["C", "D", "A", "B", "E"]

    def test_non_numeric_ratings_go_last(self):
        rows = [make_movie("a", "A", "X", "unrated"), make_movie("b", "B", "X", 1), make_movie("c", "C", "X", None)]
        assert titles(sort_movies(rows, "rating")) == ["B", "A", "C"]

    def test_unknown_key_raises(self, movies):
        with pytest.raises(ValueError):
            sort_movies(movies, "popularity")

    def test_view_does_not_mutate_input(self, movies):
        before = list(movies)
        visible_movies(movies, "h", "title")
        assert movies == before


class TestMovieCatalog:
    def test_add_appends_once(self, catalog):
        new = make_movie("5", "Heat", "Crime")
        catalog.add(new)
        catalog.add(new)

        assert [m.id for m in catalog].count("5") == 1
        assert catalog.movies[-1] is new

    def test_replace_only_touches_matching_id(self, catalog, movies):
        updated = make_movie("2", "Aliens", "Action", 8.4)

        assert catalog.replace("2", updated) is True
        assert catalog.get("2") is updated
        assert [m for m in catalog if m.id != "2"] == [m for m in movies if m.id != "2"]

    def test_replace_unknown_id_is_noop(self, catalog, movies):
        assert catalog.replace("missing", make_movie("missing", "X", "Y")) is False
        assert catalog.movies == movies

    def test_remove(self, catalog):
        assert catalog.remove("3") is True
        assert "3" not in catalog
        assert len(catalog) == 3
        assert catalog.remove("3") is False

    def test_replace_all_rebuilds_list(self, catalog):
        catalog.replace_all([make_movie("9", "Only", "One")])
        assert titles(catalog) == ["Only"]

    def test_visible_combines_search_and_sort(self, catalog):
        assert titles(catalog.visible("horror", "title")) == ["alien", "The Thing"]

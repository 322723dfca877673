from pathlib import Path

import pytest

from movieCatalog.core.form import MovieForm, MovieValidationError
from movieCatalog.settings import REQUIRED_FIELDS_MESSAGE
from tests.conftest import make_movie


def test_complete_form_validates(filled_form):
    filled_form.validate()
    assert filled_form.missing_fields() == []


@pytest.mark.parametrize("field", ["title", "description", "genre", "rating", "release_date"])
def test_each_required_field_is_checked(filled_form, field):
    setattr(filled_form, field, "   ")

    with pytest.raises(MovieValidationError) as exc_info:
        filled_form.validate()

    assert str(exc_info.value) == REQUIRED_FIELDS_MESSAGE
    assert exc_info.value.missing == [field]


def test_image_is_optional(filled_form):
    filled_form.image = None
    filled_form.validate()


def test_text_fields_use_wire_names(filled_form):
    assert filled_form.text_fields() == {
        "title": "Heat",
        "description": "Cops and robbers",
        "genre": "Crime",
        "rating": "8.3",
        "releaseDate": "1995-12-15",
    }


def test_load_enters_edit_mode():
    form = MovieForm()
    movie = make_movie("7", "Heat", "Crime", 8.3,
                       release_date="1995-12-15T00:00:00.000Z",
                       image_url="https://img.example/heat.jpg")

    form.load(movie)

    assert form.is_editing is True
    assert form.current_movie_id == "7"
    assert form.rating == "8.3"
    assert form.release_date == "1995-12-15"
    assert form.image_url == "https://img.example/heat.jpg"
    assert form.image_path is None


def test_clear_resets_everything(filled_form):
    filled_form.image = Path("poster.png")
    filled_form.current_movie_id = "7"
    filled_form.is_editing = True

    filled_form.clear()

    assert filled_form == MovieForm()

"""core.form
Form-state holder mirroring the catalog's input fields.

The form does not talk to the network; `core.service` reads it to build a
request and clears it after a successful create / update.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from movieCatalog.settings import REQUIRED_FIELDS_MESSAGE
from movieCatalog.utils import is_blank
from movieCatalog.core.models import Movie

# form attribute -> multipart field name
REQUIRED_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("title",        "title"),
    ("description",  "description"),
    ("genre",        "genre"),
    ("rating",       "rating"),
    ("release_date", "releaseDate"),
)


class MovieValidationError(ValueError):
    """Raised when the form cannot be submitted; shown to the user as-is."""

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE, missing: List[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


@dataclass
class MovieForm:
    title: str = ""
    description: str = ""
    genre: str = ""
    rating: str = ""
    release_date: str = ""               # 'YYYY-MM-DD'
    image: Path | str | None = None      # local file to upload, or existing image URL
    current_movie_id: str | None = None
    is_editing: bool = field(default=False)

    # ------------------------------------------------------------------
    def missing_fields(self) -> List[str]:
        return [attr for attr, _ in REQUIRED_FIELDS if is_blank(getattr(self, attr))]

    def validate(self) -> None:
        """Raise MovieValidationError if any required field is empty."""
        missing = self.missing_fields()
        if missing:
            raise MovieValidationError(missing=missing)

    def load(self, movie: Movie) -> None:
        """Copy *movie* into the form and switch to edit mode."""
        self.title        = movie.title
        self.description  = movie.description
        self.genre        = movie.genre
        self.rating       = "" if movie.rating is None else str(movie.rating)
        day               = movie.release_day
        self.release_date = day.isoformat() if day else (movie.release_date or "")
        self.image        = movie.image_url
        self.current_movie_id = movie.id
        self.is_editing   = True

    def clear(self) -> None:
        self.title = self.description = self.genre = ""
        self.rating = self.release_date = ""
        self.image = None
        self.current_movie_id = None
        self.is_editing = False

    # ------------------------------------------------------------------
    def text_fields(self) -> Dict[str, str]:
        """Multipart text fields (everything but the image)."""
        return {wire: str(getattr(self, attr)).strip() for attr, wire in REQUIRED_FIELDS}

    @property
    def image_path(self) -> Path | None:
        """Local file chosen for upload, if the current image is one."""
        if isinstance(self.image, Path):
            return self.image
        return None

    @property
    def image_url(self) -> str | None:
        if isinstance(self.image, str) and self.image.strip():
            return self.image.strip()
        return None

# Movie dataclass (+ parsing of one catalog API record)
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from movieCatalog.utils import parse_rating, parse_release_date


@dataclass(slots=True)
class Movie:
    id: str
    title: str = ""
    description: str = ""
    genre: str = ""
    rating: Any = None              # raw value from the server (number or string)
    release_date: str | None = None
    image_url: str | None = None

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "Movie":
        """Build a Movie from one API record; missing keys become defaults."""
        if not isinstance(payload, dict):
            raise TypeError(f"Expected a JSON object, got {type(payload).__name__}")
        return cls(
            id=str(payload.get("_id") or payload.get("id") or ""),
            title=payload.get("title") or "",
            description=payload.get("description") or "",
            genre=payload.get("genre") or "",
            rating=payload.get("rating"),
            release_date=payload.get("releaseDate"),
            image_url=payload.get("imageUrl") or None,
        )

    @property
    def rating_value(self) -> float | None:
        return parse_rating(self.rating)

    @property
    def release_day(self) -> date | None:
        return parse_release_date(self.release_date)

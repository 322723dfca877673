"""core.service
Facade the GUI talks to: validate the form, build the API call, and apply
its result to the cache.

Work is split in two halves so the network part can run on any thread:

    request = service.create_request()      # validates, snapshots the form
    result  = request.call()                # the HTTP round-trip
    service.complete(request, result)       # or service.fail(request, error)

Failed requests are only logged (`fail`); MovieValidationError is the one
error that reaches the user. The cache and form are touched only in
`complete`, i.e. after a successful response.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, List

from movieCatalog.api_clients import client as default_client
from movieCatalog.api_clients.catalog_client import CatalogClient
from movieCatalog.core.catalog import MovieCatalog, SortKey
from movieCatalog.core.form import MovieForm, MovieValidationError
from movieCatalog.core.models import Movie
from movieCatalog.utils import log_debug

_FAILURE_MESSAGES = {
    "fetch":  "Error fetching movies",
    "create": "Error creating movie",
    "update": "Error saving movie",
    "delete": "Error deleting movie",
}


@dataclass(frozen=True)
class CatalogRequest:
    """One pending API call: what it is, which record, and the call itself."""
    operation: str                  # fetch | create | update | delete
    call: Callable[[], Any]
    movie_id: str | None = None


class CatalogService:
    def __init__(self, client: CatalogClient | None = None,
                 catalog: MovieCatalog | None = None,
                 form: MovieForm | None = None) -> None:
        self.client  = client or default_client
        self.catalog = catalog if catalog is not None else MovieCatalog()
        self.form    = form if form is not None else MovieForm()

    def visible(self, search: str = "", sort_by: str | SortKey = SortKey.NONE) -> List[Movie]:
        return self.catalog.visible(search, sort_by)

    # ───────────────────────── request builders ───────────────────────
    def fetch_request(self) -> CatalogRequest:
        return CatalogRequest("fetch", self.client.list_movies)

    def create_request(self) -> CatalogRequest:
        """
        Validate the form and freeze its values into a POST.

        Raises
        ------
        MovieValidationError
            A required field is empty (nothing is built, so no request is made).
        """
        self.form.validate()
        fields, image = self.form.text_fields(), self.form.image
        return CatalogRequest("create", lambda: self.client.create_movie(fields, image))

    def save_request(self) -> CatalogRequest:
        """Validate the form and freeze it into a PUT over the record being edited."""
        movie_id = self.require_editing()
        self.form.validate()
        fields, image = self.form.text_fields(), self.form.image
        return CatalogRequest("update", lambda: self.client.update_movie(movie_id, fields, image),
                              movie_id)

    def delete_request(self, movie_id: str) -> CatalogRequest:
        return CatalogRequest("delete", lambda: self.client.delete_movie(movie_id), movie_id)

    # ───────────────────────── results ────────────────────────────────
    def complete(self, request: CatalogRequest, result: Any) -> None:
        """Apply a successful response to the cache (and form)."""
        op, movie_id = request.operation, request.movie_id
        if op == "fetch":
            self.catalog.replace_all(result)
            log_debug(f"Fetched {len(result)} movies.")
        elif op == "create":
            self.catalog.add(result)
            self.form.clear()
        elif op == "update":
            if not self.catalog.replace(movie_id, result):
                log_debug(f"Saved movie {movie_id} is not in the local list; left as is.")
            self.form.clear()
        elif op == "delete":
            self.catalog.remove(movie_id)
            if self.form.current_movie_id == movie_id:
                self.form.clear()
        else:
            raise ValueError(f"Unknown catalog operation: {op!r}")

    def fail(self, request: CatalogRequest, error: Exception) -> None:
        """The only reaction to a failed request: one line in the log."""
        prefix = _FAILURE_MESSAGES.get(request.operation, "Error in catalog request")
        log_debug(f"{prefix}: {error}", logging.ERROR)

    # ───────────────────────── form helpers ───────────────────────────
    def require_editing(self) -> str:
        """Id of the record being edited; MovieValidationError if there is none."""
        movie_id = self.form.current_movie_id
        if not self.form.is_editing or not movie_id:
            raise MovieValidationError("No movie is being edited.")
        return movie_id

    def begin_edit(self, movie: Movie) -> None:
        self.form.load(movie)

    def cancel_edit(self) -> None:
        self.form.clear()

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Any, Dict, List

import requests

from movieCatalog.settings import API_URL, REQUEST_TIMEOUT
from movieCatalog.utils import guess_mime_type, log_debug
from movieCatalog.core.models import Movie


class CatalogAPIError(Exception):
    """Any failed call to the catalog API (network, HTTP status or bad JSON)."""

    def __init__(self, operation: str, detail: str, status_code: int | None = None):
        super().__init__(f"{operation} failed: {detail}")
        self.operation = operation
        self.detail = detail
        self.status_code = status_code


class CatalogClient:
    """Thin wrapper around the movie catalog REST API (`/movies`)."""

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT

    def _url(self, movie_id: str | None = None) -> str:
        return f"{self.base_url}/{movie_id}" if movie_id else self.base_url

    def _request(self, operation: str, method: str, url: str, **kwargs) -> requests.Response:
        try:
            resp = requests.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise CatalogAPIError(operation, str(e), status) from e
        except requests.RequestException as e:
            raise CatalogAPIError(operation, str(e)) from e
        log_debug(f"{method} {url} → {resp.status_code}")
        return resp

    @staticmethod
    def _json(operation: str, resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise CatalogAPIError(operation, f"invalid JSON body ({e})", resp.status_code) from e

    # ------------------------------------------------------------------
    # Public – the four CRUD verbs
    # ------------------------------------------------------------------
    def list_movies(self) -> List[Movie]:
        """GET /movies → every record, in server order."""
        resp = self._request("fetch", "GET", self._url())
        payload = self._json("fetch", resp)
        if not isinstance(payload, list):
            raise CatalogAPIError("fetch", "expected a JSON array", resp.status_code)
        try:
            return [Movie.from_json(row) for row in payload]
        except TypeError as e:
            raise CatalogAPIError("fetch", str(e), resp.status_code) from e

    def create_movie(self, fields: Dict[str, str], image: Path | str | None = None) -> Movie:
        """POST /movies (multipart) → the created record."""
        return self._send("create", "POST", self._url(), fields, image)

    def update_movie(self, movie_id: str, fields: Dict[str, str],
                     image: Path | str | None = None) -> Movie:
        """PUT /movies/{id} (multipart) → the updated record."""
        if not movie_id:
            raise CatalogAPIError("update", "missing movie id")
        return self._send("update", "PUT", self._url(movie_id), fields, image)

    def delete_movie(self, movie_id: str) -> None:
        """DELETE /movies/{id}; the response body is ignored."""
        if not movie_id:
            raise CatalogAPIError("delete", "missing movie id")
        self._request("delete", "DELETE", self._url(movie_id))

    def fetch_image(self, url: str) -> bytes:
        """Download a poster image (raw bytes) for display."""
        return self._request("image", "GET", url).content

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _send(self, operation: str, method: str, url: str,
              fields: Dict[str, str], image: Path | str | None) -> Movie:
        # every part goes through `files` so the body is always multipart/form-data
        parts: Dict[str, tuple] = {name: (None, str(value)) for name, value in fields.items()}
        with ExitStack() as stack:
            if isinstance(image, Path):
                try:
                    fh = stack.enter_context(image.open("rb"))
                except OSError as e:
                    raise CatalogAPIError(operation, f"cannot read image {image}: {e}") from e
                parts["image"] = (image.name, fh, guess_mime_type(image))
            elif image:
                parts["image"] = (None, image)       # keep the existing image URL
            resp = self._request(operation, method, url, files=parts)
        payload = self._json(operation, resp)
        try:
            return Movie.from_json(payload)
        except TypeError as e:
            raise CatalogAPIError(operation, str(e), resp.status_code) from e

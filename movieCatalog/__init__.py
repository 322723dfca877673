"""
movieCatalog
~~~~~~~~~~~~

Top-level package for the Movie Catalog application.

Exports:
  - API_URL, REQUEST_TIMEOUT
  - Utility functions: setup_logging, log_debug
  - Core state: Movie, MovieForm, MovieCatalog, SortKey, CatalogService
  - API client: CatalogClient, CatalogAPIError

The Qt side (MainWindow, CatalogController, …) lives in `movieCatalog.gui`
and is imported from there, so the core can be used without a display.
"""

# settings
from movieCatalog.settings import API_URL, REQUEST_TIMEOUT

# utils
from movieCatalog.utils import setup_logging, log_debug

# core state
from movieCatalog.core import Movie, MovieForm, MovieValidationError, MovieCatalog, SortKey
from movieCatalog.api_clients.catalog_client import CatalogClient, CatalogAPIError
from movieCatalog.core.service import CatalogService

__all__ = [
    # settings
    "API_URL",
    "REQUEST_TIMEOUT",
    # utils
    "setup_logging",
    "log_debug",
    # core
    "Movie",
    "MovieForm",
    "MovieValidationError",
    "MovieCatalog",
    "SortKey",
    "CatalogService",
    # api
    "CatalogClient",
    "CatalogAPIError",
]

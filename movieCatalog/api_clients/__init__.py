"""
api_clients
~~~~~~~~~~~
Thin wrapper around the movie catalog REST API.
Import the *client* singleton if you only need one global instance.
"""

from movieCatalog.api_clients.catalog_client import CatalogAPIError, CatalogClient

client = CatalogClient()

__all__ = ["CatalogAPIError", "CatalogClient", "client"]

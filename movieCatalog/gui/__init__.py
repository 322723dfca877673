"""
gui
~~~
All Qt widgets and the controller.

•  No HTTP here – everything goes through `core.service` / `api_clients`.
•  Re-export the high-level symbols so the app can simply:

    from movieCatalog.gui import MainWindow, apply_dark_palette
"""

from movieCatalog.gui.controller  import CatalogController
from movieCatalog.gui.main_window import MainWindow
from movieCatalog.gui.movie_card  import MovieCard
from movieCatalog.gui.movie_form  import MovieFormPanel
from movieCatalog.gui.theme       import apply_dark_palette

__all__ = [
    "CatalogController", "MainWindow", "MovieCard", "MovieFormPanel",
    "apply_dark_palette",
]

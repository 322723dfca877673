# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, Slot
from PySide6.QtGui     import QAction, QKeySequence
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QComboBox,
    QScrollArea, QGridLayout, QLabel, QMessageBox, QStyle
)

from movieCatalog.settings          import WINDOW_TITLE, NO_MATCHES_MESSAGE
from movieCatalog.core.catalog      import SortKey
from movieCatalog.core.form         import MovieValidationError
from movieCatalog.core.models       import Movie
from movieCatalog.gui.controller    import CatalogController
from movieCatalog.gui.movie_card    import MovieCard
from movieCatalog.gui.movie_form    import MovieFormPanel

SORT_OPTIONS = [
    ("Sort By", SortKey.NONE),
    ("Title",   SortKey.TITLE),
    ("Genre",   SortKey.GENRE),
    ("Rating",  SortKey.RATING),
]
CARD_COLUMNS = 3


class MainWindow(QMainWindow):
    def __init__(self, controller: CatalogController | None = None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(960, 720)
        self.controller = controller or CatalogController(parent=self)

        # ── search / sort bar ───────────────────────────────────────────
        self.search_input = QLineEdit(placeholderText="Search by title or genre")
        self.sort_combo   = QComboBox()
        for label, key in SORT_OPTIONS:
            self.sort_combo.addItem(label, key.value)
        bar = QHBoxLayout()
        bar.addWidget(self.search_input, 2)
        bar.addStretch(1)
        bar.addWidget(self.sort_combo, 1)

        # ── form ───────────────────────────────────────────────────────
        self.form_panel = MovieFormPanel(self)

        # ── card grid ──────────────────────────────────────────────────
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        container = QWidget()
        self.grid_layout = QGridLayout(container)
        self.grid_layout.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        self.scroll_area.setWidget(container)
        self.empty_label = QLabel(NO_MATCHES_MESSAGE, alignment=Qt.AlignCenter)
        self.empty_label.hide()

        central = QWidget()
        root = QVBoxLayout(central)
        title = QLabel(WINDOW_TITLE, alignment=Qt.AlignHCenter)
        title.setStyleSheet("font-size:22px; font-weight:bold;")
        root.addWidget(title)
        root.addLayout(bar)
        root.addWidget(self.form_panel)
        root.addWidget(self.empty_label)
        root.addWidget(self.scroll_area, 1)
        self.setCentralWidget(central)

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        act = QAction(self.style().standardIcon(QStyle.SP_BrowserReload), "Refresh", self)
        act.setShortcut(QKeySequence("Ctrl+R"))
        act.triggered.connect(self._on_refresh)
        tb.addAction(act)

        self._connect()

    def _connect(self) -> None:
        c = self.controller
        c.movies_changed.connect(self.refresh_list)
        c.form_changed.connect(self._on_form_changed)
        c.busy_changed.connect(self.form_panel.set_busy)
        c.busy_changed.connect(lambda busy: self.statusBar().showMessage("Working…" if busy else "", 0))

        self.search_input.textChanged.connect(self.refresh_list)
        self.sort_combo.currentIndexChanged.connect(self.refresh_list)

        fp = self.form_panel
        fp.add_requested.connect(self._on_add)
        fp.save_requested.connect(self._on_save)
        fp.cancel_requested.connect(self.controller.cancel_edit)

    def closeEvent(self, event):
        self.controller.shutdown()
        super().closeEvent(event)

    # ───────────────────────────────────────────────────────────────────
    def load(self) -> None:
        """Initial fetch; called once after the window is shown."""
        self.controller.fetch()

    @Slot()
    def _on_refresh(self):
        self.controller.fetch()

    @Slot()
    def _on_add(self):
        """Validate the form and start a create, or show why it can't be sent."""
        self.form_panel.write_to(self.controller.service.form)
        try:
            self.controller.create()
        except MovieValidationError as e:
            QMessageBox.warning(self, "Error", str(e))

    @Slot()
    def _on_save(self):
        self.form_panel.write_to(self.controller.service.form)
        try:
            self.controller.save()
        except MovieValidationError as e:
            QMessageBox.warning(self, "Error", str(e))

    @Slot(object)
    def _on_edit(self, movie: Movie):
        self.controller.begin_edit(movie)

    @Slot(str)
    def _on_delete(self, movie_id: str):
        self.controller.delete(movie_id)

    @Slot()
    def _on_form_changed(self):
        self.form_panel.read_from(self.controller.service.form)

    # ───────────────────────────────────────────────────────────────────
    @Slot()
    def refresh_list(self):
        """Rebuild the card grid from the current search + sort."""
        while self.grid_layout.count():
            item = self.grid_layout.takeAt(0)
            if widget := item.widget():
                widget.deleteLater()

        movies = self.controller.visible(self.search_input.text(), self.sort_combo.currentData())
        self.empty_label.setVisible(not movies)
        for idx, movie in enumerate(movies):
            card = MovieCard(movie, self)
            card.edit_requested.connect(self._on_edit)
            card.delete_requested.connect(self._on_delete)
            if movie.image_url:
                self.controller.load_image(movie.image_url, card.set_poster)
            r, c = divmod(idx, CARD_COLUMNS)
            self.grid_layout.addWidget(card, r, c)

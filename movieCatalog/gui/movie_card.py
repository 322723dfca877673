from __future__ import annotations
from PySide6.QtCore    import Qt, QDate, QPropertyAnimation, QLocale, Signal, Slot # type: ignore
from PySide6.QtGui     import QPixmap # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QPushButton, QGraphicsDropShadowEffect
)

from movieCatalog.settings import ACCENT_COLOR
from movieCatalog.core.models import Movie

POSTER_HEIGHT = 192


def format_release_date(movie: Movie) -> str:
    """Locale short date, the raw value if it can't be parsed, or '—'."""
    day = movie.release_day
    if day is None:
        return movie.release_date or "—"
    return QLocale().toString(QDate(day.year, day.month, day.day), QLocale.ShortFormat)


class MovieCard(QFrame):
    """Card with poster, title, description, genre, rating, release date + Edit / Delete."""
    edit_requested   = Signal(object)   # Movie
    delete_requested = Signal(str)      # movie id

    def __init__(self, movie: Movie, parent=None):
        super().__init__(parent)
        self.movie = movie
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)
        self.setFixedWidth(260)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        # ── poster (filled in later by set_poster) ──────────────────────
        self.poster = QLabel("No image",
                             alignment=Qt.AlignCenter)
        self.poster.setFixedHeight(POSTER_HEIGHT)
        self.poster.setStyleSheet("background:#0f172a; border-radius:6px;")
        root.addWidget(self.poster)

        title = QLabel(movie.title)
        title.setWordWrap(True)
        title.setStyleSheet("font-size:15px; font-weight:bold;")
        root.addWidget(title)

        desc = QLabel(movie.description)
        desc.setWordWrap(True)
        root.addWidget(desc)

        root.addWidget(QLabel(f"Genre: {movie.genre}"))

        # rating pill, same colour bands as a 0-10 score
        rating = movie.rating_value
        pill = QLabel(f"Rating: {movie.rating if movie.rating is not None else '—'}")
        if rating is not None and rating >= 7:
            bg, fg = "#2ecc71", "#000000"
        elif rating is not None and rating >= 4:
            bg, fg = "#f1c40f", "#000000"
        else:
            bg, fg = ACCENT_COLOR, "#ffffff"
        pill.setStyleSheet(f"background:{bg}; color:{fg}; border-radius:6px; padding:2px 8px;")
        root.addWidget(pill, 0, Qt.AlignLeft)

        root.addWidget(QLabel(f"Release Date: {format_release_date(movie)}"))

        # ── footer row: edit | delete ──────────────────────────────────
        footer = QHBoxLayout()
        btn_edit   = QPushButton("Edit")
        btn_delete = QPushButton("Delete")
        btn_edit.clicked.connect(lambda: self.edit_requested.emit(self.movie))
        btn_delete.clicked.connect(lambda: self.delete_requested.emit(self.movie.id))
        footer.addWidget(btn_edit)
        footer.addWidget(btn_delete)
        footer.addStretch()
        root.addLayout(footer)
        root.addStretch()

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    @Slot(str, bytes)
    def set_poster(self, url: str, data: bytes) -> None:
        if url != self.movie.image_url:
            return
        pix = QPixmap()
        if not pix.loadFromData(data):
            self.poster.setText("No image")
            return
        self.poster.setPixmap(
            pix.scaled(self.width() - 16, POSTER_HEIGHT,
                       Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
        )

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(16)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(4)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

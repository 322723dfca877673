from __future__ import annotations
from pathlib import Path

from PySide6.QtCore    import Qt, QDate, Signal, Slot # type: ignore
from PySide6.QtGui     import QDoubleValidator # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QGroupBox, QGridLayout, QHBoxLayout, QLineEdit, QPlainTextEdit,
    QDateEdit, QPushButton, QLabel, QFileDialog
)

from movieCatalog.core.form import MovieForm

# QDateEdit cannot be empty; its minimum date stands for "no date picked"
_NO_DATE = QDate(1800, 1, 1)
_IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.webp *.bmp);;All files (*)"


class MovieFormPanel(QGroupBox):
    """Title / genre / description / rating / release date / image inputs."""
    add_requested    = Signal()
    save_requested   = Signal()
    cancel_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Movie", parent)
        self._image: Path | str | None = None
        self._build_ui()
        self._connect()
        self.set_editing(False)

    def _build_ui(self) -> None:
        grid = QGridLayout(self)

        self.title_input = QLineEdit(placeholderText="Title")
        self.genre_input = QLineEdit(placeholderText="Genre")
        self.description_input = QPlainTextEdit()
        self.description_input.setPlaceholderText("Description")
        self.description_input.setFixedHeight(70)

        self.rating_input = QLineEdit(placeholderText="Rating (0-10)")
        validator = QDoubleValidator(self)
        validator.setNotation(QDoubleValidator.StandardNotation)
        self.rating_input.setValidator(validator)

        self.date_input = QDateEdit(calendarPopup=True)
        self.date_input.setDisplayFormat("yyyy-MM-dd")
        self.date_input.setMinimumDate(_NO_DATE)
        self.date_input.setSpecialValueText("Release date")
        self.date_input.setDate(_NO_DATE)

        self.btn_image   = QPushButton("Choose image…")
        self.btn_no_img  = QPushButton("Clear")
        self.lbl_image   = QLabel("No image", alignment=Qt.AlignLeft | Qt.AlignVCenter)
        img_row = QHBoxLayout()
        img_row.addWidget(self.btn_image)
        img_row.addWidget(self.btn_no_img)
        img_row.addWidget(self.lbl_image, 1)

        # two columns like the web form; description spans both
        grid.addWidget(self.title_input,       0, 0)
        grid.addWidget(self.genre_input,       0, 1)
        grid.addWidget(self.description_input, 1, 0, 1, 2)
        grid.addWidget(self.rating_input,      2, 0)
        grid.addWidget(self.date_input,        2, 1)
        grid.addLayout(img_row,                3, 0, 1, 2)

        # ── action buttons ───────────────────────────────────────────
        self.btn_add    = QPushButton("Add Movie")
        self.btn_save   = QPushButton("Save")
        self.btn_cancel = QPushButton("Cancel")
        for w in (self.btn_add, self.btn_save, self.btn_cancel):
            w.setMinimumWidth(100)
            w.setAutoDefault(False)
        actions = QHBoxLayout()
        actions.addStretch()
        actions.addWidget(self.btn_add)
        actions.addWidget(self.btn_save)
        actions.addWidget(self.btn_cancel)
        grid.addLayout(actions, 4, 0, 1, 2)

    def _connect(self) -> None:
        self.btn_add.clicked.connect(self.add_requested.emit)
        self.btn_save.clicked.connect(self.save_requested.emit)
        self.btn_cancel.clicked.connect(self.cancel_requested.emit)
        self.btn_image.clicked.connect(self._choose_image)
        self.btn_no_img.clicked.connect(lambda: self._set_image(None))

    # ----- image picker ------------------------------------------------
    @Slot()
    def _choose_image(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Choose image", "", _IMAGE_FILTER)
        if path:
            self._set_image(Path(path))

    def _set_image(self, image: Path | str | None) -> None:
        self._image = image
        if isinstance(image, Path):
            self.lbl_image.setText(image.name)
        elif image:
            self.lbl_image.setText("Current image")
        else:
            self.lbl_image.setText("No image")

    # ----- form state <-> widgets --------------------------------------
    def write_to(self, form: MovieForm) -> None:
        """Copy what the user typed into *form* (edit mode / id untouched)."""
        form.title        = self.title_input.text()
        form.genre        = self.genre_input.text()
        form.description  = self.description_input.toPlainText()
        form.rating       = self.rating_input.text()
        day = self.date_input.date()
        form.release_date = "" if day == _NO_DATE else day.toString("yyyy-MM-dd")
        form.image        = self._image

    def read_from(self, form: MovieForm) -> None:
        """Show *form* in the widgets (after edit / clear)."""
        self.title_input.setText(form.title)
        self.genre_input.setText(form.genre)
        self.description_input.setPlainText(form.description)
        self.rating_input.setText(form.rating)
        day = QDate.fromString(form.release_date or "", "yyyy-MM-dd")
        self.date_input.setDate(day if day.isValid() else _NO_DATE)
        self._set_image(form.image)
        self.set_editing(form.is_editing)

    # ----- slots called by the window to flip state ----------------------
    @Slot(bool)
    def set_editing(self, editing: bool) -> None:
        self.btn_add.setVisible(not editing)
        self.btn_save.setVisible(editing)
        self.btn_cancel.setVisible(editing)
        self.setTitle("Edit Movie" if editing else "Add Movie")

    @Slot(bool)
    def set_busy(self, busy: bool) -> None:
        for w in (self.btn_add, self.btn_save, self.btn_cancel):
            w.setEnabled(not busy)

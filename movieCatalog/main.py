import sys

from PySide6.QtWidgets import QApplication

from movieCatalog.settings    import API_URL, WINDOW_TITLE
from movieCatalog.utils       import log_debug, setup_logging
from movieCatalog.gui.theme   import apply_dark_palette
from movieCatalog.gui.main_window import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    setup_logging()
    log_debug(f"Starting {WINDOW_TITLE} against {API_URL}")

    app = QApplication(sys.argv)
    app.setApplicationName(WINDOW_TITLE)
    apply_dark_palette(app)

    window = MainWindow()
    window.show()
    window.load()                    # fetch-on-load, runs in a worker thread

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()

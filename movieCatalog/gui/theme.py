from PySide6.QtCore    import Qt
from PySide6.QtGui     import QColor, QPalette
from PySide6.QtWidgets import QApplication

from movieCatalog.settings import ACCENT_COLOR

# slate scheme; the accent is the only saturated colour
_ACTIVE = {
    QPalette.Window:          "#0f172a",
    QPalette.WindowText:      "#e2e8f0",
    QPalette.Base:            "#1e293b",
    QPalette.AlternateBase:   "#273449",
    QPalette.ToolTipBase:     "#1e293b",
    QPalette.ToolTipText:     "#e2e8f0",
    QPalette.Button:          "#1e293b",
    QPalette.ButtonText:      "#e2e8f0",
    QPalette.Text:            "#f8fafc",
    QPalette.PlaceholderText: "#64748b",
    QPalette.Link:            ACCENT_COLOR,
    QPalette.Highlight:       ACCENT_COLOR,
}

# form buttons are disabled while a request runs; make that visible
_DISABLED = {
    QPalette.ButtonText: "#475569",
    QPalette.Text:       "#475569",
    QPalette.WindowText: "#475569",
}

_STYLESHEET = f"""
QFrame#MovieCardItem {{
    background: #1e293b;
    border: 1px solid #334155;
    border-radius: 8px;
}}
QFrame#MovieCardItem:hover {{
    border-color: {ACCENT_COLOR};
}}
"""


def apply_dark_palette(app: QApplication) -> None:
    """Fusion style + the slate palette, plus the movie-card frame style."""
    palette = QPalette()
    for role, color in _ACTIVE.items():
        palette.setColor(role, QColor(color))
    for role, color in _DISABLED.items():
        palette.setColor(QPalette.Disabled, role, QColor(color))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)
    app.setStyleSheet(_STYLESHEET)

import logging
import math
import mimetypes
import pathlib
from datetime import date, datetime
from typing import Optional

from movieCatalog.settings import LOG_PATH, LOG_LEVEL

_LOG_FORMAT  = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("movieCatalog")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Console + file logging for the app.
    - Uses LOG_LEVEL (settings / env) if level is None.
    - Safe to call more than once; the file handler is only added once.
    """
    level_name  = (level or LOG_LEVEL or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=level_value, format=_LOG_FORMAT, datefmt=_DATE_FORMAT)
    logger.setLevel(level_value)

    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        logger.addHandler(handler)


def log_debug(message: str, level: int = logging.INFO) -> None:
    """Send a timestamped diagnostic line to the app log."""
    logger.log(level, message)


def normalize(text: str | None) -> str:
    """Lowercase + strip, used for case-insensitive search and sorting."""
    return (text or "").strip().casefold()


def is_blank(value) -> bool:
    """True for None or a value whose text form is empty after stripping."""
    return value is None or str(value).strip() == ""


def parse_rating(value) -> Optional[float]:
    """Best-effort float conversion; None if the rating is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    # NaN / inf would break ordering; treat them like any other non-number
    return number if math.isfinite(number) else None


def parse_release_date(value) -> Optional[date]:
    """
    Parse ``YYYY-MM-DD`` or a full ISO timestamp (what the API returns,
    e.g. ``2024-05-01T00:00:00.000Z``) into a ``date``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if is_blank(value):
        return None
    text = str(value).strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def guess_mime_type(path: pathlib.Path) -> str:
    """MIME type for an upload, falling back to a generic binary type."""
    mime, _ = mimetypes.guess_type(path.name)
    return mime or "application/octet-stream"

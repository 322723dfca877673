import logging
from typing import Any, Callable

from PySide6.QtCore import QObject, Signal, Slot

from movieCatalog.utils import log_debug

# ───────────────────────── Worker skeletons ───────────────────────────────
class _ApiWorker(QObject):
    """Runs one catalog request off the UI thread; results come back as signals."""
    succeeded = Signal(object)      # whatever the job returned
    failed    = Signal(object)      # the exception (CatalogAPIError or anything else)
    finished  = Signal(bool)

    def __init__(self, job: Callable[[], Any]):
        super().__init__()
        self._job = job

    @Slot()
    def run(self):
        try:
            result = self._job()
        except Exception as e:
            # always report back, or the controller stays busy forever
            self.failed.emit(e)
            self.finished.emit(False)
            return
        self.succeeded.emit(result)
        self.finished.emit(True)


class _ImageWorker(QObject):
    """Downloads one poster; a failure only leaves the card's placeholder."""
    loaded   = Signal(str, bytes)    # url, image data
    finished = Signal(bool)

    def __init__(self, fetch: Callable[[str], bytes], url: str):
        super().__init__()
        self._fetch = fetch
        self.url = url

    @Slot()
    def run(self):
        try:
            data = self._fetch(self.url)
        except Exception as e:
            log_debug(f"image-worker error: {e}", logging.WARNING)
            self.finished.emit(False)
            return
        self.loaded.emit(self.url, data)
        self.finished.emit(True)

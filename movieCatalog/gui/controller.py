from __future__ import annotations
from typing import Any, Callable, Dict, List, Tuple

from PySide6.QtCore import QObject, QThread, Signal, Slot

from movieCatalog.settings import REQUEST_TIMEOUT
from movieCatalog.core.catalog import SortKey
from movieCatalog.core.models import Movie
from movieCatalog.core.service import CatalogRequest, CatalogService
from movieCatalog.gui.workers import _ApiWorker, _ImageWorker


class CatalogController(QObject):
    """
    Bridges the widgets and `CatalogService`.

    •  At most one catalog request is in flight (`busy`); the form buttons
       are disabled meanwhile.
    •  Requests run in a QThread; the cache and form are only changed in
       the slots below, which Qt delivers on the UI thread.
    """
    movies_changed = Signal()
    form_changed   = Signal()
    busy_changed   = Signal(bool)

    def __init__(self, service: CatalogService | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self.service = service or CatalogService()
        self._busy = False
        self._pending: CatalogRequest | None = None
        self._jobs: List[Tuple[QThread, QObject]] = []
        self._posters: Dict[str, bytes] = {}                    # url -> image data
        self._poster_jobs: Dict[str, _ImageWorker] = {}         # url -> download in flight

    @property
    def busy(self) -> bool:
        return self._busy

    def visible(self, search: str = "", sort_by: str | SortKey = SortKey.NONE) -> List[Movie]:
        return self.service.visible(search, sort_by)

    # ───────────────────────── actions (UI thread) ────────────────────
    def fetch(self) -> bool:
        return self._start(self.service.fetch_request())

    def create(self) -> bool:
        """Raises MovieValidationError before any request is started."""
        if self._busy:
            return False
        return self._start(self.service.create_request())

    def save(self) -> bool:
        """Raises MovieValidationError before any request is started."""
        if self._busy:
            return False
        return self._start(self.service.save_request())

    def delete(self, movie_id: str) -> bool:
        return self._start(self.service.delete_request(movie_id))

    def begin_edit(self, movie: Movie) -> None:
        self.service.begin_edit(movie)
        self.form_changed.emit()

    def cancel_edit(self) -> None:
        self.service.cancel_edit()
        self.form_changed.emit()

    def load_image(self, url: str, on_loaded: Callable[[str, bytes], Any]) -> None:
        """Fetch a poster in the background (once per url); *on_loaded* should be a widget slot."""
        if url in self._posters:
            on_loaded(url, self._posters[url])
            return
        worker = self._poster_jobs.get(url)
        if worker is None:
            worker = _ImageWorker(self.service.client.fetch_image, url)
            worker.loaded.connect(self._cache_poster)
            self._poster_jobs[url] = worker
            worker.loaded.connect(on_loaded)
            self._spawn(worker)
        else:
            worker.loaded.connect(on_loaded)

    @Slot(str, bytes)
    def _cache_poster(self, url: str, data: bytes) -> None:
        self._posters[url] = data
        self._poster_jobs.pop(url, None)

    # ───────────────────────── thread plumbing ────────────────────────
    def _start(self, request: CatalogRequest) -> bool:
        if self._busy:
            return False
        self._pending = request
        self._set_busy(True)

        worker = _ApiWorker(request.call)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        self._spawn(worker)
        return True

    def _spawn(self, worker: QObject) -> None:
        thr = QThread()
        worker.moveToThread(thr)
        thr.started.connect(worker.run)
        worker.finished.connect(thr.quit)
        thr.finished.connect(self._reap)
        self._jobs.append((thr, worker))     # keep both alive until the thread ends
        thr.start()

    def shutdown(self) -> None:
        """Wait for in-flight requests before the app exits (bounded by the timeout)."""
        for thr, _ in self._jobs:
            thr.quit()
            thr.wait(int((REQUEST_TIMEOUT + 1) * 1000))
        self._jobs.clear()
        self._poster_jobs.clear()

    @Slot()
    def _reap(self) -> None:
        self._jobs = [(t, w) for t, w in self._jobs if not t.isFinished()]
        # failed downloads never reach _cache_poster; let them be retried
        alive = {id(w) for _, w in self._jobs}
        self._poster_jobs = {u: w for u, w in self._poster_jobs.items() if id(w) in alive}

    def _set_busy(self, busy: bool) -> None:
        self._busy = busy
        self.busy_changed.emit(busy)

    # ───────────────────────── results (UI thread) ────────────────────
    @Slot(object)
    def _on_succeeded(self, result) -> None:
        request, self._pending = self._pending, None
        try:
            if request is not None:
                self.service.complete(request, result)
        finally:
            self._set_busy(False)
        if request is not None and request.operation != "fetch":
            self.form_changed.emit()
        self.movies_changed.emit()

    @Slot(object)
    def _on_failed(self, error) -> None:
        request, self._pending = self._pending, None
        if request is not None:
            self.service.fail(request, error)
        self._set_busy(False)

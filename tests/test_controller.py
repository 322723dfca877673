import pytest
from PySide6.QtCore import QCoreApplication

from movieCatalog.api_clients.catalog_client import CatalogAPIError, CatalogClient
from movieCatalog.core.form import MovieValidationError
from movieCatalog.core.service import CatalogService
from movieCatalog.gui.controller import CatalogController
from movieCatalog.gui.workers import _ApiWorker, _ImageWorker
from tests.conftest import make_movie


@pytest.fixture(scope="module", autouse=True)
def qt_core():
    return QCoreApplication.instance() or QCoreApplication([])


def record(signal):
    seen = []
    signal.connect(lambda *args: seen.append(args[0] if len(args) == 1 else args))
    return seen


class TestWorkers:
    def test_api_worker_reports_unexpected_errors(self):
        def job():
            raise ValueError("boom")

        worker = _ApiWorker(job)
        finished, failed = record(worker.finished), record(worker.failed)

        worker.run()

        assert finished == [False]
        assert isinstance(failed[0], ValueError)

    def test_api_worker_success(self):
        worker = _ApiWorker(lambda: 42)
        finished, succeeded = record(worker.finished), record(worker.succeeded)

        worker.run()

        assert finished == [True]
        assert succeeded == [42]

    def test_image_worker_swallows_errors(self):
        def fetch(url):
            raise OSError("disk on fire")

        worker = _ImageWorker(fetch, "https://img.example/a.jpg")
        finished, loaded = record(worker.finished), record(worker.loaded)

        worker.run()

        assert finished == [False]
        assert loaded == []


class TestCatalogController:
    """Runs the workers inline (no thread) so the real result dispatch is exercised."""

    @pytest.fixture
    def service(self, mock_client, catalog, filled_form):
        return CatalogService(client=mock_client, catalog=catalog, form=filled_form)

    @pytest.fixture
    def spawned(self):
        return []

    @pytest.fixture
    def controller(self, service, spawned):
        ctl = CatalogController(service=service)

        def run_inline(worker):
            spawned.append(worker)
            if isinstance(worker, _ApiWorker):
                worker.run()

        ctl._spawn = run_inline
        return ctl

    def test_fetch_replaces_list_and_clears_busy(self, controller, mock_client):
        mock_client.list_movies.return_value = [make_movie("9", "Heat", "Crime")]
        busy, changed = record(controller.busy_changed), record(controller.movies_changed)

        assert controller.fetch() is True

        assert [m.id for m in controller.visible()] == ["9"]
        assert busy == [True, False]
        assert len(changed) == 1
        assert controller.busy is False

    def test_create_with_empty_field_starts_nothing(self, controller, mock_client, spawned):
        controller.service.form.rating = ""

        with pytest.raises(MovieValidationError):
            controller.create()

        assert spawned == []
        mock_client.create_movie.assert_not_called()
        assert controller.busy is False

    def test_create_adds_once_and_resets_form(self, controller, mock_client):
        mock_client.create_movie.return_value = make_movie("5", "Heat", "Crime")
        form_changes = record(controller.form_changed)

        controller.create()

        assert [m.id for m in controller.visible()].count("5") == 1
        assert controller.service.form.title == ""
        assert len(form_changes) == 1

    def test_save_replaces_matching_record(self, controller, mock_client, movies):
        controller.begin_edit(movies[0])
        updated = make_movie("1", "Spirited Away (4K)", "Animation", 9)
        mock_client.update_movie.return_value = updated

        controller.save()

        assert controller.service.catalog.get("1") is updated
        assert controller.service.catalog.movies[1:] == movies[1:]

    def test_delete_removes_record(self, controller):
        controller.delete("2")

        assert "2" not in controller.service.catalog

    def test_failed_delete_is_logged_and_clears_busy(self, controller, mock_client, caplog):
        mock_client.delete_movie.side_effect = CatalogAPIError("delete", "missing movie id")

        controller.delete("")

        assert controller.busy is False
        assert len(controller.service.catalog) == 4
        assert "Error deleting movie" in caplog.text

    def test_delete_of_record_without_id_is_logged(self, catalog, caplog):
        service = CatalogService(client=CatalogClient(base_url="http://catalog.invalid"), catalog=catalog)
        ctl = CatalogController(service=service)
        ctl._spawn = lambda worker: worker.run()

        assert ctl.delete("") is True

        assert ctl.busy is False
        assert len(service.catalog) == 4
        assert "Error deleting movie: delete failed: missing movie id" in caplog.text

    def test_unexpected_error_does_not_leave_ui_busy(self, controller, mock_client, caplog):
        mock_client.list_movies.side_effect = ValueError("boom")

        controller.fetch()

        assert controller.busy is False
        assert "Error fetching movies: boom" in caplog.text
        assert controller.fetch() is True        # a new request can start

    def test_second_request_is_refused_while_busy(self, controller, spawned):
        controller._spawn = spawned.append        # never finishes

        assert controller.delete("1") is True
        assert controller.delete("2") is False
        assert controller.create() is False
        assert len(spawned) == 1

    def test_poster_is_downloaded_once_per_url(self, controller, mock_client, spawned):
        mock_client.fetch_image.return_value = b"jpeg"
        url = "https://img.example/heat.jpg"
        first, second, third = [], [], []

        controller.load_image(url, lambda u, data: first.append(data))
        controller.load_image(url, lambda u, data: second.append(data))
        assert len(spawned) == 1

        spawned[0].run()
        controller.load_image(url, lambda u, data: third.append(data))

        assert first == second == third == [b"jpeg"]
        assert len(spawned) == 1
        mock_client.fetch_image.assert_called_once_with(url)

    def test_failed_poster_can_be_retried(self, controller, mock_client, spawned):
        mock_client.fetch_image.side_effect = [CatalogAPIError("image", "404"), b"png"]
        url = "https://img.example/gone.png"

        controller.load_image(url, lambda u, data: None)
        spawned[0].run()
        controller._reap()
        controller.load_image(url, lambda u, data: None)

        assert len(spawned) == 2

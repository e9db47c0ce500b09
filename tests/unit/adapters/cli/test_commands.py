"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- scan / dry-run : consultation sans appel API
- process / test / single : generation des posters
- preview : apercu et enregistrement du JPEG
- watch : absence de dossier a surveiller
- verification de la configuration avant chaque commande
"""

import base64
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from src.core.entities.media import MediaItem
from src.core.value_objects import MediaType
from src.main import app
from src.services.processor import PreviewResult, ProcessResult

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_container():
    """Mock le Container pour les tests.

    Patche Container dans helpers.py car c'est la que le decorateur
    @with_container() l'importe et l'instancie.
    """
    with patch("src.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.config.return_value = MagicMock(
            is_configured=True,
            poster_filename="poster.jpg",
            watch_debounce_seconds=5.0,
        )
        container_instance.tmdb_client.return_value.close = AsyncMock()
        container_instance.omdb_client.return_value.close = AsyncMock()
        yield container_instance


@pytest.fixture
def processor(mock_container) -> MagicMock:
    processor = MagicMock()
    processor.process_all = AsyncMock(return_value=[])
    processor.process_item = AsyncMock()
    processor.process_single = AsyncMock()
    processor.preview = AsyncMock()
    mock_container.poster_processor.return_value = processor
    return processor


@pytest.fixture
def movie() -> MediaItem:
    return MediaItem(Path("/media/movies/Heat (1995)"), "Heat (1995)", "Heat", 1995)


@pytest.fixture
def show() -> MediaItem:
    return MediaItem(
        Path("/media/tv/The Wire"), "The Wire", "The Wire",
        media_type=MediaType.SERIES, has_poster=True,
    )


def _assert_clients_closed(container: MagicMock) -> None:
    container.tmdb_client.return_value.close.assert_awaited_once()
    container.omdb_client.return_value.close.assert_awaited_once()


# ============================================================================
# Configuration
# ============================================================================


class TestConfigurationCheck:
    def test_incomplete_configuration_exits(self, mock_container, processor):
        """Configuration incomplete : message et code 1."""
        mock_container.config.return_value = MagicMock(is_configured=False)
        mock_container.config.return_value.missing_settings.return_value = [
            "POSTERFORGE_TMDB_API_KEY"
        ]

        result = runner.invoke(app, ["scan"])

        assert result.exit_code == 1
        assert "POSTERFORGE_TMDB_API_KEY" in result.output
        processor.scan.assert_not_called()


# ============================================================================
# scan / dry-run
# ============================================================================


class TestScan:
    def test_scan_summary(self, mock_container, processor, movie, show):
        """scan affiche le resume de la bibliotheque."""
        processor.scan.return_value = [movie, show]

        result = runner.invoke(app, ["scan"])

        assert result.exit_code == 0
        assert "Total" in result.output
        assert "Heat (1995)" in result.output
        # Deja traite : non liste
        assert "The Wire" not in result.output

    def test_scan_limits_pending_list(self, mock_container, processor):
        """La liste des dossiers a traiter est limitee."""
        processor.scan.return_value = [
            MediaItem(Path(f"/m/Movie {i}"), f"Movie {i}", f"Movie {i}") for i in range(25)
        ]

        result = runner.invoke(app, ["scan"])

        assert "Movie 19" in result.output
        assert "Movie 20" not in result.output
        assert "5 autres" in result.output


class TestDryRun:
    def test_dry_run_lists_targets(self, mock_container, processor, movie, show):
        """dry-run liste les dossiers sans rien ecrire."""
        processor.process_all.return_value = [
            ProcessResult(movie, True, "Would generate poster"),
            ProcessResult(show, True, "Would skip (poster exists)"),
        ]

        result = runner.invoke(app, ["dry-run"])

        assert result.exit_code == 0
        processor.process_all.assert_awaited_once_with(dry_run=True)
        assert "1 poster(s)" in result.output
        assert "poster.jpg" in result.output


# ============================================================================
# process / test / single
# ============================================================================


class TestProcess:
    def test_process_summary(self, mock_container, processor, movie, show):
        """process affiche le bilan des succes et echecs."""
        processor.process_all.return_value = [
            ProcessResult(movie, True, "Poster created"),
            ProcessResult(show, True, "Skipped (poster exists)"),
            ProcessResult(movie, False, "Not found on TMDB"),
        ]

        result = runner.invoke(app, ["process"])

        assert result.exit_code == 0
        assert processor.process_all.await_args.kwargs["overwrite_all"] is False
        assert "Crees" in result.output
        _assert_clients_closed(mock_container)

    def test_process_all_flag(self, mock_container, processor):
        """--all regenere les posters existants."""
        result = runner.invoke(app, ["process", "--all"])

        assert result.exit_code == 0
        assert processor.process_all.await_args.kwargs["overwrite_all"] is True


class TestTrialCommand:
    def test_processes_first_item_without_poster(self, mock_container, processor, movie, show):
        """test traite le premier dossier sans poster."""
        processor.scan.return_value = [show, movie]
        processor.process_item.return_value = ProcessResult(
            movie, True, "Poster created", movie.folder_path / "poster.jpg"
        )

        result = runner.invoke(app, ["test"])

        assert result.exit_code == 0
        processor.process_item.assert_awaited_once_with(movie)
        assert "Poster created" in result.output

    def test_failure_exits_with_error(self, mock_container, processor, movie):
        """Un echec de test sort en erreur."""
        processor.scan.return_value = [movie]
        processor.process_item.return_value = ProcessResult(movie, False, "Not found on TMDB")

        result = runner.invoke(app, ["test"])

        assert result.exit_code == 1
        assert "Not found on TMDB" in result.output

    def test_nothing_to_do(self, mock_container, processor, show):
        """Tous les dossiers ont un poster : rien a faire."""
        processor.scan.return_value = [show]

        result = runner.invoke(app, ["test"])

        assert result.exit_code == 0
        processor.process_item.assert_not_awaited()


class TestSingle:
    def test_single_folder(self, mock_container, processor, tmp_path, movie):
        """single traite le dossier donne."""
        processor.process_single.return_value = ProcessResult(
            movie, True, "Poster created", tmp_path / "poster.jpg"
        )

        result = runner.invoke(app, ["single", str(tmp_path)])

        assert result.exit_code == 0
        processor.process_single.assert_awaited_once_with(tmp_path)
        _assert_clients_closed(mock_container)

    def test_missing_folder(self, mock_container, processor, tmp_path):
        """Un dossier inexistant est refuse."""
        result = runner.invoke(app, ["single", str(tmp_path / "missing")])

        assert result.exit_code == 1
        processor.process_single.assert_not_awaited()

    def test_failure(self, mock_container, processor, tmp_path, movie):
        """Un echec de single sort en erreur."""
        processor.process_single.return_value = ProcessResult(movie, False, "boom")

        result = runner.invoke(app, ["single", str(tmp_path)])

        assert result.exit_code == 1


# ============================================================================
# preview
# ============================================================================


class TestPreview:
    def test_preview_prints_ratings_and_saves_image(self, mock_container, processor, tmp_path):
        """preview affiche les notes et enregistre l'image."""
        processor.preview.return_value = PreviewResult(
            title="Inception",
            year=2010,
            poster_url="https://image.tmdb.org/t/p/w780/x.jpg",
            preview_image="data:image/jpeg;base64," + base64.b64encode(b"jpeg").decode(),
            ratings=[{"source": "IMDb", "value": "8.8"}],
        )
        output = tmp_path / "preview.jpg"

        result = runner.invoke(
            app, ["preview", "Inception", "--year", "2010", "--series", "--output", str(output)]
        )

        assert result.exit_code == 0
        processor.preview.assert_awaited_once_with("Inception", 2010, MediaType.SERIES)
        assert "IMDb: 8.8" in result.output
        assert output.read_bytes() == b"jpeg"

    def test_preview_not_found(self, mock_container, processor):
        """Titre introuvable : code 1."""
        processor.preview.return_value = None

        result = runner.invoke(app, ["preview", "Nothing"])

        assert result.exit_code == 1
        _assert_clients_closed(mock_container)


# ============================================================================
# watch / info / version
# ============================================================================


class TestWatch:
    def test_no_folder_to_watch(self, mock_container):
        """Aucune bibliotheque a surveiller : code 1."""
        watcher = MagicMock(watched_count=0)
        mock_container.folder_watcher.return_value = watcher

        result = runner.invoke(app, ["watch"])

        assert result.exit_code == 0
        watcher.start.assert_called_once()
        assert "Aucun dossier" in result.output


class TestInfoAndVersion:
    def test_version(self):
        """version affiche la version."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "PosterForge v0.1.0" in result.output

    def test_info(self, test_settings):
        """info affiche la configuration."""
        with patch("src.main.container") as container:
            container.config.return_value = test_settings
            result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Style : bar" in result.output
        assert "imdb, rt, metacritic" in result.output

"""
Tests unitaires pour ScannerService.

Utilise les vrais adaptateurs (systeme de fichiers, parser, detecteur)
sur une arborescence temporaire.
"""

from pathlib import Path

import pytest

from src.adapters.file_system import FileSystemAdapter
from src.adapters.parsing.folder_parser import RegexFolderNameParser
from src.adapters.parsing.media_type_detector import FolderMediaTypeDetector
from src.config import Settings
from src.core.value_objects import MediaType
from src.services.scanner import ScannerService


@pytest.fixture
def scanner(test_settings: Settings) -> ScannerService:
    fs = FileSystemAdapter()
    return ScannerService(
        file_system=fs,
        folder_parser=RegexFolderNameParser(),
        type_detector=FolderMediaTypeDetector(fs),
        settings=test_settings,
    )


@pytest.fixture
def movies_dir(test_settings: Settings) -> Path:
    return test_settings.media_folders[0]


@pytest.fixture
def shows_dir(test_settings: Settings) -> Path:
    return test_settings.media_folders[1]


class TestScanFolder:
    """Tests de scan_folder."""

    def test_builds_items_from_folders(self, scanner, movies_dir):
        """Un MediaItem par sous-dossier, nom parse."""
        movie = movies_dir / "Inception (2010) [imdb-tt1375666]"
        movie.mkdir()
        (movie / "Inception.mkv").touch()

        items = scanner.scan_folder(movies_dir)

        assert len(items) == 1
        item = items[0]
        assert item.folder_path == movie
        assert item.folder_name == "Inception (2010) [imdb-tt1375666]"
        assert item.title == "Inception"
        assert item.year == 2010
        assert item.imdb_id == "tt1375666"
        assert item.media_type == MediaType.MOVIE
        assert item.has_poster is False

    def test_detects_series(self, scanner, shows_dir):
        """Un dossier avec saisons est une serie."""
        (shows_dir / "Breaking Bad (2008)" / "Season 1").mkdir(parents=True)

        items = scanner.scan_folder(shows_dir)

        assert items[0].media_type == MediaType.SERIES

    def test_detects_existing_poster(self, scanner, movies_dir):
        """has_poster vaut True si poster.jpg existe."""
        movie = movies_dir / "Heat (1995)"
        movie.mkdir()
        (movie / "poster.jpg").write_bytes(b"jpeg")

        assert scanner.scan_folder(movies_dir)[0].has_poster is True

    def test_skips_files_and_hidden_folders(self, scanner, movies_dir):
        """Fichiers et dossiers . ou @ sont ignores."""
        (movies_dir / "Heat (1995)").mkdir()
        (movies_dir / ".hidden").mkdir()
        (movies_dir / "@eaDir").mkdir()
        (movies_dir / "stray.mkv").touch()

        items = scanner.scan_folder(movies_dir)

        assert [i.folder_name for i in items] == ["Heat (1995)"]

    def test_items_are_sorted_by_name(self, scanner, movies_dir):
        """Les elements sont tries par nom de dossier."""
        for name in ("Zodiac (2007)", "Alien (1979)", "Memento (2000)"):
            (movies_dir / name).mkdir()

        names = [i.title for i in scanner.scan_folder(movies_dir)]

        assert names == ["Alien", "Memento", "Zodiac"]

    def test_missing_folder_returns_empty_list(self, scanner, tmp_path):
        """Bibliotheque absente : liste vide."""
        assert scanner.scan_folder(tmp_path / "missing") == []


class TestScanAll:
    """Tests de scan_all."""

    def test_concatenates_libraries(self, scanner, movies_dir, shows_dir, tmp_path):
        """Les bibliotheques sont concatenees."""
        (movies_dir / "Heat (1995)").mkdir()
        (shows_dir / "The Wire (2002)" / "Season 1").mkdir(parents=True)

        items = scanner.scan_all([movies_dir, shows_dir, tmp_path / "missing"])

        assert [(i.title, i.media_type) for i in items] == [
            ("Heat", MediaType.MOVIE),
            ("The Wire", MediaType.SERIES),
        ]


class TestBuildItem:
    """Tests de build_item."""

    def test_uses_configured_poster_filename(self, tmp_path, test_settings):
        """Le nom du poster vient de la configuration."""
        settings = test_settings.model_copy(update={"poster_filename": "folder.jpg"})
        fs = FileSystemAdapter()
        scanner = ScannerService(fs, RegexFolderNameParser(), FolderMediaTypeDetector(fs), settings)
        movie = tmp_path / "Heat (1995)"
        movie.mkdir()
        (movie / "folder.jpg").touch()

        assert scanner.build_item(movie).has_poster is True

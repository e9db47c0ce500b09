"""
Tests unitaires pour la detection film/serie.

Les heuristiques sont testees sur des listes d'entrees construites a la
main (classify_entries), puis le detecteur sur un vrai dossier.
"""

from pathlib import Path

import pytest

from src.adapters.file_system import FileSystemAdapter
from src.adapters.parsing.media_type_detector import (
    FolderMediaTypeDetector,
    classify_entries,
    is_episode_file,
    is_season_folder,
)
from src.core.ports.file_system import DirectoryEntry
from src.core.value_objects import MediaType


def _dir(name: str) -> DirectoryEntry:
    return DirectoryEntry(name=name, is_dir=True)


def _file(name: str) -> DirectoryEntry:
    return DirectoryEntry(name=name, is_dir=False)


class TestSeasonFolder:
    """Tests de is_season_folder."""

    @pytest.mark.parametrize(
        "name", ["Season 1", "season 02", "Season01", "Season", "S01", "s1", "S02 Extras"]
    )
    def test_matches(self, name):
        assert is_season_folder(name)

    @pytest.mark.parametrize("name", ["Specials", "Seasons Greetings", "Extras", "Subs", "S01E01"])
    def test_does_not_match(self, name):
        assert not is_season_folder(name)


class TestEpisodeFile:
    """Tests de is_episode_file."""

    @pytest.mark.parametrize(
        "name",
        [
            "Breaking.Bad.S01E01.mkv",
            "breaking bad s1e1.mp4",
            "Show - 1x02 - Title.avi",
            "show.10x12.M4V",
        ],
    )
    def test_matches(self, name):
        assert is_episode_file(name)

    @pytest.mark.parametrize(
        "name",
        [
            "Inception.2010.1080p.mkv",
            "Movie.1920x1080.mkv",
            "Breaking.Bad.S01E01.srt",
            "S01E01.nfo",
        ],
    )
    def test_does_not_match(self, name):
        assert not is_episode_file(name)


class TestClassifyEntries:
    """Tests de classify_entries."""

    def test_empty_is_movie(self):
        """Un dossier vide est un film."""
        assert classify_entries([]) == MediaType.MOVIE

    def test_movie_folder(self):
        """Un seul fichier video : film."""
        entries = [_file("Inception.2010.mkv"), _file("poster.jpg"), _dir("Extras")]
        assert classify_entries(entries) == MediaType.MOVIE

    def test_season_folder_makes_series(self):
        """Un dossier de saison suffit pour une serie."""
        assert classify_entries([_dir("Season 1"), _file("tvshow.nfo")]) == MediaType.SERIES

    def test_episode_file_makes_series(self):
        """Un fichier d'episode suffit pour une serie."""
        assert classify_entries([_file("Show.S01E01.mkv")]) == MediaType.SERIES

    def test_episode_named_folder_is_not_an_episode(self):
        """Un dossier nomme comme un episode n'est pas un fichier video."""
        assert classify_entries([_dir("Show.S01E01.mkv")]) == MediaType.MOVIE


class TestFolderMediaTypeDetector:
    """Tests du detecteur sur disque."""

    @pytest.fixture
    def detector(self) -> FolderMediaTypeDetector:
        return FolderMediaTypeDetector(FileSystemAdapter())

    def test_detects_series_from_season_folder(self, detector, tmp_path: Path):
        """Serie detectee par un dossier de saison."""
        show = tmp_path / "Breaking Bad (2008)"
        (show / "Season 1").mkdir(parents=True)

        assert detector.detect(show) == MediaType.SERIES

    def test_detects_series_from_episode_file(self, detector, tmp_path: Path):
        """Serie detectee par un fichier d'episode."""
        show = tmp_path / "Miniseries"
        show.mkdir()
        (show / "Miniseries.S01E01.mkv").touch()

        assert detector.detect(show) == MediaType.SERIES

    def test_detects_movie(self, detector, tmp_path: Path):
        """Film par defaut."""
        movie = tmp_path / "Heat (1995)"
        movie.mkdir()
        (movie / "Heat.1995.mkv").touch()

        assert detector.detect(movie) == MediaType.MOVIE

    def test_missing_folder_is_movie(self, detector, tmp_path: Path):
        """Dossier absent : film."""
        assert detector.detect(tmp_path / "missing") == MediaType.MOVIE

    def test_only_one_level_is_read(self, detector, tmp_path: Path):
        """Seul le premier niveau est lu."""
        movie = tmp_path / "Movie"
        (movie / "Extras" / "Season 1").mkdir(parents=True)

        assert detector.detect(movie) == MediaType.MOVIE

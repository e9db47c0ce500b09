"""
Fixtures pytest partagees pour les tests PosterForge.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileSystem, clients API)
- Settings de test avec chemins temporaires
- Images de poster JPEG generees en memoire
"""

from io import BytesIO
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from src.config import Settings
from src.core.ports.api_clients import CatalogMatch, ICatalogClient, IRatingsClient
from src.core.ports.file_system import IFileSystem
from src.core.value_objects import MediaType, OverlayStyle, RatingSet


def make_poster_bytes(width: int = 780, height: int = 1170, color=(40, 80, 120)) -> bytes:
    """Encode une image JPEG unie de la taille demandee."""
    buffer = BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Le mock implemente toutes les methodes de IFileSystem.
    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = False
    mock.list_entries.return_value = []
    mock.write_bytes.return_value = None
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour creer deux bibliotheques isolees
    (films et series) pour chaque test.
    """
    movies_dir = tmp_path / "movies"
    shows_dir = tmp_path / "shows"
    movies_dir.mkdir()
    shows_dir.mkdir()

    return Settings(
        _env_file=None,  # Ignorer le fichier .env pour les tests
        tmdb_api_key="tmdb_test_key",
        omdb_api_key="omdb_test_key",
        media_folders=[movies_dir, shows_dir],
        poster_style=OverlayStyle.BOTTOM_BAR,
        request_delay_seconds=0,
        watch_debounce_seconds=0,
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def poster_bytes() -> bytes:
    """Poster JPEG 780x1170 (taille w780 de TMDB)."""
    return make_poster_bytes()


@pytest.fixture
def full_ratings() -> RatingSet:
    """Notes completes pour un film type."""
    return RatingSet.from_raw(
        imdb_rating="8.8",
        imdb_votes="2,500,000",
        rotten_tomatoes="87%",
        metacritic="74",
    )


@pytest.fixture
def movie_match() -> CatalogMatch:
    """Correspondance TMDB pour Inception."""
    return CatalogMatch(
        id="27205",
        title="Inception",
        year=2010,
        media_type=MediaType.MOVIE,
        poster_path="/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
        vote_average=8.4,
        vote_count=35000,
        imdb_id="tt1375666",
    )


@pytest.fixture
def mock_catalog_client(movie_match: CatalogMatch, poster_bytes: bytes) -> AsyncMock:
    """Mock de ICatalogClient retournant Inception par defaut."""
    mock = AsyncMock(spec=ICatalogClient)
    mock.find_movie.return_value = movie_match
    mock.find_show.return_value = None
    mock.download_poster.return_value = poster_bytes
    mock.poster_url = MagicMock(
        side_effect=lambda path, size="w780": f"https://image.tmdb.org/t/p/{size}{path}"
    )
    return mock


@pytest.fixture
def mock_ratings_client(full_ratings: RatingSet) -> AsyncMock:
    """Mock de IRatingsClient retournant des notes completes par defaut."""
    mock = AsyncMock(spec=IRatingsClient)
    mock.get_ratings.return_value = full_ratings
    mock.search_by_title.return_value = None
    return mock

"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe POSTERFORGE_,
et peut optionnellement être fournie via un fichier .env.

Les clés API (TMDB, OMDb) sont optionnelles au chargement - les commandes de traitement
refusent de démarrer tant que la configuration n'est pas complète (voir is_configured).
"""

from pathlib import Path
from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.core.value_objects.overlay import OverlayStyle
from src.utils.constants import DEFAULT_POSTER_FILENAME, DEFAULT_RATING_SOURCES

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


def _split_csv(value: object) -> object:
    """Découpe une liste séparée par des virgules ("a, b,c" -> ["a", "b", "c"])."""
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe POSTERFORGE_.
    Exemple : POSTERFORGE_MEDIA_FOLDERS=/media/movies,/media/tv

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="POSTERFORGE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Clés API
    tmdb_api_key: Optional[str] = Field(default=None)
    omdb_api_key: Optional[str] = Field(default=None)

    # Dossiers media (liste séparée par des virgules dans l'environnement)
    media_folders: Annotated[list[Path], NoDecode] = Field(default_factory=list)

    # Rendu des posters
    poster_style: OverlayStyle = Field(default=OverlayStyle.CORNER)
    ratings: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_RATING_SOURCES)
    )
    overwrite: bool = Field(default=False)
    poster_filename: str = Field(default=DEFAULT_POSTER_FILENAME)
    poster_size: str = Field(default="w780")
    tmdb_language: str = Field(default="en-US")

    # Traitement par lot et surveillance
    request_delay_seconds: float = Field(default=0.25, ge=0)
    watch_debounce_seconds: float = Field(default=5.0, ge=0)

    # Cache des API
    cache_dir: Path = Field(default=Path(".cache/api"))

    # API web
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8750, ge=1, le=65535)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/posterforge.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("media_folders", mode="before")
    @classmethod
    def split_media_folders(cls, v: object) -> object:
        """Accepte une liste séparée par des virgules et étend ~."""
        value = _split_csv(v)
        if isinstance(value, (list, tuple)):
            return [Path(p).expanduser() for p in value]
        return value

    @field_validator("ratings", mode="before")
    @classmethod
    def split_ratings(cls, v: object) -> object:
        """Accepte "imdb,rt,metacritic" et normalise la casse."""
        value = _split_csv(v)
        if isinstance(value, (list, tuple)):
            return [str(name).strip().lower() for name in value]
        return value

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)

    @property
    def omdb_enabled(self) -> bool:
        """Vérifie si l'API OMDb est configurée."""
        return bool(self.omdb_api_key)

    @property
    def is_configured(self) -> bool:
        """Vrai si les deux clés API et au moins un dossier media sont définis."""
        return self.tmdb_enabled and self.omdb_enabled and bool(self.media_folders)

    def missing_settings(self) -> list[str]:
        """Liste des variables d'environnement requises manquantes."""
        missing = []
        if not self.tmdb_enabled:
            missing.append("POSTERFORGE_TMDB_API_KEY")
        if not self.omdb_enabled:
            missing.append("POSTERFORGE_OMDB_API_KEY")
        if not self.media_folders:
            missing.append("POSTERFORGE_MEDIA_FOLDERS")
        return missing

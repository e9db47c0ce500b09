"""
Utilitaires et constantes pour PosterForge.

Ce module contient les constantes partagees.
"""

from src.utils.constants import (
    BADGE_COLORS,
    DEFAULT_POSTER_FILENAME,
    DEFAULT_RATING_SOURCES,
    IGNORED_FOLDER_PREFIXES,
    MAX_BADGES,
    VIDEO_EXTENSIONS,
)

__all__ = [
    "BADGE_COLORS",
    "DEFAULT_POSTER_FILENAME",
    "DEFAULT_RATING_SOURCES",
    "IGNORED_FOLDER_PREFIXES",
    "MAX_BADGES",
    "VIDEO_EXTENSIONS",
]

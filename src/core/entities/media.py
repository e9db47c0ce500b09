"""
Media folder entities.

Entities representing the media folders found on disk by a directory scan,
with the identity extracted from their folder name and contents.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from src.core.value_objects.parsed_info import MediaType


@dataclass
class MediaItem:
    """
    One media folder found by a directory scan.

    The folder path uniquely identifies the item for the lifetime of one scan.
    has_poster reflects the presence of the rendered poster file at scan time
    and becomes stale after any later write.

    Attributes:
        folder_path: Absolute path of the media folder
        folder_name: Raw folder name as found on disk
        title: Title parsed from the folder name
        year: Release year parsed from the folder name
        media_type: MOVIE or SERIES, detected from the folder contents
        imdb_id: IMDb ID embedded in the folder name ([imdb-tt...])
        tmdb_id: TMDB ID embedded in the folder name ([tmdb-...])
        tvdb_id: TVDB ID embedded in the folder name ([tvdb-...])
        has_poster: True if the rendered poster file already exists
    """

    folder_path: Path
    folder_name: str
    title: str
    year: Optional[int] = None
    media_type: MediaType = MediaType.MOVIE
    imdb_id: Optional[str] = None
    tmdb_id: Optional[str] = None
    tvdb_id: Optional[str] = None
    has_poster: bool = False

    @property
    def label(self) -> str:
        """Title followed by the year when known, e.g. "Inception (2010)"."""
        if self.year:
            return f"{self.title} ({self.year})"
        return self.title

    def to_dict(self) -> dict:
        """JSON-friendly representation for the web API."""
        return {
            "folder_path": str(self.folder_path),
            "folder_name": self.folder_name,
            "title": self.title,
            "year": self.year,
            "type": self.media_type.value,
            "imdb_id": self.imdb_id,
            "tmdb_id": self.tmdb_id,
            "tvdb_id": self.tvdb_id,
            "has_poster": self.has_poster,
        }

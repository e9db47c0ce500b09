"""
Objets valeur pour les informations extraites des noms de dossiers.

Objets valeur immutables representant l'identite extraite d'un nom de
dossier media (titre, annee, IDs externes) et la classification du type
de media (film ou serie).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MediaType(Enum):
    """Type de media detecte depuis le contenu d'un dossier.

    Valeurs:
        MOVIE: Film (long-metrage unique)
        SERIES: Serie TV (saisons/episodes)
    """

    MOVIE = "movie"
    SERIES = "series"


@dataclass(frozen=True)
class ParsedName:
    """
    Informations extraites du parsing d'un nom de dossier media.

    Objet valeur immutable produit par le parser de noms de dossiers.
    Un champ absent vaut None, jamais une valeur sentinelle (0, "").

    Attributs:
        title: Titre nettoye (peut etre vide pour une entree degeneree)
        year: Annee de sortie (1900-2099) si presente
        imdb_id: ID IMDb (format ttXXXXXXX) depuis un jeton [imdb-ttXXX]
        tmdb_id: ID TMDB depuis un jeton [tmdb-XXX]
        tvdb_id: ID TVDB depuis un jeton [tvdb-XXX]
    """

    title: str
    year: Optional[int] = None
    imdb_id: Optional[str] = None
    tmdb_id: Optional[str] = None
    tvdb_id: Optional[str] = None

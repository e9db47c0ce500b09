"""
Objets valeur pour les notes critiques et public d'un titre.

Les notes proviennent d'une source externe (OMDb) et sont normalisees
avant d'entrer dans le domaine : les suffixes d'unite ("%", "/100") sont
retires et les valeurs "N/A" deviennent absentes.
"""

from dataclasses import dataclass
from typing import Optional

# Valeur utilisee par OMDb pour une note inconnue
NOT_AVAILABLE = "N/A"


def normalize_score(value: Optional[str], suffix: str = "") -> Optional[str]:
    """
    Normalise une note brute en retirant son suffixe d'unite.

    Args:
        value: Note brute (ex: "87%", "74/100", "N/A")
        suffix: Suffixe a retirer (ex: "%", "/100")

    Returns:
        La note nettoyee, ou None si absente, vide ou "N/A"
    """
    if value is None:
        return None
    cleaned = value.strip()
    if suffix and cleaned.endswith(suffix):
        cleaned = cleaned[: -len(suffix)].strip()
    if not cleaned or cleaned == NOT_AVAILABLE:
        return None
    return cleaned


@dataclass(frozen=True)
class RatingScore:
    """
    Note IMDb avec son nombre de votes.

    Attributs:
        value: Note sur 10 telle que fournie (ex: "8.5")
        votes: Nombre de votes formate (ex: "1,234,567"), optionnel
    """

    value: str
    votes: Optional[str] = None


@dataclass(frozen=True)
class RatingSet:
    """
    Notes normalisees d'un titre, chacune independamment optionnelle.

    Attributs:
        imdb: Note IMDb et votes
        rotten_tomatoes: Score Rotten Tomatoes sans "%" (ex: "87")
        metacritic: Metascore sans "/100" (ex: "74")
    """

    imdb: Optional[RatingScore] = None
    rotten_tomatoes: Optional[str] = None
    metacritic: Optional[str] = None

    @classmethod
    def from_raw(
        cls,
        imdb_rating: Optional[str] = None,
        imdb_votes: Optional[str] = None,
        rotten_tomatoes: Optional[str] = None,
        metacritic: Optional[str] = None,
    ) -> "RatingSet":
        """
        Construit un RatingSet depuis des valeurs brutes non normalisees.

        Args:
            imdb_rating: Note IMDb brute ("8.5" ou "N/A")
            imdb_votes: Votes IMDb bruts ("1,234" ou "N/A")
            rotten_tomatoes: Score RT brut ("87%")
            metacritic: Metascore brut ("74" ou "74/100")
        """
        rating = normalize_score(imdb_rating)
        return cls(
            imdb=RatingScore(rating, normalize_score(imdb_votes)) if rating else None,
            rotten_tomatoes=normalize_score(rotten_tomatoes, "%"),
            metacritic=normalize_score(metacritic, "/100"),
        )

    @property
    def is_empty(self) -> bool:
        """Vrai si aucune source n'a de donnees pour ce titre."""
        return self.imdb is None and self.rotten_tomatoes is None and self.metacritic is None

    def as_list(self) -> list[dict[str, str]]:
        """Liste ordonnee {source, value} pour l'affichage (CLI, API web)."""
        entries = []
        if self.imdb:
            entries.append({"source": "IMDb", "value": self.imdb.value})
        if self.rotten_tomatoes:
            entries.append({"source": "RT", "value": self.rotten_tomatoes})
        if self.metacritic:
            entries.append({"source": "Metacritic", "value": self.metacritic})
        return entries

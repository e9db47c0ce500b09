"""
Implementation du parser de noms de dossiers media par expressions regulieres.

Ce module fournit RegexFolderNameParser qui implemente IFolderNameParser
pour extraire titre, annee et IDs externes (IMDb, TMDB, TVDB) d'un nom
de dossier tel que "Inception (2010) [imdb-tt1375666]".
"""

import re

from src.core.ports.parser import IFolderNameParser
from src.core.value_objects.parsed_info import ParsedName

# Jetons d'ID entre crochets ou accolades, separateur optionnel (-, :, =)
IMDB_PATTERN = re.compile(r"[\[{]imdb[-:=]?(tt\d+)[\]}]", re.IGNORECASE)
TMDB_PATTERN = re.compile(r"[\[{]tmdb[-:=]?(\d+)[\]}]", re.IGNORECASE)
TVDB_PATTERN = re.compile(r"[\[{]tvdb[-:=]?(\d+)[\]}]", re.IGNORECASE)

# Annee 19xx/20xx, optionnellement entouree d'un niveau de (), [] ou {}
YEAR_PATTERN = re.compile(r"[(\[{]?((?:19|20)\d{2})[)\]}]?")

BRACKETS_PATTERN = re.compile(r"[\[\](){}]")
WHITESPACE_PATTERN = re.compile(r"\s+")


class RegexFolderNameParser(IFolderNameParser):
    """
    Parser de noms de dossiers base sur des expressions regulieres.

    Les extractions sont ordonnees : chaque jeton trouve est retire de la
    chaine de travail avant l'etape suivante, pour que l'annee ne soit
    jamais lue a l'interieur d'un ID deja extrait (ex: [tmdb-19995]).
    Une seule occurrence est retenue par etape, la plus a gauche.
    """

    def parse(self, raw_name: str) -> ParsedName:
        """
        Parse un nom de dossier et extrait les informations d'identite.

        Args:
            raw_name: Nom de dossier brut (sans le chemin)

        Returns:
            ParsedName avec les champs trouves, None pour les autres.
        """
        working = raw_name

        imdb_id, working = self._extract(IMDB_PATTERN, working)
        tmdb_id, working = self._extract(TMDB_PATTERN, working)
        tvdb_id, working = self._extract(TVDB_PATTERN, working)
        year_text, working = self._extract(YEAR_PATTERN, working)

        return ParsedName(
            title=self._clean_title(working),
            year=int(year_text) if year_text else None,
            imdb_id=imdb_id,
            tmdb_id=tmdb_id,
            tvdb_id=tvdb_id,
        )

    @staticmethod
    def _extract(pattern: re.Pattern[str], text: str) -> tuple[str | None, str]:
        """
        Extrait la premiere occurrence d'un pattern et la retire du texte.

        Args:
            pattern: Pattern avec un groupe capturant la valeur
            text: Chaine de travail

        Returns:
            Tuple (valeur capturee ou None, texte sans l'occurrence)
        """
        match = pattern.search(text)
        if match is None:
            return None, text
        return match.group(1), text[: match.start()] + text[match.end():]

    @staticmethod
    def _clean_title(text: str) -> str:
        """Retire crochets/accolades/parentheses restants et normalise les espaces."""
        text = BRACKETS_PATTERN.sub("", text)
        return WHITESPACE_PATTERN.sub(" ", text).strip()

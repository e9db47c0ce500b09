"""
Interfaces ports pour le parsing de noms de dossiers et la detection du type.

Interfaces abstraites (ports) definissant les contrats pour extraire
l'identite d'un dossier media depuis son nom et pour classer son contenu
en film ou serie.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.core.value_objects.parsed_info import MediaType, ParsedName


class IFolderNameParser(ABC):
    """
    Interface pour le parsing de noms de dossiers media.

    Definit le contrat pour extraire titre, annee et IDs externes
    depuis un nom de dossier brut comme "Inception (2010) [imdb-tt1375666]".
    """

    @abstractmethod
    def parse(self, raw_name: str) -> ParsedName:
        """
        Parse un nom de dossier et extrait les informations d'identite.

        Fonction totale : l'absence d'un champ donne None, jamais une exception.

        Args:
            raw_name: Nom de dossier brut (sans le chemin)

        Retourne:
            ParsedName avec les informations extraites
        """
        ...


class IMediaTypeDetector(ABC):
    """
    Interface pour la classification d'un dossier media.

    Heuristique best-effort : une serie classee en film est acceptable,
    une erreur ne l'est pas.
    """

    @abstractmethod
    def detect(self, folder_path: Path) -> MediaType:
        """
        Classe un dossier en film ou serie d'apres son contenu immediat.

        Args:
            folder_path: Chemin du dossier media

        Retourne:
            MediaType.SERIES si une heuristique de serie se declenche,
            MediaType.MOVIE sinon
        """
        ...

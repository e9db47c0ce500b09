"""
Interfaces ports pour le système de fichiers.

Interfaces abstraites (ports) définissant les contrats pour les opérations fichiers
dont a besoin le scan des dossiers media : listage d'un niveau de répertoire,
vérification d'existence et écriture du poster rendu.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Entrée d'un répertoire (un seul niveau).

    Attributs :
        name : Nom de l'entrée (sans le chemin)
        is_dir : True si l'entrée est un répertoire
    """

    name: str
    is_dir: bool

    @property
    def suffix(self) -> str:
        """Extension en minuscules (ex: ".mkv"), vide si absente."""
        return Path(self.name).suffix.lower()


class IFileSystem(ABC):
    """
    Interface pour les opérations de base sur les fichiers.

    Définit les opérations pour interagir avec le système de fichiers :
    vérification d'existence, listage d'un répertoire, écriture d'un fichier.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def list_entries(self, directory: Path) -> list[DirectoryEntry]:
        """
        Liste les entrées immédiates d'un répertoire.

        Args :
            directory : Répertoire à lister

        Retourne :
            Liste des entrées, vide si le répertoire est absent ou illisible
        """
        ...

    @abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> None:
        """
        Écrit un fichier de manière atomique.

        Args :
            path : Chemin du fichier cible
            data : Contenu à écrire

        Lève :
            OSError si l'écriture échoue
        """
        ...

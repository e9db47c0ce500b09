"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles :
listage d'un niveau de repertoire pour le scan et la detection du type,
ecriture atomique du poster rendu.
"""

import os
import uuid
from pathlib import Path

from loguru import logger

from src.core.ports.file_system import DirectoryEntry, IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def list_entries(self, directory: Path) -> list[DirectoryEntry]:
        """
        Liste les entrees immediates d'un repertoire, triees par nom.

        Retourne une liste vide si le repertoire est absent ou illisible.
        Les liens symboliques sont suivis pour determiner is_dir.
        """
        try:
            with os.scandir(directory) as it:
                entries = [
                    DirectoryEntry(name=entry.name, is_dir=self._is_dir(entry))
                    for entry in it
                ]
        except OSError as e:
            logger.debug("Repertoire illisible", directory=str(directory), error=str(e))
            return []
        return sorted(entries, key=lambda e: e.name)

    def write_bytes(self, path: Path, data: bytes) -> None:
        """
        Ecrit un fichier de maniere atomique.

        Ecrit dans un fichier temporaire voisin puis le renomme avec
        os.replace, pour qu'un lecteur (serveur media) ne voie jamais
        un poster a moitie ecrit.
        """
        temp = path.with_name(f".tmp_{uuid.uuid4().hex}_{path.name}")
        try:
            temp.write_bytes(data)
            os.replace(temp, path)
        except OSError:
            # Nettoyer le fichier temporaire en cas d'erreur
            if temp.exists():
                temp.unlink()
            raise

    @staticmethod
    def _is_dir(entry: os.DirEntry) -> bool:
        """is_dir() qui ne leve pas sur un lien casse."""
        try:
            return entry.is_dir()
        except OSError:
            return False

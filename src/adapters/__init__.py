"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Clients API externes (TMDB, OMDb) avec cache et retry
- cli/ : Interface ligne de commande (Typer + Rich)
- imaging/ : Rendu Pillow des overlays de badges
- parsing/ : Parsing des noms de dossiers et détection film/série
- file_system.py : Opérations sur le système de fichiers
- watcher.py : Surveillance des bibliothèques (watchdog)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from src.adapters.file_system import FileSystemAdapter
from src.adapters.parsing.folder_parser import RegexFolderNameParser
from src.adapters.parsing.media_type_detector import FolderMediaTypeDetector

__all__ = [
    "FileSystemAdapter",
    "FolderMediaTypeDetector",
    "RegexFolderNameParser",
]

"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports client API : Contrats pour les services externes
- ICatalogClient : Catalogue de métadonnées (poster de base, note native)
- IRatingsClient : Source de notes (IMDb, Rotten Tomatoes, Metacritic)
- SearchResult, CatalogMatch : Résultats du catalogue

Ports système de fichiers : Contrats pour les opérations fichiers
- IFileSystem : Listage, existence, écriture
- DirectoryEntry : Entrée d'un répertoire

Ports parsing : Contrats d'identification des dossiers media
- IFolderNameParser : Extraction titre/année/IDs
- IMediaTypeDetector : Classification film/série
"""

from src.core.ports.api_clients import (
    CatalogMatch,
    ICatalogClient,
    IRatingsClient,
    SearchResult,
)
from src.core.ports.file_system import (
    DirectoryEntry,
    IFileSystem,
)
from src.core.ports.parser import (
    IFolderNameParser,
    IMediaTypeDetector,
)

__all__ = [
    # Clients API
    "CatalogMatch",
    "ICatalogClient",
    "IRatingsClient",
    "SearchResult",
    # Système de fichiers
    "DirectoryEntry",
    "IFileSystem",
    # Parsing
    "IFolderNameParser",
    "IMediaTypeDetector",
]

"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
adaptateurs (systeme de fichiers, parsing, clients API, rendu) et services
(scan, composition, traitement, surveillance).
"""

from dependency_injector import containers, providers

from .adapters.api.cache import APICache
from .adapters.api.omdb_client import OMDbClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.file_system import FileSystemAdapter
from .adapters.imaging.overlay_renderer import OverlayRenderer
from .adapters.parsing.folder_parser import RegexFolderNameParser
from .adapters.parsing.media_type_detector import FolderMediaTypeDetector
from .adapters.watcher import FolderWatcher
from .config import Settings
from .services.compositor import PosterCompositor
from .services.processor import PosterProcessor
from .services.scanner import ScannerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        processor = container.poster_processor()
        results = await processor.process_all()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    folder_parser = providers.Singleton(RegexFolderNameParser)
    type_detector = providers.Singleton(
        FolderMediaTypeDetector,
        file_system=file_system,
    )
    overlay_renderer = providers.Singleton(OverlayRenderer)

    # Cache API - Singleton pour partage entre clients
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.cache_dir,
    )

    # Clients API - Singleton avec api_key depuis config
    # Une cle absente est verifiee par les commandes (Settings.is_configured)
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        cache=api_cache,
        language=config.provided.tmdb_language,
    )

    omdb_client = providers.Singleton(
        OMDbClient,
        api_key=config.provided.omdb_api_key,
        cache=api_cache,
    )

    # Services
    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
        folder_parser=folder_parser,
        type_detector=type_detector,
        settings=config,
    )

    # Composition sans etat - Singleton
    poster_compositor = providers.Singleton(
        PosterCompositor,
        renderer=overlay_renderer,
    )

    poster_processor = providers.Factory(
        PosterProcessor,
        scanner=scanner_service,
        catalog_client=tmdb_client,
        ratings_client=omdb_client,
        compositor=poster_compositor,
        file_system=file_system,
        settings=config,
    )

    folder_watcher = providers.Factory(
        FolderWatcher,
        processor=poster_processor,
        file_system=file_system,
        settings=config,
    )

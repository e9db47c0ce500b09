"""
Surveillance des bibliotheques media avec watchdog.

Detecte l'arrivee de nouveaux dossiers media (ou de nouveaux fichiers video
dans un dossier existant) et genere leur poster note apres une periode de
calme : tant que des fichiers sont copies, le traitement est repousse.

Les evenements watchdog arrivent dans le thread de l'observer ; ils sont
transmis a la boucle asyncio qui gere l'anti-rebond et le traitement.
"""

import asyncio
from pathlib import Path
from typing import Callable, Optional

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from src.config import Settings
from src.core.ports.file_system import IFileSystem
from src.services.processor import PosterProcessor, ProcessResult
from src.utils.constants import IGNORED_FOLDER_PREFIXES, VIDEO_EXTENSIONS


def top_level_folder(base_folder: Path, path: Path) -> Optional[Path]:
    """
    Retourne le dossier media (enfant direct de la bibliotheque) contenant path.

    Examples:
        /media/movies, /media/movies/Avatar (2009)/a.mkv -> /media/movies/Avatar (2009)
        /media/movies, /media/movies -> None
    """
    try:
        relative = path.relative_to(base_folder)
    except ValueError:
        return None
    if not relative.parts:
        return None
    name = relative.parts[0]
    if name.startswith(IGNORED_FOLDER_PREFIXES):
        return None
    return base_folder / name


class MediaFolderHandler(FileSystemEventHandler):
    """
    Handler watchdog d'une bibliotheque.

    Retient les nouveaux dossiers de premier niveau et les nouveaux fichiers
    video a n'importe quelle profondeur, et signale le dossier media concerne.
    """

    def __init__(self, base_folder: Path, on_activity: Callable[[Path], None]) -> None:
        super().__init__()
        self._base_folder = base_folder
        self._on_activity = on_activity

    def on_created(self, event: FileSystemEvent) -> None:
        self._handle(Path(event.src_path), event.is_directory)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._handle(Path(event.dest_path), event.is_directory)

    def _handle(self, path: Path, is_directory: bool) -> None:
        if is_directory and path.parent != self._base_folder:
            return
        if not is_directory and path.suffix.lower() not in VIDEO_EXTENSIONS:
            return
        folder = top_level_folder(self._base_folder, path)
        if folder is not None:
            self._on_activity(folder)


class FolderWatcher:
    """
    Surveille les bibliotheques et traite les nouveaux dossiers media.

    Usage:
        watcher = FolderWatcher(processor, file_system, settings)
        watcher.start(asyncio.get_running_loop())
        ...
        watcher.stop()
    """

    def __init__(
        self,
        processor: PosterProcessor,
        file_system: IFileSystem,
        settings: Settings,
        on_result: Optional[Callable[[ProcessResult], None]] = None,
        observer_factory: Callable[[], Observer] = Observer,
    ) -> None:
        self._processor = processor
        self._file_system = file_system
        self._settings = settings
        self._on_result = on_result
        self._observer_factory = observer_factory
        self._observers: list = []
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._timers: dict[Path, asyncio.TimerHandle] = {}
        self._processing: set[Path] = set()
        self._tasks: set[asyncio.Task] = set()

    @property
    def watched_count(self) -> int:
        """Nombre de bibliotheques effectivement surveillees."""
        return len(self._observers)

    def start(self, loop: asyncio.AbstractEventLoop) -> None:
        """
        Demarre un observer watchdog par bibliotheque existante.

        Args:
            loop: Boucle asyncio qui executera les traitements
        """
        self._loop = loop
        for folder in self._settings.media_folders:
            if not self._file_system.exists(folder):
                logger.warning("Dossier media introuvable, non surveille", folder=str(folder))
                continue

            observer = self._observer_factory()
            handler = MediaFolderHandler(folder, self.notify)
            observer.schedule(handler, str(folder), recursive=True)
            observer.start()
            self._observers.append(observer)
            logger.info("Surveillance demarree", folder=str(folder))

    def notify(self, folder: Path) -> None:
        """Signale une activite dans un dossier media (appelable depuis tout thread)."""
        if self._loop is not None:
            self._loop.call_soon_threadsafe(self._schedule, folder)

    def _schedule(self, folder: Path) -> None:
        """Repousse le traitement du dossier a la fin de la periode de calme."""
        if folder in self._processing:
            return
        existing = self._timers.pop(folder, None)
        if existing is not None:
            existing.cancel()
        self._timers[folder] = self._loop.call_later(
            self._settings.watch_debounce_seconds, self._fire, folder
        )

    def _fire(self, folder: Path) -> None:
        self._timers.pop(folder, None)
        task = self._loop.create_task(self.process_folder(folder))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def process_folder(self, folder: Path) -> Optional[ProcessResult]:
        """
        Traite un dossier media detecte, sauf s'il a deja un poster.

        Returns:
            ProcessResult, ou None si le dossier a ete ignore
        """
        if folder in self._processing:
            return None
        if self._file_system.exists(folder / self._settings.poster_filename):
            logger.info("Poster deja present", folder=folder.name)
            return None

        self._processing.add(folder)
        try:
            logger.info("Nouveau media detecte", folder=folder.name)
            result = await self._processor.process_single(folder)
        finally:
            self._processing.discard(folder)

        if result.success:
            logger.info("Poster cree", folder=folder.name)
        else:
            logger.warning("Echec du poster", folder=folder.name, message=result.message)
        if self._on_result:
            self._on_result(result)
        return result

    def stop(self) -> None:
        """Arrete les observers et annule les traitements en attente."""
        for observer in self._observers:
            observer.stop()
        for observer in self._observers:
            observer.join()
        self._observers = []

        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()
        logger.info("Surveillance arretee")

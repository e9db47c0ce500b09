"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases:
- ScannerService: turns library folders into MediaItem entities
- badge_layout: the badge geometry engine (badges -> Overlay)
- PosterCompositor: overlays rating badges on a base poster image
- PosterProcessor: end-to-end pipeline (catalog, ratings, compose, write)

Services depend on ports (interfaces) from core/; concrete adapters are
injected by the container.
"""

from src.services.compositor import ComposeOptions, PosterCompositor
from src.services.processor import PosterProcessor, PreviewResult, ProcessResult
from src.services.scanner import ScannerService

__all__ = [
    "ComposeOptions",
    "PosterCompositor",
    "PosterProcessor",
    "PreviewResult",
    "ProcessResult",
    "ScannerService",
]

"""
Dépendances partagées de l'application web.

Fournit l'accès au Container DI et à l'état du traitement par lot en cours,
tous deux stockés dans app.state par le lifespan.
"""

from dataclasses import dataclass, field

from fastapi import HTTPException, Request

from ..services.processor import ProcessResult


@dataclass
class ProcessingState:
    """État du traitement lancé depuis l'API (un seul à la fois)."""

    processing: bool = False
    current: int = 0
    total: int = 0
    results: list[ProcessResult] = field(default_factory=list)

    def start(self) -> None:
        """Réinitialise l'état pour un nouveau traitement."""
        self.processing = True
        self.current = 0
        self.total = 0
        self.results = []

    def progress(self) -> dict:
        return {"current": self.current, "total": self.total}


def get_container(request: Request):
    """Container DI de l'application."""
    return request.app.state.container


def get_state(request: Request) -> ProcessingState:
    """État du traitement par lot."""
    return request.app.state.processing


def require_configured(request: Request):
    """Container DI, ou 400 si les clés API / dossiers ne sont pas configurés."""
    container = get_container(request)
    settings = container.config()
    if not settings.is_configured:
        missing = ", ".join(settings.missing_settings())
        raise HTTPException(status_code=400, detail=f"Not configured: {missing}")
    return container

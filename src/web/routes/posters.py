"""
Routes de scan, de génération des posters et d'aperçu.
"""

from typing import Optional

import httpx
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel

from ...core.value_objects.parsed_info import MediaType
from ...services.processor import error_message
from ..deps import ProcessingState, get_state, require_configured

router = APIRouter(prefix="/api")


class PreviewRequest(BaseModel):
    title: str
    year: Optional[int] = None
    type: MediaType = MediaType.MOVIE


async def _run_processing(processor, state: ProcessingState, dry_run: bool, overwrite_all: bool) -> None:
    """Tâche de fond : traite toutes les bibliothèques en mettant à jour l'état."""

    def on_progress(result, current: int, total: int) -> None:
        state.current = current
        state.total = total

    try:
        state.results = await processor.process_all(
            on_progress=on_progress, dry_run=dry_run, overwrite_all=overwrite_all
        )
        logger.info("Traitement web termine", results=len(state.results))
    finally:
        state.processing = False


@router.get("/scan")
def scan(container=Depends(require_configured)) -> dict:
    """Liste les dossiers media avec un résumé."""
    items = container.poster_processor().scan()
    return {
        "items": [item.to_dict() for item in items],
        "summary": {
            "total": len(items),
            "movies": sum(1 for i in items if i.media_type == MediaType.MOVIE),
            "series": sum(1 for i in items if i.media_type == MediaType.SERIES),
            "has_poster": sum(1 for i in items if i.has_poster),
            "needs_processing": sum(1 for i in items if not i.has_poster),
        },
    }


@router.post("/process")
async def process(
    background_tasks: BackgroundTasks,
    dry_run: bool = False,
    overwrite_all: bool = False,
    container=Depends(require_configured),
    state: ProcessingState = Depends(get_state),
) -> dict:
    """Lance le traitement de toutes les bibliothèques en tâche de fond."""
    if state.processing:
        raise HTTPException(status_code=409, detail="Already processing")

    state.start()
    background_tasks.add_task(
        _run_processing, container.poster_processor(), state, dry_run, overwrite_all
    )
    return {"message": "Processing started"}


@router.get("/results")
async def results(state: ProcessingState = Depends(get_state)) -> dict:
    """Résultats du dernier traitement (ou du traitement en cours)."""
    return {
        "processing": state.processing,
        "progress": state.progress(),
        "results": [r.to_dict() for r in state.results],
        "summary": {
            "total": len(state.results),
            "success": sum(1 for r in state.results if r.success),
            "failed": sum(1 for r in state.results if not r.success),
        },
    }


@router.post("/preview")
async def preview(payload: PreviewRequest, container=Depends(require_configured)) -> dict:
    """Compose un aperçu du poster noté d'un titre (image en data URL)."""
    processor = container.poster_processor()
    try:
        result = await processor.preview(payload.title, payload.year, payload.type)
    except httpx.HTTPError as e:
        logger.warning("Erreur API pendant l'apercu", title=payload.title, error=error_message(e))
        raise HTTPException(status_code=502, detail=f"Upstream API error: {error_message(e)}") from e

    if result is None:
        raise HTTPException(status_code=404, detail=f"Not found: {payload.title}")
    return result.to_dict()

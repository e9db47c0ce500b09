"""
Routes de configuration et de statut.

Affiche et permet de modifier les paramètres de l'application (clés API,
dossiers media, style des badges) via le fichier .env.
"""

from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ...config import _ENV_FILE
from ...core.value_objects.overlay import BadgeSource, OverlayStyle
from ..deps import ProcessingState, get_container, get_state

router = APIRouter(prefix="/api")

_ENV_PREFIX = "POSTERFORGE_"


class ConfigUpdate(BaseModel):
    """Champs modifiables ; un champ absent n'est pas modifié."""

    tmdb_api_key: Optional[str] = None
    omdb_api_key: Optional[str] = None
    media_folders: Optional[Union[list[str], str]] = None
    poster_style: Optional[str] = None
    ratings: Optional[Union[list[str], str]] = None
    overwrite: Optional[bool] = None


def _mask_secret(value: str | None) -> str:
    """Masque une clé API en ne montrant que les 4 derniers caractères."""
    if not value:
        return ""
    if len(value) <= 4:
        return "••••"
    return "••••" + value[-4:]


def _as_csv(value: Union[list[str], str]) -> str:
    """Liste ou chaîne "a, b" -> "a,b"."""
    parts = value.split(",") if isinstance(value, str) else value
    return ",".join(p.strip() for p in parts if p and p.strip())


def _read_env_lines() -> list[str]:
    """Lit le fichier .env et retourne les lignes."""
    if _ENV_FILE.exists():
        return _ENV_FILE.read_text(encoding="utf-8").splitlines()
    return []


def _write_env(updates: dict[str, str]) -> None:
    """Met à jour le fichier .env en préservant commentaires et clés inconnues."""
    new_lines = []
    updated_keys = set()

    for line in _read_env_lines():
        stripped = line.strip()
        key = stripped.split("=", 1)[0].strip() if "=" in stripped else ""
        if not stripped.startswith("#") and key.upper().startswith(_ENV_PREFIX):
            setting = key[len(_ENV_PREFIX):].lower()
            if setting in updates:
                new_lines.append(f"{key}={updates[setting]}")
                updated_keys.add(setting)
                continue
        new_lines.append(line)

    # Ajouter les clés manquantes à la fin
    for setting, value in updates.items():
        if setting not in updated_keys:
            new_lines.append(f"{_ENV_PREFIX}{setting.upper()}={value}")

    _ENV_FILE.write_text("\n".join(new_lines) + "\n", encoding="utf-8")


def _build_updates(payload: ConfigUpdate) -> dict[str, str]:
    """Convertit la requête en valeurs .env, avec validation du style et des sources."""
    updates: dict[str, str] = {}

    # Une clé masquée renvoyée telle quelle n'a pas été modifiée
    for key in ("tmdb_api_key", "omdb_api_key"):
        value = getattr(payload, key)
        if value and value.strip() and not value.startswith("••••"):
            updates[key] = value.strip()

    if payload.media_folders is not None:
        updates["media_folders"] = _as_csv(payload.media_folders)

    if payload.poster_style:
        try:
            updates["poster_style"] = OverlayStyle(payload.poster_style).value
        except ValueError:
            raise HTTPException(status_code=422, detail=f"Unknown poster style: {payload.poster_style}")

    if payload.ratings is not None:
        ratings = _as_csv(payload.ratings)
        unknown = [r for r in ratings.split(",") if r and BadgeSource.parse(r) is None]
        if unknown:
            raise HTTPException(status_code=422, detail=f"Unknown rating sources: {', '.join(unknown)}")
        updates["ratings"] = ratings.lower()

    if payload.overwrite is not None:
        updates["overwrite"] = "true" if payload.overwrite else "false"

    return updates


@router.get("/config")
async def get_config(container=Depends(get_container)) -> dict:
    """Configuration courante, clés API masquées."""
    settings = container.config()
    return {
        "configured": settings.is_configured,
        "tmdb_api_key": _mask_secret(settings.tmdb_api_key),
        "omdb_api_key": _mask_secret(settings.omdb_api_key),
        "media_folders": [str(f) for f in settings.media_folders],
        "poster_style": settings.poster_style.value,
        "ratings": list(settings.ratings),
        "overwrite": settings.overwrite,
    }


@router.post("/config")
async def save_config(payload: ConfigUpdate, container=Depends(get_container)) -> dict:
    """Sauvegarde les paramètres modifiés dans le fichier .env et recharge le container."""
    updates = _build_updates(payload)
    if updates:
        _write_env(updates)
        # Les clients API gardent l'ancienne clé : fermer puis recréer
        await container.tmdb_client().close()
        await container.omdb_client().close()
        container.reset_singletons()

    return {"success": True, "configured": container.config().is_configured}


@router.get("/status")
async def get_status(
    container=Depends(get_container),
    state: ProcessingState = Depends(get_state),
) -> dict:
    """État de la configuration et du traitement en cours."""
    return {
        "configured": container.config().is_configured,
        "processing": state.processing,
        "progress": state.progress(),
        "last_results": len(state.results),
    }

"""
Chargement des polices pour le rendu des badges.

Les polices sont couteuses a charger depuis le disque : elles sont mises en
cache par taille. Les polices systeme DejaVu sont essayees en premier ;
a defaut, la police integree de Pillow est utilisee a la taille demandee.
"""

from pathlib import Path
from typing import Union

from loguru import logger
from PIL import ImageFont

FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

FONT_CANDIDATES = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
)

_font_cache: dict[int, FontType] = {}


def get_font(size: int) -> FontType:
    """
    Retourne une police en gras a la taille demandee (en cache).

    Args:
        size: Taille en pixels

    Returns:
        Police TrueType si une police systeme est trouvee, sinon la police
        integree de Pillow
    """
    if size in _font_cache:
        return _font_cache[size]

    font = None
    for candidate in FONT_CANDIDATES:
        if not Path(candidate).exists():
            continue
        try:
            font = ImageFont.truetype(candidate, size)
            break
        except OSError as e:
            logger.debug("Police illisible", path=candidate, error=str(e))

    if font is None:
        font = ImageFont.load_default(size)

    _font_cache[size] = font
    return font


def clear_font_cache() -> None:
    """Vide le cache des polices (utile pour les tests)."""
    _font_cache.clear()

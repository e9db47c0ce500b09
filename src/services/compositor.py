"""
Service de composition des posters notes.

Superpose les badges de notes sur l'image de base d'un poster :
1. Lecture des dimensions de l'image (echec -> PosterDecodeError)
2. Construction des badges selon l'ordre de preference des sources
3. Calcul de l'overlay par le moteur de mise en page
4. Fusion et reencodage JPEG a qualite fixe

Sans badge, l'image de base est retournee telle quelle, octet pour octet :
un titre sans note ne subit pas de cycle de compression inutile.
"""

from dataclasses import dataclass
from io import BytesIO
from typing import Optional

from loguru import logger
from PIL import Image, UnidentifiedImageError

from src.adapters.imaging.overlay_renderer import OverlayRenderer
from src.core.exceptions import PosterDecodeError
from src.core.value_objects.overlay import OverlayStyle
from src.core.value_objects.ratings import RatingSet
from src.services.badge_layout import build_badges, layout
from src.utils.constants import DEFAULT_RATING_SOURCES

JPEG_QUALITY = 90

_DECODE_ERRORS = (UnidentifiedImageError, OSError, ValueError)


@dataclass
class ComposeOptions:
    """
    Options de composition d'un poster.

    Attributs:
        style: Style de mise en page des badges
        preferred_sources: Ordre de preference des sources de notes
        catalog_score: Note native du catalogue (TMDB), affichee si > 0
    """

    style: OverlayStyle = OverlayStyle.BOTTOM_BAR
    preferred_sources: tuple[str, ...] = DEFAULT_RATING_SOURCES
    catalog_score: Optional[float] = None


class PosterCompositor:
    """
    Compose les badges de notes sur un poster encode.

    Sans etat partage : une meme instance peut etre utilisee depuis
    plusieurs taches en parallele.
    """

    def __init__(self, renderer: Optional[OverlayRenderer] = None) -> None:
        self._renderer = renderer or OverlayRenderer()

    def compose(
        self,
        base_image: bytes,
        ratings: Optional[RatingSet],
        options: Optional[ComposeOptions] = None,
    ) -> bytes:
        """
        Produit le poster note.

        Args:
            base_image: Octets encodes du poster de base
            ratings: Notes normalisees du titre (None si aucune)
            options: Style, ordre des sources et note catalogue

        Returns:
            Octets JPEG du poster note, ou base_image inchange sans badge

        Raises:
            PosterDecodeError: Si l'image de base ne peut pas etre decodee
        """
        options = options or ComposeOptions()

        try:
            poster = Image.open(BytesIO(base_image))
        except _DECODE_ERRORS as e:
            raise PosterDecodeError(len(base_image), str(e)) from e
        width, height = poster.size

        badges = build_badges(ratings, options.catalog_score, options.preferred_sources)
        overlay = layout(badges, width, height, options.style)
        if overlay.is_empty:
            logger.debug("Aucune note a afficher, poster inchange", width=width, height=height)
            return base_image

        try:
            poster.load()
            composed = self._renderer.apply(poster, overlay)
        except _DECODE_ERRORS as e:
            raise PosterDecodeError(len(base_image), str(e)) from e

        output = BytesIO()
        composed.convert("RGB").save(output, format="JPEG", quality=JPEG_QUALITY)
        logger.debug(
            "Poster compose",
            style=OverlayStyle(options.style).value,
            badges=len(badges),
            width=width,
            height=height,
        )
        return output.getvalue()

"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- MediaType : Type de media (MOVIE, SERIES)
- ParsedName : Informations extraites du parsing d'un nom de dossier
- RatingScore, RatingSet : Notes normalisees d'un titre
- OverlayStyle, BadgeSource, ScoreBand, Badge : Badges de notes
- Overlay et primitives de dessin : Sortie du moteur de mise en page
"""

from src.core.value_objects.overlay import (
    Badge,
    BadgeSlot,
    BadgeSource,
    DrawInstruction,
    EllipseShape,
    Overlay,
    OverlayAnchor,
    OverlayStyle,
    PolygonShape,
    RectangleShape,
    RGBColor,
    ScoreBand,
    TextShape,
    hex_to_rgb,
    with_alpha,
)
from src.core.value_objects.parsed_info import (
    MediaType,
    ParsedName,
)
from src.core.value_objects.ratings import (
    RatingScore,
    RatingSet,
    normalize_score,
)

__all__ = [
    "MediaType",
    "ParsedName",
    "RatingScore",
    "RatingSet",
    "normalize_score",
    "Badge",
    "BadgeSlot",
    "BadgeSource",
    "DrawInstruction",
    "EllipseShape",
    "Overlay",
    "OverlayAnchor",
    "OverlayStyle",
    "PolygonShape",
    "RectangleShape",
    "RGBColor",
    "ScoreBand",
    "TextShape",
    "hex_to_rgb",
    "with_alpha",
]

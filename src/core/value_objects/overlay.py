"""
Objets valeur pour les badges de notes et la couche d'overlay.

Contient les enumerations fermees (style de mise en page, source de note),
le Badge (unite de note a dessiner) et l'Overlay produit par le moteur de
mise en page : une liste plate d'instructions de dessin (formes et textes)
avec les dimensions et le point d'ancrage de la couche.

Toutes les coordonnees des instructions sont relatives a l'origine de
l'overlay (left, top), pas a celle du poster.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

RGBColor = tuple[int, int, int]
RGBAColor = tuple[int, int, int, int]
Box = tuple[float, float, float, float]
Point = tuple[float, float]


def hex_to_rgb(value: str) -> RGBColor:
    """Convertit une couleur hexadecimale "#RRGGBB" en tuple RGB."""
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def with_alpha(color: RGBColor, alpha: int = 255) -> RGBAColor:
    """Ajoute une composante alpha (0-255) a une couleur RGB."""
    return color[0], color[1], color[2], alpha


class OverlayStyle(str, Enum):
    """Style de mise en page des badges sur le poster.

    Valeurs:
        CORNER: Badges empiles verticalement dans le coin superieur gauche
        BOTTOM_BAR: Bandeau semi-opaque en bas avec badges centres
        MINIMAL: Petites pastilles colorees alignees en haut
    """

    CORNER = "badges"
    BOTTOM_BAR = "bar"
    MINIMAL = "minimal"

    @classmethod
    def _missing_(cls, value: object) -> Optional["OverlayStyle"]:
        """Accepte les alias et la casse libre ("corner", "BAR", "bottom_bar")."""
        if not isinstance(value, str):
            return None
        aliases = {
            "corner": cls.CORNER,
            "bottombar": cls.BOTTOM_BAR,
            "bottom_bar": cls.BOTTOM_BAR,
        }
        key = value.strip().lower()
        if key in aliases:
            return aliases[key]
        for member in cls:
            if member.value == key:
                return member
        return None


class BadgeSource(str, Enum):
    """Source d'une note affichee sur un badge.

    Valeurs:
        IMDB: Note IMDb (source principale)
        ROTTEN_TOMATOES: Score Rotten Tomatoes (source secondaire)
        METACRITIC: Metascore (source tertiaire, colore par seuil)
        TMDB: Note native du catalogue TMDB
    """

    IMDB = "imdb"
    ROTTEN_TOMATOES = "rt"
    METACRITIC = "metacritic"
    TMDB = "tmdb"

    @classmethod
    def parse(cls, value: str) -> Optional["BadgeSource"]:
        """Retourne la source correspondant au nom, ou None si inconnue."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class ScoreBand(Enum):
    """Bande de qualite d'un Metascore."""

    GOOD = "good"
    MIXED = "mixed"
    POOR = "poor"


@dataclass(frozen=True)
class Badge:
    """
    Unite de note a dessiner sur le poster.

    Attributs:
        source: Source de la note (determine la forme dessinee)
        display_value: Texte affiche (ex: "8.5/10", "87%", "74", "7.3")
        color: Couleur principale du badge
    """

    source: BadgeSource
    display_value: str
    color: RGBColor

    @property
    def short_value(self) -> str:
        """Valeur courte pour les pastilles (sans le suffixe "/10")."""
        if self.display_value.endswith("/10"):
            return self.display_value[:-3]
        return self.display_value


class OverlayAnchor(Enum):
    """Bord du poster auquel l'overlay est ancre."""

    TOP_LEFT = "top_left"
    BOTTOM = "bottom"


# ---------------------------------------------------------------------------
# Primitives de dessin
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RectangleShape:
    """Rectangle plein, a coins arrondis si radius > 0."""

    box: Box
    fill: RGBAColor
    radius: float = 0


@dataclass(frozen=True)
class EllipseShape:
    """Ellipse pleine inscrite dans box."""

    box: Box
    fill: RGBAColor


@dataclass(frozen=True)
class PolygonShape:
    """Polygone plein."""

    points: tuple[Point, ...]
    fill: RGBAColor


@dataclass(frozen=True)
class TextShape:
    """
    Texte positionne par ancre Pillow.

    Attributs:
        position: Point d'ancrage (x, y)
        text: Texte a dessiner
        size: Taille de police en pixels
        fill: Couleur du texte
        anchor: Ancre Pillow ("ls" = gauche/ligne de base, "ms" = centre/ligne de base)
    """

    position: Point
    text: str
    size: int
    fill: RGBAColor
    anchor: str = "ls"


DrawInstruction = Union[RectangleShape, EllipseShape, PolygonShape, TextShape]


@dataclass(frozen=True)
class BadgeSlot:
    """Emplacement calcule d'un badge dans l'overlay (pour les tests et le debug)."""

    source: BadgeSource
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Bord droit du badge."""
        return self.x + self.width


@dataclass(frozen=True)
class Overlay:
    """
    Couche de dessin produite par le moteur de mise en page.

    Attributs:
        width: Largeur de la couche en pixels
        height: Hauteur de la couche en pixels
        left: Position horizontale de l'ancrage sur le poster
        top: Position verticale de l'ancrage sur le poster
        anchor: Bord d'ancrage
        instructions: Instructions de dessin ordonnees (arriere-plan en premier)
        slots: Emplacements des badges, dans l'ordre des badges
    """

    width: float
    height: float
    left: float = 0
    top: float = 0
    anchor: OverlayAnchor = OverlayAnchor.TOP_LEFT
    instructions: tuple[DrawInstruction, ...] = ()
    slots: tuple[BadgeSlot, ...] = ()

    @classmethod
    def empty(cls) -> "Overlay":
        """Overlay sans contribution visuelle (aucun badge)."""
        return cls(width=0, height=0)

    @property
    def is_empty(self) -> bool:
        """Vrai si l'overlay n'a aucune contribution visuelle."""
        return not self.instructions or self.width <= 0 or self.height <= 0

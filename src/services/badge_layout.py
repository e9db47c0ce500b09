"""
Moteur de mise en page des badges de notes.

Transforme une liste de Badge en Overlay : une liste plate d'instructions
de dessin (rectangles, ellipses, polygones, textes) accompagnee des
dimensions de la couche et de son point d'ancrage sur le poster.

Trois styles sont supportes :
- CORNER : badges empiles dans le coin superieur gauche
- BOTTOM_BAR : bandeau semi-opaque ancre en bas, badges centres
- MINIMAL : pastilles colorees alignees en haut a gauche

La forme d'un badge depend de sa source (IMDb, RT, Metacritic, TMDB) et
du style. Les deux dimensions sont resolues par des tables de dispatch
plutot que par heritage.

Ce module ne fait aucune entree/sortie : il peut etre appele librement
depuis plusieurs threads.
"""

import re
from typing import Callable, Iterable, Optional

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
from src.core.value_objects.ratings import RatingSet
from src.utils.constants import (
    BADGE_COLORS,
    MAX_BADGES,
    METACRITIC_BAND_COLORS,
    METACRITIC_GOOD_THRESHOLD,
    METACRITIC_MIXED_THRESHOLD,
)

# Couleurs communes
WHITE = (255, 255, 255, 255)
DARK_TEXT = (0, 0, 0, 230)
BACKDROP = (0, 0, 0, 217)  # noir a 85% d'opacite

# Bandeau (BOTTOM_BAR)
BAR_HEIGHT = 32
BAR_GAP = 20
CHAR_WIDTH = 9  # largeur estimee d'un caractere a 16px
IMDB_BAR_BASE_WIDTH = 52
ICON_BAR_BASE_WIDTH = 34
METACRITIC_BAR_MIN_WIDTH = 28
METACRITIC_BAR_PADDING = 12

# Coin (CORNER)
CORNER_INSET = 10
CORNER_ROW_STEP = 52
CORNER_BADGE_WIDTH = 95
CORNER_BADGE_HEIGHT = 44
CORNER_LABELS = {
    BadgeSource.IMDB: "IMDb",
    BadgeSource.ROTTEN_TOMATOES: "RT",
    BadgeSource.METACRITIC: "MC",
    BadgeSource.TMDB: "TMDB",
}

# Pastilles (MINIMAL)
CHIP_INSET = 8
CHIP_STEP = 38
CHIP_WIDTH = 34
CHIP_HEIGHT = 26

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Couleurs et construction des badges
# ---------------------------------------------------------------------------


def metacritic_band(display_value: str) -> ScoreBand:
    """
    Classe un Metascore dans sa bande de qualite.

    Le score est l'entier en tete de la chaine ; une chaine non numerique
    vaut 0 et tombe donc dans la bande POOR.

    Examples:
        "75" -> GOOD, "50" -> MIXED, "20" -> POOR, "abc" -> POOR
    """
    match = _LEADING_INT.match(display_value)
    score = int(match.group(1)) if match else 0
    if score >= METACRITIC_GOOD_THRESHOLD:
        return ScoreBand.GOOD
    if score >= METACRITIC_MIXED_THRESHOLD:
        return ScoreBand.MIXED
    return ScoreBand.POOR


def band_color(band: ScoreBand) -> RGBColor:
    """Couleur associee a une bande Metacritic."""
    return hex_to_rgb(METACRITIC_BAND_COLORS[band.value])


def badge_fill(badge: Badge) -> RGBColor:
    """Couleur effective d'un badge (les Metascores sont colores par seuil)."""
    if badge.source is BadgeSource.METACRITIC:
        return band_color(metacritic_band(badge.display_value))
    return badge.color


def build_badges(
    ratings: Optional[RatingSet],
    catalog_score: Optional[float] = None,
    preferred_sources: Iterable[str] = (),
) -> list[Badge]:
    """
    Construit la liste ordonnee des badges a afficher.

    Parcourt les sources dans l'ordre de preference et ajoute un badge
    seulement si la source a une valeur ; s'arrete a MAX_BADGES.

    Args:
        ratings: Notes normalisees (None si aucune)
        catalog_score: Note native du catalogue, affichee seulement si > 0
        preferred_sources: Noms des sources ("imdb", "rt", "metacritic", "tmdb")

    Returns:
        Liste de 0 a 3 badges. Les noms de source inconnus sont ignores.
    """
    ratings = ratings or RatingSet()
    badges: list[Badge] = []

    for name in preferred_sources:
        if len(badges) >= MAX_BADGES:
            break
        source = BadgeSource.parse(name)
        if source is None:
            continue

        value = _display_value(source, ratings, catalog_score)
        if value is None:
            continue
        badges.append(Badge(source, value, hex_to_rgb(BADGE_COLORS[source.value])))

    return badges


def _display_value(
    source: BadgeSource, ratings: RatingSet, catalog_score: Optional[float]
) -> Optional[str]:
    """Texte affiche pour une source, ou None si la source n'a pas de donnees."""
    if source is BadgeSource.IMDB:
        return f"{ratings.imdb.value}/10" if ratings.imdb else None
    if source is BadgeSource.ROTTEN_TOMATOES:
        return f"{ratings.rotten_tomatoes}%" if ratings.rotten_tomatoes else None
    if source is BadgeSource.METACRITIC:
        return ratings.metacritic or None
    if catalog_score and catalog_score > 0:
        return f"{catalog_score:.1f}"
    return None


# ---------------------------------------------------------------------------
# Style BOTTOM_BAR
# ---------------------------------------------------------------------------


def bar_badge_width(badge: Badge) -> float:
    """
    Largeur estimee d'un badge dans le bandeau.

    Heuristique : largeur fixe de l'icone + nombre de caracteres x CHAR_WIDTH.
    Utilisee a la fois pour le calcul de la largeur totale et le placement.
    """
    text_width = len(badge.display_value) * CHAR_WIDTH
    if badge.source is BadgeSource.METACRITIC:
        return max(METACRITIC_BAR_MIN_WIDTH, METACRITIC_BAR_PADDING + text_width)
    if badge.source is BadgeSource.IMDB:
        return IMDB_BAR_BASE_WIDTH + text_width
    return ICON_BAR_BASE_WIDTH + text_width


def _bar_imdb(badge: Badge, x: float) -> list[DrawInstruction]:
    return [
        RectangleShape((x, 6, x + 42, 26), with_alpha(badge_fill(badge)), radius=3),
        TextShape((x + 21, 21), "IMDb", 13, DARK_TEXT, anchor="ms"),
        TextShape((x + IMDB_BAR_BASE_WIDTH, 22), badge.display_value, 16, WHITE),
    ]


def _bar_rotten_tomatoes(badge: Badge, x: float) -> list[DrawInstruction]:
    # Tomate stylisee : corps, reflet et deux feuilles, sans texte
    return [
        EllipseShape((x + 1.7, 8.25, x + 22.1, 26.95), with_alpha(badge_fill(badge))),
        EllipseShape((x + 5.1, 12.5, x + 11.9, 17.6), (255, 99, 71, 153)),
        PolygonShape(((x + 11.9, 8.25), (x + 6.8, 6.55), (x + 8.5, 9.1)), (76, 175, 80, 255)),
        PolygonShape(((x + 11.9, 8.25), (x + 17.0, 6.55), (x + 15.3, 9.1)), (56, 142, 60, 255)),
        TextShape((x + ICON_BAR_BASE_WIDTH, 22), badge.display_value, 16, WHITE),
    ]


def _bar_metacritic(badge: Badge, x: float) -> list[DrawInstruction]:
    # Le score est dessine dans la boite coloree par seuil
    width = bar_badge_width(badge)
    return [
        RectangleShape((x, 5, x + width, 27), with_alpha(badge_fill(badge)), radius=3),
        TextShape((x + width / 2, 21), badge.display_value, 15, DARK_TEXT, anchor="ms"),
    ]


def _bar_tmdb(badge: Badge, x: float) -> list[DrawInstruction]:
    return [
        EllipseShape((x + 2, 4, x + 26, 28), with_alpha(badge_fill(badge))),
        TextShape((x + 14, 19), "TMDB", 8, WHITE, anchor="ms"),
        TextShape((x + ICON_BAR_BASE_WIDTH, 22), badge.display_value, 16, WHITE),
    ]


_BAR_DRAWERS: dict[BadgeSource, Callable[[Badge, float], list[DrawInstruction]]] = {
    BadgeSource.IMDB: _bar_imdb,
    BadgeSource.ROTTEN_TOMATOES: _bar_rotten_tomatoes,
    BadgeSource.METACRITIC: _bar_metacritic,
    BadgeSource.TMDB: _bar_tmdb,
}


def _layout_bottom_bar(badges: list[Badge], width: int, height: int) -> Overlay:
    # Premiere passe : largeurs, deuxieme passe : placement
    widths = [bar_badge_width(badge) for badge in badges]
    total = sum(widths) + BAR_GAP * (len(badges) - 1)

    instructions: list[DrawInstruction] = [
        RectangleShape((0, 0, width, BAR_HEIGHT), BACKDROP),
    ]
    slots = []
    x = (width - total) / 2
    for badge, badge_width in zip(badges, widths):
        instructions.extend(_BAR_DRAWERS[badge.source](badge, x))
        slots.append(BadgeSlot(badge.source, x, 0, badge_width, BAR_HEIGHT))
        x += badge_width + BAR_GAP

    return Overlay(
        width=width,
        height=BAR_HEIGHT,
        left=0,
        top=height - BAR_HEIGHT,
        anchor=OverlayAnchor.BOTTOM,
        instructions=tuple(instructions),
        slots=tuple(slots),
    )


# ---------------------------------------------------------------------------
# Style CORNER
# ---------------------------------------------------------------------------


def _corner_badge(badge: Badge, y: float) -> list[DrawInstruction]:
    x = CORNER_INSET
    return [
        RectangleShape((x, y, x + CORNER_BADGE_WIDTH, y + CORNER_BADGE_HEIGHT), BACKDROP, radius=8),
        RectangleShape((x + 3, y + 3, x + 41, y + 41), with_alpha(badge_fill(badge)), radius=6),
        TextShape((x + 22, y + 28), CORNER_LABELS[badge.source], 11, DARK_TEXT, anchor="ms"),
        TextShape((x + 68, y + 30), badge.display_value, 18, WHITE, anchor="ms"),
    ]


def _layout_corner(badges: list[Badge], width: int, height: int) -> Overlay:
    instructions: list[DrawInstruction] = []
    slots = []
    for index, badge in enumerate(badges):
        y = CORNER_INSET + index * CORNER_ROW_STEP
        instructions.extend(_corner_badge(badge, y))
        slots.append(
            BadgeSlot(badge.source, CORNER_INSET, y, CORNER_BADGE_WIDTH, CORNER_BADGE_HEIGHT)
        )

    # Boite serree : la hauteur ne depend que du nombre de badges
    return Overlay(
        width=CORNER_INSET + CORNER_BADGE_WIDTH,
        height=slots[-1].y + CORNER_BADGE_HEIGHT,
        instructions=tuple(instructions),
        slots=tuple(slots),
    )


# ---------------------------------------------------------------------------
# Style MINIMAL
# ---------------------------------------------------------------------------


def _layout_minimal(badges: list[Badge], width: int, height: int) -> Overlay:
    instructions: list[DrawInstruction] = []
    slots = []
    for index, badge in enumerate(badges):
        x = CHIP_INSET + index * CHIP_STEP
        y = CHIP_INSET
        instructions.append(
            RectangleShape((x, y, x + CHIP_WIDTH, y + CHIP_HEIGHT), with_alpha(badge_fill(badge)), radius=5)
        )
        instructions.append(
            TextShape((x + CHIP_WIDTH / 2, y + 18), badge.short_value, 13, DARK_TEXT, anchor="ms")
        )
        slots.append(BadgeSlot(badge.source, x, y, CHIP_WIDTH, CHIP_HEIGHT))

    return Overlay(
        width=slots[-1].right,
        height=CHIP_INSET + CHIP_HEIGHT,
        instructions=tuple(instructions),
        slots=tuple(slots),
    )


_STYLE_LAYOUTS: dict[OverlayStyle, Callable[[list[Badge], int, int], Overlay]] = {
    OverlayStyle.CORNER: _layout_corner,
    OverlayStyle.BOTTOM_BAR: _layout_bottom_bar,
    OverlayStyle.MINIMAL: _layout_minimal,
}


def layout(
    badges: list[Badge],
    canvas_width: int,
    canvas_height: int,
    style: OverlayStyle,
) -> Overlay:
    """
    Calcule l'overlay de badges pour un poster.

    Args:
        badges: Badges ordonnes (au plus MAX_BADGES, le surplus est ignore)
        canvas_width: Largeur du poster en pixels
        canvas_height: Hauteur du poster en pixels
        style: Style de mise en page

    Returns:
        Overlay a composer sur le poster, ou Overlay.empty() sans badge
    """
    badges = list(badges[:MAX_BADGES])
    if not badges:
        return Overlay.empty()
    return _STYLE_LAYOUTS[OverlayStyle(style)](badges, canvas_width, canvas_height)

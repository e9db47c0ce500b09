"""
Rendu Pillow d'un Overlay calcule par le moteur de mise en page.

Chaque instruction de dessin est traduite en appel ImageDraw sur une couche
RGBA transparente de la taille du poster, decalee a la position d'ancrage
de l'overlay. La couche est ensuite fusionnee en un seul alpha composite.
"""

from typing import Callable

from PIL import Image, ImageDraw

from src.adapters.imaging.fonts import get_font
from src.core.value_objects.overlay import (
    DrawInstruction,
    EllipseShape,
    Overlay,
    PolygonShape,
    RectangleShape,
    TextShape,
)


def _offset_box(box, dx: float, dy: float):
    left, top, right, bottom = box
    return (left + dx, top + dy, right + dx, bottom + dy)


def _draw_rectangle(draw: ImageDraw.ImageDraw, shape: RectangleShape, dx: float, dy: float) -> None:
    box = _offset_box(shape.box, dx, dy)
    if shape.radius > 0:
        draw.rounded_rectangle(box, radius=shape.radius, fill=shape.fill)
    else:
        draw.rectangle(box, fill=shape.fill)


def _draw_ellipse(draw: ImageDraw.ImageDraw, shape: EllipseShape, dx: float, dy: float) -> None:
    draw.ellipse(_offset_box(shape.box, dx, dy), fill=shape.fill)


def _draw_polygon(draw: ImageDraw.ImageDraw, shape: PolygonShape, dx: float, dy: float) -> None:
    draw.polygon([(x + dx, y + dy) for x, y in shape.points], fill=shape.fill)


def _draw_text(draw: ImageDraw.ImageDraw, shape: TextShape, dx: float, dy: float) -> None:
    x, y = shape.position
    draw.text(
        (x + dx, y + dy),
        shape.text,
        fill=shape.fill,
        font=get_font(shape.size),
        anchor=shape.anchor,
    )


_DRAWERS: dict[type, Callable] = {
    RectangleShape: _draw_rectangle,
    EllipseShape: _draw_ellipse,
    PolygonShape: _draw_polygon,
    TextShape: _draw_text,
}


class OverlayRenderer:
    """Traduit un Overlay en couche RGBA et la fusionne sur un poster."""

    def render_layer(self, overlay: Overlay, size: tuple[int, int]) -> Image.Image:
        """
        Dessine l'overlay sur une couche transparente de la taille du poster.

        Args:
            overlay: Overlay a dessiner (coordonnees relatives a son ancrage)
            size: Dimensions (largeur, hauteur) du poster

        Returns:
            Image RGBA de la taille du poster
        """
        layer = Image.new("RGBA", size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        for instruction in overlay.instructions:
            self._draw(draw, instruction, overlay.left, overlay.top)
        return layer

    def apply(self, poster: Image.Image, overlay: Overlay) -> Image.Image:
        """
        Fusionne l'overlay sur le poster (un seul alpha composite).

        Returns:
            Nouvelle image RGBA, le poster source n'est pas modifie
        """
        base = poster.convert("RGBA")
        layer = self.render_layer(overlay, base.size)
        return Image.alpha_composite(base, layer)

    @staticmethod
    def _draw(draw: ImageDraw.ImageDraw, instruction: DrawInstruction, dx: float, dy: float) -> None:
        _DRAWERS[type(instruction)](draw, instruction, dx, dy)

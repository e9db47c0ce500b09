"""
Rendu des overlays de notes avec Pillow.

- OverlayRenderer : dessine un Overlay sur une couche RGBA et la fusionne
- get_font : polices en cache par taille
"""

from src.adapters.imaging.fonts import get_font
from src.adapters.imaging.overlay_renderer import OverlayRenderer

__all__ = ["OverlayRenderer", "get_font"]

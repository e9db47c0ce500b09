"""
Tests unitaires pour les objets valeur de l'overlay.

Verifie les enumerations fermees (style, source), le Badge et l'Overlay vide.
"""

import pytest

from src.core.value_objects import (
    Badge,
    BadgeSlot,
    BadgeSource,
    Overlay,
    OverlayStyle,
    RectangleShape,
    hex_to_rgb,
    with_alpha,
)


class TestColors:
    def test_hex_to_rgb(self):
        """Conversion d'une couleur hexadecimale."""
        assert hex_to_rgb("#F5C518") == (245, 197, 24)
        assert hex_to_rgb("66CC33") == (102, 204, 51)

    def test_with_alpha(self):
        """Ajout du canal alpha."""
        assert with_alpha((1, 2, 3)) == (1, 2, 3, 255)
        assert with_alpha((1, 2, 3), 128) == (1, 2, 3, 128)


class TestOverlayStyle:
    """OverlayStyle accepte les valeurs de configuration et leurs alias."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("badges", OverlayStyle.CORNER),
            ("corner", OverlayStyle.CORNER),
            ("bar", OverlayStyle.BOTTOM_BAR),
            ("BAR", OverlayStyle.BOTTOM_BAR),
            ("bottom_bar", OverlayStyle.BOTTOM_BAR),
            ("minimal", OverlayStyle.MINIMAL),
            (" Minimal ", OverlayStyle.MINIMAL),
        ],
    )
    def test_parse(self, value, expected):
        """Les valeurs et alias sont reconnus."""
        assert OverlayStyle(value) is expected

    def test_unknown_raises(self):
        """Un style inconnu leve ValueError."""
        with pytest.raises(ValueError):
            OverlayStyle("fancy")


class TestBadgeSource:
    def test_parse_known(self):
        """Les noms de sources sont reconnus sans casse."""
        assert BadgeSource.parse("IMDb") is BadgeSource.IMDB
        assert BadgeSource.parse("rt") is BadgeSource.ROTTEN_TOMATOES
        assert BadgeSource.parse(" metacritic ") is BadgeSource.METACRITIC
        assert BadgeSource.parse("tmdb") is BadgeSource.TMDB

    def test_parse_unknown_returns_none(self):
        """Une source inconnue donne None."""
        assert BadgeSource.parse("letterboxd") is None


class TestBadge:
    def test_short_value_strips_out_of_ten(self):
        """La valeur courte retire /10."""
        badge = Badge(BadgeSource.IMDB, "8.5/10", (245, 197, 24))
        assert badge.short_value == "8.5"

    def test_short_value_keeps_other_values(self):
        """Les autres valeurs sont inchangees."""
        badge = Badge(BadgeSource.ROTTEN_TOMATOES, "87%", (250, 50, 10))
        assert badge.short_value == "87%"


class TestOverlay:
    def test_empty_is_empty(self):
        """Overlay.empty() est vide."""
        overlay = Overlay.empty()

        assert overlay.is_empty
        assert overlay.width == 0
        assert overlay.height == 0
        assert overlay.instructions == ()

    def test_overlay_with_instructions_is_not_empty(self):
        """Un overlay avec instructions n'est pas vide."""
        overlay = Overlay(
            width=100,
            height=20,
            instructions=(RectangleShape((0, 0, 100, 20), (0, 0, 0, 255)),),
        )
        assert not overlay.is_empty

    def test_zero_area_overlay_is_empty(self):
        """Un overlay de surface nulle est vide."""
        overlay = Overlay(
            width=0,
            height=20,
            instructions=(RectangleShape((0, 0, 0, 20), (0, 0, 0, 255)),),
        )
        assert overlay.is_empty

    def test_slot_right(self):
        """right vaut x plus largeur."""
        slot = BadgeSlot(BadgeSource.IMDB, x=10, y=0, width=40, height=32)
        assert slot.right == 50

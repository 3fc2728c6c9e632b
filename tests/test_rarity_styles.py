"""Tests for the rarity style registry."""

import logging

import pytest

from cardgrid.models.card import Rarity
from cardgrid.services.display_width import display_width
from cardgrid.services.rarity_styles import (
    ART_BOX_BORDERS,
    CARD_BORDERS,
    DEFAULT_ELEMENT_SYMBOL,
    get_art_box_style,
    get_card_style,
    get_element_symbol,
    get_rarity_color,
    resolve_rarity,
)


class TestRegistry:
    def test_six_entries_each(self) -> None:
        assert list(CARD_BORDERS) == list(Rarity)
        assert list(ART_BOX_BORDERS) == list(Rarity)

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            CARD_BORDERS[Rarity.COMMON] = CARD_BORDERS[Rarity.MYTHIC]  # type: ignore[index]

    def test_styles_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            CARD_BORDERS[Rarity.COMMON].banner = "changed"  # type: ignore[misc]

    @pytest.mark.parametrize("rarity", list(Rarity))
    def test_border_glyphs_are_single_column(self, rarity: Rarity) -> None:
        card = CARD_BORDERS[rarity]
        box = ART_BOX_BORDERS[rarity]
        glyphs = [
            card.horizontal,
            card.vertical,
            card.top_left,
            card.top_right,
            card.bottom_left,
            card.bottom_right,
            card.separator_left,
            card.separator_right,
            box.horizontal,
            box.vertical,
            box.top_left,
            box.top_right,
            box.bottom_left,
            box.bottom_right,
        ]
        assert all(display_width(glyph) == 1 for glyph in glyphs)

    def test_separators_differ_from_corners(self) -> None:
        style = CARD_BORDERS[Rarity.EPIC]
        assert style.separator_left != style.top_left
        assert style.separator_left == "╠"


class TestLookup:
    @pytest.mark.parametrize("tag", ["rare", "RARE", " Rare "])
    def test_case_insensitive(self, tag: str) -> None:
        assert resolve_rarity(tag) is Rarity.RARE

    def test_known_banner(self) -> None:
        assert get_card_style("legendary").banner == "♛ LEGENDARY ♛"

    def test_unknown_rarity_falls_back_to_common(self) -> None:
        assert get_card_style("ultra-secret") == CARD_BORDERS[Rarity.COMMON]
        assert get_art_box_style("ultra-secret") == ART_BOX_BORDERS[Rarity.COMMON]
        assert get_rarity_color("ultra-secret") == "\x1b[37m"

    def test_unknown_rarity_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            resolve_rarity("shiny")

        assert "shiny" in caplog.text


class TestElementSymbols:
    def test_known_element(self) -> None:
        assert get_element_symbol("Fire") == "🔥"

    def test_unknown_element_gets_generic_glyph(self) -> None:
        assert get_element_symbol("plasma") == DEFAULT_ELEMENT_SYMBOL

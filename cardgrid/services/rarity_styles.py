"""
Rarity Style Registry.

Read-only lookup tables from rarity to border glyphs. There is no write path
after import, so the tables are safe to share between threads.

Philosophy:
- Common/Uncommon: light line art (─│┌┐└┘)
- Rare/Epic: double-line box drawing (═║╔╗╚╝)
- Legendary/Mythic: heavy borders and ornamental art boxes (♛ ✶)

Unknown rarity tags fall back to the common style. This is intentional:
an unrecognized rarity never fails rendering.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from cardgrid.models.card import Rarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CardBorderStyle:
    """
    Outer card border for one rarity.

    Attributes:
        horizontal, vertical: Edge glyphs
        top_left, top_right, bottom_left, bottom_right: Corner glyphs
        name: Display name of the rarity
        banner: Banner shown centred in the header
        separator_left, separator_right: End glyphs of section separators
    """

    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    name: str
    banner: str
    separator_left: str
    separator_right: str


@dataclass(frozen=True, slots=True)
class ArtBoxStyle:
    """Border drawn directly around the art for one rarity."""

    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


CARD_BORDERS: Mapping[Rarity, CardBorderStyle] = MappingProxyType(
    {
        Rarity.COMMON: CardBorderStyle(
            horizontal="─",
            vertical="│",
            top_left="┌",
            top_right="┐",
            bottom_left="└",
            bottom_right="┘",
            name="Common",
            banner="[ COMMON ]",
            separator_left="├",
            separator_right="┤",
        ),
        Rarity.UNCOMMON: CardBorderStyle(
            horizontal="─",
            vertical="│",
            top_left="╭",
            top_right="╮",
            bottom_left="╰",
            bottom_right="╯",
            name="Uncommon",
            banner="[ UNCOMMON ]",
            separator_left="├",
            separator_right="┤",
        ),
        Rarity.RARE: CardBorderStyle(
            horizontal="═",
            vertical="║",
            top_left="╭",
            top_right="╮",
            bottom_left="╰",
            bottom_right="╯",
            name="Rare",
            banner="◆ RARE ◆",
            separator_left="╠",
            separator_right="╣",
        ),
        Rarity.EPIC: CardBorderStyle(
            horizontal="═",
            vertical="║",
            top_left="╔",
            top_right="╗",
            bottom_left="╚",
            bottom_right="╝",
            name="Epic",
            banner="♦ EPIC ♦",
            separator_left="╠",
            separator_right="╣",
        ),
        Rarity.LEGENDARY: CardBorderStyle(
            horizontal="━",
            vertical="┃",
            top_left="┏",
            top_right="┓",
            bottom_left="┗",
            bottom_right="┛",
            name="Legendary",
            banner="♛ LEGENDARY ♛",
            separator_left="┿",
            separator_right="┾",
        ),
        Rarity.MYTHIC: CardBorderStyle(
            horizontal="█",
            vertical="█",
            top_left="█",
            top_right="█",
            bottom_left="█",
            bottom_right="█",
            name="Mythic",
            banner="✶ MYTHIC ✶",
            separator_left="█",
            separator_right="█",
        ),
    }
)

ART_BOX_BORDERS: Mapping[Rarity, ArtBoxStyle] = MappingProxyType(
    {
        Rarity.COMMON: ArtBoxStyle("·", "│", "┌", "┐", "└", "┘"),
        Rarity.UNCOMMON: ArtBoxStyle("·", "│", "╭", "╮", "╰", "╯"),
        Rarity.RARE: ArtBoxStyle("◇", "◇", "◈", "◈", "◈", "◈"),
        Rarity.EPIC: ArtBoxStyle("❖", "✦", "❂", "❂", "❂", "❂"),
        Rarity.LEGENDARY: ArtBoxStyle("◆", "◆", "◈", "◈", "◈", "◈"),
        Rarity.MYTHIC: ArtBoxStyle("✧", "✧", "✪", "✪", "✪", "✪"),
    }
)

# ANSI foreground colour per rarity, used by card summaries
RARITY_COLORS: Mapping[Rarity, str] = MappingProxyType(
    {
        Rarity.COMMON: "\x1b[37m",  # White
        Rarity.UNCOMMON: "\x1b[32m",  # Green
        Rarity.RARE: "\x1b[36m",  # Cyan
        Rarity.EPIC: "\x1b[35m",  # Magenta
        Rarity.LEGENDARY: "\x1b[33m",  # Yellow
        Rarity.MYTHIC: "\x1b[31m",  # Red
    }
)

ELEMENT_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        "fire": "🔥",
        "water": "💧",
        "earth": "🌍",
        "air": "💨",
        "light": "✨",
        "dark": "🌑",
        "nature": "🌿",
        "electric": "⚡",
    }
)

DEFAULT_ELEMENT_SYMBOL = "◆"

_RARITY_BY_TAG: Mapping[str, Rarity] = MappingProxyType({r.value: r for r in Rarity})


def resolve_rarity(tag: str) -> Rarity:
    """Map a rarity tag to a Rarity, case-insensitively. Unknown tags are COMMON."""
    rarity = _RARITY_BY_TAG.get(tag.strip().lower())
    if rarity is None:
        logger.warning("Unknown rarity %r, using common style", tag)
        return Rarity.COMMON
    return rarity


def get_card_style(tag: str) -> CardBorderStyle:
    """Outer border style for a rarity tag (common for unknown tags)."""
    return CARD_BORDERS[resolve_rarity(tag)]


def get_art_box_style(tag: str) -> ArtBoxStyle:
    """Art box style for a rarity tag (common for unknown tags)."""
    return ART_BOX_BORDERS[resolve_rarity(tag)]


def get_rarity_color(tag: str) -> str:
    """ANSI colour for a rarity tag (common for unknown tags)."""
    return RARITY_COLORS[resolve_rarity(tag)]


def get_element_symbol(element: str) -> str:
    """Glyph for an element, or a generic glyph for unknown elements."""
    return ELEMENT_SYMBOLS.get(element.strip().lower(), DEFAULT_ELEMENT_SYMBOL)

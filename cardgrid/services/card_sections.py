"""
Card Sections — header, embedded art, and footer.

Each builder returns a list of lines that are each exactly CARD_WIDTH
columns wide, and a fixed number of them:

    header  HEADER_HEIGHT lines
    art     ART_SECTION_HEIGHT lines
    footer  FOOTER_HEIGHT lines

The footer only hits its line count when the card passed
validate_field_limits() first. It does not truncate text to make it fit.
"""

import math

from cardgrid.config import (
    ART_HEIGHT,
    ART_WIDTH,
    CARD_WIDTH,
    FOOTER_BODY_HEIGHT,
    KARMA_STAT_MAX,
    STANDARD_STAT_MAX,
    STAT_BAR_WIDTH,
    TEXT_WRAP_WIDTH,
)
from cardgrid.models.card import CardRecord
from cardgrid.services.art_normalizer import validate_dimensions
from cardgrid.services.display_width import display_width
from cardgrid.services.line_editor import (
    RESET,
    bordered_line,
    center_padding,
    centered_line,
    horizontal_border,
)
from cardgrid.services.rarity_styles import (
    get_art_box_style,
    get_card_style,
    get_element_symbol,
)

FILLED_GLYPH = "█"
EMPTY_GLYPH = "░"
ABILITY_MARKER = "★"
NOTES_MARKER = "✎"

# Footer lines above the ability description:
# separator, 2 blank, 3 x (stat row + blank), blank, element, blank,
# separator, blank, ability name, blank
FOOTER_LEADING_LINES = 16

# Footer lines a notes block adds on top of its wrapped text:
# 2 blank, header, blank
NOTES_BLOCK_OVERHEAD = 4

_LINE_BREAKS = str.maketrans({"\n": " ", "\r": " ", "\t": " ", "\v": " ", "\f": " "})


def _close_escapes(text: str) -> str:
    """Append a reset if text carries escapes, so colour stops before the border."""
    if "\x1b" in text or "\x9b" in text:
        return text + RESET
    return text


def _single_line(text: str) -> str:
    return _close_escapes(text.translate(_LINE_BREAKS))


def has_text(value: str | None) -> bool:
    """True if an optional text field holds something other than whitespace."""
    return bool(value and value.strip())


# =============================================================================
# TEXT HELPERS
# =============================================================================


def wrap_words(text: str, width: int = TEXT_WRAP_WIDTH) -> list[str]:
    """
    Greedy word wrap measured in display columns.

    Words are packed onto a line while "line + ' ' + word" fits in width.
    A word wider than width gets a line of its own. The last partial line
    is always emitted.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if display_width(candidate) <= width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def description_lines(text: str | None) -> list[str]:
    """Wrapped ability description, or a single empty line when absent."""
    if not has_text(text):
        return [""]
    return wrap_words(text or "")


def notes_lines(text: str | None) -> list[str]:
    """Wrapped notes, or no lines at all when absent."""
    if not has_text(text):
        return []
    return wrap_words(text or "")


def footer_body_height(ability_description: str | None, notes: str | None) -> int:
    """Lines the footer needs before its filler, template line and bottom border."""
    height = FOOTER_LEADING_LINES + len(description_lines(ability_description))
    if has_text(notes):
        height += NOTES_BLOCK_OVERHEAD + len(notes_lines(notes))
    return height


# =============================================================================
# STATS
# =============================================================================


def stat_bar(
    value: int,
    maximum: int = STANDARD_STAT_MAX,
    width: int = STAT_BAR_WIDTH,
    filled: str = FILLED_GLYPH,
    empty: str = EMPTY_GLYPH,
) -> str:
    """
    A bar of width glyphs: filled share of value/maximum, then empty.

    Values are clamped to [0, maximum]; the filled count rounds half up.
    """
    clamped = max(0, min(value, maximum))
    filled_count = math.floor(clamped / maximum * width + 0.5)
    return filled * filled_count + empty * (width - filled_count)


def format_stat_value(value: int) -> str:
    """
    Stat value for display; thousands are shortened ("2.5K", "10K").

    Tenths of a thousand round half up. Integer arithmetic only, so large
    values never go through a float.
    """
    if value >= 1000:
        whole, tenth = divmod((value + 50) // 100, 10)
        return f"{whole}.{tenth}K" if tenth else f"{whole}K"
    return str(value)


def stat_row(
    left: tuple[str, int],
    right: tuple[str, int],
    right_maximum: int = STANDARD_STAT_MAX,
) -> str:
    """Two stats side by side: "STR: 50   <bar>  │  INT:   60   <bar>"."""
    left_label, left_value = left
    right_label, right_value = right
    return (
        f"{left_label}: {format_stat_value(left_value):>2}   {stat_bar(left_value)}"
        "          │          "
        f"{right_label}: {format_stat_value(right_value):>4}   "
        f"{stat_bar(right_value, right_maximum)}"
    )


# =============================================================================
# HEADER
# =============================================================================


def build_header(card: CardRecord) -> list[str]:
    """
    Header: top border, name and mint, rarity banner, class, separator.

    Returns:
        HEADER_HEIGHT lines, each CARD_WIDTH wide
    """
    style = get_card_style(card.rarity)
    v = style.vertical

    name_section = f"{get_element_symbol(card.element)} {_single_line(card.agent_name)}"
    mint_section = f"#{card.mint_number}"
    gap = CARD_WIDTH - 2 - display_width(name_section) - display_width(mint_section)
    name_line = name_section + " " * max(0, gap) + mint_section

    return [
        horizontal_border(CARD_WIDTH, style.top_left, style.top_right, style.horizontal),
        bordered_line(name_line, v, v, CARD_WIDTH),
        centered_line(style.banner, v, v, CARD_WIDTH),
        bordered_line(f"Class: {_single_line(card.card_class)}", v, v, CARD_WIDTH),
        horizontal_border(
            CARD_WIDTH, style.separator_left, style.separator_right, style.horizontal
        ),
    ]


# =============================================================================
# ART
# =============================================================================


def embed_art(art: str, rarity: str) -> list[str]:
    """
    Frame normalized art in the rarity's art box, centred between card borders.

    Args:
        art: Art that is already exactly ART_WIDTH x ART_HEIGHT
        rarity: Rarity tag selecting both border styles

    Returns:
        ART_SECTION_HEIGHT lines, each CARD_WIDTH wide

    Raises:
        DimensionMismatchError: If art was not normalized first
    """
    validate_dimensions(art, ART_WIDTH, ART_HEIGHT)

    box = get_art_box_style(rarity)
    cv = get_card_style(rarity).vertical
    left, right = center_padding(ART_WIDTH + 2, CARD_WIDTH - 2)
    left_pad = cv + " " * left
    right_pad = " " * right + cv

    lines = [left_pad + box.top_left + box.horizontal * ART_WIDTH + box.top_right + right_pad]
    for art_line in art.split("\n"):
        lines.append(left_pad + box.vertical + _close_escapes(art_line) + box.vertical + right_pad)
    lines.append(
        left_pad + box.bottom_left + box.horizontal * ART_WIDTH + box.bottom_right + right_pad
    )
    return lines


# =============================================================================
# FOOTER
# =============================================================================


def build_footer(card: CardRecord) -> list[str]:
    """
    Footer: stats, element, ability, notes, template line, bottom border.

    Returns:
        FOOTER_HEIGHT lines for any card that passed validate_field_limits()
    """
    style = get_card_style(card.rarity)
    v = style.vertical
    blank = bordered_line("", v, v, CARD_WIDTH)
    separator = horizontal_border(
        CARD_WIDTH, style.separator_left, style.separator_right, style.horizontal
    )

    lines = [separator, blank, blank]

    stats = card.stats()
    # (left stat, right stat, right stat's maximum)
    pairs = (
        (stats[0], stats[1], STANDARD_STAT_MAX),
        (stats[2], stats[3], STANDARD_STAT_MAX),
        (stats[4], stats[5], KARMA_STAT_MAX),
    )
    for left, right, right_maximum in pairs:
        lines.append(centered_line(stat_row(left, right, right_maximum), v, v, CARD_WIDTH))
        lines.append(blank)

    lines.append(blank)
    element_line = f"{get_element_symbol(card.element)} {card.element.upper()} Element"
    lines.append(centered_line(_single_line(element_line), v, v, CARD_WIDTH))
    lines.append(blank)

    lines.append(separator)
    lines.append(blank)
    if has_text(card.special_ability):
        ability = f" {ABILITY_MARKER} {_single_line(card.special_ability or '')}"
        lines.append(bordered_line(ability, v, v, CARD_WIDTH))
    else:
        lines.append(blank)
    lines.append(blank)

    for text in description_lines(card.ability_description):
        lines.append(bordered_line(f" {_close_escapes(text)}" if text else "", v, v, CARD_WIDTH))

    if has_text(card.notes):
        lines.extend([blank, blank])
        lines.append(bordered_line(f" {NOTES_MARKER} Notes", v, v, CARD_WIDTH))
        lines.append(blank)
        for text in notes_lines(card.notes):
            lines.append(bordered_line(f" {_close_escapes(text)}", v, v, CARD_WIDTH))

    lines.extend(blank for _ in range(FOOTER_BODY_HEIGHT - len(lines)))

    template_line = f"Template: #{card.template_id} | Mint: {card.mint_number}"
    lines.append(bordered_line(template_line, v, v, CARD_WIDTH))
    lines.append(
        horizontal_border(CARD_WIDTH, style.bottom_left, style.bottom_right, style.horizontal)
    )

    return lines

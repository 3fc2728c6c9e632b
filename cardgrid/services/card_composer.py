"""
Card Composer — the public entry point for rendering a card.

INVARIANT: compose_card() returns exactly CARD_HEIGHT lines of exactly
CARD_WIDTH display columns, or raises. It never returns a malformed block.

The line count is guaranteed by construction (header + art + footer).
The final assertion stays anyway: it is what catches a change to one
grid constant that is not matched by the others.
"""

import logging

from cardgrid.config import (
    ART_HEIGHT,
    ART_SECTION_HEIGHT,
    ART_WIDTH,
    CARD_HEIGHT,
    CARD_WIDTH,
    FOOTER_HEIGHT,
    HEADER_HEIGHT,
)
from cardgrid.models.card import CardRecord
from cardgrid.models.failure import InternalConsistencyError
from cardgrid.services.art_normalizer import normalize_art, validate_dimensions
from cardgrid.services.card_sections import build_footer, build_header, embed_art
from cardgrid.services.display_width import display_width
from cardgrid.services.field_limits import validate_field_limits

logger = logging.getLogger(__name__)

# Top to bottom: solid, dark shade, medium shade
_DEFAULT_ART_BANDS = ("█", "▓", "▒")


def _check_grid(lines: list[str]) -> None:
    if len(lines) != CARD_HEIGHT:
        logger.critical(
            "Grid constants out of sync: header %d + art %d + footer %d != %d",
            HEADER_HEIGHT,
            ART_SECTION_HEIGHT,
            FOOTER_HEIGHT,
            CARD_HEIGHT,
        )
        raise InternalConsistencyError(f"{CARD_HEIGHT} lines", f"{len(lines)} lines")

    for index, line in enumerate(lines):
        width = display_width(line)
        if width != CARD_WIDTH:
            logger.critical("Card line %d is %d columns wide", index, width)
            raise InternalConsistencyError(
                f"{CARD_WIDTH} columns on line {index}", f"{width} columns"
            )


def compose_card(card: CardRecord, art: str) -> str:
    """
    Render a card with the given art.

    Args:
        card: Card to render
        art: Raw art of any size; it is normalized to ART_WIDTH x ART_HEIGHT

    Returns:
        The card as CARD_HEIGHT newline-joined lines of CARD_WIDTH columns

    Raises:
        FieldTooLongError: If card text would not fit on the card
        InternalConsistencyError: If the grid constants do not add up
    """
    normalized = normalize_art(art, ART_WIDTH, ART_HEIGHT)
    validate_dimensions(normalized, ART_WIDTH, ART_HEIGHT)
    validate_field_limits(card)

    lines = [
        *build_header(card),
        *embed_art(normalized, card.rarity),
        *build_footer(card),
    ]
    _check_grid(lines)

    logger.debug(
        "Composed %s card %r (mint #%d)", card.rarity, card.agent_name, card.mint_number
    )
    return "\n".join(lines)


def generate_default_art() -> str:
    """
    Placeholder art: three horizontal shade bands.

    Deterministic and exactly ART_WIDTH x ART_HEIGHT.
    """
    bands = len(_DEFAULT_ART_BANDS)
    return "\n".join(
        _DEFAULT_ART_BANDS[row * bands // ART_HEIGHT] * ART_WIDTH for row in range(ART_HEIGHT)
    )


def render_card_with_default_art(card: CardRecord) -> str:
    """Render a card using the placeholder art."""
    return compose_card(card, generate_default_art())


def render_card(card: CardRecord, art: str | None = None) -> str:
    """Render a card with custom art if given, otherwise the placeholder art."""
    if art:
        return compose_card(card, art)
    return render_card_with_default_art(card)

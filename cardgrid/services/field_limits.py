"""
Field-Limit Validator — pre-flight check before composition.

The card has a fixed number of lines, so free text has to fit before any
composition work starts. Violations are collected for EVERY field and raised
together. Card text is never truncated to make it fit.

LIMITS:
- agent_name, card_class, special_ability: characters
- ability_description, notes: words

A word cap alone does not bound the layout (fifteen very long words still
wrap onto many lines), so wrapped fields are also checked against the width
of a text line and against the lines the footer has for them.
"""

import logging

from cardgrid.config import FOOTER_BODY_HEIGHT, TEXT_WRAP_WIDTH
from cardgrid.models.card import CardRecord
from cardgrid.models.failure import FieldTooLongError, FieldViolation
from cardgrid.services.card_sections import footer_body_height, has_text
from cardgrid.services.display_width import display_width

logger = logging.getLogger(__name__)

# Character limits
MAX_NAME_CHARS = 30
MAX_CLASS_CHARS = 30
MAX_ABILITY_NAME_CHARS = 30

# Word limits
MAX_DESCRIPTION_WORDS = 15
MAX_NOTES_WORDS = 15

FIELD_LIMITS: dict[str, int] = {
    "agent_name": MAX_NAME_CHARS,
    "card_class": MAX_CLASS_CHARS,
    "special_ability": MAX_ABILITY_NAME_CHARS,
    "ability_description_words": MAX_DESCRIPTION_WORDS,
    "notes_words": MAX_NOTES_WORDS,
}


def _check_chars(field: str, value: str | None, limit: int) -> list[FieldViolation]:
    if value and len(value) > limit:
        return [FieldViolation(field, limit, "characters", len(value))]
    return []


def _check_words(field: str, value: str | None, limit: int) -> list[FieldViolation]:
    if not has_text(value):
        return []
    words = (value or "").split()
    violations: list[FieldViolation] = []
    if len(words) > limit:
        violations.append(FieldViolation(field, limit, "words", len(words)))
    widest = max(display_width(word) for word in words)
    if widest > TEXT_WRAP_WIDTH:
        violations.append(FieldViolation(field, TEXT_WRAP_WIDTH, "columns", widest))
    return violations


def find_field_violations(card: CardRecord) -> list[FieldViolation]:
    """
    Collect every field limit the card breaks.

    Returns:
        Violations in field order; empty if the card fits
    """
    violations: list[FieldViolation] = []
    violations += _check_chars("agent_name", card.agent_name, MAX_NAME_CHARS)
    violations += _check_chars("card_class", card.card_class, MAX_CLASS_CHARS)
    violations += _check_chars("special_ability", card.special_ability, MAX_ABILITY_NAME_CHARS)
    violations += _check_words(
        "ability_description", card.ability_description, MAX_DESCRIPTION_WORDS
    )
    violations += _check_words("notes", card.notes, MAX_NOTES_WORDS)

    body_height = footer_body_height(card.ability_description, card.notes)
    if body_height > FOOTER_BODY_HEIGHT:
        for field in ("ability_description", "notes"):
            if has_text(getattr(card, field)):
                violations.append(
                    FieldViolation(field, FOOTER_BODY_HEIGHT, "lines", body_height)
                )

    return violations


def validate_field_limits(card: CardRecord) -> None:
    """
    Reject a card whose text would not fit.

    Raises:
        FieldTooLongError: Naming every offending field
    """
    violations = find_field_violations(card)
    if violations:
        logger.info(
            "Card %r rejected: %s",
            card.agent_name[:40],
            ", ".join(v.field for v in violations),
        )
        raise FieldTooLongError(violations)

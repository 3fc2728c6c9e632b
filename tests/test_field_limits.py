"""
Tests for the field-limit pre-flight check.

INVARIANT: Card text is never truncated to fit. Text that would not fit is
rejected up front with a FieldTooLongError naming EVERY offending field.
"""

from collections.abc import Callable

import pytest

from cardgrid.models.card import CardRecord
from cardgrid.models.failure import FailureKind, FieldTooLongError
from cardgrid.services.card_composer import compose_card, render_card_with_default_art
from cardgrid.services.field_limits import (
    FIELD_LIMITS,
    find_field_violations,
    validate_field_limits,
)

CardFactory = Callable[..., CardRecord]


def _words(count: int, word: str = "word") -> str:
    return " ".join([word] * count)


class TestCharacterLimits:
    @pytest.mark.parametrize("field", ["agent_name", "card_class", "special_ability"])
    def test_at_limit_passes(self, make_card: CardFactory, field: str) -> None:
        card = make_card(**{field: "A" * 30})
        validate_field_limits(card)
        assert render_card_with_default_art(card).count("\n") == 59

    @pytest.mark.parametrize("field", ["agent_name", "card_class", "special_ability"])
    def test_over_limit_fails(self, make_card: CardFactory, field: str) -> None:
        with pytest.raises(FieldTooLongError) as exc_info:
            validate_field_limits(make_card(**{field: "A" * 31}))

        assert exc_info.value.fields == (field,)
        assert exc_info.value.violations[0].unit == "characters"
        assert exc_info.value.violations[0].actual == 31

    def test_composition_rejects_long_name(self, make_card: CardFactory) -> None:
        with pytest.raises(FieldTooLongError, match="agent_name"):
            compose_card(make_card(agent_name="A" * 31), "")


class TestWordLimits:
    @pytest.mark.parametrize("field", ["ability_description", "notes"])
    def test_fifteen_words_pass(self, make_card: CardFactory, field: str) -> None:
        card = make_card(**{field: _words(15, "dragonfire")})
        validate_field_limits(card)
        render_card_with_default_art(card)

    @pytest.mark.parametrize("field", ["ability_description", "notes"])
    def test_sixteen_short_words_fail(self, make_card: CardFactory, field: str) -> None:
        """The limit counts words, not characters: 16 one-letter words fail."""
        with pytest.raises(FieldTooLongError) as exc_info:
            validate_field_limits(make_card(**{field: _words(16, "a")}))

        assert field in exc_info.value.fields
        assert exc_info.value.violations[0].unit == "words"

    def test_few_long_words_pass(self, make_card: CardFactory) -> None:
        """A long description under the word cap is fine."""
        validate_field_limits(make_card(ability_description=_words(5, "x" * 40), notes=None))

    def test_extra_whitespace_is_not_a_word(self, make_card: CardFactory) -> None:
        validate_field_limits(make_card(notes="  " + "  ".join(["w"] * 15) + "  "))


class TestLayoutLimits:
    def test_word_wider_than_line(self, make_card: CardFactory) -> None:
        with pytest.raises(FieldTooLongError) as exc_info:
            validate_field_limits(make_card(ability_description="x" * 76))

        violation = exc_info.value.violations[0]
        assert (violation.field, violation.unit, violation.limit) == (
            "ability_description",
            "columns",
            75,
        )

    def test_text_overflowing_footer(self, make_card: CardFactory) -> None:
        """Fifteen long words in both fields wrap past the end of the footer."""
        long_text = _words(15, "y" * 36)
        card = make_card(ability_description=long_text, notes=long_text)

        with pytest.raises(FieldTooLongError) as exc_info:
            validate_field_limits(card)

        assert set(exc_info.value.fields) == {"ability_description", "notes"}
        assert {v.unit for v in exc_info.value.violations} == {"lines"}


class TestAllViolationsReported:
    def test_every_field_named(self, make_card: CardFactory) -> None:
        card = make_card(
            agent_name="N" * 31,
            card_class="C" * 31,
            special_ability="S" * 31,
            ability_description=_words(16, "a"),
            notes=_words(16, "b"),
        )

        with pytest.raises(FieldTooLongError) as exc_info:
            validate_field_limits(card)

        assert exc_info.value.fields == (
            "agent_name",
            "card_class",
            "special_ability",
            "ability_description",
            "notes",
        )

    def test_error_is_known_failure(self, make_card: CardFactory) -> None:
        with pytest.raises(FieldTooLongError) as exc_info:
            validate_field_limits(make_card(agent_name="N" * 31))

        response = exc_info.value.to_response()
        assert response.failure is not None
        assert response.failure.kind == FailureKind.FIELD_TOO_LONG
        assert response.failure.detail == "agent_name"

    def test_valid_card_has_no_violations(self, sample_card: CardRecord) -> None:
        assert find_field_violations(sample_card) == []

    def test_limits_table(self) -> None:
        assert FIELD_LIMITS == {
            "agent_name": 30,
            "card_class": 30,
            "special_ability": 30,
            "ability_description_words": 15,
            "notes_words": 15,
        }

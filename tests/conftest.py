from collections.abc import Callable
from dataclasses import replace
from typing import Any

import pytest

from cardgrid.models.card import CardRecord


@pytest.fixture
def sample_card() -> CardRecord:
    """A typical card with every field filled in."""
    return CardRecord(
        agent_name="DragonKnight",
        card_class="Warrior",
        element="fire",
        rarity="rare",
        mint_number=42,
        strength=75,
        intelligence=60,
        charisma=85,
        wisdom=70,
        dexterity=90,
        karma=2500,
        special_ability="Flame Breath",
        ability_description="Deals fire damage to all enemies",
        notes="Loves battling in volcanic regions",
        template_id=7,
    )


@pytest.fixture
def make_card(sample_card: CardRecord) -> Callable[..., CardRecord]:
    """Build a variant of sample_card with some fields overridden."""

    def _make(**overrides: Any) -> CardRecord:
        return replace(sample_card, **overrides)

    return _make


@pytest.fixture
def sample_card_json() -> dict[str, Any]:
    """Card data as a caller would send it."""
    return {
        "agent_name": "clank_enjoyer",
        "class": "Builder",
        "element": "electric",
        "rarity": "epic",
        "mint_number": 1,
        "str": 62,
        "int": 80,
        "cha": 65,
        "wis": 72,
        "dex": 85,
        "kar": 216,
        "special_ability": "In the Engine Room",
        "ability_description": "Repairs any machine it touches",
        "notes": "Hums while working",
        "template_id": 3,
    }

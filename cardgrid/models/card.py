import math
from dataclasses import dataclass
from enum import Enum


class Rarity(str, Enum):
    """Card rarity tiers, ordered low to high."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"


RARITY_MULTIPLIERS: dict[Rarity, float] = {
    Rarity.COMMON: 1.0,
    Rarity.UNCOMMON: 1.1,
    Rarity.RARE: 1.25,
    Rarity.EPIC: 1.5,
    Rarity.LEGENDARY: 2.0,
    Rarity.MYTHIC: 3.0,
}

STAT_FIELDS = ("strength", "intelligence", "charisma", "wisdom", "dexterity", "karma")

STAT_LABELS: dict[str, str] = {
    "strength": "STR",
    "intelligence": "INT",
    "charisma": "CHA",
    "wisdom": "WIS",
    "dexterity": "DEX",
    "karma": "KAR",
}


@dataclass(frozen=True, slots=True)
class CardRecord:
    """
    A card as handed to the renderer.

    Built by the caller from stored data immediately before rendering.
    The renderer only reads it.

    Attributes:
        agent_name: Display name shown in the header
        card_class: Class tag (e.g., "Warrior")
        element: Element tag (e.g., "fire"); unknown elements get a generic glyph
        rarity: Rarity tag; unknown tags render with the common style
        mint_number: Serial number of this copy
        strength..dexterity: Standard stats, 0-100
        karma: Karma stat, 0-10000
        special_ability: Ability name, if any
        ability_description: Ability text, if any
        notes: Free-form notes, if any
        template_id: Template this card was minted from
    """

    agent_name: str
    card_class: str
    element: str
    rarity: str
    mint_number: int
    strength: int = 0
    intelligence: int = 0
    charisma: int = 0
    wisdom: int = 0
    dexterity: int = 0
    karma: int = 0
    special_ability: str | None = None
    ability_description: str | None = None
    notes: str | None = None
    template_id: int = 0

    def __post_init__(self) -> None:
        for name in STAT_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass but never a meaningful stat
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    def stats(self) -> tuple[tuple[str, int], ...]:
        """Stats as ordered (label, value) pairs."""
        return tuple((STAT_LABELS[name], getattr(self, name)) for name in STAT_FIELDS)

    def total_power(self) -> int:
        """Sum of all stats scaled by the rarity multiplier."""
        base = sum(value for _, value in self.stats())
        try:
            multiplier = RARITY_MULTIPLIERS[Rarity(self.rarity.lower())]
        except ValueError:
            multiplier = 1.0
        return math.floor(base * multiplier)

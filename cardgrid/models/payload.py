"""
Card ingestion payload.

This is the trust boundary between stored/transported card data and the
renderer. Loosely-typed input (numbers stored as strings, empty text fields)
is normalized here so that CardRecord only ever sees real ints and
None-or-text optional fields.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cardgrid.config import KARMA_STAT_MAX, STANDARD_STAT_MAX
from cardgrid.models.card import CardRecord


class CardPayload(BaseModel):
    """Card data as received from a caller."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=False)

    agent_name: str
    card_class: str = Field(alias="class")
    element: str
    rarity: str = "common"
    mint_number: int = Field(default=1, ge=0)
    str_: int = Field(default=0, ge=0, le=STANDARD_STAT_MAX, alias="str")
    int_: int = Field(default=0, ge=0, le=STANDARD_STAT_MAX, alias="int")
    cha: int = Field(default=0, ge=0, le=STANDARD_STAT_MAX)
    wis: int = Field(default=0, ge=0, le=STANDARD_STAT_MAX)
    dex: int = Field(default=0, ge=0, le=STANDARD_STAT_MAX)
    kar: int = Field(default=0, ge=0, le=KARMA_STAT_MAX)
    special_ability: str | None = None
    ability_description: str | None = None
    notes: str | None = None
    template_id: int = Field(default=0, ge=0)

    @field_validator("special_ability", "ability_description", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_record(self) -> CardRecord:
        """Convert to the renderer's record type."""
        return CardRecord(
            agent_name=self.agent_name,
            card_class=self.card_class,
            element=self.element,
            rarity=self.rarity,
            mint_number=self.mint_number,
            strength=self.str_,
            intelligence=self.int_,
            charisma=self.cha,
            wisdom=self.wis,
            dexterity=self.dex,
            karma=self.kar,
            special_ability=self.special_ability,
            ability_description=self.ability_description,
            notes=self.notes,
            template_id=self.template_id,
        )

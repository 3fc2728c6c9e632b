from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDGRID_")

    app_name: str = "CardGrid"
    debug: bool = False

    log_level: str = "INFO"

    # Rarity used by the CLI when a card file omits one
    default_rarity: str = "common"


settings = Settings()


# =============================================================================
# GRID CONTRACT
# =============================================================================
#
# HEADER_HEIGHT + ART_SECTION_HEIGHT + FOOTER_HEIGHT must equal CARD_HEIGHT.
# These are NOT runtime-configurable.

CARD_WIDTH = 80
CARD_HEIGHT = 60

ART_WIDTH = 70
ART_HEIGHT = 26

HEADER_HEIGHT = 5

# Art plus the top and bottom rows of the art box
ART_SECTION_HEIGHT = ART_HEIGHT + 2

FOOTER_HEIGHT = 27

# Lines the footer may use before the template line and bottom border
FOOTER_BODY_HEIGHT = FOOTER_HEIGHT - 2


# =============================================================================
# FOOTER LAYOUT
# =============================================================================

STAT_BAR_WIDTH = 12
STANDARD_STAT_MAX = 100
KARMA_STAT_MAX = 10_000

# Wrapped text sits one space in from the left border
TEXT_WRAP_WIDTH = CARD_WIDTH - 5

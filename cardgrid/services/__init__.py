"""
CardGrid services.

Fixed-grid card rendering, from display-width measurement up to full
card composition.
"""

from cardgrid.services.art_normalizer import (
    measure_block,
    normalize_art,
    validate_card_frame,
    validate_dimensions,
)
from cardgrid.services.card_composer import (
    compose_card,
    generate_default_art,
    render_card,
    render_card_with_default_art,
)
from cardgrid.services.card_sections import (
    build_footer,
    build_header,
    embed_art,
    format_stat_value,
    stat_bar,
    wrap_words,
)
from cardgrid.services.card_summary import (
    render_card_compact,
    render_cards,
    render_collection_summary,
)
from cardgrid.services.display_width import display_width, strip_ansi
from cardgrid.services.field_limits import (
    FIELD_LIMITS,
    find_field_violations,
    validate_field_limits,
)
from cardgrid.services.line_editor import (
    center_text,
    fit_to_width,
    pad_to_width,
    truncate_to_width,
)
from cardgrid.services.rarity_styles import (
    ART_BOX_BORDERS,
    CARD_BORDERS,
    ArtBoxStyle,
    CardBorderStyle,
    get_art_box_style,
    get_card_style,
    resolve_rarity,
)

__all__ = [
    # Public entry points
    "compose_card",
    "render_card",
    "render_card_with_default_art",
    "generate_default_art",
    "validate_dimensions",
    "validate_card_frame",
    # Measurement and line editing
    "display_width",
    "strip_ansi",
    "pad_to_width",
    "truncate_to_width",
    "fit_to_width",
    "center_text",
    # Art
    "normalize_art",
    "measure_block",
    "embed_art",
    # Sections
    "build_header",
    "build_footer",
    "stat_bar",
    "format_stat_value",
    "wrap_words",
    # Field limits
    "FIELD_LIMITS",
    "find_field_violations",
    "validate_field_limits",
    # Rarity styles
    "ArtBoxStyle",
    "CardBorderStyle",
    "ART_BOX_BORDERS",
    "CARD_BORDERS",
    "get_art_box_style",
    "get_card_style",
    "resolve_rarity",
    # Summaries
    "render_card_compact",
    "render_cards",
    "render_collection_summary",
]

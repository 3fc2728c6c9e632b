"""
Art Normalizer and Dimension Validator.

Art arrives from external generators (e.g. chafa) with no guarantees about
its size. normalize_art() coerces ANY string to an exact width x height
block and never raises. validate_dimensions() is the strict check, used on
its own by callers that want to vet art before storing it.
"""

import logging
import re

from cardgrid.config import ART_HEIGHT, ART_WIDTH, CARD_HEIGHT, CARD_WIDTH
from cardgrid.models.failure import DimensionMismatchError
from cardgrid.services.display_width import display_width, strip_ansi
from cardgrid.services.line_editor import fit_to_width

logger = logging.getLogger(__name__)

# Show/hide cursor, which art generators wrap their output in
_CURSOR_VISIBILITY_PATTERN = re.compile(r"\x1b\[\?25[hl]")

_FULL_RESET = "\x1b[0m"


def normalize_art(art: str, width: int = ART_WIDTH, height: int = ART_HEIGHT) -> str:
    """
    Coerce raw art to exactly width columns by height lines.

    Steps:
    1. Remove cursor show/hide sequences anywhere in the text
    2. Remove a single full reset at the very start and at the very end
    3. Split into lines
    4. Drop trailing lines that are visually blank
    5. Pad or truncate every line to width
    6. Pad with blank lines, or drop lines from the end, to reach height

    Args:
        art: Raw art, possibly containing ANSI escape sequences
        width: Required display width of every line
        height: Required number of lines

    Returns:
        A new string that always passes validate_dimensions(_, width, height)
    """
    cleaned = _CURSOR_VISIBILITY_PATTERN.sub("", art)
    cleaned = cleaned.removeprefix(_FULL_RESET).removesuffix(_FULL_RESET)

    lines = [line.removesuffix("\r") for line in cleaned.split("\n")]
    while lines and not strip_ansi(lines[-1]).strip():
        lines.pop()

    source_height = len(lines)
    lines = [fit_to_width(line, width) for line in lines[:height]]
    lines.extend(" " * width for _ in range(height - len(lines)))

    if source_height != height:
        logger.debug("Normalized art height from %d to %d lines", source_height, height)

    return "\n".join(lines)


def measure_block(block: str) -> tuple[int, int]:
    """
    Measure a text block.

    Returns:
        (width of the first line, number of lines)
    """
    lines = block.split("\n")
    return display_width(lines[0]), len(lines)


def validate_dimensions(block: str, width: int = ART_WIDTH, height: int = ART_HEIGHT) -> None:
    """
    Check that a block is exactly width columns by height lines.

    Every line must have the same display width, that width must equal
    width, and there must be exactly height lines. Never modifies the block.

    Raises:
        DimensionMismatchError: If any of the three checks fails
    """
    lines = block.split("\n")
    actual_height = len(lines)
    widths = [display_width(line) for line in lines]
    actual_width = widths[0]

    if any(w != actual_width for w in widths):
        raise DimensionMismatchError(
            f"Block has inconsistent line widths. All lines must be exactly {width} columns wide.",
            width,
            height,
            actual_width,
            actual_height,
        )

    if actual_width != width:
        raise DimensionMismatchError(
            f"Block width must be exactly {width} columns, got {actual_width}",
            width,
            height,
            actual_width,
            actual_height,
        )

    if actual_height != height:
        raise DimensionMismatchError(
            f"Block height must be exactly {height} lines, got {actual_height}",
            width,
            height,
            actual_width,
            actual_height,
        )


def validate_card_frame(frame: str) -> None:
    """Validate that a block is a full CARD_WIDTH x CARD_HEIGHT card."""
    validate_dimensions(frame, CARD_WIDTH, CARD_HEIGHT)

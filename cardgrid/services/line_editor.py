"""
Escape-Aware Line Editor.

Every function here returns text that measures EXACTLY the requested number
of display columns. Escape sequences are never split: they are copied whole
or not at all.

Centring uses one rule everywhere: the left side gets floor(slack / 2)
spaces and the right side gets the remainder.
"""

from cardgrid.services.display_width import char_width, display_width, iter_segments

RESET = "\x1b[0m"


def pad_to_width(text: str, width: int) -> str:
    """Append spaces until text measures width columns. Longer text is unchanged."""
    return text + " " * max(0, width - display_width(text))


def truncate_to_width(text: str, width: int) -> str:
    """
    Cut text down to width columns.

    Escape sequences before the cut are kept. A reset is appended at the cut
    so colour does not bleed into whatever follows. If the cut falls just
    before a wide glyph, the leftover column is filled with a space.
    Text that already fits is returned unchanged.
    """
    if display_width(text) <= width:
        return text

    kept: list[str] = []
    used = 0
    for segment, is_escape in iter_segments(text):
        if is_escape:
            kept.append(segment)
            continue
        segment_width = char_width(segment)
        if used + segment_width > width:
            break
        kept.append(segment)
        used += segment_width

    return "".join(kept) + RESET + " " * (width - used)


def fit_to_width(text: str, width: int) -> str:
    """Pad or truncate so text measures exactly width columns."""
    current = display_width(text)
    if current < width:
        return text + " " * (width - current)
    if current > width:
        return truncate_to_width(text, width)
    return text


def center_padding(content_width: int, available: int) -> tuple[int, int]:
    """
    Split the free space around centred content.

    Returns:
        (left, right) space counts; left is the floor, right the remainder.
        Both are 0 when the content does not fit.
    """
    slack = max(0, available - content_width)
    left = slack // 2
    return left, slack - left


def center_text(text: str, width: int) -> str:
    """Centre text within width columns."""
    left, right = center_padding(display_width(text), width)
    return fit_to_width(" " * left + text + " " * right, width)


def bordered_line(content: str, left_border: str, right_border: str, total_width: int) -> str:
    """Place content between two border glyphs, fitted to total_width."""
    inner_width = total_width - display_width(left_border) - display_width(right_border)
    return left_border + fit_to_width(content, inner_width) + right_border


def centered_line(content: str, left_border: str, right_border: str, total_width: int) -> str:
    """Like bordered_line, with the content centred."""
    inner_width = total_width - display_width(left_border) - display_width(right_border)
    return left_border + center_text(content, inner_width) + right_border


def horizontal_border(width: int, left: str, right: str, fill: str) -> str:
    """A border row: left corner, fill glyph repeated, right corner."""
    return left + fill * (width - 2) + right

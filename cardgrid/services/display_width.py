"""
Display Width — how many terminal columns a string occupies.

Escape sequences are zero-width. Characters in the wide set below take two
columns; everything else takes one. Only Wide (W) and Fullwidth (F) East
Asian Width ranges are treated as wide, plus a couple of pictographs that
terminals render wide in practice. Ambiguous (A) characters count as one
column, which is what non-CJK locales do.
"""

import re
from collections.abc import Iterator

# CSI sequences (ESC [ or the 8-bit 0x9B introducer, optional private "?",
# numeric parameters, final letter) and the "designate G0 as ASCII" ESC ( B.
ANSI_ESCAPE_PATTERN = re.compile(r"(?:\x1b\[|\x9b)\??[0-9;]*[A-Za-z]|\x1b\(B")

# Inclusive code point ranges rendered two columns wide
_WIDE_RANGES: tuple[tuple[int, int], ...] = (
    (0x2E80, 0x2EFF),  # CJK Radicals Supplement
    (0x2F00, 0x2FDF),  # Kangxi Radicals
    (0x3000, 0x303F),  # CJK Symbols and Punctuation
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x3100, 0x312F),  # Bopomofo
    (0x31F0, 0x31FF),  # Katakana Phonetic Extensions
    (0x3200, 0x32FF),  # Enclosed CJK Letters and Months
    (0x3300, 0x33FF),  # CJK Compatibility
    (0x3400, 0x4DBF),  # CJK Unified Ideographs Extension A
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0xAC00, 0xD7AF),  # Hangul Syllables
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0xFF01, 0xFF60),  # Fullwidth Forms
    (0xFFE0, 0xFFE6),  # Fullwidth signs
    (0x1F000, 0x1F02F),  # Mahjong Tiles
    (0x1F0A0, 0x1F0FF),  # Playing Cards
    (0x1F100, 0x1F1FF),  # Enclosed Alphanumeric Supplement
    (0x1F300, 0x1F5FF),  # Miscellaneous Symbols and Pictographs
    (0x1F600, 0x1F64F),  # Emoticons
    (0x1F680, 0x1F6FF),  # Transport and Map Symbols
    (0x1F900, 0x1F9FF),  # Supplemental Symbols and Pictographs
    (0x1FA00, 0x1FA6F),  # Symbols and Pictographs Extended-A
    (0x1FA70, 0x1FAFF),  # Symbols and Pictographs Extended-B
    (0x20000, 0x2FA1F),  # CJK Unified Ideographs Extension B onwards
)

# Single code points outside the ranges above that terminals draw wide
_WIDE_SYMBOLS = frozenset(
    {
        0x26A1,  # HIGH VOLTAGE
        0x2728,  # SPARKLES
    }
)


def is_wide(code_point: int) -> bool:
    """Check if a code point occupies two terminal columns."""
    if code_point in _WIDE_SYMBOLS:
        return True
    return any(low <= code_point <= high for low, high in _WIDE_RANGES)


def char_width(char: str) -> int:
    """Width of a single (non-escape) character: 2 if wide, else 1."""
    return 2 if is_wide(ord(char)) else 1


def strip_ansi(text: str) -> str:
    """Remove recognized escape sequences from text."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def display_width(text: str) -> int:
    """
    Number of terminal columns text occupies.

    Returns 0 for empty input and for input made only of escape sequences.
    """
    return sum(char_width(char) for char in strip_ansi(text))


def iter_segments(text: str) -> Iterator[tuple[str, bool]]:
    """
    Split text into (segment, is_escape) tokens.

    Escape sequences come out whole, as a single token; every other
    character comes out on its own.
    """
    position = 0
    for match in ANSI_ESCAPE_PATTERN.finditer(text):
        yield from ((char, False) for char in text[position : match.start()])
        yield match.group(), True
        position = match.end()
    yield from ((char, False) for char in text[position:])

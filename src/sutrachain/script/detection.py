"""Per-character script detection over Unicode ranges."""

from __future__ import annotations

from sutrachain.constants.scripts import (
    NATIVE_RANGES,
    ROMANIZED_RANGES,
    SCRIPT_NATIVE,
    SCRIPT_ROMANIZED,
    SCRIPT_UNKNOWN,
)
from sutrachain.types import ScriptTag


def _in_ranges(codepoint: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(start <= codepoint <= end for start, end in ranges)


def char_script(char: str) -> ScriptTag:
    """Classify a single character; punctuation, digits and spaces are unknown."""
    codepoint = ord(char)
    if _in_ranges(codepoint, NATIVE_RANGES):
        return SCRIPT_NATIVE
    if _in_ranges(codepoint, ROMANIZED_RANGES):
        return SCRIPT_ROMANIZED
    return SCRIPT_UNKNOWN


def script_counts(text: str) -> dict[ScriptTag, int]:
    """Count characters per script with stable keys."""
    counts: dict[ScriptTag, int] = {SCRIPT_NATIVE: 0, SCRIPT_ROMANIZED: 0, SCRIPT_UNKNOWN: 0}
    for char in text:
        counts[char_script(char)] += 1
    return counts


def detect_script(text: str) -> ScriptTag:
    """Return the script holding the majority of classified characters.

    Ties between the two scripts resolve to native. Text with no
    characters from either script is unknown.
    """
    counts = script_counts(text)
    native = counts[SCRIPT_NATIVE]
    romanized = counts[SCRIPT_ROMANIZED]
    if native == 0 and romanized == 0:
        return SCRIPT_UNKNOWN
    return SCRIPT_NATIVE if native >= romanized else SCRIPT_ROMANIZED


def is_mixed_script(text: str) -> bool:
    """Return True when characters from both supported scripts are present."""
    counts = script_counts(text)
    return counts[SCRIPT_NATIVE] > 0 and counts[SCRIPT_ROMANIZED] > 0

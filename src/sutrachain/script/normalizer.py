"""Script Normalizer: raw caller text to canonical :class:`Token`."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from sutrachain.constants.scripts import SCRIPT_UNKNOWN
from sutrachain.model import INVALID_TOKEN, Token
from sutrachain.script.detection import detect_script
from sutrachain.script.transliteration import canonicalize


def normalize(raw: object) -> Token:
    """Normalize raw input into a Token.

    Empty, whitespace-only, non-string input, or text with no letters of
    either supported script yields ``INVALID_TOKEN`` instead of raising.
    A Token passes through unchanged, which makes normalization idempotent.
    """
    if isinstance(raw, Token):
        return raw
    if not isinstance(raw, str):
        return INVALID_TOKEN

    stripped = unicodedata.normalize("NFC", raw).strip()
    if not stripped:
        return INVALID_TOKEN

    script = detect_script(stripped)
    if script == SCRIPT_UNKNOWN:
        return INVALID_TOKEN

    canonical = canonicalize(stripped)
    if detect_script(canonical) == SCRIPT_UNKNOWN:
        return INVALID_TOKEN
    return Token(text=canonical, script=script, raw=raw)


def normalize_many(raws: Iterable[object]) -> list[Token]:
    """Normalize each input in order."""
    return [normalize(raw) for raw in raws]


def is_equivalent_across_scripts(first: object, second: object) -> bool:
    """Return True when both inputs are valid and share a canonical form."""
    left = normalize(first)
    right = normalize(second)
    return left.is_valid and right.is_valid and left == right

"""Devanagari to IAST transliteration.

Characters outside the native script pass through unchanged, so mixed
input is converted character run by character run.
"""

from __future__ import annotations

import unicodedata

from sutrachain.constants.scripts import (
    DROPPED_CHARACTERS,
    NATIVE_CONSONANTS,
    NATIVE_INDEPENDENT_VOWELS,
    NATIVE_INHERENT_VOWEL,
    NATIVE_MARKS,
    NATIVE_NUKTA,
    NATIVE_VIRAMA,
    NATIVE_VOWEL_SIGNS,
    ROMANIZED_FOLDS,
)


def transliterate_native(text: str) -> str:
    """Transliterate Devanagari characters in *text* to IAST."""
    out: list[str] = []
    pending_vowel = False
    index = 0
    length = len(text)

    while index < length:
        char = text[index]
        following = text[index + 1] if index + 1 < length else ""

        if char in DROPPED_CHARACTERS:
            index += 1
            continue

        consonant: str | None = None
        if following == NATIVE_NUKTA and char + NATIVE_NUKTA in NATIVE_CONSONANTS:
            consonant = NATIVE_CONSONANTS[char + NATIVE_NUKTA]
            index += 2
        elif char in NATIVE_CONSONANTS:
            consonant = NATIVE_CONSONANTS[char]
            index += 1
        if consonant is not None:
            if pending_vowel:
                out.append(NATIVE_INHERENT_VOWEL)
            out.append(consonant)
            pending_vowel = True
            continue

        index += 1
        if char in NATIVE_VOWEL_SIGNS:
            out.append(NATIVE_VOWEL_SIGNS[char])
            pending_vowel = False
            continue
        if char == NATIVE_VIRAMA:
            pending_vowel = False
            continue
        if char == NATIVE_NUKTA:
            continue

        if pending_vowel:
            out.append(NATIVE_INHERENT_VOWEL)
            pending_vowel = False
        if char in NATIVE_INDEPENDENT_VOWELS:
            out.append(NATIVE_INDEPENDENT_VOWELS[char])
        elif char in NATIVE_MARKS:
            out.append(NATIVE_MARKS[char])
        else:
            out.append(char)

    if pending_vowel:
        out.append(NATIVE_INHERENT_VOWEL)
    return "".join(out)


def fold_romanized(text: str) -> str:
    """Lowercase and fold romanized spelling variants onto IAST letters."""
    folded = text.lower()
    for variant, canonical in ROMANIZED_FOLDS.items():
        folded = folded.replace(variant, canonical)
    return folded


def canonicalize(text: str) -> str:
    """Return the canonical IAST spelling of *text* in either script."""
    composed = unicodedata.normalize("NFC", text)
    converted = fold_romanized(transliterate_native(composed))
    collapsed = " ".join(converted.split())
    return unicodedata.normalize("NFC", collapsed)

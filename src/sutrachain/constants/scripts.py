"""Unicode ranges and transliteration tables for the two supported scripts."""

from __future__ import annotations

SCRIPT_ROMANIZED: str = "romanized"
SCRIPT_NATIVE: str = "native"
SCRIPT_UNKNOWN: str = "unknown"

# Devanagari, Devanagari Extended, Vedic Extensions.
NATIVE_RANGES: tuple[tuple[int, int], ...] = (
    (0x0900, 0x097F),
    (0xA8E0, 0xA8FF),
    (0x1CD0, 0x1CFF),
)

# Latin letters used by IAST and its common romanized variants. Combining
# marks and the Latin-1 signs × and ÷ are not letters and stay unknown.
ROMANIZED_RANGES: tuple[tuple[int, int], ...] = (
    (0x0041, 0x005A),
    (0x0061, 0x007A),
    (0x00C0, 0x00D6),
    (0x00D8, 0x00F6),
    (0x00F8, 0x024F),
    (0x1E00, 0x1EFF),
)

NATIVE_INDEPENDENT_VOWELS: dict[str, str] = {
    "अ": "a",
    "आ": "ā",
    "इ": "i",
    "ई": "ī",
    "उ": "u",
    "ऊ": "ū",
    "ऋ": "ṛ",
    "ॠ": "ṝ",
    "ऌ": "ḷ",
    "ॡ": "ḹ",
    "ए": "e",
    "ऐ": "ai",
    "ओ": "o",
    "औ": "au",
}

NATIVE_VOWEL_SIGNS: dict[str, str] = {
    "ा": "ā",
    "ि": "i",
    "ी": "ī",
    "ु": "u",
    "ू": "ū",
    "ृ": "ṛ",
    "ॄ": "ṝ",
    "ॢ": "ḷ",
    "ॣ": "ḹ",
    "े": "e",
    "ै": "ai",
    "ो": "o",
    "ौ": "au",
}

NATIVE_CONSONANTS: dict[str, str] = {
    "क": "k",
    "ख": "kh",
    "ग": "g",
    "घ": "gh",
    "ङ": "ṅ",
    "च": "c",
    "छ": "ch",
    "ज": "j",
    "झ": "jh",
    "ञ": "ñ",
    "ट": "ṭ",
    "ठ": "ṭh",
    "ड": "ḍ",
    "ढ": "ḍh",
    "ण": "ṇ",
    "त": "t",
    "थ": "th",
    "द": "d",
    "ध": "dh",
    "न": "n",
    "प": "p",
    "फ": "ph",
    "ब": "b",
    "भ": "bh",
    "म": "m",
    "य": "y",
    "र": "r",
    "ल": "l",
    "व": "v",
    "श": "ś",
    "ष": "ṣ",
    "स": "s",
    "ह": "h",
    "ळ": "ḻ",
    # Nukta letters, always held in decomposed (NFC) form.
    "\u0915\u093c": "q",
    "\u0916\u093c": "ḵh",
    "\u0917\u093c": "ġ",
    "\u091c\u093c": "z",
    "\u0921\u093c": "ṛ",
    "\u0922\u093c": "ṛh",
    "\u092b\u093c": "f",
    "\u092f\u093c": "ẏ",
}

NATIVE_INHERENT_VOWEL: str = "a"
NATIVE_VIRAMA: str = "\u094d"
NATIVE_NUKTA: str = "\u093c"

NATIVE_MARKS: dict[str, str] = {
    "ं": "ṃ",
    "ः": "ḥ",
    "ँ": "m̐",
    "ऽ": "'",
    "ॐ": "oṃ",
    "।": "|",
    "॥": "||",
    "०": "0",
    "१": "1",
    "२": "2",
    "३": "3",
    "४": "4",
    "५": "5",
    "६": "6",
    "७": "7",
    "८": "8",
    "९": "9",
}

# Vedic accents and joiners carry no phonemic content for matching.
DROPPED_CHARACTERS: frozenset[str] = frozenset({"\u0951", "\u0952", "\u1cda", "\u200c", "\u200d"})

# Spelling variants folded onto a single IAST letter.
ROMANIZED_FOLDS: dict[str, str] = {
    "ṁ": "ṃ",
    "ṙ": "ṛ",
    "ḿ": "m̐",
}

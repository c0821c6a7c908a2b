"""Script detection and normalization for romanized and native input."""

from .detection import char_script, detect_script, is_mixed_script
from .normalizer import is_equivalent_across_scripts, normalize, normalize_many
from .transliteration import canonicalize, transliterate_native

__all__ = [
    "canonicalize",
    "char_script",
    "detect_script",
    "is_equivalent_across_scripts",
    "is_mixed_script",
    "normalize",
    "normalize_many",
    "transliterate_native",
]

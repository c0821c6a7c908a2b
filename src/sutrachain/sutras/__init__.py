"""Bundled sūtra predicate families and caller-facing wrappers."""

from .registration import build_default_registry, default_engine, default_registry, register_all
from .wrappers import analyze_pragrhya, classify_ashishya, determine_optional_number, is_pragrhya, prevents_sandhi

__all__ = [
    "analyze_pragrhya",
    "build_default_registry",
    "classify_ashishya",
    "default_engine",
    "default_registry",
    "determine_optional_number",
    "is_pragrhya",
    "prevents_sandhi",
    "register_all",
]

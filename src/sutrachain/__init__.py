"""sutrachain package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from sutrachain.engine import CompositionEngine
from sutrachain.model import ClassificationResult, Context, Decisive, Modifier, NoOpinion, Token
from sutrachain.rules import RulePredicate, RuleRegistry, rule
from sutrachain.script import is_equivalent_across_scripts, normalize
from sutrachain.sutras import build_default_registry, default_engine

__all__ = [
    "ClassificationResult",
    "CompositionEngine",
    "Context",
    "Decisive",
    "Modifier",
    "NoOpinion",
    "RulePredicate",
    "RuleRegistry",
    "Token",
    "__version__",
    "build_default_registry",
    "default_engine",
    "is_equivalent_across_scripts",
    "normalize",
    "rule",
]

try:
    __version__ = version("sutrachain")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

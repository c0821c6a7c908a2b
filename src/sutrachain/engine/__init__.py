"""Composition engine and its strategies."""

from .composition import EMPTY_CHAIN_REASON, INVALID_TOKEN_REASON, CompositionEngine
from .confidence import accumulated_confidence
from .invoke import invoke_predicate
from .strategies import STRATEGY_REGISTRY, run_accumulate_all, run_short_circuit_or

__all__ = [
    "EMPTY_CHAIN_REASON",
    "INVALID_TOKEN_REASON",
    "STRATEGY_REGISTRY",
    "CompositionEngine",
    "accumulated_confidence",
    "invoke_predicate",
    "run_accumulate_all",
    "run_short_circuit_or",
]

"""Registration of the bundled families into a rule registry."""

from __future__ import annotations

from functools import lru_cache

from sutrachain.config import SutraChainConfig
from sutrachain.constants.families import FAMILY_ASHISHYA, FAMILY_OPTIONAL_NUMBER, FAMILY_PRAGRHYA
from sutrachain.engine import CompositionEngine
from sutrachain.rules import RuleRegistry
from sutrachain.sutras import ashishya, optional_number, pragrhya


def register_all(registry: RuleRegistry) -> RuleRegistry:
    """Append every bundled predicate to *registry* in sūtra order."""
    registry.register_all(FAMILY_PRAGRHYA, pragrhya.PREDICATES)
    registry.register_all(FAMILY_ASHISHYA, ashishya.PREDICATES)
    registry.register_all(FAMILY_OPTIONAL_NUMBER, optional_number.PREDICATES)
    return registry


def build_default_registry() -> RuleRegistry:
    """Return a new, sealed registry holding the bundled families."""
    registry = register_all(RuleRegistry())
    registry.seal()
    return registry


@lru_cache(maxsize=1)
def default_registry() -> RuleRegistry:
    """Process-wide sealed registry shared by the wrapper functions."""
    return build_default_registry()


def default_engine(config: SutraChainConfig | None = None) -> CompositionEngine:
    """Engine over :func:`default_registry` with *config* or the defaults."""
    if config is None:
        return _default_engine()
    return CompositionEngine(default_registry(), config)


@lru_cache(maxsize=1)
def _default_engine() -> CompositionEngine:
    return CompositionEngine(default_registry())

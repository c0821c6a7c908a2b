"""Config data model for sutrachain evaluations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from sutrachain.constants.families import (
    DEFAULT_CONFIDENCE_STEP,
    DEFAULT_FAMILY_STRATEGIES,
    DEFAULT_STRATEGY,
)


@dataclass(frozen=True)
class FamilyConfig:
    """Per-family settings."""

    strategy: str


def _default_families() -> Mapping[str, FamilyConfig]:
    return MappingProxyType(
        {family: FamilyConfig(strategy=strategy) for family, strategy in DEFAULT_FAMILY_STRATEGIES.items()}
    )


@dataclass(frozen=True)
class SutraChainConfig:
    """Resolved engine config."""

    default_strategy: str = DEFAULT_STRATEGY
    confidence_step: float = DEFAULT_CONFIDENCE_STEP
    families: Mapping[str, FamilyConfig] = field(default_factory=_default_families)
    disabled_rules: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "families", MappingProxyType(dict(self.families)))
        object.__setattr__(self, "disabled_rules", frozenset(self.disabled_rules))

    def strategy_for(self, family: str) -> str:
        """Strategy configured for *family*, falling back to ``default_strategy``."""
        family_config = self.families.get(family)
        if family_config is None:
            return self.default_strategy
        return family_config.strategy

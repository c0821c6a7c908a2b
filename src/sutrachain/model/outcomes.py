"""Predicate outcomes and the cumulative progress view.

A predicate returns exactly one of :class:`NoOpinion`, :class:`Decisive`
or :class:`Modifier`. Predicates never see each other directly; the
engine may hand them a :class:`ChainProgress` snapshot of what the chain
has decided so far.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar

from sutrachain.constants.reporting import REASON_NO_OPINION
from sutrachain.types import EffectValue, OutcomeKind


@dataclass(frozen=True)
class NoOpinion:
    """The predicate does not apply to this token and context."""

    reason_code: str = REASON_NO_OPINION

    kind: ClassVar[OutcomeKind] = "no_opinion"


@dataclass(frozen=True)
class Decisive:
    """The predicate asserts a definite answer."""

    applies: bool
    reason_code: str
    confidence: float = 1.0

    kind: ClassVar[OutcomeKind] = "decisive"

    def __post_init__(self) -> None:
        if not isinstance(self.applies, bool):
            raise TypeError(f"Decisive.applies must be a bool, got {type(self.applies).__name__}")
        if not isinstance(self.reason_code, str) or not self.reason_code.strip():
            raise ValueError("Decisive.reason_code must be a non-empty string")
        if isinstance(self.confidence, bool) or not isinstance(self.confidence, (int, float)):
            raise TypeError(f"Decisive.confidence must be a number, got {self.confidence!r}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Decisive.confidence must be within [0, 1], got {self.confidence!r}")


@dataclass(frozen=True)
class Modifier:
    """Side-effect flags merged into the result whoever decides membership."""

    effects: Mapping[str, EffectValue] = field(hash=False)
    reason_code: str = "modifier"

    kind: ClassVar[OutcomeKind] = "modifier"

    def __post_init__(self) -> None:
        if not isinstance(self.effects, Mapping) or not self.effects:
            raise ValueError("Modifier.effects must be a non-empty mapping")
        object.__setattr__(self, "effects", MappingProxyType(dict(self.effects)))


type Outcome = NoOpinion | Decisive | Modifier

OUTCOME_TYPES: tuple[type, ...] = (NoOpinion, Decisive, Modifier)


@dataclass(frozen=True)
class ChainProgress:
    """Read-only snapshot of the chain's cumulative decision so far."""

    family: str
    applies: bool = False
    fired_rule_ids: tuple[str, ...] = ()
    effects: Mapping[str, EffectValue] = field(default_factory=lambda: MappingProxyType({}), hash=False)

"""Evaluation trace and the stable classification result contract."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from sutrachain.constants.reporting import REASON_PREDICATE_FAILURE
from sutrachain.model.entities import Token
from sutrachain.model.outcomes import Decisive, Modifier, NoOpinion, Outcome
from sutrachain.types import EffectValue, JsonObject, OutcomeKind


def _frozen_effects(effects: Mapping[str, EffectValue]) -> Mapping[str, EffectValue]:
    return MappingProxyType(dict(effects))


@dataclass(frozen=True)
class TraceEntry:
    """One predicate's recorded outcome within an evaluation."""

    rule_id: str
    outcome: Outcome
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def fired(self) -> bool:
        return isinstance(self.outcome, Decisive) and self.outcome.applies

    @property
    def reason(self) -> str:
        if self.error is not None:
            return f"{self.rule_id}:{REASON_PREDICATE_FAILURE}:{self.error}"
        return f"{self.rule_id}:{self.outcome.reason_code}"


@dataclass(frozen=True)
class EvaluationTrace:
    """Internal decision trace produced by a composition strategy."""

    family: str
    strategy: str
    token: Token
    entries: tuple[TraceEntry, ...] = ()
    confidence: float = 0.0
    effects: Mapping[str, EffectValue] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    engine_reasons: tuple[str, ...] = ()

    @property
    def fired(self) -> tuple[TraceEntry, ...]:
        return tuple(entry for entry in self.entries if entry.fired)

    @property
    def applies(self) -> bool:
        return any(entry.fired for entry in self.entries)


@dataclass(frozen=True)
class ClassificationResult:
    """Stable output of one chain evaluation.

    Every field is always present: a no-match carries empty
    ``fired_rule_ids`` and the diagnostic ``reasons``, never ``None``.
    """

    family: str
    token: Token
    applies: bool
    fired_rule_ids: tuple[str, ...]
    reasons: tuple[str, ...]
    confidence: float
    effects: Mapping[str, EffectValue] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "effects", _frozen_effects(self.effects))

    @property
    def suppress_phonetic(self) -> bool:
        return self.effects.get("suppress_phonetic") is True

    def to_dict(self) -> JsonObject:
        return {
            "family": self.family,
            "input": self.token.raw,
            "canonical": self.token.text,
            "script": self.token.script,
            "applies": self.applies,
            "fired_rule_ids": list(self.fired_rule_ids),
            "reasons": list(self.reasons),
            "confidence": self.confidence,
            "effects": dict(self.effects),
        }


@dataclass(frozen=True)
class RuleVerdict:
    """Independent verdict of one predicate, used by detailed analysis."""

    rule_id: str
    kind: OutcomeKind
    applies: bool
    reason: str
    confidence: float = 0.0
    effects: Mapping[str, EffectValue] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    error: str | None = None

    @classmethod
    def from_entry(cls, entry: TraceEntry) -> RuleVerdict:
        outcome = entry.outcome
        if isinstance(outcome, Decisive):
            return cls(
                rule_id=entry.rule_id,
                kind=outcome.kind,
                applies=outcome.applies,
                reason=entry.reason,
                confidence=float(outcome.confidence),
            )
        if isinstance(outcome, Modifier):
            return cls(
                rule_id=entry.rule_id,
                kind=outcome.kind,
                applies=False,
                reason=entry.reason,
                effects=_frozen_effects(outcome.effects),
            )
        assert isinstance(outcome, NoOpinion)
        return cls(
            rule_id=entry.rule_id,
            kind=outcome.kind,
            applies=False,
            reason=entry.reason,
            error=entry.error,
        )

    def to_dict(self) -> JsonObject:
        return {
            "rule_id": self.rule_id,
            "kind": self.kind,
            "applies": self.applies,
            "reason": self.reason,
            "confidence": self.confidence,
            "effects": dict(self.effects),
            "error": self.error,
        }


@dataclass(frozen=True)
class RuleAnalysis:
    """Composed result plus every predicate's independent verdict."""

    result: ClassificationResult
    verdicts: tuple[RuleVerdict, ...]

    @property
    def applicable_rule_ids(self) -> tuple[str, ...]:
        return tuple(verdict.rule_id for verdict in self.verdicts if verdict.applies)

    def to_dict(self) -> JsonObject:
        payload = self.result.to_dict()
        payload["rules"] = [verdict.to_dict() for verdict in self.verdicts]
        return payload

"""Composition strategies.

Maps strategy names to their implementation functions. A family can only
be configured with a registered strategy.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from sutrachain.constants.families import (
    DEFAULT_CONFIDENCE_STEP,
    DEFAULT_EFFECTS,
    STRATEGY_ACCUMULATE_ALL,
    STRATEGY_SHORT_CIRCUIT_OR,
)
from sutrachain.engine.confidence import accumulated_confidence, decisive_confidence
from sutrachain.engine.invoke import invoke_predicate
from sutrachain.model import ChainProgress, Context, Decisive, EvaluationTrace, Modifier, Token, TraceEntry
from sutrachain.rules import RulePredicate
from sutrachain.types import EffectValue

type StrategyFn = Callable[..., EvaluationTrace]


def _progress(family: str, entries: list[TraceEntry], effects: dict[str, EffectValue]) -> ChainProgress:
    fired = tuple(entry.rule_id for entry in entries if entry.fired)
    return ChainProgress(
        family=family,
        applies=bool(fired),
        fired_rule_ids=fired,
        effects=MappingProxyType(dict(effects)),
    )


def _step(
    predicate: RulePredicate,
    token: Token,
    context: Context,
    entries: list[TraceEntry],
    effects: dict[str, EffectValue],
) -> TraceEntry:
    """Invoke one predicate, record it, and merge any modifier effects."""
    progress = _progress(predicate.family, entries, effects) if predicate.accepts_progress else None
    entry = invoke_predicate(predicate, token, context, progress)
    entries.append(entry)
    if isinstance(entry.outcome, Modifier):
        effects.update(entry.outcome.effects)
    return entry


def run_short_circuit_or(
    *,
    family: str,
    token: Token,
    context: Context,
    predicates: tuple[RulePredicate, ...],
    confidence_step: float = DEFAULT_CONFIDENCE_STEP,
) -> EvaluationTrace:
    """Stop at the first ``Decisive(True)``; rejections never terminate the chain.

    Modifier effects seen before termination are kept.
    """
    entries: list[TraceEntry] = []
    effects: dict[str, EffectValue] = dict(DEFAULT_EFFECTS)
    confidence = 0.0
    for predicate in predicates:
        entry = _step(predicate, token, context, entries, effects)
        if entry.fired:
            assert isinstance(entry.outcome, Decisive)
            confidence = decisive_confidence(entry.outcome.confidence)
            break
    return EvaluationTrace(
        family=family,
        strategy=STRATEGY_SHORT_CIRCUIT_OR,
        token=token,
        entries=tuple(entries),
        confidence=confidence,
        effects=MappingProxyType(effects),
    )


def run_accumulate_all(
    *,
    family: str,
    token: Token,
    context: Context,
    predicates: tuple[RulePredicate, ...],
    confidence_step: float = DEFAULT_CONFIDENCE_STEP,
) -> EvaluationTrace:
    """Evaluate every predicate and merge effects, last registered wins per flag."""
    entries: list[TraceEntry] = []
    effects: dict[str, EffectValue] = dict(DEFAULT_EFFECTS)
    for predicate in predicates:
        _step(predicate, token, context, entries, effects)

    contributing = [
        float(entry.outcome.confidence)
        for entry in entries
        if entry.fired and isinstance(entry.outcome, Decisive)
    ]
    return EvaluationTrace(
        family=family,
        strategy=STRATEGY_ACCUMULATE_ALL,
        token=token,
        entries=tuple(entries),
        confidence=accumulated_confidence(contributing, step=confidence_step),
        effects=MappingProxyType(effects),
    )


STRATEGY_REGISTRY: Mapping[str, StrategyFn] = MappingProxyType(
    {
        STRATEGY_SHORT_CIRCUIT_OR: run_short_circuit_or,
        STRATEGY_ACCUMULATE_ALL: run_accumulate_all,
    }
)

"""Projection of an evaluation trace into the stable result contract."""

from __future__ import annotations

from collections.abc import Sequence

from sutrachain.constants.families import CONFIDENCE_PRECISION, DEFAULT_EFFECTS
from sutrachain.constants.reporting import SCHEMA_VERSION
from sutrachain.model import ClassificationResult, EvaluationTrace, Modifier, RuleAnalysis, TraceEntry
from sutrachain.types import JsonObject


def _explains_positive(entry: TraceEntry) -> bool:
    return entry.fired or entry.failed or isinstance(entry.outcome, Modifier)


def build_result(trace: EvaluationTrace) -> ClassificationResult:
    """Build a :class:`ClassificationResult` from *trace*.

    On a match, ``reasons`` lists the fired, modifier and failed entries in
    chain order. On a no-match it lists the engine reasons followed by every
    recorded entry, and ``confidence`` is ``0.0``.
    """
    applies = trace.applies
    if applies:
        reasons = tuple(entry.reason for entry in trace.entries if _explains_positive(entry))
        confidence = round(trace.confidence, CONFIDENCE_PRECISION)
    else:
        reasons = (*trace.engine_reasons, *(entry.reason for entry in trace.entries))
        confidence = 0.0

    return ClassificationResult(
        family=trace.family,
        token=trace.token,
        applies=applies,
        fired_rule_ids=tuple(entry.rule_id for entry in trace.fired),
        reasons=reasons,
        confidence=confidence,
        effects={**DEFAULT_EFFECTS, **trace.effects},
    )


def build_payload(results: Sequence[ClassificationResult | RuleAnalysis]) -> JsonObject:
    """Wrap serialized results in the versioned JSON document."""
    return {
        "schema_version": SCHEMA_VERSION,
        "results": [result.to_dict() for result in results],
    }

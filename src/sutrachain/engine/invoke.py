"""Isolated invocation of a single predicate."""

from __future__ import annotations

import logging

from sutrachain.constants.reporting import REASON_PREDICATE_FAILURE
from sutrachain.model import OUTCOME_TYPES, ChainProgress, Context, NoOpinion, Token, TraceEntry
from sutrachain.rules import RulePredicate

logger = logging.getLogger(__name__)

INVALID_OUTCOME_ERROR: str = "InvalidOutcome"


def invoke_predicate(
    predicate: RulePredicate,
    token: Token,
    context: Context,
    progress: ChainProgress | None = None,
) -> TraceEntry:
    """Run *predicate* and record its outcome.

    An exception or a return value that is not an Outcome is demoted to
    ``NoOpinion`` and the entry carries the error name.
    """
    try:
        outcome = predicate(token, context, progress)
    except Exception as exc:
        logger.warning(
            "Predicate %s in family %s raised %s: %s",
            predicate.rule_id,
            predicate.family,
            type(exc).__name__,
            exc,
        )
        return TraceEntry(
            rule_id=predicate.rule_id,
            outcome=NoOpinion(REASON_PREDICATE_FAILURE),
            error=type(exc).__name__,
        )

    if not isinstance(outcome, OUTCOME_TYPES):
        logger.warning(
            "Predicate %s in family %s returned %s instead of an outcome",
            predicate.rule_id,
            predicate.family,
            type(outcome).__name__,
        )
        return TraceEntry(
            rule_id=predicate.rule_id,
            outcome=NoOpinion(REASON_PREDICATE_FAILURE),
            error=INVALID_OUTCOME_ERROR,
        )
    return TraceEntry(rule_id=predicate.rule_id, outcome=outcome)

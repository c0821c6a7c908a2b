"""Core data models for sutrachain."""

from .entities import EMPTY_CONTEXT, INVALID_TOKEN, Context, Token
from .outcomes import OUTCOME_TYPES, ChainProgress, Decisive, Modifier, NoOpinion, Outcome
from .results import ClassificationResult, EvaluationTrace, RuleAnalysis, RuleVerdict, TraceEntry

__all__ = [
    "EMPTY_CONTEXT",
    "INVALID_TOKEN",
    "OUTCOME_TYPES",
    "ChainProgress",
    "ClassificationResult",
    "Context",
    "Decisive",
    "EvaluationTrace",
    "Modifier",
    "NoOpinion",
    "Outcome",
    "RuleAnalysis",
    "RuleVerdict",
    "Token",
    "TraceEntry",
]

"""Shared type aliases for sutrachain."""

from .common import (
    ContextScalar,
    ContextValue,
    EffectValue,
    JsonObject,
    JsonScalar,
    JsonValue,
    OutcomeKind,
    ScriptTag,
)

__all__ = [
    "ContextScalar",
    "ContextValue",
    "EffectValue",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutcomeKind",
    "ScriptTag",
]

"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal

type ScriptTag = Literal["romanized", "native", "unknown"]
type OutcomeKind = Literal["no_opinion", "decisive", "modifier"]

type ContextScalar = str | int | float | bool | None
type ContextValue = ContextScalar | tuple[ContextScalar, ...]
type EffectValue = str | int | float | bool | None

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]

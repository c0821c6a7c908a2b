"""Token and context entities passed into rule predicates."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from sutrachain.types import ContextValue, ScriptTag


@dataclass(frozen=True)
class Token:
    """A normalized word-form.

    ``text`` holds the canonical romanized (IAST) spelling. Equality and
    hashing use only ``text`` and ``valid``, so the same phoneme sequence
    spelled in either script compares equal.
    """

    text: str
    script: ScriptTag = field(default="romanized", compare=False)
    raw: str = field(default="", compare=False, repr=False)
    valid: bool = True

    @property
    def is_valid(self) -> bool:
        return self.valid and bool(self.text)

    def ends_with(self, *suffixes: str) -> bool:
        """Return True when the canonical text ends with any suffix."""
        return self.is_valid and self.text.endswith(suffixes)

    def is_one_of(self, forms: frozenset[str] | set[str] | tuple[str, ...]) -> bool:
        """Return True when the canonical text is exactly one of *forms*."""
        return self.is_valid and self.text in forms

    def __str__(self) -> str:
        return self.text


INVALID_TOKEN: Token = Token(text="", script="unknown", raw="", valid=False)


def _freeze_value(value: Any) -> ContextValue:
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(value)
    return value


class Context(Mapping[str, ContextValue]):
    """Immutable key/value bag supplied by the caller per evaluation.

    Missing keys read as ``None``; the engine never interprets keys itself.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        merged: dict[str, ContextValue] = {}
        for source in (data or {}, kwargs):
            for key, value in source.items():
                merged[str(key)] = _freeze_value(value)
        self._data: Mapping[str, ContextValue] = MappingProxyType(merged)

    @classmethod
    def coerce(cls, value: Context | Mapping[str, Any] | None) -> Context:
        """Return *value* as a Context; anything that is not a mapping is empty."""
        if isinstance(value, Context):
            return value
        if isinstance(value, Mapping):
            return cls(value)
        return EMPTY_CONTEXT

    def __getitem__(self, key: str) -> ContextValue:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: str, default: ContextValue = None) -> ContextValue:  # type: ignore[override]
        return self._data.get(key, default)

    def flag(self, key: str) -> bool:
        """Return True only when the key is explicitly set to ``True``."""
        return self._data.get(key) is True

    def text(self, key: str) -> str | None:
        """Return a stripped, lowercased string value, or None."""
        value = self._data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip().lower()
        return None

    def with_values(self, **updates: Any) -> Context:
        """Return a new Context with *updates* applied."""
        return Context(dict(self._data), **updates)

    def __repr__(self) -> str:
        return f"Context({dict(self._data)!r})"


EMPTY_CONTEXT: Context = Context()

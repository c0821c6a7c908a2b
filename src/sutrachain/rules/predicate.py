"""Rule Predicate: the atomic, named unit of a rule chain."""

from __future__ import annotations

import inspect
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from sutrachain.constants.validation import RULE_ID_MAX_LENGTH
from sutrachain.exceptions import ConfigError
from sutrachain.model import ChainProgress, Context, Outcome, Token

_RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.\-]*$")

type PredicateFn = Callable[..., Outcome]


def _positional_arity(fn: PredicateFn) -> int | None:
    """Return the number of positional parameters, or None for ``*args``."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 2
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


@dataclass(frozen=True)
class RulePredicate:
    """A named, versioned ``(token, context[, progress]) -> Outcome`` function.

    ``context_keys`` documents which context keys the predicate reads.
    Predicates taking a third positional argument receive the chain's
    cumulative :class:`ChainProgress`.
    """

    rule_id: str
    family: str
    evaluate: PredicateFn = field(compare=False, repr=False)
    version: int = 1
    description: str = ""
    context_keys: tuple[str, ...] = ()
    accepts_progress: bool = field(init=False, default=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.rule_id, str) or not self.rule_id.strip():
            raise ConfigError("Predicate rule_id must be a non-empty string")
        if len(self.rule_id) > RULE_ID_MAX_LENGTH or not _RULE_ID_PATTERN.match(self.rule_id):
            raise ConfigError(f"Predicate rule_id {self.rule_id!r} contains invalid characters")
        if not isinstance(self.family, str) or not self.family.strip():
            raise ConfigError(f"Predicate {self.rule_id!r} must declare a non-empty family")
        if not callable(self.evaluate):
            raise ConfigError(f"Predicate {self.rule_id!r} evaluate must be callable")
        if isinstance(self.version, bool) or not isinstance(self.version, int) or self.version < 1:
            raise ConfigError(f"Predicate {self.rule_id!r} version must be a positive integer")

        arity = _positional_arity(self.evaluate)
        if arity is not None and arity < 2:
            raise ConfigError(f"Predicate {self.rule_id!r} must accept (token, context)")
        object.__setattr__(self, "context_keys", tuple(self.context_keys))
        object.__setattr__(self, "accepts_progress", arity is None or arity >= 3)

    def __call__(self, token: Token, context: Context, progress: ChainProgress | None = None) -> Outcome:
        if self.accepts_progress:
            return self.evaluate(token, context, progress or ChainProgress(family=self.family))
        return self.evaluate(token, context)


def rule(
    rule_id: str,
    *,
    family: str,
    version: int = 1,
    description: str = "",
    context_keys: tuple[str, ...] = (),
) -> Callable[[PredicateFn], RulePredicate]:
    """Decorator turning a plain function into a :class:`RulePredicate`.

    The description defaults to the first line of the function docstring.
    """

    def decorate(fn: PredicateFn) -> RulePredicate:
        doc = inspect.getdoc(fn) or ""
        return RulePredicate(
            rule_id=rule_id,
            family=family,
            evaluate=fn,
            version=version,
            description=description or (doc.splitlines()[0] if doc else ""),
            context_keys=context_keys,
        )

    return decorate

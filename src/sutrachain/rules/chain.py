"""Rule Chain: an ordered, append-only list of predicates for one family."""

from __future__ import annotations

from collections.abc import Iterator

from sutrachain.exceptions import ConfigError, DuplicateRuleIdError, RegistrySealedError
from sutrachain.rules.predicate import RulePredicate


class RuleChain:
    """Append-only predicate sequence where order is the only precedence.

    Every append replaces the stored tuple, so a snapshot taken from
    :attr:`predicates` never changes underneath its holder.
    """

    __slots__ = ("_family", "_predicates", "_sealed")

    def __init__(self, family: str) -> None:
        self._family = family
        self._predicates: tuple[RulePredicate, ...] = ()
        self._sealed = False

    @property
    def family(self) -> str:
        return self._family

    @property
    def predicates(self) -> tuple[RulePredicate, ...]:
        return self._predicates

    @property
    def rule_ids(self) -> tuple[str, ...]:
        return tuple(predicate.rule_id for predicate in self._predicates)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def append(self, predicate: RulePredicate) -> None:
        """Append *predicate*, failing fast on family mismatch or duplicate id."""
        if self._sealed:
            raise RegistrySealedError(
                f"Cannot register '{predicate.rule_id}': family '{self._family}' is sealed"
            )
        if predicate.family != self._family:
            raise ConfigError(
                f"Predicate '{predicate.rule_id}' declares family '{predicate.family}' "
                f"but was registered into '{self._family}'"
            )
        if predicate.rule_id in self:
            raise DuplicateRuleIdError(self._family, predicate.rule_id)
        self._predicates = (*self._predicates, predicate)

    def seal(self) -> None:
        self._sealed = True

    def select(
        self,
        rule_ids: frozenset[str] | None = None,
        exclude: frozenset[str] = frozenset(),
    ) -> tuple[RulePredicate, ...]:
        """Return the predicates kept by the filters, in registration order."""
        return tuple(
            predicate
            for predicate in self._predicates
            if (rule_ids is None or predicate.rule_id in rule_ids) and predicate.rule_id not in exclude
        )

    def __contains__(self, rule_id: object) -> bool:
        return any(predicate.rule_id == rule_id for predicate in self._predicates)

    def __iter__(self) -> Iterator[RulePredicate]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)

    def __repr__(self) -> str:
        return f"RuleChain(family={self._family!r}, rule_ids={self.rule_ids!r}, sealed={self._sealed})"

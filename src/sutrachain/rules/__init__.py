"""Rule predicates, chains, and the family registry."""

from .chain import RuleChain
from .predicate import PredicateFn, RulePredicate, rule
from .registry import RuleRegistry

__all__ = ["PredicateFn", "RuleChain", "RulePredicate", "RuleRegistry", "rule"]

"""Shared pytest fixtures for rule-chain tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from sutrachain.engine import CompositionEngine
from sutrachain.model import Context, Outcome, Token
from sutrachain.rules import PredicateFn, RulePredicate, RuleRegistry
from sutrachain.sutras import build_default_registry

TEST_FAMILY: str = "test_family"

type PredicateFactory = Callable[..., RulePredicate]


def _returning(outcome: Outcome) -> PredicateFn:
    def evaluate(token: Token, context: Context) -> Outcome:
        return outcome

    return evaluate


def _raising(exc: Exception) -> PredicateFn:
    def evaluate(token: Token, context: Context) -> Outcome:
        raise exc

    return evaluate


@pytest.fixture()
def registry() -> RuleRegistry:
    """Return an empty, unsealed registry."""
    return RuleRegistry()


@pytest.fixture()
def make_predicate() -> PredicateFactory:
    """Build predicates that return a fixed outcome or raise a fixed error."""

    def factory(
        rule_id: str,
        outcome: Outcome | None = None,
        *,
        raises: Exception | None = None,
        family: str = TEST_FAMILY,
        evaluate: PredicateFn | None = None,
        version: int = 1,
    ) -> RulePredicate:
        if evaluate is None:
            evaluate = _raising(raises) if raises is not None else _returning(outcome)  # type: ignore[arg-type]
        return RulePredicate(rule_id=rule_id, family=family, evaluate=evaluate, version=version)

    return factory


@pytest.fixture(scope="session")
def default_registry() -> RuleRegistry:
    """Return a sealed registry with the bundled families."""
    return build_default_registry()


@pytest.fixture(scope="session")
def engine(default_registry: RuleRegistry) -> CompositionEngine:
    """Return an engine over the bundled families with default config."""
    return CompositionEngine(default_registry)


@pytest.fixture()
def family() -> str:
    """Family name used by hand-built test chains."""
    return TEST_FAMILY

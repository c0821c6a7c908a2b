"""Composition engine: evaluate a family's rule chain against one token.

Precondition: every predicate is registered before the first call to
:meth:`CompositionEngine.evaluate`. The engine keeps no per-call state,
so a sealed registry can be shared by concurrent evaluations without
locks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sutrachain.config import SutraChainConfig
from sutrachain.constants.reporting import ENGINE_REASON_PREFIX, REASON_EMPTY_CHAIN, REASON_INVALID_TOKEN
from sutrachain.engine.invoke import invoke_predicate
from sutrachain.engine.strategies import STRATEGY_REGISTRY
from sutrachain.exceptions import UnknownStrategyError
from sutrachain.model import (
    ChainProgress,
    ClassificationResult,
    Context,
    EvaluationTrace,
    RuleAnalysis,
    RuleVerdict,
    Token,
)
from sutrachain.reporting import build_result
from sutrachain.rules import RulePredicate, RuleRegistry
from sutrachain.script import normalize

logger = logging.getLogger(__name__)

INVALID_TOKEN_REASON: str = f"{ENGINE_REASON_PREFIX}:{REASON_INVALID_TOKEN}"
EMPTY_CHAIN_REASON: str = f"{ENGINE_REASON_PREFIX}:{REASON_EMPTY_CHAIN}"

type RawContext = Context | Mapping[str, Any] | None


def _selected_ids(rule_ids: Iterable[str] | None) -> tuple[str, ...] | None:
    """Materialize a rule id selection; a bare string names a single rule."""
    if rule_ids is None:
        return None
    if isinstance(rule_ids, str):
        return (rule_ids,)
    return tuple(rule_ids)


class CompositionEngine:
    """Evaluate rule chains from *registry* using the strategies in *config*."""

    def __init__(self, registry: RuleRegistry, config: SutraChainConfig | None = None) -> None:
        self._registry = registry
        self._config = config if config is not None else SutraChainConfig()
        configured = {self._config.default_strategy}
        configured.update(family_config.strategy for family_config in self._config.families.values())
        unknown = sorted(name for name in configured if name not in STRATEGY_REGISTRY)
        if unknown:
            raise UnknownStrategyError(f"Unknown composition strategy: {', '.join(unknown)}")

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def config(self) -> SutraChainConfig:
        return self._config

    def strategy_for(self, family: str) -> str:
        return self._config.strategy_for(family)

    def active_predicates(
        self,
        family: str,
        rule_ids: Iterable[str] | None = None,
    ) -> tuple[RulePredicate, ...]:
        """Predicates that take part in an evaluation, in chain order.

        *rule_ids* restricts the chain to the named ids; ``disabled_rules``
        from config always removes ids.
        """
        selected = _selected_ids(rule_ids)
        wanted = frozenset(selected) if selected is not None else None
        return self._registry.chain(family).select(wanted, exclude=self._config.disabled_rules)

    def trace(
        self,
        family: str,
        raw: object,
        context: RawContext = None,
        *,
        rule_ids: Iterable[str] | None = None,
    ) -> EvaluationTrace:
        """Run the family's strategy and return the internal decision trace."""
        token = normalize(raw)
        ctx = Context.coerce(context)
        strategy = self.strategy_for(family)

        if not token.is_valid:
            return EvaluationTrace(
                family=family, strategy=strategy, token=token, engine_reasons=(INVALID_TOKEN_REASON,)
            )

        predicates = self.active_predicates(family, rule_ids)
        if not predicates:
            return EvaluationTrace(
                family=family, strategy=strategy, token=token, engine_reasons=(EMPTY_CHAIN_REASON,)
            )

        trace = STRATEGY_REGISTRY[strategy](
            family=family,
            token=token,
            context=ctx,
            predicates=predicates,
            confidence_step=self._config.confidence_step,
        )
        logger.debug(
            "Evaluated %s in family %s via %s: applies=%s fired=%s",
            token.text,
            family,
            strategy,
            trace.applies,
            ",".join(entry.rule_id for entry in trace.fired) or "-",
        )
        return trace

    def evaluate(
        self,
        family: str,
        raw: object,
        context: RawContext = None,
        *,
        rule_ids: Iterable[str] | None = None,
    ) -> ClassificationResult:
        """Classify *raw* under *family*. Never raises for linguistic input."""
        return build_result(self.trace(family, raw, context, rule_ids=rule_ids))

    def evaluate_many(
        self,
        family: str,
        raws: Iterable[object],
        context: RawContext = None,
        *,
        rule_ids: Iterable[str] | None = None,
    ) -> list[ClassificationResult]:
        """Classify each input in order under one shared context."""
        ctx = Context.coerce(context)
        selected = _selected_ids(rule_ids)
        return [self.evaluate(family, raw, ctx, rule_ids=selected) for raw in raws]

    def analyze(
        self,
        family: str,
        raw: object,
        context: RawContext = None,
        *,
        rule_ids: Iterable[str] | None = None,
    ) -> RuleAnalysis:
        """Return the composed result plus an independent verdict per predicate.

        Every predicate is evaluated in isolation with an empty progress
        view, so the breakdown does not depend on chain order.
        """
        selected = _selected_ids(rule_ids)
        ctx = Context.coerce(context)
        result = self.evaluate(family, raw, ctx, rule_ids=selected)
        token: Token = result.token
        if not token.is_valid:
            return RuleAnalysis(result=result, verdicts=())

        verdicts = tuple(
            RuleVerdict.from_entry(invoke_predicate(predicate, token, ctx, ChainProgress(family=family)))
            for predicate in self.active_predicates(family, selected)
        )
        return RuleAnalysis(result=result, verdicts=verdicts)

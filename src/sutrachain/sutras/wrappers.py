"""Caller-facing wrappers that narrow classification results.

Each wrapper runs the default engine for one family and re-projects the
:class:`ClassificationResult` into the smaller shape its callers expect.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sutrachain.constants.families import FAMILY_ASHISHYA, FAMILY_OPTIONAL_NUMBER, FAMILY_PRAGRHYA
from sutrachain.model import Context
from sutrachain.script import normalize
from sutrachain.sutras.lexicon import NUMBER_DUAL, NUMBER_ORDER, NUMBER_PLURAL, NUMBER_SINGULAR
from sutrachain.sutras.optional_number import (
    EFFECT_ALLOW_PLURAL,
    EFFECT_ENFORCE_DUAL,
    OPTIONAL_NUMBER_GRANTS,
    semantic_number,
)
from sutrachain.sutras.registration import default_engine

type RawContext = Context | Mapping[str, Any] | None


def is_pragrhya(word: object, context: RawContext = None, rule_ids: Iterable[str] | None = None) -> bool:
    """Return True when *word* resists sandhi under any of the selected sūtras."""
    return default_engine().evaluate(FAMILY_PRAGRHYA, word, context, rule_ids=rule_ids).applies


def analyze_pragrhya(word: object, context: RawContext = None) -> dict[str, Any]:
    """Per-sūtra breakdown of pragṛhya status for *word*."""
    analysis = default_engine().analyze(FAMILY_PRAGRHYA, word, context)
    token = analysis.result.token
    chain = default_engine().registry.get_chain(FAMILY_PRAGRHYA)
    descriptions = {predicate.rule_id: predicate.description for predicate in chain}

    rules: dict[str, dict[str, Any]] = {}
    for verdict in analysis.verdicts:
        entry: dict[str, Any] = {
            "description": descriptions.get(verdict.rule_id, ""),
            "applies": verdict.applies,
            "reason": verdict.reason,
        }
        if verdict.error is not None:
            entry["error"] = verdict.error
        rules[verdict.rule_id] = entry

    return {
        "word": token.raw,
        "canonical": token.text,
        "script": token.script,
        "is_pragrhya": analysis.result.applies,
        "applicable_rules": list(analysis.applicable_rule_ids),
        "analysis": rules,
    }


def prevents_sandhi(first: object, second: object, context: RawContext = None) -> bool:
    """Return True when a pragṛhya *first* word blocks sandhi with *second*."""
    if not normalize(second).is_valid:
        return False
    return is_pragrhya(first, context)


def classify_ashishya(item: object, context: RawContext = None) -> dict[str, Any]:
    """Project an aśiṣya result onto retention and surface flags."""
    result = default_engine().evaluate(FAMILY_ASHISHYA, item, context)
    return {
        "item": result.token.raw,
        "non_elidable": result.applies,
        "logical_presence": result.applies,
        "phonetic_presence": result.applies and not result.suppress_phonetic,
        "fired_rule_ids": list(result.fired_rule_ids),
        "confidence": result.confidence,
        "reasons": list(result.reasons),
    }


def determine_optional_number(term: object, context: RawContext = None) -> dict[str, Any]:
    """Return the grammatical numbers *term* may take under 1.2.58 - 1.2.63."""
    ctx = Context.coerce(context)
    result = default_engine().evaluate(FAMILY_OPTIONAL_NUMBER, term, ctx)
    base = semantic_number(ctx)
    if base not in NUMBER_ORDER:
        base = NUMBER_SINGULAR

    options = {base}
    for rule_id in result.fired_rule_ids:
        options.update(OPTIONAL_NUMBER_GRANTS.get(rule_id, ()))
    if result.effects.get(EFFECT_ENFORCE_DUAL) is True:
        options = {NUMBER_DUAL}
    if result.effects.get(EFFECT_ALLOW_PLURAL) is False:
        options.discard(NUMBER_PLURAL)

    return {
        "term": result.token.raw,
        "semantic_number": base,
        "number_options": [number for number in NUMBER_ORDER if number in options],
        "optional": result.applies and len(options) > 1,
        "fired_rule_ids": list(result.fired_rule_ids),
        "confidence": result.confidence,
    }

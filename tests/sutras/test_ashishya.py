"""Tests for the bundled aśiṣya family (1.2.53 - 1.2.57)."""

from __future__ import annotations

import pytest

from sutrachain.engine import CompositionEngine

ETYMOLOGY_WITHOUT_MEANING = {
    "etymology": "pañcālānāṃ nivāsaḥ",
    "authority_source": "lokavyavahāra",
    "meaning_absent": True,
}


def test_technical_term_without_authority(engine: CompositionEngine) -> None:
    result = engine.evaluate("ashishya", "vṛddhi")

    assert result.fired_rule_ids == ("1.2.53",)
    assert result.reasons == ("1.2.53:technical_designation",)
    assert result.confidence == 0.7


def test_designation_with_authority(engine: CompositionEngine) -> None:
    result = engine.evaluate("ashishya", "ghu", {"designation": "ghu", "authority_source": "aṣṭādhyāyī"})

    assert result.fired_rule_ids == ("1.2.53",)
    assert result.confidence == 0.9


@pytest.mark.parametrize(
    ("context", "applies"),
    [
        ({"elision_type": "lubh"}, True),
        ({"elision_type": "luk", "currency": "obsolete"}, True),
        ({"temporal_context": "vedic"}, True),
        ({"elision_type": "lubh", "currency": "current"}, False),
    ],
    ids=["lubh", "luk-obsolete", "vedic", "still-current"],
)
def test_non_current_lubh(engine: CompositionEngine, context: dict[str, object], applies: bool) -> None:
    result = engine.evaluate("ashishya", "pañcālāḥ", context)

    assert result.applies is applies
    if not applies:
        assert "1.2.54:lubh_form_still_current" in result.reasons


def test_absent_meaning_suppresses_phonetic_presence(engine: CompositionEngine) -> None:
    result = engine.evaluate("ashishya", "pañcālāḥ", ETYMOLOGY_WITHOUT_MEANING)

    assert result.fired_rule_ids == ("1.2.55",)
    assert result.suppress_phonetic is True
    assert result.reasons == ("1.2.55:etymology_meaning_absent", "1.2.55.adarsana:adarsana")


def test_partial_manifestation_keeps_phonetic_presence(engine: CompositionEngine) -> None:
    context = {**ETYMOLOGY_WITHOUT_MEANING, "allow_partial_manifestation": True}

    result = engine.evaluate("ashishya", "pañcālāḥ", context)

    assert result.applies is True
    assert result.suppress_phonetic is False


def test_preservation_overrides_earlier_suppression(engine: CompositionEngine) -> None:
    context = {**ETYMOLOGY_WITHOUT_MEANING, "force_preservation": True}

    result = engine.evaluate("ashishya", "pañcālāḥ", context)

    assert result.suppress_phonetic is False
    assert result.reasons[-1] == "1.2.56.preservation:preservation"


def test_primary_suffix_with_other_authority(engine: CompositionEngine) -> None:
    result = engine.evaluate("ashishya", "kārakaḥ", {"primary_suffix": "ṇvul", "meaning_authority": "loka"})

    assert result.fired_rule_ids == ("1.2.56",)
    assert result.confidence == 0.8


def test_temporal_auxiliary(engine: CompositionEngine) -> None:
    lexical = engine.evaluate("ashishya", "kadā")
    explicit = engine.evaluate("ashishya", "māsaḥ", {"temporal_auxiliary": True})

    assert lexical.fired_rule_ids == ("1.2.57",)
    assert lexical.confidence == 0.75
    assert explicit.confidence == 0.85


def test_several_contributors_reduce_confidence(engine: CompositionEngine) -> None:
    context = {**ETYMOLOGY_WITHOUT_MEANING, "temporal_auxiliary": True}

    result = engine.evaluate("ashishya", "pañcālāḥ", context)

    assert result.fired_rule_ids == ("1.2.55", "1.2.57")
    assert result.confidence == pytest.approx(0.75)


def test_unmarked_item_is_not_ashishya(engine: CompositionEngine) -> None:
    result = engine.evaluate("ashishya", "rāmaḥ")

    assert result.applies is False
    assert result.confidence == 0.0
    assert len(result.reasons) == 7

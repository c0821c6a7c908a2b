"""Tests for the caller-facing wrapper functions."""

from __future__ import annotations

from typing import Any

import pytest

from sutrachain.sutras import (
    analyze_pragrhya,
    classify_ashishya,
    default_engine,
    default_registry,
    determine_optional_number,
    is_pragrhya,
    prevents_sandhi,
)


def test_is_pragrhya_accepts_either_script() -> None:
    assert is_pragrhya("amī") is True
    assert is_pragrhya("अमी") is True
    assert is_pragrhya("rāma") is False
    assert is_pragrhya("") is False


def test_is_pragrhya_with_rule_selection() -> None:
    assert is_pragrhya("amī", rule_ids=["1.1.12"]) is True
    assert is_pragrhya("amī", rule_ids=["1.1.11"]) is False
    assert is_pragrhya("amī", {"number": "dual"}, rule_ids=["1.1.11"]) is True


def test_analyze_pragrhya_breakdown() -> None:
    report = analyze_pragrhya("अमी", {"number": "dual"})

    assert report["word"] == "अमी"
    assert report["canonical"] == "amī"
    assert report["script"] == "native"
    assert report["is_pragrhya"] is True
    assert report["applicable_rules"] == ["1.1.11", "1.1.12"]
    assert len(report["analysis"]) == 9
    assert report["analysis"]["1.1.12"] == {
        "description": "Forms of adas where ī, ū or e follows m (adaso māt).",
        "applies": True,
        "reason": "1.1.12:adas_after_m",
    }
    assert report["analysis"]["1.1.13"]["applies"] is False


def test_analyze_pragrhya_invalid_word() -> None:
    report = analyze_pragrhya("   ")

    assert report["is_pragrhya"] is False
    assert report["analysis"] == {}
    assert report["script"] == "unknown"


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("amī", "atra", True),
        ("rāma", "atra", False),
        ("amī", "", False),
        ("", "atra", False),
    ],
    ids=["pragrhya", "plain", "no-second", "no-first"],
)
def test_prevents_sandhi(first: str, second: str, expected: bool) -> None:
    assert prevents_sandhi(first, second) is expected


def test_classify_ashishya_flags() -> None:
    hidden = classify_ashishya(
        "pañcālāḥ",
        {"etymology": "pañcālānāṃ nivāsaḥ", "authority_source": "loka", "meaning_absent": True},
    )
    plain = classify_ashishya("rāmaḥ")

    assert hidden["non_elidable"] is True
    assert hidden["logical_presence"] is True
    assert hidden["phonetic_presence"] is False
    assert hidden["fired_rule_ids"] == ["1.2.55"]
    assert plain["non_elidable"] is False
    assert plain["phonetic_presence"] is False
    assert plain["confidence"] == 0.0


def test_classify_ashishya_visible_item() -> None:
    report = classify_ashishya("vṛddhi")

    assert report["item"] == "vṛddhi"
    assert report["logical_presence"] is True
    assert report["phonetic_presence"] is True


@pytest.mark.parametrize(
    ("term", "context", "base", "options", "optional"),
    [
        ("brāhmaṇaḥ", {}, "singular", ["singular", "plural"], True),
        ("brāhmaṇāḥ", {"is_class_noun": True, "semantic_number": "plural"}, "plural", ["plural"], False),
        ("āvām", {"semantic_number": "dual"}, "dual", ["dual", "plural"], True),
        ("phalgunyau", {"domain": "nakshatra", "number": "dual"}, "dual", ["dual", "plural"], True),
        ("punarvasū", {"chandas": True, "semantic_number": "dual"}, "dual", ["singular", "dual"], True),
        ("tiṣyapunarvasū", {"domain": "nakshatra", "semantic_number": "plural"}, "plural", ["dual"], False),
        ("rāmaḥ", {"semantic_number": "trial"}, "singular", ["singular"], False),
    ],
    ids=["class-noun", "class-plural", "asmad-dual", "phalguni", "punarvasu", "dvandva", "unknown-number"],
)
def test_determine_optional_number(
    term: str, context: dict[str, Any], base: str, options: list[str], optional: bool
) -> None:
    report = determine_optional_number(term, context)

    assert report["term"] == term
    assert report["semantic_number"] == base
    assert report["number_options"] == options
    assert report["optional"] is optional


def test_default_engine_is_shared_and_sealed() -> None:
    assert default_engine() is default_engine()
    assert default_registry().sealed
    assert default_registry().families == ("pragrhya", "ashishya", "optional_number")


def test_is_pragrhya_accepts_single_rule_id_string() -> None:
    assert is_pragrhya("amī", rule_ids="1.1.12") is True
    assert is_pragrhya("amī", rule_ids="1.1.11") is False

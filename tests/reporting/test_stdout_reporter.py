"""Tests for the human-readable stdout reporter."""

from __future__ import annotations

from sutrachain.constants.reporting import ANSI_GREEN, ANSI_RESET
from sutrachain.engine import CompositionEngine
from sutrachain.reporting import StdoutReporter


def test_header_counts_matches(engine: CompositionEngine) -> None:
    results = [engine.evaluate("pragrhya", "amī"), engine.evaluate("pragrhya", "rāma")]

    output = StdoutReporter(results, family="pragrhya", strategy="short_circuit_or", color=False).render()

    assert "Family      pragrhya (short_circuit_or)" in output
    assert "Words       2 classified / 1 applies" in output


def test_match_lists_fired_rules_and_reasons(engine: CompositionEngine) -> None:
    result = engine.evaluate("pragrhya", "अमी")

    output = StdoutReporter([result], family="pragrhya", strategy="short_circuit_or", color=False).render()

    assert "अमी (amī)" in output
    assert "APPLIES" in output
    assert "fired     1.1.12" in output
    assert "reasons   1.1.12:adas_after_m" in output
    assert "effects   suppress_phonetic=false" in output
    assert "\033[" not in output


def test_non_match_reasons_only_when_verbose(engine: CompositionEngine) -> None:
    result = engine.evaluate("pragrhya", "rāma")

    quiet = StdoutReporter([result], family="pragrhya", strategy="short_circuit_or", color=False).render()
    verbose = StdoutReporter(
        [result], family="pragrhya", strategy="short_circuit_or", color=False, verbose=True
    ).render()

    assert "reasons" not in quiet
    assert "1.1.11:no_opinion" in verbose


def test_color_wraps_verdict(engine: CompositionEngine) -> None:
    output = StdoutReporter(
        [engine.evaluate("pragrhya", "amī")], family="pragrhya", strategy="short_circuit_or"
    ).render()

    assert f"{ANSI_GREEN}APPLIES{ANSI_RESET}" in output


def test_analysis_renders_verdict_rows(engine: CompositionEngine) -> None:
    analysis = engine.analyze("pragrhya", "amī", {"number": "dual"})

    output = StdoutReporter([analysis], family="pragrhya", strategy="short_circuit_or", color=False).render()

    assert "+ 1.1.11" in output
    assert "+ 1.1.12" in output
    assert "- 1.1.13" in output


def test_invalid_input_has_placeholder_label(engine: CompositionEngine) -> None:
    output = StdoutReporter(
        [engine.evaluate("pragrhya", "")], family="pragrhya", strategy="short_circuit_or", color=False
    ).render()

    assert "<invalid>" in output
    assert "confidence=0.00" in output

"""Tests for tokens, contexts and predicate outcomes."""

from __future__ import annotations

import pytest

from sutrachain.model import EMPTY_CONTEXT, Context, Decisive, Modifier, NoOpinion, Token, TraceEntry


def test_context_reads_missing_keys_as_none() -> None:
    context = Context({"number": "Dual"}, is_particle=True)

    assert context.get("case") is None
    assert context.text("number") == "dual"
    assert context.flag("is_particle") is True
    assert context.flag("number") is False


def test_context_is_immutable_and_freezes_lists() -> None:
    source = {"tags": ["a", "b"]}
    context = Context(source)
    source["tags"].append("c")

    assert context["tags"] == ("a", "b")
    with pytest.raises(TypeError):
        context["tags"] = ()  # type: ignore[index]


def test_context_with_values_returns_new_context() -> None:
    base = Context(number="dual")
    updated = base.with_values(number="plural", case="vocative")

    assert base.text("number") == "dual"
    assert updated.text("number") == "plural"
    assert updated.text("case") == "vocative"


@pytest.mark.parametrize("value", [None, "dual", 3], ids=["none", "string", "int"])
def test_context_coerce_non_mapping_is_empty(value: object) -> None:
    assert Context.coerce(value) is EMPTY_CONTEXT  # type: ignore[arg-type]


def test_token_equality_ignores_script_and_raw() -> None:
    native = Token(text="amī", script="native", raw="अमी")
    romanized = Token(text="amī", script="romanized", raw="amī")

    assert native == romanized
    assert hash(native) == hash(romanized)
    assert native.ends_with("ī", "ū")
    assert not Token(text="", valid=False).ends_with("")


@pytest.mark.parametrize(
    ("kwargs", "error"),
    [
        ({"applies": 1, "reason_code": "x"}, TypeError),
        ({"applies": True, "reason_code": " "}, ValueError),
        ({"applies": True, "reason_code": "x", "confidence": 1.2}, ValueError),
        ({"applies": True, "reason_code": "x", "confidence": True}, TypeError),
    ],
    ids=["non-bool", "blank-reason", "confidence-range", "confidence-bool"],
)
def test_decisive_validates_fields(kwargs: dict[str, object], error: type[Exception]) -> None:
    with pytest.raises(error):
        Decisive(**kwargs)  # type: ignore[arg-type]


def test_modifier_requires_effects() -> None:
    with pytest.raises(ValueError):
        Modifier({})


def test_trace_entry_reason_format() -> None:
    assert TraceEntry("1.1.11", Decisive(True, "dual_ending_i_u_e")).reason == "1.1.11:dual_ending_i_u_e"
    assert TraceEntry("1.1.11", NoOpinion()).reason == "1.1.11:no_opinion"
    failed = TraceEntry("1.1.11", NoOpinion("predicate_failure"), error="KeyError")
    assert failed.failed
    assert failed.reason == "1.1.11:predicate_failure:KeyError"

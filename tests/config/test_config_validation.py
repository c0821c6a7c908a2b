"""Tests for collect-all config validation."""

from __future__ import annotations

from pathlib import Path

from sutrachain.config import validate_config_file
from sutrachain.exceptions.validation import ValidationError, format_errors, sort_errors


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "sutrachain.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def _codes(errors: list[ValidationError]) -> list[str]:
    return [error.code for error in sort_errors(errors)]


def test_valid_config_has_no_errors(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "default_strategy: short_circuit_or\n"
        "confidence_step: 0.1\n"
        "families:\n"
        "  ashishya:\n"
        "    strategy: accumulate_all\n"
        "disabled_rules: [1.1.15]\n",
    )

    assert validate_config_file(tmp_path) == []


def test_absent_default_config_is_valid(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_explicit_missing_config_is_cfg001(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "nope.yaml", config_explicit=True)

    assert _codes(errors) == ["CFG001"]


def test_invalid_yaml_is_cfg002(tmp_path: Path) -> None:
    _write(tmp_path, "families: {pragrhya: [\n")

    assert _codes(validate_config_file(tmp_path)) == ["CFG002"]


def test_non_mapping_is_cfg003(tmp_path: Path) -> None:
    _write(tmp_path, "- short_circuit_or\n")

    assert _codes(validate_config_file(tmp_path)) == ["CFG003"]


def test_unknown_keys_suggest_close_match(tmp_path: Path) -> None:
    _write(tmp_path, "default_stratgy: accumulate_all\nfamilies:\n  pragrhya:\n    strategi: accumulate_all\n")

    errors = sort_errors(validate_config_file(tmp_path))

    assert _codes(errors) == ["CFG004", "CFG004"]
    fields = {error.field: error.hint for error in errors}
    assert fields["default_stratgy"] == "did you mean `default_strategy`?"
    assert fields["families.pragrhya.strategi"] == "did you mean `strategy`?"


def test_collects_every_problem(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "default_strategy: vote\n"
        "confidence_step: 2\n"
        "disabled_rules: 1.1.15\n"
        "families:\n"
        "  pragrhya: fast\n"
        "  ashishya:\n"
        "    strategy: all\n",
    )

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == ["CFG005", "CFG005", "CFG006", "CFG006", "CFG007"]


def test_wrong_step_type_is_cfg005(tmp_path: Path) -> None:
    _write(tmp_path, "confidence_step: yes\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == ["CFG005"]
    assert errors[0].field == "confidence_step"


def test_format_errors_is_sorted_and_readable(tmp_path: Path) -> None:
    path = _write(tmp_path, "confidence_step: 3\nbogus: 1\n")

    text = format_errors(validate_config_file(tmp_path))

    lines = text.splitlines()
    assert lines[0].startswith(f"[CFG004] {path.resolve()} bogus: unknown key `bogus`")
    assert lines[1].startswith("[CFG007]")

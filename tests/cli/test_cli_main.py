"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sutrachain.cli.handlers import parse_context_pairs, parse_context_value
from sutrachain.cli.main import build_parser, main
from sutrachain.exceptions import ConfigError


def test_build_parser_accepts_classify_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        [
            "classify",
            "amī",
            "devī",
            "--family",
            "ashishya",
            "-x",
            "number=dual",
            "-x",
            "is_particle=true",
            "--rule",
            "1.1.11",
            "--root",
            str(tmp_path),
            "--format",
            "json",
            "-o",
            str(tmp_path / "out.json"),
            "--analyze",
        ]
    )

    assert args.command == "classify"
    assert args.words == ["amī", "devī"]
    assert args.family == "ashishya"
    assert args.context == ["number=dual", "is_particle=true"]
    assert args.rule == ["1.1.11"]
    assert args.root == tmp_path
    assert args.output == tmp_path / "out.json"
    assert args.analyze is True


def test_build_parser_defaults() -> None:
    args = build_parser().parse_args(["classify", "amī"])

    assert args.family == "pragrhya"
    assert args.format == "text"
    assert args.rule is None
    assert args.output is None
    assert args.context == []


def test_build_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("False", False), ("2", 2), ("-1", -1), ("dual", "dual"), ("1.5", "1.5")],
)
def test_parse_context_value(raw: str, expected: object) -> None:
    assert parse_context_value(raw) == expected


def test_parse_context_pairs_later_keys_win() -> None:
    assert parse_context_pairs(["number=dual", "number=plural", "case=vocative"]) == {
        "number": "plural",
        "case": "vocative",
    }


@pytest.mark.parametrize("pair", ["number", "=dual"], ids=["no-separator", "empty-key"])
def test_parse_context_pairs_rejects_malformed(pair: str) -> None:
    with pytest.raises(ConfigError, match="key=value"):
        parse_context_pairs([pair])


def test_classify_text_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["classify", "amī", "rāma", "--root", str(tmp_path)])

    out = capsys.readouterr().out
    assert code == 0
    assert "Words       2 classified / 1 applies" in out
    assert "fired     1.1.12" in out


def test_classify_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["classify", "देवी", "--root", str(tmp_path), "-x", "number=dual", "--format", "json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["schema_version"] == "1.0.0"
    result = payload["results"][0]
    assert result["canonical"] == "devī"
    assert result["fired_rule_ids"] == ["1.1.11"]
    assert result["effects"] == {"suppress_phonetic": False}


def test_classify_writes_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "reports" / "results.json"

    code = main(["classify", "amī", "--root", str(tmp_path), "--analyze", "-o", str(out)])

    assert code == 0
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert isinstance(payload, dict)
    assert payload["results"][0]["rules"][1]["rule_id"] == "1.1.12"
    assert "APPLIES" in capsys.readouterr().out


def test_classify_respects_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "sutrachain.yaml").write_text("disabled_rules: ['1.1.12']\n", encoding="utf-8")

    code = main(["classify", "amī", "--root", str(tmp_path), "--format", "json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["results"][0]["applies"] is False


def test_classify_rule_filter(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["classify", "amī", "--root", str(tmp_path), "--rule", "1.1.11", "--format", "json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["results"][0]["applies"] is False


def test_classify_invalid_config_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "sutrachain.yaml").write_text("default_strategy: vote\n", encoding="utf-8")

    code = main(["classify", "amī", "--root", str(tmp_path)])

    assert code == 2
    assert "[CFG006]" in capsys.readouterr().err


def test_classify_malformed_context_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["classify", "amī", "--root", str(tmp_path), "-x", "dual"])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_rules_lists_chain_in_order(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["rules", "--family", "pragrhya"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("pragrhya: 9 rules")
    assert out.index("1.1.11") < out.index("1.1.19")
    assert "fingerprint: " in out


def test_rules_marks_unknown_family(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["rules", "-F", "other"])

    assert code == 0
    assert "other (custom): 0 rules" in capsys.readouterr().out


def test_validate_config_ok(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "sutrachain.yaml").write_text("confidence_step: 0.2\n", encoding="utf-8")

    code = main(["validate-config", "--root", str(tmp_path)])

    assert code == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_missing_explicit_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate-config", "--root", str(tmp_path), "--config", str(tmp_path / "nope.yaml")])

    assert code == 2
    assert "[CFG001]" in capsys.readouterr().err

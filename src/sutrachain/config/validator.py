"""Config file validation for sutrachain."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from sutrachain.constants.config import CONFIG_FILENAME
from sutrachain.constants.families import VALID_STRATEGIES
from sutrachain.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_FAMILY_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
)
from sutrachain.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a sutrachain.yaml file and return all validation errors.

    This is the collect-all entry point used by ``sutrachain validate-config``
    and the ``classify`` preflight. It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "default_strategy" in raw:
        _validate_strategy(raw["default_strategy"], "default_strategy", path_str, errors)

    if "confidence_step" in raw:
        val = raw["confidence_step"]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="confidence_step",
                    message="invalid type for `confidence_step`",
                    hint="expected a number between 0 and 1",
                )
            )
        elif not 0.0 <= val <= 1.0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="confidence_step",
                    message=f"`confidence_step` must be within [0, 1], got {val}",
                )
            )

    if "disabled_rules" in raw:
        val = raw["disabled_rules"]
        if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="disabled_rules",
                    message="invalid type for `disabled_rules`",
                    hint="expected a list of strings",
                )
            )

    _validate_families_block(raw, path_str, errors)

    return errors


def _validate_families_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``families`` nested mapping in sutrachain.yaml."""
    families = raw.get("families")
    if families is None:
        return
    if not isinstance(families, dict):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="families",
                message="`families` must be a mapping",
            )
        )
        return

    for family in sorted(families.keys(), key=str):
        family_raw = families[family]
        if family_raw is None:
            continue
        if not isinstance(family_raw, dict):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"families.{family}",
                    message=f"`families.{family}` must be a mapping",
                )
            )
            continue
        for key in sorted(family_raw.keys(), key=str):
            if key not in ALLOWED_FAMILY_KEYS:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"families.{family}.{key}",
                        message=f"unknown key `{key}` in `families.{family}`",
                        hint=_suggest_key(str(key), ALLOWED_FAMILY_KEYS),
                    )
                )
        if "strategy" in family_raw:
            _validate_strategy(family_raw["strategy"], f"families.{family}.strategy", path_str, errors)


def _validate_strategy(
    value: Any,
    field_name: str,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    if not isinstance(value, str) or value not in VALID_STRATEGIES:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field=field_name,
                message=f"invalid value for `{field_name}`",
                hint=f"expected one of: {', '.join(sorted(VALID_STRATEGIES))}; got: {value!r}",
            )
        )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""

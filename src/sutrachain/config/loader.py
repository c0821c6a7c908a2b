"""Config loading and normalization for sutrachain."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from sutrachain.config.model import FamilyConfig, SutraChainConfig, _default_families
from sutrachain.constants.config import CONFIG_FILENAME
from sutrachain.constants.families import DEFAULT_CONFIDENCE_STEP, DEFAULT_STRATEGY, VALID_STRATEGIES
from sutrachain.exceptions import ConfigError, UnknownStrategyError


def load_config(root: Path, config_path: Path | None = None) -> SutraChainConfig:
    """Load and validate engine config from ``sutrachain.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SutraChainConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    default_strategy = _ensure_strategy(raw.get("default_strategy", DEFAULT_STRATEGY), "default_strategy")

    confidence_step = raw.get("confidence_step", DEFAULT_CONFIDENCE_STEP)
    if isinstance(confidence_step, bool) or not isinstance(confidence_step, (int, float)):
        raise ConfigError("confidence_step must be a number")
    if not 0.0 <= confidence_step <= 1.0:
        raise ConfigError(f"confidence_step must be within [0, 1], got {confidence_step!r}")

    families_raw = raw.get("families", {})
    if families_raw is None:
        families_raw = {}
    if not isinstance(families_raw, dict):
        raise ConfigError("families must be a mapping")

    families = dict(_default_families())
    for family, family_raw in families_raw.items():
        if not isinstance(family, str) or not family.strip():
            raise ConfigError("families keys must be non-empty strings")
        if family_raw is None:
            continue
        if not isinstance(family_raw, dict):
            raise ConfigError(f"families.{family} must be a mapping")
        if "strategy" in family_raw:
            strategy = _ensure_strategy(family_raw["strategy"], f"families.{family}.strategy")
            families[family] = FamilyConfig(strategy=strategy)

    disabled_rules = _ensure_string_list(raw.get("disabled_rules", []), "disabled_rules")

    return SutraChainConfig(
        default_strategy=default_strategy,
        confidence_step=float(confidence_step),
        families=families,
        disabled_rules=frozenset(rule_id.strip() for rule_id in disabled_rules if rule_id.strip()),
    )


def _ensure_strategy(value: Any, key_name: str) -> str:
    """Return *value* when it names a known strategy, else raise UnknownStrategyError."""
    if not isinstance(value, str) or value not in VALID_STRATEGIES:
        raise UnknownStrategyError(f"{key_name} must be one of {sorted(VALID_STRATEGIES)}, got {value!r}")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)

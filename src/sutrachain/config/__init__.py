"""Configuration loading, validation, and fingerprinting for sutrachain."""

from __future__ import annotations

from sutrachain.config.fingerprint import config_fingerprint
from sutrachain.config.loader import load_config
from sutrachain.config.model import FamilyConfig, SutraChainConfig
from sutrachain.config.validator import validate_config_file

__all__ = [
    "FamilyConfig",
    "SutraChainConfig",
    "config_fingerprint",
    "load_config",
    "validate_config_file",
]

"""Shared exception hierarchy for sutrachain."""

from __future__ import annotations

from .base import SutraChainError
from .config import ConfigError, DuplicateRuleIdError, RegistrySealedError, UnknownStrategyError

__all__ = [
    "ConfigError",
    "DuplicateRuleIdError",
    "RegistrySealedError",
    "SutraChainError",
    "UnknownStrategyError",
]

"""Configuration-related exceptions.

These are raised while rule chains are assembled or configuration is
loaded. They signal a defect in the rule set or config file and are
never produced by classifying a word.
"""

from __future__ import annotations

from sutrachain.exceptions.base import SutraChainError


class ConfigError(SutraChainError, ValueError):
    """Raised when configuration or a rule definition is invalid."""


class DuplicateRuleIdError(ConfigError):
    """Raised when a rule id is registered twice within one family."""

    def __init__(self, family: str, rule_id: str) -> None:
        self.family = family
        self.rule_id = rule_id
        super().__init__(f"Duplicate rule id '{rule_id}' in family '{family}'")


class RegistrySealedError(ConfigError):
    """Raised when a predicate is registered after the registry was sealed."""


class UnknownStrategyError(ConfigError):
    """Raised when a family is configured with an unregistered strategy."""

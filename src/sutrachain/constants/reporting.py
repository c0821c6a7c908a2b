"""Constants for result serialization and stdout formatting."""

from __future__ import annotations

SCHEMA_VERSION: str = "1.0.0"

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

# Engine-level reason codes, prefixed the same way rule reasons are.
ENGINE_REASON_PREFIX: str = "engine"
REASON_INVALID_TOKEN: str = "invalid_token"
REASON_EMPTY_CHAIN: str = "empty_chain"
REASON_NO_OPINION: str = "no_opinion"
REASON_PREDICATE_FAILURE: str = "predicate_failure"

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_DIM: str = "\033[2m"
ANSI_RESET: str = "\033[0m"

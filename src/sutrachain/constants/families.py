"""Rule family names, composition strategies, and confidence constants."""

from __future__ import annotations

FAMILY_PRAGRHYA: str = "pragrhya"
FAMILY_ASHISHYA: str = "ashishya"
FAMILY_OPTIONAL_NUMBER: str = "optional_number"

BUNDLED_FAMILIES: tuple[str, ...] = (
    FAMILY_PRAGRHYA,
    FAMILY_ASHISHYA,
    FAMILY_OPTIONAL_NUMBER,
)

STRATEGY_SHORT_CIRCUIT_OR: str = "short_circuit_or"
STRATEGY_ACCUMULATE_ALL: str = "accumulate_all"

VALID_STRATEGIES: frozenset[str] = frozenset({STRATEGY_SHORT_CIRCUIT_OR, STRATEGY_ACCUMULATE_ALL})

DEFAULT_STRATEGY: str = STRATEGY_SHORT_CIRCUIT_OR

DEFAULT_FAMILY_STRATEGIES: dict[str, str] = {
    FAMILY_PRAGRHYA: STRATEGY_SHORT_CIRCUIT_OR,
    FAMILY_ASHISHYA: STRATEGY_ACCUMULATE_ALL,
    FAMILY_OPTIONAL_NUMBER: STRATEGY_ACCUMULATE_ALL,
}

# Deducted from the best confidence once per contributing rule beyond the first.
DEFAULT_CONFIDENCE_STEP: float = 0.1
CONFIDENCE_PRECISION: int = 6

EFFECT_SUPPRESS_PHONETIC: str = "suppress_phonetic"

# Every result carries at least these effect flags.
DEFAULT_EFFECTS: dict[str, bool] = {EFFECT_SUPPRESS_PHONETIC: False}

"""aśiṣya predicates, sūtras 1.2.53 - 1.2.57.

An aśiṣya element need not be taught: it is retained logically even when
it does not surface. The family runs accumulate-all, so every sūtra
contributes and modifier effects merge with the last registered winning.

Recognized context keys:

- ``designation`` / ``technical_term``: the saṃjñā the item carries
- ``authority_source``: where the designation or etymology is attested
- ``elision_type``: e.g. ``"lubh"``; ``lubh_operation`` marks one explicitly
- ``currency``: ``"current" | "non-current" | "archaic" | "obsolete"``
- ``temporal_context``: ``"vedic" | "archaic" | "classical-obsolete"``
- ``etymology``: the authoritative yoga (derivation)
- ``meaning_absent``: ``True`` when the derived meaning is not present
- ``allow_partial_manifestation``: keeps the form audible under 1.2.55
- ``primary_suffix``: the pradhāna-pratyaya whose meaning is expressed
- ``meaning_authority``: the other authority the meaning derives from
- ``force_preservation``: overrides phonetic suppression
- ``temporal_auxiliary``: ``True`` for a kālopasarjana construction
"""

from __future__ import annotations

from sutrachain.constants.families import EFFECT_SUPPRESS_PHONETIC, FAMILY_ASHISHYA
from sutrachain.model import Context, Decisive, Modifier, NoOpinion, Outcome, Token
from sutrachain.rules import RulePredicate, rule
from sutrachain.sutras.lexicon import (
    ARCHAIC_TEMPORAL_CONTEXTS,
    CURRENT_USAGE,
    LUBH_ELISION_TYPES,
    TECHNICAL_TERMS,
    TEMPORAL_AUXILIARIES,
)


def _present(context: Context, key: str) -> bool:
    """True for a non-empty string value or an explicit ``True``."""
    value = context.get(key)
    if isinstance(value, str):
        return bool(value.strip())
    return value is True


def _etymology_without_meaning(context: Context) -> bool:
    return _present(context, "etymology") and _present(context, "authority_source") and context.flag("meaning_absent")


@rule(
    "1.2.53",
    family=FAMILY_ASHISHYA,
    context_keys=("designation", "technical_term", "authority_source"),
)
def technical_designation(token: Token, context: Context) -> Outcome:
    """Items with an authoritative technical designation (tad aśiṣyaṃ saṃjñāpramāṇatvāt)."""
    designated = (
        _present(context, "designation")
        or _present(context, "technical_term")
        or token.is_one_of(TECHNICAL_TERMS)
    )
    if not designated:
        return NoOpinion()
    if _present(context, "authority_source"):
        return Decisive(True, "technical_designation_with_authority", confidence=0.9)
    return Decisive(True, "technical_designation", confidence=0.7)


@rule(
    "1.2.54",
    family=FAMILY_ASHISHYA,
    context_keys=("elision_type", "lubh_operation", "temporal_context", "currency"),
)
def non_current_lubh(token: Token, context: Context) -> Outcome:
    """Forms from lubh-elision that are no longer current (lub yogāprakhyānāt)."""
    lubh = (
        context.text("elision_type") in LUBH_ELISION_TYPES
        or _present(context, "lubh_operation")
        or context.text("temporal_context") in ARCHAIC_TEMPORAL_CONTEXTS
    )
    if not lubh:
        return NoOpinion()
    if context.text("currency") in CURRENT_USAGE:
        return Decisive(False, "lubh_form_still_current")
    return Decisive(True, "non_current_lubh_elision", confidence=0.8)


@rule(
    "1.2.55",
    family=FAMILY_ASHISHYA,
    context_keys=("etymology", "authority_source", "meaning_absent"),
)
def etymology_meaning_absent(token: Token, context: Context) -> Outcome:
    """Authoritative etymology whose meaning is absent (yogapramāṇe ca tadabhāve 'darśanaṃ syāt)."""
    if _etymology_without_meaning(context):
        return Decisive(True, "etymology_meaning_absent", confidence=0.85)
    return NoOpinion()


@rule(
    "1.2.55.adarsana",
    family=FAMILY_ASHISHYA,
    context_keys=("etymology", "authority_source", "meaning_absent", "allow_partial_manifestation"),
)
def adarsana(token: Token, context: Context) -> Outcome:
    """Non-appearance: the retained form does not surface phonetically."""
    if _etymology_without_meaning(context) and not context.flag("allow_partial_manifestation"):
        return Modifier({EFFECT_SUPPRESS_PHONETIC: True}, reason_code="adarsana")
    return NoOpinion()


@rule(
    "1.2.56",
    family=FAMILY_ASHISHYA,
    context_keys=("primary_suffix", "meaning_authority"),
)
def primary_suffix_other_authority(token: Token, context: Context) -> Outcome:
    """Primary-suffix meaning whose authority lies elsewhere (pradhānapratyayārthavacanam arthasyānyapramāṇatvāt)."""
    if _present(context, "primary_suffix") and _present(context, "meaning_authority"):
        return Decisive(True, "primary_suffix_other_authority", confidence=0.8)
    return NoOpinion()


@rule("1.2.56.preservation", family=FAMILY_ASHISHYA, context_keys=("force_preservation",))
def preservation(token: Token, context: Context) -> Outcome:
    """Explicit preservation overrides an earlier phonetic suppression."""
    if context.flag("force_preservation"):
        return Modifier({EFFECT_SUPPRESS_PHONETIC: False}, reason_code="preservation")
    return NoOpinion()


@rule("1.2.57", family=FAMILY_ASHISHYA, context_keys=("temporal_auxiliary",))
def temporal_auxiliary(token: Token, context: Context) -> Outcome:
    """Temporal auxiliaries are treated the same (kālopasarjane ca tulyam)."""
    if context.flag("temporal_auxiliary"):
        return Decisive(True, "temporal_auxiliary", confidence=0.85)
    if token.is_one_of(TEMPORAL_AUXILIARIES):
        return Decisive(True, "temporal_auxiliary_lexical", confidence=0.75)
    return NoOpinion()


PREDICATES: tuple[RulePredicate, ...] = (
    technical_designation,
    non_current_lubh,
    etymology_meaning_absent,
    adarsana,
    primary_suffix_other_authority,
    preservation,
    temporal_auxiliary,
)

"""pragṛhya predicates, sūtras 1.1.11 - 1.1.19.

A pragṛhya ending resists vowel sandhi. Each later sūtra grants the
property to a further class of forms; the family runs short-circuit-OR.

Recognized context keys:

- ``number``: ``"singular" | "dual" | "plural"``
- ``is_particle``: ``True`` when the word is a nipāta
- ``case``: grammatical case, e.g. ``"vocative"``
- ``has_locative_sense``: ``True`` when the form carries locative meaning
"""

from __future__ import annotations

from sutrachain.constants.families import FAMILY_PRAGRHYA
from sutrachain.model import Context, Decisive, NoOpinion, Outcome, Token
from sutrachain.rules import RulePredicate, rule
from sutrachain.sutras.lexicon import (
    ADAS_FORMS_AFTER_M,
    DUAL_PRAGRHYA_ENDINGS,
    LOCATIVE_ENDINGS,
    LOCATIVE_WORDS,
    OM_FORMS,
    SHE_AFFIX_ENDINGS,
    SINGLE_VOWEL_PARTICLES,
    UN_PARTICLE_FORMS,
    VOCATIVE_O,
)


@rule("1.1.11", family=FAMILY_PRAGRHYA, context_keys=("number",))
def dual_ending(token: Token, context: Context) -> Outcome:
    """Dual forms ending in ī, ū or e (īdūdedvivacanaṃ pragṛhyam)."""
    if context.text("number") != "dual":
        return NoOpinion()
    if token.ends_with(*DUAL_PRAGRHYA_ENDINGS):
        return Decisive(True, "dual_ending_i_u_e")
    return Decisive(False, "dual_without_i_u_e")


@rule("1.1.12", family=FAMILY_PRAGRHYA)
def adas_after_m(token: Token, context: Context) -> Outcome:
    """Forms of adas where ī, ū or e follows m (adaso māt)."""
    if token.is_one_of(ADAS_FORMS_AFTER_M):
        return Decisive(True, "adas_after_m")
    return NoOpinion()


@rule("1.1.13", family=FAMILY_PRAGRHYA)
def she_affix(token: Token, context: Context) -> Outcome:
    """The Vedic affix śe (śe)."""
    if token.ends_with(*SHE_AFFIX_ENDINGS):
        return Decisive(True, "she_affix", confidence=0.9)
    return NoOpinion()


@rule("1.1.14", family=FAMILY_PRAGRHYA, context_keys=("is_particle",))
def single_vowel_particle(token: Token, context: Context) -> Outcome:
    """A particle consisting of a single vowel other than ā (nipāta ekāj anāṅ)."""
    if not context.flag("is_particle"):
        return NoOpinion()
    if token.is_one_of(SINGLE_VOWEL_PARTICLES):
        return Decisive(True, "single_vowel_particle")
    if token.text == "ā":
        return Decisive(False, "long_a_particle_excluded")
    return NoOpinion()


@rule("1.1.15", family=FAMILY_PRAGRHYA, context_keys=("is_particle",))
def particle_ending_in_o(token: Token, context: Context) -> Outcome:
    """A particle ending in o (ot). Only an explicit ``is_particle=False`` opts out."""
    if context.get("is_particle") is False:
        return NoOpinion()
    if token.ends_with("o"):
        return Decisive(True, "particle_ending_in_o", confidence=0.85)
    return NoOpinion()


@rule("1.1.16", family=FAMILY_PRAGRHYA, context_keys=("case",))
def vocative_o(token: Token, context: Context) -> Outcome:
    """Vocative o before a non-Vedic iti (sambuddhau śākalyasyetāv anārṣe)."""
    if context.text("case") != "vocative":
        return NoOpinion()
    if token.text == VOCATIVE_O:
        return Decisive(True, "vocative_o")
    return NoOpinion()


@rule("1.1.17", family=FAMILY_PRAGRHYA, context_keys=("is_particle",))
def un_particle(token: Token, context: Context) -> Outcome:
    """The particle uñ (uñaḥ)."""
    if token.is_one_of(UN_PARTICLE_FORMS) and context.flag("is_particle"):
        return Decisive(True, "un_particle")
    return NoOpinion()


@rule("1.1.18", family=FAMILY_PRAGRHYA)
def om_particle(token: Token, context: Context) -> Outcome:
    """The syllable oṃ (ūṃ)."""
    if token.is_one_of(OM_FORMS):
        return Decisive(True, "om_particle")
    return NoOpinion()


@rule("1.1.19", family=FAMILY_PRAGRHYA, context_keys=("has_locative_sense",))
def locative_i_u(token: Token, context: Context) -> Outcome:
    """Forms ending in ī or ū with locative sense (īdūtau ca saptamyarthe)."""
    explicit = context.flag("has_locative_sense")
    if not explicit and not token.is_one_of(LOCATIVE_WORDS):
        return NoOpinion()
    if token.ends_with(*LOCATIVE_ENDINGS):
        return Decisive(True, "locative_i_u", confidence=1.0 if explicit else 0.8)
    return Decisive(False, "locative_without_i_u")


PREDICATES: tuple[RulePredicate, ...] = (
    dual_ending,
    adas_after_m,
    she_affix,
    single_vowel_particle,
    particle_ending_in_o,
    vocative_o,
    un_particle,
    om_particle,
    locative_i_u,
)

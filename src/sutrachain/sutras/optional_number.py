"""Optional-number predicates, sūtras 1.2.58 - 1.2.63.

These sūtras let a form take a grammatical number other than its sense
(a plural for a singular class noun, a singular for the dual Punarvasu).
1.2.63 is a restriction: the Tiṣya-Punarvasu dvandva must stay dual.

Recognized context keys:

- ``semantic_number``: the number actually meant; falls back to ``number``
- ``is_class_noun``: ``True`` when the term denotes a class (jāti)
- ``is_asmad_pronoun``: ``True`` for forms of asmad outside the lexicon
- ``domain`` / ``semantic_category``: ``"nakshatra"`` and related values
- ``chandas``: ``True`` in Vedic metrical usage
- ``is_dvandva``: ``True`` when the term is a copulative compound
"""

from __future__ import annotations

from sutrachain.constants.families import FAMILY_OPTIONAL_NUMBER
from sutrachain.model import Context, Decisive, Modifier, NoOpinion, Outcome, Token
from sutrachain.rules import RulePredicate, rule
from sutrachain.sutras.lexicon import (
    ASMAD_FORMS,
    CHANDAS_DOMAINS,
    CLASS_NOUNS,
    NAKSHATRA_CATEGORIES,
    NAKSHATRA_DOMAINS,
    NUMBER_DUAL,
    NUMBER_PLURAL,
    NUMBER_SINGULAR,
    PHALGUNI_FORMS,
    PROSTHAPADA_FORMS,
    PUNARVASU_FORMS,
    PUNARVASU_STEMS,
    TISYA_STEMS,
    VISAKHA_FORMS,
)

EFFECT_ENFORCE_DUAL: str = "enforce_dual"
EFFECT_ALLOW_PLURAL: str = "allow_plural"


def semantic_number(context: Context) -> str | None:
    """The number the speaker means, if the caller supplied one."""
    return context.text("semantic_number") or context.text("number")


def in_nakshatra_domain(context: Context) -> bool:
    return context.text("domain") in NAKSHATRA_DOMAINS or context.text("semantic_category") in NAKSHATRA_CATEGORIES


def in_chandas(context: Context) -> bool:
    return context.flag("chandas") or context.text("domain") in CHANDAS_DOMAINS


def is_tisya_punarvasu_dvandva(token: Token) -> bool:
    text = token.text
    return any(stem in text for stem in TISYA_STEMS) and any(stem in text for stem in PUNARVASU_STEMS)


@rule(
    "1.2.58",
    family=FAMILY_OPTIONAL_NUMBER,
    context_keys=("is_class_noun", "semantic_number", "number"),
)
def class_noun_plural(token: Token, context: Context) -> Outcome:
    """A class noun in singular sense may optionally be plural (jātyākhyāyām ekasmin bahuvacanam anyatarasyām)."""
    if not (context.flag("is_class_noun") or token.is_one_of(CLASS_NOUNS)):
        return NoOpinion()
    if semantic_number(context) in (None, NUMBER_SINGULAR):
        return Decisive(True, "class_noun_optional_plural", confidence=0.85)
    return Decisive(False, "class_noun_not_singular_sense")


@rule(
    "1.2.59",
    family=FAMILY_OPTIONAL_NUMBER,
    context_keys=("is_asmad_pronoun", "semantic_number", "number"),
)
def asmad_plural(token: Token, context: Context) -> Outcome:
    """asmad may optionally be plural for one or two (asmado dvayoś ca)."""
    if not (context.flag("is_asmad_pronoun") or token.is_one_of(ASMAD_FORMS)):
        return NoOpinion()
    if semantic_number(context) in (None, NUMBER_SINGULAR, NUMBER_DUAL):
        return Decisive(True, "asmad_optional_plural", confidence=0.9)
    return Decisive(False, "asmad_already_plural")


@rule(
    "1.2.60",
    family=FAMILY_OPTIONAL_NUMBER,
    context_keys=("domain", "semantic_category"),
)
def phalguni_prosthapada(token: Token, context: Context) -> Outcome:
    """Dual Phalgunī and Proṣṭhapadā may be plural as nakṣatras (phalgunīproṣṭhapadānāṃ ca nakṣatre)."""
    if not (token.is_one_of(PHALGUNI_FORMS) or token.is_one_of(PROSTHAPADA_FORMS)):
        return NoOpinion()
    if in_nakshatra_domain(context):
        return Decisive(True, "nakshatra_dual_as_plural", confidence=0.9)
    return Decisive(False, "outside_nakshatra_domain")


@rule("1.2.61", family=FAMILY_OPTIONAL_NUMBER, context_keys=("chandas", "domain"))
def punarvasu_singular(token: Token, context: Context) -> Outcome:
    """Punarvasu may be singular for the dual in chandas (chandasi punarvasvor ekavacanam)."""
    if not token.is_one_of(PUNARVASU_FORMS):
        return NoOpinion()
    if in_chandas(context):
        return Decisive(True, "punarvasu_singular_for_dual", confidence=0.9)
    return Decisive(False, "outside_chandas")


@rule("1.2.62", family=FAMILY_OPTIONAL_NUMBER, context_keys=("chandas", "domain"))
def visakha_singular(token: Token, context: Context) -> Outcome:
    """Viśākhā may be singular for the dual in chandas (viśākhayoś ca)."""
    if not token.is_one_of(VISAKHA_FORMS):
        return NoOpinion()
    if in_chandas(context):
        return Decisive(True, "visakha_singular_for_dual", confidence=0.9)
    return Decisive(False, "outside_chandas")


@rule(
    "1.2.63",
    family=FAMILY_OPTIONAL_NUMBER,
    context_keys=("domain", "semantic_category", "is_dvandva"),
)
def tisya_punarvasu_dvandva(token: Token, context: Context) -> Outcome:
    """The Tiṣya-Punarvasu nakṣatra dvandva takes the dual for a plural sense.

    tiṣyapunarvasvor nakṣatradvandve bahuvacanasya dvivacanaṃ nityam
    """
    if not is_tisya_punarvasu_dvandva(token):
        return NoOpinion()
    if in_nakshatra_domain(context) or context.flag("is_dvandva"):
        return Decisive(True, "tisya_punarvasu_dvandva", confidence=0.95)
    return Decisive(False, "not_a_nakshatra_dvandva")


@rule(
    "1.2.63.niyama",
    family=FAMILY_OPTIONAL_NUMBER,
    context_keys=("domain", "semantic_category", "is_dvandva"),
)
def dual_niyama(token: Token, context: Context) -> Outcome:
    """Restriction: the dvandva is obligatorily dual and never plural."""
    if is_tisya_punarvasu_dvandva(token) and (in_nakshatra_domain(context) or context.flag("is_dvandva")):
        return Modifier({EFFECT_ENFORCE_DUAL: True, EFFECT_ALLOW_PLURAL: False}, reason_code="niyama")
    return NoOpinion()


PREDICATES: tuple[RulePredicate, ...] = (
    class_noun_plural,
    asmad_plural,
    phalguni_prosthapada,
    punarvasu_singular,
    visakha_singular,
    tisya_punarvasu_dvandva,
    dual_niyama,
)

OPTIONAL_NUMBER_GRANTS: dict[str, tuple[str, ...]] = {
    "1.2.58": (NUMBER_PLURAL,),
    "1.2.59": (NUMBER_PLURAL,),
    "1.2.60": (NUMBER_PLURAL,),
    "1.2.61": (NUMBER_SINGULAR,),
    "1.2.62": (NUMBER_SINGULAR,),
    "1.2.63": (NUMBER_DUAL,),
}

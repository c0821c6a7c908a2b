"""Lexical tables consumed by the bundled predicates.

All forms are canonical IAST. Native-script input reaches predicates
already transliterated, so no table carries a second spelling per script.
"""

from __future__ import annotations

# pragṛhya (1.1.11 - 1.1.19)
DUAL_PRAGRHYA_ENDINGS: tuple[str, ...] = ("ī", "ū", "e")
ADAS_FORMS_AFTER_M: frozenset[str] = frozenset({"amī", "amū", "ame"})
SHE_AFFIX_ENDINGS: tuple[str, ...] = ("śe", "she")
SINGLE_VOWEL_PARTICLES: frozenset[str] = frozenset({"a", "i", "ī", "u", "ū", "ṛ", "e", "o", "ai", "au"})
VOCATIVE_O: str = "o"
UN_PARTICLE_FORMS: frozenset[str] = frozenset({"u", "uñ"})
OM_FORMS: frozenset[str] = frozenset({"om", "oṃ", "auṃ"})
LOCATIVE_ENDINGS: tuple[str, ...] = ("ī", "ū")
LOCATIVE_WORDS: frozenset[str] = frozenset(
    {"addhī", "parī", "prabhṛtī", "kutra", "tatra", "yatra", "atra"}
)

# aśiṣya (1.2.53 - 1.2.57)
TECHNICAL_TERMS: frozenset[str] = frozenset(
    {
        "prātipadika",
        "dhātu",
        "pratyaya",
        "vibhakti",
        "tiṅ",
        "sup",
        "svara",
        "vyañjana",
        "saṃyoga",
        "vṛddhi",
        "guṇa",
        "kāraka",
        "upapada",
        "samāsa",
        "taddhita",
        "kṛt",
    }
)
LUBH_ELISION_TYPES: frozenset[str] = frozenset({"lubh", "lup", "luk"})
ARCHAIC_TEMPORAL_CONTEXTS: frozenset[str] = frozenset({"vedic", "classical-obsolete", "archaic"})
CURRENT_USAGE: frozenset[str] = frozenset({"current", "living"})
TEMPORAL_AUXILIARIES: frozenset[str] = frozenset(
    {
        "kadā",
        "yadā",
        "tadā",
        "sadā",
        "yadi",
        "cet",
        "tataḥ",
        "anantaram",
        "paścāt",
        "pūrvam",
        "purā",
        "adhunā",
        "yāvat",
        "tāvat",
        "ciram",
        "kṣaṇam",
        "sakṛt",
        "dviḥ",
        "triḥ",
        "bahuśaḥ",
        "punaḥ",
        "bhūyaḥ",
    }
)

# optional number (1.2.58 - 1.2.63)
CLASS_NOUNS: frozenset[str] = frozenset(
    {"jāti", "brāhmaṇa", "brāhmaṇaḥ", "vrīhi", "vrīhiḥ", "yava", "yavaḥ", "deva", "manuṣya", "paśu", "vṛkṣa"}
)
ASMAD_FORMS: frozenset[str] = frozenset(
    {
        "asmad",
        "asmat",
        "asmān",
        "aham",
        "vayam",
        "mama",
        "asmākam",
        "āvām",
        "āvayoḥ",
        "mām",
        "mayā",
        "mahyam",
        "mat",
    }
)
PHALGUNI_FORMS: frozenset[str] = frozenset(
    {
        "phalgunī",
        "phalgunyau",
        "phalgunyaḥ",
        "phalguni",
        "pūrvaphalgunī",
        "uttaraphalgunī",
        "pūrvaphalgunyau",
        "uttaraphalgunyau",
    }
)
PROSTHAPADA_FORMS: frozenset[str] = frozenset(
    {
        "proṣṭhapadā",
        "proṣṭhapade",
        "proṣṭhapadāḥ",
        "prosthapada",
        "pūrvaproṣṭhapadā",
        "uttaraproṣṭhapadā",
        "pūrvaproṣṭhapade",
        "uttaraproṣṭhapade",
    }
)
PUNARVASU_FORMS: frozenset[str] = frozenset(
    {"punarvasu", "punarvasū", "punarvasuḥ", "punar-vasu", "punar-vasū", "punarwasu"}
)
VISAKHA_FORMS: frozenset[str] = frozenset(
    {
        "viśākhā",
        "viśākha",
        "viśākhāḥ",
        "viśākhe",
        "viśākhayoḥ",
        "vishakha",
        "visakha",
        "vishākhā",
    }
)
TISYA_STEMS: tuple[str, ...] = ("tiṣya", "tiśya", "tisya", "tishya", "puṣya", "pushya")
PUNARVASU_STEMS: tuple[str, ...] = ("punarvasu", "punarvasū", "punarwasu")

NAKSHATRA_DOMAINS: frozenset[str] = frozenset(
    {
        "nakshatra",
        "nakṣatra",
        "astronomical",
        "astral",
        "celestial",
        "astronomy",
        "jyotish",
        "vedic_astronomy",
    }
)
NAKSHATRA_CATEGORIES: frozenset[str] = frozenset({"nakshatra", "star", "constellation", "astronomical_object"})
CHANDAS_DOMAINS: frozenset[str] = frozenset({"chandas", "vedic"})

NUMBER_SINGULAR: str = "singular"
NUMBER_DUAL: str = "dual"
NUMBER_PLURAL: str = "plural"
NUMBER_ORDER: tuple[str, ...] = (NUMBER_SINGULAR, NUMBER_DUAL, NUMBER_PLURAL)

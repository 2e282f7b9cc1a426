"""Singular forms of English nouns."""

from collections.abc import Mapping
from types import MappingProxyType

from .text import is_vowel, match_case, match_suffix

IRREGULAR_SINGULARS: Mapping[str, str] = MappingProxyType(
    {
        "children": "child",
        "feet": "foot",
        "teeth": "tooth",
        "mice": "mouse",
        "women": "woman",
        "men": "man",
        "people": "person",
        "oxen": "ox",
        "geese": "goose",
        "lice": "louse",
        "dice": "die",
        "analyses": "analysis",
        "crises": "crisis",
        "theses": "thesis",
        "cacti": "cactus",
        "fungi": "fungus",
        "nuclei": "nucleus",
        "bacteria": "bacterium",
        "data": "datum",
        "media": "medium",
        "appendices": "appendix",
        "indices": "index",
        "criteria": "criterion",
        "phenomena": "phenomenon",
    }
)
"""Irregular plurals (lower case) mapped to their singular forms."""

UNCHANGED_PLURALS = frozenset(
    {"sheep", "deer", "fish", "species", "series", "aircraft", "moose"}
)
"""Nouns whose plural is spelt the same as the singular."""

# Stems whose singular ends in -fe and whose plural ends in -ves.
_FE_STEMS = frozenset({"kni", "wi", "li"})

# Classical Latin and Greek plurals in -ae.
_CLASSICAL_SINGULARS = {
    "larvae": "larva",
    "pupae": "pupa",
    "antennae": "antenna",
    "alumnae": "alumna",
    "formulae": "formula",
    "nebulae": "nebula",
    "vertebrae": "vertebra",
    "algae": "alga",
    "amoebae": "amoeba",
    "aureolae": "aureola",
    "coronae": "corona",
}

# Stems of -oe nouns (shoe, toe) whose plural only adds -s.
_OE_STEMS = frozenset(
    {"sho", "to", "ho", "fo", "wo", "obo", "cano", "flo", "slo", "thro", "tipto"}
)


def singular(word: str, irregulars: Mapping[str, str] | None = None) -> str:
    """Return the singular form of the English noun ``word``.

    ``irregulars`` maps lower-case plurals to singulars and is consulted
    first; it defaults to IRREGULAR_SINGULARS. The case of ``word`` is kept.
    """
    if not word:
        return ""
    lower = word.lower()
    table = IRREGULAR_SINGULARS if irregulars is None else irregulars
    found = table.get(lower)
    if found is not None:
        return match_case(word, found)
    if lower in UNCHANGED_PLURALS:
        return word
    # Nationalities such as Chinese or Iroquois do not change.
    if lower.endswith(("ese", "ois")):
        return word
    return _apply_suffix_rules(word, lower)


def singularize_by_suffix(word: str) -> str:
    """Singularize ``word`` by its ending alone, ignoring irregular forms."""
    return _apply_suffix_rules(word, word.lower())


def _apply_suffix_rules(word: str, lower: str) -> str:
    n = len(lower)

    classical = _CLASSICAL_SINGULARS.get(lower)
    if classical is not None:
        return match_case(word, classical)

    if lower.endswith("men") and n > 3:
        return word[:-3] + match_case(word[-3:], "man")

    if lower.endswith("ves") and n > 3:
        ending = "fe" if lower[:-3] in _FE_STEMS else "f"
        return word[:-3] + match_suffix(word, ending)

    if lower.endswith("ies") and n > 3 and not is_vowel(lower[n - 4]):
        return word[:-3] + match_suffix(word, "y")

    if lower.endswith("es") and n > 2:
        result = _singularize_es(word, lower[:-2])
        if result is not None:
            return result

    if lower.endswith("s") and n > 1:
        if lower.endswith("ss"):
            return word
        return word[:-1]

    return word


def _singularize_es(word: str, base: str) -> str | None:
    if base.endswith(("ss", "sh", "ch", "x", "zz")):
        return word[:-2]
    if base.endswith("o") and base not in _OE_STEMS and len(base) >= 2:
        if not is_vowel(base[-2]):
            return word[:-2]
    if base.endswith("s") and not base.endswith("ss"):
        return word[:-2]
    return None


def is_plural(word: str) -> bool:
    """Return True if ``word`` changes when singularized.

    Nouns with the same singular and plural (sheep) count as not plural.
    """
    if not word:
        return False
    return word.lower() != singular(word).lower()


def is_singular(word: str) -> bool:
    """Return True if ``word`` is non-empty and not plural."""
    if not word:
        return False
    return not is_plural(word)
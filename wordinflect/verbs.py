"""Singular and plural forms of auxiliary verbs and determiners."""

from .pronouns import GENDERS
from .text import match_case


def _with_negations(pairs: tuple[tuple[str, str], ...]) -> tuple[tuple[str, str], ...]:
    """Add the "n't" contraction of each verb pair to the pairs themselves."""
    return pairs + tuple((one + "n't", many + "n't") for one, many in pairs)


_AUXILIARY_PAIRS = _with_negations(
    (("is", "are"), ("was", "were"), ("has", "have"), ("does", "do"))
) + (("goes", "go"),)

_VERB_SINGULAR_TO_PLURAL = dict(_AUXILIARY_PAIRS)
_VERB_PLURAL_TO_SINGULAR = {many: one for one, many in _AUXILIARY_PAIRS}

_VERB_UNCHANGED = frozenset(
    "can could may might must shall should will would "
    "can't won't shan't mustn't".split()
)

_DETERMINER_PAIRS = (
    ("this", "these"),
    ("that", "those"),
    ("a", "some"),
    ("an", "some"),
    ("my", "our"),
)

_ADJ_SINGULAR_TO_PLURAL = {
    **dict(_DETERMINER_PAIRS),
    "your": "your",
    **{owner: "their" for owner in ("her", "his", "its")},
}

_ADJ_PLURAL_TO_SINGULAR: dict[str, str] = {}
for _one, _many in _DETERMINER_PAIRS:
    # "some" goes back to "a"; choosing "an" depends on the following word.
    _ADJ_PLURAL_TO_SINGULAR.setdefault(_many, _one)

_THEIR_BY_GENDER = dict(zip("mfnt", ("his", "her", "its", "their")))


def _lookup(table: dict[str, str], word: str) -> str | None:
    found = table.get(word.lower())
    return None if found is None else match_case(word, found)


def is_unchanged_verb(word: str) -> bool:
    """Return True for modal verbs that read the same in singular and plural."""
    return word.lower() in _VERB_UNCHANGED


def plural_verb(word: str) -> str | None:
    """Return the plural of a known auxiliary verb, or None if it is not one."""
    if is_unchanged_verb(word):
        return word
    return _lookup(_VERB_SINGULAR_TO_PLURAL, word)


def singular_verb(word: str) -> str | None:
    """Return the singular of a known auxiliary verb, or None if it is not one."""
    if is_unchanged_verb(word):
        return word
    return _lookup(_VERB_PLURAL_TO_SINGULAR, word)


def plural_adj(word: str) -> str | None:
    """Return the plural of a determiner or possessive adjective, or None."""
    return _lookup(_ADJ_SINGULAR_TO_PLURAL, word)


def singular_adj(word: str, gender: str = "t") -> str | None:
    """Return the singular of a plural determiner or possessive adjective.

    "their" depends on ``gender``. Returns None for unknown words; raises
    ValueError for an unknown gender code.
    """
    if gender not in GENDERS:
        raise ValueError(f"unknown gender {gender!r}; expected one of {', '.join(GENDERS)}")
    if word.lower() == "their":
        return match_case(word, _THEIR_BY_GENDER[gender])
    return _lookup(_ADJ_PLURAL_TO_SINGULAR, word)
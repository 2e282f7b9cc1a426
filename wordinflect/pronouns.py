"""Singular and plural forms of English personal pronouns."""

from .text import match_case

GENDERS = ("m", "f", "n", "t")
"""Gender codes: masculine, feminine, neuter and gender-neutral ("they")."""

_NOMINATIVE_PLURAL = {"i": "we", "he": "they", "she": "they", "it": "they"}

_ACCUSATIVE_PLURAL = {"me": "us", "him": "them", "her": "them"}

_POSSESSIVE_PLURAL = {
    "my": "our",
    "mine": "ours",
    "his": "their",
    "hers": "theirs",
    "its": "their",
    "one's": "one's",
}

_REFLEXIVE_PLURAL = {
    "myself": "ourselves",
    "yourself": "yourselves",
    "himself": "themselves",
    "herself": "themselves",
    "itself": "themselves",
    "oneself": "oneselves",
}

_TO_PLURAL = {
    **_NOMINATIVE_PLURAL,
    **_ACCUSATIVE_PLURAL,
    **_POSSESSIVE_PLURAL,
    **_REFLEXIVE_PLURAL,
}


def _same_for_all(form: str) -> dict[str, str]:
    return dict.fromkeys(GENDERS, form)


_NOMINATIVE_SINGULAR = {
    "we": _same_for_all("I"),
    "they": {"m": "he", "f": "she", "n": "it", "t": "they"},
}

_ACCUSATIVE_SINGULAR = {
    "us": _same_for_all("me"),
    "them": {"m": "him", "f": "her", "n": "it", "t": "them"},
}

_POSSESSIVE_SINGULAR = {
    "our": _same_for_all("my"),
    "ours": _same_for_all("mine"),
    "their": {"m": "his", "f": "her", "n": "its", "t": "their"},
    "theirs": {"m": "his", "f": "hers", "n": "its", "t": "theirs"},
}

_REFLEXIVE_SINGULAR = {
    "ourselves": _same_for_all("myself"),
    "yourselves": _same_for_all("yourself"),
    "themselves": {"m": "himself", "f": "herself", "n": "itself", "t": "themself"},
}

_TO_SINGULAR = {
    **_NOMINATIVE_SINGULAR,
    **_ACCUSATIVE_SINGULAR,
    **_POSSESSIVE_SINGULAR,
    **_REFLEXIVE_SINGULAR,
}


def _check_gender(gender: str) -> None:
    if gender not in GENDERS:
        raise ValueError(f"unknown gender {gender!r}; expected one of {', '.join(GENDERS)}")


def plural_pronoun(word: str) -> str | None:
    """Return the plural of a singular pronoun, or None if ``word`` is not one."""
    plural = _TO_PLURAL.get(word.lower())
    return None if plural is None else match_case(word, plural)


def singular_pronoun(word: str, gender: str = "t") -> str | None:
    """Return the singular of a plural pronoun for ``gender``.

    Returns None if ``word`` is not a plural pronoun; raises ValueError for
    an unknown gender code.
    """
    _check_gender(gender)
    forms = _TO_SINGULAR.get(word.lower())
    return None if forms is None else match_case(word, forms[gender])
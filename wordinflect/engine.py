"""An inflection engine with its own irregular nouns and possessive style."""

from __future__ import annotations

import threading
from enum import Enum
from types import MappingProxyType

from .roman import int_to_roman as _int_to_roman
from .roman import roman_to_int as _roman_to_int
from .singular import IRREGULAR_SINGULARS
from .singular import singular as _singular
from .text import is_proper_name, is_vowel, match_case, match_suffix


class PossessiveStyle(Enum):
    """How the possessive of a singular noun ending in ``s`` is formed."""

    MODERN = "modern"
    """Add 's to every singular noun: James's, boss's."""

    TRADITIONAL = "traditional"
    """Add only ' to singular nouns ending in s: James', boss'."""


_NO_IRREGULARS = MappingProxyType({})

_POSSESSIVE_PRONOUNS = {
    "i": "my",
    "me": "my",
    "you": "your",
    "he": "his",
    "him": "his",
    "she": "her",
    "her": "her",
    "it": "its",
    "we": "our",
    "us": "our",
    "they": "their",
    "them": "their",
    "who": "whose",
    "whom": "whose",
}

_SINGULAR_ENDS_IN_S = frozenset(
    {
        "bus", "gas", "lens", "atlas", "iris", "plus", "minus", "virus",
        "bonus", "focus", "campus", "census", "corpus", "genius", "nexus",
        "oasis", "basis", "thesis", "crisis", "analysis", "diagnosis",
        "hypothesis", "parenthesis", "synopsis", "emphasis", "cosmos",
        "chaos", "ethos", "pathos", "logos", "status", "apparatus", "hiatus",
        "impetus", "radius", "nucleus", "syllabus", "stimulus", "fungus",
        "cactus", "octopus", "platypus", "walrus", "yes", "no", "us", "this",
        "thus",
    }
)

_COMMON_NOUNS = frozenset(
    {
        "cat", "dog", "book", "car", "house", "boy", "girl", "man", "woman",
        "child", "tree", "bird", "fish", "day", "night", "hand", "foot",
        "head", "eye", "ear", "door", "window", "table", "chair", "bed",
        "teacher", "student", "parent", "friend", "city", "country", "state",
        "street", "box", "bag", "ball", "cup", "glass", "paper", "pen", "key",
        "phone", "computer",
    }
)

# Names with their final s removed; these are not common nouns.
_TRUNCATED_NAMES = frozenset(
    {
        "jame", "charle", "jone", "mose", "jesu", "thoma", "jess", "ross",
        "walle", "jule", "mile", "gile", "style", "kyle", "achille",
        "william", "adam", "lewi", "davi", "elli", "harri", "morri", "denni",
        "franci", "chri", "mos", "ros", "gus",
    }
)

_VALID_SHORT_A = frozenset(
    {
        "data", "sofa", "mega", "soda", "mama", "papa", "diva", "yoga",
        "cola", "area", "idea", "lava", "toga", "tuna", "visa", "beta",
        "meta", "aqua", "aura", "era",
    }
)

_CONSONANTS_NEEDING_VOWEL = frozenset("bcdfghjkmpqvwz")


def _is_already_possessive(word: str) -> bool:
    return word.endswith(("'s", "'S", "s'", "S'"))


def _is_es_plural(lower: str) -> bool:
    if not lower.endswith("es"):
        return False
    return lower[:-2].endswith(("s", "x", "z", "ch", "sh"))


def _is_likely_common_noun(word: str) -> bool:
    """Guess whether ``word`` is a common noun rather than a clipped name."""
    if len(word) < 2:
        return False
    if word in _COMMON_NOUNS:
        return True
    if word in _TRUNCATED_NAMES:
        return False
    last = word[-1]
    if last in "iu":
        return False
    if last == "a" and len(word) <= 5 and word not in _VALID_SHORT_A:
        return False
    if last == "e" and len(word) >= 4:
        if not is_vowel(word[-2]) and not is_vowel(word[-3]):
            return False
    return True


def _looks_like_complete_word(word: str) -> bool:
    """Reject clipped forms such as "bu" from "bus"."""
    if len(word) < 2:
        return False
    if word[-1].lower() in _CONSONANTS_NEEDING_VOWEL and not is_vowel(word[-2]):
        return False
    return True


class Engine:
    """Inflection settings: extra irregular nouns and a possessive style.

    An engine is safe to share between threads.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._style = PossessiveStyle.MODERN
        self._singulars: dict[str, str] = dict(IRREGULAR_SINGULARS)
        self._plurals: dict[str, str] = {
            single: plural for plural, single in IRREGULAR_SINGULARS.items()
        }

    @property
    def possessive_style(self) -> PossessiveStyle:
        """The style used for singular nouns ending in ``s``."""
        with self._lock:
            return self._style

    @possessive_style.setter
    def possessive_style(self, style: PossessiveStyle) -> None:
        style = PossessiveStyle(style)
        with self._lock:
            self._style = style

    def def_noun(self, singular: str, plural: str) -> None:
        """Define ``plural`` as the plural of ``singular``."""
        if not singular or not plural:
            raise ValueError("singular and plural must be non-empty")
        with self._lock:
            self._singulars[plural.lower()] = singular.lower()
            self._plurals[singular.lower()] = plural.lower()

    def singular(self, word: str) -> str:
        """Return the singular form of the noun ``word``, keeping its case."""
        if not word:
            return ""
        with self._lock:
            found = self._singulars.get(word.lower())
        if found is not None:
            return match_case(word, found)
        return _singular(word, _NO_IRREGULARS)

    def clone(self) -> Engine:
        """Return an independent engine with the same settings."""
        other = Engine()
        with self._lock:
            other._style = self._style
            other._singulars = dict(self._singulars)
            other._plurals = dict(self._plurals)
        return other

    def int_to_roman(self, n: int) -> str:
        """Return the Roman numeral for ``n``, or ``""`` outside 1..3999."""
        return _int_to_roman(n)

    def roman_to_int(self, s: str) -> int:
        """Parse a Roman numeral; raises InvalidRomanError when malformed."""
        return _roman_to_int(s)

    def possessive(self, word: str) -> str:
        """Return the possessive form of ``word``.

        Pronouns take their own forms (it gives its), plurals in s take only
        an apostrophe, other nouns take 's, and singular nouns ending in s
        follow the engine's possessive style. Possessives come back as given.
        """
        if not word:
            return ""
        lower = word.lower()
        pronoun = _POSSESSIVE_PRONOUNS.get(lower)
        if pronoun is not None:
            return match_case(word, pronoun)
        if _is_already_possessive(word):
            return word

        style = self.possessive_style
        singular_ending = (
            word + "'"
            if style is PossessiveStyle.TRADITIONAL
            else word + match_suffix(word, "'s")
        )

        if word[-1] not in "sS":
            return word + match_suffix(word, "'s")
        if lower.endswith("ss") or lower in _SINGULAR_ENDS_IN_S:
            return singular_ending
        if is_proper_name(word):
            singular_lower = self.singular(word).lower()
            if singular_lower != lower and _is_likely_common_noun(singular_lower):
                return word + "'"
            return singular_ending
        if self._is_true_plural(word, lower):
            return word + "'"
        return singular_ending

    def _is_true_plural(self, word: str, lower: str) -> bool:
        singular_lower = self.singular(word).lower()
        if singular_lower == lower or len(singular_lower) <= 2:
            return False
        if _is_es_plural(lower):
            return True
        if lower.endswith("ies") and len(lower) > 3:
            return True
        return self._pluralizes_to(singular_lower, lower) and _looks_like_complete_word(
            singular_lower
        )

    def _pluralizes_to(self, singular_lower: str, lower: str) -> bool:
        with self._lock:
            known = self._plurals.get(singular_lower)
        if known is not None:
            return known == lower
        if lower.endswith("ves"):
            stem = lower[:-3]
            return singular_lower in (stem + "f", stem + "fe")
        return lower in (singular_lower + "s", singular_lower + "es")


_DEFAULT_ENGINE = Engine()


def default_engine() -> Engine:
    """Return the engine used by the module-level functions."""
    return _DEFAULT_ENGINE


def possessive(word: str) -> str:
    """Return the possessive form of ``word`` using the default engine."""
    return _DEFAULT_ENGINE.possessive(word)


def set_possessive_style(style: PossessiveStyle) -> None:
    """Set the possessive style of the default engine."""
    _DEFAULT_ENGINE.possessive_style = style


def get_possessive_style() -> PossessiveStyle:
    """Return the possessive style of the default engine."""
    return _DEFAULT_ENGINE.possessive_style
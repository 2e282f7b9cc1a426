"""Helpers for turning identifiers into readable text and URL slugs."""

import re
import unicodedata

_NOT_URL_SAFE = re.compile(r"[^a-zA-Z0-9\-_ ]")
_MULTI_SEP = re.compile(r"[-_\s]+", re.ASCII)
_ID_SUFFIXES = ("_id", "_ID", "ID")


def humanize(word: str) -> str:
    """Turn an identifier into readable text.

    A trailing ``_id`` is dropped, underscores, dashes and case changes become
    spaces, and only the first letter is capitalized:
    ``"employee_salary"`` gives ``"Employee salary"``.
    """
    for suffix in _ID_SUFFIXES:
        word = word.removesuffix(suffix)
    word = separated_words(word, " ").lower()
    return word[:1].upper() + word[1:]


def parameterize(word: str) -> str:
    """Make a lower-case, dash-separated URL slug from ``word``."""
    return parameterize_join(word, "-")


def parameterize_join(word: str, sep: str) -> str:
    """Make a lower-case URL slug from ``word`` with ``sep`` between words."""
    word = asciify(word.lower())
    word = _NOT_URL_SAFE.sub("", word).strip()
    word = _MULTI_SEP.sub(lambda _match: sep, word)
    return word.strip(sep) if sep else word


def asciify(word: str) -> str:
    """Strip accents from ``word`` and drop any character that is not ASCII."""
    decomposed = unicodedata.normalize("NFD", word)
    unmarked = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    composed = unicodedata.normalize("NFC", unmarked)
    return "".join(ch for ch in composed if ord(ch) < 128)


def separated_words(word: str, sep: str) -> str:
    """Split a camelCase, snake_case or kebab-case identifier with ``sep``.

    Acronyms stay together: ``"XMLParser"`` gives ``"XML Parser"``.
    Runs of ``sep`` are collapsed and surrounding whitespace is trimmed.
    """
    word = word.replace("_", sep).replace("-", sep)
    out = []
    for i, ch in enumerate(word):
        if i > 0 and ch.isupper():
            prev = word[i - 1]
            if prev.islower() or prev.isdecimal():
                out.append(sep)
            elif prev.isupper() and i + 1 < len(word) and word[i + 1].islower():
                out.append(sep)
        out.append(ch)
    output = "".join(out)
    if sep:
        output = re.sub(re.escape(sep) + "+", lambda _match: sep, output)
    return output.strip()
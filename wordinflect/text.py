"""Small text helpers shared by the inflection routines."""

_VOWELS = "aeiouAEIOU"


def is_all_upper(word: str) -> bool:
    """Return True if every letter in ``word`` is uppercase."""
    return all(ch.isupper() for ch in word if ch.isalpha())


def is_proper_name(word: str) -> bool:
    """Return True if ``word`` looks like a proper name (``Jones``, ``Mary``).

    A proper name starts with an uppercase letter and is not all uppercase,
    which would rather suggest an acronym.
    """
    if len(word) < 2:
        return False
    if not word[0].isupper():
        return False
    return not is_all_upper(word)


def is_proper_name_ending_in_s(word: str) -> bool:
    """Return True if ``word`` is a proper name ending in ``s`` or ``S``."""
    return is_proper_name(word) and word[-1].lower() == "s"


def is_vowel(ch: str) -> bool:
    """Return True if ``ch`` is a single English vowel letter."""
    return len(ch) == 1 and ch in _VOWELS


def _upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def match_case(original: str, replacement: str) -> str:
    """Give ``replacement`` the case pattern of ``original``."""
    if not original or not replacement:
        return replacement

    letter_count = sum(1 for ch in original if ch.isalpha())
    if letter_count == 1:
        return _upper_first(replacement) if original[0].isupper() else replacement

    if is_all_upper(original):
        return replacement.upper()

    if original[0].isupper():
        return _upper_first(replacement)

    return replacement


def match_suffix(word: str, suffix: str) -> str:
    """Return ``suffix`` in uppercase when ``word`` is all uppercase."""
    return suffix.upper() if is_all_upper(word) else suffix


def extract_whitespace(word: str) -> tuple[str, str, str]:
    """Split ``word`` into leading whitespace, the trimmed word and trailing whitespace.

    A string made only of whitespace comes back whole as the prefix.
    """
    trimmed = word.strip()
    if not trimmed:
        return word, "", ""
    start = len(word) - len(word.lstrip())
    return word[:start], trimmed, word[start + len(trimmed):]


def word_count(text: str) -> int:
    """Count the whitespace-separated words in ``text``."""
    return len(text.split())


def capitalize(s: str) -> str:
    """Uppercase the first character of ``s`` and leave the rest alone."""
    return _upper_first(s)


def titleize(s: str) -> str:
    """Convert ``s`` to title case; words are split by whitespace and dashes."""
    out = []
    capitalize_next = True
    for ch in s.lower():
        if capitalize_next and ch.isalpha():
            out.append(ch.upper())
            capitalize_next = False
            continue
        if ch.isspace() or ch == "-":
            capitalize_next = True
        out.append(ch)
    return "".join(out)
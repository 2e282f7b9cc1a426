import pytest

from wordinflect.pronouns import GENDERS, plural_pronoun, singular_pronoun


@pytest.mark.parametrize(
    "word, expected",
    [
        ("I", "We"),
        ("me", "us"),
        ("he", "they"),
        ("him", "them"),
        ("mine", "ours"),
        ("its", "their"),
        ("myself", "ourselves"),
        ("oneself", "oneselves"),
        ("one's", "one's"),
    ],
)
def test_plural_pronoun(word, expected):
    assert plural_pronoun(word) == expected


def test_plural_pronoun_keeps_case():
    assert plural_pronoun("HIM") == "THEM"
    assert plural_pronoun("She") == "They"


@pytest.mark.parametrize("word", ["cat", "we", "they", ""])
def test_plural_pronoun_unknown(word):
    assert plural_pronoun(word) is None


@pytest.mark.parametrize(
    "word, gender, expected",
    [
        ("we", "t", "I"),
        ("us", "t", "me"),
        ("they", "m", "he"),
        ("they", "f", "she"),
        ("they", "t", "they"),
        ("they", "n", "it"),
        ("them", "n", "it"),
        ("theirs", "f", "hers"),
        ("themselves", "t", "themself"),
        ("yourselves", "m", "yourself"),
    ],
)
def test_singular_pronoun(word, gender, expected):
    assert singular_pronoun(word, gender) == expected


def test_singular_pronoun_default_gender():
    assert singular_pronoun("they") == "they"


@pytest.mark.parametrize("word", ["cats", "he", "my", ""])
def test_singular_pronoun_unknown(word):
    assert singular_pronoun(word, "m") is None


@pytest.mark.parametrize("gender", ["x", "", "male"])
def test_singular_pronoun_rejects_gender(gender):
    with pytest.raises(ValueError):
        singular_pronoun("they", gender)


@pytest.mark.parametrize("gender", ["m", "f", "n"])
def test_reflexive_round_trip(gender):
    assert plural_pronoun(singular_pronoun("themselves", gender)) == "themselves"


@pytest.mark.parametrize("word", ["we", "ourselves", "yourselves", "our", "ours"])
def test_first_person_round_trip(word):
    for gender in GENDERS:
        assert plural_pronoun(singular_pronoun(word, gender)).lower() == word
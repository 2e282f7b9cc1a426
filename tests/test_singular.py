import pytest

from wordinflect.singular import (
    is_plural,
    is_singular,
    singular,
    singularize_by_suffix,
)


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("", ""),
        ("cats", "cat"),
        ("dogs", "dog"),
        ("books", "book"),
        ("buses", "bus"),
        ("classes", "class"),
        ("bushes", "bush"),
        ("churches", "church"),
        ("boxes", "box"),
        ("buzzes", "buzz"),
        ("cities", "city"),
        ("babies", "baby"),
        ("flies", "fly"),
        ("boys", "boy"),
        ("days", "day"),
        ("keys", "key"),
        ("knives", "knife"),
        ("wives", "wife"),
        ("lives", "life"),
        ("leaves", "leaf"),
        ("wolves", "wolf"),
        ("calves", "calf"),
        ("halves", "half"),
        ("heroes", "hero"),
        ("potatoes", "potato"),
        ("tomatoes", "tomato"),
        ("echoes", "echo"),
        ("radios", "radio"),
        ("studios", "studio"),
        ("zoos", "zoo"),
        ("pianos", "piano"),
        ("photos", "photo"),
        ("children", "child"),
        ("feet", "foot"),
        ("teeth", "tooth"),
        ("mice", "mouse"),
        ("women", "woman"),
        ("men", "man"),
        ("people", "person"),
        ("oxen", "ox"),
        ("geese", "goose"),
        ("lice", "louse"),
        ("dice", "die"),
        ("analyses", "analysis"),
        ("crises", "crisis"),
        ("theses", "thesis"),
        ("cacti", "cactus"),
        ("fungi", "fungus"),
        ("nuclei", "nucleus"),
        ("bacteria", "bacterium"),
        ("data", "datum"),
        ("media", "medium"),
        ("appendices", "appendix"),
        ("indices", "index"),
        ("criteria", "criterion"),
        ("phenomena", "phenomenon"),
        ("larvae", "larva"),
        ("pupae", "pupa"),
        ("antennae", "antenna"),
        ("alumnae", "alumna"),
        ("formulae", "formula"),
        ("nebulae", "nebula"),
        ("vertebrae", "vertebra"),
        ("algae", "alga"),
        ("sheep", "sheep"),
        ("deer", "deer"),
        ("fish", "fish"),
        ("species", "species"),
        ("series", "series"),
        ("aircraft", "aircraft"),
        ("moose", "moose"),
        ("firemen", "fireman"),
        ("policemen", "policeman"),
        ("spokesmen", "spokesman"),
        ("Chinese", "Chinese"),
        ("Japanese", "Japanese"),
        ("Portuguese", "Portuguese"),
        ("CATS", "CAT"),
        ("Cats", "Cat"),
        ("Children", "Child"),
        ("CHILDREN", "CHILD"),
        ("BOXES", "BOX"),
        ("Cities", "City"),
        ("MICE", "MOUSE"),
        ("cat", "cat"),
        ("class", "class"),
    ],
)
def test_singular(word, expected):
    assert singular(word) == expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [("cats", "cat"), ("boxes", "box"), ("children", "child"), ("sheep", "sheep"), ("cacti", "cactus")],
)
def test_singular_examples(word, expected):
    assert singular(word) == expected


def test_singular_oe_noun_keeps_e():
    assert singular("shoes") == "shoe"


def test_singular_with_custom_irregulars():
    table = {"octopodes": "octopus"}
    assert singular("octopodes", table) == "octopus"
    assert singular("Octopodes", table) == "Octopus"


def test_custom_irregulars_replace_defaults():
    assert singular("children", {}) == "children"
    assert singular("cats", {}) == "cat"


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("larvae", "larva"),
        ("firemen", "fireman"),
        ("FIREMEN", "FIREMAN"),
        ("Cities", "City"),
        ("KNIVES", "KNIFE"),
        ("children", "children"),
        ("", ""),
    ],
)
def test_singularize_by_suffix(word, expected):
    assert singularize_by_suffix(word) == expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("cats", True),
        ("dogs", True),
        ("boxes", True),
        ("cities", True),
        ("children", True),
        ("mice", True),
        ("feet", True),
        ("teeth", True),
        ("geese", True),
        ("people", True),
        ("cat", False),
        ("dog", False),
        ("child", False),
        ("mouse", False),
        ("foot", False),
        ("person", False),
        ("sheep", False),
        ("fish", False),
        ("deer", False),
        ("", False),
    ],
)
def test_is_plural(word, expected):
    assert is_plural(word) is expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("cat", True),
        ("dog", True),
        ("child", True),
        ("mouse", True),
        ("foot", True),
        ("person", True),
        ("cats", False),
        ("dogs", False),
        ("children", False),
        ("mice", False),
        ("feet", False),
        ("people", False),
        ("sheep", True),
        ("fish", True),
        ("deer", True),
        ("", False),
    ],
)
def test_is_singular(word, expected):
    assert is_singular(word) is expected


@pytest.mark.parametrize("word", ["cats", "children", "cat", "sheep", "boxes", "mouse"])
def test_is_plural_and_is_singular_are_opposites(word):
    assert is_plural(word) is not is_singular(word)
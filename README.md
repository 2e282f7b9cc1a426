# wordinflect

Small, dependency-free helpers for inflecting English words.

- Singularize nouns and tell plurals from singulars.
- Form possessives (`cat's`, `cats'`, `James's` or `James'`).
- Inflect pronouns, auxiliary verbs and determiners between singular and plural.
- Convert between integers and Roman numerals, with strict validation.
- Naming helpers: humanize identifiers, make URL slugs, strip accents.

## Installation

```
pip install wordinflect
```

## Usage

### Nouns

```python
from wordinflect.engine import Engine

engine = Engine()
engine.singular("boxes")      # "box"
engine.singular("children")   # "child"
engine.singular("CATS")       # "CAT"

engine.def_noun("gizmo", "gizmoz")
engine.singular("gizmoz")     # "gizmo"

copy = engine.clone()         # independent copy of the configuration
```

`def_noun` raises `ValueError` if either form is empty. An engine is safe
to share between threads; `default_engine()` returns the shared engine used
by the module-level functions in `wordinflect.engine`.

`wordinflect.singular` offers the same rules as plain functions:

```python
from wordinflect.singular import singular, singularize_by_suffix, is_plural, is_singular

singular("mice")                 # "mouse"
singular("Japanese")             # "Japanese"
singularize_by_suffix("cities")  # "city"  (endings only, no irregular forms)
is_plural("cats")                # True
is_singular("sheep")             # True   (unchanged plurals count as singular)
```

`singular` takes an optional mapping of lower-case plurals to singulars that
replaces the built-in table of irregular nouns (`IRREGULAR_SINGULARS`).

### Possessives

```python
from wordinflect.engine import (
    Engine, PossessiveStyle, possessive, set_possessive_style, get_possessive_style,
)

possessive("cat")       # "cat's"
possessive("cats")      # "cats'"
possessive("children")  # "children's"
possessive("James")     # "James's"
possessive("it")        # "its"

set_possessive_style(PossessiveStyle.TRADITIONAL)
possessive("James")     # "James'"
get_possessive_style()  # PossessiveStyle.TRADITIONAL
```

Words already in possessive form come back unchanged. Each `Engine` keeps its
own style in its `possessive_style` property, so settings on one engine never
leak into another.

### Pronouns, verbs and determiners

```python
from wordinflect.pronouns import plural_pronoun, singular_pronoun
from wordinflect.verbs import plural_verb, singular_verb, is_unchanged_verb, plural_adj, singular_adj

plural_pronoun("myself")        # "ourselves"
singular_pronoun("they", "f")   # "she"
plural_verb("was")              # "were"
singular_verb("don't")          # "doesn't"
is_unchanged_verb("can")        # True
plural_adj("this")              # "these"
singular_adj("their", "m")      # "his"
```

These functions return `None` for words they do not know. Genders are `"m"`,
`"f"`, `"n"` (neuter) and `"t"` (they, the default); any other code raises
`ValueError`.

### Roman numerals

```python
from wordinflect.roman import int_to_roman, roman_to_int, InvalidRomanError

int_to_roman(1984)      # "MCMLXXXIV"
roman_to_int("mmxxv")   # 2025
roman_to_int("IIII")    # raises InvalidRomanError (a ValueError)
```

Only 1 to 3999 are representable; `int_to_roman` returns an empty string
outside that range. `Engine.int_to_roman` and `Engine.roman_to_int` do the same.

### Naming and text helpers

```python
from wordinflect.rails import humanize, parameterize, parameterize_join, asciify, separated_words
from wordinflect.text import capitalize, titleize, word_count

humanize("employee_salary")             # "Employee salary"
humanize("author_id")                   # "Author"
separated_words("XMLParser", " ")       # "XML Parser"
parameterize("café au lait")            # "cafe-au-lait"
parameterize_join("Hello World!", "_")  # "hello_world"
asciify("Crème brûlée")                 # "Creme brulee"
capitalize("hello world")               # "Hello world"
titleize("hello-world")                 # "Hello-World"
word_count("  one   two   three  ")     # 3
```

## What it does not do

The package has no function that forms the plural of a noun, no conversion of
numbers to words or ordinals, and no command-line program; it is a library of
the functions described above.

## Running the tests

```
pip install -e ".[test]"
pytest
```
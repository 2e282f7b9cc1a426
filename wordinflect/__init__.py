"""English word inflection: singulars, possessives, pronouns, verbs, Roman numerals and naming helpers."""

__version__ = "0.1.0"
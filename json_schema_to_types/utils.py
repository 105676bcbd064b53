"""
Utility functions for JSON Schema to type declaration generator.
"""

import re

# Regex pattern to split text into words, handling camelCase and acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

# Last word of a PascalCase name
_LAST_WORD_PATTERN = re.compile(r"([A-Z]?[a-z]+|[A-Z]+|[0-9]+)$")

_UNCOUNTABLE = {
    "data",
    "equipment",
    "information",
    "metadata",
    "money",
    "news",
    "rice",
    "series",
    "sheep",
    "species",
    "fish",
}

_IRREGULAR = {
    "people": "person",
    "men": "man",
    "women": "woman",
    "children": "child",
    "mice": "mouse",
    "geese": "goose",
    "teeth": "tooth",
    "feet": "foot",
    "criteria": "criterion",
    "indices": "index",
    "matrices": "matrix",
    "vertices": "vertex",
    "leaves": "leaf",
    "lives": "life",
    "movies": "movie",
}

# (pattern, replacement), first match wins
_SINGULAR_RULES = [
    (re.compile(r"(quiz)zes$"), r"\1"),
    (re.compile(r"(analy|diagno|parenthe|progno|synop|the)(sis|ses)$"), r"\1sis"),
    (re.compile(r"(alias|status|bus|campus|virus)(es)?$"), r"\1"),
    (re.compile(r"(octop)(us|i)$"), r"\1us"),
    (re.compile(r"(cris|ax|test)(is|es)$"), r"\1is"),
    (re.compile(r"(shoe|hive|tive|ove)s$"), r"\1"),
    (re.compile(r"([^aeiouy]|qu)ies$"), r"\1y"),
    (re.compile(r"(x|ch|ss|sh|zz)es$"), r"\1"),
    (re.compile(r"([lr])ves$"), r"\1f"),
    (re.compile(r"(o)es$"), r"\1"),
    (re.compile(r"(ss|us|is)$"), r"\1"),
    (re.compile(r"s$"), ""),
]


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "house-pet" -> "HousePet"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"
        "ABC" -> "Abc"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def pascal_to_snake_case(text: str) -> str:
    """Convert PascalCase, camelCase or kebab-case text to snake_case."""
    if not text:
        return ""
    words = _split_into_words(_normalize_separators(text))
    return "_".join(word.lower() for word in words)


def singularize_word(word: str) -> str:
    """Singularize a single lowercase English word.

    Examples:
        "addresses" -> "address"
        "categories" -> "category"
        "children" -> "child"
        "status" -> "status"
    """
    if word in _UNCOUNTABLE:
        return word
    if word in _IRREGULAR:
        return _IRREGULAR[word]
    for pattern, replacement in _SINGULAR_RULES:
        if pattern.search(word):
            return pattern.sub(replacement, word)
    return word


def singularize(name: str) -> str:
    """Singularize the last word of a PascalCase type name.

    Examples:
        "PersonAddresses" -> "PersonAddress"
        "Categories" -> "Category"
        "ShopItem" -> "ShopItem"

    Args:
        name: A PascalCase name, typically a context name

    Returns:
        The name with its last word singularized
    """
    match = _LAST_WORD_PATTERN.search(name)
    if not match or match.group(1).isdigit():
        return name

    last_word = match.group(1)
    singular = singularize_word(last_word.lower())
    if not singular:
        return name

    if last_word.isupper() and len(last_word) > 1:
        singular = singular.upper()
    elif last_word[0].isupper():
        singular = singular.capitalize()

    return name[: match.start(1)] + singular

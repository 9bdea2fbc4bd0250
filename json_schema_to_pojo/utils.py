"""
Utility functions for turning schema names into Java identifiers.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Like _WORD_PATTERN but keeps runs of capitals together ("HTTPError" -> "HTTP", "Error")
_ACRONYM_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

JAVA_RESERVED_KEYWORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "true",
    "try",
    "void",
    "volatile",
    "while",
}


def _normalize_separators(text: str) -> str:
    """Replace every non-alphanumeric character with a space."""
    return re.sub(r"[^A-Za-z0-9]", " ", text)


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(_normalize_separators(text))


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case, camelCase or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"
    """
    if not text:
        return ""
    return "".join(word.capitalize() for word in _split_into_words(text) if word)


def to_camel_case(text: str) -> str:
    """Convert a raw property name to lowerCamelCase.

    Unlike ``snake_to_pascal_case`` this keeps the casing inside words, so
    "publisherId" stays "publisherId" and "URL" becomes "uRL" rather than "url".
    """
    parts = [p for p in _normalize_separators(text).split(" ") if p]
    if not parts:
        return ""
    head, tail = parts[0], parts[1:]
    name = head[:1].lower() + head[1:] + "".join(p[:1].upper() + p[1:] for p in tail)
    return name


def to_upper_snake_case(text: str) -> str:
    """Convert any text to UPPER_SNAKE_CASE, used for enum constants."""
    words = _ACRONYM_WORD_PATTERN.findall(_normalize_separators(str(text)))
    return "_".join(word.upper() for word in words)


def capitalize(text: str) -> str:
    """Upper-case the first character only."""
    return text[:1].upper() + text[1:]


def make_java_identifier(name: str) -> str:
    """Make ``name`` a legal Java identifier."""
    if not name:
        return "__EMPTY__"
    if name[0].isdigit():
        name = "_" + name
    if name in JAVA_RESERVED_KEYWORDS:
        name = name + "_"
    return name


def singularize(name: str) -> str:
    """Naive English singular of a plural property name, used to name array item classes.

    Examples:
        "addresses" -> "address"
        "categories" -> "category"
        "items" -> "item"
    """
    lower = name.lower()
    if lower.endswith("ies") and len(name) > 3:
        return name[:-3] + ("Y" if name[-3].isupper() else "y")
    if lower.endswith(("sses", "shes", "ches", "xes")):
        return name[:-2]
    if lower.endswith("s") and not lower.endswith("ss") and len(name) > 1:
        return name[:-1]
    return name

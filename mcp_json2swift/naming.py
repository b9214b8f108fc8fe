"""Identifier and type-name helpers for generated Swift code."""

import re
from typing import Container

SWIFT_KEYWORDS = frozenset(
    {
        "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
        "func", "import", "init", "inout", "internal", "let", "open", "operator",
        "private", "protocol", "public", "rethrows", "static", "struct",
        "subscript", "typealias", "var", "break", "case", "continue", "default",
        "defer", "do", "else", "fallthrough", "for", "guard", "if", "in",
        "repeat", "return", "switch", "where", "while", "as", "catch", "false",
        "is", "nil", "super", "self", "throw", "throws", "true", "try", "Any",
        "Self", "Type", "Protocol",
    }
)

_WORD_SEPARATOR = re.compile(r"[\W_]+")
_LEADING_CAPITALS = re.compile(r"[A-Z]+(?=[a-z])")


def camel_case(key: str) -> str:
    """Transliterate a JSON key into a lowerCamelCase Swift identifier.

    ``user_name`` becomes ``userName``; keys that are already camel case are
    kept. Anything that is not a letter or digit separates words.
    """
    parts = [part for part in _WORD_SEPARATOR.split(key) if part]
    if not parts:
        return "field"

    first, rest = parts[0], parts[1:]
    if first.isupper():
        first = first.lower()
    else:
        # "HTTPStatus": the capitals before the last one form an acronym
        run = _LEADING_CAPITALS.match(first)
        prefix_length = max(len(run.group()) - 1, 1) if run else 1
        first = first[:prefix_length].lower() + first[prefix_length:]

    words = [first]
    for part in rest:
        if part.isupper():
            part = part.lower()
        words.append(part[0].upper() + part[1:])

    identifier = "".join(words)
    if identifier[0].isdigit():
        identifier = "_" + identifier
    return identifier


def capitalize_first_letter(name: str) -> str:
    return name[:1].upper() + name[1:]


def unique_name(base: str, taken: Container[str]) -> str:
    """Return ``base``, or ``base`` with the lowest free counter from 2."""
    if base not in taken:
        return base
    counter = 2
    while f"{base}{counter}" in taken:
        counter += 1
    return f"{base}{counter}"


def escape_identifier(name: str) -> str:
    if name in SWIFT_KEYWORDS:
        return f"`{name}`"
    return name


def swift_string_literal(text: str) -> str:
    """Quote ``text`` as a Swift string literal."""
    escaped = []
    for char in text:
        if char == "\\":
            escaped.append("\\\\")
        elif char == '"':
            escaped.append('\\"')
        elif char == "\n":
            escaped.append("\\n")
        elif char == "\r":
            escaped.append("\\r")
        elif char == "\t":
            escaped.append("\\t")
        elif ord(char) < 0x20:
            escaped.append(f"\\u{{{ord(char):X}}}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'

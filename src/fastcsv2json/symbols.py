"""Symbolic names accepted for delimiters and sanitization characters.

Shells make literal tabs, pipes and quotes awkward to pass around, so the
command line takes names instead::

    fastcsv2json -d pipe -r dquote -e cr < data.psv
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from .models import Error

DELIMITERS: Dict[str, str] = {
    "pipe": "|",
    "comma": ",",
    "semicolumn": ";",
    "column": ":",
    "space": " ",
    "tab": "\t",
}

# Replacing a space with a space is meaningless, so "space" is erase-only.
REPLACE_CHARACTERS: Dict[str, str] = {
    "pipe": "|",
    "comma": ",",
    "semicolumn": ";",
    "column": ":",
    "tab": "\t",
    "backslash": "\\",
    "lf": "\n",
    "cr": "\r",
    "squote": "'",
    "dquote": '"',
    "slash": "/",
}

ERASE_CHARACTERS: Dict[str, str] = {**REPLACE_CHARACTERS, "space": " "}


def resolve_delimiter(name: str) -> str | Error:
    """Map a delimiter name to its literal text.

    Args:
        name: Symbolic name, e.g. "pipe" or "tab"

    Returns:
        The delimiter string, or Error for an unknown name
    """
    try:
        return DELIMITERS[name]
    except KeyError:
        return Error(message=f"Unknown delimiter: {name}")


def resolve_characters(
    names: Iterable[str], table: Dict[str, str]
) -> List[str] | Error:
    """Map character names through ``table``, preserving order.

    Duplicates are dropped; the first unknown name stops resolution.
    """
    chars: List[str] = []
    for name in names:
        char = table.get(name)
        if char is None:
            return Error(message=f"Unknown character: {name}")
        if char not in chars:
            chars.append(char)
    return chars


def resolve_replace_characters(names: Iterable[str]) -> List[str] | Error:
    """Resolve names for the replace-with-space set."""
    return resolve_characters(names, REPLACE_CHARACTERS)


def resolve_erase_characters(names: Iterable[str]) -> List[str] | Error:
    """Resolve names for the erase set."""
    return resolve_characters(names, ERASE_CHARACTERS)


__all__ = [
    "DELIMITERS",
    "ERASE_CHARACTERS",
    "REPLACE_CHARACTERS",
    "resolve_characters",
    "resolve_delimiter",
    "resolve_erase_characters",
    "resolve_replace_characters",
]

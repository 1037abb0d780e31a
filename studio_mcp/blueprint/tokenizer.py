"""Lexer splitting a shell word into literal text and field tokens.

Three placeholder syntaxes are recognised inside a shell word:

* ``{{name}}`` / ``{{name#description}}`` / ``{{name...}}`` - required fields
* ``[name]`` / ``[name#description]`` / ``[name...]`` - optional fields
* ``[-f]`` / ``[--flag]`` / ``[-f#description]`` - boolean flags

Tokenization is total: unbalanced delimiters, empty names, and names that are
not identifiers fall back to literal text instead of raising.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .tokens import FieldToken, TextToken, Token, normalize_name

REQUIRED_OPEN = "{{"
REQUIRED_CLOSE = "}}"
OPTIONAL_OPEN = "["
OPTIONAL_CLOSE = "]"
ARRAY_SUFFIX = "..."
DESCRIPTION_SEPARATOR = "#"

_CLOSERS = {REQUIRED_OPEN: REQUIRED_CLOSE, OPTIONAL_OPEN: OPTIONAL_CLOSE}
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def tokenize(word: str) -> List[Token]:
    """Split ``word`` into an ordered, non-empty list of tokens."""
    whole = _parse_whole_word(word)
    if whole is not None:
        return [whole]

    tokens: List[Token] = []
    literal: List[str] = []
    position = 0

    while position < len(word):
        opener, start = _next_opener(word, position)
        if opener is None:
            break
        closer = _CLOSERS[opener]
        end = word.find(closer, start + len(opener))
        if end == -1:
            # Unbalanced: the rest of the word, opener included, stays literal.
            break

        stop = end + len(closer)
        field = parse_field(word[start + len(opener) : end], required=opener == REQUIRED_OPEN)
        if field is None:
            literal.append(word[position:stop])
        else:
            literal.append(word[position:start])
            _flush(literal, tokens)
            tokens.append(field)
        position = stop

    literal.append(word[position:])
    _flush(literal, tokens)

    if not tokens:
        tokens.append(TextToken(word))
    return tokens


def parse_field(content: str, *, required: bool) -> Optional[FieldToken]:
    """Parse the text between delimiters, returning ``None`` when it is not a valid field."""
    name_part, _, description_part = content.partition(DESCRIPTION_SEPARATOR)
    name = name_part.strip()
    description = description_part.strip()

    is_array = False
    if name.endswith(ARRAY_SUFFIX):
        is_array = True
        name = name[: -len(ARRAY_SUFFIX)].rstrip()

    if not required and name.startswith("-"):
        bare = name.lstrip("-")
        if not _is_identifier(bare):
            return None
        return FieldToken(
            name=bare,
            description=description or f"Enable {name} flag",
            required=False,
            original_flag=name,
        )

    if not _is_identifier(name):
        return None
    return FieldToken(
        name=name,
        description=description,
        required=required,
        is_array=is_array,
    )


def _parse_whole_word(word: str) -> Optional[Token]:
    stripped = word.strip()
    for opener, closer in _CLOSERS.items():
        if len(stripped) < len(opener) + len(closer):
            continue
        if not (stripped.startswith(opener) and stripped.endswith(closer)):
            continue
        inner = stripped[len(opener) : -len(closer)]
        if opener in inner or closer in inner:
            continue
        field = parse_field(inner, required=opener == REQUIRED_OPEN)
        return field if field is not None else TextToken(word)
    return None


def _next_opener(word: str, position: int) -> Tuple[Optional[str], int]:
    found: Optional[str] = None
    index = -1
    for opener in (REQUIRED_OPEN, OPTIONAL_OPEN):
        candidate = word.find(opener, position)
        if candidate != -1 and (index == -1 or candidate < index):
            found, index = opener, candidate
    return found, index


def _flush(literal: List[str], tokens: List[Token]) -> None:
    text = "".join(literal)
    literal.clear()
    if text:
        tokens.append(TextToken(text))


def _is_identifier(name: str) -> bool:
    return bool(name) and _IDENTIFIER.match(normalize_name(name)) is not None


__all__ = ["parse_field", "tokenize"]

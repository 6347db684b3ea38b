"""Identifier conversion for generated MoonBit code"""

import re

MOONBIT_KEYWORDS = frozenset([
    'type', 'match', 'default', 'pub', 'priv', 'fn', 'let', 'mut',
    'struct', 'enum', 'trait', 'impl', 'if', 'else', 'while', 'for',
    'break', 'continue', 'return', 'try', 'catch', 'throw', 'async', 'await',
])

# Appended to identifiers that collide with a keyword
KEYWORD_SUFFIX = '_'

_UPPER = re.compile(r'([A-Z])')


def to_snake_case(name: str) -> str:
    """camelCase -> snake_case; every capital starts a new word (URL -> u_r_l)"""
    converted = _UPPER.sub(r'_\1', name).lower()
    if converted.startswith('_'):
        converted = converted[1:]
    return converted


def escape_keyword(name: str) -> str:
    if name in MOONBIT_KEYWORDS:
        return name + KEYWORD_SUFFIX
    return name


def to_identifier(name: str) -> str:
    """IDL member name -> MoonBit identifier"""
    return escape_keyword(to_snake_case(name))

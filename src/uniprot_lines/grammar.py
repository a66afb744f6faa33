"""Grammar primitives shared by the line decoders.

Every recognizer takes the unconsumed text and returns a
``(remainder, value)`` pair. On failure it raises ``LineSyntaxError``
carrying the text it was given, so nothing is consumed.
"""

import string
from typing import Tuple

from .error_handler import LineSyntaxError

UPPERCASE = frozenset(string.ascii_uppercase)
DIGITS = frozenset(string.digits)
ALPHANUMERIC = UPPERCASE | DIGITS
SPACE = frozenset(' \t')

Result = Tuple[str, str]


def tag(literal: str, text: str) -> Result:
    """Match a literal string."""
    if not text.startswith(literal):
        raise LineSyntaxError(text, repr(literal))
    return text[len(literal):], literal


def take_while_m_n(charset: frozenset, minimum: int, maximum: int, text: str,
                   expected: str = "characters") -> Result:
    """Match between ``minimum`` and ``maximum`` characters from ``charset``.

    Stops after ``maximum`` characters even if more would match.
    """
    count = 0
    while count < maximum and count < len(text) and text[count] in charset:
        count += 1
    if count < minimum:
        raise LineSyntaxError(text, expected)
    return text[count:], text[:count]


def space0(text: str) -> Result:
    return take_while_m_n(SPACE, 0, len(text), text)


def space1(text: str) -> Result:
    return take_while_m_n(SPACE, 1, len(text), text, "space")


def digit1(text: str) -> Result:
    return take_while_m_n(DIGITS, 1, len(text), text, "digits")


def newline(text: str) -> Result:
    return tag('\n', text)

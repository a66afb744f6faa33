"""Accession number grammar.

UniProtKB accession numbers come in two families:

* ``CLASSIC``: first letter A-N or R-Z, a digit, then one or two blocks of
  [uppercase, alphanumeric, alphanumeric, digit]. Always 6 or 10 characters.
* ``LEGACY``: first letter O, P or Q, a digit, three alphanumerics and a
  digit. Always 6 characters.

Each family is a fixed sequence of character classes, so a match is exactly
as long as its pattern. Anything after the pattern is left in the remainder
for the caller to deal with.
"""

from enum import Enum
from typing import Tuple

from .error_handler import LineSyntaxError
from .grammar import ALPHANUMERIC, DIGITS, UPPERCASE

_CLASSIC_FIRST = frozenset('ABCDEFGHIJKLMNRSTUVWXYZ')
_LEGACY_FIRST = frozenset('OPQ')
_BLOCK = (UPPERCASE, ALPHANUMERIC, ALPHANUMERIC, DIGITS)


class AccessionFormat(Enum):
    """The two accession number families, with their patterns longest first."""

    CLASSIC = (
        (_CLASSIC_FIRST, DIGITS) + _BLOCK + _BLOCK,
        (_CLASSIC_FIRST, DIGITS) + _BLOCK,
    )
    LEGACY = (
        (_LEGACY_FIRST, DIGITS, ALPHANUMERIC, ALPHANUMERIC, ALPHANUMERIC, DIGITS),
    )

    @property
    def patterns(self) -> tuple:
        return self.value


def _match_pattern(pattern: tuple, text: str) -> bool:
    if len(text) < len(pattern):
        return False
    return all(char in charset for char, charset in zip(text, pattern))


def _recognize(text: str) -> Tuple[str, AccessionFormat]:
    for accession_format in AccessionFormat:
        # First letters of the two families are disjoint
        if not text or text[0] not in accession_format.patterns[0][0]:
            continue
        for pattern in accession_format.patterns:
            if _match_pattern(pattern, text):
                return text[:len(pattern)], accession_format
        break
    raise LineSyntaxError(text, "accession number")


def accession(text: str) -> Tuple[str, str]:
    """Recognize one accession number at the start of ``text``.

    Args:
        text: Unconsumed input

    Returns:
        Tuple of (remainder, accession number)

    Raises:
        LineSyntaxError: If ``text`` does not start with an accession number
    """
    token, _ = _recognize(text)
    return text[len(token):], token


def classify_accession(token: str) -> AccessionFormat:
    """Return the family of a complete accession number.

    Raises:
        LineSyntaxError: If ``token`` is not exactly one accession number
    """
    matched, accession_format = _recognize(token)
    if len(matched) != len(token):
        raise LineSyntaxError(token[len(matched):], "end of accession number")
    return accession_format


def is_accession(token: str) -> bool:
    """Check whether ``token`` is exactly one accession number."""
    try:
        classify_accession(token)
    except LineSyntaxError:
        return False
    return True

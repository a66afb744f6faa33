"""Decoder for the ID (identification) line of an entry.

    ID   CYC_BOVIN               Reviewed;         104 AA.
"""

from typing import Tuple

from .error_handler import LineSyntaxError
from .grammar import ALPHANUMERIC, digit1, newline, space1, tag, take_while_m_n
from .models import EntryStatus, IdLine

MAX_SEQUENCE_LENGTH = 2 ** 64 - 1
MAX_LENGTH_DIGITS = len(str(MAX_SEQUENCE_LENGTH))

_STATUS_LITERALS = (
    ("Unreviewed", EntryStatus.UNREVIEWED),
    ("Reviewed", EntryStatus.REVIEWED),
)


def entry_name(text: str) -> Tuple[str, str]:
    """Recognize ``MNEMONIC_SPECIES`` (1-10 and 1-5 uppercase alphanumerics)."""
    rest, mnemonic = take_while_m_n(ALPHANUMERIC, 1, 10, text, "entry name")
    rest, _ = tag('_', rest)
    rest, species = take_while_m_n(ALPHANUMERIC, 1, 5, rest, "species code")
    return rest, f"{mnemonic}_{species}"


def entry_status(text: str) -> Tuple[str, EntryStatus]:
    """Recognize ``Reviewed`` or ``Unreviewed``, case-sensitively."""
    for literal, status in _STATUS_LITERALS:
        if text.startswith(literal):
            return text[len(literal):], status
    raise LineSyntaxError(text, "entry status")


def sequence_length(text: str) -> Tuple[str, int]:
    """Recognize ``<digits> AA`` and return the length as an integer.

    The length must fit an unsigned 64-bit integer.
    """
    rest, digits = digit1(text)
    rest, _ = space1(rest)
    rest, _ = tag('AA', rest)
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_LENGTH_DIGITS or int(significant) > MAX_SEQUENCE_LENGTH:
        raise LineSyntaxError(text, "sequence length")
    return rest, int(significant)


def id_line(text: str) -> Tuple[str, IdLine]:
    """Decode one ID line.

    Args:
        text: Unconsumed input starting with ``ID``

    Returns:
        Tuple of (remainder after the newline, decoded IdLine)

    Raises:
        LineSyntaxError: If any part of the line does not match
    """
    rest, _ = tag('ID', text)
    rest, _ = space1(rest)
    rest, name = entry_name(rest)
    rest, _ = space1(rest)
    rest, status = entry_status(rest)
    rest, _ = tag(';', rest)
    rest, _ = space1(rest)
    rest, length = sequence_length(rest)
    rest, _ = tag('.', rest)
    rest, _ = newline(rest)

    return rest, IdLine(name=name, status=status, length=length)

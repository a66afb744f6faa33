"""Decoder for the AC (accession number) block of an entry.

    AC   Q16653; O00713; O00714; O00715; Q13054; Q13055; Q14855; Q92891;
    AC   Q92892; Q92893; Q92894; Q92895; Q93053; Q96KU9; Q96KV0; Q96KV1;
    AC   Q99605;

Each physical line carries between 1 and 8 semicolon-terminated accession
numbers. The block is decoded into one list in order of appearance.
"""

from typing import List, Tuple

from .accession import accession
from .error_handler import LineSyntaxError
from .grammar import SPACE, newline, space0, space1, tag

MAX_ACCESSIONS_PER_LINE = 8


def _starts_ac_line(text: str) -> bool:
    return len(text) > 2 and text.startswith('AC') and text[2] in SPACE


def _accession_item(text: str) -> Tuple[str, str]:
    rest, _ = space0(text)
    rest, token = accession(rest)
    rest, _ = tag(';', rest)
    return rest, token


def ac_single_line(text: str) -> Tuple[str, List[str]]:
    """Decode one physical AC line.

    Args:
        text: Unconsumed input starting with ``AC``

    Returns:
        Tuple of (remainder after the newline, accessions on the line)

    Raises:
        LineSyntaxError: If the line does not match
    """
    rest, _ = tag('AC', text)
    rest, _ = space1(rest)

    accessions = []
    while len(accessions) < MAX_ACCESSIONS_PER_LINE:
        try:
            rest, token = _accession_item(rest)
        except LineSyntaxError:
            if not accessions:
                raise
            break
        accessions.append(token)

    # Anything but the line end here is an overlong token, a stray
    # character or a ninth accession
    rest, _ = newline(rest)
    return rest, accessions


def ac_line(text: str) -> Tuple[str, List[str]]:
    """Decode an AC block of one or more physical lines.

    Lines are consumed while they start with ``AC`` followed by a space. A
    continuation line that fails to decode fails the whole block.

    Args:
        text: Unconsumed input starting with the first AC line

    Returns:
        Tuple of (remainder after the last AC line, all accessions in order)

    Raises:
        LineSyntaxError: If no AC line is present or any AC line is malformed
    """
    rest, accessions = ac_single_line(text)
    while _starts_ac_line(rest):
        rest, more = ac_single_line(rest)
        accessions.extend(more)
    return rest, accessions

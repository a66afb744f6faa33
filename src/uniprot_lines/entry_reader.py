"""Reading entry headers (ID and AC lines) out of UniProtKB flat files."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .ac_line import ac_line
from .error_handler import ErrorHandler, LineSyntaxError
from .id_line import id_line
from .models import EntryHeader

logger = logging.getLogger(__name__)

ENTRY_TERMINATOR = '//'
ON_ERROR_CHOICES = ('skip', 'abort')


def split_entries(text: str) -> List[str]:
    """Split flat-file text into entries on ``//`` terminator lines.

    Each returned entry keeps its line terminators. Text after the last
    terminator is returned as a final entry unless it is blank.
    """
    lines = [line + '\n' for line in text.split('\n')]
    lines[-1] = lines[-1][:-1]

    entries = []
    current: List[str] = []
    for line in lines:
        if line.rstrip('\n') == ENTRY_TERMINATOR:
            entries.append(''.join(current))
            current = []
        else:
            current.append(line)

    tail = ''.join(current)
    if tail.strip():
        entries.append(tail)
    return entries


def parse_entry(entry_text: str) -> EntryHeader:
    """
    Decode the ID line and AC block of a single entry.

    The entry must start with its ID line. Lines between the ID line and
    the first AC line are skipped without being parsed.

    Args:
        entry_text: Text of one entry, without the ``//`` terminator

    Returns:
        EntryHeader for the entry

    Raises:
        LineSyntaxError: If the ID line or AC block is missing or malformed
    """
    text = entry_text.lstrip('\n')
    rest, identification = id_line(text)

    while rest and not rest.startswith('AC'):
        rest = rest.partition('\n')[2]
    if not rest:
        raise LineSyntaxError(text, "AC line")

    _, accessions = ac_line(rest)
    return EntryHeader(id_line=identification, accessions=accessions)


class EntryReader:
    """Reader for whole flat files held in memory."""

    # Common encodings to try
    ENCODINGS = ['utf-8', 'utf-8-sig', 'latin-1']

    def __init__(self, on_error: str = 'skip', error_handler: Optional[ErrorHandler] = None):
        """
        Initialize the reader.

        Args:
            on_error: 'skip' to record malformed entries and continue,
                'abort' to raise on the first one
            error_handler: Handler collecting skipped entries
        """
        if on_error not in ON_ERROR_CHOICES:
            raise ValueError(f"on_error must be one of {ON_ERROR_CHOICES}, got {on_error!r}")
        self.on_error = on_error
        self.error_handler = error_handler or ErrorHandler()
        self.last_encoding = None
        self.last_entry_count = 0
        self.last_failed_count = 0

    def read_file(self, file_path: Union[str, Path],
                  encoding: Optional[str] = None) -> List[EntryHeader]:
        """
        Read a flat file and decode the header of every entry.

        Args:
            file_path: Path to the flat file
            encoding: File encoding (auto-detected if None)

        Returns:
            List of EntryHeader in file order

        Raises:
            FileNotFoundError: If the file doesn't exist
            LineSyntaxError: On a malformed entry when on_error is 'abort'
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        encoding = encoding or self._detect_encoding(path)
        with open(path, 'r', encoding=encoding, newline='') as f:
            text = f.read()

        self.last_encoding = encoding
        logger.debug(f"Read {len(text)} characters from {path} ({encoding})")
        return self.read_text(text, source=str(path))

    def read_text(self, text: str, source: Optional[str] = None) -> List[EntryHeader]:
        """Decode the header of every entry in ``text``."""
        headers = []
        entries = split_entries(text)
        failed = 0

        for index, entry_text in enumerate(entries):
            if not entry_text.strip():
                continue
            try:
                header = parse_entry(entry_text)
            except LineSyntaxError as e:
                if self.on_error == 'abort':
                    raise
                self.error_handler.handle_error(
                    e, operation='parse_entry', entry_index=index, source=source
                )
                failed += 1
                continue

            logger.debug(f"Decoded {header.id_line.name} ({len(header.accessions)} accessions)")
            headers.append(header)

        self.last_entry_count = len(headers) + failed
        self.last_failed_count = failed
        logger.info(f"Decoded {len(headers)} of {self.last_entry_count} entries")
        return headers

    def _detect_encoding(self, path: Path) -> str:
        """Detect file encoding."""
        with open(path, 'rb') as f:
            bom = f.read(3)
            if bom == b'\xef\xbb\xbf':  # UTF-8 BOM
                return 'utf-8-sig'

        for encoding in self.ENCODINGS:
            try:
                with open(path, 'r', encoding=encoding) as f:
                    f.read()
                return encoding
            except UnicodeError:
                continue

        return 'utf-8'

    def get_format_info(self) -> Dict[str, Any]:
        """Get information about the last read."""
        return {
            'encoding': self.last_encoding,
            'entries': self.last_entry_count,
            'failed': self.last_failed_count
        }

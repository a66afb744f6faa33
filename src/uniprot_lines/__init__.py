"""UniProtKB flat-file line decoders.

Decodes the ID (identification) and AC (accession number) lines of
UniProtKB/Swiss-Prot flat-file entries.
"""

from .ac_line import ac_line
from .accession import AccessionFormat, accession, classify_accession, is_accession
from .error_handler import LineSyntaxError, UniProtLinesError
from .id_line import id_line
from .models import EntryHeader, EntryStatus, IdLine

__version__ = "1.0.0"

__all__ = [
    "AccessionFormat",
    "EntryHeader",
    "EntryStatus",
    "IdLine",
    "LineSyntaxError",
    "UniProtLinesError",
    "ac_line",
    "accession",
    "classify_accession",
    "id_line",
    "is_accession",
]

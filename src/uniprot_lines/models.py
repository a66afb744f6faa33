"""Data models for decoded UniProtKB flat-file lines."""

from dataclasses import dataclass
from enum import Enum
from typing import List


class EntryStatus(Enum):
    """Curation level of an entry."""

    REVIEWED = "Reviewed"
    UNREVIEWED = "Unreviewed"


@dataclass(frozen=True)
class IdLine:
    """Decoded ID line of one entry."""

    name: str
    status: EntryStatus
    length: int  # amino acids

    @property
    def mnemonic(self) -> str:
        """Part of the entry name before the underscore."""
        return self.name.split('_', 1)[0]

    @property
    def species_code(self) -> str:
        """Part of the entry name after the underscore."""
        return self.name.split('_', 1)[1]

    @property
    def is_reviewed(self) -> bool:
        return self.status is EntryStatus.REVIEWED


@dataclass(frozen=True)
class EntryHeader:
    """ID line of an entry together with its accession numbers."""

    id_line: IdLine
    accessions: List[str]

    @property
    def primary_accession(self) -> str:
        """First accession listed; the stable identifier of the entry."""
        return self.accessions[0]

    @property
    def secondary_accessions(self) -> List[str]:
        """Accessions of entries merged into this one."""
        return self.accessions[1:]

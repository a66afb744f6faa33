"""Output formatting for decoded entry headers."""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .models import EntryHeader


class OutputFormatter:
    """Formatter for tabular and JSON output."""

    COLUMNS = [
        "Entry Name",
        "Mnemonic",
        "Species Code",
        "Status",
        "Length",
        "Primary Accession",
        "Secondary Accessions",
        "Error"
    ]

    FORMATS = ('tsv', 'csv', 'json')

    def __init__(self, include_summary: bool = True):
        """
        Initialize the formatter.

        Args:
            include_summary: Whether to write a summary sidecar file
        """
        self.include_summary = include_summary
        self.start_time = datetime.now()
        self.entries: List[Dict[str, Any]] = []

    def format_header(self,
                      header: Optional[EntryHeader] = None,
                      error: Optional[str] = None) -> Dict[str, Any]:
        """
        Format a single decoded entry header.

        Args:
            header: Decoded entry header
            error: Error message if the entry was rejected

        Returns:
            Row dictionary keyed by COLUMNS
        """
        result = {column: '' for column in self.COLUMNS}
        result['Error'] = error or ''

        if header:
            id_line = header.id_line
            result.update({
                'Entry Name': id_line.name,
                'Mnemonic': id_line.mnemonic,
                'Species Code': id_line.species_code,
                'Status': id_line.status.value,
                'Length': str(id_line.length),
                'Primary Accession': header.primary_accession,
                'Secondary Accessions': '; '.join(header.secondary_accessions)
            })

        self.entries.append({
            'entry_name': result['Entry Name'],
            'success': error is None,
            'status': result['Status'] or None,
            'reviewed': header.id_line.is_reviewed if header else False,
            'accessions': len(header.accessions) if header else 0
        })

        return result

    def format_results(self,
                       results: List[Dict[str, Any]],
                       output_path: Union[str, Path],
                       format: str = 'tsv',
                       excel_compatible: bool = False) -> None:
        """
        Write formatted rows to a file.

        Args:
            results: Rows from format_header
            output_path: Path to output file
            format: Output format ('tsv', 'csv', 'json')
            excel_compatible: Use UTF-8 BOM for spreadsheet compatibility
        """
        path = Path(output_path)

        if format == 'tsv':
            self._write_delimited(results, path, '\t', excel_compatible)
        elif format == 'csv':
            self._write_delimited(results, path, ',', excel_compatible)
        elif format == 'json':
            self._write_json(results, path)
        else:
            raise ValueError(f"Unsupported format: {format}")

        if self.include_summary:
            self._write_summary(path)

    def _write_delimited(self, results: List[Dict[str, Any]], path: Path,
                         delimiter: str, excel_compatible: bool) -> None:
        encoding = 'utf-8-sig' if excel_compatible else 'utf-8'

        with open(path, 'w', encoding=encoding, newline='') as f:
            writer = csv.DictWriter(f, fieldnames=self.COLUMNS, delimiter=delimiter)
            writer.writeheader()
            writer.writerows(results)

    def _write_json(self, results: List[Dict[str, Any]], path: Path) -> None:
        output = {
            'metadata': {
                'generated': datetime.now().isoformat(),
                'total_entries': len(results),
                'columns': self.COLUMNS
            },
            'results': results
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(output, f, indent=2, ensure_ascii=False)

    def _write_summary(self, output_path: Path) -> Path:
        """Write summary sidecar file."""
        summary_path = output_path.with_suffix('.summary.json')
        summary = {
            'start_time': self.start_time.isoformat(),
            'end_time': datetime.now().isoformat(),
            'statistics': self.get_statistics()
        }

        with open(summary_path, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2, default=str)
        return summary_path

    def get_statistics(self) -> Dict[str, Any]:
        """Get current processing statistics."""
        total = len(self.entries)
        successful = sum(1 for e in self.entries if e['success'])
        reviewed = sum(1 for e in self.entries if e['reviewed'])

        return {
            'total_processed': total,
            'successful': successful,
            'failed': total - successful,
            'reviewed': reviewed,
            'unreviewed': successful - reviewed,
            'accessions': sum(e['accessions'] for e in self.entries),
            'duration': str(datetime.now() - self.start_time)
        }

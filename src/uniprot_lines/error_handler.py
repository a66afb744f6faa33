"""Error types and error reporting for flat-file decoding."""

import json
import logging
import time
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class UniProtLinesError(Exception):
    """Base error for this package."""


class LineSyntaxError(UniProtLinesError, ValueError):
    """Raised when input does not match a line grammar.

    There is a single syntax error kind: a bad accession, a bad status or
    too many tokens on a line all surface as "this input did not match".

    Attributes:
        fragment: The unmatched input slice
        expected: Short description of what the grammar wanted there
    """

    def __init__(self, fragment: str, expected: Optional[str] = None):
        self.fragment = fragment
        self.expected = expected
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        preview = self.fragment.split('\n', 1)[0]
        if len(preview) > 40:
            preview = preview[:40] + '...'
        if self.expected:
            return f"expected {self.expected} at {preview!r}"
        return f"no match at {preview!r}"


class ErrorType(Enum):
    """Types of errors recorded while reading entries."""
    SYNTAX_ERROR = "syntax_error"
    FILE_IO_ERROR = "file_io_error"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ErrorContext:
    """Context information for a rejected entry."""
    error_type: ErrorType
    severity: ErrorSeverity
    message: str
    timestamp: float
    operation: str
    entry_index: Optional[int] = None
    fragment: Optional[str] = None
    source: Optional[str] = None


class ErrorHandler:
    """Records, logs and reports entries that failed to decode."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger('uniprot_lines.error')
        self.error_history: List[ErrorContext] = []

    def handle_error(self,
                     error: Exception,
                     operation: str,
                     entry_index: Optional[int] = None,
                     source: Optional[str] = None) -> ErrorContext:
        """
        Record an error and log it.

        Args:
            error: The exception that occurred
            operation: The operation being performed
            entry_index: Zero-based position of the entry in its file
            source: File name or other origin of the entry

        Returns:
            ErrorContext describing the failure
        """
        error_type = self._classify_error(error)
        context = ErrorContext(
            error_type=error_type,
            severity=self._determine_severity(error_type),
            message=str(error),
            timestamp=time.time(),
            operation=operation,
            entry_index=entry_index,
            fragment=getattr(error, 'fragment', None),
            source=source
        )

        self._log_error(context)
        self.error_history.append(context)
        return context

    def _classify_error(self, error: Exception) -> ErrorType:
        """Classify the error type based on exception."""
        if isinstance(error, LineSyntaxError):
            return ErrorType.SYNTAX_ERROR
        if isinstance(error, (OSError, UnicodeDecodeError)):
            return ErrorType.FILE_IO_ERROR
        return ErrorType.UNKNOWN

    def _determine_severity(self, error_type: ErrorType) -> ErrorSeverity:
        # A malformed entry is skipped, anything else means the input is unusable
        if error_type == ErrorType.SYNTAX_ERROR:
            return ErrorSeverity.WARNING
        return ErrorSeverity.ERROR

    def _log_error(self, context: ErrorContext) -> None:
        log_message = f"{context.operation} - {context.error_type.value}: {context.message}"

        if context.entry_index is not None:
            log_message += f" (entry: {context.entry_index})"

        if context.source:
            log_message += f" [{context.source}]"

        if context.severity == ErrorSeverity.WARNING:
            self.logger.warning(log_message)
        else:
            self.logger.error(log_message)

    @property
    def has_errors(self) -> bool:
        return bool(self.error_history)

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary of errors for reporting."""
        by_type: Dict[str, int] = {}
        for error in self.error_history:
            by_type[error.error_type.value] = by_type.get(error.error_type.value, 0) + 1

        recent_errors = []
        for error in self.error_history[-5:]:
            recent_errors.append({
                'type': error.error_type.value,
                'message': error.message,
                'entry_index': error.entry_index,
                'timestamp': datetime.fromtimestamp(error.timestamp).isoformat()
            })

        return {
            'total_errors': len(self.error_history),
            'by_type': by_type,
            'recent_errors': recent_errors
        }

    def export_error_report(self, output_file: Union[str, Path]) -> Path:
        """Export detailed error report as JSON."""
        path = Path(output_file)
        report = {
            'generated_at': datetime.now().isoformat(),
            'summary': self.get_error_summary(),
            'detailed_errors': []
        }

        for error in self.error_history:
            error_dict = asdict(error)
            error_dict['error_type'] = error.error_type.value
            error_dict['severity'] = error.severity.value
            error_dict['timestamp'] = datetime.fromtimestamp(error.timestamp).isoformat()
            report['detailed_errors'].append(error_dict)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2)

        self.logger.info(f"Error report exported to {path}")
        return path

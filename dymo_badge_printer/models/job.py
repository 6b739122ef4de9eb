"""
Print Job Models
================

A single label submission and the summary of a batch run.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from .participant import Participant


@dataclass(frozen=True)
class PrintJobRequest:
    """One label to print on a named printer."""

    printer_name: str
    label_markup: str
    copies: int = 1

    def __post_init__(self):
        if not self.printer_name:
            raise ValueError('printer_name must not be empty')
        if self.copies < 1:
            raise ValueError(f'copies must be >= 1, got {self.copies}')


@dataclass
class ItemResult:
    """Outcome of printing one participant."""

    participant: Participant
    success: bool = False
    error: Optional[str] = None  # None for success or a rejected job

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'participant': self.participant.to_dict(),
            'success': self.success,
            'error': self.error,
        }


@dataclass
class RunSummary:
    """Tally of a batch run."""

    printer_name: Optional[str] = None
    results: List[ItemResult] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def total(self) -> int:
        return len(self.results)

    def add(self, result: ItemResult):
        self.results.append(result)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'printer_name': self.printer_name,
            'success_count': self.success_count,
            'error_count': self.error_count,
            'total': self.total,
            'results': [r.to_dict() for r in self.results],
        }

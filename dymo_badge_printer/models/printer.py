"""
Printer Models
==============

Printers reported by the DYMO service and their live status.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass
class PrinterRecord:
    """One printer detected by the service."""

    name: str
    model: str = ""  # e.g., "DYMO LabelWriter 550"
    is_connected: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on the printer name."""
        return needle.lower() in self.name.lower()


@dataclass
class PrinterStatus:
    """Status of a single printer, derived per query."""

    connected: bool = False
    ready: bool = False
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

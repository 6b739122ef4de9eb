"""
Participant Model
=================

One badge to print.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class Participant:
    """Participant read from the input list."""

    nom: str
    prenom: str
    role: str = ""  # speaker, mc, organisateur, anything else

    def __post_init__(self):
        self.nom = self.nom.strip()
        self.prenom = self.prenom.strip()
        self.role = self.role.strip().lower()

    @property
    def full_name(self) -> str:
        return f'{self.prenom} {self.nom}'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

"""
Participants
============

Reads the participant list from a CSV file with the columns nom, prenom
and role. Rows with an empty value in any of them are skipped.
"""

import csv
import logging
from pathlib import Path
from typing import List

from .models import Participant

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('nom', 'prenom', 'role')


def read_participants(file_path) -> List[Participant]:
    """
    Load participants from a CSV file.

    Args:
        file_path: Path to a UTF-8 CSV file (a BOM is tolerated)

    Returns:
        Participants in file order

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: a required column is missing from the header
    """
    path = Path(file_path)
    participants: List[Participant] = []

    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        reader = csv.DictReader(f)
        header = [(name or '').strip().lower() for name in (reader.fieldnames or [])]
        missing = [c for c in REQUIRED_COLUMNS if c not in header]
        if missing:
            raise ValueError(f'{path}: missing column(s) {", ".join(missing)}')
        reader.fieldnames = header

        for line, row in enumerate(reader, start=2):
            values = {c: (row.get(c) or '').strip() for c in REQUIRED_COLUMNS}
            if not all(values.values()):
                logger.debug('%s:%d skipped (incomplete row)', path, line)
                continue
            participants.append(Participant(**values))

    logger.info('%d participants loaded from %s', len(participants), path)
    return participants

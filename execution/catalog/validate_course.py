"""
execution/catalog/validate_course.py

Pure validation helpers for catalog records.

No file I/O. No logging. Every function here is side-effect free so the
loader can call them per line without touching shared state.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# Four uppercase ASCII letters followed by three ASCII digits, e.g. CSCI101.
COURSE_ID_PATTERN: re.Pattern[str] = re.compile(r"[A-Z]{4}[0-9]{3}")
COURSE_ID_LENGTH: int = 7


def is_valid_course_id(course_id: str) -> bool:
    """Return True if course_id matches the AAAA999 identifier format.

    Args:
        course_id: Candidate identifier, already trimmed by the caller.

    Returns:
        True when course_id is exactly 7 characters: 4 uppercase ASCII
        letters then 3 ASCII digits. False otherwise (including non-str).
    """
    if not isinstance(course_id, str) or len(course_id) != COURSE_ID_LENGTH:
        return False
    return COURSE_ID_PATTERN.fullmatch(course_id) is not None


def is_known_course_id(course_id: str, known_ids: frozenset[str] | set[str]) -> bool:
    """Return True if course_id appeared as a first field somewhere in the batch."""
    return course_id in known_ids


def split_prerequisites(
    tokens: Iterable[str], known_ids: frozenset[str] | set[str]
) -> tuple[list[str], list[str]]:
    """Partition prerequisite tokens into accepted and unknown references.

    Empty tokens are skipped. Input order is preserved in both lists and
    duplicates are kept.

    Args:
        tokens:    Trimmed prerequisite fields (fields 2.. of a line).
        known_ids: First-field tokens collected from the whole batch.

    Returns:
        (accepted, missing) lists of identifiers.
    """
    accepted: list[str] = []
    missing: list[str] = []
    for token in tokens:
        if not token:
            continue
        if is_known_course_id(token, known_ids):
            accepted.append(token)
        else:
            missing.append(token)
    return accepted, missing

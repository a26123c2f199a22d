"""
execution/catalog/load_catalog.py

Two-pass loader that parses a comma-delimited course file into a CourseIndex.

Input format, one course per line:
    <course_id>,<title>[,<prereq1>[,<prereq2>...]]

Blank lines and lines starting with "//" are ignored. Whitespace around
every field is trimmed.

Pass 1 collects every first-field token in the batch so a prerequisite may
refer to a course defined further down the file. Pass 2 validates each line
and inserts the accepted records. Per-line problems are soft errors: they
are logged, counted and returned as issue dicts, and never stop the batch.

Run from the repository root to inspect a file:
    python -m execution.catalog.load_catalog [path]
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from execution.catalog.course import Course
from execution.catalog.course_index import CourseIndex
from execution.catalog.render_course import format_load_summary
from execution.catalog.validate_course import is_valid_course_id, split_prerequisites

logger = logging.getLogger(__name__)

# Repo root: execution/catalog/ -> execution/ -> repo root
_REPO_ROOT: Path = Path(__file__).resolve().parents[2]

DEFAULT_CATALOG_PATH: Path = _REPO_ROOT / "course_content" / "catalog" / "courses.csv"

COMMENT_PREFIX: str = "//"
FIELD_SEPARATOR: str = ","
MIN_FIELDS: int = 2

# ---------------------------------------------------------------------------
# Issue reason codes (exhaustive)
# ---------------------------------------------------------------------------
FORMAT_ERROR: str = "FORMAT_ERROR"
INVALID_COURSE_ID: str = "INVALID_COURSE_ID"
PREREQUISITE_ERROR: str = "PREREQUISITE_ERROR"


class CatalogSourceError(Exception):
    """Raised when a catalog file cannot be opened or read."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = str(path)
        message = f"Cannot open {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_catalog_file(path: str | Path, index: CourseIndex) -> dict:
    """Read a catalog file and load its courses into index.

    The whole file is read before anything is inserted, so an unreadable
    source leaves index untouched.

    Args:
        path:  Location of the course file.
        index: Index that receives the accepted records.

    Returns:
        Load report dict; see load_catalog_lines().

    Raises:
        CatalogSourceError: If the file cannot be opened or decoded.
    """
    lines = read_catalog_lines(path)
    return load_catalog_lines(lines, index)


def read_catalog_lines(path: str | Path) -> list[str]:
    """Return the raw lines of a catalog file.

    Raises:
        CatalogSourceError: Wrapping the underlying OSError or decode error.
    """
    source = Path(path)
    try:
        with source.open(encoding="utf-8") as fh:
            return [line.rstrip("\r\n") for line in fh]
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot open catalog %s: %s", source, exc)
        raise CatalogSourceError(source, type(exc).__name__) from exc


def load_catalog_lines(lines: Iterable[str], index: CourseIndex) -> dict:
    """Validate a batch of catalog lines and insert accepted courses.

    Args:
        lines: Raw text lines, without or with trailing newlines.
        index: Index that receives the accepted records.

    Returns:
        dict with keys:
            ok         (bool) Always True; whole-batch failures raise instead.
            loaded     (int)  Lines accepted as courses.
            errors     (int)  Soft errors counted across the batch.
            duplicates (int)  Accepted courses the index dropped because the
                              course_id was already present.
            issues     (list) One dict per soft error, in file order.
            message    (str)  "Loaded N courses with M errors".
    """
    retained, known_ids = collect_course_ids(lines)

    loaded = 0
    duplicates = 0
    issues: list[dict] = []

    for line_no, line in retained:
        fields = split_fields(line)

        if len(fields) < MIN_FIELDS:
            issues.append(_issue(line_no, FORMAT_ERROR, None, line))
            continue

        course_id = fields[0]
        if not is_valid_course_id(course_id):
            issues.append(_issue(line_no, INVALID_COURSE_ID, course_id, course_id))
            continue

        accepted, missing = split_prerequisites(fields[2:], known_ids)
        for prereq in missing:
            issues.append(_issue(line_no, PREREQUISITE_ERROR, course_id, prereq))

        if not index.insert(Course(course_id, fields[1], accepted)):
            duplicates += 1
            logger.info(
                "Line %d: duplicate course %s ignored; first entry kept.",
                line_no,
                course_id,
            )
        loaded += 1

    logger.info("Loaded %d courses with %d errors", loaded, len(issues))

    report = {
        "ok": True,
        "loaded": loaded,
        "errors": len(issues),
        "duplicates": duplicates,
        "issues": issues,
    }
    report["message"] = format_load_summary(report)
    return report


# ---------------------------------------------------------------------------
# Internal helpers (importable for unit tests)
# ---------------------------------------------------------------------------

def collect_course_ids(lines: Iterable[str]) -> tuple[list[tuple[int, str]], frozenset[str]]:
    """Pass 1: keep content lines and gather every first-field token.

    Args:
        lines: Raw text lines.

    Returns:
        (retained, known_ids) where retained is a list of
        (1-based line number, trimmed line) for every non-blank,
        non-comment line, and known_ids holds each non-empty trimmed first
        field, whether or not that line later validates.
    """
    retained: list[tuple[int, str]] = []
    known: set[str] = set()

    for line_no, raw in enumerate(lines, start=1):
        line = _trim(raw.rstrip("\r\n"))
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        retained.append((line_no, line))

        first = _trim(line.split(FIELD_SEPARATOR, 1)[0])
        if first:
            known.add(first)

    return retained, frozenset(known)


def split_fields(line: str) -> list[str]:
    """Split a content line on commas and trim each field.

    A single trailing separator does not open an extra field, so
    "CSCI101," has one field while "CSCI101, " has two.
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return [_trim(part) for part in parts]


def _trim(text: str) -> str:
    """Strip surrounding spaces and tabs only."""
    return text.strip(" \t")


def _issue(line_no: int, kind: str, course_id: str | None, detail: str) -> dict:
    """Build, log and return one soft-error record."""
    if kind == FORMAT_ERROR:
        message = f"Format Error: {detail}"
    elif kind == INVALID_COURSE_ID:
        message = f"Invalid course number: {detail}"
    else:
        message = f"Prereq Error for {course_id}: {detail} invalid"

    logger.warning("Line %d: %s", line_no, message)
    return {
        "line": line_no,
        "kind": kind,
        "course_id": course_id,
        "detail": detail,
        "message": message,
    }


def main(argv: list[str] | None = None) -> int:
    """Load a catalog file and print its summary.

    Soft errors and an unreadable source are reported through logging.
    """
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else DEFAULT_CATALOG_PATH

    index = CourseIndex()
    try:
        report = load_catalog_file(path, index)
    except CatalogSourceError:
        return 1

    print(report["message"])
    index.destroy()
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    raise SystemExit(main())

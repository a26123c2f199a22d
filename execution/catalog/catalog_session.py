"""
execution/catalog/catalog_session.py

One catalog session: owns a CourseIndex and its EMPTY -> LOADED lifecycle.

The session is loaded at most once. Loading builds the index on the calling
thread and then freezes it, after which list_all() and describe() are
read-only and may be shared by any number of readers.

Outcome mapping for front ends:
    load()      -> report dict | CatalogAlreadyLoadedError | CatalogSourceError
    list_all()  -> [(course_id, title), ...] | CatalogNotLoadedError
    describe()  -> view dict | CourseNotFoundError | CatalogNotLoadedError
"""

from __future__ import annotations

import logging
from pathlib import Path

from execution.catalog.course_index import CourseIndex
from execution.catalog.load_catalog import (
    DEFAULT_CATALOG_PATH,
    CatalogSourceError,
    load_catalog_file,
)

logger = logging.getLogger(__name__)

STATE_EMPTY: str = "EMPTY"
STATE_LOADED: str = "LOADED"

__all__ = [
    "CatalogAlreadyLoadedError",
    "CatalogNotLoadedError",
    "CatalogSession",
    "CatalogSourceError",
    "CourseNotFoundError",
    "STATE_EMPTY",
    "STATE_LOADED",
]


class CatalogAlreadyLoadedError(Exception):
    """Raised when load() is called on a session that is already loaded."""


class CatalogNotLoadedError(Exception):
    """Raised when the catalog is queried before a successful load."""


class CourseNotFoundError(Exception):
    """Raised when describe() finds no course; .query keeps the caller's text."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"Course not found: {query}")


class CatalogSession:
    """Explicit holder for the loaded catalog and its lifecycle state."""

    def __init__(self) -> None:
        self._index = CourseIndex()
        self._state: str = STATE_EMPTY

    @property
    def state(self) -> str:
        return self._state

    @property
    def loaded(self) -> bool:
        return self._state == STATE_LOADED

    def load(self, path: str | Path | None = None) -> dict:
        """Load the catalog file at path (default: DEFAULT_CATALOG_PATH).

        The session becomes LOADED even when no line was accepted. An
        unreadable file leaves the session EMPTY so the caller may retry.

        Returns:
            Load report dict from load_catalog_file().

        Raises:
            CatalogAlreadyLoadedError: Session is already LOADED; nothing changes.
            CatalogSourceError:        File could not be read; nothing changes.
        """
        if self._state == STATE_LOADED:
            logger.warning("Catalog already loaded; ignoring load request.")
            raise CatalogAlreadyLoadedError("Already loaded")

        source = DEFAULT_CATALOG_PATH if path is None else path
        report = load_catalog_file(source, self._index)

        self._index.freeze()
        self._state = STATE_LOADED
        return report

    def list_all(self) -> list[tuple[str, str]]:
        """Return (course_id, title) pairs in ascending course_id order."""
        self._require_loaded()
        return self._index.list_pairs()

    def describe(self, query: str) -> dict:
        """Look up one course by identifier, ignoring case and surrounding spaces.

        Args:
            query: Course identifier as typed by the user.

        Returns:
            dict with keys course_id (str), title (str) and
            prerequisites (list[str], possibly empty).

        Raises:
            CatalogNotLoadedError: Session is not LOADED.
            CourseNotFoundError:   No course matches; carries query unchanged.
        """
        self._require_loaded()
        course = self._index.find(query.strip().upper())
        if course is None:
            raise CourseNotFoundError(query)
        return course.to_view()

    def close(self) -> None:
        """Tear down the index and return the session to EMPTY."""
        released = self._index.destroy()
        logger.debug("Catalog closed; %d course node(s) released.", released)
        self._state = STATE_EMPTY

    def __len__(self) -> int:
        return len(self._index)

    def _require_loaded(self) -> None:
        if self._state != STATE_LOADED:
            raise CatalogNotLoadedError("Load data first")

"""
execution/catalog/course.py

Course record held by the catalog index.

No file I/O. No validation: records are built by the loader only after
their identifier and prerequisites have been checked.
"""

from __future__ import annotations


class Course:
    """A single catalog entry: identifier, title and ordered prerequisites.

    The identifier is read-only once the record exists. Two courses compare
    equal when their identifiers are equal.
    """

    __slots__ = ("_course_id", "title", "prerequisites")

    def __init__(
        self,
        course_id: str,
        title: str,
        prerequisites: list[str] | None = None,
    ) -> None:
        self._course_id = course_id
        self.title = title
        self.prerequisites: list[str] = list(prerequisites or [])

    @property
    def course_id(self) -> str:
        return self._course_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self._course_id == other._course_id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self._course_id < other._course_id

    def __hash__(self) -> int:
        return hash(self._course_id)

    def __repr__(self) -> str:
        return (
            f"Course({self._course_id!r}, {self.title!r}, "
            f"prerequisites={self.prerequisites!r})"
        )

    def to_view(self) -> dict:
        """Return a plain dict copy suitable for display layers."""
        return {
            "course_id": self._course_id,
            "title": self.title,
            "prerequisites": list(self.prerequisites),
        }

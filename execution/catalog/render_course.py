"""
execution/catalog/render_course.py

Plain-text formatting for catalog output. Pure functions; no I/O.
"""

from __future__ import annotations

from collections.abc import Iterable

COURSE_LIST_HEADER: str = "Here is a sample schedule:"


def format_course_line(course_id: str, title: str) -> str:
    """Return "<course_id>, <title>"."""
    return f"{course_id}, {title}"


def format_course_detail(view: dict) -> list[str]:
    """Return display lines for one course view from CatalogSession.describe().

    The prerequisites line is omitted entirely when the list is empty.
    """
    lines = [format_course_line(view["course_id"], view["title"])]
    prerequisites = view.get("prerequisites") or []
    if prerequisites:
        lines.append("Prerequisites: " + ", ".join(prerequisites))
    return lines


def format_course_list(pairs: Iterable[tuple[str, str]]) -> list[str]:
    """Return the list header followed by one line per (course_id, title)."""
    return [COURSE_LIST_HEADER] + [
        format_course_line(course_id, title) for course_id, title in pairs
    ]


def format_not_found(query: str) -> str:
    return f"Course not found: {query}"


def format_load_summary(report: dict) -> str:
    return f"Loaded {report['loaded']} courses with {report['errors']} errors"

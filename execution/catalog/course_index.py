"""
execution/catalog/course_index.py

Ordered index of Course records: an unbalanced binary search tree keyed by
course_id.

Each node exclusively owns its two child slots; there are no parent links.
Insert, find and traversal use loops and an explicit stack, never Python
recursion, so a chain built from already-sorted input stays within the
interpreter's recursion limit.

No file I/O. No logging. The loader decides what to report.
"""

from __future__ import annotations

from collections.abc import Iterator

from execution.catalog.course import Course


class IndexFrozenError(Exception):
    """Raised when insert() is called on an index that has been frozen."""


class _Node:
    __slots__ = ("course", "left", "right")

    def __init__(self, course: Course) -> None:
        self.course = course
        self.left: _Node | None = None
        self.right: _Node | None = None


class CourseIndex:
    """Binary search tree of Course records ordered by course_id.

    Duplicate identifiers are dropped silently: the first insertion wins.
    Once freeze() has been called the index is read-only.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size: int = 0
        self._frozen: bool = False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, course: Course) -> bool:
        """Insert course at the first empty slot on its search path.

        Args:
            course: Record to store. Its course_id is the ordering key.

        Returns:
            True when a new node was added; False when a node with the same
            course_id already exists (the existing record is kept).

        Raises:
            IndexFrozenError: If the index has been frozen.
        """
        if self._frozen:
            raise IndexFrozenError(
                f"Cannot insert {course.course_id!r}: index is read-only."
            )

        key = course.course_id
        if self._root is None:
            self._root = _Node(course)
            self._size = 1
            return True

        node = self._root
        while True:
            node_key = node.course.course_id
            if key < node_key:
                if node.left is None:
                    node.left = _Node(course)
                    break
                node = node.left
            elif key > node_key:
                if node.right is None:
                    node.right = _Node(course)
                    break
                node = node.right
            else:
                return False

        self._size += 1
        return True

    def freeze(self) -> None:
        """Make the index read-only. Queries stay available."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def destroy(self) -> int:
        """Release every node, children before their parent.

        Safe to call on an empty or already-destroyed index. Leaves the
        index empty and writable again.

        Returns:
            Number of nodes released.
        """
        released = 0
        # Post-order with an explicit stack: a node is released only after
        # both of its subtrees have been visited.
        stack: list[tuple[_Node, bool]] = []
        if self._root is not None:
            stack.append((self._root, False))
        while stack:
            node, children_done = stack.pop()
            if children_done:
                node.left = None
                node.right = None
                released += 1
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

        self._root = None
        self._size = 0
        self._frozen = False
        return released

    # ------------------------------------------------------------------
    # Queries (never mutate the tree)
    # ------------------------------------------------------------------

    def find(self, course_id: str) -> Course | None:
        """Return the record stored under course_id, or None if absent."""
        node = self._root
        while node is not None:
            node_key = node.course.course_id
            if course_id == node_key:
                return node.course
            node = node.left if course_id < node_key else node.right
        return None

    def in_order(self) -> Iterator[Course]:
        """Yield every record in ascending course_id order.

        Each call starts a fresh traversal, so the sequence can be
        enumerated any number of times.
        """
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def list_pairs(self) -> list[tuple[str, str]]:
        """Return (course_id, title) pairs in ascending course_id order."""
        return [(course.course_id, course.title) for course in self.in_order()]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, course_id: object) -> bool:
        return isinstance(course_id, str) and self.find(course_id) is not None

    def __iter__(self) -> Iterator[Course]:
        return self.in_order()

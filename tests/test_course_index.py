"""
tests/test_course_index.py

Unit tests for execution/catalog/course_index.py and the Course record.

Four test groups:
  1. Course record — equality, read-only identifier, view copies.
  2. Insert / find — ordering, duplicates, misses.
  3. Traversal — ascending order, restartable, degenerate chains.
  4. Lifecycle — freeze and destroy.

No filesystem, no network. Insertion orders are fixed lists; no randomness.
"""

import sys
import unittest
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap — repo root must be importable from any test runner.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.catalog.course import Course  # noqa: E402
from execution.catalog.course_index import CourseIndex, IndexFrozenError  # noqa: E402

# Deliberately unsorted so the tree gets both left and right branches.
MIXED_ORDER = ["MATH201", "CSCI300", "CSCI100", "PHYS150", "CSCI200", "ARTS101", "ZOOL999"]


def _build(course_ids, title_prefix="Course "):
    index = CourseIndex()
    for course_id in course_ids:
        index.insert(Course(course_id, title_prefix + course_id))
    return index


# ---------------------------------------------------------------------------
# 1. Course record
# ---------------------------------------------------------------------------

class TestCourse(unittest.TestCase):

    def test_equality_is_by_course_id(self):
        """Two records with the same identifier compare equal."""
        self.assertEqual(Course("CSCI101", "A"), Course("CSCI101", "B", ["CSCI100"]))
        self.assertNotEqual(Course("CSCI101", "A"), Course("CSCI102", "A"))

    def test_ordering_with_non_course_is_unsupported(self):
        """Ordering against a non-Course raises TypeError, not AttributeError."""
        course = Course("CSCI101", "Intro")
        self.assertLess(Course("CSCI100", "A"), course)
        with self.assertRaises(TypeError):
            course < "CSCI102"
        self.assertNotEqual(course, "CSCI101")

    def test_course_id_is_read_only(self):
        """Assigning course_id raises AttributeError."""
        course = Course("CSCI101", "Intro")
        with self.assertRaises(AttributeError):
            course.course_id = "CSCI102"

    def test_prerequisites_are_copied(self):
        """The record does not share the caller's list."""
        prereqs = ["CSCI100"]
        course = Course("CSCI101", "Intro", prereqs)
        prereqs.append("MATH201")
        self.assertEqual(course.prerequisites, ["CSCI100"])

    def test_to_view_returns_independent_copy(self):
        """Mutating a view does not change the record."""
        course = Course("CSCI101", "Intro", ["CSCI100"])
        view = course.to_view()
        view["prerequisites"].append("X")
        self.assertEqual(
            view.keys(), {"course_id", "title", "prerequisites"}
        )
        self.assertEqual(course.prerequisites, ["CSCI100"])


# ---------------------------------------------------------------------------
# 2. Insert / find
# ---------------------------------------------------------------------------

class TestInsertAndFind(unittest.TestCase):

    def test_find_every_inserted_course(self):
        """Every inserted identifier is found with its own title."""
        index = _build(MIXED_ORDER)
        for course_id in MIXED_ORDER:
            with self.subTest(course_id=course_id):
                course = index.find(course_id)
                self.assertIsNotNone(course)
                self.assertEqual(course.title, "Course " + course_id)

    def test_find_missing_returns_none(self):
        """Absent identifiers, including on an empty index, return None."""
        self.assertIsNone(CourseIndex().find("CSCI101"))
        index = _build(MIXED_ORDER)
        self.assertIsNone(index.find("ZZZZ000"))
        self.assertIsNone(index.find("csci100"))

    def test_insert_returns_true_for_new_node(self):
        """insert() reports True and len() grows for a new identifier."""
        index = CourseIndex()
        self.assertTrue(index.insert(Course("CSCI101", "Intro")))
        self.assertEqual(len(index), 1)

    def test_duplicate_insert_keeps_first(self):
        """Second insert of the same identifier is dropped, no overwrite."""
        index = CourseIndex()
        index.insert(Course("CSCI101", "First", ["CSCI100"]))
        self.assertFalse(index.insert(Course("CSCI101", "Second")))
        self.assertEqual(len(index), 1)
        kept = index.find("CSCI101")
        self.assertEqual(kept.title, "First")
        self.assertEqual(kept.prerequisites, ["CSCI100"])

    def test_contains(self):
        """'in' checks membership by identifier."""
        index = _build(MIXED_ORDER)
        self.assertIn("CSCI200", index)
        self.assertNotIn("CSCI999", index)
        self.assertNotIn(None, index)

    def test_find_does_not_mutate(self):
        """Lookups leave size and order unchanged."""
        index = _build(MIXED_ORDER)
        before = index.list_pairs()
        index.find("CSCI100")
        index.find("NOPE000")
        self.assertEqual(index.list_pairs(), before)
        self.assertEqual(len(index), len(MIXED_ORDER))


# ---------------------------------------------------------------------------
# 3. Traversal
# ---------------------------------------------------------------------------

class TestTraversal(unittest.TestCase):

    def test_in_order_is_strictly_ascending(self):
        """Pairs come out sorted, whatever the insertion order."""
        orders = [
            MIXED_ORDER,
            list(reversed(MIXED_ORDER)),
            sorted(MIXED_ORDER),
            sorted(MIXED_ORDER, reverse=True),
        ]
        for order in orders:
            with self.subTest(order=order):
                ids = [course_id for course_id, _ in _build(order).list_pairs()]
                self.assertEqual(ids, sorted(MIXED_ORDER))

    def test_list_pairs_contents(self):
        """list_pairs() yields (course_id, title) tuples."""
        index = CourseIndex()
        index.insert(Course("CSCI200", "Data Structures"))
        index.insert(Course("CSCI100", "Intro"))
        self.assertEqual(
            index.list_pairs(),
            [("CSCI100", "Intro"), ("CSCI200", "Data Structures")],
        )

    def test_traversal_is_restartable(self):
        """Two traversals return identical sequences."""
        index = _build(MIXED_ORDER)
        self.assertEqual(index.list_pairs(), index.list_pairs())
        self.assertEqual(list(index), list(index.in_order()))

    def test_empty_index_traversal(self):
        """An empty index yields nothing."""
        self.assertEqual(CourseIndex().list_pairs(), [])

    def test_sorted_input_beyond_recursion_limit(self):
        """A chain deeper than the recursion limit still inserts, finds and lists."""
        depth = sys.getrecursionlimit() + 500
        # Fixed-width keys so string order matches insertion order.
        ids = [f"K{n:08d}" for n in range(depth)]
        index = CourseIndex()
        for course_id in ids:
            index.insert(Course(course_id, course_id))
        self.assertEqual(len(index), depth)
        self.assertIsNotNone(index.find(ids[-1]))
        self.assertEqual([c.course_id for c in index], ids)
        self.assertEqual(index.destroy(), depth)


# ---------------------------------------------------------------------------
# 4. Lifecycle
# ---------------------------------------------------------------------------

class TestLifecycle(unittest.TestCase):

    def test_frozen_index_rejects_insert(self):
        """insert() after freeze() raises IndexFrozenError; queries still work."""
        index = _build(["CSCI100"])
        index.freeze()
        self.assertTrue(index.frozen)
        with self.assertRaises(IndexFrozenError):
            index.insert(Course("CSCI200", "Data Structures"))
        self.assertEqual(len(index), 1)
        self.assertIsNotNone(index.find("CSCI100"))

    def test_destroy_releases_each_node_once(self):
        """destroy() returns the node count and empties the index."""
        index = _build(MIXED_ORDER)
        self.assertEqual(index.destroy(), len(MIXED_ORDER))
        self.assertEqual(len(index), 0)
        self.assertEqual(index.list_pairs(), [])
        self.assertIsNone(index.find("CSCI100"))

    def test_destroy_empty_is_noop(self):
        """destroy() on an empty index releases nothing and does not raise."""
        index = CourseIndex()
        self.assertEqual(index.destroy(), 0)
        self.assertEqual(index.destroy(), 0)

    def test_destroy_unfreezes(self):
        """After destroy() the index accepts inserts again."""
        index = _build(["CSCI100"])
        index.freeze()
        index.destroy()
        self.assertFalse(index.frozen)
        self.assertTrue(index.insert(Course("CSCI100", "Again")))


if __name__ == "__main__":
    unittest.main()

"""
ui/app.py

Course Planner — catalog browser.

Load a course file once, list every course in identifier order, and look up
a single course with its prerequisites. All catalog logic lives in
execution/catalog; this page only collects input and renders results.

Run from the repository root:
    streamlit run ui/app.py
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure repo root is on sys.path so execution.* imports work regardless of
# where Streamlit is launched from.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.catalog.catalog_session import (  # noqa: E402
    CatalogAlreadyLoadedError,
    CatalogNotLoadedError,
    CatalogSession,
    CatalogSourceError,
    CourseNotFoundError,
)
from execution.catalog.load_catalog import DEFAULT_CATALOG_PATH  # noqa: E402
from execution.catalog.render_course import (  # noqa: E402
    COURSE_LIST_HEADER,
    format_course_detail,
    format_load_summary,
    format_not_found,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Course Planner", layout="centered")
st.title("Course Planner")
st.caption("Welcome to the course planner.")

# One session per browser session; survives Streamlit reruns.
if "catalog" not in st.session_state:
    st.session_state["catalog"] = CatalogSession()
catalog: CatalogSession = st.session_state["catalog"]

# ---------------------------------------------------------------------------
# 1. Load
# ---------------------------------------------------------------------------
st.subheader("Load Data Structure")
file_path = st.text_input("Course file", value=str(DEFAULT_CATALOG_PATH))

col_load, col_close = st.columns(2)
if col_load.button("Load", type="primary"):
    try:
        report = catalog.load(file_path.strip())
    except CatalogAlreadyLoadedError:
        st.info("Already loaded")
    except CatalogSourceError as exc:
        st.error(f"Error: {exc}")
    except Exception:
        logging.exception("Unexpected error loading catalog")
        st.error("An unexpected error occurred. See console for details.")
    else:
        for issue in report["issues"]:
            st.warning(f"Line {issue['line']}: {issue['message']}")
        st.success(format_load_summary(report))

if col_close.button("Close catalog", disabled=not catalog.loaded):
    catalog.close()
    st.info("Catalog closed.")

st.divider()

# ---------------------------------------------------------------------------
# 2. Print Course List
# ---------------------------------------------------------------------------
st.subheader("Course List")
try:
    pairs = catalog.list_all()
except CatalogNotLoadedError:
    st.write("Load data first")
else:
    st.markdown(COURSE_LIST_HEADER)
    st.table([{"Course": course_id, "Title": title} for course_id, title in pairs])

st.divider()

# ---------------------------------------------------------------------------
# 3. Print Course
# ---------------------------------------------------------------------------
st.subheader("Course Lookup")
query = st.text_input("What course do you want to know about?", placeholder="e.g. CSCI200")

if st.button("Look Up"):
    if not query or not query.strip():
        st.error("Course number is required.")
    else:
        try:
            view = catalog.describe(query)
        except CatalogNotLoadedError:
            st.error("Load data first")
        except CourseNotFoundError as exc:
            st.warning(format_not_found(exc.query))
        except Exception:
            logging.exception("Unexpected error looking up %s", query)
            st.error("An unexpected error occurred. See console for details.")
        else:
            for line in format_course_detail(view):
                st.write(line)

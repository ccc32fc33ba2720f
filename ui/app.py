"""Notes — Streamlit interface.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `notes.*` and `ui.*` imports
# resolve regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

st.set_page_config(
    page_title="Notes",
    page_icon="🗒️",
    layout="centered",
)

from notes.config import settings  # noqa: E402
from ui import state  # noqa: E402
from ui.components import note_form, note_list, overview  # noqa: E402

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)

store = state.get_store()


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


def _notes_page() -> None:
    note_list.render(store)


def _new_note_page() -> None:
    note_form.render_add(store)


def _overview_page() -> None:
    overview.render(store)


page = st.navigation(
    [
        st.Page(_notes_page, title="Notes", icon="🗒️", default=True, url_path="notes"),
        st.Page(_new_note_page, title="New Note", icon="📝", url_path="new"),
        st.Page(_overview_page, title="Overview", icon="📈", url_path="overview"),
    ]
)

page.run()

st.divider()
st.caption(f"{store.count} note(s) · stored in {settings.notes_backend} slot '{settings.notes_slot_key}'")

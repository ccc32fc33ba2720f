"""Per-session wiring: one NotesStore per browser session."""

from __future__ import annotations

import logging

import streamlit as st

from notes.config import build_backend, settings
from notes.models import Note
from notes.store import NotesStore

logger = logging.getLogger(__name__)

_STORE_KEY = "notes_store"


def _announce(snapshot: tuple[Note, ...]) -> None:
    """Store listener: surface each change as a toast."""
    st.toast(f"Saved · {len(snapshot)} note(s)")


def get_store() -> NotesStore:
    """Return the session's store, creating it on first use."""
    if _STORE_KEY not in st.session_state:
        store = NotesStore(build_backend(settings), key=settings.notes_slot_key)
        store.subscribe(_announce)
        logger.info(
            "Opened %s store '%s' (%s, %d notes)",
            settings.notes_backend,
            settings.notes_slot_key,
            store.load_result.value,
            store.count,
        )
        st.session_state[_STORE_KEY] = store
    return st.session_state[_STORE_KEY]


def select_note(note_id: str | None) -> None:
    """Open (or close, with None) the detail view for a note."""
    st.session_state.selected_note_id = note_id
    st.session_state.editing = False


def selected_note_id() -> str | None:
    return st.session_state.get("selected_note_id")

"""Detail view with an Edit / Done toggle."""

from __future__ import annotations

import streamlit as st

from notes.colors import ColorTag, to_hex
from notes.models import Note
from notes.store import NotesStore
from ui import state
from ui.components.note_form import color_dot, render_fields


def _render_read(note: Note) -> None:
    rgb = note.display_color if note.color_tag is not ColorTag.NONE else None
    st.markdown(
        f"### {color_dot(to_hex(rgb) if rgb else None, size=20)}{note.display_title}",
        unsafe_allow_html=True,
    )
    if note.content:
        st.write(note.content)
    if note.location:
        st.markdown(f"📍 {note.location}")
    st.markdown(f"📅 Date: {note.date:%b %d, %Y}")
    st.caption(f"Created: {note.date_created:%b %d, %Y}")
    if note.was_modified:
        st.caption(f"Modified: {note.date_modified:%b %d, %Y}")


def render(note: Note, store: NotesStore) -> None:
    """Render a single note; editing writes back through ``store.update``."""
    col_back, _, col_toggle = st.columns([1, 6, 1])
    with col_back:
        if st.button("← Notes"):
            state.select_note(None)
            st.rerun()

    editing = st.session_state.get("editing", False)

    if not editing:
        with col_toggle:
            if st.button("Edit", type="primary"):
                st.session_state.editing = True
                st.rerun()
        _render_read(note)
        return

    with st.form(f"edit_{note.id}"):
        fields = render_fields(f"edit_{note.id}", initial=note)
        done = st.form_submit_button("Done", type="primary")

    if done:
        store.update(
            note.edited(
                title=fields.title,
                content=fields.content,
                location=fields.location,
                date=fields.date,
                color=fields.color,
            )
        )
        st.session_state.editing = False
        st.rerun()

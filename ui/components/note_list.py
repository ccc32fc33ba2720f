"""Notes page: searchable list, empty state, and per-note detail view."""

from __future__ import annotations

import streamlit as st

from notes.colors import ColorTag, to_hex
from notes.models import Note
from notes.search import filter_notes, to_store_positions
from notes.store import NotesStore
from ui import state
from ui.components import note_detail
from ui.components.note_form import color_dot


def _render_empty() -> None:
    """Placeholder shown before the first note exists."""
    st.markdown(
        "<div style='text-align:center;padding:3rem 0'>"
        "<div style='font-size:60px'>🗒️</div>"
        "<h3>No Notes Yet</h3>"
        "<p style='opacity:0.7'>Open <b>New Note</b> to create your first note</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def _render_row(note: Note, offset: int, view: list[Note], store: NotesStore) -> None:
    """One list entry with open and delete buttons."""
    rgb = note.display_color if note.color_tag is not ColorTag.NONE else None
    dot = color_dot(to_hex(rgb) if rgb else None)

    with st.container(border=True):
        col_text, col_open, col_delete = st.columns([8, 1, 1])
        with col_text:
            st.markdown(f"{dot}**{note.display_title}**", unsafe_allow_html=True)
            if note.content:
                preview = note.content if len(note.content) <= 140 else note.content[:140] + "…"
                st.write(preview)
            meta: list[str] = []
            if note.location:
                meta.append(f"📍 {note.location}")
            meta.append(note.date.strftime("%b %d, %Y"))
            st.caption(" · ".join(meta))
            st.caption(f"Modified: {note.date_modified:%b %d, %Y}")
        with col_open:
            if st.button("Open", key=f"open_{note.id}"):
                state.select_note(note.id)
                st.rerun()
        with col_delete:
            if st.button("🗑️", key=f"delete_{note.id}", help="Delete note"):
                store.delete(to_store_positions(view, [offset], store.notes))
                st.rerun()


def render(store: NotesStore) -> None:
    """Render the notes page."""
    note_id = state.selected_note_id()
    if note_id is not None:
        note = store.get(note_id)
        if note is not None:
            note_detail.render(note, store)
            return
        state.select_note(None)

    st.title("🗒️ Notes")

    if not store.count:
        _render_empty()
        return

    query = st.text_input("Search", placeholder="Search notes...", label_visibility="collapsed")
    view = filter_notes(store.notes, query)

    if not view:
        st.info(f"No notes match “{query}”.")
        return

    for offset, note in enumerate(view):
        _render_row(note, offset, view, store)

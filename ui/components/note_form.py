"""Input sections shared by the add page and the detail editor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime

import streamlit as st

from notes.colors import BLACK, ColorTag, parse_hex, to_hex
from notes.models import CustomColor, Note, TagColor, make_color
from notes.store import NotesStore

_TAGS: list[ColorTag] = list(ColorTag)


@dataclass
class NoteFields:
    """Editable values collected from the form."""

    title: str
    content: str
    location: str
    date: datetime
    color: TagColor | CustomColor


def _as_datetime(day: date, like: datetime) -> datetime:
    """Combine a picked day with the time-of-day of ``like`` (UTC-aware)."""
    return datetime.combine(day, like.timetz()).astimezone(UTC)


def color_dot(rgb_hex: str | None, size: int = 12) -> str:
    """HTML for a filled circle, or empty string when there is no color."""
    if rgb_hex is None:
        return ""
    return (
        f'<span style="display:inline-block;width:{size}px;height:{size}px;'
        f'border-radius:50%;background:#{rgb_hex};margin-right:6px"></span>'
    )


def render_fields(key: str, initial: Note | None = None) -> NoteFields:
    """Render title/location/date/color/content inputs and return their values."""
    base = initial or Note()

    title = st.text_input("Title", value=base.title, placeholder="Enter title", key=f"{key}_title")
    location = st.text_input(
        "Location", value=base.location, placeholder="Enter location", key=f"{key}_location"
    )
    day = st.date_input("Date", value=base.date.date(), key=f"{key}_date")

    tag = st.selectbox(
        "Color Tag",
        _TAGS,
        index=_TAGS.index(base.color_tag),
        format_func=lambda t: t.display_name,
        key=f"{key}_tag",
    )
    # Forms only rerun on submit, so the picker is always shown and only
    # read when the Custom tag is selected.
    current = parse_hex(base.custom_color_hex) or BLACK
    picked = st.color_picker(
        "Pick Custom Color", value=f"#{to_hex(current)}", key=f"{key}_custom"
    )
    picked_rgb = parse_hex(picked)
    hex_value = to_hex(picked_rgb) if picked_rgb else None

    content = st.text_area("Content", value=base.content, height=200, key=f"{key}_content")

    return NoteFields(
        title=title,
        content=content,
        location=location,
        date=_as_datetime(day, base.date),
        color=make_color(tag, hex_value),
    )


def render_add(store: NotesStore) -> None:
    """Render the new-note page."""
    st.title("📝 New Note")

    with st.form("add_note", clear_on_submit=True):
        fields = render_fields("add")
        submitted = st.form_submit_button("Save", type="primary")

    if submitted:
        note = Note(
            title=fields.title,
            content=fields.content,
            location=fields.location,
            date=fields.date,
            color=fields.color,
        )
        store.add(note)

"""Overview page: charts of how notes are tagged and when they were taken."""

from __future__ import annotations

from typing import Any

import pandas as pd
import plotly.express as px
import streamlit as st

from notes.colors import ColorTag, to_hex
from notes.models import Note
from notes.store import NotesStore

# Bar colors follow the tag palette; untagged and custom notes render grey.
_TAG_COLORS: dict[str, str] = {
    tag.display_name: f"#{to_hex(tag.rgb)}"
    for tag in ColorTag
    if tag.rgb is not None and tag is not ColorTag.CUSTOM
}
_TAG_COLORS[ColorTag.NONE.display_name] = "#bdc3c7"
_TAG_COLORS[ColorTag.CUSTOM.display_name] = "#7f8c8d"

_CHART_LAYOUT: dict[str, Any] = {
    "paper_bgcolor": "rgba(0,0,0,0)",
    "plot_bgcolor": "rgba(0,0,0,0)",
    "font": {"size": 12},
    "margin": {"t": 30, "b": 50, "l": 60, "r": 20},
}


def _to_frame(notes: tuple[Note, ...]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "title": n.display_title,
                "tag": n.color_tag.display_name,
                "date": n.date.date(),
                "created": n.date_created,
                "modified": n.date_modified,
                "location": n.location,
            }
            for n in notes
        ]
    )


def render(store: NotesStore) -> None:
    """Render the overview dashboard."""
    st.title("📈 Overview")

    notes = store.notes
    if not notes:
        st.info("No notes yet.")
        return

    df = _to_frame(notes)

    col1, col2, col3 = st.columns(3)
    col1.metric("Notes", len(df))
    col2.metric("Tagged", int((df["tag"] != ColorTag.NONE.display_name).sum()))
    col3.metric("Locations", df.loc[df["location"] != "", "location"].nunique())
    st.divider()

    col_left, col_right = st.columns(2)
    with col_left:
        _render_tag_chart(df)
    with col_right:
        _render_timeline_chart(df)


def _render_tag_chart(df: pd.DataFrame) -> None:
    """Bar chart of note counts per color tag."""
    st.subheader("By Color Tag")
    counts = df.groupby("tag").size().reset_index(name="count")

    fig = px.bar(
        counts,
        x="tag",
        y="count",
        color="tag",
        color_discrete_map=_TAG_COLORS,
        labels={"tag": "Tag", "count": "Notes"},
        text="count",
        height=350,
    )
    fig.update_traces(textposition="outside")
    fig.update_layout(**_CHART_LAYOUT, showlegend=False)
    fig.update_yaxes(gridcolor="rgba(128,128,128,0.15)")
    st.plotly_chart(fig, use_container_width=True)


def _render_timeline_chart(df: pd.DataFrame) -> None:
    """Notes per user-chosen date."""
    st.subheader("By Date")
    per_day = df.groupby("date").size().reset_index(name="count")

    fig = px.bar(
        per_day,
        x="date",
        y="count",
        labels={"date": "Date", "count": "Notes"},
        height=350,
    )
    fig.update_layout(**_CHART_LAYOUT)
    fig.update_yaxes(gridcolor="rgba(128,128,128,0.15)")
    st.plotly_chart(fig, use_container_width=True)

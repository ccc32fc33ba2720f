"""Search filtering over the store's ordered notes."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import Note


def matches(note: Note, query: str) -> bool:
    """Case-insensitive substring match on title, content, location or tag name."""
    if not query:
        return True
    q = query.lower()
    return (
        q in note.title.lower()
        or q in note.content.lower()
        or q in note.location.lower()
        or q in note.color_tag.display_name.lower()
    )


def filter_notes(notes: Iterable[Note], query: str) -> list[Note]:
    """Return matching notes in their original order."""
    return [n for n in notes if matches(n, query)]


def to_store_positions(
    view: Sequence[Note], view_positions: Iterable[int], notes: Sequence[Note]
) -> set[int]:
    """Translate positions in a filtered ``view`` to positions in ``notes``.

    Lookup is by id; positions outside the view and ids no longer present
    in ``notes`` are skipped.
    """
    index_by_id = {n.id: i for i, n in enumerate(notes)}
    positions: set[int] = set()
    for offset in view_positions:
        if not 0 <= offset < len(view):
            continue
        index = index_by_id.get(view[offset].id)
        if index is not None:
            positions.add(index)
    return positions

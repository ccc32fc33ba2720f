"""Unit tests for notes.search — filtering and position translation."""

from __future__ import annotations

import pytest

from notes.colors import ColorTag
from notes.models import CustomColor, Note, TagColor
from notes.search import filter_notes, matches, to_store_positions
from notes.store import NotesStore
from notes.storage import MemoryBackend


@pytest.fixture()
def notes() -> list[Note]:
    return [
        Note(title="Grocery List", content="Eggs, milk"),
        Note(title="Meeting", content="Discuss roadmap", location="Office"),
        Note(title="Trip", location="Lisbon", color=TagColor(tag=ColorTag.ORANGE)),
        Note(title="Palette", color=CustomColor(hex="123456")),
    ]


class TestMatches:
    @pytest.mark.parametrize("query", ["grocery", "LIST", "", "ery l"])
    def test_title_matches(self, query: str) -> None:
        assert matches(Note(title="Grocery List"), query)

    def test_no_match(self) -> None:
        assert not matches(Note(title="Grocery List"), "xyz")

    def test_content_and_location(self, notes: list[Note]) -> None:
        assert matches(notes[1], "ROADMAP")
        assert matches(notes[1], "office")

    def test_tag_display_name(self, notes: list[Note]) -> None:
        assert matches(notes[2], "orange")
        assert matches(notes[3], "custom")
        assert matches(notes[0], "no tag")

    def test_custom_hex_not_searched(self, notes: list[Note]) -> None:
        assert not matches(notes[3], "123456")


class TestFilterNotes:
    def test_empty_query_keeps_everything_in_order(self, notes: list[Note]) -> None:
        assert filter_notes(notes, "") == notes

    def test_preserves_relative_order(self, notes: list[Note]) -> None:
        result = filter_notes(notes, "li")
        assert [n.title for n in result] == ["Grocery List", "Trip"]

    def test_does_not_mutate_input(self, notes: list[Note]) -> None:
        copy = list(notes)
        filter_notes(notes, "trip")
        assert notes == copy


class TestToStorePositions:
    def test_maps_by_id(self, notes: list[Note]) -> None:
        view = filter_notes(notes, "trip")
        assert to_store_positions(view, [0], notes) == {2}

    def test_skips_out_of_view_offsets(self, notes: list[Note]) -> None:
        view = filter_notes(notes, "trip")
        assert to_store_positions(view, [0, 5, -1], notes) == {2}

    def test_skips_vanished_ids(self, notes: list[Note]) -> None:
        view = [Note(title="gone")]
        assert to_store_positions(view, [0], notes) == set()

    def test_delete_through_filtered_view(self) -> None:
        store = NotesStore(MemoryBackend())
        for title in ["alpha", "beta", "alphabet", "gamma"]:
            store.add(Note(title=title))
        # store order: gamma, alphabet, beta, alpha
        view = filter_notes(store.notes, "ALPHA")
        assert [n.title for n in view] == ["alphabet", "alpha"]

        store.delete(to_store_positions(view, [1], store.notes))
        assert [n.title for n in store.notes] == ["gamma", "alphabet", "beta"]

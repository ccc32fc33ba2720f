"""Seed the configured note slot with sample notes for screenshots.

Notes are added oldest first, so the list reads newest first afterwards.
Uses the same settings as the app (.env / environment variables).

Usage:
    python scripts/seed_data.py [--reset] [--backend file|memory|redis]
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path

_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from notes.colors import ColorTag  # noqa: E402
from notes.config import build_backend, settings  # noqa: E402
from notes.models import Note, make_color  # noqa: E402
from notes.storage import RedisBackend, SlotBackend  # noqa: E402
from notes.store import NotesStore, SaveResult  # noqa: E402

# Each entry: (title, content, location, days_ago, tag, custom_hex)
SAMPLES: list[tuple[str, str, str, int, ColorTag, str | None]] = [
    (
        "Sample Note",
        "This is a sample note with some content to show how it looks in the list view.",
        "New York",
        0,
        ColorTag.BLUE,
        None,
    ),
    ("Another Note", "Short content", "Paris", 1, ColorTag.GREEN, None),
    ("", "Untitled note example", "", 2, ColorTag.NONE, None),
    (
        "Trip Ideas",
        "Coastal drive, two nights by the water, find a bakery for breakfast.",
        "San Francisco",
        5,
        ColorTag.PURPLE,
        None,
    ),
    ("Grocery List", "Eggs, milk, bread, coffee", "", 3, ColorTag.CUSTOM, "1ABC9C"),
    ("Meeting Notes", "Agreed to ship the beta on Friday.", "Office", 7, ColorTag.RED, None),
]


def seed(backend: SlotBackend, key: str, reset: bool = False) -> NotesStore:
    """Add every sample note to the slot ``key`` and return the store."""
    if reset:
        backend.clear(key)
        print(f"  Cleared slot '{key}'")

    store = NotesStore(backend, key=key)
    now = datetime.now(UTC)

    for i, (title, content, location, days_ago, tag, custom_hex) in enumerate(
        reversed(SAMPLES), 1
    ):
        store.add(
            Note(
                title=title,
                content=content,
                location=location,
                date=now - timedelta(days=days_ago),
                color=make_color(tag, custom_hex),
            )
        )
        print(f"  [{i}/{len(SAMPLES)}] {title or 'Untitled'} ({tag.display_name})")
    return store


def main() -> None:
    """Write all sample notes through a NotesStore."""
    parser = argparse.ArgumentParser(description="Seed sample notes")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear the slot before seeding",
    )
    parser.add_argument(
        "--backend",
        choices=["file", "memory", "redis"],
        default=settings.notes_backend,
        help=f"Slot backend (default: {settings.notes_backend})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )

    config = settings.model_copy(update={"notes_backend": args.backend})
    backend = build_backend(config)
    try:
        store = seed(backend, config.notes_slot_key, reset=args.reset)
    finally:
        if isinstance(backend, RedisBackend):
            backend.close()

    if store.last_save_result is not SaveResult.OK:
        print(f"  FAIL: notes were not saved ({store.last_save_result})")
        sys.exit(1)

    print()
    print(f"  Done! {store.count} notes in {config.notes_backend} slot '{config.notes_slot_key}'.")
    print("    - Streamlit: streamlit run ui/app.py  →  http://localhost:8501")
    print()


if __name__ == "__main__":
    main()

"""In-memory ordered note list kept in sync with a persisted slot."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, Optional

from .metrics import NOTE_OPERATIONS, NOTES_STORED, PERSISTENCE_FAILURES
from .models import Note
from .storage import DEFAULT_SLOT_KEY, SlotBackend, decode_notes, encode_notes

logger = logging.getLogger(__name__)

Listener = Callable[[tuple[Note, ...]], None]


class SaveResult(str, Enum):
    OK = "ok"
    ENCODE_ERROR = "encode_error"
    WRITE_ERROR = "write_error"


class LoadResult(str, Enum):
    OK = "ok"
    MISSING = "missing"
    READ_ERROR = "read_error"
    DECODE_ERROR = "decode_error"


class NotesStore:
    """Owns the canonical, most-recent-first list of notes.

    Every mutation rewrites the whole list to the backend slot. Persistence
    is best-effort: failures are logged and recorded in
    :attr:`last_save_result` / :attr:`load_result`, never raised.
    """

    def __init__(self, backend: SlotBackend, key: str = DEFAULT_SLOT_KEY) -> None:
        self._backend = backend
        self._key = key
        self._notes: list[Note] = []
        self._listeners: list[Listener] = []
        self.last_save_result: Optional[SaveResult] = None
        self.load_result = self._load()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def notes(self) -> tuple[Note, ...]:
        """Snapshot of the current order."""
        return tuple(self._notes)

    @property
    def count(self) -> int:
        return len(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def index_of(self, note_id: str) -> Optional[int]:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        return None

    def get(self, note_id: str) -> Optional[Note]:
        index = self.index_of(note_id)
        return None if index is None else self._notes[index]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, note: Note) -> None:
        """Insert ``note`` at the front."""
        self._notes.insert(0, note)
        NOTE_OPERATIONS.labels(operation="add").inc()
        logger.info("Added note %s — '%s'", note.id, note.title)
        self._commit()

    def update(self, note: Note) -> bool:
        """Replace the note with the same id and move it to the front.

        Returns False, without persisting, when no note has that id.
        """
        index = self.index_of(note.id)
        if index is None:
            NOTE_OPERATIONS.labels(operation="update_miss").inc()
            logger.warning("Update ignored, no note with id %s", note.id)
            return False

        del self._notes[index]
        self._notes.insert(0, note)
        NOTE_OPERATIONS.labels(operation="update").inc()
        logger.info("Updated note %s (was at position %d)", note.id, index)
        self._commit()
        return True

    def delete(self, positions: Iterable[int]) -> None:
        """Remove the notes at ``positions`` in one step.

        Indices outside the current list are ignored. Always persists.
        """
        doomed = {p for p in positions if 0 <= p < len(self._notes)}
        self._notes = [n for i, n in enumerate(self._notes) if i not in doomed]
        NOTE_OPERATIONS.labels(operation="delete").inc()
        logger.info("Deleted %d note(s) at positions %s", len(doomed), sorted(doomed))
        self._commit()

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(snapshot)`` after every mutation.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _commit(self) -> None:
        NOTES_STORED.set(len(self._notes))
        self._save()
        snapshot = self.notes
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Note store listener %r failed", listener)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _save(self) -> SaveResult:
        try:
            blob = encode_notes(self._notes)
        except Exception as exc:
            PERSISTENCE_FAILURES.labels(stage="encode").inc()
            logger.error("Failed to encode %d notes: %s", len(self._notes), exc)
            self.last_save_result = SaveResult.ENCODE_ERROR
            return self.last_save_result

        try:
            self._backend.write(self._key, blob)
        except Exception as exc:
            PERSISTENCE_FAILURES.labels(stage="write").inc()
            logger.error("Failed to write slot '%s': %s", self._key, exc)
            self.last_save_result = SaveResult.WRITE_ERROR
            return self.last_save_result

        self.last_save_result = SaveResult.OK
        return self.last_save_result

    def _load(self) -> LoadResult:
        self._notes = []
        try:
            blob = self._backend.read(self._key)
        except Exception as exc:
            PERSISTENCE_FAILURES.labels(stage="read").inc()
            logger.error("Failed to read slot '%s': %s — starting fresh", self._key, exc)
            return LoadResult.READ_ERROR

        if blob is None:
            logger.info("No saved notes under '%s' — starting fresh", self._key)
            return LoadResult.MISSING

        try:
            self._notes = decode_notes(blob)
        except Exception as exc:
            PERSISTENCE_FAILURES.labels(stage="decode").inc()
            logger.error("Failed to decode saved notes: %s — starting fresh", exc)
            return LoadResult.DECODE_ERROR

        NOTES_STORED.set(len(self._notes))
        logger.info("Loaded %d notes from '%s'", len(self._notes), self._key)
        return LoadResult.OK

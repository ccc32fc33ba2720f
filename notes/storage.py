"""Blob codec and key-value backends for the persisted note list.

The whole ordered list is stored as one JSON array under a single key.
Backends only move bytes; encoding and error policy live in the store.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Protocol

import redis
from pydantic import TypeAdapter

from .models import Note

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "SavedNotes"

_NOTE_LIST = TypeAdapter(list[Note])


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


def encode_notes(notes: Iterable[Note]) -> bytes:
    """Serialize notes, in order, to a UTF-8 JSON array."""
    return _NOTE_LIST.dump_json(list(notes), by_alias=True)


def decode_notes(blob: bytes | str) -> list[Note]:
    """Parse a blob produced by :func:`encode_notes`.

    Raises ``pydantic.ValidationError`` for malformed JSON or records.
    """
    return _NOTE_LIST.validate_json(blob)


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------


class SlotBackend(Protocol):
    """Minimal key-value interface the store persists through."""

    def read(self, key: str) -> Optional[bytes]: ...

    def write(self, key: str, blob: bytes) -> None: ...

    def clear(self, key: str) -> None: ...


class MemoryBackend:
    """Process-local slots. Contents vanish with the process."""

    def __init__(self) -> None:
        self._slots: dict[str, bytes] = {}

    def read(self, key: str) -> Optional[bytes]:
        return self._slots.get(key)

    def write(self, key: str, blob: bytes) -> None:
        self._slots[key] = bytes(blob)

    def clear(self, key: str) -> None:
        self._slots.pop(key, None)


class FileBackend:
    """One JSON file per slot inside ``directory``."""

    def __init__(self, directory: Path) -> None:
        self._dir = Path(directory).expanduser()

    def path_for(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def read(self, key: str) -> Optional[bytes]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def write(self, key: str, blob: bytes) -> None:
        """Replace the slot atomically via a sibling temp file."""
        self._dir.mkdir(parents=True, exist_ok=True)
        target = self.path_for(key)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._dir)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(blob)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d bytes to %s", len(blob), target)

    def clear(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


class RedisBackend:
    """Slots stored as plain Redis string keys.

    Connection and command errors are not caught here; the store records
    them as read/write failures.
    """

    def __init__(self, redis_url: str, prefix: str = "notes:") -> None:
        self._redis_url = redis_url
        self._prefix = prefix
        self._client: redis.Redis = redis.Redis.from_url(redis_url)

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def read(self, key: str) -> Optional[bytes]:
        return self._client.get(self._key(key))

    def write(self, key: str, blob: bytes) -> None:
        self._client.set(self._key(key), blob)

    def clear(self, key: str) -> None:
        self._client.delete(self._key(key))

    def close(self) -> None:
        self._client.close()

"""Unit tests for scripts.seed_data — sample seeding and backend cleanup."""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from notes.storage import MemoryBackend, RedisBackend
from notes.store import NotesStore, SaveResult
from scripts import seed_data
from scripts.seed_data import SAMPLES, seed

KEY = "SavedNotes"


class TestSeed:
    def test_adds_samples_in_listed_order(self) -> None:
        backend = MemoryBackend()
        store = seed(backend, KEY)
        assert store.last_save_result is SaveResult.OK
        assert [n.title for n in store.notes] == [s[0] for s in SAMPLES]
        assert [n.title for n in NotesStore(backend, key=KEY).notes] == [s[0] for s in SAMPLES]

    def test_reset_clears_previous_notes(self) -> None:
        backend = MemoryBackend()
        seed(backend, KEY)
        store = seed(backend, KEY, reset=True)
        assert store.count == len(SAMPLES)

    def test_without_reset_appends(self) -> None:
        backend = MemoryBackend()
        seed(backend, KEY)
        assert seed(backend, KEY).count == 2 * len(SAMPLES)


class TestMain:
    def test_redis_client_closed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client = MagicMock()
        client.get.return_value = None
        with patch("notes.storage.redis.Redis.from_url", return_value=client):
            backend = RedisBackend("redis://localhost:6379/0")

        monkeypatch.setattr(seed_data, "build_backend", lambda config: backend)
        monkeypatch.setattr(sys, "argv", ["seed_data.py", "--backend", "redis"])

        seed_data.main()

        assert client.set.call_count == len(SAMPLES)
        client.close.assert_called_once_with()

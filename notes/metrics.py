"""Prometheus metrics for the note store.

All metric objects are defined here so they can be imported from any module.
"""

from prometheus_client import Counter, Gauge

# ---------------------------------------------------------------------------
# Store operations
# ---------------------------------------------------------------------------

NOTE_OPERATIONS = Counter(
    "notes_operations_total",
    "Total number of note store mutations",
    ["operation"],  # add, update, update_miss, delete
)

NOTES_STORED = Gauge(
    "notes_stored",
    "Number of notes currently held by the store",
)

# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------

PERSISTENCE_FAILURES = Counter(
    "notes_persistence_failures_total",
    "Failed reads or writes of the persisted note list",
    ["stage"],  # encode, write, read, decode
)

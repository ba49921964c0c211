"""Per-reservation locks.

Cancel, update and the reminder step each load a reservation, check its
status and write it back. Holding the reservation's lock across that
sequence (commit and event publication included) keeps two of them from
interleaving on the same identifier within the process.

An entry lives in the registry only while some thread holds or waits for
its lock.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field


@dataclass
class _Entry:
    lock: threading.RLock = field(default_factory=threading.RLock)
    users: int = 0


_locks: dict[str, _Entry] = {}
_registry_lock = threading.Lock()


@contextmanager
def reservation_lock(reservation_id) -> Iterator[None]:
    """Hold the lock for ``reservation_id`` for the duration of the block."""
    key = str(reservation_id)
    with _registry_lock:
        entry = _locks.setdefault(key, _Entry())
        entry.users += 1

    try:
        with entry.lock:
            yield
    finally:
        with _registry_lock:
            entry.users -= 1
            if entry.users == 0:
                del _locks[key]

"""
Debounced autosave.

Every session change schedules a write of the full snapshot. A new change
before the debounce interval elapses replaces the pending snapshot and restarts
the interval, so at most one write is ever pending (last write wins).

The scheduler never starts threads or timers of its own. The host loop calls
poll() (or flush() on exit), and the clock is injectable so the coalescing can
be tested without real delays:

    clock = VirtualClock()
    scheduler = AutosaveScheduler(store, delay=1.0, clock=clock)
    scheduler.schedule(snapshot)
    clock.advance(1.0)
    scheduler.poll()  # writes
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from cvwizard.contexts.authoring.session import AuthoringSession
from cvwizard.contexts.persistence.exceptions import SnapshotFormatError
from cvwizard.contexts.persistence.logger import (
    log_autosave_discarded,
    log_autosave_failed,
    log_autosave_written,
)
from cvwizard.contexts.persistence.snapshot import apply_snapshot, from_json, serialize_session, to_json
from cvwizard.contexts.persistence.storage import AUTOSAVE_KEY, LocalStore
from cvwizard.utils.config import load_settings

Clock = Callable[[], float]


class VirtualClock:
    """Manually advanced clock for deterministic tests."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@dataclass
class PendingWrite:
    snapshot: Dict[str, Any]
    due: float


class AutosaveScheduler:
    """
    Coalescing, cancellable delayed writer.

    Attributes:
        store: Destination LocalStore
        delay: Debounce interval in seconds
        key: Storage key (defaults to AUTOSAVE_KEY)
        writes: Number of snapshots successfully written
    """

    def __init__(
        self,
        store: LocalStore,
        delay: Optional[float] = None,
        clock: Clock = time.monotonic,
        key: str = AUTOSAVE_KEY,
    ):
        if delay is None:
            delay = float(load_settings()["autosave"]["debounce_seconds"])
        if delay < 0:
            raise ValueError(f"Debounce delay must be non-negative, got {delay}")

        self.store = store
        self.delay = delay
        self.clock = clock
        self.key = key
        self.writes = 0
        self._pending: Optional[PendingWrite] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def schedule(self, snapshot: Dict[str, Any]) -> None:
        """Replace any pending write with this snapshot and restart the interval."""
        self._pending = PendingWrite(snapshot=snapshot, due=self.clock() + self.delay)

    def cancel(self) -> None:
        self._pending = None

    def poll(self) -> bool:
        """
        Write the pending snapshot if its interval has elapsed.

        Returns:
            True if a write was attempted
        """
        if self._pending is None or self.clock() < self._pending.due:
            return False
        self._write_pending()
        return True

    def flush(self) -> bool:
        """
        Write the pending snapshot immediately.

        Returns:
            True if a write was attempted
        """
        if self._pending is None:
            return False
        self._write_pending()
        return True

    def _write_pending(self) -> None:
        pending, self._pending = self._pending, None
        try:
            path = self.store.write(self.key, to_json(pending.snapshot))
        except OSError as e:
            # Storage unavailable: keep working in memory for this cycle
            log_autosave_failed(self.key, e)
            return
        self.writes += 1
        log_autosave_written(path)

    def attach(self, session: AuthoringSession) -> "AutosaveScheduler":
        """Schedule a write after every change of the session."""
        self.detach()
        self._unsubscribe = session.subscribe(lambda s: self.schedule(serialize_session(s)))
        return self

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None


def load_autosaved_session(store: LocalStore, key: str = AUTOSAVE_KEY) -> AuthoringSession:
    """
    Start a session from the last autosave.

    A missing, unreadable or malformed autosave yields a fresh session.
    """
    session = AuthoringSession()

    try:
        text = store.read(key)
    except OSError as e:
        log_autosave_failed(key, e)
        return session
    except UnicodeDecodeError as e:
        log_autosave_discarded(key, e)
        return session

    if text is None:
        return session

    try:
        apply_snapshot(session, from_json(text))
    except SnapshotFormatError as e:
        log_autosave_discarded(key, e)

    return session

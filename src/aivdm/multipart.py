"""
Reassembly of multi-sentence AIS messages.

Fragments are buffered per sequence id until every part has arrived or
the buffer expires. Expiry is a sweep over the buffer table rather than
one timer per message: it runs on every add(), whenever the table is
inspected, and optionally from a background thread. A single lock guards
the table, so a message that completes is removed atomically and can
never also be expired.
"""

from __future__ import annotations
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from .config import config

LOGGER = logging.getLogger(__name__)

# Key used for fragments that carry no sequence id
NO_SEQ_ID = "noprefix"


@dataclass
class MultipartBuffer:
    """Fragments of one in-flight multipart message."""
    key: str
    total: int
    created: float
    parts: Dict[int, str] = field(default_factory=dict)
    fill: int = 0

    @property
    def complete(self) -> bool:
        return len(self.parts) == self.total


class MultipartReassembler:
    """Buffer and reassemble multipart payloads keyed by sequence id."""

    def __init__(self, timeout: float = config.MULTIPART_TIMEOUT,
                 clock: Callable[[], float] = time.monotonic):
        self.timeout = timeout
        self.clock = clock
        self.buffer: Dict[str, MultipartBuffer] = {}
        self.expired_count = 0
        self._lock = threading.Lock()
        self._sweeper: Optional[threading.Event] = None

    def __len__(self) -> int:
        with self._lock:
            self._expire_locked(self.clock())
            return len(self.buffer)

    def add(self, seq_id: str, total: int, part: int, payload: str,
            fill: int) -> Optional[Tuple[str, int]]:
        """
        Add one fragment.

        Args:
            seq_id: Sequence id from the sentence (may be empty)
            total: Declared number of parts
            part: 1-based index of this part
            payload: Armored payload fragment
            fill: Fill bits declared by this fragment

        Returns:
            (payload, fill) for the joined message once all parts are
            present, None otherwise.
        """
        key = seq_id or NO_SEQ_ID

        with self._lock:
            now = self.clock()
            self._expire_locked(now)

            entry = self.buffer.get(key)
            if entry is not None and entry.total != total:
                # Same id reused for a different message; the old one is lost
                LOGGER.debug("Discarding stale multipart %s (%d/%d parts)",
                             key, len(entry.parts), entry.total)
                entry = None
            if entry is None:
                entry = MultipartBuffer(key=key, total=total, created=now)
                self.buffer[key] = entry

            # Last write wins for duplicated part numbers
            entry.parts[part] = payload
            if part == total:
                entry.fill = fill

            if not entry.complete:
                LOGGER.debug("Buffering fragment %d/%d for %s", part, total, key)
                return None

            del self.buffer[key]
            try:
                joined = "".join(entry.parts[i] for i in range(1, total + 1))
            except KeyError:
                LOGGER.debug("Multipart %s has %d parts but not 1..%d", key, total, total)
                return None

        LOGGER.debug("Assembled multipart message %s (%d parts)", key, total)
        return joined, entry.fill

    def expire(self, now: Optional[float] = None) -> int:
        """Drop buffers older than the timeout. Returns how many were dropped."""
        with self._lock:
            return self._expire_locked(self.clock() if now is None else now)

    def _expire_locked(self, now: float) -> int:
        expired = [k for k, e in self.buffer.items() if now - e.created >= self.timeout]
        for key in expired:
            entry = self.buffer.pop(key)
            LOGGER.debug("Expired incomplete message %s (%d/%d fragments)",
                         key, len(entry.parts), entry.total)
        self.expired_count += len(expired)
        return len(expired)

    def start_sweeper(self, interval: float = config.SWEEP_INTERVAL):
        """Run expire() every interval seconds on a daemon thread."""
        with self._lock:
            if self._sweeper is not None:
                return
            stopped = threading.Event()
            self._sweeper = stopped

        def run_sweep():
            while not stopped.wait(interval):
                self.expire()

        threading.Thread(target=run_sweep, name="aivdm-sweeper", daemon=True).start()

    def stop_sweeper(self):
        # Each sweeper owns its event, so a restart never revives the old one
        with self._lock:
            stopped, self._sweeper = self._sweeper, None
        if stopped is not None:
            stopped.set()

    def get_stats(self) -> dict:
        """Get buffer statistics."""
        with self._lock:
            self._expire_locked(self.clock())
            return {
                'buffered_message_count': len(self.buffer),
                'expired_count': self.expired_count,
                'buffered_messages': {k: f"{len(v.parts)}/{v.total}" for k, v in self.buffer.items()},
            }

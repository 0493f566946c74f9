"""
pagegen/core/buffer.py
═══════════════════════════════════════════════════════════════════════════
Double-buffered page content.
  • Two slots + live index, held together in one immutable snapshot
  • read_live() never takes a lock → readers never wait on each other or on a writer
  • publish_and_swap() is the only mutator, serialized by a threading lock
  • A new snapshot replaces the old one in a single reference assignment,
    so a reader sees the old live slot or the new one, never a mix
═══════════════════════════════════════════════════════════════════════════
"""

import threading
import time
from typing import NamedTuple


class _Snapshot(NamedTuple):
    slots:   tuple[str, str]
    live:    int
    version: int
    ts:      float


class DoubleBuffer:
    def __init__(self, seed: str):
        self._snap = _Snapshot(slots=(seed, ""), live=0, version=0, ts=time.time())
        self._write_lock = threading.Lock()

    def read_live(self) -> str:
        snap = self._snap
        return snap.slots[snap.live]

    def publish_and_swap(self, text: str) -> int:
        """Write into the slot that is not live, then make it live. Returns the new version."""
        with self._write_lock:
            cur    = self._snap
            target = 1 - cur.live
            slots  = (text, cur.slots[1]) if target == 0 else (cur.slots[0], text)
            self._snap = _Snapshot(slots=slots, live=target, version=cur.version + 1, ts=time.time())
            return self._snap.version

    @property
    def live_index(self) -> int:
        return self._snap.live

    @property
    def version(self) -> int:
        """Number of successful publishes since startup (the seed is version 0)."""
        return self._snap.version

    def slot(self, index: int) -> str:
        return self._snap.slots[index]

    def age(self) -> float:
        """Seconds since the live slot was written."""
        return round(time.time() - self._snap.ts, 1)

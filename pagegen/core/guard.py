"""
pagegen/core/guard.py
At most one regeneration in flight. A busy guard means "skip", never "wait".
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class RegenerationGuard:
    def __init__(self):
        # Only ever acquired with blocking=False
        self._lock = threading.Lock()

    def try_acquire(self) -> bool:
        """True → caller is the sole regenerator and must release(). False → busy."""
        return self._lock.acquire(blocking=False)

    def release(self) -> None:
        if not self._lock.locked():
            raise RuntimeError("release() called on an idle regeneration guard")
        self._lock.release()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def attempt(self) -> Iterator[bool]:
        """
        Scoped acquisition:

            with guard.attempt() as held:
                if held:
                    ...

        Released on every exit path when held.
        """
        held = self.try_acquire()
        try:
            yield held
        finally:
            if held:
                self.release()

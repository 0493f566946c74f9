"""
pagegen/core/regenerator.py
═══════════════════════════════════════════════════════════════════════════════
Stale-while-revalidate orchestration, with strict guarantees:

  1. Every request is answered from the live buffer - never waits on the model
  2. ONE regeneration at a time (RegenerationGuard - skip if busy, never queue)
  3. Failed regeneration → buffer untouched, stale page keeps being served
  4. Background tasks are tracked and their exceptions always reach the log
  5. The startup seed is the only generation whose failure propagates

Per request:
  serve()   → current live page (synchronous)
  trigger() → try the guard; if held, spawn one asyncio task that calls the
              generator, sanitizes the output and publishes it
═══════════════════════════════════════════════════════════════════════════════
"""

import asyncio
import logging
import time
from typing import Optional

from pagegen.core.buffer import DoubleBuffer
from pagegen.core.config import DEGRADED_AFTER_FAILURES, SHUTDOWN_GRACE_S
from pagegen.core.errors import GenerationError, StartupGenerationError
from pagegen.core.guard import RegenerationGuard
from pagegen.core.sanitize import extract_html
from pagegen.generators.base import ContentGenerator

log = logging.getLogger("regenerator")


class Regenerator:
    def __init__(
        self,
        generator: ContentGenerator,
        buffer: DoubleBuffer,
        guard: Optional[RegenerationGuard] = None,
        degraded_after: int = DEGRADED_AFTER_FAILURES,
    ):
        self.generator = generator
        self.buffer    = buffer
        self.guard     = guard or RegenerationGuard()

        self._degraded_after       = degraded_after
        self._consecutive_failures = 0
        self._tasks: set[asyncio.Task] = set()

    # ── Startup ──────────────────────────────────────────────────────────────

    @classmethod
    async def bootstrap(cls, generator: ContentGenerator, **kwargs) -> "Regenerator":
        """
        Generate the seed page before anything is served.
        Raises StartupGenerationError - the caller must not start serving.
        """
        log.info("Generating initial page...")
        t0 = time.monotonic()
        try:
            raw = await generator.generate()
        except GenerationError as ex:
            raise StartupGenerationError.wrap(ex) from ex
        seed = extract_html(raw)
        log.info(f"Initial page ready ({len(seed)} chars) in {time.monotonic() - t0:.1f}s")
        return cls(generator, DoubleBuffer(seed), **kwargs)

    # ── Request path ─────────────────────────────────────────────────────────

    def serve(self) -> str:
        return self.buffer.read_live()

    def trigger(self) -> Optional[asyncio.Task]:
        """
        Fire-and-forget refresh. Returns the spawned task, or None when another
        regeneration already holds the guard. Must be called from the event loop.
        """
        if not self.guard.try_acquire():
            log.debug("Regeneration already running - skipping trigger")
            return None

        try:
            task = asyncio.get_running_loop().create_task(self._regenerate())
        except BaseException:
            self.guard.release()
            raise
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    # ── Background ───────────────────────────────────────────────────────────

    async def _regenerate(self) -> None:
        """Runs with the guard already held. _on_task_done releases it."""
        log.info("Regeneration started")
        t0 = time.monotonic()
        try:
            raw = await self.generator.generate()
        except GenerationError as ex:
            self._record_failure(f"Regeneration failed: {ex}")
            return
        except Exception:
            log.exception("Unexpected error from generator")
            self._record_failure("Regeneration failed with an unexpected error")
            return

        page    = extract_html(raw)
        version = self.buffer.publish_and_swap(page)
        self._record_success()
        log.info(
            f"Regeneration complete in {time.monotonic() - t0:.1f}s, "
            f"published v{version} ({len(page)} chars) to slot {self.buffer.live_index}"
        )

    def _on_task_done(self, task: asyncio.Task) -> None:
        # Runs for every outcome, including a task cancelled before its first step
        self.guard.release()
        self._tasks.discard(task)
        if task.cancelled():
            log.warning("Regeneration task cancelled")
            return
        ex = task.exception()
        if ex is not None:
            log.error("Regeneration task crashed", exc_info=ex)

    def _record_failure(self, message: str) -> None:
        self._consecutive_failures += 1
        log.error(f"{message} - still serving v{self.buffer.version} (age {self.buffer.age()}s)")
        if self._consecutive_failures == self._degraded_after:
            log.warning(
                f"Degraded: {self._consecutive_failures} regenerations failed in a row - "
                f"serving stale content until the generator recovers"
            )

    def _record_success(self) -> None:
        if self._consecutive_failures >= self._degraded_after:
            log.info(f"Recovered after {self._consecutive_failures} failed regenerations")
        self._consecutive_failures = 0

    # ── Introspection / shutdown ─────────────────────────────────────────────

    @property
    def consecutive_failures(self) -> int:
        return self._consecutive_failures

    @property
    def degraded(self) -> bool:
        return self._consecutive_failures >= self._degraded_after

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self, timeout: float = SHUTDOWN_GRACE_S) -> None:
        """Wait (bounded) for in-flight regenerations. Called on shutdown."""
        tasks = list(self._tasks)
        if not tasks:
            return
        log.info(f"Waiting up to {timeout:.0f}s for {len(tasks)} in-flight regeneration(s)")
        _, still_running = await asyncio.wait(tasks, timeout=timeout)
        if still_running:
            log.warning(f"{len(still_running)} regeneration(s) still running at shutdown")

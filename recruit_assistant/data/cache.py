"""Snapshot cache with a time-to-live and single-flight rebuilds."""

import enum
import logging
import threading
import time
from collections.abc import Callable
from concurrent.futures import Future
from typing import Optional

from recruit_assistant.data.snapshot import Snapshot
from recruit_assistant.errors import SourceUnavailable

logger = logging.getLogger("recruit_assistant.data.cache")

DEFAULT_TTL_SECONDS = 5 * 60


class CacheState(str, enum.Enum):
    EMPTY = "empty"
    FRESH = "fresh"
    STALE = "stale"
    REBUILDING = "rebuilding"


class SnapshotCache:
    """Holds the one live Snapshot and rebuilds it when it expires.

    Concurrent callers that hit an expired or empty cache share a single
    in-flight build. A snapshot is only published once its build succeeds,
    so a failed rebuild leaves the previous snapshot in place.
    """

    def __init__(
        self,
        builder: Callable[[], Snapshot],
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._builder = builder
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._snapshot: Optional[Snapshot] = None
        self._built_at: Optional[float] = None
        self._inflight: Optional[Future] = None

    def _state_locked(self) -> CacheState:
        if self._snapshot is None:
            return CacheState.EMPTY
        if self._clock() - self._built_at > self.ttl_seconds:
            return CacheState.STALE
        return CacheState.FRESH

    @property
    def state(self) -> CacheState:
        with self._lock:
            if self._inflight is not None:
                return CacheState.REBUILDING
            return self._state_locked()

    @property
    def age_seconds(self) -> Optional[float]:
        with self._lock:
            if self._built_at is None:
                return None
            return self._clock() - self._built_at

    def peek(self) -> Optional[Snapshot]:
        """Current snapshot without triggering a rebuild."""
        with self._lock:
            return self._snapshot

    def get(self) -> Snapshot:
        """Return the live snapshot, rebuilding it first if empty or stale."""
        with self._lock:
            if self._state_locked() is CacheState.FRESH:
                logger.debug("Snapshot cache hit")
                return self._snapshot
            previous = self._snapshot
            future, leader = self._claim_build_locked()

        if leader:
            self._run_build(future)

        try:
            return future.result()
        except SourceUnavailable as e:
            if previous is None:
                raise
            logger.warning("Rebuild failed, serving previous snapshot from %s: %s", previous.last_updated, e)
            return previous

    def refresh(self) -> Snapshot:
        """Rebuild unconditionally. Errors propagate; the old snapshot stays live."""
        with self._lock:
            future, leader = self._claim_build_locked()
        if leader:
            logger.info("Forced snapshot refresh")
            self._run_build(future)
        return future.result()

    def invalidate(self) -> None:
        with self._lock:
            self._snapshot = None
            self._built_at = None
        logger.info("Snapshot cache invalidated")

    def _claim_build_locked(self) -> tuple[Future, bool]:
        if self._inflight is not None:
            return self._inflight, False
        self._inflight = Future()
        return self._inflight, True

    def _run_build(self, future: Future) -> None:
        started = self._clock()
        snapshot = None
        try:
            snapshot = self._builder()
        except Exception as e:
            future.set_exception(e)
        finally:
            with self._lock:
                if snapshot is not None:
                    self._snapshot = snapshot
                    self._built_at = self._clock()
                self._inflight = None
            if not future.done() and snapshot is None:
                # interrupted by a BaseException: release any waiters
                future.cancel()

        if snapshot is not None:
            logger.info("Snapshot rebuilt in %.2fs", self._clock() - started)
            future.set_result(snapshot)

"""Background ticker emitting animation events at about 60 frames per second."""

from __future__ import annotations

import queue
import threading
from enum import Enum

FRAME_INTERVAL = 0.016


class AnimationEvent(Enum):
    """Event produced by the ticker."""

    TICK = "tick"


class AnimationTicker:
    """Emits TICK events from a background thread while running."""

    def __init__(self) -> None:
        self._events: queue.SimpleQueue[AnimationEvent] = queue.SimpleQueue()
        self._running = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._running.is_set()

    def start(self) -> None:
        """Start emitting ticks every ~16 ms."""
        self._running.set()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop emitting ticks and wait for the background thread to finish."""
        self._running.clear()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def try_tick(self) -> AnimationEvent | None:
        """Return a pending event without blocking, or None."""
        try:
            return self._events.get_nowait()
        except queue.Empty:
            return None

    def _run(self) -> None:
        while self._running.is_set():
            self._events.put(AnimationEvent.TICK)
            self._running.wait(0)  # yield before sleeping
            threading.Event().wait(FRAME_INTERVAL)

    def __enter__(self) -> AnimationTicker:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
"""
Background generation of cat records.

``GenerationDriver`` owns one daemon thread that, while running, asks a
factory for a new cat at a fixed interval and hands it to a callback
(normally the store's append). The driver is either idle or running:

    Idle --start--> Running --stop--> Idle
    Running --tick--> Running   (one record per tick)

Starting a running driver does nothing. ``stop()`` waits for a tick
that is already in flight, and no tick fires once it has returned.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .schemas import Cat

logger = logging.getLogger(__name__)

CatFactory = Callable[[], Cat]
GeneratedCallback = Callable[[Cat], None]


class GenerationDriver:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tick_lock = threading.Lock()
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None
        self._generated = 0

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._stop_event is not None and not self._stop_event.is_set()

    @property
    def generated_count(self) -> int:
        return self._generated

    def start(
        self,
        interval_ms: int,
        factory: CatFactory,
        on_generated: GeneratedCallback,
    ) -> bool:
        """Start generating; return ``False`` if already running."""
        if interval_ms <= 0:
            raise ValueError(f"Generation interval must be positive, got {interval_ms}")
        with self._lock:
            if self._stop_event is not None and not self._stop_event.is_set():
                logger.debug("Generation already running; start ignored")
                return False
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._loop,
                args=(stop_event, interval_ms / 1000.0, factory, on_generated),
                daemon=True,
                name="cat-generator",
            )
            self._thread.start()
        logger.info("Cat generation started (interval=%sms)", interval_ms)
        return True

    def stop(self) -> bool:
        """Stop generating; return ``False`` if the driver was idle."""
        with self._lock:
            stop_event, thread = self._stop_event, self._thread
            if stop_event is None or stop_event.is_set():
                return False
            stop_event.set()
        if thread is not None and thread is not threading.current_thread():
            # Wait out a tick that was already running when stop was requested.
            with self._tick_lock:
                pass
            thread.join(timeout=5.0)
            if thread.is_alive():
                logger.warning("Generation thread did not stop cleanly")
        logger.info("Cat generation stopped after %s records", self._generated)
        return True

    def _loop(
        self,
        stop_event: threading.Event,
        interval: float,
        factory: CatFactory,
        on_generated: GeneratedCallback,
    ) -> None:
        while not stop_event.wait(interval):
            with self._tick_lock:
                if stop_event.is_set():
                    break
                try:
                    cat = factory()
                    on_generated(cat)
                except Exception:
                    logger.exception("Cat generation tick failed")
                    continue
                self._generated += 1
                logger.debug("Generated cat %s", cat.name)

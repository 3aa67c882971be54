from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from functools import partial
from typing import Any, Callable, Optional

from .simulation import PhysicsSimulation, SimulationState

logger = logging.getLogger(__name__)


class TimerScheduler:
    """Runs each frame callback on a `threading.Timer`."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        t = threading.Timer(delay, callback)
        t.daemon = True
        t.start()
        return t

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class SimulationRunner:
    """Real-time loop: one `step()` per frame, then the next frame is scheduled.

    `on_update` receives the driver's `get_state()` with `frame_time` set to
    the wall-clock seconds since the previous frame. `stop()` cancels the
    pending frame; a frame that has already started always completes.
    """

    def __init__(self,
                 simulation: PhysicsSimulation,
                 on_update: Optional[Callable[[SimulationState], Any]] = None,
                 interval: float = 1.0 / 60.0,
                 scheduler: Optional[Any] = None):
        self.simulation = simulation
        self.on_update = on_update
        self.interval = interval
        self.scheduler = scheduler if scheduler is not None else TimerScheduler()
        self._handle = None
        self._active = False
        self._last_time = 0.0
        self._generation = 0
        self._lock = threading.RLock()

    @property
    def running(self) -> bool:
        return self._active

    def start(self) -> None:
        with self._lock:
            if self._active:
                return
            self._active = True
            # frames queued by an earlier loop see a stale generation and exit
            self._generation += 1
            self.simulation.is_running = True
            self._last_time = time.perf_counter()
            logger.debug("runner started (interval=%.4fs)", self.interval)
            self._frame(self._generation)

    def stop(self) -> None:
        with self._lock:
            if self._handle is not None:
                self.scheduler.cancel(self._handle)
                self._handle = None
            if self._active:
                logger.debug("runner stopped at t=%g", self.simulation.time)
            self._active = False
            self._generation += 1
            self.simulation.is_running = False

    def toggle(self) -> None:
        if self.simulation.is_running:
            self.stop()
        else:
            self.start()

    def _frame(self, generation: int) -> None:
        with self._lock:
            # a timer that fired before stop() could cancel it
            if generation != self._generation or not self._active:
                return
            self._handle = None
            now = time.perf_counter()
            frame_time = now - self._last_time

            try:
                self.simulation.step()
            except Exception:
                self.stop()
                raise

            if self.on_update is not None:
                state = replace(self.simulation.get_state(), frame_time=frame_time)
                self.on_update(state)

            self._last_time = now
            # on_update may have stopped or restarted the runner
            if self._active and generation == self._generation:
                self._handle = self.scheduler.schedule(self.interval, partial(self._frame, generation))

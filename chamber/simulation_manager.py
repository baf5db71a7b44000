from __future__ import annotations
from typing import Optional, Callable, Dict
import threading
import logging

import numpy as np

from .config import ChamberConfig
from .constants import (
    DEFAULT_H2_COUNT,
    DEFAULT_CL2_COUNT,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_TICK_INTERVAL,
    MAX_TICKS_PER_ADVANCE,
    DEFAULT_METRICS_MAXLEN,
)
from .metrics import CountMetrics
from .simulation import SimulationState, Snapshot, initialize, tick, get_counts, diagnostic_lines

logger = logging.getLogger(__name__)

TICKER_THREAD_NAME = "chamber-ticker"


# -----------------------
# SimulationManager
# -----------------------
class SimulationManager:
    """
    Host-side driver for the chamber.
    Usage:
        sim = SimulationManager(h2_count=6, cl2_count=10, temperature_c=50.0, seed=1)
        sim.run_steps(n_steps=500)

    temperature_c, trap_mode, show_diagnostics and the two counts are plain
    attributes that UI collaborators may change at any time; temperature and
    trap mode are read on every tick, the counts on the next reset().
    """

    def __init__(self,
                 h2_count: int = DEFAULT_H2_COUNT,
                 cl2_count: int = DEFAULT_CL2_COUNT,
                 temperature_c: float = DEFAULT_TEMPERATURE_C,
                 trap_mode: bool = False,
                 config: Optional[ChamberConfig] = None,
                 seed: Optional[int] = None,
                 tick_interval: float = DEFAULT_TICK_INTERVAL,
                 metrics_maxlen: int = DEFAULT_METRICS_MAXLEN):
        self.h2_count = h2_count
        self.cl2_count = cl2_count
        self.temperature_c = float(temperature_c)
        self.trap_mode = bool(trap_mode)
        self.show_diagnostics = False
        self.config = config or ChamberConfig()
        self.seed = int(seed) if seed is not None else None
        self.tick_interval = float(tick_interval)

        # centralized RNG for reproducibility; each reset draws from it
        self.rng = np.random.default_rng(seed=self.seed)

        self.metrics = CountMetrics(max_history=metrics_maxlen)
        self.update_callback: Optional[Callable[[Snapshot], None]] = None
        self.last_snapshot: Optional[Snapshot] = None

        self._lock = threading.RLock()
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None
        self._accumulator = 0.0

        self.state: SimulationState = initialize(self.h2_count, self.cl2_count,
                                                 config=self.config, rng=self.rng)

    # -----------------------
    # Core stepping
    # -----------------------
    @property
    def frame(self) -> int:
        return self.state.frame

    def step(self) -> Optional[Snapshot]:
        """
        Perform a single tick with the current temperature and trap flag,
        record counts and hand the snapshot to the update callback.
        """
        try:
            with self._lock:
                snapshot = tick(self.state, self.temperature_c, self.trap_mode)
                self.metrics.update(snapshot.frame, snapshot.counts)
                self.last_snapshot = snapshot
        except Exception:
            logger.exception("SimulationManager.step failed.")
            return None

        if self.update_callback is not None:
            try:
                self.update_callback(snapshot)
            except Exception:
                logger.exception("update_callback failed.")
        return snapshot

    def run_steps(self, n_steps: int = 500) -> Optional[Snapshot]:
        """
        Run a synchronous loop of ticks. Useful for batch runs or CLI mode.
        """
        snapshot = None
        for _ in range(n_steps):
            snapshot = self.step()
        logger.info(f"Run completed: frame={self.frame} counts={self.counts()}")
        return snapshot

    def advance(self, elapsed: float) -> int:
        """
        Fixed-timestep driving: accumulate `elapsed` seconds of wall time and
        run one tick per tick_interval, at most MAX_TICKS_PER_ADVANCE at once.
        Returns the number of ticks run.
        """
        self._accumulator += max(0.0, float(elapsed))
        ticks = 0
        while self._accumulator >= self.tick_interval and ticks < MAX_TICKS_PER_ADVANCE:
            self._accumulator -= self.tick_interval
            self.step()
            ticks += 1
        if ticks == MAX_TICKS_PER_ADVANCE:
            # drop the backlog instead of spiralling after a stall
            self._accumulator = 0.0
        return ticks

    # -----------------------
    # Re-initialization
    # -----------------------
    def reset(self) -> SimulationState:
        """
        Cancel any scheduled tick, then install a freshly initialized state
        built from the current counts.
        """
        was_running = self.running
        self.stop()
        with self._lock:
            self.state = initialize(self.h2_count, self.cl2_count, config=self.config, rng=self.rng)
            self.metrics.clear()
            self.last_snapshot = None
            self._accumulator = 0.0
        logger.info("Simulation reset.")
        if was_running:
            self.start(self.tick_interval)
        return self.state

    # -----------------------
    # Background threaded run support
    # -----------------------
    def start(self, interval: Optional[float] = None):
        """
        Start a background thread ticking every `interval` seconds. This
        method is safe to call multiple times.
        """
        if self.running:
            logger.debug("Simulation already running; start() ignored.")
            return
        if interval is not None:
            self.tick_interval = float(interval)
        # per-worker stop signal; a later start() never revives this loop
        stop_event = threading.Event()

        def loop():
            while not stop_event.is_set():
                self.step()
                stop_event.wait(self.tick_interval)

        self._stop_event = stop_event
        self._thread = threading.Thread(target=loop, name=TICKER_THREAD_NAME, daemon=True)
        self._thread.start()
        logger.info("Simulation background thread started.")

    def stop(self):
        """Stop a background run and wait for its current tick to finish."""
        if self._stop_event is not None:
            self._stop_event.set()
            self._stop_event = None
        if self._thread is not None:
            if self._thread is not threading.current_thread():
                self._thread.join()
            self._thread = None
            logger.info("Simulation background thread stopped.")

    @property
    def running(self) -> bool:
        return self._stop_event is not None

    # -----------------------
    # UI toggles and summaries
    # -----------------------
    def toggle_diagnostics(self) -> bool:
        self.show_diagnostics = not self.show_diagnostics
        return self.show_diagnostics

    def toggle_trap_mode(self) -> bool:
        self.trap_mode = not self.trap_mode
        logger.debug(f"Trap mode {'on' if self.trap_mode else 'off'}")
        return self.trap_mode

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return get_counts(self.state)

    def diagnostics(self):
        with self._lock:
            return diagnostic_lines(self.state, self.temperature_c, self.trap_mode)

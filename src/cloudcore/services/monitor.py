"""MonitorService — periodic running-time heartbeat for long-lived processes."""

from __future__ import annotations

import datetime as dt
import logging
import os
import sys
import threading
import time
from collections.abc import Callable
from types import TracebackType

from cloudcore.config.models import MonitorConfig

logger = logging.getLogger(__name__)

TickCallback = Callable[[dt.timedelta], None]


def format_running_time(elapsed: dt.timedelta) -> str:
    """Render *elapsed* as ``"D day(s) HH:MM:SS.fff"``."""
    total_ms = int(elapsed.total_seconds() * 1000)
    seconds, millis = divmod(total_ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    return f"{days} day(s) {hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


class MonitorService:
    """Log the process running time every ``frequency_seconds``.

    Each tick logs ``"<app> running time: ..."`` at debug level and calls
    :meth:`background_timer_tick`, which subclasses may override; the default
    forwards to *on_tick*.  The timer runs on a daemon thread and starts
    immediately unless *autostart* is False.
    """

    def __init__(
        self,
        config: MonitorConfig | None = None,
        on_tick: TickCallback | None = None,
        *,
        autostart: bool = True,
    ) -> None:
        self.config = config or MonitorConfig()
        self.app_name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "python"
        self._on_tick = on_tick
        self._started_at = time.monotonic()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        if autostart:
            self.start()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def elapsed(self) -> dt.timedelta:
        return dt.timedelta(seconds=time.monotonic() - self._started_at)

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name=f"{type(self).__name__}-timer", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
        self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self.config.frequency_seconds):
            self.tick()

    def tick(self) -> None:
        """Run one heartbeat; callback failures are logged, never raised."""
        elapsed = self.elapsed
        logger.debug("%s running time: %s", self.app_name, format_running_time(elapsed))
        try:
            self.background_timer_tick(elapsed)
        except Exception:
            logger.exception("Monitor tick callback failed")

    def background_timer_tick(self, elapsed: dt.timedelta) -> None:
        if self._on_tick is not None:
            self._on_tick(elapsed)

    def __enter__(self) -> MonitorService:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

"""Debouncer: collapse a burst of triggers into one delayed callback."""

from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Run *callback* once, *delay* seconds after the last ``trigger()``.

    Each trigger cancels the pending timer and starts a new one, so at most
    one timer is ever pending. A callback that is already running is not
    interrupted; a trigger during it only schedules the next run.
    """

    def __init__(self, delay: float, callback: Callable[[], object]) -> None:
        self._delay = delay
        self._callback = callback
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def trigger(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(self._delay, self._fire)
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _fire(self) -> None:
        with self._lock:
            # A timer replaced after it started running must not fire.
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        try:
            self._callback()
        except Exception:
            logger.exception("Debounced callback failed")

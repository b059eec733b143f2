"""Polling file watcher: reports add/change/unlink events for one path."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

EventCallback = Callable[[str, Path], object]

_Snapshot = Optional[Tuple[int, int]]


def _snapshot(path: Path) -> _Snapshot:
    try:
        st = os.stat(path)
    except OSError:
        return None
    return (st.st_mtime_ns, st.st_size)


class FileWatcher:
    """Poll *path* every *interval* seconds on a daemon thread.

    ``add`` is reported when the file appears, ``change`` when its mtime or
    size changes and ``unlink`` when it disappears.
    """

    def __init__(self, path: Path, callback: EventCallback, interval: float = 0.25) -> None:
        self.path = Path(path).resolve()
        self._callback = callback
        self._interval = interval
        self._last = _snapshot(self.path)
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def poll(self) -> str | None:
        """Check the file once; dispatch and return the event name, if any."""
        current = _snapshot(self.path)
        previous, self._last = self._last, current
        if previous == current:
            return None
        if previous is None:
            event = "add"
        elif current is None:
            event = "unlink"
        else:
            event = "change"
        try:
            self._callback(event, self.path)
        except Exception:
            logger.exception("Watch callback failed for %s", self.path)
        return event

    def _loop(self) -> None:
        while not self._stop.wait(self._interval):
            self.poll()

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="cssvars-watch", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> FileWatcher:
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()

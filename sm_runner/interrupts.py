"""Signal handling while a menu command owns the terminal."""

from __future__ import annotations

import logging
import signal
import threading
from contextlib import AbstractContextManager
from types import FrameType
from typing import Any, Iterable

logger = logging.getLogger(__name__)

DEFAULT_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class ChildSignalGuard(AbstractContextManager["ChildSignalGuard"]):
    """Absorb SIGINT/SIGTERM for the lifetime of one child process.

    Ctrl+C in the terminal reaches the whole foreground process group. The
    child decides what to do with it; the launcher must survive and show the
    menu again. Previous handlers are restored on exit, whatever the outcome
    of the run.
    """

    def __init__(self, signals: Iterable[signal.Signals] = DEFAULT_SIGNALS) -> None:
        self._signals = tuple(signals)
        self._prev_handlers: dict[signal.Signals, Any] = {}
        self.received: list[signal.Signals] = []

    @property
    def interrupted(self) -> bool:
        return bool(self.received)

    @property
    def installed(self) -> bool:
        return bool(self._prev_handlers)

    def __enter__(self) -> "ChildSignalGuard":
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on the main thread; leaving signal handlers untouched")
            return self
        for sig in self._signals:
            self._prev_handlers[sig] = signal.getsignal(sig)
            signal.signal(sig, self._handle_signal)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        """Put back the handlers that were active before the guard."""
        for sig, handler in self._prev_handlers.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
        self._prev_handlers.clear()

    def _handle_signal(self, signum: int, frame: FrameType | None) -> None:
        sig = signal.Signals(signum)
        self.received.append(sig)
        logger.info("Absorbed %s while a command was running", sig.name)

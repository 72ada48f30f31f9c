from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

AfterFn = Callable[[int, Callable[[], None]], object]
AfterCancelFn = Callable[[object], None]
LoggerFn = Callable[..., None]

_LOGGER = logging.getLogger("HoverMenu.Timers")


@dataclass(eq=False)
class TimerHandle:
    """One-shot scheduled callback; cancellable until it fires."""

    label: str
    delay_ms: int
    raw: object | None = None
    cancelled: bool = False
    fired: bool = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class MenuTimers:
    """Owns one-shot menu timers on top of an injected after/after_cancel scheduler."""

    def __init__(
        self,
        *,
        after: AfterFn,
        after_cancel: AfterCancelFn,
        time_source: Callable[[], float] = time.monotonic,
        logger: Optional[LoggerFn] = None,
    ) -> None:
        self._after = after
        self._after_cancel = after_cancel
        self._time = time_source
        self._logger = logger or _LOGGER.debug
        self._pending: list[TimerHandle] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def now(self) -> float:
        return self._time()

    def schedule(self, label: str, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(label=label, delay_ms=max(0, int(delay_ms)))
        if self._disposed:
            handle.cancelled = True
            self._log("Timer %s not scheduled: timers disposed", label)
            return handle

        def _fire() -> None:
            self._run(handle, callback)

        self._pending.append(handle)
        handle.raw = self._after(handle.delay_ms, _fire)
        return handle

    def cancel(self, handle: TimerHandle | None) -> None:
        if handle is None or not handle.pending:
            return
        handle.cancelled = True
        self._forget(handle)
        try:
            self._after_cancel(handle.raw)
        except Exception as exc:
            self._log("Cancel of timer %s failed: %s", handle.label, exc)

    def pending_count(self) -> int:
        return len(self._pending)

    def dispose(self) -> None:
        for handle in list(self._pending):
            self.cancel(handle)
        self._disposed = True

    def _run(self, handle: TimerHandle, callback: Callable[[], None]) -> None:
        if not handle.pending or self._disposed:
            self._log("Ignoring stale timer %s (cancelled=%s disposed=%s)", handle.label, handle.cancelled, self._disposed)
            return
        handle.fired = True
        self._forget(handle)
        callback()

    def _forget(self, handle: TimerHandle) -> None:
        try:
            self._pending.remove(handle)
        except ValueError:
            pass

    def _log(self, message: str, *args: object) -> None:
        try:
            self._logger(message, *args)
        except Exception:
            pass

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from hover_menu.services.menu_timers import TimerHandle


class MenuStateError(RuntimeError):
    """Raised when the disclosure state breaks one of its invariants."""


def _pending(handle: Optional[TimerHandle]) -> bool:
    return handle is not None and handle.pending


@dataclass
class ControllerState:
    """Open/close bookkeeping for the top-level menu regions."""

    open_region: Optional[Hashable] = None
    open_candidate: Optional[Hashable] = None
    open_timer: Optional[TimerHandle] = None
    close_timer: Optional[TimerHandle] = None
    opened_at: Optional[float] = None

    def reset(self) -> None:
        self.open_region = None
        self.open_candidate = None
        self.open_timer = None
        self.close_timer = None
        self.opened_at = None

    def is_idle(self) -> bool:
        return (
            self.open_region is None
            and self.open_candidate is None
            and not _pending(self.open_timer)
            and not _pending(self.close_timer)
            and self.opened_at is None
        )

    def check(self) -> None:
        if (self.opened_at is None) != (self.open_region is None):
            raise MenuStateError(
                f"opened_at={self.opened_at!r} does not match open_region={self.open_region!r}"
            )
        if (self.open_candidate is None) == _pending(self.open_timer):
            raise MenuStateError(
                f"open_candidate={self.open_candidate!r} without matching pending open timer"
            )
        if self.open_candidate is not None and self.open_candidate == self.open_region:
            raise MenuStateError(f"region {self.open_region!r} is both opening and open")
        if _pending(self.close_timer) and self.open_region is None:
            raise MenuStateError("close timer pending while no region is open")

from __future__ import annotations

import logging
from typing import Callable, Hashable, Optional

from hover_menu.controller.state import ControllerState, MenuStateError
from hover_menu.menu_timing import MenuTiming
from hover_menu.region_marker import RegionMarker
from hover_menu.services.menu_timers import MenuTimers

_LOGGER = logging.getLogger("HoverMenu.Controller")


class HoverIntentController:
    """Opens and closes top-level menu regions from hover and click events.

    Hovering must persist for ``open_delay_ms`` before a region opens, leaving an
    open region closes it after ``close_delay_ms`` unless the pointer comes back,
    and a click opens immediately. A click on the open region's trigger only
    closes it once ``close_cooldown_ms`` have passed since it opened, so the
    click that usually follows a hover-open does not collapse the menu again.

    At most one region is open; opening another closes the previous one first.
    """

    def __init__(
        self,
        *,
        timing: MenuTiming,
        timers: MenuTimers,
        marker: RegionMarker,
        check_invariants: bool = False,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        self._timing = timing
        self._timers = timers
        self._marker = marker
        self._check_invariants = check_invariants
        self._logger = logger or _LOGGER.debug
        self._state = ControllerState()
        self._disposed = False

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def timing(self) -> MenuTiming:
        return self._timing

    @property
    def open_region(self) -> Optional[Hashable]:
        return self._state.open_region

    def is_open(self, region: Hashable) -> bool:
        return self._state.open_region is not None and self._state.open_region == region

    def on_enter(self, region: Hashable) -> None:
        if self._ignored("enter", region):
            return
        if self.is_open(region):
            self._abort_close()
        else:
            self._open_with_delay(region)
        self._after_transition()

    def on_leave(self, region: Hashable) -> None:
        if self._ignored("leave", region):
            return
        state = self._state
        if state.open_candidate is not None and state.open_candidate == region:
            self._abort_open()
        if self.is_open(region):
            self._close_with_delay(region)
        self._after_transition()

    def on_trigger_click(self, region: Hashable) -> None:
        if self._ignored("click", region):
            return
        if self.is_open(region):
            elapsed = self._timers.now() - (self._state.opened_at or 0.0)
            if elapsed > self._timing.close_cooldown_seconds:
                self.close(region)
            else:
                self._log("Ignoring click on %r %.3fs after it opened", region, elapsed)
                self._after_transition()
        else:
            self.open(region)

    def open(self, region: Hashable) -> None:
        state = self._state
        if state.open_region is not None and state.open_region != region:
            self._close_region(state.open_region)
        self._abort_open()
        self._abort_close()
        self._marker.mark(region, True)
        state.open_region = region
        state.opened_at = self._timers.now()
        self._after_transition()

    def close(self, region: Hashable) -> None:
        self._close_region(region)
        self._after_transition()

    def dispose(self) -> None:
        """Cancel pending timers and ignore every later event."""
        if self._disposed:
            return
        self._abort_open()
        self._abort_close()
        self._timers.dispose()
        self._state.reset()
        self._disposed = True
        self._log("Hover-intent controller disposed")

    def _open_with_delay(self, region: Hashable) -> None:
        # A newer hover supersedes whatever was still waiting to open.
        self._abort_open()
        self._state.open_candidate = region
        self._state.open_timer = self._timers.schedule(
            "open",
            self._timing.open_delay_ms,
            lambda: self._open_from_hover(region),
        )

    def _open_from_hover(self, region: Hashable) -> None:
        if self._disposed:
            return
        self._log("Opening %r after hover delay", region)
        self.open(region)

    def _close_with_delay(self, region: Hashable) -> None:
        self._abort_close()
        self._state.close_timer = self._timers.schedule(
            "close",
            self._timing.close_delay_ms,
            lambda: self._close_from_leave(region),
        )

    def _close_from_leave(self, region: Hashable) -> None:
        if self._disposed:
            return
        self._log("Closing %r after leave delay", region)
        self.close(region)

    def _close_region(self, region: Hashable) -> None:
        self._marker.mark(region, False)
        if self.is_open(region):
            self._abort_close()
            self._state.open_region = None
            self._state.opened_at = None

    def _abort_open(self) -> None:
        state = self._state
        state.open_candidate = None
        if state.open_timer is not None:
            self._timers.cancel(state.open_timer)
            state.open_timer = None

    def _abort_close(self) -> None:
        state = self._state
        if state.close_timer is not None:
            self._timers.cancel(state.close_timer)
            state.close_timer = None

    def _ignored(self, event: str, region: Hashable) -> bool:
        if self._disposed:
            self._log("Ignoring %s on %r: controller disposed", event, region)
            return True
        return False

    def _after_transition(self) -> None:
        if self._check_invariants:
            self._state.check()
            open_regions = self._marker.open_regions
            if len(open_regions) > 1:
                raise MenuStateError(f"more than one region marked open: {open_regions!r}")

    def _log(self, message: str, *args: object) -> None:
        try:
            self._logger(message, *args)
        except Exception:
            pass

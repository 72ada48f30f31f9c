from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Hashable, Optional

from hover_menu.controller import HoverIntentController, SubmenuToggles
from hover_menu.menu_timing import MenuTimingProfile
from hover_menu.region_marker import RegionMarker
from hover_menu.services import MenuTimers
from hover_menu.services.menu_timers import AfterCancelFn, AfterFn
from hover_menu.settings import MenuSettings

_LOGGER = logging.getLogger("HoverMenu.Controller")


@dataclass
class MenuContext:
    settings: MenuSettings
    timers: MenuTimers
    region_marker: RegionMarker
    leaf_marker: RegionMarker
    controller: HoverIntentController
    toggles: SubmenuToggles

    def dispose(self) -> None:
        self.controller.dispose()


def _quiet(message: str, *args: object) -> None:
    return None


def build_menu_context(
    settings: MenuSettings,
    *,
    after: AfterFn,
    after_cancel: AfterCancelFn,
    apply_fn: Callable[[Hashable, bool], None],
    time_source: Callable[[], float] = time.monotonic,
    logger: Optional[Callable[..., None]] = None,
) -> MenuContext:
    log_fn = logger or _LOGGER.debug
    transition_log = log_fn if settings.log_transitions else _quiet
    MenuTimingProfile(settings.timing, logger=log_fn).log_timing(settings.timing, reason="startup")

    timers = MenuTimers(after=after, after_cancel=after_cancel, time_source=time_source, logger=log_fn)
    region_marker = RegionMarker(apply_fn, transition_log, kind="region")
    leaf_marker = RegionMarker(apply_fn, transition_log, kind="sub-item")
    controller = HoverIntentController(
        timing=settings.timing,
        timers=timers,
        marker=region_marker,
        check_invariants=settings.check_invariants,
        logger=transition_log,
    )
    return MenuContext(
        settings=settings,
        timers=timers,
        region_marker=region_marker,
        leaf_marker=leaf_marker,
        controller=controller,
        toggles=SubmenuToggles(leaf_marker),
    )

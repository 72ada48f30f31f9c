"""PyQt6 adapter for the hover-intent menu controller."""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence

from PyQt6.QtCore import QEvent, QObject, QPoint, Qt, QTimer
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QWidget

from hover_menu.app_context import MenuContext, build_menu_context
from hover_menu.settings import MenuSettings

_LOGGER = logging.getLogger("HoverMenu.Qt")

OPEN_PROPERTY = "open"
SUBMENU_MARGIN = 16


class QtScheduler:
    """after/after_cancel pair backed by single-shot QTimers."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent
        self._live: set[QTimer] = set()

    def after(self, delay_ms: int, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))

        def _timeout() -> None:
            self._release(timer)
            callback()

        timer.timeout.connect(_timeout)
        self._live.add(timer)
        timer.start()
        return timer

    def after_cancel(self, handle: object) -> None:
        if not isinstance(handle, QTimer):
            return
        handle.stop()
        self._release(handle)

    def pending(self) -> int:
        return len(self._live)

    def _release(self, timer: QTimer) -> None:
        if timer in self._live:
            self._live.discard(timer)
            timer.deleteLater()


def set_open_property(widget: object, is_open: bool) -> None:
    """Toggle the ``open`` dynamic property so style sheets can match ``[open="true"]``."""
    if not isinstance(widget, QWidget):
        return
    widget.setProperty(OPEN_PROPERTY, bool(is_open))
    style = widget.style()
    if style is not None:
        style.unpolish(widget)
        style.polish(widget)
    widget.update()


def _is_left_release(event: QEvent) -> bool:
    return isinstance(event, QMouseEvent) and event.button() == Qt.MouseButton.LeftButton


class MenuEventFilter(QObject):
    """Forwards Enter/Leave/click events from menu widgets to the controller."""

    def __init__(self, context: MenuContext, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._context = context
        self._regions: dict[QObject, QObject] = {}
        self._triggers: dict[QObject, QObject] = {}
        self._leaf_triggers: dict[QObject, QObject] = {}

    @property
    def context(self) -> MenuContext:
        return self._context

    def bind_region(self, container: QObject, trigger: Optional[QObject] = None) -> None:
        trigger = trigger if trigger is not None else container
        self._regions[container] = container
        self._triggers[trigger] = container
        container.installEventFilter(self)
        if trigger is not container:
            trigger.installEventFilter(self)

    def bind_leaf(self, container: QObject, trigger: QObject) -> None:
        self._leaf_triggers[trigger] = container
        trigger.installEventFilter(self)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt override
        event_type = event.type()
        controller = self._context.controller
        if event_type == QEvent.Type.Enter and watched in self._regions:
            controller.on_enter(self._regions[watched])
        elif event_type == QEvent.Type.Leave and watched in self._regions:
            controller.on_leave(self._regions[watched])
        elif event_type == QEvent.Type.MouseButtonRelease and _is_left_release(event):
            if watched in self._triggers:
                controller.on_trigger_click(self._triggers[watched])
            elif watched in self._leaf_triggers:
                self._context.toggles.toggle(self._leaf_triggers[watched])
        return False

    def dispose(self) -> None:
        watched = set(self._regions) | set(self._triggers) | set(self._leaf_triggers)
        for obj in watched:
            obj.removeEventFilter(self)
        self._regions.clear()
        self._triggers.clear()
        self._leaf_triggers.clear()
        self._context.toggles.close_all()
        self._context.dispose()


def submenu_max_height(menu_bottom: int, window_height: int, margin: int = SUBMENU_MARGIN) -> int:
    """Height left for a submenu scroll container below the main menu bar."""
    return max(0, int(window_height) - (int(menu_bottom) + int(margin)))


class SubmenuHeightUpdater(QObject):
    """Keeps submenu scroll containers within the window on show and resize."""

    def __init__(
        self,
        window: QWidget,
        main_menu: QWidget,
        containers: Sequence[QWidget],
        *,
        margin: int = SUBMENU_MARGIN,
    ) -> None:
        super().__init__(window)
        self._window = window
        self._main_menu = main_menu
        self._containers = list(containers)
        self._margin = margin
        window.installEventFilter(self)

    def update_heights(self) -> int:
        top = self._main_menu.mapTo(self._window, QPoint(0, 0)).y()
        limit = submenu_max_height(top + self._main_menu.height(), self._window.height(), self._margin)
        for container in self._containers:
            container.setMaximumHeight(limit)
        return limit

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt override
        if watched is self._window and event.type() in (QEvent.Type.Resize, QEvent.Type.Show):
            self.update_heights()
        return False


def install_menu(
    settings: MenuSettings,
    *,
    parent: Optional[QObject] = None,
    time_source: Callable[[], float] = time.monotonic,
    logger: Optional[Callable[..., None]] = None,
) -> MenuEventFilter:
    """Build the controller stack on Qt timers and return the event filter to bind widgets with."""
    scheduler = QtScheduler(parent)
    context = build_menu_context(
        settings,
        after=scheduler.after,
        after_cancel=scheduler.after_cancel,
        apply_fn=set_open_property,
        time_source=time_source,
        logger=logger or _LOGGER.debug,
    )
    return MenuEventFilter(context, parent)

"""Hover-intent disclosure controller for nested navigation menus."""

from .app_context import MenuContext, build_menu_context
from .controller import ControllerState, HoverIntentController, MenuStateError, SubmenuToggles
from .menu_model import MenuItem, MenuModelError, bind_menu_tree, parse_menu
from .menu_timing import MenuTiming, MenuTimingProfile
from .region_marker import RegionMarker
from .services import MenuTimers, TimerHandle
from .settings import MenuSettings, load_menu_settings

__version__ = "0.1.0"

__all__ = [
    "ControllerState",
    "HoverIntentController",
    "MenuContext",
    "MenuItem",
    "MenuModelError",
    "MenuSettings",
    "MenuStateError",
    "MenuTimers",
    "MenuTiming",
    "MenuTimingProfile",
    "RegionMarker",
    "SubmenuToggles",
    "TimerHandle",
    "bind_menu_tree",
    "build_menu_context",
    "load_menu_settings",
    "parse_menu",
]

from .hover_intent import HoverIntentController
from .state import ControllerState, MenuStateError
from .submenu_toggles import SubmenuToggles

__all__ = ["ControllerState", "HoverIntentController", "MenuStateError", "SubmenuToggles"]

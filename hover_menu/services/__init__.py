from .menu_timers import MenuTimers, TimerHandle

__all__ = ["MenuTimers", "TimerHandle"]

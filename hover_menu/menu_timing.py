from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

DEFAULT_OPEN_DELAY_MS = 100
DEFAULT_CLOSE_DELAY_MS = 300
DEFAULT_CLOSE_COOLDOWN_MS = 300


@dataclass(frozen=True)
class MenuTiming:
    """Container for hover-intent timing settings."""

    open_delay_ms: int = DEFAULT_OPEN_DELAY_MS
    close_delay_ms: int = DEFAULT_CLOSE_DELAY_MS
    close_cooldown_ms: int = DEFAULT_CLOSE_COOLDOWN_MS

    @property
    def close_cooldown_seconds(self) -> float:
        return self.close_cooldown_ms / 1000.0


class MenuTimingProfile:
    """Resolves menu timing with optional overrides."""

    def __init__(
        self,
        base: MenuTiming | None = None,
        *,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        self._base = base or MenuTiming()
        self._logger = logger

    @property
    def base(self) -> MenuTiming:
        return self._base

    def resolve(self, overrides: Optional[Mapping[str, object]] = None) -> MenuTiming:
        base = self._base
        if not overrides:
            return base
        return MenuTiming(
            open_delay_ms=self._coerce_int(overrides.get("open_delay_ms"), base.open_delay_ms, minimum=0),
            close_delay_ms=self._coerce_int(overrides.get("close_delay_ms"), base.close_delay_ms, minimum=0),
            close_cooldown_ms=self._coerce_int(
                overrides.get("close_cooldown_ms"), base.close_cooldown_ms, minimum=0
            ),
        )

    def log_timing(self, timing: MenuTiming, reason: Optional[str] = None) -> None:
        reason_suffix = f" ({reason})" if reason else ""
        self._log(
            "Menu timing%s: open_delay_ms=%d close_delay_ms=%d close_cooldown_ms=%d",
            reason_suffix,
            timing.open_delay_ms,
            timing.close_delay_ms,
            timing.close_cooldown_ms,
        )

    def _log(self, message: str, *args: object) -> None:
        logger = self._logger
        if logger is None:
            return
        try:
            logger(message, *args)
        except Exception:
            pass

    @staticmethod
    def _coerce_int(raw: object, fallback: int, *, minimum: int) -> int:
        if raw is None or isinstance(raw, bool):
            return max(minimum, fallback)
        try:
            value = int(raw)  # type: ignore[call-overload]
        except Exception:
            value = fallback
        return max(minimum, value)

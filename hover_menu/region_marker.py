from __future__ import annotations

from typing import Callable, Hashable


class RegionMarker:
    """Applies open/closed marking to menu regions while keeping the UI call injected."""

    def __init__(
        self,
        apply_fn: Callable[[Hashable, bool], None],
        log_fn: Callable[..., None],
        *,
        kind: str = "region",
    ) -> None:
        self._apply = apply_fn
        self._log = log_fn
        self._kind = kind
        self._states: dict[Hashable, bool] = {}

    def mark(self, region: Hashable, is_open: bool) -> bool:
        if self._states.get(region, False) == is_open:
            return False
        self._apply(region, is_open)
        self._states[region] = is_open
        self._log("Menu %s %r marked %s", self._kind, region, "open" if is_open else "closed")
        return True

    def is_open(self, region: Hashable) -> bool:
        return self._states.get(region, False)

    @property
    def open_regions(self) -> tuple[Hashable, ...]:
        return tuple(region for region, is_open in self._states.items() if is_open)

from __future__ import annotations

from typing import Hashable

from hover_menu.region_marker import RegionMarker


class SubmenuToggles:
    """Click toggles for nested sub-menu items; each item is independent."""

    def __init__(self, marker: RegionMarker) -> None:
        self._marker = marker

    def toggle(self, item: Hashable) -> bool:
        is_open = not self._marker.is_open(item)
        self._marker.mark(item, is_open)
        return is_open

    def is_open(self, item: Hashable) -> bool:
        return self._marker.is_open(item)

    def close_all(self) -> None:
        for item in self._marker.open_regions:
            self._marker.mark(item, False)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

REGION_LEVEL = 1
LEAF_LEVELS = (2, 3)


class MenuModelError(ValueError):
    """Raised when a menu tree entry is malformed."""


@dataclass(eq=False)
class MenuItem:
    """One navigation entry as handed over by the page renderer."""

    name: str
    href: Optional[str] = None
    icon: Optional[Mapping[str, Any]] = None
    children: list["MenuItem"] = field(default_factory=list)

    @property
    def has_menu(self) -> bool:
        return bool(self.children)

    @classmethod
    def from_template(cls, data: Mapping[str, Any]) -> "MenuItem":
        if not isinstance(data, Mapping):
            raise MenuModelError(f"menu entry must be a mapping, got {type(data).__name__}")
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise MenuModelError(f"menu entry without a name: {dict(data)!r}")
        children: list[MenuItem] = []
        submenu = data.get("menu")
        if data.get("hasmenu", submenu is not None) and submenu:
            children = parse_menu(submenu)
        href = data.get("href")
        icon = data.get("icon")
        return cls(
            name=name,
            href=str(href) if href else None,
            icon=icon if isinstance(icon, Mapping) else None,
            children=children,
        )


def parse_menu(entries: Iterable[Mapping[str, Any]]) -> list[MenuItem]:
    if isinstance(entries, (str, bytes)) or isinstance(entries, Mapping):
        raise MenuModelError("menu must be a sequence of entries")
    return [MenuItem.from_template(entry) for entry in entries]


def walk(items: Sequence[MenuItem], level: int = REGION_LEVEL) -> Iterator[Tuple[int, MenuItem]]:
    for item in items:
        yield level, item
        if item.children:
            yield from walk(item.children, level + 1)


def bind_menu_tree(
    items: Sequence[MenuItem],
    *,
    resolve_widgets: Callable[[MenuItem], Tuple[object, object]],
    bind_region: Callable[[object, object], None],
    bind_leaf: Callable[[object, object], None],
) -> int:
    """Bind every item that owns a submenu; returns the number of bindings made.

    Top-level items become hover-intent regions, second and third level items
    become independent click toggles. Items without a submenu and anything
    deeper than the third level are left alone.
    """
    bound = 0
    for level, item in walk(items):
        if not item.has_menu:
            continue
        if level == REGION_LEVEL:
            container, trigger = resolve_widgets(item)
            bind_region(container, trigger)
        elif level in LEAF_LEVELS:
            container, trigger = resolve_widgets(item)
            bind_leaf(container, trigger)
        else:
            continue
        bound += 1
    return bound

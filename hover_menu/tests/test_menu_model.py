from __future__ import annotations

import pytest

from hover_menu.menu_model import MenuItem, MenuModelError, bind_menu_tree, parse_menu, walk


def _main_menu():
    return [
        {
            "name": "My courses",
            "hasmenu": True,
            "icon": {"key": "i/graduation-cap", "component": "theme"},
            "menu": [
                {
                    "name": "Summer term",
                    "hasmenu": True,
                    "breaker": ["c2"],
                    "menu": [
                        {
                            "name": "Statistics I",
                            "hasmenu": True,
                            "menu": [
                                {
                                    "name": "Week 1",
                                    "hasmenu": True,
                                    "menu": [{"name": "Slides", "hasmenu": False, "href": "/mod/resource/1"}],
                                }
                            ],
                        },
                    ],
                },
                {"name": "Archive", "hasmenu": False, "href": "/my/courses"},
            ],
        },
        {"name": "Dashboard", "hasmenu": False, "menu": None, "href": "https://lms.example/my/"},
    ]


def test_parse_menu_builds_tree_and_ignores_layout_keys():
    items = parse_menu(_main_menu())

    courses, dashboard = items
    assert courses.has_menu is True
    assert courses.icon == {"key": "i/graduation-cap", "component": "theme"}
    assert [child.name for child in courses.children] == ["Summer term", "Archive"]
    assert courses.children[1].href == "/my/courses"
    assert dashboard.has_menu is False
    assert dashboard.href == "https://lms.example/my/"


def test_hasmenu_false_drops_submenu():
    item = MenuItem.from_template({"name": "Settings", "hasmenu": False, "menu": [{"name": "Hidden"}]})
    assert item.children == []


@pytest.mark.parametrize(
    "entry",
    [{"hasmenu": False}, {"name": "   "}, {"name": 42}, "Dashboard"],
)
def test_malformed_entries_raise(entry):
    with pytest.raises(MenuModelError):
        parse_menu([entry])


def test_parse_menu_rejects_non_sequence():
    with pytest.raises(MenuModelError):
        parse_menu({"name": "Dashboard"})


def test_walk_reports_levels():
    levels = [(level, item.name) for level, item in walk(parse_menu(_main_menu()))]
    assert levels[:4] == [(1, "My courses"), (2, "Summer term"), (3, "Statistics I"), (4, "Week 1")]
    assert (1, "Dashboard") in levels


def test_bind_menu_tree_binds_regions_and_leaf_toggles():
    regions = []
    leaves = []

    bound = bind_menu_tree(
        parse_menu(_main_menu()),
        resolve_widgets=lambda item: (f"{item.name}:container", f"{item.name}:trigger"),
        bind_region=lambda container, trigger: regions.append((container, trigger)),
        bind_leaf=lambda container, trigger: leaves.append((container, trigger)),
    )

    assert bound == 3
    assert regions == [("My courses:container", "My courses:trigger")]
    assert leaves == [
        ("Summer term:container", "Summer term:trigger"),
        ("Statistics I:container", "Statistics I:trigger"),
    ]

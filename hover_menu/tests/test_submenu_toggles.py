from hover_menu.controller import SubmenuToggles
from hover_menu.region_marker import RegionMarker


def _toggles():
    applied = []
    marker = RegionMarker(lambda item, is_open: applied.append((item, is_open)), lambda *_args: None, kind="sub-item")
    return SubmenuToggles(marker), applied


def test_toggle_flips_each_item_independently():
    toggles, applied = _toggles()

    assert toggles.toggle("courses/2024") is True
    assert toggles.toggle("courses/2023") is True
    assert toggles.is_open("courses/2024") is True
    assert toggles.is_open("courses/2023") is True

    assert toggles.toggle("courses/2024") is False
    assert toggles.is_open("courses/2023") is True
    assert applied == [
        ("courses/2024", True),
        ("courses/2023", True),
        ("courses/2024", False),
    ]


def test_close_all_only_touches_open_items():
    toggles, applied = _toggles()
    toggles.toggle("a")
    toggles.toggle("b")
    toggles.toggle("b")
    applied.clear()

    toggles.close_all()

    assert applied == [("a", False)]
    assert toggles.is_open("a") is False

import types

from hover_menu.region_marker import RegionMarker


def test_mark_applies_only_on_transitions_and_logs():
    calls = types.SimpleNamespace(applied=[], logs=[])
    marker = RegionMarker(
        lambda region, is_open: calls.applied.append((region, is_open)),
        lambda msg, *args: calls.logs.append((msg, args)),
    )

    assert marker.mark("A", False) is False
    assert marker.mark("A", True) is True
    assert marker.mark("A", True) is False
    assert marker.mark("A", False) is True

    assert calls.applied == [("A", True), ("A", False)]
    assert len(calls.logs) == 2
    assert calls.logs[0][1] == ("region", "A", "open")


def test_open_regions_reports_current_marks():
    marker = RegionMarker(lambda *_args: None, lambda *_args: None)
    marker.mark("A", True)
    marker.mark("B", True)
    marker.mark("A", False)

    assert marker.open_regions == ("B",)
    assert marker.is_open("A") is False
    assert marker.is_open("unknown") is False

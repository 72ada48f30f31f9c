import pytest

from hover_menu.controller.state import ControllerState, MenuStateError
from hover_menu.services.menu_timers import TimerHandle


def test_fresh_state_is_idle_and_consistent():
    state = ControllerState()
    assert state.is_idle()
    state.check()


def test_open_region_requires_opened_at():
    state = ControllerState(open_region="A")
    with pytest.raises(MenuStateError):
        state.check()

    state = ControllerState(opened_at=1.0)
    with pytest.raises(MenuStateError):
        state.check()


def test_candidate_requires_pending_open_timer():
    with pytest.raises(MenuStateError):
        ControllerState(open_candidate="A").check()

    with pytest.raises(MenuStateError):
        ControllerState(open_timer=TimerHandle(label="open", delay_ms=100)).check()

    fired = TimerHandle(label="open", delay_ms=100, fired=True)
    ControllerState(open_timer=fired).check()
    ControllerState(open_candidate="A", open_timer=TimerHandle(label="open", delay_ms=100)).check()


def test_region_cannot_be_opening_and_open():
    state = ControllerState(
        open_region="A",
        opened_at=1.0,
        open_candidate="A",
        open_timer=TimerHandle(label="open", delay_ms=100),
    )
    with pytest.raises(MenuStateError, match="both opening and open"):
        state.check()


def test_pending_close_requires_open_region():
    state = ControllerState(close_timer=TimerHandle(label="close", delay_ms=300))
    with pytest.raises(MenuStateError):
        state.check()


def test_reset_clears_everything():
    state = ControllerState(
        open_region="A",
        opened_at=1.0,
        close_timer=TimerHandle(label="close", delay_ms=300),
    )
    state.check()
    state.reset()
    assert state.is_idle()
    assert state.close_timer is None

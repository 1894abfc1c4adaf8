import pytest

from sync import clock


def test_reset_builds_new_anchor():
    st = clock.reset("X", 12.5, True, now=100.0)
    assert st.track_id == "X"
    assert st.anchor_wall_time == 100.0
    assert st.anchor_position_seconds == 12.5
    assert st.is_playing is True


def test_estimate_extrapolates_while_playing():
    st = clock.reset("X", 10.0, True, now=100.0)
    assert clock.estimate(st, 100.0) == pytest.approx(10.0)
    assert clock.estimate(st, 103.25) == pytest.approx(13.25)


def test_estimate_is_pure():
    st = clock.reset("X", 10.0, True, now=100.0)
    assert clock.estimate(st, 105.0) == clock.estimate(st, 105.0)


def test_estimate_frozen_when_paused():
    st = clock.reset("X", 42.0, False, now=100.0)
    assert clock.estimate(st, 100.0) == 42.0
    assert clock.estimate(st, 10_000.0) == 42.0


def test_estimate_not_clamped_past_end():
    st = clock.reset("X", 199.0, True, now=0.0)
    assert clock.estimate(st, 5.0) == pytest.approx(204.0)


def test_reset_replaces_state_wholesale():
    first = clock.reset("X", 10.0, True, now=100.0)
    second = clock.reset("X", 14.0, True, now=104.5)
    assert first != second
    assert clock.estimate(second, 105.0) == pytest.approx(14.5)

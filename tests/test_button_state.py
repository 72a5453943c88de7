import pytest

from core.state import Axis, Button, ButtonState

P, R, H, N = ButtonState.PRESSED, ButtonState.RELEASED, ButtonState.HELD_DOWN, ButtonState.NONE


@pytest.mark.parametrize("previous,current,expected", [
    (P, True, H),
    (H, True, H),
    (R, True, P),
    (N, True, P),
    (R, False, N),
    (N, False, N),
    (P, False, R),
    (H, False, R),
])
def test_transition_table(previous, current, expected):
    assert ButtonState.update(previous, current) is expected


def test_steady_states_are_fixed_points():
    assert ButtonState.update(N, False) is N
    assert ButtonState.update(H, True) is H


def test_press_hold_release_sequence():
    state = N
    seen = []
    for raw in (True, True, False, False):
        state = ButtonState.update(state, raw)
        seen.append(state)
    assert seen == [P, H, R, N]


def test_predicates():
    assert [s for s in ButtonState if s.is_down] == [P, H]
    assert [s for s in ButtonState if s.is_edge] == [P, R]


def test_identifier_layout():
    assert sorted(b.value for b in Button) == list(range(10))
    assert sorted(a.value for a in Axis) == list(range(6))
    assert Button.BACK.value == 6 and Button.START.value == 7
    assert Axis.RIGHT_X.value == 1 and Axis.LEFT_Y.value == 4

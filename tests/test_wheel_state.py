import random
from dataclasses import replace

import pytest

from wheel_state import (
    WheelState,
    Winner,
    add_option,
    complete_spin,
    dismiss_winner,
    is_spin_due,
    remove_option,
    shuffle_options,
    start_spin,
)


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        return self.value


@pytest.fixture
def abcd():
    return WheelState(options=("A", "B", "C", "D"))


def test_add_option_strips_and_appends():
    state = add_option(WheelState(), "  Alice ")
    state = add_option(state, "Bob")

    assert state.options == ("Alice", "Bob")


def test_add_option_ignores_blank_text():
    state = WheelState(options=("A",))

    assert add_option(state, "   ") is state
    assert add_option(state, "") is state


def test_duplicates_are_allowed():
    state = add_option(add_option(WheelState(), "X"), "X")

    assert state.options == ("X", "X")


def test_spin_with_fewer_than_two_options_is_ignored():
    for options in [(), ("Solo",)]:
        state = WheelState(options=options)
        after = start_spin(state, random.Random(1), now_ms=0)

        assert after is state
        assert not after.spinning
        assert after.winner is None


def test_full_spin_scenario(abcd):
    # 1803 = 5 turns + 3 degrees, the pointer lands on "D".
    spinning = start_spin(abcd, FixedRandom(3), now_ms=1000)

    assert spinning.spinning
    assert spinning.rotation == 1803
    assert spinning.spin_id == 1
    assert spinning.spin_options == abcd.options
    assert spinning.spin_started_at_ms == 1000

    done = complete_spin(spinning, spinning.spin_id)

    assert not done.spinning
    assert done.winner == Winner(label="D", index=3)
    assert done.rotation == 1803


def test_trigger_while_spinning_is_ignored(abcd):
    spinning = start_spin(abcd, FixedRandom(3), now_ms=0)

    assert start_spin(spinning, FixedRandom(100), now_ms=10) is spinning


def test_rotation_accumulates_across_spins(abcd):
    rng = random.Random(99)
    state = abcd
    for _ in range(5):
        previous = state.rotation
        state = start_spin(state, rng, now_ms=0)
        assert 1800 <= state.rotation - previous < 2160
        state = complete_spin(state, state.spin_id)
        assert 0 <= state.winner.index < 4


def test_stale_completion_is_ignored(abcd):
    spinning = start_spin(abcd, FixedRandom(3), now_ms=0)

    assert complete_spin(spinning, spinning.spin_id - 1) is spinning

    done = complete_spin(spinning, spinning.spin_id)
    assert complete_spin(done, spinning.spin_id) is done


def test_edits_rejected_while_spinning(abcd):
    spinning = start_spin(abcd, FixedRandom(3), now_ms=0)

    assert add_option(spinning, "E") is spinning
    assert remove_option(spinning, 0) is spinning
    assert shuffle_options(spinning, random.Random(1)) is spinning


def test_completion_uses_snapshot_from_spin_start(abcd):
    spinning = start_spin(abcd, FixedRandom(3), now_ms=0)
    # Simulate a list change that slipped past the UI.
    tampered = replace(spinning, options=("A",))

    done = complete_spin(tampered, tampered.spin_id)

    assert done.winner == Winner(label="D", index=3)


def test_new_spin_clears_previous_winner(abcd):
    state = replace(abcd, winner=Winner("B", 1))

    assert start_spin(state, FixedRandom(0), now_ms=0).winner is None


@pytest.mark.parametrize(
    "removed, expected",
    [
        (0, Winner("C", 1)),
        (1, Winner("C", 1)),
        (2, None),
        (3, Winner("C", 2)),
    ],
)
def test_remove_option_reindexes_winner(abcd, removed, expected):
    state = WheelState(options=abcd.options, winner=Winner("C", 2))

    after = remove_option(state, removed)

    assert len(after.options) == 3
    assert after.winner == expected
    if expected is not None:
        assert after.options[expected.index] == "C"


def test_remove_out_of_range_is_noop(abcd):
    assert remove_option(abcd, 10) is abcd
    assert remove_option(abcd, -1) is abcd


def test_shuffle_is_permutation_and_clears_winner():
    state = add_option(add_option(WheelState(), "X"), "Y")
    state = WheelState(options=state.options, winner=Winner("X", 0))

    shuffled = shuffle_options(state, random.Random(5))

    assert sorted(shuffled.options) == ["X", "Y"]
    assert shuffled.winner is None


def test_dismiss_winner():
    state = WheelState(options=("A", "B"), winner=Winner("A", 0))

    assert dismiss_winner(state).winner is None
    assert dismiss_winner(dismiss_winner(state)).winner is None


def test_is_spin_due(abcd):
    assert not is_spin_due(abcd, now_ms=10_000, duration_ms=4000)

    spinning = start_spin(abcd, FixedRandom(3), now_ms=1000)

    assert not is_spin_due(spinning, now_ms=4999, duration_ms=4000)
    assert is_spin_due(spinning, now_ms=5000, duration_ms=4000)


def test_can_spin(abcd):
    assert abcd.can_spin
    assert not WheelState(options=("A",)).can_spin
    assert not start_spin(abcd, FixedRandom(0), now_ms=0).can_spin

"""Tests for the Bell pair correlation record."""

import numpy as np
import pytest

from bloch_qubit.bell import BellState, measure_bell_left, measure_bell_right, new_bell


class TestBellPair:

    def test_new_pair_is_unmeasured(self):
        bell = new_bell()
        assert bell.measured_left is None
        assert bell.measured_right is None
        assert not bell.collapsed

    def test_left_first_fixes_right(self, scripted_rng):
        bell = new_bell()
        rng = scripted_rng(0.8)
        assert measure_bell_left(bell, rng) == (1, 1)
        assert bell == BellState(1, 1)
        assert measure_bell_right(bell, rng) == (1, 1)
        assert rng.calls == 1

    def test_right_first_fixes_left(self, scripted_rng):
        bell = new_bell()
        rng = scripted_rng(0.2)
        assert measure_bell_right(bell, rng) == (0, 0)
        assert measure_bell_left(bell, rng) == (0, 0)
        assert rng.calls == 1

    def test_remeasuring_never_draws(self, scripted_rng):
        bell = new_bell()
        rng = scripted_rng(0.1)
        measure_bell_left(bell, rng)
        for _ in range(5):
            assert measure_bell_left(bell, rng) == (0, 0)
            assert measure_bell_right(bell, rng) == (0, 0)
        assert rng.calls == 1

    def test_set_side_is_returned_with_stored_partner(self, scripted_rng):
        # a record whose right side was never filled in
        bell = BellState(measured_left=1)
        assert measure_bell_left(bell, scripted_rng()) == (1, None)

    def test_unset_partner_is_not_overwritten(self, scripted_rng):
        bell = BellState(measured_right=0)
        rng = scripted_rng(0.9)
        assert measure_bell_left(bell, rng) == (1, 0)
        assert bell.measured_right == 0

    def test_random_sequences_stay_correlated(self, rng):
        for _ in range(500):
            bell = new_bell()
            for side in rng.integers(0, 2, size=4):
                if side == 0:
                    measure_bell_left(bell, rng)
                else:
                    measure_bell_right(bell, rng)
                assert bell.collapsed
                assert bell.measured_left == bell.measured_right

    @pytest.mark.slow
    def test_outcomes_are_balanced(self, rng):
        ones = sum(measure_bell_left(new_bell(), rng)[0] for _ in range(10000))
        assert abs(ones / 10000 - 0.5) < 5 * np.sqrt(0.25 / 10000)

"""
Bell pair |Φ+⟩ = (|00⟩ + |11⟩)/√2, reduced to its measurement statistics.

The joint 4D state is not simulated: the first side measured draws a fair bit and that bit
is also stored for the other side, so both sides always read the same value.
The record is owned by one session; the check-then-set below is not atomic, so callers
must serialize measurements on a shared record.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .qubit import random_bit


@dataclass
class BellState:
    measured_left: Optional[int] = None
    measured_right: Optional[int] = None

    @property
    def collapsed(self) -> bool:
        return self.measured_left is not None and self.measured_right is not None


def new_bell() -> BellState:
    return BellState()

def measure_bell_left(bell: BellState, rng=None) -> Tuple[int, Optional[int]]:
    """Returns (left, right). A side already set is returned as stored, without a new draw."""
    if bell.measured_left is not None:
        return bell.measured_left, bell.measured_right
    left = random_bit(rng)
    bell.measured_left = left
    if bell.measured_right is None:
        bell.measured_right = left
    return left, bell.measured_right

def measure_bell_right(bell: BellState, rng=None) -> Tuple[int, Optional[int]]:
    """Mirror of measure_bell_left, returns (right, left)."""
    if bell.measured_right is not None:
        return bell.measured_right, bell.measured_left
    right = random_bit(rng)
    bell.measured_right = right
    if bell.measured_left is None:
        bell.measured_left = right
    return right, bell.measured_left

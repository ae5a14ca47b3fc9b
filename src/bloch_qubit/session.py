"""
Session state shared by the views and the controls.

A QubitSession holds the current single-qubit state and the current Bell record and turns
user actions (slider moves, gate buttons, measure buttons, mode switch) into calls on the
pure functions of `qubit` and `bell`. Listeners receive values, never the session itself.
"""

####### Imports #######

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from . import config
from .bell import BellState, measure_bell_left, measure_bell_right, new_bell
from .qubit import (
    Qubit,
    apply_gate,
    format_amplitudes,
    from_theta_phi,
    measure,
    probs,
    to_theta_phi,
)

logger = logging.getLogger(__name__)

MODES = ("single", "ent")
RESET = "reset"
UNMEASURED = "unmeasured"
NO_RESULT = "—"

UpdateCallback = Callable[[Qubit], None]
MeasureCallback = Callable[[int, Qubit], None]
EntMeasureCallback = Callable[[str, Optional[int]], None]
ModeCallback = Callable[[str], None]


def ket_label(bit: Optional[int]) -> str:
    if bit is None:
        return UNMEASURED
    return "|0⟩" if bit == 0 else "|1⟩"


@dataclass(frozen=True)
class Readout:
    """Display strings for the control panel."""
    theta: str
    phi: str
    p0: str
    p1: str
    amp_a: str
    amp_b: str
    measurement: str
    left: str
    right: str


####### Session #######

class QubitSession:
    """Single-qubit state plus Bell record, with callback registration."""

    def __init__(self, mode: str = "single", qubit: Optional[Qubit] = None, rng=None,
                 digits: Optional[int] = None):
        if mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {mode!r}.")
        self.mode = mode
        self.qubit = qubit if qubit is not None else from_theta_phi(0, 0)
        self.bell: BellState = new_bell()
        self.last_result: Optional[int] = None
        self.digits = config.DIGITS if digits is None else digits
        self._rng = rng

        self._on_update: List[UpdateCallback] = []
        self._on_measure: List[MeasureCallback] = []
        self._on_ent_measure: List[EntMeasureCallback] = []
        self._on_mode: List[ModeCallback] = []

    def subscribe(
        self,
        on_update: Optional[UpdateCallback] = None,
        on_measure: Optional[MeasureCallback] = None,
        on_ent_measure: Optional[EntMeasureCallback] = None,
        on_mode: Optional[ModeCallback] = None,
    ) -> None:
        """Registers listeners; any of them may be omitted."""
        if on_update is not None:
            self._on_update.append(on_update)
        if on_measure is not None:
            self._on_measure.append(on_measure)
        if on_ent_measure is not None:
            self._on_ent_measure.append(on_ent_measure)
        if on_mode is not None:
            self._on_mode.append(on_mode)

    # --- notifications ---
    def _emit_update(self) -> None:
        for cb in self._on_update:
            cb(self.qubit)

    def _emit_measure(self, result: int) -> None:
        for cb in self._on_measure:
            cb(result, self.qubit)

    def _emit_ent(self, side: str, value: Optional[int]) -> None:
        for cb in self._on_ent_measure:
            cb(side, value)

    ####### Single qubit #######

    def set_angles(self, theta: float, phi: float) -> Qubit:
        self.qubit = from_theta_phi(theta, phi)
        self._emit_update()
        return self.qubit

    def apply_gate(self, name: str) -> Qubit:
        """Applies a named gate, or goes back to |0⟩ for "reset". Clears the last result."""
        if name == RESET:
            self.qubit = from_theta_phi(0, 0)
        else:
            try:
                self.qubit = apply_gate(self.qubit, name)
            except ValueError:
                logger.error("Ignoring unrecognized gate %r", name)
                raise
        logger.debug("gate %s -> a=%s b=%s", name, *format_amplitudes(self.qubit, self.digits))
        self.last_result = None
        self._emit_update()
        return self.qubit

    def measure(self) -> int:
        result, collapsed = measure(self.qubit, self._rng)
        logger.debug("measured %d (p0=%.6f)", result, probs(self.qubit).p0)
        self.qubit = collapsed
        self.last_result = result
        self._emit_update()
        self._emit_measure(result)
        return result

    ####### Entanglement #######

    def set_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {mode!r}.")
        self.mode = mode
        for cb in self._on_mode:
            cb(mode)
        if mode == "ent":
            self.prepare_bell()

    def prepare_bell(self) -> BellState:
        """Allocates a fresh Bell record; both sides go back to unmeasured."""
        self.bell = new_bell()
        logger.debug("prepared new Bell pair")
        self._emit_ent("left", None)
        self._emit_ent("right", None)
        return self.bell

    reset_bell = prepare_bell

    def measure_left(self) -> int:
        left, right = measure_bell_left(self.bell, self._rng)
        logger.debug("Bell left=%s right=%s", left, right)
        self._emit_ent("left", left)
        if right is not None:
            self._emit_ent("right", right)
        return left

    def measure_right(self) -> int:
        right, left = measure_bell_right(self.bell, self._rng)
        logger.debug("Bell right=%s left=%s", right, left)
        self._emit_ent("right", right)
        if left is not None:
            self._emit_ent("left", left)
        return right

    ####### Display #######

    def readout(self) -> Readout:
        d = self.digits
        theta, phi = to_theta_phi(self.qubit)
        p0, p1 = probs(self.qubit)
        amp_a, amp_b = format_amplitudes(self.qubit, d)
        return Readout(
            theta=f"{theta:.{d}f}",
            phi=f"{phi:.{d}f}",
            p0=f"{p0:.{d}f}",
            p1=f"{p1:.{d}f}",
            amp_a=amp_a,
            amp_b=amp_b,
            measurement=NO_RESULT if self.last_result is None else ket_label(self.last_result),
            left=ket_label(self.bell.measured_left),
            right=ket_label(self.bell.measured_right),
        )

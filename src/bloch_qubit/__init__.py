"""
Public API for the bloch_qubit package.

This module re-exports the most useful names from:
- complex_ops.py  (complex arithmetic)
- qubit.py        (single-qubit state, gates, measurement)
- bell.py         (Bell pair correlations)
- session.py      (callback wiring for views and controls)

So examples (and users) can simply:
    from bloch_qubit import from_theta_phi, apply_gate, measure, QubitSession, ...

The matplotlib view (bloch_view) and the qiskit bridge (interop) are imported explicitly.
"""

# ----- complex arithmetic -----
from .complex_ops import (
    Complex,
    c, add, sub, mul, conj, scale, abs2, norm, expi,
    format_complex,
)

# ----- single qubit -----
from .qubit import (
    # states
    Qubit, KET0, KET1,
    normalize, from_theta_phi, probs, format_amplitudes,
    BlochAngles, Probabilities,

    # coordinates
    to_theta_phi, bloch_vector,

    # gates
    Gate, GATES, apply_gate,

    # measurement
    Measurement, measure, sample_counts, random_bit, seed,
)

# ----- entanglement -----
from .bell import BellState, new_bell, measure_bell_left, measure_bell_right

# ----- session -----
from .session import QubitSession, Readout

__all__ = [
    # complex
    "Complex", "c", "add", "sub", "mul", "conj", "scale", "abs2", "norm", "expi",
    "format_complex",

    # qubit
    "Qubit", "KET0", "KET1", "normalize", "from_theta_phi", "probs", "format_amplitudes",
    "BlochAngles", "Probabilities", "to_theta_phi", "bloch_vector",
    "Gate", "GATES", "apply_gate",
    "Measurement", "measure", "sample_counts", "random_bit", "seed",

    # bell
    "BellState", "new_bell", "measure_bell_left", "measure_bell_right",

    # session
    "QubitSession", "Readout",
]

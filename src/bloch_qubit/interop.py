"""Conversions between bloch_qubit values and qiskit.quantum_info objects."""

import numpy as np
from qiskit.quantum_info import Operator, Statevector

from .complex_ops import c
from .qubit import GATES, Qubit, as_gate, normalize


def to_statevector(q: Qubit) -> Statevector:
    return Statevector(np.array([complex(*q.a), complex(*q.b)], dtype=complex))

def from_statevector(sv: Statevector) -> Qubit:
    """1-qubit Statevector (or array-like of length 2) -> normalized Qubit."""
    data = np.asarray(getattr(sv, "data", sv), dtype=complex).ravel()
    if data.shape != (2,):
        raise ValueError(f"Expected a 1-qubit state (2 amplitudes), got {data.shape[0]}.")
    a, b = data
    return normalize(Qubit(c(a.real, a.imag), c(b.real, b.imag)))

def gate_operator(gate) -> Operator:
    """Operator built from the fixed gate table."""
    g = GATES[as_gate(gate)]
    M = np.array([[complex(*g[i][j]) for j in range(2)] for i in range(2)], dtype=complex)
    return Operator(M)

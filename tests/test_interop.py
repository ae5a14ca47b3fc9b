"""Cross-checks against qiskit.quantum_info."""

import math

import numpy as np
import pytest
from qiskit.circuit.library import HGate, IGate, SGate, TGate, XGate, YGate, ZGate
from qiskit.quantum_info import Operator, Statevector

from bloch_qubit.interop import from_statevector, gate_operator, to_statevector
from bloch_qubit.qubit import Gate, apply_gate, from_theta_phi, probs

QISKIT_GATES = {
    Gate.I: IGate(), Gate.X: XGate(), Gate.Y: YGate(), Gate.Z: ZGate(),
    Gate.H: HGate(), Gate.S: SGate(), Gate.T: TGate(),
}


@pytest.mark.parametrize("gate", list(Gate))
def test_gate_table_matches_qiskit(gate):
    assert np.allclose(gate_operator(gate).data, Operator(QISKIT_GATES[gate]).data, atol=1e-12)


@pytest.mark.parametrize("gate", list(Gate))
def test_apply_gate_matches_statevector_evolution(gate):
    q = from_theta_phi(1.3, 0.7)
    expected = to_statevector(q).evolve(Operator(QISKIT_GATES[gate]))
    assert np.allclose(to_statevector(apply_gate(q, gate)).data, expected.data, atol=1e-12)


def test_probabilities_match():
    q = from_theta_phi(2.0, 4.0)
    assert list(to_statevector(q).probabilities()) == pytest.approx(list(probs(q)))


def test_from_statevector_normalizes():
    q = from_statevector(np.array([3, 4j]))
    assert q.a.re == pytest.approx(0.6)
    assert q.b.im == pytest.approx(0.8)


def test_statevector_round_trip():
    q = from_theta_phi(math.pi / 3, 1.0)
    back = from_statevector(to_statevector(q))
    assert np.allclose([complex(*back.a), complex(*back.b)], [complex(*q.a), complex(*q.b)])


def test_wrong_dimension_rejected():
    with pytest.raises(ValueError):
        from_statevector(Statevector.from_label("00"))


def test_unknown_gate_rejected():
    with pytest.raises(ValueError):
        gate_operator("CX")

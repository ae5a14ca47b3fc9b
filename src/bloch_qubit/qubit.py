####### Imports #######

import math
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple, Union

import numpy as np

from . import config
from .complex_ops import Complex, abs2, add, c, conj, expi, format_complex, mul, scale


####### Qubit state #######

class Qubit(NamedTuple):
    """|ψ⟩ = a|0⟩ + b|1⟩, with |a|² + |b|² = 1."""
    a: Complex
    b: Complex


class BlochAngles(NamedTuple):
    theta: float
    phi: float


class Probabilities(NamedTuple):
    p0: float
    p1: float


class Measurement(NamedTuple):
    result: int
    collapsed: Qubit


KET0 = Qubit(c(1, 0), c(0, 0))
KET1 = Qubit(c(0, 0), c(1, 0))

def normalize(q: Qubit) -> Qubit:
    """Divides both amplitudes by the state norm; a zero vector gives |0⟩."""
    n = math.sqrt(abs2(q.a) + abs2(q.b))
    if n == 0:
        return KET0
    return Qubit(scale(q.a, 1 / n), scale(q.b, 1 / n))

def from_theta_phi(theta: float, phi: float) -> Qubit:
    """
    |ψ⟩ = cos(θ/2)|0⟩ + e^{iφ} sin(θ/2)|1⟩.
    Angles outside [0, π] x [0, 2π) are accepted and wrap through the trigonometry.
    """
    a = c(math.cos(theta / 2), 0)
    b = mul(expi(phi), c(math.sin(theta / 2), 0))
    return normalize(Qubit(a, b))

def probs(q: Qubit) -> Probabilities:
    return Probabilities(abs2(q.a), abs2(q.b))

def format_amplitudes(q: Qubit, digits: Optional[int] = None) -> Tuple[str, str]:
    return format_complex(q.a, digits), format_complex(q.b, digits)


####### Bloch coordinates #######

def to_theta_phi(q: Qubit) -> BlochAngles:
    """
    Bloch angles of a state: x = 2 Re(a* b), y = 2 Im(a* b), z = |a|² - |b|².
    θ = acos(z) in [0, π] (z clamped to [-1, 1]), φ = atan2(y, x) shifted into [0, 2π).
    φ carries no information at the poles.
    """
    a_star_b = mul(conj(q.a), q.b)
    x = 2 * a_star_b.re
    y = 2 * a_star_b.im
    z = abs2(q.a) - abs2(q.b)
    theta = math.acos(max(-1.0, min(1.0, z)))
    phi = math.atan2(y, x)
    return BlochAngles(theta, (phi + 2 * math.pi) % (2 * math.pi))

def bloch_vector(theta: float, phi: float) -> Tuple[float, float, float]:
    """(x, y, z) = (sinθ cosφ, sinθ sinφ, cosθ), z pointing to |0⟩."""
    return (math.sin(theta) * math.cos(phi),
            math.sin(theta) * math.sin(phi),
            math.cos(theta))


####### Gates definition #######

Matrix2 = Tuple[Tuple[Complex, Complex], Tuple[Complex, Complex]]

class Gate(str, Enum):
    I = "I"
    X = "X"
    Y = "Y"
    Z = "Z"
    H = "H"
    S = "S"
    T = "T"

_r = 1 / math.sqrt(2)

GATES: Dict[Gate, Matrix2] = {
    Gate.I: ((c(1, 0), c(0, 0)), (c(0, 0), c(1, 0))),
    Gate.X: ((c(0, 0), c(1, 0)), (c(1, 0), c(0, 0))),
    Gate.Y: ((c(0, 0), c(0, -1)), (c(0, 1), c(0, 0))),
    Gate.Z: ((c(1, 0), c(0, 0)), (c(0, 0), c(-1, 0))),
    Gate.H: ((c(_r, 0), c(_r, 0)), (c(_r, 0), c(-_r, 0))),
    Gate.S: ((c(1, 0), c(0, 0)), (c(0, 0), c(0, 1))),
    Gate.T: ((c(1, 0), c(0, 0)), (c(0, 0), expi(math.pi / 4))),
}

def as_gate(gate: Union[Gate, str]) -> Gate:
    """Gate member for a Gate or its name; unknown names raise ValueError."""
    try:
        return Gate(gate)
    except ValueError:
        raise ValueError(f"Unrecognized gate {gate!r}; expected one of {[g.value for g in Gate]}.") from None


####### Gates application #######

def gate_mul(g: Matrix2, q: Qubit) -> Qubit:
    a = add(mul(g[0][0], q.a), mul(g[0][1], q.b))
    b = add(mul(g[1][0], q.a), mul(g[1][1], q.b))
    return normalize(Qubit(a, b))

def apply_gate(q: Qubit, gate: Union[Gate, str]) -> Qubit:
    """Applies one of the fixed gates and returns the new, normalized state."""
    return gate_mul(GATES[as_gate(gate)], q)


####### Measurement #######

_rng = np.random.default_rng(config.SEED)

def seed(value: Optional[int] = None) -> None:
    """Reseeds the default random generator used when no rng is passed."""
    global _rng
    _rng = np.random.default_rng(value)

def random_bit(rng=None) -> int:
    """Fair coin: one uniform draw, 0 below one half."""
    rng = _rng if rng is None else rng
    return 0 if rng.random() < 0.5 else 1

def measure(q: Qubit, rng=None) -> Measurement:
    """
    Projective measurement in the computational basis.

    Draws a single uniform sample r in [0, 1) from `rng` (anything with a `random()` method,
    numpy Generator by default): r < |a|² gives outcome 0 and |0⟩, otherwise outcome 1 and |1⟩.
    The input state is left untouched; callers replace it with `collapsed`.
    """
    rng = _rng if rng is None else rng
    p0 = abs2(q.a)
    r = rng.random()
    if r < p0:
        return Measurement(0, KET0)
    return Measurement(1, KET1)

def sample_counts(q: Qubit, shots: int, rng=None) -> Tuple[int, int]:
    """Outcome counts (n0, n1) of `shots` independent measurements of the same state."""
    if shots < 0:
        raise ValueError("shots must be ≥ 0.")
    n0 = 0
    for _ in range(int(shots)):
        if measure(q, rng).result == 0:
            n0 += 1
    return n0, int(shots) - n0

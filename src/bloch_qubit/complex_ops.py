####### Imports #######

import math
from typing import NamedTuple, Optional

from . import config


####### Complex numbers #######

class Complex(NamedTuple):
    """Immutable complex value (re, im), double precision."""
    re: float
    im: float


def c(re: float = 0.0, im: float = 0.0) -> Complex: return Complex(float(re), float(im))
def add(a: Complex, b: Complex) -> Complex: return Complex(a.re + b.re, a.im + b.im)
def sub(a: Complex, b: Complex) -> Complex: return Complex(a.re - b.re, a.im - b.im)
def conj(a: Complex) -> Complex: return Complex(a.re, -a.im)
def scale(a: Complex, s: float) -> Complex: return Complex(a.re * s, a.im * s)
def abs2(a: Complex) -> float: return a.re * a.re + a.im * a.im
def norm(a: Complex) -> float: return math.hypot(a.re, a.im)

def mul(a: Complex, b: Complex) -> Complex:
    """(ac - bd) + (ad + bc)i"""
    return Complex(a.re * b.re - a.im * b.im, a.re * b.im + a.im * b.re)

def expi(phi: float) -> Complex:
    """Unit phase e^{iφ} = cos φ + i sin φ."""
    return Complex(math.cos(phi), math.sin(phi))


####### Formatting #######

def format_complex(z: Complex, digits: Optional[int] = None) -> str:
    """
    Fixed-precision display string, e.g. "0.707 +0.000i" or "0.000 -1.000i".
    The '+' is written only for non-negative imaginary parts, the '-' comes from the number itself.
    """
    if digits is None:
        digits = config.DIGITS
    # adding 0.0 turns -0.0 into 0.0 so it prints without a sign
    re, im = z.re + 0.0, z.im + 0.0
    sign = "+" if im >= 0 else ""
    return f"{re:.{digits}f} {sign}{im:.{digits}f}i"

"""Tests for the complex arithmetic primitives."""

import math

import pytest

from bloch_qubit.complex_ops import (
    Complex, abs2, add, c, conj, expi, format_complex, mul, norm, scale, sub,
)


class TestArithmetic:

    def test_add_sub(self):
        assert add(c(1, 2), c(3, -4)) == Complex(4, -2)
        assert sub(c(1, 2), c(3, -4)) == Complex(-2, 6)

    def test_mul_matches_python_complex(self):
        for (a, b) in [((1, 2), (3, -4)), ((0.5, -1.5), (-2, 0.25)), ((0, 1), (0, 1))]:
            z = mul(c(*a), c(*b))
            ref = complex(*a) * complex(*b)
            assert z.re == pytest.approx(ref.real)
            assert z.im == pytest.approx(ref.imag)

    def test_i_squared_is_minus_one(self):
        assert mul(c(0, 1), c(0, 1)) == Complex(-1, 0)

    def test_conj_scale(self):
        assert conj(c(1, 2)) == Complex(1, -2)
        assert scale(c(1, -2), 0.5) == Complex(0.5, -1)

    def test_magnitudes(self):
        assert abs2(c(3, 4)) == 25
        assert norm(c(3, 4)) == 5

    def test_expi_is_unit(self):
        for phi in (0.0, 0.3, math.pi / 4, math.pi, 5.0):
            z = expi(phi)
            assert z.re == pytest.approx(math.cos(phi))
            assert z.im == pytest.approx(math.sin(phi))
            assert abs2(z) == pytest.approx(1.0)

    def test_values_are_immutable(self):
        z = c(1, 2)
        with pytest.raises(AttributeError):
            z.re = 5


class TestFormat:

    def test_positive_imaginary_has_plus(self):
        assert format_complex(c(0.70710678, 0)) == "0.707 +0.000i"

    def test_negative_imaginary_keeps_minus(self):
        assert format_complex(c(0, -1)) == "0.000 -1.000i"
        assert format_complex(c(-0.5, -0.25)) == "-0.500 -0.250i"

    def test_negative_zero_prints_as_zero(self):
        assert format_complex(c(-0.0, -0.0)) == "0.000 +0.000i"

    def test_digits(self):
        assert format_complex(c(1 / 3, 2 / 3), digits=5) == "0.33333 +0.66667i"
        assert format_complex(c(1 / 3, 2 / 3), digits=0) == "0 +1i"

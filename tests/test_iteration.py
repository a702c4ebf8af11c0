# -*- coding: utf-8 -*-
"""
Tests for bounded fixed-point iteration and the ch. 5 helpers.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import math

# Third-party
import pytest

# AstroInterp internal
from astrointerp import ConvergenceError, ErrorKind, ValidationError
from astrointerp.iteration import (
    MAX_ITERATIONS,
    RELATIVE_TOLERANCE,
    DEFAULT_ITERATOR,
    FixedPointIterator,
    binary_root,
    decimal_places,
    full_precision,
    iterate,
)


def _counting(fn):
    """Wrap ``fn`` and count calls in ``wrapper.calls``."""
    def wrapper(x):
        wrapper.calls += 1
        return fn(x)
    wrapper.calls = 0
    return wrapper


# ═══════════════════════════════════════════════════════════════════════
# FixedPointIterator
# ═══════════════════════════════════════════════════════════════════════


class TestIteratorConfiguration:
    """Test defaults and constructor validation."""

    def test_defaults(self):
        it = FixedPointIterator()
        assert it.max_iterations == MAX_ITERATIONS == 50
        assert it.tolerance == RELATIVE_TOLERANCE == 1e-15

    def test_default_instance(self):
        assert DEFAULT_ITERATOR.max_iterations == MAX_ITERATIONS

    def test_max_iterations_too_small(self):
        with pytest.raises(ValidationError, match="max_iterations"):
            FixedPointIterator(max_iterations=0)

    @pytest.mark.parametrize("tol", [0.0, -1e-9, math.inf, math.nan])
    def test_bad_tolerance(self, tol):
        with pytest.raises(ValidationError, match="tolerance"):
            FixedPointIterator(tolerance=tol)


class TestIteratorConvergence:
    """Test successful convergence."""

    def test_square_root(self):
        value, ok = iterate(1.0, lambda n: (n + 2.0 / n) / 2)
        assert ok
        assert value == pytest.approx(math.sqrt(2.0), rel=1e-15)

    def test_fixed_point_at_zero(self):
        value, ok = iterate(0.0, lambda n: n / 2)
        assert ok
        assert value == 0.0

    def test_looser_tolerance_stops_earlier(self):
        improve_tight = _counting(lambda n: (n + 2.0 / n) / 2)
        improve_loose = _counting(lambda n: (n + 2.0 / n) / 2)
        FixedPointIterator().iterate(1.0, improve_tight)
        FixedPointIterator(tolerance=1e-3).iterate(1.0, improve_loose)
        assert improve_loose.calls < improve_tight.calls


class TestIteratorFailure:
    """Failure is reported through the return value, never raised."""

    def test_nan_stops_immediately(self):
        improve = _counting(lambda n: math.nan)
        value, ok = iterate(0.5, improve)
        assert not ok
        assert improve.calls == 1
        assert value == 0.5

    def test_infinity_stops_immediately(self):
        improve = _counting(lambda n: math.inf)
        _, ok = iterate(0.5, improve)
        assert not ok
        assert improve.calls == 1

    def test_overflow_stops(self):
        improve = _counting(lambda n: 10.0 ** (n + 400.0))
        value, ok = iterate(0.5, improve)
        assert not ok
        assert improve.calls == 1
        assert value == 0.5

    def test_diverging_power_stops(self):
        # Example 5.c; the fifth power overflows a float within a few steps
        value, ok = iterate(0.0, lambda x: (8 - x ** 5) / 3)
        assert not ok
        assert math.isfinite(value)

    def test_budget_exhausted(self):
        improve = _counting(lambda n: n + 1.0)
        _, ok = iterate(1.0, improve)
        assert not ok
        assert improve.calls == MAX_ITERATIONS

    def test_injected_budget(self):
        improve = _counting(lambda n: n + 1.0)
        _, ok = FixedPointIterator(max_iterations=3).iterate(1.0, improve)
        assert not ok
        assert improve.calls == 3


# ═══════════════════════════════════════════════════════════════════════
# Chapter 5 helpers
# ═══════════════════════════════════════════════════════════════════════


class TestDecimalPlaces:

    def test_square_root(self):
        # Example 5.a, p. 48
        def better(n):
            return (n + 159 / n) / 2
        n = decimal_places(better, 12.0, 8, 20)
        assert round(n, 8) == 12.60952021

    def test_limit_reached(self):
        with pytest.raises(ConvergenceError) as info:
            decimal_places(lambda n: n + 1, 0.0, 8, 5)
        assert info.value.kind is ErrorKind.NO_CONVERGENCE

    def test_overflow(self):
        with pytest.raises(ConvergenceError, match="diverged") as info:
            decimal_places(lambda n: 10.0 ** (n + 400.0), 0.0, 8, 5)
        assert info.value.kind is ErrorKind.NO_CONVERGENCE


class TestFullPrecision:

    def test_converging(self):
        # Example 5.b, p. 48
        x = full_precision(lambda x: (8 - x ** 5) / 17, 0.0, 20)
        assert x == pytest.approx(0.4692498784547387, rel=1e-14)

    def test_diverging(self):
        # Example 5.c, p. 49
        with pytest.raises(ConvergenceError) as info:
            full_precision(lambda x: (8 - x ** 5) / 3, 0.0, 20)
        assert info.value.kind is ErrorKind.NO_CONVERGENCE

    def test_limit_reached(self):
        with pytest.raises(ConvergenceError, match="Maximum iterations"):
            full_precision(lambda x: x + 1, 0.0, 5)

    def test_converging_slowly(self):
        # Example 5.d, p. 49
        x = full_precision(lambda x: (8 - 3 * x) ** 0.2, 0.0, 30)
        assert x == pytest.approx(1.321785627117658, rel=1e-14)


class TestBinaryRoot:

    def test_quintic(self):
        # p. 53
        x = binary_root(lambda x: x ** 5 + 17 * x - 8, 0.0, 1.0)
        assert x == pytest.approx(0.46924987845473876, rel=1e-14)

    def test_exact_zero_at_midpoint(self):
        assert binary_root(lambda x: x - 1.0, 0.0, 2.0) == 1.0

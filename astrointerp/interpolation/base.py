# -*- coding: utf-8 -*-
"""
Interpolation Base Classes - ABCs for tabular interpolation.

Defines the ``Interpolator`` ABC (callable interface) and
``EquallySpacedWindow`` (template for fixed-arity windows over equally
spaced samples that share sample validation, the x <-> n coordinate
mapping, strict range checks and zero-strategy selection), plus the
``horner`` polynomial evaluator used throughout the package.

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
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple, Type, Union

# Third-party
import numpy as np

# AstroInterp internal
from astrointerp.exceptions import (
    ConvergenceError,
    OutOfRangeError,
    OutsideTableError,
    ValidationError,
)
from astrointerp.iteration import DEFAULT_ITERATOR, FixedPointIterator
from astrointerp.vocabulary import ZeroStrategy

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]


def horner(x: ArrayLike, coeffs: Sequence[float]) -> ArrayLike:
    """Evaluate a polynomial by Horner's method.

    Parameters
    ----------
    x : float or np.ndarray
        Evaluation argument(s).
    coeffs : sequence of float
        Coefficients, constant term first. Must be non-empty.

    Returns
    -------
    float or np.ndarray
        Polynomial value(s), same shape as ``x``.
    """
    if len(coeffs) == 0:
        raise ValidationError("coeffs must not be empty")
    i = len(coeffs) - 1
    y = coeffs[i]
    while i > 0:
        i -= 1
        y = y * x + coeffs[i]
    return y


def validate_samples(
    y: Sequence[float],
    count: Optional[int] = None,
) -> Tuple[float, ...]:
    """Check a y-table is one-dimensional and numeric, and freeze it.

    Raises
    ------
    ValidationError
        If ``y`` is not one-dimensional, or ``count`` is given and the
        length of ``y`` differs from it.
    """
    try:
        arr = np.asarray(y, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Argument y must be numeric: {exc}") from exc
    if arr.ndim != 1 or (count is not None and arr.shape[0] != count):
        expected = "one-dimensional" if count is None else f"length {count}"
        raise ValidationError(
            f"Argument y must be {expected}, got shape {arr.shape}"
        )
    return tuple(float(v) for v in arr)


def table_spacing(x_first: float, x_last: float, length: int) -> float:
    """Uniform spacing of an equally spaced table of ``length`` samples.

    Raises
    ------
    ValidationError
        If the table has fewer than 2 samples or the spacing is zero.
    """
    if length < 2:
        raise ValidationError(
            f"Table must have at least 2 samples, got {length}"
        )
    interval = (x_last - x_first) / (length - 1)
    if interval == 0:
        raise ValidationError(
            "Argument x_last cannot equal x_first"
        )
    return interval


class Interpolator(ABC):
    """Abstract base class for interpolation over a fixed table.

    All interpolators are callable with signature ``(x) -> y``.
    """

    @abstractmethod
    def value_at(self, x: ArrayLike) -> ArrayLike:
        """Interpolate the table at ``x``."""
        ...

    def __call__(self, x: ArrayLike) -> ArrayLike:
        return self.value_at(x)


class EquallySpacedWindow(Interpolator):
    """Base class for fixed-arity windows over equally spaced samples.

    Handles the common boilerplate: sample-count and span validation,
    the mapping between the table argument ``x`` and the interpolating
    factor ``n`` (1.0 equals one tabular interval), strict range
    checks and zero-strategy coercion. Subclasses set ``arity`` and
    ``n_scale`` and implement :meth:`value_at_n`, :meth:`extremum` and
    :meth:`zero`.

    Parameters
    ----------
    x_first : float
        x value of the first sample.
    x_last : float
        x value of the last sample. Must differ from ``x_first``.
    y : sequence of float
        All y values of the window, exactly ``arity`` of them.
    iterator : FixedPointIterator, optional
        Iteration engine for the zero and extremum finders. Defaults
        to 50 iterations at a relative tolerance of 1e-15.

    Raises
    ------
    ValidationError
        If ``y`` has the wrong length or ``x_last == x_first``.
    """

    arity: int = 0
    """Number of samples in the window."""

    n_scale: float = 1.0
    """Number of interpolating-factor units spanned by half the window."""

    strict_limit: float = 1.0
    """Largest ``|n|`` accepted by the strict queries."""

    def __init__(
        self,
        x_first: float,
        x_last: float,
        y: Sequence[float],
        iterator: Optional[FixedPointIterator] = None,
    ) -> None:
        self._y = validate_samples(y, self.arity)
        if x_last == x_first:
            raise ValidationError(
                "Argument x_last cannot equal x_first"
            )
        self._x_first = float(x_first)
        self._x_last = float(x_last)
        self._x_sum = self._x_last + self._x_first
        self._x_diff = self._x_last - self._x_first
        self._iterator = iterator if iterator is not None else DEFAULT_ITERATOR
        logger.debug(
            "%s over [%r, %r]", type(self).__qualname__,
            self._x_first, self._x_last,
        )

    # ── Table state ─────────────────────────────────────────────────────

    @property
    def x_first(self) -> float:
        return self._x_first

    @property
    def x_last(self) -> float:
        return self._x_last

    @property
    def y(self) -> Tuple[float, ...]:
        return self._y

    @property
    def span(self) -> float:
        """``x_last - x_first``."""
        return self._x_diff

    # ── Coordinate mapping ──────────────────────────────────────────────

    def n_for_x(self, x: ArrayLike) -> ArrayLike:
        """Interpolating factor for table argument ``x``."""
        s = 2.0 * self.n_scale
        return (s * x - self.n_scale * self._x_sum) / self._x_diff

    def x_for_n(self, n: ArrayLike) -> ArrayLike:
        """Table argument for interpolating factor ``n``."""
        return 0.5 * self._x_sum + self._x_diff * n / (2.0 * self.n_scale)

    # ── Interpolation ───────────────────────────────────────────────────

    @abstractmethod
    def value_at_n(self, n: ArrayLike) -> ArrayLike:
        """Interpolate for interpolating factor ``n``.

        No domain restriction: extrapolation beyond the table is
        permitted but increasingly inaccurate.
        """
        ...

    def value_at_n_strict(self, n: ArrayLike) -> ArrayLike:
        """Interpolate for ``n``, restricted to ``|n| <= strict_limit``.

        Raises
        ------
        OutOfRangeError
            If any ``n`` falls outside the strict range.
        """
        limit = self.strict_limit
        if np.any(np.abs(np.asarray(n)) > limit):
            raise OutOfRangeError(
                f"Interpolating factor n must be in range "
                f"{-limit:g} to {limit:g}, got {n!r}"
            )
        return self.value_at_n(n)

    def value_at_x(self, x: ArrayLike) -> ArrayLike:
        """Interpolate for table argument ``x``."""
        return self.value_at_n(self.n_for_x(x))

    def value_at_x_strict(self, x: ArrayLike) -> ArrayLike:
        """Interpolate for ``x``, restricted by :meth:`value_at_n_strict`."""
        return self.value_at_n_strict(self.n_for_x(x))

    def value_at(self, x: ArrayLike) -> ArrayLike:
        return self.value_at_x(x)

    # ── Extremum and zero ───────────────────────────────────────────────

    @abstractmethod
    def extremum(self) -> Tuple[float, float]:
        """Return ``(x, y)`` at the extremum of the fitted curve."""
        ...

    @abstractmethod
    def zero(self, strategy: Union[ZeroStrategy, bool, str]) -> float:
        """Return an ``x`` at which the fitted curve is zero."""
        ...

    def _iterate(self, improve) -> float:
        """Run the iterator from ``n = 0``; raise if it fails."""
        n, ok = self._iterator.iterate(0.0, improve)
        if not ok:
            raise ConvergenceError("Failure to converge")
        return n

    @staticmethod
    def _check_inside(
        n: float,
        limit: float,
        error: Type[OutsideTableError],
        what: str,
    ) -> None:
        if n < -limit or n > limit:
            raise error(
                f"{what} falls outside of table (n = {n!r})"
            )

    @staticmethod
    def _coerce_strategy(
        strategy: Union[ZeroStrategy, bool, str],
    ) -> ZeroStrategy:
        if isinstance(strategy, ZeroStrategy):
            return strategy
        if isinstance(strategy, (bool, np.bool_)):
            return ZeroStrategy.from_strong(bool(strategy))
        if isinstance(strategy, str):
            try:
                return ZeroStrategy(strategy.lower())
            except ValueError:
                pass
        raise ValidationError(
            f"strategy must be one of "
            f"{tuple(s.value for s in ZeroStrategy)} or a bool, "
            f"got {strategy!r}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x_first={self._x_first!r}, "
            f"x_last={self._x_last!r}, y={list(self._y)!r})"
        )

# -*- coding: utf-8 -*-
"""
AstroInterp Exception Hierarchy - Error kinds raised by interpolation.

Every error subclasses both ``AstroInterpError`` and the appropriate
built-in exception, so callers may catch either. Each class carries a
``kind`` attribute (an ``ErrorKind``) identifying the failure, letting a
caller choose a fallback (e.g. switch zero-finding strategy) without
inspecting messages.

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

# AstroInterp internal
from astrointerp.vocabulary import ErrorKind


class AstroInterpError(Exception):
    """Base exception for all AstroInterp errors."""

    kind: ErrorKind = None


class ValidationError(AstroInterpError, ValueError):
    """Invalid input table.

    Raised for a wrong sample count on a fixed-arity window, a zero
    table span, or an unknown zero-finding strategy.
    """

    kind = ErrorKind.INVALID_INPUT


class OutOfRangeError(AstroInterpError, ValueError):
    """Strict query whose interpolating factor falls outside the window."""

    kind = ErrorKind.OUT_OF_RANGE


class NoExtremumError(AstroInterpError, ArithmeticError):
    """The fitted curve has no curvature, hence no extremum."""

    kind = ErrorKind.NO_EXTREMUM


class OutsideTableError(AstroInterpError, ValueError):
    """A result exists for the fitted curve but not within the table."""


class ExtremumOutsideTableError(OutsideTableError):
    """Extremum of the fitted curve lies outside the table."""

    kind = ErrorKind.EXTREMUM_OUTSIDE_TABLE


class ZeroOutsideTableError(OutsideTableError):
    """Zero of the fitted curve lies outside the table."""

    kind = ErrorKind.ZERO_OUTSIDE_TABLE


class ConvergenceError(AstroInterpError, RuntimeError):
    """Iteration exhausted its budget or produced a non-finite value."""

    kind = ErrorKind.NO_CONVERGENCE

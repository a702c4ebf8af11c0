# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for AstroInterp.

Controlled vocabularies shared across the package: the kinds of
failure an interpolation query can report, and the strategies
available to the iterative zero finders.

Author
------
Steven Siebert

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

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure reported by interpolation queries.

    Each ``AstroInterpError`` subclass is tagged with exactly one kind.
    """

    INVALID_INPUT = "invalid_input"
    OUT_OF_RANGE = "out_of_range"
    NO_EXTREMUM = "no_extremum"
    EXTREMUM_OUTSIDE_TABLE = "extremum_outside_table"
    ZERO_OUTSIDE_TABLE = "zero_outside_table"
    NO_CONVERGENCE = "no_convergence"


class ZeroStrategy(Enum):
    """Estimation step used when iterating toward a zero.

    ``WEAK`` is a quick estimate that works well for gentle curves but
    can converge poorly or diverge on steep ones. ``STRONG`` is a
    Newton-style correction, somewhat more expensive per step, that
    converges more reliably and usually in fewer steps on curves with
    quick changes.
    """

    WEAK = "weak"
    STRONG = "strong"

    @classmethod
    def from_strong(cls, strong: bool) -> 'ZeroStrategy':
        """Map the boolean ``strong`` flag onto a strategy."""
        return cls.STRONG if strong else cls.WEAK

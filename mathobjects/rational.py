# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exact rational numbers in mixed form
"""

import logging
import math
import re
from fractions import Fraction
from typing import Any, Optional, Tuple

from .exceptions import DivisionByZeroException, InvalidArgumentException
from .utils import gcd, is_integer, is_real

logger = logging.getLogger(__name__)

DEFAULT_PRECISION: float = 1e-3

# [-][W][ N/D], whole and fraction separated by whitespace
_RATIONAL_RE = re.compile(
    r"\s*(?P<sign>-)?"
    r"(?:(?P<whole>\d+)(?:\s+(?P<num>\d+)/(?P<den>\d+))?"
    r"|(?P<frac_num>\d+)/(?P<frac_den>\d+))\s*"
)


def _normalize(whole: int, numerator: int, denominator: int) -> Tuple[int, int, int]:
    """
    Bring (whole, numerator, denominator) to canonical form.

    The value is folded into one improper fraction and split again with
    truncating division, so whole and numerator always share a sign and
    |numerator| < denominator.
    """
    if denominator < 0:
        denominator = -denominator
        numerator = -numerator

    total = whole * denominator + numerator
    whole = abs(total) // denominator
    if total < 0:
        whole = -whole
    numerator = total - whole * denominator

    divisor = 0
    while divisor != 1 and numerator != 0:
        divisor = gcd(numerator, denominator)
        numerator //= divisor
        denominator //= divisor

    if numerator == 0:
        denominator = 1

    return whole, numerator, denominator


class Rational:
    """
    Immutable rational number ``whole + numerator / denominator``.

    Normalized instances satisfy ``denominator > 0``,
    ``|numerator| < denominator`` and ``gcd(numerator, denominator) == 1``;
    a negative value carries its sign on both the whole part and the
    numerator, e.g. -1 1/2 is stored as ``(-1, -1, 2)``.
    """

    __slots__ = ("_whole", "_numerator", "_denominator")

    def __init__(
        self,
        whole: int = 0,
        numerator: int = 0,
        denominator: int = 1,
        normalize: bool = True,
    ) -> None:
        for name, value in (
            ("whole", whole),
            ("numerator", numerator),
            ("denominator", denominator),
        ):
            if not is_integer(value):
                raise InvalidArgumentException(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
        whole, numerator, denominator = int(whole), int(numerator), int(denominator)

        if denominator == 0:
            raise InvalidArgumentException("Denominator cannot be equal to zero")

        if normalize:
            whole, numerator, denominator = _normalize(whole, numerator, denominator)

        self._whole = whole
        self._numerator = numerator
        self._denominator = denominator

    # ------------------------------------------------------------------
    # Factories
    @classmethod
    def from_int(cls, number: int) -> "Rational":
        return cls(number, 0, 1)

    @classmethod
    def from_string(cls, string: str) -> "Rational":
        """
        Parse "W N/D", "N/D" or "W" with an optional leading minus sign.

        The sign applies to the whole expression: "-10 18/16" means
        -(10 + 18/16).
        """
        if not isinstance(string, str):
            raise InvalidArgumentException(
                f"Expected a string, got {type(string).__name__}"
            )
        match = _RATIONAL_RE.fullmatch(string)
        if match is None:
            raise InvalidArgumentException(
                f"Cannot convert {string!r} to a rational number"
            )

        if match["frac_num"] is not None:
            whole = 0
            numerator = int(match["frac_num"])
            denominator = int(match["frac_den"])
        else:
            whole = int(match["whole"])
            numerator = int(match["num"]) if match["num"] is not None else 0
            denominator = int(match["den"]) if match["den"] is not None else 1

        if match["sign"]:
            whole, numerator = -whole, -numerator

        return cls(whole, numerator, denominator)

    @classmethod
    def from_float(cls, number: float, precision: float = DEFAULT_PRECISION) -> "Rational":
        """
        Approximate *number* with the smallest possible denominator.

        The denominator d is the smallest one for which ``number * d`` lies
        within *precision* of an integer, hence the result differs from
        *number* by at most ``precision / d``.

        Parameters
        ----------
        number : float
            Finite real number.
        precision : float
            Positive tolerance.

        Returns
        -------
        Rational
        """
        if not is_real(number) or not math.isfinite(number):
            raise InvalidArgumentException(
                f"Cannot convert {number!r} to a rational number"
            )
        if not is_real(precision) or not precision > 0:
            raise InvalidArgumentException("Precision must be a positive number")

        # The smallest denominator meeting the bound is always a
        # continued-fraction convergent, so only those are tried.
        if is_integer(number):
            target = Fraction(abs(int(number)))
        else:
            target = Fraction(abs(float(number)))
        value = target
        q_prev, q = 1, 0
        terms = 0
        while True:
            a = math.floor(value)
            q_prev, q = q, a * q + q_prev
            terms += 1
            numerator = math.floor(target * q + Fraction(1, 2))
            if abs(target * q - numerator) <= precision:
                break
            value = 1 / (value - a)

        logger.debug(
            "from_float(%r, %r): denominator %d after %d terms",
            number, precision, q, terms,
        )
        if number < 0:
            numerator = -numerator
        return cls(0, numerator, q)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def whole(self) -> int:
        return self._whole

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def to_improper(self) -> Tuple[int, int]:
        """Return the value as an improper fraction (numerator, denominator)."""
        return (
            self._whole * self._denominator + self._numerator,
            self._denominator,
        )

    def _canonical(self) -> Tuple[int, int, int]:
        return _normalize(self._whole, self._numerator, self._denominator)

    @staticmethod
    def _coerce(value: Any) -> Optional["Rational"]:
        if isinstance(value, Rational):
            return value
        if is_integer(value):
            return Rational.from_int(value)
        return None

    # ------------------------------------------------------------------
    # Queries
    def to_float(self) -> float:
        return self._whole + self._numerator / self._denominator

    def to_string(self) -> str:
        whole, numerator, denominator = self._canonical()
        sign = "-" if whole < 0 or numerator < 0 else ""
        whole, numerator = abs(whole), abs(numerator)

        if numerator == 0:
            return f"{sign}{whole}" if whole else "0"
        if whole == 0:
            return f"{sign}{numerator}/{denominator}"
        return f"{sign}{whole} {numerator}/{denominator}"

    def is_zero(self) -> bool:
        return self.to_improper()[0] == 0

    def is_negative(self) -> bool:
        numerator, denominator = self.to_improper()
        return numerator * denominator < 0

    def is_positive(self) -> bool:
        numerator, denominator = self.to_improper()
        return numerator * denominator > 0

    def is_integer(self) -> bool:
        return self._canonical()[1] == 0

    def is_equal(self, other: "Rational") -> bool:
        return self._canonical() == other._canonical()

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, other: "Rational") -> "Rational":
        a_num, a_den = self.to_improper()
        b_num, b_den = other.to_improper()
        return Rational(0, a_num * b_den + b_num * a_den, a_den * b_den)

    def subtract(self, other: "Rational") -> "Rational":
        a_num, a_den = self.to_improper()
        b_num, b_den = other.to_improper()
        return Rational(0, a_num * b_den - b_num * a_den, a_den * b_den)

    def multiply(self, other: "Rational") -> "Rational":
        a_num, a_den = self.to_improper()
        b_num, b_den = other.to_improper()
        return Rational(0, a_num * b_num, a_den * b_den)

    def divide(self, other: "Rational") -> "Rational":
        if other.is_zero():
            raise DivisionByZeroException("Division by zero")
        a_num, a_den = self.to_improper()
        b_num, b_den = other.to_improper()
        return Rational(0, a_num * b_den, a_den * b_num)

    def reciprocal(self) -> "Rational":
        if self.is_zero():
            raise DivisionByZeroException("Zero has no reciprocal")
        numerator, denominator = self.to_improper()
        return Rational(0, denominator, numerator)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __add__(self, other: Any) -> "Rational":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Rational":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Rational":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> "Rational":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: Any) -> "Rational":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> "Rational":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Rational":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> "Rational":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __neg__(self) -> "Rational":
        return Rational(-self._whole, -self._numerator, self._denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return -self if self.is_negative() else self

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------------------------------------------------------------
    # Comparisons and representation
    def __eq__(self, other: Any) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        whole, numerator, denominator = self._canonical()
        if numerator == 0:
            return hash(whole)
        return hash((whole, numerator, denominator))

    def __repr__(self) -> str:
        return f"Rational({self._whole}, {self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return self.to_string()

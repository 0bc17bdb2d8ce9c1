# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers

EPS: float = 1e-8


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm, always >= 0."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def is_close(a: float, b: float, eps: float = EPS) -> bool:
    """Return True if |a - b| <= eps * max(1, |a|, |b|)."""
    return abs(a - b) <= eps * max(1.0, abs(a), abs(b))


def is_integer(value) -> bool:
    """True for integral numbers, excluding bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_real(value) -> bool:
    """True for real numbers, excluding bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Timings for matrix equality (tolerance vs exact) and multiplication
(pure vs mutating). Run with ``python -m mathobjects.benchmark_matrix``.
"""

import argparse
import statistics
import time

import pandas as pd

from mathobjects import Matrix

REPEATS = 5  # median of 5 runs leads to stable numbers
MIN_SEC = 1e-12  # floor for ratios, a coarse clock can report 0.0


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def median_wall(f, *args, repeats=REPEATS, **kwargs):
    return statistics.median(wall(f, *args, **kwargs) for _ in range(repeats))


def bench_equality(size):
    a = Matrix.fill(size, size, -17.4244)
    b = Matrix.fill(size, size, -17.4244)
    t_tol = median_wall(a.is_equal, b)
    t_exact = median_wall(a.is_equal_exactly, b)
    return [
        ("is_equal", f"{size}x{size}", t_tol, t_tol / max(t_exact, MIN_SEC)),
        ("is_equal_exactly", f"{size}x{size}", t_exact, 1.0),
    ]


def bench_multiplication(size):
    a = Matrix.fill(size, size, 5.5)
    b = Matrix.fill(size, size, -16.77)
    t_pure = median_wall(a.multiply, b)
    # fresh receiver on every run, the mutating product rescales it
    t_mutating = statistics.median(
        wall(Matrix.fill(size, size, 5.5).m_multiply, b) for _ in range(REPEATS)
    )
    return [
        ("multiply", f"{size}x{size}", t_pure, 1.0),
        ("m_multiply", f"{size}x{size}", t_mutating, t_mutating / max(t_pure, MIN_SEC)),
    ]


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--equality-size", type=int, default=700)
    parser.add_argument("--multiplication-size", type=int, default=100)
    parser.add_argument("--csv", default="bench_results.csv")
    args = parser.parse_args(argv)

    records = bench_equality(args.equality_size)
    records += bench_multiplication(args.multiplication_size)

    df = pd.DataFrame(records, columns=["kernel", "size", "sec", "relative"])
    print(df.to_markdown(index=False))
    df.to_csv(args.csv, index=False)
    return df


if __name__ == "__main__":
    main()

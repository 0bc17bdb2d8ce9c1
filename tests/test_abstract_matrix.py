# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from mathobjects.abstract_matrix import AbstractMatrix
from mathobjects.exceptions import (
    InvalidArgumentException,
    MatrixException,
    OutOfBoundsException,
    UnsupportedOperationException,
)


def is_word(value):
    return isinstance(value, str) and value.isalpha()


class WordMatrix(AbstractMatrix):
    cell_validator = staticmethod(is_word)


def test_construct_and_shape():
    m = AbstractMatrix([[1, 2, 3], [4, 5, 6]])
    assert m.rows == 2
    assert m.columns == 3
    assert m.size == 6
    assert len(m) == 6
    assert m.shape == (2, 3)
    assert m.to_list() == [[1, 2, 3], [4, 5, 6]]


def test_construct_copies_data():
    data = [[1, 2], [3, 4]]
    m = AbstractMatrix(data)
    data[0][0] = 100
    assert m.get(0, 0) == 1
    m.to_list()[1][1] = 100
    assert m.get(1, 1) == 4


def test_construct_from_tuples_and_arrays():
    assert AbstractMatrix(((1, 2), (3, 4))).to_list() == [[1, 2], [3, 4]]
    assert AbstractMatrix(np.arange(6).reshape(2, 3)).shape == (2, 3)


@pytest.mark.parametrize("data", [[], [[]], [[], []], 5, [1, 2]])
def test_construct_empty_or_malformed_raises(data):
    with pytest.raises(InvalidArgumentException):
        AbstractMatrix(data)


def test_inconsistent_row_length_raises():
    with pytest.raises(MatrixException, match="Inconsistent row length"):
        AbstractMatrix([[1, 2], [3]])
    with pytest.raises(MatrixException, match="Inconsistent row length"):
        AbstractMatrix([[1], [2, 3]])


def test_class_validator():
    m = WordMatrix([["a", "b"], ["c", "d"]])
    assert m.get(1, 0) == "c"
    with pytest.raises(InvalidArgumentException):
        WordMatrix([["a", "b"], ["c", 4]])
    with pytest.raises(InvalidArgumentException):
        m.set(0, 0, "not a word")


def test_instance_validator_overrides_class_validator():
    m = WordMatrix([[1, 2]], validator=lambda v: isinstance(v, int))
    assert m.to_list() == [[1, 2]]
    with pytest.raises(InvalidArgumentException):
        AbstractMatrix([[1, -2]], validator=lambda v: v > 0)


def test_fill():
    m = AbstractMatrix.fill(2, 3, "x")
    assert m.to_list() == [["x"] * 3] * 2
    m.set(0, 0, "y")
    assert m.get(1, 0) == "x"
    assert isinstance(WordMatrix.fill(1, 1, "ok"), WordMatrix)
    with pytest.raises(InvalidArgumentException):
        WordMatrix.fill(1, 1, "n0t")


@pytest.mark.parametrize("rows, columns", [(0, 1), (1, 0), (-1, 2), (2, -3), (1.5, 2)])
def test_fill_bad_dimensions_raises(rows, columns):
    with pytest.raises(InvalidArgumentException):
        AbstractMatrix.fill(rows, columns, 0)


def test_get_set_and_bounds():
    m = AbstractMatrix([[1, 2], [3, 4], [5, 6]])
    assert m.get(2, 1) == 6
    m.set(2, 1, 60)
    assert m.get(2, 1) == 60
    assert m[2, 1] == 60
    m[0, 0] = 10
    assert m.get(0, 0) == 10
    for row, column in [(3, 0), (0, 2), (-1, 0), (0, -1)]:
        with pytest.raises(OutOfBoundsException):
            m.get(row, column)
        with pytest.raises(OutOfBoundsException):
            m.set(row, column, 0)
    with pytest.raises(InvalidArgumentException):
        m.get(0.0, 1)
    with pytest.raises(InvalidArgumentException):
        _ = m[0]


def test_is_set():
    m = AbstractMatrix([[1, 2], [3, 4]])
    assert m.is_set(0, 0)
    assert m.is_set(1, 1)
    assert not m.is_set(2, 0)
    assert not m.is_set(0, -1)
    assert not m.is_set("a", 0)
    assert (1, 0) in m
    assert (1, 2) not in m
    assert 1 not in m


def test_delete_is_unsupported():
    m = AbstractMatrix([[1, 2], [3, 4]])
    with pytest.raises(UnsupportedOperationException):
        del m[0, 0]
    with pytest.raises(NotImplementedError):
        del m[1, 1]
    assert m.to_list() == [[1, 2], [3, 4]]


def test_iteration_yields_row_copies():
    m = AbstractMatrix([[1, 2], [3, 4]])
    rows = list(m)
    assert rows == [[1, 2], [3, 4]]
    rows[0][0] = 100
    assert m.get(0, 0) == 1


def test_len_counts_cells_iteration_yields_rows():
    m = AbstractMatrix([[1, 2, 3], [4, 5, 6]])
    assert len(m) == m.size == 6
    assert len(list(m)) == m.rows == 2


def test_transpose():
    m = WordMatrix([["a", "b", "c"], ["d", "e", "f"]])
    t = m.transpose()
    assert isinstance(t, WordMatrix)
    assert t.shape == (3, 2)
    assert t.to_list() == [["a", "d"], ["b", "e"], ["c", "f"]]
    assert m.shape == (2, 3)
    assert t.transpose().to_list() == m.to_list()
    # transposed copy keeps the validator
    with pytest.raises(InvalidArgumentException):
        t.set(0, 0, 1)


def test_mutating_transpose():
    m = AbstractMatrix([[1, 2, 3], [4, 5, 6]])
    expected = m.transpose().to_list()
    assert m.m_transpose() is m
    assert m.shape == (3, 2)
    assert m.size == 6
    assert m.to_list() == expected
    assert m.get(2, 1) == 6
    with pytest.raises(OutOfBoundsException):
        m.get(0, 2)


def test_copy_is_independent():
    m = AbstractMatrix([[1, 2]])
    c = m.copy()
    c.set(0, 0, 5)
    assert m.get(0, 0) == 1
    assert type(c) is AbstractMatrix


def test_string_representation():
    m = AbstractMatrix([[1, 2], [3, 4]])
    assert m.to_string() == "1\t2\n3\t4"
    assert str(m) == "1\t2\n3\t4"
    assert repr(m) == "AbstractMatrix([[1, 2], [3, 4]])"

"""Tests for the mod-2 matrix engine and bit helpers.
"""

import numpy as np
import pytest

from hamming.core.matrix import (
    bits_to_int,
    check_bits,
    constant_matrix,
    flip,
    int_to_bits,
    mod2,
    multiply,
    transpose,
)


class TestMultiply:
    """Test mod-2 matrix x vector multiplication."""

    def test_identity(self):
        """Test identity matrix returns the vector."""
        identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
        assert multiply(identity, [1, 0, 1]) == [1, 0, 1]

    def test_xor_of_row(self):
        """Test each output bit is the parity of the selected elements."""
        assert multiply([[1, 1, 1]], [1, 1, 0]) == [0]
        assert multiply([[1, 1, 1]], [1, 1, 1]) == [1]

    def test_zero_vector(self):
        """Test zero vector always gives zero."""
        assert multiply([[1, 1], [0, 1], [1, 0]], [0, 0]) == [0, 0, 0]

    def test_output_length_is_row_count(self):
        """Test output has one bit per matrix row."""
        matrix = [[1, 0, 1, 0], [0, 1, 0, 1]]
        assert len(multiply(matrix, [1, 1, 1, 1])) == 2

    def test_returns_plain_ints(self):
        """Test result holds Python ints, not numpy scalars."""
        result = multiply(np.ones((2, 2), dtype=np.uint8), [1, 0])
        assert all(type(b) is int for b in result)

    def test_accepts_numpy_matrix(self):
        """Test a read-only constant matrix can be used directly."""
        matrix = constant_matrix([[1, 1, 0], [0, 1, 1]])
        assert multiply(matrix, [1, 1, 1]) == [0, 0]

    def test_dimension_mismatch(self):
        """Test wrong vector length fails immediately."""
        with pytest.raises(ValueError, match="3 columns but vector has 2"):
            multiply([[1, 0, 1]], [1, 0])

    def test_vector_must_be_1d(self):
        """Test a nested vector is rejected."""
        with pytest.raises(ValueError):
            multiply([[1, 0]], [[1, 0]])

    def test_does_not_modify_input(self):
        """Test the input vector is left untouched."""
        vector = [1, 0, 1]
        multiply([[1, 1, 1]], vector)
        assert vector == [1, 0, 1]


class TestConstantMatrix:
    """Test read-only matrix construction."""

    def test_shape(self):
        """Test shape follows the rows."""
        assert constant_matrix([[1, 0, 1], [0, 1, 1]]).shape == (2, 3)

    def test_read_only(self):
        """Test the matrix cannot be modified in place."""
        matrix = constant_matrix([[1, 0], [0, 1]])
        with pytest.raises(ValueError):
            matrix[0, 0] = 0

    def test_ragged_rows(self):
        """Test rows of different lengths are rejected."""
        with pytest.raises(ValueError):
            constant_matrix([[1, 0], [1]])

    def test_non_binary(self):
        """Test values other than 0 and 1 are rejected."""
        with pytest.raises(ValueError, match="0 or 1"):
            constant_matrix([[1, 2]])


class TestHelpers:
    """Test bit helper functions."""

    def test_mod2(self):
        """Test mod2 reduces sums to a bit."""
        assert mod2(0) == 0
        assert mod2(3) == 1
        assert mod2(4) == 0

    def test_transpose(self):
        """Test transposition swaps rows and columns."""
        assert transpose([[1, 0, 1], [0, 1, 1]]) == [[1, 0], [0, 1], [1, 1]]

    def test_bits_to_int_msb_first(self):
        """Test MSB-first reading."""
        assert bits_to_int([1, 0, 1, 1]) == 11
        assert bits_to_int([0, 0, 0, 1]) == 1
        assert bits_to_int([]) == 0

    def test_int_to_bits_msb_first(self):
        """Test MSB-first writing."""
        assert int_to_bits(11, 4) == [1, 0, 1, 1]
        assert int_to_bits(0, 4) == [0, 0, 0, 0]

    def test_int_bits_all_nibbles(self, all_nibbles):
        """Test all nibbles convert back to their value."""
        for value, nibble in enumerate(all_nibbles):
            assert bits_to_int(nibble) == value

    def test_int_to_bits_overflow(self):
        """Test values that do not fit are rejected."""
        with pytest.raises(ValueError):
            int_to_bits(16, 4)
        with pytest.raises(ValueError):
            int_to_bits(-1, 4)

    def test_flip_returns_copy(self):
        """Test flip inverts one bit of a new list."""
        bits = [0, 1, 0]
        assert flip(bits, 1) == [0, 0, 0]
        assert bits == [0, 1, 0]

    def test_flip_out_of_range(self):
        """Test flip rejects indices outside the vector."""
        with pytest.raises(ValueError, match="must be 0-2"):
            flip([0, 1, 0], 3)
        with pytest.raises(ValueError):
            flip([0, 1, 0], -1)


class TestCheckBits:
    """Test bit vector validation."""

    def test_valid(self):
        """Test a valid vector is returned as a new list."""
        bits = (1, 0, 1, 1)
        result = check_bits(bits, 4, "Data")
        assert result == [1, 0, 1, 1]
        assert isinstance(result, list)

    def test_bools_accepted(self):
        """Test booleans are normalised to ints."""
        assert check_bits([True, False], 2, "Data") == [1, 0]

    def test_wrong_length(self):
        """Test wrong length message names expected and actual size."""
        with pytest.raises(ValueError, match="Data must be exactly 4 bits, got 3"):
            check_bits([1, 0, 1], 4, "Data")

    def test_non_binary(self):
        """Test values other than 0/1 are rejected."""
        with pytest.raises(ValueError, match="bit 2 must be 0 or 1"):
            check_bits([1, 0, 2, 1], 4, "Data")

"""
Mod-2 Matrix Engine

The single arithmetic primitive of the codecs: a binary matrix times a
binary vector over GF(2). Every encode and syndrome computation is one
call to multiply().

Also holds the bit vector validation and conversion helpers shared by
the codec modules.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

__all__ = [
    "BitMatrix",
    "constant_matrix",
    "multiply",
    "mod2",
    "transpose",
    "check_bits",
    "flip",
    "bits_to_int",
    "int_to_bits",
]

BitMatrix = npt.NDArray[np.uint8]


def constant_matrix(rows: Sequence[Sequence[int]]) -> BitMatrix:
    """
    Build a read-only binary matrix.

    Args:
        rows: Row-major 0/1 values, all rows the same length.

    Returns:
        Immutable uint8 array with the shape of ``rows``.

    Examples:
        >>> constant_matrix([[1, 0], [0, 1]]).shape
        (2, 2)
    """
    matrix = np.array(rows, dtype=np.uint8)
    if matrix.ndim != 2:
        raise ValueError(f"Matrix rows must all have the same length, got {rows!r}")
    if np.any(matrix > 1):
        raise ValueError("Matrix entries must be 0 or 1")
    matrix.setflags(write=False)
    return matrix


def multiply(matrix: npt.ArrayLike, vector: Sequence[int]) -> list[int]:
    """
    Multiply a binary matrix by a binary vector modulo 2.

    Each output bit is the XOR of the element-wise AND of one matrix row
    and the vector.

    Args:
        matrix: rows x n matrix of 0/1 values.
        vector: n-element vector of 0/1 values.

    Returns:
        rows-element result vector.

    Raises:
        ValueError: If the vector length does not match the column count.

    Examples:
        >>> multiply([[1, 1, 0], [0, 1, 1]], [1, 1, 1])
        [0, 0]
    """
    m = np.asarray(matrix, dtype=np.int64)
    v = np.asarray(vector, dtype=np.int64)

    if m.ndim != 2 or v.ndim != 1:
        raise ValueError(f"Expected a 2-D matrix and a 1-D vector, got {m.ndim}-D and {v.ndim}-D")
    if m.shape[1] != v.shape[0]:
        raise ValueError(
            f"Matrix has {m.shape[1]} columns but vector has {v.shape[0]} elements"
        )

    return [int(b) for b in (m @ v) % 2]


def mod2(value: int) -> int:
    """Reduce an integer sum to a single bit."""
    return value % 2


def transpose(matrix: npt.ArrayLike) -> list[list[int]]:
    """
    Transpose a binary matrix.

    Examples:
        >>> transpose([[1, 0, 1], [0, 1, 1]])
        [[1, 0], [0, 1], [1, 1]]
    """
    return np.asarray(matrix, dtype=np.uint8).T.tolist()


def check_bits(bits: Sequence[int], length: int, name: str) -> list[int]:
    """
    Validate a fixed-length bit vector.

    Args:
        bits: Vector to check.
        length: Required number of bits.
        name: Human readable name used in the error message.

    Returns:
        A new list holding the same bits as plain ints.

    Raises:
        ValueError: If the length is wrong or a value is not 0 or 1.
    """
    if len(bits) != length:
        raise ValueError(f"{name} must be exactly {length} bits, got {len(bits)}")

    out = [int(b) for b in bits]
    for i, b in enumerate(out):
        if b not in (0, 1):
            raise ValueError(f"{name} bit {i} must be 0 or 1, got {bits[i]!r}")

    return out


def flip(bits: Sequence[int], index: int) -> list[int]:
    """
    Return a copy of ``bits`` with one bit inverted.

    Args:
        bits: Source vector, left untouched.
        index: 0-indexed bit to invert.

    Raises:
        ValueError: If index is outside the vector.
    """
    if not 0 <= index < len(bits):
        raise ValueError(f"Bit index must be 0-{len(bits) - 1}, got {index}")

    out = list(bits)
    out[index] ^= 1
    return out


def bits_to_int(bits: Sequence[int]) -> int:
    """
    Read a bit vector as an unsigned number, MSB first.

    Examples:
        >>> bits_to_int([1, 0, 1, 1])
        11
    """
    value = 0
    for b in bits:
        value = (value << 1) | (b & 1)
    return value


def int_to_bits(value: int, width: int) -> list[int]:
    """
    Write an unsigned number as a bit vector, MSB first.

    Raises:
        ValueError: If value is negative or does not fit in width bits.

    Examples:
        >>> int_to_bits(11, 4)
        [1, 0, 1, 1]
    """
    if not 0 <= value < (1 << width):
        raise ValueError(f"Value must be 0-{(1 << width) - 1}, got {value}")
    return [(value >> (width - 1 - i)) & 1 for i in range(width)]

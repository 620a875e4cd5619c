"""Hamming(7,4) SEC Codec

Encodes a 4-bit data nibble into a 7-bit codeword with 3 parity bits
at the power-of-two positions, and corrects any single bit error.

Codeword layout (1-indexed positions):
    c1  c2  c3  c4  c5  c6  c7
    p1  p2  d1  p4  d2  d3  d4

The syndrome [s1, s2, s4] read as a binary number (s1 = LSB) is the
1-indexed position of a single flipped bit, or 0 when the word is clean.

This code cannot detect double errors: two flips at positions a and b
produce the syndrome a XOR b, which points at a third, healthy bit.
"""

from __future__ import annotations

from collections.abc import Sequence

from hamming.core.constants import (
    CODEWORD_BITS,
    DATA_BITS,
    DATA_INDICES,
    NO_ERROR_POSITION,
    SYNDROME_BITS,
    SYNDROME_WEIGHTS,
)
from hamming.core.matrix import check_bits, constant_matrix, flip, multiply
from hamming.core.types import BitType, DecodeResult, ErrorReport, ErrorType

__all__ = [
    "encode",
    "syndrome",
    "error_position",
    "classify",
    "correct",
    "extract_data",
    "decode",
    "bit_type",
    "GENERATOR_MATRIX",
    "PARITY_CHECK_MATRIX",
]

# Generator matrix, one row per codeword bit: c = G x d
GENERATOR_MATRIX = constant_matrix(
    [
        [1, 1, 0, 1],  # c1 = p1 = d1 ^ d2 ^ d4
        [1, 0, 1, 1],  # c2 = p2 = d1 ^ d3 ^ d4
        [1, 0, 0, 0],  # c3 = d1
        [0, 1, 1, 1],  # c4 = p4 = d2 ^ d3 ^ d4
        [0, 1, 0, 0],  # c5 = d2
        [0, 0, 1, 0],  # c6 = d3
        [0, 0, 0, 1],  # c7 = d4
    ]
)

# Parity check matrix: column p is the binary form of position p
PARITY_CHECK_MATRIX = constant_matrix(
    [
        [1, 0, 1, 0, 1, 0, 1],  # s1: positions 1, 3, 5, 7
        [0, 1, 1, 0, 0, 1, 1],  # s2: positions 2, 3, 6, 7
        [0, 0, 0, 1, 1, 1, 1],  # s4: positions 4, 5, 6, 7
    ]
)


def encode(data: Sequence[int]) -> list[int]:
    """Encode 4 data bits into a 7-bit Hamming codeword.

    Args:
    ----
        data: [d1, d2, d3, d4].

    Returns:
    -------
        [p1, p2, d1, p4, d2, d3, d4].

    Examples:
    --------
        >>> encode([1, 0, 1, 1])
        [0, 1, 1, 0, 0, 1, 1]
    """
    data = check_bits(data, DATA_BITS, "Data")
    return multiply(GENERATOR_MATRIX, data)


def syndrome(received: Sequence[int]) -> list[int]:
    """Calculate the syndrome of a received 7-bit word.

    Args:
    ----
        received: 7 bits, possibly corrupted.

    Returns:
    -------
        [s1, s2, s4], all zero for a valid codeword.

    Examples:
    --------
        >>> syndrome([0, 1, 1, 0, 1, 1, 1])
        [1, 0, 1]
    """
    received = check_bits(received, CODEWORD_BITS, "Received word")
    return multiply(PARITY_CHECK_MATRIX, received)


def error_position(syndrome_bits: Sequence[int]) -> int:
    """Decode a syndrome into a 1-indexed error position.

    Args:
    ----
        syndrome_bits: [s1, s2, s4] with s1 as least significant bit.

    Returns:
    -------
        0 for no error, otherwise the position 1-7.

    Examples:
    --------
        >>> error_position([1, 0, 1])
        5
    """
    syndrome_bits = check_bits(syndrome_bits, SYNDROME_BITS, "Syndrome")
    return sum(s * w for s, w in zip(syndrome_bits, SYNDROME_WEIGHTS))


def classify(syndrome_bits: Sequence[int]) -> ErrorReport:
    """Classify a Hamming(7,4) syndrome.

    Any non-zero syndrome is reported as a correctable single error,
    even when it was caused by two flips.
    """
    position = error_position(syndrome_bits)
    if position == NO_ERROR_POSITION:
        return ErrorReport(ErrorType.NONE, NO_ERROR_POSITION, True)
    return ErrorReport(ErrorType.SINGLE, position, True)


def correct(received: Sequence[int], position: int) -> list[int]:
    """Correct a single-bit error.

    The position is trusted as given; the result is not re-checked.

    Args:
    ----
        received: 7-bit received word.
        position: Error position 1-7, 0 means no error.

    Returns:
    -------
        Corrected 7-bit word (a new list).
    """
    received = check_bits(received, CODEWORD_BITS, "Received word")
    if position == NO_ERROR_POSITION:
        return received
    if not 1 <= position <= CODEWORD_BITS:
        raise ValueError(f"Error position must be 0-{CODEWORD_BITS}, got {position}")
    return flip(received, position - 1)


def extract_data(codeword: Sequence[int]) -> list[int]:
    """Extract [d1, d2, d3, d4] from a 7-bit codeword.

    Examples:
    --------
        >>> extract_data([0, 1, 1, 0, 0, 1, 1])
        [1, 0, 1, 1]
    """
    codeword = check_bits(codeword, CODEWORD_BITS, "Codeword")
    return [codeword[i] for i in DATA_INDICES]


def decode(received: Sequence[int]) -> DecodeResult:
    """Run syndrome, classification, correction and extraction.

    Args:
    ----
        received: 7-bit received word.

    Returns:
    -------
        DecodeResult with every intermediate value.

    Examples:
    --------
        >>> decode([0, 1, 1, 0, 1, 1, 1]).data
        [1, 0, 1, 1]
    """
    syndrome_bits = syndrome(received)
    report = classify(syndrome_bits)
    corrected = correct(received, report.error_position)
    return DecodeResult(syndrome_bits, report, corrected, extract_data(corrected))


def bit_type(position: int) -> BitType:
    """Role of a 1-indexed codeword position.

    Positions 1, 2 and 4 (powers of two) hold parity.
    """
    if not 1 <= position <= CODEWORD_BITS:
        raise ValueError(f"Position must be 1-{CODEWORD_BITS}, got {position}")
    return BitType.PARITY if position & (position - 1) == 0 else BitType.DATA

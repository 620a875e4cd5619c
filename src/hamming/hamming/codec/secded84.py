"""Extended Hamming(8,4) SECDED Codec

Single Error Correction, Double Error Detection. The Hamming(7,4)
codeword is prefixed with an overall parity bit p0 covering all seven
bits, giving an 8-bit codeword:

    index:  0   1   2   3   4   5   6   7
    bit:    p0  p1  p2  d1  p4  d2  d3  d4

Index i (1-7) keeps its classical Hamming position, so the positional
syndrome of a single flip at index i is i itself, and index 0 (p0) has
a zero positional column.

Decision table over (p0 check, syndrome value):

    p0  value  result
    0   0      no error
    1   0      single error in p0 (index 0)
    1   !=0    single error at index = value
    0   !=0    double error, not correctable

A double flip at indices a != b yields the syndrome value a XOR b, which
is never zero, so every double error is detected. Three or more flips
are outside the design and may be misreported.
"""

from __future__ import annotations

from collections.abc import Sequence

from hamming.codec.hamming74 import GENERATOR_MATRIX
from hamming.core.constants import (
    DATA_BITS,
    EXTENDED_CODEWORD_BITS,
    EXTENDED_DATA_INDICES,
    EXTENDED_PARITY_INDICES,
    EXTENDED_SYNDROME_BITS,
    NO_CORRECTION,
    OVERALL_PARITY_INDEX,
    SYNDROME_WEIGHTS,
)
from hamming.core.matrix import check_bits, constant_matrix, flip, mod2, multiply
from hamming.core.types import BitType, DecodeResult, ErrorReport, ErrorType

__all__ = [
    "encode_extended",
    "syndrome_extended",
    "classify_extended",
    "correct_extended",
    "extract_data_extended",
    "decode_extended",
    "extended_bit_type",
    "EXTENDED_PARITY_CHECK_MATRIX",
]

# Hamming(7,4) checks shifted right by one column, plus overall parity
EXTENDED_PARITY_CHECK_MATRIX = constant_matrix(
    [
        [0, 1, 0, 1, 0, 1, 0, 1],  # s1: indices 1, 3, 5, 7
        [0, 0, 1, 1, 0, 0, 1, 1],  # s2: indices 2, 3, 6, 7
        [0, 0, 0, 0, 1, 1, 1, 1],  # s4: indices 4, 5, 6, 7
        [1, 1, 1, 1, 1, 1, 1, 1],  # p0: every bit
    ]
)


def encode_extended(data: Sequence[int]) -> list[int]:
    """Encode 4 data bits into an 8-bit SECDED codeword.

    Args:
    ----
        data: [d1, d2, d3, d4].

    Returns:
    -------
        [p0, p1, p2, d1, p4, d2, d3, d4] where p0 is the XOR of the
        seven Hamming(7,4) bits.

    Examples:
    --------
        >>> encode_extended([1, 1, 1, 1])
        [1, 1, 1, 1, 1, 1, 1, 1]
    """
    data = check_bits(data, DATA_BITS, "Data")
    hamming7 = multiply(GENERATOR_MATRIX, data)
    return [mod2(sum(hamming7)), *hamming7]


def syndrome_extended(received: Sequence[int]) -> list[int]:
    """Calculate the syndrome of a received 8-bit word.

    Args:
    ----
        received: 8 bits, possibly corrupted.

    Returns:
    -------
        [s1, s2, s4, p0] where p0 is the overall parity check.
    """
    received = check_bits(received, EXTENDED_CODEWORD_BITS, "Received word")
    return multiply(EXTENDED_PARITY_CHECK_MATRIX, received)


def classify_extended(syndrome_bits: Sequence[int]) -> ErrorReport:
    """Classify an extended syndrome with the SECDED decision table.

    Args:
    ----
        syndrome_bits: [s1, s2, s4, p0].

    Returns:
    -------
        ErrorReport. Double errors report position 0 and can_correct False.

    Examples:
    --------
        >>> classify_extended([1, 0, 1, 1]).error_position
        5
        >>> classify_extended([1, 1, 0, 0]).error_type.value
        'double'
    """
    syndrome_bits = check_bits(syndrome_bits, EXTENDED_SYNDROME_BITS, "Extended syndrome")
    *positional, p0 = syndrome_bits
    value = sum(s * w for s, w in zip(positional, SYNDROME_WEIGHTS))

    if p0 == 0 and value == 0:
        return ErrorReport(ErrorType.NONE, 0, True)
    if p0 == 1 and value == 0:
        return ErrorReport(ErrorType.SINGLE, OVERALL_PARITY_INDEX, True)
    if p0 == 1:
        return ErrorReport(ErrorType.SINGLE, value, True)
    return ErrorReport(ErrorType.DOUBLE, 0, False)


def correct_extended(received: Sequence[int], position: int) -> list[int]:
    """Correct a single-bit error in an 8-bit word.

    Only meaningful when the classification is a single error.

    Args:
    ----
        received: 8-bit received word.
        position: 0-indexed error position; negative means leave as is.

    Returns:
    -------
        Corrected 8-bit word (a new list).
    """
    received = check_bits(received, EXTENDED_CODEWORD_BITS, "Received word")
    if position < 0:
        return received
    return flip(received, position)


def extract_data_extended(codeword: Sequence[int]) -> list[int]:
    """Extract [d1, d2, d3, d4] from an 8-bit codeword.

    Examples:
    --------
        >>> extract_data_extended([0, 0, 1, 1, 0, 0, 1, 1])
        [1, 0, 1, 1]
    """
    codeword = check_bits(codeword, EXTENDED_CODEWORD_BITS, "Extended codeword")
    return [codeword[i] for i in EXTENDED_DATA_INDICES]


def decode_extended(received: Sequence[int]) -> DecodeResult:
    """Run syndrome, classification, correction and extraction.

    Correction is applied only to single errors, including one in p0.
    A double error leaves the word as received.
    """
    syndrome_bits = syndrome_extended(received)
    report = classify_extended(syndrome_bits)
    if report.error_type is ErrorType.SINGLE:
        corrected = correct_extended(received, report.error_position)
    else:
        corrected = correct_extended(received, NO_CORRECTION)
    return DecodeResult(syndrome_bits, report, corrected, extract_data_extended(corrected))


def extended_bit_type(position: int) -> BitType:
    """Role of a 0-indexed extended codeword position."""
    if not 0 <= position < EXTENDED_CODEWORD_BITS:
        raise ValueError(f"Position must be 0-{EXTENDED_CODEWORD_BITS - 1}, got {position}")
    if position == OVERALL_PARITY_INDEX:
        return BitType.OVERALL_PARITY
    return BitType.PARITY if position in EXTENDED_PARITY_INDICES else BitType.DATA

"""
Hamming Code Result Types

Enumerations and result tuples passed between the codec, the error
injector and the block pipeline.

ErrorReport fields:
    - error_type: none / single / double
    - error_position: 1-indexed for Hamming(7,4) (0 = no error),
      0-indexed for Hamming(8,4) (0 = overall parity bit)
    - can_correct: False only for a detected double error
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

__all__ = [
    "ErrorType",
    "BitType",
    "Step",
    "ErrorReport",
    "DecodeResult",
    "SingleInjection",
    "MultipleInjection",
    "ManualFlip",
]


class ErrorType(str, Enum):
    """Classification of the corruption found in a received word."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class BitType(str, Enum):
    """Role of a bit inside a codeword."""

    OVERALL_PARITY = "overall-parity"  # p0, extended codeword only
    PARITY = "parity"
    DATA = "data"


class Step(str, Enum):
    """Stages a block passes through in a transmission."""

    INPUT = "input"
    ENCODING = "encoding"
    NOISE = "noise"
    DECODING = "decoding"
    CORRECTION = "correction"
    OUTPUT = "output"


class ErrorReport(NamedTuple):
    """
    Classification of a received word.

    Attributes:
        error_type: Kind of error detected.
        error_position: Bit to flip when error_type is SINGLE.
        can_correct: Whether correction is possible.
    """

    error_type: ErrorType
    error_position: int
    can_correct: bool


class DecodeResult(NamedTuple):
    """Every intermediate value of a syndrome -> correct -> extract pass."""

    syndrome: list[int]
    report: ErrorReport
    corrected: list[int]
    data: list[int]


class SingleInjection(NamedTuple):
    """Codeword with one random flip; position is 1-indexed."""

    corrupted: list[int]
    position: int


class MultipleInjection(NamedTuple):
    """Codeword with distinct random flips; positions are 0-indexed."""

    corrupted: list[int]
    positions: list[int]


class ManualFlip(NamedTuple):
    """
    Outcome of a user requested bit toggle.

    Attributes:
        received: Received word after the toggle (unchanged if rejected).
        error_positions: Every 0-indexed bit differing from the codeword.
        applied: False when the toggle was refused by the error cap.
    """

    received: list[int]
    error_positions: list[int]
    applied: bool

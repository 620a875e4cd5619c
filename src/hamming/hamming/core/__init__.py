"""Hamming Core Components

This module contains the building blocks shared by both codecs:
- Mod-2 matrix engine
- Bit vector validation and conversion
- Result types and enumerations
- Block layout constants
"""

from hamming.core.constants import (
    CODEWORD_BITS,
    DATA_BITS,
    DATA_INDICES,
    EXTENDED_CODEWORD_BITS,
    EXTENDED_DATA_INDICES,
    EXTENDED_PARITY_INDICES,
    EXTENDED_SYNDROME_BITS,
    MAX_ERRORS_EXTENDED,
    MAX_ERRORS_STANDARD,
    NO_CORRECTION,
    NO_ERROR_POSITION,
    PARITY_INDICES,
    SYNDROME_BITS,
)
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
from hamming.core.types import (
    BitType,
    DecodeResult,
    ErrorReport,
    ErrorType,
    ManualFlip,
    MultipleInjection,
    SingleInjection,
    Step,
)

__all__ = [
    # Matrix engine
    "multiply",
    "mod2",
    "transpose",
    "constant_matrix",
    "check_bits",
    "flip",
    "bits_to_int",
    "int_to_bits",
    # Types
    "ErrorType",
    "BitType",
    "Step",
    "ErrorReport",
    "DecodeResult",
    "SingleInjection",
    "MultipleInjection",
    "ManualFlip",
    # Constants
    "DATA_BITS",
    "CODEWORD_BITS",
    "EXTENDED_CODEWORD_BITS",
    "SYNDROME_BITS",
    "EXTENDED_SYNDROME_BITS",
    "DATA_INDICES",
    "PARITY_INDICES",
    "EXTENDED_DATA_INDICES",
    "EXTENDED_PARITY_INDICES",
    "MAX_ERRORS_STANDARD",
    "MAX_ERRORS_EXTENDED",
    "NO_ERROR_POSITION",
    "NO_CORRECTION",
]

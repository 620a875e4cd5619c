"""Hamming Codec Layer

This module provides the two block codes and the channel simulation:
- Hamming(7,4) SEC encoder/decoder
- Extended Hamming(8,4) SECDED encoder/decoder
- Random and manual bit-flip error injection

Every function is stateless and returns new lists; nothing here holds
state between calls.
"""

from hamming.codec.hamming74 import (
    GENERATOR_MATRIX,
    PARITY_CHECK_MATRIX,
    bit_type,
    classify,
    correct,
    decode,
    encode,
    error_position,
    extract_data,
    syndrome,
)
from hamming.codec.noise import (
    error_positions,
    flip_bit,
    inject_multiple,
    inject_single,
)
from hamming.codec.secded84 import (
    EXTENDED_PARITY_CHECK_MATRIX,
    classify_extended,
    correct_extended,
    decode_extended,
    encode_extended,
    extended_bit_type,
    extract_data_extended,
    syndrome_extended,
)

__all__ = [
    # Hamming(7,4)
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
    # Hamming(8,4) SECDED
    "encode_extended",
    "syndrome_extended",
    "classify_extended",
    "correct_extended",
    "extract_data_extended",
    "decode_extended",
    "extended_bit_type",
    "EXTENDED_PARITY_CHECK_MATRIX",
    # Noise
    "inject_single",
    "inject_multiple",
    "flip_bit",
    "error_positions",
]

"""
Hamming Code Constants

Block sizes, bit index sets and simulation limits shared by the
Hamming(7,4) SEC and extended Hamming(8,4) SECDED codecs.
"""

from __future__ import annotations

__all__ = [
    # Block sizes
    "DATA_BITS",
    "CODEWORD_BITS",
    "EXTENDED_CODEWORD_BITS",
    "SYNDROME_BITS",
    "EXTENDED_SYNDROME_BITS",
    # Bit layout (0-indexed)
    "DATA_INDICES",
    "PARITY_INDICES",
    "EXTENDED_DATA_INDICES",
    "EXTENDED_PARITY_INDICES",
    "OVERALL_PARITY_INDEX",
    "SYNDROME_WEIGHTS",
    # Error simulation
    "MAX_ERRORS_STANDARD",
    "MAX_ERRORS_EXTENDED",
    "NO_ERROR_POSITION",
    "NO_CORRECTION",
    # Input defaults
    "DEFAULT_TEXT",
    "DEFAULT_BINARY",
    "DEFAULT_ENCODING",
    "DEFAULT_STEP_DELAY",
]

# ============================================================================
# Block Sizes
# ============================================================================

# Message nibble
DATA_BITS: int = 4

# Hamming(7,4) codeword: [p1, p2, d1, p4, d2, d3, d4]
CODEWORD_BITS: int = 7

# Extended Hamming(8,4) codeword: [p0, p1, p2, d1, p4, d2, d3, d4]
EXTENDED_CODEWORD_BITS: int = 8

# [s1, s2, s4]
SYNDROME_BITS: int = 3

# [s1, s2, s4, p0]
EXTENDED_SYNDROME_BITS: int = 4

# ============================================================================
# Bit Layout
# ============================================================================

# Positions 3, 5, 6, 7 in classical 1-indexed numbering
DATA_INDICES: tuple[int, ...] = (2, 4, 5, 6)

# Positions 1, 2, 4 (powers of two)
PARITY_INDICES: tuple[int, ...] = (0, 1, 3)

# Same layout shifted by the leading overall parity bit
EXTENDED_DATA_INDICES: tuple[int, ...] = (3, 5, 6, 7)
EXTENDED_PARITY_INDICES: tuple[int, ...] = (0, 1, 2, 4)

OVERALL_PARITY_INDEX: int = 0

# Weight of s1, s2, s4 when read as an unsigned number (s1 is the LSB)
SYNDROME_WEIGHTS: tuple[int, ...] = (1, 2, 4)

# ============================================================================
# Error Simulation
# ============================================================================

# Simultaneous manual flips allowed per block
MAX_ERRORS_STANDARD: int = 1
MAX_ERRORS_EXTENDED: int = 2

# Standard codec: syndrome value 0 means "no error"
NO_ERROR_POSITION: int = 0

# Extended codec: any negative position leaves the word untouched
NO_CORRECTION: int = -1

# ============================================================================
# Input Defaults
# ============================================================================

DEFAULT_TEXT: str = "OK"
DEFAULT_BINARY: str = "0100"
DEFAULT_ENCODING: str = "utf-8"

# Seconds between steps when the CLI demo plays a transmission
DEFAULT_STEP_DELAY: float = 0.0

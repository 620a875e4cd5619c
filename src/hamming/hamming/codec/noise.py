"""Channel Noise Simulation

Bit-flip error injection for both codec variants:
- inject_single(): one uniformly random flip in a 7-bit codeword
- inject_multiple(): 1 or 2 distinct random flips in an 8-bit codeword
- flip_bit(): a user requested toggle, capped per variant

Randomness comes from an optional random.Random instance. When none is
given the module-level random functions are used, so seeding the random
module makes a simulation reproducible.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Optional

from hamming.core.constants import (
    CODEWORD_BITS,
    EXTENDED_CODEWORD_BITS,
    MAX_ERRORS_EXTENDED,
)
from hamming.core.matrix import check_bits, flip
from hamming.core.types import ManualFlip, MultipleInjection, SingleInjection

__all__ = [
    "inject_single",
    "inject_multiple",
    "flip_bit",
    "error_positions",
]

logger = logging.getLogger(__name__)


def inject_single(
    codeword: Sequence[int], rng: Optional[random.Random] = None
) -> SingleInjection:
    """
    Flip one random bit of a Hamming(7,4) codeword.

    Args:
        codeword: 7-bit codeword, left untouched.
        rng: Random source, defaults to the random module.

    Returns:
        (corrupted, position) with position 1-indexed (1-7).
    """
    codeword = check_bits(codeword, CODEWORD_BITS, "Codeword")
    source = rng if rng is not None else random

    position = source.randint(1, CODEWORD_BITS)
    logger.debug("Injecting single error at position %d", position)

    return SingleInjection(flip(codeword, position - 1), position)


def inject_multiple(
    codeword: Sequence[int], count: int = 1, rng: Optional[random.Random] = None
) -> MultipleInjection:
    """
    Flip ``count`` distinct random bits of an extended codeword.

    Positions are drawn without replacement: each draw removes the chosen
    index from the pool, so the same bit is never flipped twice.

    Args:
        codeword: 8-bit codeword, left untouched.
        count: Number of errors, 1 or 2.
        rng: Random source, defaults to the random module.

    Returns:
        (corrupted, positions) with 0-indexed positions in draw order.

    Raises:
        ValueError: If count is not 1 or 2.
    """
    codeword = check_bits(codeword, EXTENDED_CODEWORD_BITS, "Extended codeword")
    if not 1 <= count <= MAX_ERRORS_EXTENDED:
        raise ValueError(f"Error count must be 1-{MAX_ERRORS_EXTENDED}, got {count}")
    source = rng if rng is not None else random

    pool = list(range(EXTENDED_CODEWORD_BITS))
    positions: list[int] = []
    corrupted = codeword
    for _ in range(count):
        position = pool.pop(source.randrange(len(pool)))
        positions.append(position)
        corrupted = flip(corrupted, position)

    logger.debug("Injecting %d error(s) at positions %s", count, positions)
    return MultipleInjection(corrupted, positions)


def error_positions(encoded: Sequence[int], received: Sequence[int]) -> list[int]:
    """
    Every 0-indexed position where the received word differs.

    Examples:
        >>> error_positions([0, 1, 1, 0], [0, 0, 1, 1])
        [1, 3]
    """
    if len(encoded) != len(received):
        raise ValueError(
            f"Received word must be exactly {len(encoded)} bits, got {len(received)}"
        )
    return [i for i, (e, r) in enumerate(zip(encoded, received)) if e != r]


def flip_bit(
    encoded: Sequence[int],
    received: Sequence[int],
    index: int,
    max_errors: int,
) -> ManualFlip:
    """
    Toggle one bit of a received word on request.

    Toggling a bit already in error always succeeds (it repairs it).
    Toggling a healthy bit is refused once max_errors bits already differ.
    The error set is recomputed from the full word afterwards, not just
    the toggled index.

    Args:
        encoded: Codeword as transmitted.
        received: Current received word.
        index: 0-indexed bit to toggle.
        max_errors: Cap on simultaneous errors.

    Returns:
        ManualFlip(received, error_positions, applied).
    """
    if not 0 <= index < len(encoded):
        raise ValueError(f"Bit index must be 0-{len(encoded) - 1}, got {index}")

    current = error_positions(encoded, received)
    if index not in current and len(current) >= max_errors:
        logger.debug("Rejected flip at %d: %d error(s) already present", index, len(current))
        return ManualFlip(list(received), current, False)

    flipped = flip(received, index)
    return ManualFlip(flipped, error_positions(encoded, flipped), True)

#!/usr/bin/env python
"""
Hamming Command Line Applications

Small terminal front ends for the codec and the block pipeline.

    python -m hamming.apps demo OK extended 2
    python -m hamming.apps binary 10110100 standard
    python -m hamming.apps encode 1011 extended
    python -m hamming.apps decode 01101110
    python -m hamming.apps table extended
    python -m hamming.apps pairs 1111
"""
from __future__ import annotations

import inspect
import itertools
import logging
import random
import sys
import time
from typing import Any, Dict, Optional, Union

from hamming.codec import (
    EXTENDED_PARITY_CHECK_MATRIX,
    PARITY_CHECK_MATRIX,
    bit_type,
    decode,
    decode_extended,
    encode,
    encode_extended,
    extended_bit_type,
)
from hamming.core.constants import (
    CODEWORD_BITS,
    DATA_BITS,
    DEFAULT_BINARY,
    DEFAULT_ENCODING,
    DEFAULT_STEP_DELAY,
    DEFAULT_TEXT,
    EXTENDED_CODEWORD_BITS,
)
from hamming.core.matrix import flip, int_to_bits, transpose
from hamming.core.types import Step
from hamming.misc import DictDotAttribute, char_to_binary, format_bits, nibble_to_hex, parse_binary
from hamming.pipeline import Transmission

logger = logging.getLogger(__name__)

_MODES = {"standard": False, "extended": True}


def default_config(
    mode: str = "standard",
    errors: Union[int, str] = 1,
    seed: Optional[Union[int, str]] = None,
) -> DictDotAttribute:
    """
    Build the run-time configuration shared by the commands.

    Args:
        mode: "standard" for Hamming(7,4) or "extended" for Hamming(8,4).
        errors: Random errors injected per block.
        seed: Seed for error injection, None for a random run.
    """
    if mode not in _MODES:
        raise ValueError(f"Mode must be one of {', '.join(_MODES)}, got {mode!r}")

    config = DictDotAttribute({
        "codec": {
            "extended": _MODES[mode],
            "error_count": int(errors),
        },
        "input": {
            "text": DEFAULT_TEXT,
            "binary": DEFAULT_BINARY,
            "encoding": DEFAULT_ENCODING,
        },
        "sim": {
            "seed": None if seed is None else int(seed),
            "step_delay": DEFAULT_STEP_DELAY,
        },
    })
    logger.debug("config = %r", config)
    return config


def _play(config: DictDotAttribute, tx: Transmission) -> None:
    """Drive a transmission to the end, printing each decoded block."""
    while not tx.finished:
        step = tx.step_forward()
        if config.sim.step_delay:
            time.sleep(config.sim.step_delay)
        if step is Step.OUTPUT:
            block = tx.block
            positions = ",".join(str(p) for p in block.error_positions) or "-"
            print(
                f"{block.label!s:>4} {format_bits(block.data_bits)} -> "
                f"{format_bits(block.encoded_bits)} ~> {format_bits(block.received_bits)} "
                f"flips[{positions}] syndrome={format_bits(block.syndrome)} "
                f"{block.report.error_type.value:<6} -> {format_bits(block.decoded_bits or [])}"
            )

    print(f"output: {tx.output}")
    print("summary: " + ", ".join(f"{k}={v}" for k, v in tx.summary().items()))


def demo(
    text: str = DEFAULT_TEXT,
    mode: str = "standard",
    errors: Union[int, str] = 1,
    seed: Optional[str] = None,
) -> None:
    """Send a text message block by block through a noisy channel."""
    config = default_config(mode, errors, seed)
    config.input.text = text
    rng = random.Random(config.sim.seed)
    tx = Transmission.from_text(
        config.input.text,
        encoding=config.input.encoding,
        extended=config.codec.extended,
        error_count=config.codec.error_count,
        rng=rng,
    )
    for char in config.input.text:
        print(f"{char!r:>6} {char_to_binary(char, config.input.encoding)}")
    _play(config, tx)


def binary(
    bits: str = DEFAULT_BINARY,
    mode: str = "standard",
    errors: Union[int, str] = 1,
    seed: Optional[str] = None,
) -> None:
    """Send a binary string block by block through a noisy channel."""
    config = default_config(mode, errors, seed)
    config.input.binary = bits
    rng = random.Random(config.sim.seed)
    tx = Transmission.from_binary(
        config.input.binary,
        extended=config.codec.extended,
        error_count=config.codec.error_count,
        rng=rng,
    )
    _play(config, tx)


def encode_bits(bits: str, mode: str = "standard") -> None:
    """Print the codeword of every nibble in a binary string."""
    extended = default_config(mode).codec.extended
    for nibble in parse_binary(bits):
        codeword = encode_extended(nibble) if extended else encode(nibble)
        print(f"{format_bits(nibble)} ({nibble_to_hex(nibble)}) -> {format_bits(codeword)}")


def decode_bits(bits: str) -> None:
    """Decode one received word; its length (7 or 8) selects the codec."""
    word = [int(c) for c in bits if not c.isspace()]
    if len(word) == EXTENDED_CODEWORD_BITS:
        result = decode_extended(word)
    elif len(word) == CODEWORD_BITS:
        result = decode(word)
    else:
        raise ValueError(
            f"Received word must be {CODEWORD_BITS} or {EXTENDED_CODEWORD_BITS} bits, got {len(word)}"
        )

    print(f"received:  {format_bits(word)}")
    print(f"syndrome:  {format_bits(result.syndrome)}")
    print(
        f"error:     {result.report.error_type.value} at {result.report.error_position}"
        f" (correctable: {result.report.can_correct})"
    )
    print(f"corrected: {format_bits(result.corrected)}")
    print(f"data:      {format_bits(result.data)}")


def table(mode: str = "standard") -> None:
    """
    Print the codeword of all 16 nibbles with the bit roles, then the
    syndrome a single flip of each bit produces (a column of H).

    Standard positions are numbered 1-7, extended indices 0-7.
    """
    extended = default_config(mode).codec.extended
    if extended:
        positions = list(range(EXTENDED_CODEWORD_BITS))
        roles = [extended_bit_type(i).value[0].upper() for i in positions]
        columns = transpose(EXTENDED_PARITY_CHECK_MATRIX)
    else:
        positions = list(range(1, CODEWORD_BITS + 1))
        roles = [bit_type(i).value[0].upper() for i in positions]
        columns = transpose(PARITY_CHECK_MATRIX)
    print(f"     {''.join(roles)}")
    for value in range(1 << DATA_BITS):
        nibble = int_to_bits(value, DATA_BITS)
        codeword = encode_extended(nibble) if extended else encode(nibble)
        print(f"{format_bits(nibble)} {format_bits(codeword)}")

    print("single flip syndromes:")
    for position, role, column in zip(positions, roles, columns):
        print(f"c{position} {role} -> {format_bits(column)}")


def pairs(bits: str = "1111") -> None:
    """Classify every double error of the extended codeword of each nibble."""
    for nibble in parse_binary(bits):
        codeword = encode_extended(nibble)
        print(f"{format_bits(nibble)} -> {format_bits(codeword)}")
        for a, b in itertools.combinations(range(EXTENDED_CODEWORD_BITS), 2):
            result = decode_extended(flip(flip(codeword, a), b))
            print(
                f"  flip {a},{b}: syndrome={format_bits(result.syndrome)} "
                f"{result.report.error_type.value}"
            )


_CLI_COMMANDS: Dict[str, Any] = {
    "demo": demo,
    "binary": binary,
    "encode": encode_bits,
    "decode": decode_bits,
    "table": table,
    "pairs": pairs,
}


def main(argv: Optional[list] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] not in _CLI_COMMANDS:
        print("Usage: python -m hamming.apps <command> [args]")
        print(f"Commands: {', '.join(_CLI_COMMANDS.keys())}")
        return 1

    command = _CLI_COMMANDS[argv[0]]
    signature = inspect.signature(command)
    try:
        signature.bind(*argv[1:])
    except TypeError as e:
        print(f"Usage: python -m hamming.apps {argv[0]} {' '.join(signature.parameters)}")
        print(f"Error: {e}")
        return 1

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        command(*argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

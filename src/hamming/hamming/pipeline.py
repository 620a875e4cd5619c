"""
Hamming Block Pipeline

Drives the stateless codec through a whole message, one 4-bit block at a
time, with every block passing through the same steps:

    INPUT -> ENCODING -> NOISE -> DECODING -> CORRECTION -> OUTPUT

All mutable state (current block, current step, decoded output, manual
bit flips) lives here; the codec functions are only ever called with
plain lists and return new lists.

Leaving the NOISE step injects random errors only when the received word
still equals the codeword, so bits flipped by hand are never overwritten.
"""

from __future__ import annotations

import codecs
import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from hamming.codec import (
    classify,
    classify_extended,
    decode,
    decode_extended,
    encode,
    encode_extended,
    flip_bit,
    inject_multiple,
    inject_single,
    syndrome,
    syndrome_extended,
)
from hamming.core.constants import (
    DEFAULT_ENCODING,
    EXTENDED_SYNDROME_BITS,
    MAX_ERRORS_EXTENDED,
    MAX_ERRORS_STANDARD,
    SYNDROME_BITS,
)
from hamming.core.types import DecodeResult, ErrorReport, ErrorType, Step
from hamming.misc import bytes_to_nibbles, format_bits, nibbles_to_text, parse_binary

__all__ = ["Block", "Transmission", "HammingStateError"]

logger = logging.getLogger(__name__)

_CLEAN_REPORT = ErrorReport(ErrorType.NONE, 0, True)

# Forward transitions that need no codec work
_NEXT_STEP: Dict[Step, Step] = {
    Step.INPUT: Step.ENCODING,
    Step.ENCODING: Step.NOISE,
    Step.DECODING: Step.CORRECTION,
}

_PREVIOUS_STEP: Dict[Step, Step] = {
    Step.ENCODING: Step.INPUT,
    Step.NOISE: Step.ENCODING,
    Step.DECODING: Step.NOISE,
    Step.CORRECTION: Step.DECODING,
    Step.OUTPUT: Step.CORRECTION,
}


class HammingStateError(RuntimeError):
    """An operation was requested at a step where it is not allowed."""


@dataclass
class Block:
    """
    One 4-bit data block and everything computed from it.

    Attributes:
        index: Position of the block in the message.
        label: Source character (text mode) or "B<n>" (binary mode).
        data_bits: Nibble as sent.
        encoded_bits: Transmitted codeword.
        received_bits: Codeword after channel noise or manual flips.
        syndrome: Syndrome of received_bits.
        corrected_bits: Word after correction.
        error_positions: 0-indexed bits differing from the codeword.
        report: Error classification of received_bits.
        decoded_bits: Extracted nibble once the block has been output.
    """

    index: int
    label: str
    data_bits: List[int]
    encoded_bits: List[int]
    received_bits: List[int]
    syndrome: List[int]
    corrected_bits: List[int]
    error_positions: List[int] = field(default_factory=list)
    report: ErrorReport = _CLEAN_REPORT
    decoded_bits: Optional[List[int]] = None

    @classmethod
    def build(cls, index: int, label: str, data_bits: Sequence[int], extended: bool) -> Block:
        """Encode a nibble into a fresh, uncorrupted block."""
        encoded = encode_extended(data_bits) if extended else encode(data_bits)
        return cls(
            index=index,
            label=label,
            data_bits=list(data_bits),
            encoded_bits=encoded,
            received_bits=list(encoded),
            syndrome=[0] * (EXTENDED_SYNDROME_BITS if extended else SYNDROME_BITS),
            corrected_bits=list(encoded),
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.error_positions)

    def __str__(self) -> str:
        return (
            f"Block[{self.index}] {self.label!r}: data={format_bits(self.data_bits)} "
            f"tx={format_bits(self.encoded_bits)} rx={format_bits(self.received_bits)} "
            f"{self.report.error_type.value}"
        )


class Transmission:
    """
    Step-by-step transmission of a message through a Hamming channel.

    Args:
        nibbles: 4-bit data blocks to send.
        extended: Use Hamming(8,4) SECDED instead of Hamming(7,4).
        error_count: Random errors injected per block (1, or 1-2 extended).
        rng: Random source for error injection.
        labels: Per-block display label, defaults to "B1", "B2", ...
        binary: Render the output as a bit string instead of text.
        encoding: Text encoding used to rebuild the output.

    Raises:
        ValueError: If there are no blocks or error_count is out of range.

    Examples:
        >>> tx = Transmission.from_binary("1011", rng=random.Random(1))
        >>> tx.run()
        '1011'
    """

    def __init__(
        self,
        nibbles: Sequence[Sequence[int]],
        extended: bool = False,
        error_count: int = 1,
        rng: Optional[random.Random] = None,
        labels: Optional[Sequence[str]] = None,
        binary: bool = False,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        if not nibbles:
            raise ValueError("Nothing to transmit: input produced no data blocks")

        max_errors = MAX_ERRORS_EXTENDED if extended else MAX_ERRORS_STANDARD
        if not 1 <= error_count <= max_errors:
            raise ValueError(f"Error count must be 1-{max_errors}, got {error_count}")

        if labels is None:
            labels = [f"B{i + 1}" for i in range(len(nibbles))]
        elif len(labels) != len(nibbles):
            raise ValueError(f"Expected {len(nibbles)} labels, got {len(labels)}")

        self.extended = extended
        self.error_count = error_count
        self.max_errors = max_errors
        self.binary = binary
        self.encoding = encoding
        self._rng = rng
        self._nibbles = [list(n) for n in nibbles]
        self._labels = list(labels)

        self.blocks: List[Block] = []
        self.current = 0
        self.step = Step.INPUT
        self.decoded: List[List[int]] = []
        self.reset()

        logger.info(
            "Transmission of %d block(s) using %s",
            len(self.blocks),
            "Hamming(8,4) SECDED" if extended else "Hamming(7,4) SEC",
        )

    @classmethod
    def from_text(cls, text: str, encoding: str = DEFAULT_ENCODING, **kwargs) -> Transmission:
        """
        Build a transmission for a text message.

        The text is encoded as one stream, so a byte order mark is only
        written once. Each byte gives two blocks (high nibble first), both
        labelled with the character that produced it.
        """
        encoder = codecs.getincrementalencoder(encoding)()
        nibbles: List[List[int]] = []
        labels: List[str] = []
        for i, char in enumerate(text):
            data = encoder.encode(char, final=i == len(text) - 1)
            char_nibbles = bytes_to_nibbles(data)
            nibbles.extend(char_nibbles)
            labels.extend([char] * len(char_nibbles))
        return cls(nibbles, labels=labels, binary=False, encoding=encoding, **kwargs)

    @classmethod
    def from_binary(cls, binary: str, **kwargs) -> Transmission:
        """Build a transmission for a string of 0 and 1."""
        return cls(parse_binary(binary), binary=True, **kwargs)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def block(self) -> Block:
        """Block currently being processed."""
        return self.blocks[self.current]

    @property
    def finished(self) -> bool:
        return self.step is Step.OUTPUT and self.current == len(self.blocks) - 1

    @property
    def output(self) -> str:
        """Message rebuilt from the blocks decoded so far."""
        if self.binary:
            return "".join(format_bits(n) for n in self.decoded)
        return nibbles_to_text(self.decoded, self.encoding)

    def reset(self) -> None:
        """Re-encode every block and rewind to the first INPUT step."""
        self.blocks = [
            Block.build(i, label, nibble, self.extended)
            for i, (label, nibble) in enumerate(zip(self._labels, self._nibbles))
        ]
        self.current = 0
        self.step = Step.INPUT
        self.decoded = []

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def step_forward(self) -> Step:
        """
        Advance one step.

        Returns:
            The step reached. At the final OUTPUT step nothing changes.
        """
        if self.step in _NEXT_STEP:
            self.step = _NEXT_STEP[self.step]
        elif self.step is Step.NOISE:
            self._transmit(self.block)
            self.step = Step.DECODING
        elif self.step is Step.CORRECTION:
            self._correct(self.block)
            self.step = Step.OUTPUT
        elif not self.finished:
            self.current += 1
            self.step = Step.INPUT

        logger.debug("Block %d: %s", self.current, self.step.value)
        return self.step

    def step_backward(self) -> Step:
        """
        Go back one step.

        Leaving OUTPUT drops the nibble that step produced. From the INPUT
        step of a block the previous block's OUTPUT step is reached.
        """
        if self.step is Step.OUTPUT:
            self.decoded.pop()
            self.block.decoded_bits = None
            self.step = Step.CORRECTION
        elif self.step in _PREVIOUS_STEP:
            self.step = _PREVIOUS_STEP[self.step]
        elif self.current > 0:
            self.current -= 1
            self.step = Step.OUTPUT

        return self.step

    def run(self) -> str:
        """Step until the last block has been output and return the message."""
        while not self.finished:
            self.step_forward()
        return self.output

    def flip(self, index: int) -> bool:
        """
        Toggle a bit of the current block's received word.

        Only allowed during the NOISE step. At most one (standard) or two
        (extended) bits may differ from the codeword; toggling another
        healthy bit beyond that is ignored.

        Returns:
            True if the bit was toggled.
        """
        if self.step is not Step.NOISE:
            raise HammingStateError(f"Bits can only be flipped at the noise step, not {self.step.value}")

        block = self.block
        result = flip_bit(block.encoded_bits, block.received_bits, index, self.max_errors)
        if result.applied:
            block.received_bits = result.received
            block.error_positions = result.error_positions
            self._analyze(block)
        return result.applied

    def summary(self) -> Dict[str, int]:
        """Count decoded blocks by outcome."""
        counts = {"blocks": len(self.blocks), "clean": 0, "corrected": 0, "detected": 0, "wrong": 0}
        for block in self.blocks[: len(self.decoded)]:
            if block.report.error_type is ErrorType.DOUBLE:
                counts["detected"] += 1
            elif block.decoded_bits != block.data_bits:
                counts["wrong"] += 1
            elif block.report.error_type is ErrorType.SINGLE:
                counts["corrected"] += 1
            else:
                counts["clean"] += 1
        return counts

    # -------------------------------------------------------------------------
    # Codec calls
    # -------------------------------------------------------------------------

    def _transmit(self, block: Block) -> None:
        if block.has_errors:
            logger.debug("Block %d: keeping manual errors at %s", block.index, block.error_positions)
            return

        if self.extended:
            block.received_bits, block.error_positions = inject_multiple(
                block.encoded_bits, self.error_count, self._rng
            )
        else:
            block.received_bits, position = inject_single(block.encoded_bits, self._rng)
            block.error_positions = [position - 1]
        self._analyze(block)

    def _analyze(self, block: Block) -> None:
        if self.extended:
            block.syndrome = syndrome_extended(block.received_bits)
            block.report = classify_extended(block.syndrome)
        else:
            block.syndrome = syndrome(block.received_bits)
            block.report = classify(block.syndrome)

    def _correct(self, block: Block) -> None:
        decoder: Callable[[Sequence[int]], DecodeResult] = decode_extended if self.extended else decode
        result = decoder(block.received_bits)
        block.corrected_bits = result.corrected
        block.decoded_bits = result.data
        self.decoded.append(result.data)

        if not result.report.can_correct:
            logger.warning(
                "Block %d: double error detected, retransmission required", block.index
            )

"""
Miscellaneous helpers

Conversions between user input (text or a binary string) and the 4-bit
nibbles the codecs work on, bit formatting for display, and the
DictDotAttribute configuration container.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, List, TypeVar

from hamming.core.constants import DATA_BITS, DEFAULT_ENCODING
from hamming.core.matrix import bits_to_int, check_bits, int_to_bits

__all__ = [
    "DictDotAttribute",
    "chunk",
    "format_bits",
    "bytes_to_nibbles",
    "text_to_nibbles",
    "nibbles_to_text",
    "parse_binary",
    "nibble_to_hex",
    "char_to_binary",
]

T = TypeVar("T", bound=Sequence[Any])

_BINARY_RE = re.compile(r"[01]+")
_WHITESPACE_RE = re.compile(r"\s")


class DictDotAttribute(dict):
    """
    A dict whose keys can also be read and written as attributes.

    Nested plain dicts are converted on construction.

    >>> x = DictDotAttribute({"abc": True})
    >>> x.abc
    True
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        for key, value in list(self.items()):
            if isinstance(value, dict) and not isinstance(value, DictDotAttribute):
                self[key] = DictDotAttribute(value)

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value


def chunk(data: T, size: int) -> List[T]:
    """
    Split a sequence into pieces of ``size`` elements.

    The last piece is shorter when the length is not a multiple of size.

    >>> chunk([1, 0, 1, 1, 0, 1], 4)
    [[1, 0, 1, 1], [0, 1]]
    """
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [data[i:i + size] for i in range(0, len(data), size)]  # type: ignore[misc]


def format_bits(bits: Sequence[int], group: int = 0) -> str:
    """
    Render a bit vector as a string of 0 and 1.

    >>> format_bits([1, 0, 1, 1, 0, 1, 1, 0], group=4)
    '1011 0110'
    """
    text = "".join(str(int(b)) for b in bits)
    if group:
        return " ".join(chunk(text, group))
    return text


def bytes_to_nibbles(data: bytes) -> List[List[int]]:
    """
    Split bytes into 4-bit data blocks, high nibble first.

    >>> bytes_to_nibbles(b"H")
    [[0, 1, 0, 0], [1, 0, 0, 0]]
    """
    nibbles: List[List[int]] = []
    for byte in data:
        nibbles.append(int_to_bits(byte >> 4, DATA_BITS))
        nibbles.append(int_to_bits(byte & 0x0F, DATA_BITS))
    return nibbles


def text_to_nibbles(text: str, encoding: str = DEFAULT_ENCODING) -> List[List[int]]:
    """
    Convert text to 4-bit data blocks.

    Each encoded byte becomes its high nibble followed by its low nibble,
    most significant bit first.

    >>> text_to_nibbles("H")
    [[0, 1, 0, 0], [1, 0, 0, 0]]
    """
    return bytes_to_nibbles(text.encode(encoding))


def nibbles_to_text(
    nibbles: Sequence[Sequence[int]],
    encoding: str = DEFAULT_ENCODING,
    errors: str = "replace",
) -> str:
    """
    Convert (high, low) nibble pairs back to text.

    A trailing unpaired nibble is ignored. Bytes that do not decode are
    handled according to ``errors`` (see bytes.decode).

    >>> nibbles_to_text([[0, 1, 0, 0], [1, 0, 0, 0], [0, 1, 1, 0], [1, 0, 0, 1]])
    'Hi'
    """
    data = bytearray()
    for i in range(0, len(nibbles) - 1, 2):
        high = check_bits(nibbles[i], DATA_BITS, "Nibble")
        low = check_bits(nibbles[i + 1], DATA_BITS, "Nibble")
        data.append((bits_to_int(high) << 4) | bits_to_int(low))
    return data.decode(encoding, errors)


def parse_binary(binary: str) -> List[List[int]]:
    """
    Parse a binary string into 4-bit data blocks.

    Whitespace is ignored and the input is right-padded with zeros to a
    multiple of 4 bits.

    >>> parse_binary("1011 01")
    [[1, 0, 1, 1], [0, 1, 0, 0]]

    Raises:
        ValueError: If the string is empty or holds anything but 0 and 1.
    """
    clean = _WHITESPACE_RE.sub("", binary)
    if not _BINARY_RE.fullmatch(clean):
        raise ValueError(f"Binary input must contain only 0 and 1, got {binary!r}")

    padded = clean.ljust(-(-len(clean) // DATA_BITS) * DATA_BITS, "0")
    return [[int(c) for c in piece] for piece in chunk(padded, DATA_BITS)]


def nibble_to_hex(nibble: Sequence[int]) -> str:
    """
    Single uppercase hex digit of a 4-bit block.

    >>> nibble_to_hex([1, 0, 1, 1])
    'B'
    """
    return f"{bits_to_int(check_bits(nibble, DATA_BITS, 'Nibble')):X}"


def char_to_binary(char: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    8-bit binary form of each encoded byte of a character.

    >>> char_to_binary("H")
    '01001000'
    """
    return " ".join(f"{byte:08b}" for byte in char.encode(encoding))

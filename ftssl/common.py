"""Shared helpers for the Merkle–Damgård digests: rotations, block reading,
padding and hex rendering of the final state."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import BinaryIO, Union

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
BITS_IN_BYTE = 8
FIRST_BYTE = 0x80

Source = Union[bytes, bytearray, memoryview, str, BinaryIO]


def right_rotate(x: int, n: int) -> int:
    """Rotate a 32-bit word right by ``n`` bits."""
    x &= MASK32
    return ((x >> n) | (x << (32 - n))) & MASK32


def right_rotate64(x: int, n: int) -> int:
    """Rotate a 64-bit word right by ``n`` bits."""
    x &= MASK64
    return ((x >> n) | (x << (64 - n))) & MASK64


def reverse_bytes(num: int, size: int) -> int:
    """Reverse the order of the low ``size`` bytes of ``num``."""
    if size < 0:
        raise ValueError("size must not be negative")
    low = num & ((1 << (BITS_IN_BYTE * size)) - 1)
    return int.from_bytes(low.to_bytes(size, "little"), "big")


def encode_length(length: int, size: int, little_endian: bool) -> bytes:
    """Encode a message length in bytes as its bit count over ``size`` bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    bits = (length * BITS_IN_BYTE) & ((1 << (BITS_IN_BYTE * size)) - 1)
    return bits.to_bytes(size, "little" if little_endian else "big")


def _read_full(stream: BinaryIO, size: int) -> bytes:
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        if isinstance(chunk, str):
            raise TypeError("stream must be opened in binary mode")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def iter_blocks(source: Source, block_size: int) -> Iterator[bytes]:
    """Yield consecutive blocks of ``block_size`` bytes from a buffer, a string
    or a binary stream; only the last block may be shorter."""
    if block_size <= 0:
        raise ValueError("block_size must be positive")
    if isinstance(source, str):
        source = source.encode("utf-8")
    if isinstance(source, (bytes, bytearray, memoryview)):
        data = bytes(source)
        for start in range(0, len(data), block_size):
            yield data[start:start + block_size]
        return
    while True:
        block = _read_full(source, block_size)
        if not block:
            return
        yield block
        if len(block) < block_size:
            return


def padded_blocks(
    source: Source, block_size: int, length_size: int, little_endian: bool
) -> Iterator[bytes]:
    """Yield full blocks of the message followed by the 0x80 marker, zero
    padding and the bit length in the last ``length_size`` bytes."""
    if length_size <= 0 or block_size <= length_size:
        raise ValueError("block_size must exceed a positive length_size")
    total = 0
    tail = b""
    for block in iter_blocks(source, block_size):
        total += len(block)
        if len(block) < block_size:
            tail = block
            break
        yield block
    tail += bytes([FIRST_BYTE])
    limit = block_size - length_size
    if len(tail) > limit:
        yield tail.ljust(block_size, b"\0")
        tail = b""
    yield tail.ljust(limit, b"\0") + encode_length(total, length_size, little_endian)


def hex_digest(
    words: Iterable[int], word_bits: int, little_endian: bool, length: int
) -> str:
    """Render state words as lower-case hex, each word in the given byte order,
    truncated to ``length`` characters."""
    if word_bits <= 0 or word_bits % BITS_IN_BYTE:
        raise ValueError("word_bits must be a positive multiple of 8")
    order = "little" if little_endian else "big"
    word_bytes = word_bits // BITS_IN_BYTE
    mask = (1 << word_bits) - 1
    text = "".join(
        (word & mask).to_bytes(word_bytes, order).hex() for word in words
    )
    if length < 0 or length > len(text):
        raise ValueError("requested digest length exceeds the state size")
    return text[:length]
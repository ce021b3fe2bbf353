"""The SHA-256 and SHA-224 message digests."""

from __future__ import annotations

import struct

from .common import MASK32, Source, hex_digest, padded_blocks, right_rotate

SHA256_LENGTH = 64
SHA224_LENGTH = 56
BLOCK_SIZE = 64
LENGTH_SIZE = 8
ROUNDS = 64

_CONSTANTS = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL_SHA256 = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_INITIAL_SHA224 = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)


def ch(x: int, y: int, z: int) -> int:
    """Choose bits of ``y`` where ``x`` is set and of ``z`` elsewhere."""
    return ((x & y) ^ (~x & z)) & MASK32


def maj(x: int, y: int, z: int) -> int:
    """Bitwise majority of three 32-bit words."""
    return ((x & y) ^ (x & z) ^ (y & z)) & MASK32


def rotation_sum(num: int, x: int, y: int, z: int) -> int:
    """XOR of ``num`` rotated right by ``x``, ``y`` and ``z`` bits."""
    return right_rotate(num, x) ^ right_rotate(num, y) ^ right_rotate(num, z)


def _schedule_rotates(num: int, x: int, y: int, z: int) -> int:
    return right_rotate(num, x) ^ right_rotate(num, y) ^ ((num & MASK32) >> z)


def prepare_msg_schedule(block: bytes) -> list[int]:
    """Expand a 64-byte block into the 64-word message schedule."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    schedule = list(struct.unpack(">16I", bytes(block)))
    for i in range(16, ROUNDS):
        sc0 = _schedule_rotates(schedule[i - 15], 7, 18, 3)
        sc1 = _schedule_rotates(schedule[i - 2], 17, 19, 10)
        schedule.append((sc1 + schedule[i - 7] + sc0 + schedule[i - 16]) & MASK32)
    return schedule


def _compress(state: list[int], block: bytes) -> None:
    a, b, c, d, e, f, g, h = state
    for constant, word in zip(_CONSTANTS, prepare_msg_schedule(block)):
        t1 = (h + rotation_sum(e, 6, 11, 25) + ch(e, f, g) + constant + word) & MASK32
        t2 = (rotation_sum(a, 2, 13, 22) + maj(a, b, c)) & MASK32
        h, g, f, e = g, f, e, (d + t1) & MASK32
        d, c, b, a = c, b, a, (t1 + t2) & MASK32
    state[:] = [
        (old + new) & MASK32 for old, new in zip(state, (a, b, c, d, e, f, g, h))
    ]


def _digest(data: Source, initial: tuple, length: int) -> str:
    state = list(initial)
    for block in padded_blocks(data, BLOCK_SIZE, LENGTH_SIZE, False):
        _compress(state, block)
    return hex_digest(state, 32, False, length)


def sha256(data: Source) -> str:
    """Return the SHA-256 digest of ``data`` as 64 lower-case hex characters."""
    return _digest(data, _INITIAL_SHA256, SHA256_LENGTH)


def sha224(data: Source) -> str:
    """Return the SHA-224 digest of ``data`` as 56 lower-case hex characters."""
    return _digest(data, _INITIAL_SHA224, SHA224_LENGTH)
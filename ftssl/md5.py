"""The MD5 message digest."""

from __future__ import annotations

import struct

from .common import MASK32, Source, hex_digest, padded_blocks

MD5_LENGTH = 32
BLOCK_SIZE = 64
LENGTH_SIZE = 8

_CONSTANTS = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


def first_round(x: int, y: int, z: int) -> int:
    """F(x, y, z): choose y where x is set, z elsewhere."""
    return ((x & y) | (~x & z)) & MASK32


def second_round(x: int, y: int, z: int) -> int:
    """G(x, y, z): choose x where z is set, y elsewhere."""
    return ((x & z) | (~z & y)) & MASK32


def third_round(x: int, y: int, z: int) -> int:
    """H(x, y, z): parity of the three words."""
    return (x ^ y ^ z) & MASK32


def fourth_round(x: int, y: int, z: int) -> int:
    """I(x, y, z) = y ^ (x | ~z)."""
    return (y ^ (~z | x)) & MASK32


def left_rotate(x: int, n: int) -> int:
    """Rotate a 32-bit word left by ``n`` bits."""
    x &= MASK32
    return ((x << n) | (x >> (32 - n))) & MASK32


def _message_index(i: int) -> tuple:
    if i < 16:
        return first_round, i
    if i < 32:
        return second_round, (5 * i + 1) % 16
    if i < 48:
        return third_round, (3 * i + 5) % 16
    return fourth_round, (7 * i) % 16


def _compress(state: list[int], block: bytes) -> None:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i, (constant, shift) in enumerate(zip(_CONSTANTS, _SHIFTS)):
        func, index = _message_index(i)
        mixed = (func(b, c, d) + a + constant + words[index]) & MASK32
        a, b, c, d = d, (b + left_rotate(mixed, shift)) & MASK32, b, c
    for k, value in enumerate((a, b, c, d)):
        state[k] = (state[k] + value) & MASK32


def md5(data: Source) -> str:
    """Return the MD5 digest of ``data`` as 32 lower-case hex characters."""
    state = list(_INITIAL)
    for block in padded_blocks(data, BLOCK_SIZE, LENGTH_SIZE, True):
        _compress(state, block)
    return hex_digest(state, 32, True, MD5_LENGTH)
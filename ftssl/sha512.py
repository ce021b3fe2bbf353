"""The SHA-512 and SHA-384 message digests."""

from __future__ import annotations

import struct

from .common import MASK64, Source, hex_digest, padded_blocks, right_rotate64

SHA512_LENGTH = 128
SHA384_LENGTH = 96
BLOCK_SIZE = 128
LENGTH_SIZE = 16
ROUNDS = 80

_CONSTANTS = (
    0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F,
    0xE9B5DBA58189DBBC, 0x3956C25BF348B538, 0x59F111F1B605D019,
    0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118, 0xD807AA98A3030242,
    0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235,
    0xC19BF174CF692694, 0xE49B69C19EF14AD2, 0xEFBE4786384F25E3,
    0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65, 0x2DE92C6F592B0275,
    0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
    0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F,
    0xBF597FC7BEEF0EE4, 0xC6E00BF33DA88FC2, 0xD5A79147930AA725,
    0x06CA6351E003826F, 0x142929670A0E6E70, 0x27B70A8546D22FFC,
    0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
    0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6,
    0x92722C851482353B, 0xA2BFE8A14CF10364, 0xA81A664BBC423001,
    0xC24B8B70D0F89791, 0xC76C51A30654BE30, 0xD192E819D6EF5218,
    0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99,
    0x34B0BCB5E19B48A8, 0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB,
    0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3, 0x748F82EE5DEFB2FC,
    0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
    0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915,
    0xC67178F2E372532B, 0xCA273ECEEA26619C, 0xD186B8C721C0C207,
    0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178, 0x06F067AA72176FBA,
    0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
    0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC,
    0x431D67C49C100D4C, 0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A,
    0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
)

_INITIAL_SHA512 = (
    0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1, 0x510E527FADE682D1, 0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
)

_INITIAL_SHA384 = (
    0xCBBB9D5DC1059ED8, 0x629A292A367CD507, 0x9159015A3070DD17,
    0x152FECD8F70E5939, 0x67332667FFC00B31, 0x8EB44A8768581511,
    0xDB0C2E0D64F98FA7, 0x47B5481DBEFA4FA4,
)


def ch64(x: int, y: int, z: int) -> int:
    """Choose bits of ``y`` where ``x`` is set and of ``z`` elsewhere."""
    return ((x & y) ^ (~x & z)) & MASK64


def maj64(x: int, y: int, z: int) -> int:
    """Bitwise majority of three 64-bit words."""
    return ((x & y) ^ (x & z) ^ (y & z)) & MASK64


def sum64(num: int, x: int, y: int, z: int) -> int:
    """XOR of ``num`` rotated right by ``x``, ``y`` and ``z`` bits."""
    return right_rotate64(num, x) ^ right_rotate64(num, y) ^ right_rotate64(num, z)


def _schedule_rotates64(num: int, x: int, y: int, z: int) -> int:
    return right_rotate64(num, x) ^ right_rotate64(num, y) ^ ((num & MASK64) >> z)


def prepare_message_schedule64(block: bytes) -> list[int]:
    """Expand a 128-byte block into the 80-word message schedule."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    schedule = list(struct.unpack(">16Q", bytes(block)))
    for i in range(16, ROUNDS):
        sc0 = _schedule_rotates64(schedule[i - 15], 1, 8, 7)
        sc1 = _schedule_rotates64(schedule[i - 2], 19, 61, 6)
        schedule.append((sc1 + schedule[i - 7] + sc0 + schedule[i - 16]) & MASK64)
    return schedule


def _compress(state: list[int], block: bytes) -> None:
    a, b, c, d, e, f, g, h = state
    for constant, word in zip(_CONSTANTS, prepare_message_schedule64(block)):
        t1 = (h + sum64(e, 14, 18, 41) + ch64(e, f, g) + constant + word) & MASK64
        t2 = (sum64(a, 28, 34, 39) + maj64(a, b, c)) & MASK64
        h, g, f, e = g, f, e, (d + t1) & MASK64
        d, c, b, a = c, b, a, (t1 + t2) & MASK64
    state[:] = [
        (old + new) & MASK64 for old, new in zip(state, (a, b, c, d, e, f, g, h))
    ]


def _digest(data: Source, initial: tuple, length: int) -> str:
    state = list(initial)
    for block in padded_blocks(data, BLOCK_SIZE, LENGTH_SIZE, False):
        _compress(state, block)
    return hex_digest(state, 64, False, length)


def sha512(data: Source) -> str:
    """Return the SHA-512 digest of ``data`` as 128 lower-case hex characters."""
    return _digest(data, _INITIAL_SHA512, SHA512_LENGTH)


def sha384(data: Source) -> str:
    """Return the SHA-384 digest of ``data`` as 96 lower-case hex characters."""
    return _digest(data, _INITIAL_SHA384, SHA384_LENGTH)
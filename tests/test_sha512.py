import hashlib
import io
import struct

import pytest
from hypothesis import given, strategies as st

from ftssl.common import right_rotate64
from ftssl.sha512 import (
    ch64,
    maj64,
    prepare_message_schedule64,
    sha384,
    sha512,
    sum64,
)

BOUNDARY_LENGTHS = [0, 1, 111, 112, 113, 119, 120, 127, 128, 129, 239, 240, 256, 1000]
MASK64 = 0xFFFFFFFFFFFFFFFF
WORDS = st.integers(min_value=0, max_value=MASK64)


def test_sha512_abc_known_value():
    assert sha512(b"abc") == (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    )


@pytest.mark.parametrize("size", BOUNDARY_LENGTHS)
def test_sha512_matches_reference_at_boundaries(size):
    data = bytes(i % 251 for i in range(size))
    assert sha512(data) == hashlib.sha512(data).hexdigest()


@pytest.mark.parametrize("size", BOUNDARY_LENGTHS)
def test_sha384_matches_reference_at_boundaries(size):
    data = bytes((i * 13) % 256 for i in range(size))
    assert sha384(data) == hashlib.sha384(data).hexdigest()


@given(st.binary(max_size=400))
def test_sha512_random(data):
    assert sha512(data) == hashlib.sha512(data).hexdigest()


@given(st.binary(max_size=400))
def test_sha384_random(data):
    assert sha384(data) == hashlib.sha384(data).hexdigest()


def test_stream_and_bytes_agree():
    data = bytes(range(256)) * 3
    assert sha512(io.BytesIO(data)) == sha512(data)
    assert sha384(io.BytesIO(data)) == sha384(data)


def test_string_input_is_utf8():
    text = "naïve café"
    assert sha384(text) == hashlib.sha384(text.encode("utf-8")).hexdigest()


def test_digest_lengths():
    assert len(sha512(b"x")) == 128
    assert len(sha384(b"x")) == 96


@given(WORDS, WORDS, WORDS)
def test_ch64_selects(x, y, z):
    result = ch64(x, y, z)
    assert result & x == y & x
    assert result & ~x & MASK64 == z & ~x & MASK64


@given(WORDS, WORDS)
def test_maj64_with_equal_pair(x, z):
    assert maj64(x, x, z) == x
    assert maj64(x, z, x) == x


@given(WORDS, st.integers(min_value=1, max_value=63))
def test_sum64_same_rotation(num, n):
    assert sum64(num, n, n, n) == right_rotate64(num, n)


@given(st.binary(min_size=128, max_size=128))
def test_schedule_starts_with_big_endian_words(block):
    schedule = prepare_message_schedule64(block)
    assert len(schedule) == 80
    assert schedule[:16] == list(struct.unpack(">16Q", block))
    assert all(0 <= word <= MASK64 for word in schedule)


def test_schedule_of_zero_block_is_zero():
    assert prepare_message_schedule64(bytes(128)) == [0] * 80


@pytest.mark.parametrize("size", [0, 64, 127, 129])
def test_schedule_rejects_wrong_block_size(size):
    with pytest.raises(ValueError):
        prepare_message_schedule64(bytes(size))
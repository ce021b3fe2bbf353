import hashlib
import io
import struct

import pytest
from hypothesis import given, strategies as st

from ftssl.common import right_rotate
from ftssl.sha256 import ch, maj, prepare_msg_schedule, rotation_sum, sha224, sha256

BOUNDARY_LENGTHS = [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129, 1000]
WORDS = st.integers(min_value=0, max_value=0xFFFFFFFF)


def test_sha256_empty_known_value():
    assert sha256(b"") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_sha256_abc_known_value():
    assert sha256("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize("size", BOUNDARY_LENGTHS)
def test_sha256_matches_reference_at_boundaries(size):
    data = bytes(i % 251 for i in range(size))
    assert sha256(data) == hashlib.sha256(data).hexdigest()


@pytest.mark.parametrize("size", BOUNDARY_LENGTHS)
def test_sha224_matches_reference_at_boundaries(size):
    data = bytes((i * 7) % 256 for i in range(size))
    assert sha224(data) == hashlib.sha224(data).hexdigest()


@given(st.binary(max_size=300))
def test_sha256_random(data):
    assert sha256(data) == hashlib.sha256(data).hexdigest()


@given(st.binary(max_size=300))
def test_sha224_random(data):
    assert sha224(data) == hashlib.sha224(data).hexdigest()


def test_stream_and_bytes_agree():
    data = b"The quick brown fox jumps over the lazy dog" * 5
    assert sha256(io.BytesIO(data)) == sha256(data)
    assert sha224(io.BytesIO(data)) == sha224(data)


def test_string_input_is_utf8():
    text = "héllo wörld"
    assert sha256(text) == hashlib.sha256(text.encode("utf-8")).hexdigest()


def test_digest_lengths():
    assert len(sha256(b"x")) == 64
    assert len(sha224(b"x")) == 56


@given(WORDS, WORDS, WORDS)
def test_ch_selects(x, y, z):
    result = ch(x, y, z)
    assert result & x == y & x
    assert result & ~x & 0xFFFFFFFF == z & ~x & 0xFFFFFFFF


@given(WORDS, WORDS)
def test_maj_with_equal_pair(x, z):
    assert maj(x, x, z) == x
    assert maj(z, x, x) == x


@given(WORDS, st.integers(min_value=1, max_value=31))
def test_rotation_sum_same_rotation(num, n):
    assert rotation_sum(num, n, n, n) == right_rotate(num, n)


def test_rotation_sum_zero():
    assert rotation_sum(0, 6, 11, 25) == 0


@given(st.binary(min_size=64, max_size=64))
def test_schedule_starts_with_big_endian_words(block):
    schedule = prepare_msg_schedule(block)
    assert len(schedule) == 64
    assert schedule[:16] == list(struct.unpack(">16I", block))
    assert all(0 <= word <= 0xFFFFFFFF for word in schedule)


def test_schedule_of_zero_block_is_zero():
    assert prepare_msg_schedule(bytes(64)) == [0] * 64


@pytest.mark.parametrize("size", [0, 63, 65, 128])
def test_schedule_rejects_wrong_block_size(size):
    with pytest.raises(ValueError):
        prepare_msg_schedule(bytes(size))
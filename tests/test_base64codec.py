import base64
import os

import pytest

from tmxload.base64codec import decode, encode


def test_encode_known_value():
    assert encode(b"Man") == "TWFu"


def test_decode_known_value():
    assert decode("TWFu") == b"Man"


@pytest.mark.parametrize("length", [0, 1, 2, 3, 4, 5, 17, 64, 255])
def test_round_trip(length):
    data = os.urandom(length)
    assert decode(encode(data)) == data


@pytest.mark.parametrize("data", [b"", b"a", b"ab", b"abc", bytes(range(256))])
def test_encode_matches_standard_base64(data):
    assert encode(data) == base64.b64encode(data).decode("ascii")


def test_padding_length_is_multiple_of_four():
    for length in range(10):
        assert len(encode(b"x" * length)) % 4 == 0


def test_decode_without_padding():
    assert decode(encode(b"Ma").rstrip("=")) == b"Ma"
    assert decode(encode(b"M").rstrip("=")) == b"M"


def test_decode_stops_at_invalid_character():
    assert decode("TWFu!TWFu") == decode("TWFu")


def test_decode_stops_at_padding():
    assert decode(encode(b"Ma") + encode(b"xyz")) == b"Ma"


def test_decode_stops_at_whitespace():
    assert decode(encode(b"abc") + "\n" + encode(b"def")) == b"abc"


def test_single_leftover_character_yields_nothing():
    assert decode("TWFuT") == decode("TWFu")


def test_decode_empty():
    assert decode("") == b""
import pytest

from cosmokit.exceptions import ValidationError
from cosmokit.utils.encoding import (
    bytes_to_hex,
    convert_bits,
    decode_bech32,
    encode_bech32,
    hex_to_bytes,
)


def test_hex_bytes_roundtrip():
    data = b"\x00\x01deadbeef"
    hex_str = bytes_to_hex(data, prefix=True)
    assert hex_str.startswith("0x")
    assert hex_to_bytes(hex_str) == data
    with pytest.raises(ValidationError):
        hex_to_bytes("zzzz")


def test_convert_bits():
    assert convert_bits(b"\xff", 8, 5) == [31, 28]
    assert convert_bits([31, 28], 5, 8, pad=False) == [255]
    with pytest.raises(ValidationError):
        convert_bits([32], 5, 8)
    with pytest.raises(ValidationError):
        convert_bits([31, 29], 5, 8, pad=False)


def test_bech32_roundtrip():
    payload = bytes(range(20))
    encoded = encode_bech32("cosmosvaloper", payload)
    assert decode_bech32(encoded) == ("cosmosvaloper", payload)


def test_bech32_rejects_bad_input():
    with pytest.raises(ValidationError):
        encode_bech32("", b"\x00")
    with pytest.raises(ValidationError):
        decode_bech32("nosseparator")
    with pytest.raises(ValidationError):
        decode_bech32("cosmos1" + "b" * 40)
    with pytest.raises(ValidationError):
        decode_bech32("a1" + "q" * 100)

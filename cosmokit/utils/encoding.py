"""Encoding and decoding utilities for cosmokit."""

import hashlib
from typing import List, Tuple, Union

from Crypto.Hash import RIPEMD160

from ..exceptions import ValidationError
from ..types.common import HexStr

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "sha256",
    "hash160",
    "convert_bits",
    "encode_bech32",
    "decode_bech32",
]

# Constants
BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
BECH32_MAX_LENGTH = 90


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValidationError: If hex string is invalid
    """
    try:
        # Remove 0x prefix if present
        if isinstance(hex_str, str) and hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except ValueError as e:
        raise ValidationError(f"Invalid hex string: {hex_str}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """
    Convert bytes to hex string.

    Args:
        data: Bytes to encode
        prefix: Add 0x prefix

    Returns:
        Hex string
    """
    hex_str = data.hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def sha256(data: bytes) -> bytes:
    """Perform a single SHA256 hash."""
    return hashlib.sha256(data).digest()


def hash160(data: bytes) -> bytes:
    """Perform RIPEMD160(SHA256(data))."""
    return RIPEMD160.new(sha256(data)).digest()


def convert_bits(data: Union[bytes, List[int]], from_bits: int, to_bits: int, pad: bool = True) -> List[int]:
    """
    Regroup a sequence of integers between bit widths.

    Args:
        data: Input values, each below 2**from_bits
        from_bits: Width of input values
        to_bits: Width of output values
        pad: Zero-pad a trailing partial group

    Returns:
        Regrouped values

    Raises:
        ValidationError: If a value is out of range or padding is invalid
    """
    value = 0
    bits = 0
    result = []
    max_value = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1

    for item in data:
        if item < 0 or item >> from_bits:
            raise ValidationError(f"Value {item} does not fit in {from_bits} bits")
        value = ((value << from_bits) | item) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((value >> bits) & max_value)

    if pad:
        if bits:
            result.append((value << (to_bits - bits)) & max_value)
    elif bits >= from_bits or ((value << (to_bits - bits)) & max_value):
        raise ValidationError("Invalid padding in bit conversion")

    return result


def _bech32_polymod(values: List[int]) -> int:
    """Compute Bech32 checksum polymod."""
    generator = [0x3b6a57b2, 0x26508e6d, 0x1ea119fa, 0x3d4233dd, 0x2a1462b3]
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1ffffff) << 5 ^ value
        for i in range(5):
            chk ^= generator[i] if ((top >> i) & 1) else 0
    return chk


def _bech32_hrp_expand(hrp: str) -> List[int]:
    """Expand human-readable part for Bech32."""
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def encode_bech32(hrp: str, data: bytes) -> str:
    """
    Encode bytes as a Bech32 string.

    Args:
        hrp: Human-readable part
        data: Payload bytes, regrouped into 5-bit words

    Returns:
        Bech32 encoded string
    """
    if not hrp or any(ord(c) < 33 or ord(c) > 126 for c in hrp):
        raise ValidationError(f"Invalid Bech32 human-readable part: {hrp!r}")

    values = convert_bits(data, 8, 5)

    # Calculate checksum
    polymod = _bech32_polymod(_bech32_hrp_expand(hrp) + values + [0, 0, 0, 0, 0, 0]) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]

    return hrp + "1" + "".join(BECH32_CHARSET[v] for v in values + checksum)


def decode_bech32(string: str) -> Tuple[str, bytes]:
    """
    Decode a Bech32 string.

    Args:
        string: Bech32 string

    Returns:
        Tuple of (hrp, payload bytes)

    Raises:
        ValidationError: If the string or its checksum is invalid
    """
    if string.lower() != string and string.upper() != string:
        raise ValidationError("Invalid Bech32 string: mixed case")
    if len(string) > BECH32_MAX_LENGTH:
        raise ValidationError("Invalid Bech32 string: too long")
    string = string.lower()

    # Find separator
    pos = string.rfind("1")
    if pos < 1 or pos + 7 > len(string):
        raise ValidationError("Invalid Bech32 string: bad separator position")

    hrp = string[:pos]
    values = []
    for char in string[pos + 1:]:
        index = BECH32_CHARSET.find(char)
        if index == -1:
            raise ValidationError(f"Invalid Bech32 character: {char}")
        values.append(index)

    # Verify checksum
    if _bech32_polymod(_bech32_hrp_expand(hrp) + values) != 1:
        raise ValidationError("Invalid Bech32 checksum")

    data = convert_bits(values[:-6], 5, 8, pad=False)
    return hrp, bytes(data)

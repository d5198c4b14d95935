import pytest

from cosmokit.exceptions import InvalidPrivateKey, InvalidPublicKeyLength
from cosmokit.utils import validation as v

from .conftest import ABANDON_PRIVATE_KEY, ABANDON_PUBLIC_KEY


def test_private_key_validation():
    assert v.validate_private_key("0x" + ABANDON_PRIVATE_KEY) == bytes.fromhex(ABANDON_PRIVATE_KEY)
    assert v.is_valid_private_key(ABANDON_PRIVATE_KEY)
    assert not v.is_valid_private_key("00" * 32)
    with pytest.raises(InvalidPrivateKey, match="32 bytes"):
        v.validate_private_key("abcd")
    with pytest.raises(InvalidPrivateKey, match="hexadecimal"):
        v.validate_private_key("xyz")


def test_public_key_validation():
    assert v.validate_public_key(ABANDON_PUBLIC_KEY) == bytes.fromhex(ABANDON_PUBLIC_KEY)
    assert v.is_valid_public_key(bytes.fromhex(ABANDON_PUBLIC_KEY))
    assert not v.is_valid_public_key("04" + "11" * 64)
    with pytest.raises(InvalidPublicKeyLength, match="33 bytes"):
        v.validate_public_key(b"\x02" * 65)

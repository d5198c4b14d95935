import pytest

from cosmokit.crypto.bip39 import (
    entropy_to_mnemonic,
    generate_mnemonic,
    is_valid_mnemonic,
    mnemonic_to_seed,
    mnemonic_to_seed_async,
    validate_mnemonic,
)
from cosmokit.exceptions import InvalidEntropyLength, InvalidMnemonic

from .conftest import ABANDON_MNEMONIC

ABANDON_SEED = (
    "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
    "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
)


def test_entropy_to_mnemonic_known_vectors():
    assert entropy_to_mnemonic(b"\x00" * 32) == " ".join(["abandon"] * 23 + ["art"])
    assert entropy_to_mnemonic(b"\xff" * 32) == " ".join(["zoo"] * 23 + ["vote"])
    assert entropy_to_mnemonic(b"\x7f" * 32) == (
        "legal winner thank year wave sausage worth useful legal winner thank year "
        "wave sausage worth useful legal winner thank year wave sausage worth title"
    )


def test_entropy_to_mnemonic_requires_32_bytes():
    with pytest.raises(InvalidEntropyLength) as exc:
        entropy_to_mnemonic(b"\x00" * 16)
    assert exc.value.length == 16


def test_generated_mnemonics_validate():
    for entropy in (bytes(range(32)), b"\x80" * 32, bytes.fromhex("9e" * 32)):
        mnemonic = entropy_to_mnemonic(entropy)
        assert len(mnemonic.split()) == 24
        assert validate_mnemonic(mnemonic) == mnemonic
        assert entropy_to_mnemonic(entropy) == mnemonic


def test_generate_mnemonic_uses_injected_source():
    calls = []

    def source(n):
        calls.append(n)
        return b"\x01" * n

    first = generate_mnemonic(source)
    assert generate_mnemonic(source) == first
    assert calls == [32, 32]


def test_generate_mnemonic_rejects_short_source():
    with pytest.raises(InvalidEntropyLength):
        generate_mnemonic(lambda n: b"\x00" * (n - 1))


def test_validate_mnemonic_failures():
    with pytest.raises(InvalidMnemonic):
        validate_mnemonic(" ".join(["abandon"] * 12))
    with pytest.raises(InvalidMnemonic, match="Unknown"):
        validate_mnemonic(ABANDON_MNEMONIC.replace("about", "aboutt"))
    with pytest.raises(InvalidMnemonic, match="words"):
        validate_mnemonic("abandon about")
    assert not is_valid_mnemonic("not a mnemonic")
    assert is_valid_mnemonic(ABANDON_MNEMONIC)


def test_validate_mnemonic_normalizes_whitespace():
    messy = "  " + ABANDON_MNEMONIC.replace(" ", "   \n") + " "
    assert validate_mnemonic(messy) == ABANDON_MNEMONIC


def test_mnemonic_to_seed_known_vector():
    seed = mnemonic_to_seed(ABANDON_MNEMONIC)
    assert len(seed) == 64
    assert seed.hex() == ABANDON_SEED


def test_mnemonic_to_seed_passphrase_changes_seed():
    assert mnemonic_to_seed(ABANDON_MNEMONIC, "TREZOR") != mnemonic_to_seed(ABANDON_MNEMONIC)


def test_mnemonic_to_seed_rejects_invalid_mnemonic():
    with pytest.raises(InvalidMnemonic):
        mnemonic_to_seed(" ".join(["abandon"] * 12))


@pytest.mark.asyncio
async def test_mnemonic_to_seed_async_matches_sync():
    seed = await mnemonic_to_seed_async(ABANDON_MNEMONIC)
    assert seed.hex() == ABANDON_SEED

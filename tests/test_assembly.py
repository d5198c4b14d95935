import json

import pytest

from cosmokit.crypto.signature import create_signature, sign_with_private_key
from cosmokit.exceptions import MalformedTxTree
from cosmokit.tx.assembly import create_broadcast_body, create_signed_tx

from .conftest import ABANDON_PRIVATE_KEY, ABANDON_PUBLIC_KEY


@pytest.fixture
def signature():
    raw = sign_with_private_key("payload", ABANDON_PRIVATE_KEY)
    return create_signature(raw, ABANDON_PUBLIC_KEY)


def test_create_signed_tx_sets_single_signature(create_market_tx, signature):
    signed = create_signed_tx(create_market_tx, signature)

    assert signed["signatures"] == [signature.to_dict()]
    assert signed["msg"] == create_market_tx["msg"]
    assert signed["memo"] == ""
    # input left untouched
    assert create_market_tx["signatures"] is None


def test_create_signed_tx_replaces_existing_signatures(create_market_tx, signature):
    create_market_tx["signatures"] = [{"signature": "old"}]
    signed = create_signed_tx(create_market_tx, signature.to_dict())
    assert signed["signatures"] == [signature.to_dict()]


def test_create_signed_tx_rejects_non_mapping(signature):
    with pytest.raises(MalformedTxTree):
        create_signed_tx(["not", "a", "tx"], signature)


def test_broadcast_body(create_market_tx, signature):
    signed = create_signed_tx(create_market_tx, signature)
    body = create_broadcast_body(signed)

    assert body.startswith('{"tx":')
    assert body.endswith(',"return":"block"}')
    assert json.loads(body) == {"tx": signed, "return": "block"}


def test_broadcast_body_mode_is_configurable(create_market_tx):
    body = json.loads(create_broadcast_body(create_market_tx, mode="sync"))
    assert body["return"] == "sync"

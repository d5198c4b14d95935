import pytest

from cosmokit.types import SignMeta

ABANDON_MNEMONIC = " ".join(["abandon"] * 11 + ["about"])

ABANDON_PRIVATE_KEY = "c4a48e2fce1481cd3294b4490f6678090ea98d3d0e5cd984558ab0968741b104"
ABANDON_PUBLIC_KEY = "024f4e2ad99c34d60b9ba6283c9431a8418af8673212961f97a77b6377fcd05b62"
ABANDON_ADDRESS = "cosmos19rl4cm2hmr8afy4kldpxz3fka4jguq0auqdal4"


@pytest.fixture
def create_market_tx():
    return {
        "msg": [
            {
                "type": "microtick/CreateMarket",
                "value": {
                    "Account": ABANDON_ADDRESS,
                    "Market": "LTCUSD",
                },
            }
        ],
        "fee": {"amount": None, "gas": "200000"},
        "signatures": None,
        "memo": "",
    }


@pytest.fixture
def send_tx():
    return {
        "msg": [
            {
                "type": "cosmos-sdk/MsgSend",
                "value": {
                    "from_address": ABANDON_ADDRESS,
                    "to_address": "cosmos1qqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqnrql8a",
                    "amount": [{"denom": "uatom", "amount": "1000"}],
                },
            }
        ],
        "fee": {"amount": [{"denom": "uatom", "amount": "500"}], "gas": "200000"},
        "signatures": None,
        "memo": "hello",
    }


@pytest.fixture
def mtzone_meta():
    return SignMeta(sequence="0", account_number="9", chain_id="mtzone")

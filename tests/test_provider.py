import base64
import json

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

import cosmokit
from cosmokit.crypto.signature import verify_signature
from cosmokit.exceptions import APIError, MalformedTxTree, NetworkError, ValidationError
from cosmokit.modules.transaction import unwrap_std_tx
from cosmokit.tx.sign_doc import create_sign_message
from cosmokit.types import SignMeta
from cosmokit.wallet import wallet_from_mnemonic

from .conftest import ABANDON_MNEMONIC


async def _start_server(unsigned_tx, received):
    async def get_unsigned(request):
        return web.json_response({"type": "auth/StdTx", "value": unsigned_tx})

    async def post_txs(request):
        received.append(await request.json())
        return web.json_response({"height": "12", "txhash": "ABCD"})

    async def missing(request):
        return web.Response(status=404, text="not found")

    async def broken(request):
        return web.Response(status=500, text="boom")

    app = web.Application()
    app.router.add_get("/microtick/createmarket/{account}/{market}", get_unsigned)
    app.router.add_post("/txs", post_txs)
    app.router.add_get("/missing", missing)
    app.router.add_get("/broken", broken)

    server = TestServer(app)
    await server.start_server()
    return server


@pytest.mark.asyncio
async def test_fetch_sign_and_broadcast(create_market_tx):
    received = []
    server = await _start_server(create_market_tx, received)
    wallet = wallet_from_mnemonic(ABANDON_MNEMONIC)
    meta = SignMeta(sequence="0", account_number="9", chain_id="mtzone")

    try:
        async with cosmokit.connect(str(server.make_url("/"))) as client:
            assert client.is_connected is True
            tx = await client.tx.fetch_unsigned(f"microtick/createmarket/{wallet.address}/ETHUSD")
            assert tx == create_market_tx

            result = await client.tx.sign_and_broadcast(tx, wallet, meta)
            assert result == {"height": "12", "txhash": "ABCD"}
        assert client.is_connected is False
    finally:
        await server.close()

    assert len(received) == 1
    body = received[0]
    assert body["return"] == "block"
    signature = body["tx"]["signatures"][0]
    assert signature["pub_key"]["type"] == "tendermint/PubKeySecp256k1"

    raw = base64.b64decode(signature["signature"])
    message = create_sign_message(create_market_tx, meta)
    assert verify_signature(message, raw, wallet.public_key)


@pytest.mark.asyncio
async def test_sign_and_broadcast_uses_config_chain_id(create_market_tx, mtzone_meta):
    received = []
    server = await _start_server(create_market_tx, received)
    wallet = wallet_from_mnemonic(ABANDON_MNEMONIC)
    config = cosmokit.ChainConfig(chain_id="mtzone")

    try:
        async with cosmokit.connect(str(server.make_url("/")), config=config) as client:
            await client.tx.sign_and_broadcast(create_market_tx, wallet, SignMeta(sequence="0", account_number="9"))
    finally:
        await server.close()

    raw = base64.b64decode(received[0]["tx"]["signatures"][0]["signature"])
    message = create_sign_message(create_market_tx, mtzone_meta)
    assert verify_signature(message, raw, wallet.public_key)


@pytest.mark.asyncio
async def test_sign_and_broadcast_requires_chain_id(create_market_tx):
    received = []
    server = await _start_server(create_market_tx, received)
    wallet = wallet_from_mnemonic(ABANDON_MNEMONIC)

    try:
        async with cosmokit.connect(str(server.make_url("/"))) as client:
            with pytest.raises(ValidationError, match="chain id"):
                await client.tx.sign_and_broadcast(create_market_tx, wallet, SignMeta(sequence="0", account_number="9"))
    finally:
        await server.close()

    assert received == []


@pytest.mark.asyncio
async def test_broadcast_uses_config_mode(create_market_tx):
    received = []
    server = await _start_server(create_market_tx, received)
    config = cosmokit.ChainConfig(broadcast_mode="sync")

    try:
        async with cosmokit.connect(str(server.make_url("/")), config=config) as client:
            await client.tx.broadcast(create_market_tx)
            await client.tx.broadcast(create_market_tx, mode="async")
    finally:
        await server.close()

    assert [body["return"] for body in received] == ["sync", "async"]


@pytest.mark.asyncio
async def test_http_errors_are_mapped(create_market_tx):
    server = await _start_server(create_market_tx, [])

    try:
        async with cosmokit.connect(str(server.make_url("/"))) as client:
            with pytest.raises(APIError) as exc:
                await client.provider.request("/missing")
            assert exc.value.code == 404

            with pytest.raises(NetworkError):
                await client.provider.request("/broken")
    finally:
        await server.close()


@pytest.mark.asyncio
async def test_connection_failure_is_network_error():
    provider = cosmokit.HTTPProvider(endpoint="http://127.0.0.1:1", timeout=2)
    async with provider:
        with pytest.raises(NetworkError):
            await provider.request("/node_info")
    assert not provider.is_connected


def test_unwrap_std_tx(create_market_tx):
    assert unwrap_std_tx({"type": "auth/StdTx", "value": create_market_tx}) == create_market_tx
    assert unwrap_std_tx(create_market_tx) == create_market_tx
    with pytest.raises(MalformedTxTree):
        unwrap_std_tx("plain text")
    with pytest.raises(MalformedTxTree):
        unwrap_std_tx({"type": "auth/StdTx", "value": []})


def test_client_defaults():
    client = cosmokit.Cosmos()
    assert client.provider.endpoint == "http://localhost:1317"
    assert client.config.broadcast_mode == "block"
    assert client.is_connected is False
    assert json.loads(cosmokit.create_broadcast_body({}))["return"] == "block"

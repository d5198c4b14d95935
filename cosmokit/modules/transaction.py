"""Transaction module for cosmokit."""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Optional

from ..constants import BROADCAST_PATH, ChainConfig, DEFAULT_CONFIG
from ..crypto.signature import sign
from ..exceptions import MalformedTxTree
from ..providers.base import BaseProvider
from ..tx.assembly import create_broadcast_body, create_signed_tx
from ..types.tx import SignMeta
from ..types.wallet import Wallet

__all__ = ["TransactionModule", "unwrap_std_tx"]

logger = logging.getLogger(__name__)

STD_TX_TYPE = "auth/StdTx"


def unwrap_std_tx(tx: Any) -> dict:
    """Return the body of an ``auth/StdTx`` envelope, or ``tx`` if already unwrapped."""
    if not isinstance(tx, Mapping):
        raise MalformedTxTree(f"Transaction must be a mapping, got {type(tx).__name__}")
    if tx.keys() == {"type", "value"} and tx["type"] == STD_TX_TYPE:
        tx = tx["value"]
        if not isinstance(tx, Mapping):
            raise MalformedTxTree("StdTx envelope value must be a mapping")
    return dict(tx)


class TransactionModule:
    """
    Transaction-related operations.

    Fetches unsigned transactions built by the REST server and
    broadcasts locally signed ones.
    """

    def __init__(self, provider: BaseProvider, config: ChainConfig = DEFAULT_CONFIG) -> None:
        """
        Initialize transaction module.

        Args:
            provider: Provider instance
            config: Chain settings (broadcast mode, default chain id)
        """
        self._provider = provider
        self._config = config
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def fetch_unsigned(self, path: str, params: Optional[dict[str, Any]] = None) -> dict:
        """
        Fetch an unsigned transaction from a REST path.

        Args:
            path: REST path that returns an unsigned ``StdTx``
            params: Optional query parameters

        Returns:
            Transaction body with ``fee``, ``msg`` and ``memo``

        Raises:
            MalformedTxTree: If the response is not a transaction object
        """
        data = await self._provider.request(path, params)
        return unwrap_std_tx(data)

    async def broadcast(self, signed_tx: Mapping, mode: Optional[str] = None) -> Any:
        """
        Broadcast a signed transaction.

        Args:
            signed_tx: Transaction body with signatures attached
            mode: Broadcast mode (default: config.broadcast_mode)

        Returns:
            Node response
        """
        body = create_broadcast_body(signed_tx, mode or self._config.broadcast_mode)
        self._logger.info(f"Broadcasting transaction to {BROADCAST_PATH}")
        return await self._provider.post(BROADCAST_PATH, body)

    async def sign_and_broadcast(
        self,
        tx: Mapping,
        wallet: Wallet,
        meta: SignMeta,
        mode: Optional[str] = None
    ) -> Any:
        """
        Sign a transaction with a local wallet and broadcast it.

        Args:
            tx: Unsigned transaction, with or without the StdTx envelope
            wallet: Signing wallet
            meta: Sequence, account number and chain id (default:
                config.chain_id)
            mode: Broadcast mode override

        Returns:
            Node response
        """
        if meta.chain_id is None:
            meta = replace(meta, chain_id=self._config.chain_id)

        body = unwrap_std_tx(tx)
        signature = sign(body, wallet, meta)
        return await self.broadcast(create_signed_tx(body, signature), mode)

"""Main cosmokit client."""

import logging
from typing import Optional

from .constants import ChainConfig, DEFAULT_CONFIG
from .modules import TransactionModule
from .providers import BaseProvider, HTTPProvider

__all__ = ["Cosmos"]

logger = logging.getLogger(__name__)


class Cosmos:
    """
    Main client for talking to a Cosmos REST server.

    Signing stays local; the client only wires a provider to the
    transaction module.
    """

    def __init__(
        self,
        provider: Optional[BaseProvider] = None,
        config: ChainConfig = DEFAULT_CONFIG,
    ) -> None:
        """
        Initialize client.

        Args:
            provider: Provider instance (default: HTTPProvider on config.endpoint)
            config: Chain settings
        """
        self._provider = provider or HTTPProvider(endpoint=config.endpoint)
        self._config = config
        self._tx = TransactionModule(self._provider, config)

        logger.info(
            f"Initialized Cosmos client for {self._provider.endpoint} "
            f"with {self._provider.__class__.__name__}"
        )

    @property
    def provider(self) -> BaseProvider:
        """Get the underlying provider."""
        return self._provider

    @property
    def config(self) -> ChainConfig:
        """Get chain settings."""
        return self._config

    @property
    def tx(self) -> TransactionModule:
        """Get transaction module."""
        return self._tx

    async def connect(self) -> None:
        """Connect to provider."""
        await self._provider.connect()
        logger.info(f"Connected to {self._provider.endpoint}")

    async def disconnect(self) -> None:
        """Disconnect from provider."""
        await self._provider.disconnect()

    @property
    def is_connected(self) -> bool:
        """Check if client is connected."""
        return self._provider.is_connected

    async def __aenter__(self) -> "Cosmos":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()

    def __repr__(self) -> str:
        return f"Cosmos(provider={self._provider!r})"

"""Base provider interface for cosmokit."""

from abc import ABC, abstractmethod
from typing import Any, Optional, TypeVar, Generic
import logging

__all__ = ["BaseProvider", "T"]

T = TypeVar("T")
logger = logging.getLogger(__name__)


class BaseProvider(ABC, Generic[T]):
    """
    Abstract base provider for Cosmos REST connections.

    Providers only move bytes: they never sign, and they never retry.
    """

    def __init__(self, endpoint: str) -> None:
        """
        Initialize provider with an endpoint.

        Args:
            endpoint: Base URL of the REST server
        """
        self.endpoint = endpoint
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def request(
        self,
        method: str,
        params: Optional[dict[str, Any]] = None,
        **kwargs: Any
    ) -> T:
        """
        Make a read request to the provider.

        Args:
            method: API path to call
            params: Optional query parameters
            **kwargs: Additional provider-specific arguments

        Returns:
            Response data from the provider

        Raises:
            ProviderError: If the request fails
        """
        raise NotImplementedError

    @abstractmethod
    async def post(self, method: str, data: Any, **kwargs: Any) -> T:
        """
        Submit data to the provider.

        Raises:
            ProviderError: If the request fails
        """
        raise NotImplementedError

    @abstractmethod
    async def connect(self) -> None:
        """
        Connect to the provider.

        Raises:
            ProviderError: If connection fails
        """
        raise NotImplementedError

    @abstractmethod
    async def disconnect(self) -> None:
        """
        Disconnect from the provider.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """
        Check if provider is connected.

        Returns:
            True if connected, False otherwise
        """
        raise NotImplementedError

    async def __aenter__(self) -> "BaseProvider[T]":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()

    def __repr__(self) -> str:
        """String representation of provider."""
        return f"{self.__class__.__name__}(endpoint={self.endpoint})"

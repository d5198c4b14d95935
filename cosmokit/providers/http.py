"""HTTP provider implementation for Cosmos REST (LCD) servers."""

import asyncio
import json
import logging
from typing import Any, Optional, Union

import aiohttp
from aiohttp import ClientTimeout, ClientSession, ClientResponse

from ..constants import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT, USER_AGENT
from ..exceptions import (
    ProviderError,
    NetworkError,
    APIError,
    TimeoutError,
)
from ..providers.base import BaseProvider

__all__ = ["HTTPProvider"]

logger = logging.getLogger(__name__)


class HTTPProvider(BaseProvider[Any]):
    """
    HTTP provider for a Cosmos REST server.

    Every call is a single attempt; retry and backoff belong to the caller.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[ClientSession] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """
        Initialize HTTP provider.

        Args:
            endpoint: REST server base URL
            timeout: Request timeout in seconds
            session: Existing aiohttp session to use
            headers: Additional headers for requests
        """
        super().__init__(endpoint.rstrip("/"))

        self.timeout = ClientTimeout(total=timeout)
        self.headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            **(headers or {}),
        }

        # Session management
        self._session = session
        self._owns_session = session is None
        self._connected = False

    async def connect(self) -> None:
        """Initialize HTTP session."""
        if self._session is None:
            self._session = ClientSession(
                timeout=self.timeout,
                headers=self.headers,
            )
            self._owns_session = True

        self._connected = True
        self._logger.info(f"Connected to {self.endpoint}")

    async def disconnect(self) -> None:
        """Close HTTP session."""
        if self._session and self._owns_session:
            await self._session.close()
            self._session = None

        self._connected = False
        self._logger.info("Disconnected from provider")

    @property
    def is_connected(self) -> bool:
        """Check if provider is connected."""
        return (
            self._connected
            and self._session is not None
            and not self._session.closed
        )

    def _url(self, method: str) -> str:
        if not method.startswith("/"):
            method = f"/{method}"
        return f"{self.endpoint}{method}"

    async def request(
        self,
        method: str,
        params: Optional[dict[str, Any]] = None,
        **kwargs: Any
    ) -> Any:
        """
        Make GET request to API.

        Args:
            method: API endpoint path
            params: Query parameters
            **kwargs: Additional request arguments

        Returns:
            Parsed JSON response or stripped text

        Raises:
            APIError: On 4xx responses
            NetworkError: On 5xx responses or connection failures
            TimeoutError: If request times out
        """
        if not self.is_connected:
            await self.connect()

        url = self._url(method)
        self._logger.debug(f"Request: GET {url} params={params}")
        return await self._send("GET", url, params=params, **kwargs)

    async def post(
        self,
        method: str,
        data: Union[str, bytes, dict[str, Any]],
        content_type: str = "application/json",
        **kwargs: Any
    ) -> Any:
        """
        Make POST request to API.

        Args:
            method: API endpoint path
            data: Request body; dicts are JSON encoded
            content_type: Content type header
            **kwargs: Additional request arguments

        Returns:
            Parsed JSON response or stripped text

        Raises:
            ProviderError: If request fails
        """
        if not self.is_connected:
            await self.connect()

        if isinstance(data, dict):
            data = json.dumps(data)

        url = self._url(method)
        self._logger.debug(f"Request: POST {url}")
        return await self._send(
            "POST",
            url,
            data=data,
            headers={"Content-Type": content_type},
            **kwargs
        )

    async def _send(self, http_method: str, url: str, **kwargs: Any) -> Any:
        """Perform one HTTP exchange and map failures to provider errors."""
        try:
            async with self._session.request(http_method, url, **kwargs) as response:
                self._logger.debug(f"Response: {response.status}")

                if response.status >= 500:
                    text = await response.text()
                    raise NetworkError(f"Server error {response.status}: {text}", code=response.status)

                if response.status >= 400:
                    text = await response.text()
                    raise APIError(f"Client error {response.status}: {text}", code=response.status)

                return await self._parse_response(response)

        except asyncio.TimeoutError as e:
            raise TimeoutError("Request timed out") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Network error: {e}") from e

    async def _parse_response(self, response: ClientResponse) -> Any:
        """Parse response based on content type."""
        content_type = response.headers.get("Content-Type", "")
        text = await response.text()

        if "application/json" in content_type:
            try:
                return json.loads(text)
            except json.JSONDecodeError as e:
                raise ProviderError(f"Invalid JSON response: {e}") from e

        return text.strip()

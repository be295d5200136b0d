"""
AsyncPaymasterClient - awaitable client for the ZyFi paymaster API.

Calls suspend only while waiting on the network, so many of them can be
gathered on one instance.
"""
import logging
from typing import Dict, Any, Optional

import httpx

from .client import (
    JSON_HEADERS, build_sponsored_request, build_paymaster_request,
    sponsored_headers, handle_response
)
from .config import ClientConfig, ZYFI_SPONSORED_URL, ZYFI_PAYMASTER_URL
from .exceptions import TransportError
from .models import PaymasterRequest, SponsorshipResponse


class AsyncPaymasterClient:
    """Awaitable counterpart of :class:`zyfi_sdk.client.PaymasterClient`."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Args:
            config: Client configuration (defaults to mainnet, no API key)
            http_client: Optional httpx client to send through; it is not
                closed by this client
            logger: Optional logger instance to use for debug/error logging
        """
        self.config = config or ClientConfig()
        self.logger = logger or logging.getLogger(__name__)
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=self.config.timeout)

    @classmethod
    def from_env(cls, **kwargs) -> "AsyncPaymasterClient":
        """Create a client configured from ZYFI_* environment variables"""
        return cls(ClientConfig.from_env(), **kwargs)

    async def sponsored(
        self,
        tx_from: str,
        tx_to: str,
        tx_data: str,
        gas_limit: Optional[str] = None
    ) -> SponsorshipResponse:
        """
        Request a fully sponsored transaction.

        Raises:
            ConfigurationError: If no API key is configured; nothing is sent
            TransportError: If no response was received
            ApiError: If ZyFi returns a non-success status
            DecodeError: If the response body has an unexpected shape
        """
        headers = sponsored_headers(self.config)
        request = build_sponsored_request(self.config, tx_from, tx_to, tx_data, gas_limit)
        return await self._post(ZYFI_SPONSORED_URL, request, headers)

    async def paymaster(
        self,
        tx_from: str,
        tx_to: str,
        tx_data: str,
        gas_limit: Optional[str] = None
    ) -> SponsorshipResponse:
        """
        Request a transaction whose fee is paid with the configured token.

        Raises:
            TransportError: If no response was received
            ApiError: If ZyFi returns a non-success status
            DecodeError: If the response body has an unexpected shape
        """
        request = build_paymaster_request(self.config, tx_from, tx_to, tx_data, gas_limit)
        return await self._post(ZYFI_PAYMASTER_URL, request, dict(JSON_HEADERS))

    async def _post(self, url: str, request: PaymasterRequest, headers: Dict[str, str]) -> SponsorshipResponse:
        payload = request.to_payload()
        self.logger.debug(f"POST {url}: {payload}")

        try:
            response = await self.http_client.post(
                url,
                json=payload,
                headers=headers,
                timeout=self.config.timeout
            )
        except httpx.RequestError as e:
            self.logger.error(f"ZyFi request to {url} failed: {e}")
            raise TransportError(f"ZyFi request failed: {e}", cause=e) from e

        return handle_response(response.status_code, response.text, self.logger)

    async def aclose(self) -> None:
        """Close the httpx client if this client created it."""
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "AsyncPaymasterClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

"""
PaymasterClient - blocking client for the ZyFi paymaster API.

The request builders and the response handler in this module are shared
with :class:`zyfi_sdk.async_client.AsyncPaymasterClient`.
"""
import logging
from typing import Dict, Any, Optional

import requests
from pydantic import ValidationError

from .config import (
    ClientConfig, ZYFI_SPONSORED_URL, ZYFI_PAYMASTER_URL,
    SPONSORSHIP_RATIO, REPLAY_LIMIT
)
from .exceptions import ApiError, DecodeError, TransportError
from .models import PaymasterRequest, SponsorshipResponse, TxData
from ._rate_limited_log import rate_limited_log

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def build_sponsored_request(
    config: ClientConfig,
    tx_from: str,
    tx_to: str,
    tx_data: str,
    gas_limit: Optional[str] = None
) -> PaymasterRequest:
    """
    Build the body for the sponsored endpoint.

    The fee token is never sent here, even when one is configured.
    """
    return PaymasterRequest(
        chain_id=config.chain_id,
        sponsorship_ratio=SPONSORSHIP_RATIO,
        replay_limit=REPLAY_LIMIT,
        gas_limit=gas_limit,
        tx_data=TxData(from_address=tx_from, to=tx_to, data=tx_data),
        is_testnet=config.testnet,
    )


def build_paymaster_request(
    config: ClientConfig,
    tx_from: str,
    tx_to: str,
    tx_data: str,
    gas_limit: Optional[str] = None
) -> PaymasterRequest:
    """
    Build the body for the fee-token endpoint.

    An unset fee token is left out of the payload and the API applies
    its own default.
    """
    return PaymasterRequest(
        chain_id=config.chain_id,
        fee_token_address=config.fee_token_address,
        gas_limit=gas_limit,
        tx_data=TxData(from_address=tx_from, to=tx_to, data=tx_data),
        is_testnet=config.testnet,
    )


def sponsored_headers(config: ClientConfig) -> Dict[str, str]:
    """
    Headers for the sponsored endpoint.

    Raises:
        ConfigurationError: If no API key is configured
    """
    return {**JSON_HEADERS, "X-API-Key": config.require_api_key()}


def response_text(response: requests.Response) -> str:
    """
    Body text of a requests response, decoded as UTF-8 unless the
    Content-Type names a charset.

    requests assumes ISO-8859-1 for text/* bodies without a charset.
    """
    content_type = response.headers.get("Content-Type", "")
    encoding = response.encoding if "charset=" in content_type.lower() else None
    return response.content.decode(encoding or "utf-8", errors="replace")


def handle_response(
    status_code: int,
    body: str,
    log: Optional[logging.Logger] = None
) -> SponsorshipResponse:
    """
    Classify a ZyFi HTTP response.

    Args:
        status_code: HTTP status code
        body: Raw response body text
        log: Logger for diagnostics (defaults to module logger)

    Returns:
        The decoded sponsorship response

    Raises:
        DecodeError: If a 2xx body does not match the response shape
        ApiError: If the status is not 2xx; the body is kept verbatim
    """
    log = log or logger

    if 200 <= status_code < 300:
        try:
            response = SponsorshipResponse.model_validate_json(body)
        except ValidationError as e:
            log.error(f"Failed to parse ZyFi response: {e}")
            raise DecodeError(f"Failed to parse ZyFi response: {e}", details=str(e)) from e
        log.debug(f"ZyFi response: {response!r}")
        return response

    rate_limited_log(f"ZyFi error {status_code}: {body!r}", level="error", logger_instance=log)
    raise ApiError(status_code, body)


class PaymasterClient:
    """
    Client for the ZyFi paymaster API.

    This client handles:
    1. Fully sponsored transactions (requires an API key)
    2. Transactions whose fee is paid in an ERC-20 token

    Each call is a single request with no retries. The client keeps no
    per-call state, so one instance can be shared between threads.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the PaymasterClient

        Args:
            config: Client configuration (defaults to mainnet, no API key)
            session: Optional requests session to send through; it is not
                closed by this client
            logger: Optional logger instance to use for debug/error logging
        """
        self.config = config or ClientConfig()
        self.logger = logger or logging.getLogger(__name__)
        self._owns_session = session is None
        self.session = session or requests.Session()

    @classmethod
    def from_env(cls, **kwargs) -> "PaymasterClient":
        """Create a client configured from ZYFI_* environment variables"""
        return cls(ClientConfig.from_env(), **kwargs)

    def sponsored(
        self,
        tx_from: str,
        tx_to: str,
        tx_data: str,
        gas_limit: Optional[str] = None
    ) -> SponsorshipResponse:
        """
        Request a fully sponsored transaction.

        Args:
            tx_from: Sender address (hex)
            tx_to: Recipient address (hex)
            tx_data: Call data (hex)
            gas_limit: Optional gas limit override, as a decimal string

        Returns:
            The sponsorship response

        Raises:
            ConfigurationError: If no API key is configured; nothing is sent
            TransportError: If no response was received
            ApiError: If ZyFi returns a non-success status
            DecodeError: If the response body has an unexpected shape
        """
        headers = sponsored_headers(self.config)
        request = build_sponsored_request(self.config, tx_from, tx_to, tx_data, gas_limit)
        return self._post(ZYFI_SPONSORED_URL, request, headers)

    def paymaster(
        self,
        tx_from: str,
        tx_to: str,
        tx_data: str,
        gas_limit: Optional[str] = None
    ) -> SponsorshipResponse:
        """
        Request a transaction whose fee is paid with the configured token.

        No API key is sent to this endpoint, even when one is configured.

        Args:
            tx_from: Sender address (hex)
            tx_to: Recipient address (hex)
            tx_data: Call data (hex)
            gas_limit: Optional gas limit override, as a decimal string

        Returns:
            The paymaster response

        Raises:
            TransportError: If no response was received
            ApiError: If ZyFi returns a non-success status
            DecodeError: If the response body has an unexpected shape
        """
        request = build_paymaster_request(self.config, tx_from, tx_to, tx_data, gas_limit)
        return self._post(ZYFI_PAYMASTER_URL, request, dict(JSON_HEADERS))

    def _post(self, url: str, request: PaymasterRequest, headers: Dict[str, str]) -> SponsorshipResponse:
        payload = request.to_payload()
        self.logger.debug(f"POST {url}: {payload}")

        try:
            response = self.session.post(
                url,
                json=payload,
                headers=headers,
                timeout=self.config.timeout
            )
        except requests.RequestException as e:
            self.logger.error(f"ZyFi request to {url} failed: {e}")
            raise TransportError(f"ZyFi request failed: {e}", cause=e) from e

        return handle_response(response.status_code, response_text(response), self.logger)

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "PaymasterClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

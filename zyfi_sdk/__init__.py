"""
ZyFi SDK - client for the ZyFi paymaster API on ZkSync.
"""
from .version import __version__
from .config import (
    ClientConfig, ZYFI_SPONSORED_URL, ZYFI_PAYMASTER_URL,
    ZKSYNC_MAINNET_CHAIN_ID, ZKSYNC_SEPOLIA_CHAIN_ID, DEFAULT_TIMEOUT
)
from .exceptions import ZyFiError, ConfigurationError, TransportError, ApiError, DecodeError
from .models import (
    TxData, PaymasterRequest, PaymasterParams, CustomData,
    TxDataResponse, SponsorshipResponse
)
from .client import PaymasterClient, build_sponsored_request, build_paymaster_request, handle_response
from .async_client import AsyncPaymasterClient

__all__ = [
    "PaymasterClient",
    "AsyncPaymasterClient",
    "ClientConfig",
    "build_sponsored_request",
    "build_paymaster_request",
    "handle_response",
    "TxData",
    "PaymasterRequest",
    "PaymasterParams",
    "CustomData",
    "TxDataResponse",
    "SponsorshipResponse",
    "ZyFiError",
    "ConfigurationError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "ZYFI_SPONSORED_URL",
    "ZYFI_PAYMASTER_URL",
    "ZKSYNC_MAINNET_CHAIN_ID",
    "ZKSYNC_SEPOLIA_CHAIN_ID",
    "DEFAULT_TIMEOUT",
    "__version__",
]

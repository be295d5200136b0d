"""
Client configuration for the ZyFi SDK.

Configuration is created once by the caller and then only read by the
clients. It can be built directly or from ``ZYFI_*`` environment variables.
"""
import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

ZYFI_SPONSORED_URL = "https://api.zyfi.org/api/erc20_sponsored_paymaster/v1"
ZYFI_PAYMASTER_URL = "https://api.zyfi.org/api/erc20_paymaster/v1"

ZKSYNC_MAINNET_CHAIN_ID = 324
ZKSYNC_SEPOLIA_CHAIN_ID = 300

# Seconds; applied to both connect and read
DEFAULT_TIMEOUT = 30.0

# Fixed values for fully sponsored requests
SPONSORSHIP_RATIO = 100
REPLAY_LIMIT = 1

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable settings shared by every call made through a client.

    Attributes:
        api_key: API key sent as ``X-API-Key`` (required for sponsorship)
        fee_token_address: ERC-20 token used to pay fees on the paymaster endpoint
        testnet: Whether the API should treat the transaction as testnet
        chain_id: Chain ID, defaults to ZkSync Era mainnet
        timeout: HTTP timeout in seconds
    """
    api_key: Optional[str] = None
    fee_token_address: Optional[str] = None
    testnet: bool = False
    chain_id: int = ZKSYNC_MAINNET_CHAIN_ID
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive (got: {self.timeout})")
        if self.chain_id < 0:
            raise ConfigurationError(f"chain_id must not be negative (got: {self.chain_id})")

    def require_api_key(self) -> str:
        """
        Get the API key, failing if it is not configured.

        Returns:
            The configured API key

        Raises:
            ConfigurationError: If no API key is set
        """
        if not self.api_key:
            raise ConfigurationError(
                "API key not set - which is necessary to sponsor ZyFi transactions"
            )
        return self.api_key

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Reads ZYFI_API_KEY, ZYFI_FEE_TOKEN_ADDRESS, ZYFI_TESTNET, ZYFI_CHAIN_ID
        and ZYFI_TIMEOUT. When ZYFI_CHAIN_ID is unset the chain follows
        ZYFI_TESTNET (ZkSync Sepolia or ZkSync Era mainnet).

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        testnet = os.environ.get("ZYFI_TESTNET", "").strip().lower() in _TRUTHY
        default_chain = ZKSYNC_SEPOLIA_CHAIN_ID if testnet else ZKSYNC_MAINNET_CHAIN_ID

        raw_chain_id = os.environ.get("ZYFI_CHAIN_ID")
        try:
            chain_id = int(raw_chain_id) if raw_chain_id else default_chain
        except ValueError:
            raise ConfigurationError(f"ZYFI_CHAIN_ID must be an integer (got: {raw_chain_id!r})")

        raw_timeout = os.environ.get("ZYFI_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"ZYFI_TIMEOUT must be a number of seconds (got: {raw_timeout!r})")

        return cls(
            api_key=os.environ.get("ZYFI_API_KEY") or None,
            fee_token_address=os.environ.get("ZYFI_FEE_TOKEN_ADDRESS") or None,
            testnet=testnet,
            chain_id=chain_id,
            timeout=timeout,
        )

"""
Pytest fixtures for the ZyFi SDK tests.
"""
import copy
import json

import pytest

from zyfi_sdk import ClientConfig, PaymasterClient, ZKSYNC_SEPOLIA_CHAIN_ID
from zyfi_sdk._rate_limited_log import reset_rate_limits

# Constants for testing
TEST_API_KEY = "test-api-key"
TEST_FEE_TOKEN = "0xBD4372e44c5eE654dd838304006E1f0f69983154"
TEST_TX_FROM = "0xd1e5e09ef8f5ab7d59c14d8a0847e76a71163a82"
TEST_TX_TO = "0x95b3641d549f719eb5105f9550eca4a7a2f305de"
TEST_TX_DATA = (
    "0xd204c45e000000000000000000000000d1e5e09ef8f5ab7d59c14d8a0847e76a71163a82"
    "0000000000000000000000000000000000000000000000000000000000000040"
)

# Fee-token response: none of the sponsorship-only fields
PAYMASTER_RESPONSE = {
    "txData": {
        "chainId": 324,
        "from": TEST_TX_FROM,
        "to": TEST_TX_TO,
        "data": TEST_TX_DATA,
        "value": "0",
        "customData": {
            "paymasterParams": {
                "paymaster": "0x069246dFEcb95A6409180b52C071003537B23c27",
                "paymasterInput": "0x949431dc000000000000000000000000bd4372e44c5ee654dd838304006e1f0f69983154"
            },
            "gasPerPubdata": 50000
        },
        "maxFeePerGas": "45250000",
        "gasLimit": 546460
    },
    "gasLimit": "546460",
    "gasPrice": "45250000",
    "tokenAddress": TEST_FEE_TOKEN,
    "tokenPrice": "0.99981",
    "feeTokenAmount": "24734793",
    "feeTokendecimals": "6",
    "feeUSD": "0.024730",
    "markup": "0.0",
    "expirationTime": "1718271735",
    "expiresIn": "1199"
}

SPONSORED_RESPONSE = {
    **copy.deepcopy(PAYMASTER_RESPONSE),
    "maxNonce": "12",
    "protocolAddress": "0x95b3641d549f719eb5105f9550eca4a7a2f305de",
    "sponsorshipRatio": "100",
    "estimatedFinalFeeTokenAmount": "0",
    "estimatedFinalFeeUsd": "0"
}


@pytest.fixture(autouse=True)
def _reset_log_rate_limits():
    """Rate-limited log lines must not leak between tests."""
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def paymaster_body():
    return json.dumps(PAYMASTER_RESPONSE)


@pytest.fixture
def sponsored_body():
    return json.dumps(SPONSORED_RESPONSE)


@pytest.fixture
def config():
    """Mainnet config with both an API key and a fee token"""
    return ClientConfig(api_key=TEST_API_KEY, fee_token_address=TEST_FEE_TOKEN)


@pytest.fixture
def testnet_config():
    return ClientConfig(
        api_key=TEST_API_KEY,
        fee_token_address="0xb4B74C2BfeA877672B938E408Bae8894918fE41C",
        testnet=True,
        chain_id=ZKSYNC_SEPOLIA_CHAIN_ID
    )


@pytest.fixture
def client(config):
    with PaymasterClient(config) as c:
        yield c

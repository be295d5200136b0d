"""
Data models for the ZyFi SDK.

Wire names are declared as aliases; amounts the API sends as decimal
strings stay ``str`` so no precision is lost on the way through.
"""
from typing import Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class _ZyFiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize with wire names, leaving out every unset optional field"""
        return self.model_dump(by_alias=True, exclude_none=True)


# Outbound

class TxData(_ZyFiModel):
    """Unsigned transaction fields supplied by the caller"""
    from_address: str = Field(..., alias="from")
    to: str
    data: str


class PaymasterRequest(_ZyFiModel):
    """Request body shared by the sponsored and fee-token endpoints"""
    chain_id: int = Field(..., alias="chainId")
    fee_token_address: Optional[str] = Field(None, alias="feeTokenAddress")
    sponsorship_ratio: Optional[int] = Field(None, alias="sponsorshipRatio")
    replay_limit: Optional[int] = Field(None, alias="replayLimit")
    gas_limit: Optional[str] = Field(None, alias="gasLimit")
    tx_data: TxData = Field(..., alias="txData")
    is_testnet: bool = Field(..., alias="isTestnet")


# Inbound

class PaymasterParams(_ZyFiModel):
    paymaster: str
    paymaster_input: str = Field(..., alias="paymasterInput")


class CustomData(_ZyFiModel):
    paymaster_params: PaymasterParams = Field(..., alias="paymasterParams")
    gas_per_pubdata: int = Field(..., alias="gasPerPubdata")


class TxDataResponse(_ZyFiModel):
    """Transaction returned by ZyFi, ready to be signed by the sender"""
    chain_id: int = Field(..., alias="chainId")
    from_address: str = Field(..., alias="from")
    to: str
    data: str
    value: str
    custom_data: CustomData = Field(..., alias="customData")
    max_fee_per_gas: str = Field(..., alias="maxFeePerGas")
    gas_limit: int = Field(..., alias="gasLimit")


class SponsorshipResponse(_ZyFiModel):
    """
    Decoded response of both paymaster endpoints.

    The trailing optional fields are only returned for sponsored requests
    and are None otherwise.
    """
    tx_data: TxDataResponse = Field(..., alias="txData")
    gas_limit: str = Field(..., alias="gasLimit")
    gas_price: str = Field(..., alias="gasPrice")
    token_address: str = Field(..., alias="tokenAddress")
    token_price: str = Field(..., alias="tokenPrice")
    fee_token_amount: str = Field(..., alias="feeTokenAmount")
    # The API spells these two literally this way
    fee_token_decimals: str = Field(..., alias="feeTokendecimals")
    fee_usd: str = Field(..., alias="feeUSD")
    markup: str
    expiration_time: str = Field(..., alias="expirationTime")
    expires_in: str = Field(..., alias="expiresIn")
    max_nonce: Optional[str] = Field(None, alias="maxNonce")
    protocol_address: Optional[str] = Field(None, alias="protocolAddress")
    sponsorship_ratio: Optional[str] = Field(None, alias="sponsorshipRatio")
    estimated_final_fee_token_amount: Optional[str] = Field(None, alias="estimatedFinalFeeTokenAmount")
    estimated_final_fee_usd: Optional[str] = Field(None, alias="estimatedFinalFeeUsd")

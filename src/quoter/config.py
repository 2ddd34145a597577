"""Configuration and chain metadata for the pool quoter."""

from __future__ import annotations

from decimal import Decimal
from enum import IntEnum

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Chain(IntEnum):
    """EVM chains with a deployed Uniswap V3 Quoter."""

    ETHEREUM = 1
    POLYGON = 137
    ARBITRUM = 42161
    OPTIMISM = 10


# Uniswap V3 Quoter (V1) is deployed at the same address on these chains
DEFAULT_QUOTER_ADDRESSES: dict[int, str] = {
    1: "0xb27308f9F90D607463bb33eA1BeBb41C27CE5AB6",
    137: "0xb27308f9F90D607463bb33eA1BeBb41C27CE5AB6",
    42161: "0xb27308f9F90D607463bb33eA1BeBb41C27CE5AB6",
    10: "0xb27308f9F90D607463bb33eA1BeBb41C27CE5AB6",
}

# Minimal token map for scripts; extend as needed per chain.
TOKEN_ADDRESSES: dict[str, dict[str, str]] = {
    "ethereum": {
        "WETH": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        "USDC": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
    },
}

# WETH/USDC 0.3% on mainnet
WETH_USDC_POOL = "0x8ad599c3A0ff1De082011EFDDc58f1908eb6e6D8"


class QuoterSettings(BaseSettings):
    """Typed configuration for on-chain quoting."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    ethereum_rpc: SecretStr | None = Field(default=None, alias="ETHEREUM_RPC_URL")
    polygon_rpc: SecretStr | None = Field(default=None, alias="POLYGON_RPC_URL")
    arbitrum_rpc: SecretStr | None = Field(default=None, alias="ARBITRUM_RPC_URL")
    optimism_rpc: SecretStr | None = Field(default=None, alias="OPTIMISM_RPC_URL")

    chain: Chain = Field(default=Chain.ETHEREUM, alias="QUOTER_CHAIN")
    quoter_address: str | None = Field(default=None, alias="QUOTER_ADDRESS")
    reference_amount: Decimal = Field(default=Decimal("0.0001"), alias="QUOTER_REFERENCE_AMOUNT")
    significant_digits: int = Field(default=12, ge=1, le=78, alias="QUOTER_SIGNIFICANT_DIGITS")
    rpc_timeout: float = Field(default=10.0, gt=0, alias="QUOTER_RPC_TIMEOUT")

    @field_validator("chain", mode="before")
    @classmethod
    def _parse_chain(cls, value: object) -> object:
        # Accept "137" as well as "polygon"
        if isinstance(value, str):
            value = value.strip()
            if value.isdigit():
                return int(value)
            try:
                return Chain[value.upper()]
            except KeyError:
                msg = f"unknown chain {value!r}"
                raise ValueError(msg) from None
        return value

    @field_validator("reference_amount")
    @classmethod
    def _positive_amount(cls, value: Decimal) -> Decimal:
        if not value.is_finite() or value <= 0:
            msg = "reference amount must be a positive finite decimal"
            raise ValueError(msg)
        return value

    def get_rpc_url(self, chain: Chain | None = None) -> str:
        """Return RPC URL for the requested chain (defaults to the configured one)."""
        chain = chain or self.chain
        attr = f"{chain.name.lower()}_rpc"
        rpc = getattr(self, attr, None)
        if rpc is None:
            msg = f"RPC URL missing for chain {chain.name} ({chain.value})"
            raise ValueError(msg)
        return rpc.get_secret_value()

    def get_quoter_address(self, chain: Chain | None = None) -> str:
        """Return the configured Quoter address, or the chain default."""
        if self.quoter_address:
            return self.quoter_address
        chain = chain or self.chain
        address = DEFAULT_QUOTER_ADDRESSES.get(chain.value)
        if address is None:
            msg = f"Quoter address missing for chain {chain.name} ({chain.value})"
            raise ValueError(msg)
        return address

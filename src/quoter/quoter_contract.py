"""Typed binding to the Uniswap V3 Quoter contract."""

from __future__ import annotations

from typing import Protocol

import structlog
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.contract.async_contract import AsyncContract

from src.quoter.config import QuoterSettings
from src.quoter.models import Address

logger = structlog.get_logger()

# Quoter (V1) ABI (minimal - just quoteExactInputSingle). The function is
# declared nonpayable but only ever executed through eth_call.
QUOTER_ABI = [
    {
        "inputs": [
            {"internalType": "address", "name": "tokenIn", "type": "address"},
            {"internalType": "address", "name": "tokenOut", "type": "address"},
            {"internalType": "uint24", "name": "fee", "type": "uint24"},
            {"internalType": "uint256", "name": "amountIn", "type": "uint256"},
            {"internalType": "uint160", "name": "sqrtPriceLimitX96", "type": "uint160"},
        ],
        "name": "quoteExactInputSingle",
        "outputs": [{"internalType": "uint256", "name": "amountOut", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function",
    }
]

NO_PRICE_LIMIT = 0


class QuotingService(Protocol):
    """Read-only source of exact-input swap quotes."""

    async def quote_exact_input_single(
        self,
        token_in: Address,
        token_out: Address,
        fee: int,
        amount_in: int,
        sqrt_price_limit_x96: int = NO_PRICE_LIMIT,
    ) -> int:
        """Return the output amount (base units) for swapping ``amount_in``.

        Args:
            token_in: Input token address
            token_out: Output token address
            fee: Pool fee tier
            amount_in: Input amount in base units
            sqrt_price_limit_x96: Price limit; 0 means no limit

        Raises:
            Exception: Transport failures and contract reverts propagate as-is
        """
        ...


def make_web3(settings: QuoterSettings) -> AsyncWeb3:
    """Build an async web3 client for the configured chain."""
    rpc_url = settings.get_rpc_url()
    return AsyncWeb3(AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": settings.rpc_timeout}))


class Web3QuoterContract:
    """QuotingService backed by the on-chain Quoter via eth_call."""

    def __init__(self, w3: AsyncWeb3, quoter_address: Address):
        self.w3 = w3
        self.quoter_address = w3.to_checksum_address(quoter_address)
        self.contract: AsyncContract = w3.eth.contract(
            address=self.quoter_address, abi=QUOTER_ABI
        )

    async def quote_exact_input_single(
        self,
        token_in: Address,
        token_out: Address,
        fee: int,
        amount_in: int,
        sqrt_price_limit_x96: int = NO_PRICE_LIMIT,
    ) -> int:
        if isinstance(amount_in, bool) or not isinstance(amount_in, int) or amount_in < 0:
            msg = f"amount_in must be a non-negative int, got {amount_in!r}"
            raise ValueError(msg)

        amount_out = await self.contract.functions.quoteExactInputSingle(
            self.w3.to_checksum_address(token_in),
            self.w3.to_checksum_address(token_out),
            fee,
            amount_in,
            sqrt_price_limit_x96,
        ).call()

        logger.debug(
            "quoter_contract.quoted",
            quoter=self.quoter_address,
            token_in=token_in,
            token_out=token_out,
            fee=fee,
            amount_in=str(amount_in),
            amount_out=str(amount_out),
        )
        return int(amount_out)

"""Load Uniswap V3 pool metadata directly from chain."""

from __future__ import annotations

import asyncio
from typing import Protocol

import structlog
from web3 import AsyncWeb3
from web3.contract.async_contract import AsyncContract

from src.quoter.errors import PoolNotFoundError
from src.quoter.models import Address, LoadedPool, LpState, Pool, Token

logger = structlog.get_logger()

# ERC20 ABI (minimal - for decimals and symbol)
ERC20_ABI = [
    {
        "inputs": [],
        "name": "decimals",
        "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "symbol",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
]

# Uniswap V3 Pool ABI (minimal - for reading pool state)
POOL_ABI = [
    {
        "inputs": [],
        "name": "token0",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "token1",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "fee",
        "outputs": [{"internalType": "uint24", "name": "", "type": "uint24"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "liquidity",
        "outputs": [{"internalType": "uint128", "name": "", "type": "uint128"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "slot0",
        "outputs": [
            {"internalType": "uint160", "name": "sqrtPriceX96", "type": "uint160"},
            {"internalType": "int24", "name": "tick", "type": "int24"},
            {"internalType": "uint16", "name": "observationIndex", "type": "uint16"},
            {"internalType": "uint16", "name": "observationCardinality", "type": "uint16"},
            {"internalType": "uint16", "name": "observationCardinalityNext", "type": "uint16"},
            {"internalType": "uint8", "name": "feeProtocol", "type": "uint8"},
            {"internalType": "bool", "name": "unlocked", "type": "bool"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]


class PoolDirectory(Protocol):
    """Source of pool metadata keyed by pool address."""

    async def load(self, pool_address: Address) -> LoadedPool:
        """Load tokens, fee tier and liquidity snapshot for a pool.

        Raises:
            PoolNotFoundError: No pool exists at the address
        """
        ...


class OnChainPoolDirectory:
    """PoolDirectory that reads pool and ERC-20 contracts over web3."""

    def __init__(self, w3: AsyncWeb3):
        self.w3 = w3

    async def load(self, pool_address: Address) -> LoadedPool:
        try:
            address = self.w3.to_checksum_address(pool_address)
        except ValueError as e:
            raise PoolNotFoundError(pool_address, f"invalid address ({e})") from e

        code = await self.w3.eth.get_code(address)
        if not code:
            raise PoolNotFoundError(address)

        pool: AsyncContract = self.w3.eth.contract(address=address, abi=POOL_ABI)
        token0_addr, token1_addr, fee, liquidity, slot0 = await asyncio.gather(
            pool.functions.token0().call(),
            pool.functions.token1().call(),
            pool.functions.fee().call(),
            pool.functions.liquidity().call(),
            pool.functions.slot0().call(),
        )

        token_a, token_b = await asyncio.gather(
            self._load_token(token0_addr),
            self._load_token(token1_addr),
        )

        loaded = LoadedPool(
            pool=Pool(address=address, token_a=token_a, token_b=token_b, fee=int(fee)),
            lp_state=LpState(
                liquidity=int(liquidity),
                sqrt_price_x96=int(slot0[0]),
                tick=int(slot0[1]),
            ),
        )

        logger.debug(
            "pool_directory.loaded",
            pool=address,
            token_a=token_a.symbol or token_a.address,
            token_b=token_b.symbol or token_b.address,
            fee_tier=loaded.pool.fee,
            liquidity=str(loaded.lp_state.liquidity),
        )
        return loaded

    async def _load_token(self, token_address: Address) -> Token:
        address = self.w3.to_checksum_address(token_address)
        token: AsyncContract = self.w3.eth.contract(address=address, abi=ERC20_ABI)

        decimals = await token.functions.decimals().call()
        try:
            symbol = await token.functions.symbol().call()
        except Exception as e:
            # Some tokens (e.g. MKR) return bytes32 symbols; symbol is informational
            logger.warning(
                "pool_directory.symbol_unavailable",
                token=address,
                error=str(e),
            )
            symbol = ""

        return Token(address=address, decimals=int(decimals), symbol=symbol)

"""Immutable pool, token, and quote types.

Uses msgspec.Struct (frozen) like the rest of the codebase's domain types.
Token and pool records are loaded once per quoter and never mutated.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from typing import TypeAlias

import msgspec

from src.quoter.errors import InvalidPoolError, InvalidTokenDataError

Address: TypeAlias = str

# Valid Uniswap V3 fee tiers (hundredths of a basis point)
FEE_TIERS: frozenset[int] = frozenset({100, 500, 3000, 10000})

Q96 = 2**96


class Token(msgspec.Struct, frozen=True, kw_only=True):
    """ERC-20 token identity.

    Attributes:
        address: Chain address; compared case-insensitively
        decimals: Base-unit precision (e.g. 18 for WETH, 6 for USDC)
        symbol: Informational ticker
    """

    address: Address
    decimals: int
    symbol: str = ""

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise InvalidTokenDataError(self.address, f"negative decimals {self.decimals}")

    def same_address(self, address: Address) -> bool:
        return self.address.lower() == address.lower()


class Pool(msgspec.Struct, frozen=True, kw_only=True):
    """A single Uniswap V3 pool.

    token_a and token_b are positionally fixed once loaded (token0/token1
    on-chain order).
    """

    address: Address
    token_a: Token
    token_b: Token
    fee: int

    def __post_init__(self) -> None:
        if self.token_a.same_address(self.token_b.address):
            msg = f"Pool {self.address} has identical tokens: {self.token_a.address}"
            raise InvalidPoolError(msg)
        if self.fee not in FEE_TIERS:
            msg = f"Pool {self.address} has unsupported fee tier {self.fee}"
            raise InvalidPoolError(msg)


class LpState(msgspec.Struct, frozen=True, kw_only=True):
    """Snapshot of pool liquidity state taken when the pool was loaded."""

    liquidity: int
    sqrt_price_x96: int
    tick: int

    def token0_price(self, decimals0: int, decimals1: int) -> Decimal:
        """Spot price of token0 expressed in token1, adjusted for decimals."""
        with localcontext() as ctx:
            ctx.prec = 80
            raw = (Decimal(self.sqrt_price_x96) / Decimal(Q96)) ** 2
            return raw.scaleb(decimals0 - decimals1)


class LoadedPool(msgspec.Struct, frozen=True, kw_only=True):
    """Pool metadata plus the liquidity snapshot read alongside it."""

    pool: Pool
    lp_state: LpState


class QuoteResult(msgspec.Struct, frozen=True, kw_only=True):
    """Indicative quote for one exact-input swap.

    Attributes:
        price: Input token units paid per output token unit
        qty: Output token amount (decimal-adjusted)
        amount_in: Raw base units sent to the quoter
        amount_out: Raw base units returned by the quoter
        token_in: Input leg
        token_out: Output leg
    """

    price: float
    qty: float
    amount_in: int
    amount_out: int
    token_in: Token
    token_out: Token

"""Shared fakes for quoter tests."""

from __future__ import annotations

import pytest

from src.quoter.config import QuoterSettings
from src.quoter.errors import PoolNotFoundError
from src.quoter.models import LoadedPool, LpState, Pool, Token

TOKEN_A_ADDRESS = "0x" + "aa" * 20
TOKEN_B_ADDRESS = "0x" + "bb" * 20
POOL_ADDRESS = "0x" + "cc" * 20
UNKNOWN_ADDRESS = "0x" + "dd" * 20


class FakePoolDirectory:
    """In-memory PoolDirectory."""

    def __init__(self, pools: dict[str, LoadedPool] | None = None) -> None:
        self.pools = {k.lower(): v for k, v in (pools or {}).items()}
        self.loads: list[str] = []

    async def load(self, pool_address: str) -> LoadedPool:
        self.loads.append(pool_address)
        loaded = self.pools.get(pool_address.lower())
        if loaded is None:
            raise PoolNotFoundError(pool_address)
        return loaded


class FakeQuotingService:
    """QuotingService returning canned amounts and recording calls."""

    def __init__(self, amounts: dict[int, int] | None = None, error: Exception | None = None) -> None:
        self.amounts = amounts or {}
        self.error = error
        self.calls: list[tuple[str, str, int, int, int]] = []

    async def quote_exact_input_single(
        self,
        token_in: str,
        token_out: str,
        fee: int,
        amount_in: int,
        sqrt_price_limit_x96: int = 0,
    ) -> int:
        self.calls.append((token_in, token_out, fee, amount_in, sqrt_price_limit_x96))
        if self.error is not None:
            raise self.error
        return self.amounts.get(amount_in, 0)


@pytest.fixture
def token_a() -> Token:
    return Token(address=TOKEN_A_ADDRESS, decimals=18, symbol="AAA")


@pytest.fixture
def token_b() -> Token:
    return Token(address=TOKEN_B_ADDRESS, decimals=6, symbol="BBB")


@pytest.fixture
def pool(token_a: Token, token_b: Token) -> Pool:
    return Pool(address=POOL_ADDRESS, token_a=token_a, token_b=token_b, fee=3000)


@pytest.fixture
def loaded_pool(pool: Pool) -> LoadedPool:
    return LoadedPool(
        pool=pool,
        lp_state=LpState(liquidity=10**18, sqrt_price_x96=2**96, tick=0),
    )


@pytest.fixture
def directory(loaded_pool: LoadedPool) -> FakePoolDirectory:
    return FakePoolDirectory({POOL_ADDRESS: loaded_pool})


@pytest.fixture
def settings() -> QuoterSettings:
    return QuoterSettings(_env_file=None)

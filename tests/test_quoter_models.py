"""Tests for pool and token invariants."""

from decimal import Decimal

import msgspec
import pytest

from src.quoter.errors import InvalidPoolError, InvalidTokenDataError
from src.quoter.models import LpState, Pool, Token

from conftest import POOL_ADDRESS, TOKEN_A_ADDRESS


def test_pool_rejects_identical_tokens(token_a: Token) -> None:
    twin = Token(address=TOKEN_A_ADDRESS.upper(), decimals=6, symbol="TWIN")
    with pytest.raises(InvalidPoolError):
        Pool(address=POOL_ADDRESS, token_a=token_a, token_b=twin, fee=3000)


def test_pool_rejects_unknown_fee_tier(token_a: Token, token_b: Token) -> None:
    with pytest.raises(InvalidPoolError):
        Pool(address=POOL_ADDRESS, token_a=token_a, token_b=token_b, fee=2500)


@pytest.mark.parametrize("fee", [100, 500, 3000, 10000])
def test_pool_accepts_valid_fee_tiers(token_a: Token, token_b: Token, fee: int) -> None:
    assert Pool(address=POOL_ADDRESS, token_a=token_a, token_b=token_b, fee=fee).fee == fee


def test_token_rejects_negative_decimals() -> None:
    with pytest.raises(InvalidTokenDataError) as exc_info:
        Token(address=TOKEN_A_ADDRESS, decimals=-1)
    assert exc_info.value.address == TOKEN_A_ADDRESS
    assert "negative decimals" in str(exc_info.value)
    assert isinstance(exc_info.value, InvalidPoolError)


def test_models_are_immutable(pool: Pool) -> None:
    with pytest.raises(AttributeError):
        pool.fee = 500  # type: ignore[misc]


def test_lp_state_spot_price_adjusts_for_decimals() -> None:
    # sqrtPriceX96 == 2**96 means one raw unit of token0 per raw unit of token1
    state = LpState(liquidity=1, sqrt_price_x96=2**96, tick=0)
    assert state.token0_price(18, 6) == Decimal(10) ** 12
    assert state.token0_price(6, 6) == 1


def test_pool_serializes_with_msgspec(pool: Pool) -> None:
    decoded = msgspec.json.decode(msgspec.json.encode(pool), type=Pool)
    assert decoded == pool

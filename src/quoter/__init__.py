"""Single-pool Uniswap V3 quoting over the on-chain Quoter contract."""

from src.quoter.config import Chain, QuoterSettings
from src.quoter.engine import UniswapV3PoolQuoter
from src.quoter.errors import (
    AmountPrecisionError,
    InitializationError,
    InvalidAmountError,
    InvalidPoolError,
    InvalidTokenDataError,
    InvalidTokenError,
    PoolNotFoundError,
    QuoterError,
    QuoteUnavailableError,
)
from src.quoter.models import LoadedPool, LpState, Pool, QuoteResult, Token
from src.quoter.units import from_base_units, round_significant, to_base_units

__all__ = [
    "Chain",
    "QuoterSettings",
    "UniswapV3PoolQuoter",
    # Errors
    "AmountPrecisionError",
    "InitializationError",
    "InvalidAmountError",
    "InvalidPoolError",
    "InvalidTokenDataError",
    "InvalidTokenError",
    "PoolNotFoundError",
    "QuoterError",
    "QuoteUnavailableError",
    # Models
    "LoadedPool",
    "LpState",
    "Pool",
    "QuoteResult",
    "Token",
    # Units
    "from_base_units",
    "round_significant",
    "to_base_units",
]

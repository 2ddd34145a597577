#!/usr/bin/env python3
"""Quote a tiny WETH -> USDC swap through the mainnet WETH/USDC 0.3% pool.

Requires ETHEREUM_RPC_URL in the environment or .env.
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.quoter import QuoterError, UniswapV3PoolQuoter
from src.quoter.config import TOKEN_ADDRESSES, WETH_USDC_POOL
from src.quoter.log_config import configure_logging

load_dotenv()


async def main() -> int:
    configure_logging(json_output=False, level="INFO")

    try:
        quoter = await UniswapV3PoolQuoter.create(WETH_USDC_POOL)
    except QuoterError as e:
        print(f"Could not load pool: {e}")
        return 1

    weth = TOKEN_ADDRESSES["ethereum"]["WETH"]
    usdc = TOKEN_ADDRESSES["ethereum"]["USDC"]

    print(f"Pool {quoter.pool.address} ({quoter.token_a.symbol}/{quoter.token_b.symbol}, fee {quoter.fee})")
    print(f"Spot price {quoter.token_a.symbol} in {quoter.token_b.symbol}: {quoter.spot_price():.6f}")

    for token_in, amount in ((weth, "0.0001"), (usdc, "100")):
        try:
            result = await quoter.compute_amount_out(token_in, amount)
        except QuoterError as e:
            print(f"Quote failed: {e}")
            return 1
        print(
            f"{amount} {result.token_in.symbol} -> {result.qty} {result.token_out.symbol} "
            f"(price {result.price} {result.token_in.symbol}/{result.token_out.symbol})"
        )

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

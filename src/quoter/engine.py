"""Indicative swap quotes for a single Uniswap V3 pool."""

from __future__ import annotations

from decimal import Decimal, localcontext

import structlog

from src.quoter.config import QuoterSettings
from src.quoter.direction import get_token, resolve_direction, token_leg_index
from src.quoter.errors import InitializationError, InvalidAmountError, QuoteUnavailableError
from src.quoter.log_config import quote_context
from src.quoter.models import Address, LoadedPool, LpState, Pool, QuoteResult, Token
from src.quoter.pool_directory import OnChainPoolDirectory, PoolDirectory
from src.quoter.quoter_contract import (
    NO_PRICE_LIMIT,
    QuotingService,
    Web3QuoterContract,
    make_web3,
)
from src.quoter.units import (
    AmountLike,
    from_base_units,
    parse_amount,
    round_significant,
    to_base_units,
)

logger = structlog.get_logger()


class UniswapV3PoolQuoter:
    """Quote exact-input swaps through one pool via the on-chain Quoter.

    Instances are built with :meth:`create`, which loads the pool and binds
    the quoting service before returning, so every instance is usable.

    Example:
        >>> quoter = await UniswapV3PoolQuoter.create(WETH_USDC_POOL)
        >>> result = await quoter.compute_amount_out(WETH, "0.0001")
        >>> result.qty, result.price
    """

    def __init__(
        self,
        loaded: LoadedPool,
        quoting_service: QuotingService,
        *,
        reference_amount: Decimal = Decimal("0.0001"),
        significant_digits: int = 12,
    ):
        self._pool = loaded.pool
        self._lp_state = loaded.lp_state
        self.quoting_service = quoting_service
        self.reference_amount = reference_amount
        self.significant_digits = significant_digits

    @classmethod
    async def create(
        cls,
        pool_address: Address,
        *,
        settings: QuoterSettings | None = None,
        directory: PoolDirectory | None = None,
        quoting_service: QuotingService | None = None,
    ) -> UniswapV3PoolQuoter:
        """Load a pool and return a ready quoter bound to it.

        Collaborators not supplied are built from settings (web3 over the
        configured RPC URL).

        Raises:
            InitializationError: Pool could not be loaded or the quoting
                service could not be bound; the cause is chained
        """
        try:
            settings = settings or QuoterSettings()
            if directory is None or quoting_service is None:
                w3 = make_web3(settings)
                directory = directory or OnChainPoolDirectory(w3)
                quoting_service = quoting_service or Web3QuoterContract(
                    w3, settings.get_quoter_address()
                )
            loaded = await directory.load(pool_address)
        except Exception as e:
            logger.warning(
                "pool_quoter.initialization_failed",
                pool=pool_address,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise InitializationError(pool_address, str(e)) from e

        quoter = cls(
            loaded,
            quoting_service,
            reference_amount=settings.reference_amount,
            significant_digits=settings.significant_digits,
        )
        logger.info(
            "pool_quoter.initialized",
            pool=quoter.pool.address,
            token_a=quoter.token_a.symbol or quoter.token_a.address,
            token_b=quoter.token_b.symbol or quoter.token_b.address,
            fee_tier=quoter.fee,
        )
        return quoter

    @property
    def pool(self) -> Pool:
        return self._pool

    @property
    def token_a(self) -> Token:
        return self._pool.token_a

    @property
    def token_b(self) -> Token:
        return self._pool.token_b

    @property
    def fee(self) -> int:
        return self._pool.fee

    def get_lp_state(self) -> LpState:
        """Liquidity snapshot taken when the pool was loaded."""
        return self._lp_state

    def spot_price(self) -> Decimal:
        """Price of token A in token B implied by the loaded sqrtPriceX96."""
        return self._lp_state.token0_price(self.token_a.decimals, self.token_b.decimals)

    def get_token_leg_index(self, token_address: Address) -> int:
        return token_leg_index(self._pool, token_address)

    def get_token(self, token_address: Address) -> Token:
        return get_token(self._pool, token_address)

    def determine_token_in_and_out(self, token_in_address: Address) -> tuple[Token, Token]:
        return resolve_direction(self._pool, token_in_address)

    async def compute_amount_out(self, token_in_address: Address, amount: AmountLike) -> QuoteResult:
        """Quote swapping ``amount`` of ``token_in_address`` for the other pool token.

        Args:
            token_in_address: Address of the token being paid (either case)
            amount: Human-readable decimal amount, e.g. "0.0001"

        Returns:
            QuoteResult with qty (output tokens) and price (input per output)

        Raises:
            InvalidTokenError: Token is not part of the pool
            InvalidAmountError: Amount is malformed, negative or zero
            AmountPrecisionError: Amount is finer than the input token's decimals
            QuoteUnavailableError: Quoter call failed or returned no output
        """
        with quote_context(self._pool.address, token_in_address):
            return await self._quote(token_in_address, amount)

    async def _quote(self, token_in_address: Address, amount: AmountLike) -> QuoteResult:
        token_in, token_out = resolve_direction(self._pool, token_in_address)

        amount_decimal = parse_amount(amount)
        amount_in = to_base_units(amount_decimal, token_in.decimals)
        if amount_in == 0:
            raise InvalidAmountError(amount, "must be positive to quote")

        try:
            amount_out = await self.quoting_service.quote_exact_input_single(
                token_in.address,
                token_out.address,
                self._pool.fee,
                amount_in,
                NO_PRICE_LIMIT,
            )
        except Exception as e:
            logger.warning(
                "pool_quoter.quote_failed",
                token_out=token_out.address,
                amount_in=str(amount_in),
                error_type=type(e).__name__,
                error=str(e),
            )
            raise QuoteUnavailableError(
                self._pool.address, token_in.address, token_out.address, amount_in, str(e)
            ) from e

        if amount_out <= 0:
            raise QuoteUnavailableError(
                self._pool.address,
                token_in.address,
                token_out.address,
                amount_in,
                "quoter returned no output",
            )

        qty = round_significant(
            from_base_units(amount_out, token_out.decimals), self.significant_digits
        )
        with localcontext() as ctx:
            ctx.prec = self.significant_digits + 10
            price = round_significant(amount_decimal / qty, self.significant_digits)

        logger.debug(
            "pool_quoter.quote_computed",
            token_out=token_out.symbol or token_out.address,
            amount_in=str(amount_in),
            amount_out=str(amount_out),
            qty=str(qty),
            price=str(price),
        )

        return QuoteResult(
            price=float(price),
            qty=float(qty),
            amount_in=amount_in,
            amount_out=amount_out,
            token_in=token_in,
            token_out=token_out,
        )

    async def compute_reference_quote(self, token_in_address: Address) -> QuoteResult:
        """Quote the configured reference amount (a tiny probe size by default)."""
        return await self.compute_amount_out(token_in_address, self.reference_amount)

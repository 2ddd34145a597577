"""Exception hierarchy for the pool quoter."""

from __future__ import annotations


class QuoterError(Exception):
    """Base exception for quoting errors."""


class InvalidTokenError(QuoterError):
    """Raised when a token address does not belong to the pool."""

    def __init__(self, address: str, pool_address: str | None = None) -> None:
        self.address = address
        self.pool_address = pool_address
        msg = f"Token {address} is not part of pool"
        if pool_address:
            msg = f"{msg} {pool_address}"
        super().__init__(msg)


class InvalidAmountError(QuoterError):
    """Raised when an amount cannot be parsed as a non-negative finite decimal."""

    def __init__(self, amount: object, reason: str) -> None:
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount!r}: {reason}")


class AmountPrecisionError(QuoterError):
    """Raised when an amount is finer than the token's base-unit granularity."""

    def __init__(self, amount: object, decimals: int) -> None:
        self.amount = amount
        self.decimals = decimals
        super().__init__(
            f"Amount {amount} has more than {decimals} fractional digits "
            "and cannot be expressed in base units"
        )


class InvalidPoolError(QuoterError):
    """Raised when pool data violates pool invariants."""


class InvalidTokenDataError(InvalidPoolError):
    """Raised when a pool token's metadata is unusable."""

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"Token {address} has invalid metadata: {reason}")


class PoolNotFoundError(QuoterError):
    """Raised when no pool contract exists at an address."""

    def __init__(self, pool_address: str, reason: str = "no contract code") -> None:
        self.pool_address = pool_address
        super().__init__(f"Pool {pool_address} not found: {reason}")


class QuoteUnavailableError(QuoterError):
    """Raised when the quoting service could not produce an output amount.

    Potentially retriable by the caller; nothing is retried internally.
    """

    def __init__(
        self,
        pool_address: str,
        token_in: str,
        token_out: str,
        amount_in: int,
        reason: str,
    ) -> None:
        self.pool_address = pool_address
        self.token_in = token_in
        self.token_out = token_out
        self.amount_in = amount_in
        self.reason = reason
        super().__init__(
            f"Quote unavailable for {amount_in} of {token_in} -> {token_out} "
            f"in pool {pool_address}: {reason}"
        )


class InitializationError(QuoterError):
    """Raised when a quoter could not be bound to its pool."""

    def __init__(self, pool_address: str, reason: str) -> None:
        self.pool_address = pool_address
        self.reason = reason
        super().__init__(f"Failed to initialize quoter for pool {pool_address}: {reason}")

"""Resolve which pool token is the input leg and which is the output leg."""

from __future__ import annotations

from src.quoter.errors import InvalidTokenError
from src.quoter.models import Address, Pool, Token


def token_leg_index(pool: Pool, token_address: Address) -> int:
    """Return 0 if the address is the pool's token A, 1 if token B.

    Raises:
        InvalidTokenError: address belongs to neither token
    """
    if pool.token_a.same_address(token_address):
        return 0
    if pool.token_b.same_address(token_address):
        return 1
    raise InvalidTokenError(token_address, pool.address)


def get_token(pool: Pool, token_address: Address) -> Token:
    """Return the pool token with the given address."""
    return pool.token_a if token_leg_index(pool, token_address) == 0 else pool.token_b


def resolve_direction(pool: Pool, token_in_address: Address) -> tuple[Token, Token]:
    """Return ``(token_in, token_out)`` for a swap paying ``token_in_address``.

    There is no fallback ordering: an unknown address is always an error,
    since guessing the direction would invert the quoted price.
    """
    if token_leg_index(pool, token_in_address) == 0:
        return pool.token_a, pool.token_b
    return pool.token_b, pool.token_a

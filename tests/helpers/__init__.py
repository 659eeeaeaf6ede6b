"""Test helpers module for shared test utilities.

- constants: Contract addresses, denoms and serialized constants
- factories: Asset, pair and operation factory functions
"""

from tests.helpers.constants import (
    DECIMAL_MAX_STR,
    FACTORY,
    PAIR_CONTRACT,
    PAIR_TOKA_ULUNA,
    PAIR_TOKEN,
    PAIR_UUSD_TOKA,
    ROUTER,
    TOKEN_A,
    ULUNA,
    USER,
    UUSD,
)
from tests.helpers.factories import make_asset, make_pair, make_swap, native, token

__all__ = [
    # Constants
    "ROUTER",
    "FACTORY",
    "USER",
    "UUSD",
    "ULUNA",
    "TOKEN_A",
    "PAIR_TOKEN",
    "PAIR_CONTRACT",
    "PAIR_UUSD_TOKA",
    "PAIR_TOKA_ULUNA",
    "DECIMAL_MAX_STR",
    # Factories
    "native",
    "token",
    "make_asset",
    "make_pair",
    "make_swap",
]

"""Pytest configuration and fixtures."""

import pytest

from swap_router.querier import ChainState, Deps, Env, FixedTax, MessageInfo
from swap_router.registry import PairRegistry
from swap_router.state import CONFIG, Config
from tests.helpers import (
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
    make_pair,
    native,
    token,
)


@pytest.fixture
def chain() -> ChainState:
    """Empty chain balances."""
    return ChainState()


@pytest.fixture
def registry() -> PairRegistry:
    """Factory registry with the pairs used across tests."""
    return PairRegistry(
        FACTORY,
        [
            make_pair(native(UUSD), token(PAIR_TOKEN), PAIR_CONTRACT),
            make_pair(native(UUSD), token(TOKEN_A), PAIR_UUSD_TOKA),
            make_pair(token(TOKEN_A), native(ULUNA), PAIR_TOKA_ULUNA),
        ],
    )


@pytest.fixture
def tax() -> FixedTax:
    """Tax querier with no taxes; tests set ``tax.taxes[denom]`` as needed."""
    return FixedTax()


@pytest.fixture
def deps(chain: ChainState, registry: PairRegistry, tax: FixedTax) -> Deps:
    """Dependencies of an instantiated router."""
    storage: dict[str, bytes] = {}
    CONFIG.save(storage, Config(factory_addr=FACTORY))
    return Deps(storage=storage, pairs=registry, balances=chain, tax=tax)


@pytest.fixture
def env() -> Env:
    return Env(contract_address=ROUTER)


@pytest.fixture
def self_info() -> MessageInfo:
    """The router calling itself."""
    return MessageInfo(sender=ROUTER)


@pytest.fixture
def user_info() -> MessageInfo:
    return MessageInfo(sender=USER)

"""Query interfaces the router consumes, plus in-memory implementations.

The router never reaches for ambient state: every call receives a ``Deps``
bundle holding storage and the three queriers, and an ``Env``/``MessageInfo``
describing the contract and the caller.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

import structlog
from typing_extensions import assert_never

from swap_router.models.asset import Asset, NativeToken, PairInfo, Token
from swap_router.models.types import DECIMAL_FRACTIONAL, decimal_atomics
from swap_router.safe_int import UINT128_MAX, S
from swap_router.settings import DEFAULT_TAX_EXEMPT_DENOMS

if TYPE_CHECKING:
    from swap_router.state import Storage

logger = structlog.get_logger()


class PairQuerier(Protocol):
    """Factory lookup of the pair contract trading two assets."""

    def query_pair_info(
        self,
        factory_addr: str,
        asset_infos: Sequence[NativeToken | Token],
    ) -> PairInfo:
        """Return the pair for ``asset_infos`` (order independent).

        Raises:
            PairNotFound: If the factory has no such pair
        """
        ...


class BalanceQuerier(Protocol):
    """Balance lookups for native and token assets."""

    def query_balance(self, address: str, denom: str) -> int:
        """Native balance of ``address`` in ``denom``."""
        ...

    def query_token_balance(self, contract_addr: str, address: str) -> int:
        """Balance of ``address`` held in token contract ``contract_addr``."""
        ...


class TaxQuerier(Protocol):
    """Transfer tax applied to native asset transfers."""

    def compute_tax(self, asset: Asset) -> int:
        ...


@dataclass(frozen=True)
class Env:
    """Execution environment of the contract instance."""

    contract_address: str


@dataclass(frozen=True)
class MessageInfo:
    """Who called the contract."""

    sender: str


@dataclass
class Deps:
    """Storage and queriers handed to every contract entry point."""

    storage: Storage
    pairs: PairQuerier
    balances: BalanceQuerier
    tax: TaxQuerier


def query_asset_balance(
    balances: BalanceQuerier,
    info: NativeToken | Token,
    address: str,
) -> int:
    """Query the balance of ``address`` in either kind of asset."""
    if isinstance(info, NativeToken):
        return balances.query_balance(address, info.denom)
    elif isinstance(info, Token):
        return balances.query_token_balance(info.contract_addr, address)
    else:
        assert_never(info)


class ChainState:
    """In-memory balances of native denominations and token contracts.

    Unknown balances read as zero.
    """

    def __init__(self) -> None:
        # (address, denom) -> amount
        self._native: dict[tuple[str, str], int] = {}
        # (token contract, holder) -> amount
        self._tokens: dict[tuple[str, str], int] = {}

    def set_balance(self, address: str, denom: str, amount: int) -> None:
        self._native[(address, denom)] = S(amount).to_uint128()

    def set_token_balance(self, contract_addr: str, address: str, amount: int) -> None:
        self._tokens[(contract_addr, address)] = S(amount).to_uint128()

    def query_balance(self, address: str, denom: str) -> int:
        return self._native.get((address, denom), 0)

    def query_token_balance(self, contract_addr: str, address: str) -> int:
        return self._tokens.get((contract_addr, address), 0)


@dataclass(frozen=True)
class TaxPolicy:
    """Native transfer tax: a rate on the transferred amount, capped per denom.

    The tax is taken out of ``amount`` so that ``amount - tax`` plus the tax
    on it adds back up to ``amount``:

        tax = min(amount - amount / (1 + rate), cap[denom])

    Token assets and exempt denominations are never taxed. Denominations
    without a cap are uncapped.

    Attributes:
        rate: Tax rate as a decimal fraction (e.g. Decimal("0.005"))
        caps: Maximum tax per transfer, keyed by denom
        exempt_denoms: Denominations that are never taxed
    """

    rate: Decimal = Decimal(0)
    caps: Mapping[str, int] = field(default_factory=dict)
    exempt_denoms: frozenset[str] = DEFAULT_TAX_EXEMPT_DENOMS

    def compute_tax(self, asset: Asset) -> int:
        info = asset.info
        if isinstance(info, Token):
            return 0
        elif isinstance(info, NativeToken):
            if info.denom in self.exempt_denoms or self.rate == 0:
                return 0
            amount = S(asset.amount_int)
            net = amount.multiply_ratio(
                DECIMAL_FRACTIONAL, decimal_atomics(self.rate) + DECIMAL_FRACTIONAL
            )
            tax = (amount - net).min(self.caps.get(info.denom, UINT128_MAX))
            logger.debug(
                "tax_computed",
                denom=info.denom,
                amount=asset.amount,
                tax=tax.value,
            )
            return tax.value
        else:
            assert_never(info)


class FixedTax:
    """Tax querier returning preset amounts per native denom (handy for dry runs)."""

    def __init__(self, taxes: Mapping[str, int] | None = None) -> None:
        self.taxes = dict(taxes or {})

    def compute_tax(self, asset: Asset) -> int:
        if isinstance(asset.info, NativeToken):
            return self.taxes.get(asset.info.denom, 0)
        return 0


__all__ = [
    "PairQuerier",
    "BalanceQuerier",
    "TaxQuerier",
    "Env",
    "MessageInfo",
    "Deps",
    "query_asset_balance",
    "ChainState",
    "TaxPolicy",
    "FixedTax",
]

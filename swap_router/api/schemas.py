"""Request/response models for the dry-run API.

A request carries a snapshot of the chain state the router would see:
pairs known to the factory, balances, and the native tax parameters.
"""

from typing import Any

from pydantic import BaseModel, Field

from swap_router.models.asset import PairInfo
from swap_router.models.messages import Response, WasmExecuteMsg
from swap_router.models.operations import SwapOperation
from swap_router.models.types import Addr, Denom, FixedDecimal, Uint128
from swap_router.querier import ChainState, Deps, Env, TaxPolicy
from swap_router.registry import PairRegistry
from swap_router.settings import RouterSettings
from swap_router.state import CONFIG, Config


class NativeBalance(BaseModel):
    address: Addr
    denom: Denom
    amount: Uint128


class TokenBalance(BaseModel):
    token: Addr
    address: Addr
    amount: Uint128


class TaxParams(BaseModel):
    """Native tax parameters; omitted fields fall back to router settings."""

    rate: FixedDecimal | None = None
    caps: dict[str, Uint128] = Field(default_factory=dict)
    exempt_denoms: list[Denom] | None = None


class ChainSnapshot(BaseModel):
    """Chain state visible to the router during a dry run."""

    router: Addr = Field(description="Address of the router contract.")
    factory_addr: Addr = Field(description="Factory the router was instantiated with.")
    pairs: list[PairInfo] = Field(default_factory=list)
    native_balances: list[NativeBalance] = Field(default_factory=list)
    token_balances: list[TokenBalance] = Field(default_factory=list)
    tax: TaxParams | None = None

    def build(self, settings: RouterSettings) -> tuple[Deps, Env]:
        """Materialize the snapshot as router dependencies."""
        chain = ChainState()
        for native in self.native_balances:
            chain.set_balance(native.address, native.denom, int(native.amount))
        for token in self.token_balances:
            chain.set_token_balance(token.token, token.address, int(token.amount))

        tax = self.tax or TaxParams()
        policy = TaxPolicy(
            rate=tax.rate if tax.rate is not None else settings.tax_rate,
            caps={denom: int(cap) for denom, cap in tax.caps.items()},
            exempt_denoms=(
                frozenset(tax.exempt_denoms)
                if tax.exempt_denoms is not None
                else settings.tax_exempt_denoms
            ),
        )

        storage: dict[str, bytes] = {}
        CONFIG.save(storage, Config(factory_addr=self.factory_addr))

        deps = Deps(
            storage=storage,
            pairs=PairRegistry(self.factory_addr, self.pairs),
            balances=chain,
            tax=policy,
        )
        return deps, Env(contract_address=self.router)


class SwapLegRequest(BaseModel):
    """Dry-run one leg. ``sender`` defaults to the router itself."""

    snapshot: ChainSnapshot
    sender: Addr | None = None
    operation: SwapOperation
    to: Addr | None = None
    max_spread: FixedDecimal | None = None
    single: bool = False


class RouteRequest(BaseModel):
    """Dry-run the planning step of a multi-hop route."""

    snapshot: ChainSnapshot
    sender: Addr
    operations: list[SwapOperation] = Field(default_factory=list)
    minimum_receive: Uint128 | None = None
    to: Addr | None = None
    max_spread: FixedDecimal | None = None


class SimulationResponse(BaseModel):
    """Messages the router would emit, with their payloads decoded."""

    messages: list[WasmExecuteMsg] = Field(default_factory=list)
    payloads: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_response(cls, response: Response) -> "SimulationResponse":
        return cls(
            messages=response.messages,
            payloads=[message.decode_msg() for message in response.messages],
        )


class ErrorResponse(BaseModel):
    error: str
    detail: str

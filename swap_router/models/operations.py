"""Swap operation models: one leg of a (possibly multi-hop) route."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Discriminator, Tag

from swap_router.models.asset import AssetInfo, NativeToken, Token
from swap_router.models.types import Denom


class ProtocolSwap(BaseModel):
    """Swap through the pair contract registered for the two assets."""

    kind: Literal["protocol_swap"] = "protocol_swap"
    offer_asset_info: AssetInfo
    ask_asset_info: AssetInfo

    model_config = {"frozen": True}

    @property
    def offer(self) -> NativeToken | Token:
        return self.offer_asset_info

    @property
    def ask(self) -> NativeToken | Token:
        return self.ask_asset_info


class NativeSwap(BaseModel):
    """Native-to-native conversion. The router rejects it."""

    kind: Literal["native_swap"] = "native_swap"
    offer_denom: Denom
    ask_denom: Denom

    model_config = {"frozen": True}

    @property
    def offer(self) -> NativeToken:
        return NativeToken(denom=self.offer_denom)

    @property
    def ask(self) -> NativeToken:
        return NativeToken(denom=self.ask_denom)


def _get_operation_kind(v: dict[str, Any] | ProtocolSwap | NativeSwap) -> str:
    """Discriminator function for SwapOperation union type."""
    if isinstance(v, dict):
        return str(v.get("kind", "protocol_swap"))
    return v.kind


SwapOperation = Annotated[
    Annotated[ProtocolSwap, Tag("protocol_swap")] | Annotated[NativeSwap, Tag("native_swap")],
    Discriminator(_get_operation_kind),
]


__all__ = ["ProtocolSwap", "NativeSwap", "SwapOperation"]

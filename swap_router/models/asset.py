"""Pydantic models for assets and trading pairs.

An asset is either a native chain denomination (moved as attached funds)
or a token contract (moved through the token's transfer/send interface).
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Discriminator, Field, Tag

from swap_router.models.types import Addr, Denom, Uint128


class NativeToken(BaseModel):
    """A chain-level asset identified by its denomination."""

    kind: Literal["native_token"] = "native_token"
    denom: Denom

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.denom


class Token(BaseModel):
    """A token asset identified by its contract address."""

    kind: Literal["token"] = "token"
    contract_addr: Addr

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.contract_addr


def _get_asset_info_kind(v: dict[str, Any] | NativeToken | Token) -> str:
    """Discriminator for AssetInfo; infers the kind from the payload keys if absent."""
    if isinstance(v, dict):
        if "kind" in v:
            return str(v["kind"])
        return "token" if "contract_addr" in v else "native_token"
    return v.kind


AssetInfo = Annotated[
    Annotated[NativeToken, Tag("native_token")] | Annotated[Token, Tag("token")],
    Discriminator(_get_asset_info_kind),
]


class Asset(BaseModel):
    """An amount of a specific asset."""

    info: AssetInfo
    amount: Uint128

    model_config = {"frozen": True}

    @property
    def amount_int(self) -> int:
        """Amount as integer for calculations."""
        return int(self.amount)

    def with_amount(self, amount: int) -> "Asset":
        """Return a copy of this asset holding a different amount."""
        return Asset(info=self.info, amount=amount)

    def __str__(self) -> str:
        return f"{self.amount}{self.info}"


class PairType(str, Enum):
    """Pool curve used by a pair contract."""

    XYK = "xyk"
    STABLE = "stable"
    CUSTOM = "custom"


class PairInfo(BaseModel):
    """Pair metadata as returned by the factory."""

    asset_infos: tuple[AssetInfo, AssetInfo]
    contract_addr: Addr
    liquidity_token: Addr | None = None
    pair_type: PairType = PairType.XYK

    model_config = {"frozen": True}

    def contains(self, info: NativeToken | Token) -> bool:
        """Check whether the pair trades the given asset."""
        return info in self.asset_infos


__all__ = [
    "NativeToken",
    "Token",
    "AssetInfo",
    "Asset",
    "PairType",
    "PairInfo",
]

"""Factory functions for creating test objects.

Usage:
    from tests.helpers import native, token, make_pair

    pair = make_pair(native(UUSD), token(TOKEN_A), "pair_addr")
"""

from swap_router.models.asset import Asset, NativeToken, PairInfo, PairType, Token
from swap_router.models.operations import ProtocolSwap


def native(denom: str) -> NativeToken:
    return NativeToken(denom=denom)


def token(contract_addr: str) -> Token:
    return Token(contract_addr=contract_addr)


def make_asset(info: NativeToken | Token, amount: int) -> Asset:
    return Asset(info=info, amount=amount)


def make_pair(
    asset_a: NativeToken | Token,
    asset_b: NativeToken | Token,
    contract_addr: str,
    pair_type: PairType = PairType.XYK,
) -> PairInfo:
    """Create a pair with a liquidity token address derived from the contract."""
    return PairInfo(
        asset_infos=(asset_a, asset_b),
        contract_addr=contract_addr,
        liquidity_token=f"{contract_addr}_lp",
        pair_type=pair_type,
    )


def make_swap(offer: NativeToken | Token, ask: NativeToken | Token) -> ProtocolSwap:
    return ProtocolSwap(offer_asset_info=offer, ask_asset_info=ask)

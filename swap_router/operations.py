"""Single swap leg execution.

A leg converts the router's whole current holding of the offer asset into
the ask asset through the pair contract registered for the two assets. The
offer amount is read from the live balance rather than passed in: in a
multi-hop route the output of the previous hop is unknown until it settles,
and the runtime settles each hop before dispatching the next.

Two settlement shapes exist:
- Native offer: call the pair's ``swap`` with the (tax-adjusted) amount
  attached as funds
- Token offer: call the token's ``send`` to the pair, carrying a ``swap``
  hook for the pair's receive handler
"""

from __future__ import annotations

from decimal import Decimal

import structlog
from typing_extensions import assert_never

from swap_router.errors import NativeSwapNotSupported, Unauthorized
from swap_router.models.asset import Asset, NativeToken, Token
from swap_router.models.messages import (
    Coin,
    PairSwap,
    PairSwapHook,
    Response,
    TokenSend,
    WasmExecuteMsg,
    to_binary,
)
from swap_router.models.operations import NativeSwap, ProtocolSwap, SwapOperation
from swap_router.models.types import DECIMAL_MAX
from swap_router.querier import Deps, Env, MessageInfo, query_asset_balance
from swap_router.safe_int import S
from swap_router.state import CONFIG

logger = structlog.get_logger()


def execute_swap_operation(
    deps: Deps,
    env: Env,
    info: MessageInfo,
    operation: SwapOperation,
    to: str | None = None,
    max_spread: Decimal | None = None,
    single: bool = False,
) -> Response:
    """Execute one swap leg.

    Args:
        deps: Storage and queriers
        env: Contract environment (provides the router's own address)
        info: Caller information; the caller must be the router itself
        operation: The leg to perform
        to: Address receiving the ask asset (None: the router itself)
        max_spread: Max spread forwarded to the pair
        single: True if this leg is the entire route

    Returns:
        Response holding exactly one outbound message

    Raises:
        Unauthorized: If the caller is not the router contract
        NativeSwapNotSupported: For native-to-native operations
        PairNotFound: If the factory has no pair for the assets
        ArithmeticUnderflow: If the native tax exceeds the offer amount
    """
    if info.sender != env.contract_address:
        logger.warning(
            "unauthorized_swap_operation",
            sender=info.sender,
            contract=env.contract_address,
        )
        raise Unauthorized(f"Sender {info.sender} is not the router contract")

    if isinstance(operation, NativeSwap):
        raise NativeSwapNotSupported(
            f"Cannot swap {operation.offer_denom} to {operation.ask_denom} natively"
        )
    elif isinstance(operation, ProtocolSwap):
        offer_asset_info = operation.offer_asset_info
        ask_asset_info = operation.ask_asset_info

        config = CONFIG.load(deps.storage)
        pair_info = deps.pairs.query_pair_info(
            config.factory_addr, [offer_asset_info, ask_asset_info]
        )

        amount = query_asset_balance(deps.balances, offer_asset_info, env.contract_address)
        offer_asset = Asset(info=offer_asset_info, amount=amount)

        logger.debug(
            "pair_resolved",
            pair=pair_info.contract_addr,
            offer=str(offer_asset_info),
            ask=str(ask_asset_info),
            offer_amount=amount,
        )

        message = asset_into_swap_msg(
            deps,
            pair_info.contract_addr,
            offer_asset,
            ask_asset_info,
            max_spread,
            to,
            single,
        )
    else:
        assert_never(operation)

    return Response().add_message(message)


def asset_into_swap_msg(
    deps: Deps,
    pair_contract: str,
    offer_asset: Asset,
    ask_asset_info: NativeToken | Token,
    max_spread: Decimal | None,
    to: str | None,
    single: bool,
) -> WasmExecuteMsg:
    """Build the message that swaps ``offer_asset`` on ``pair_contract``.

    Intermediate hops of a route are not individually price sensitive, so
    for ``single=False`` the belief price is pinned to DECIMAL_MAX, which
    turns off the pair's own price assertion. ``max_spread`` is forwarded
    either way.

    Args:
        deps: Queriers (only the tax querier is used)
        pair_contract: Pair contract performing the swap
        offer_asset: Asset and amount to offer
        ask_asset_info: Asset to receive
        max_spread: Max spread enforced by the pair
        to: Address receiving the ask asset
        single: True if this swap is the entire route

    Returns:
        The outbound message

    Raises:
        ArithmeticUnderflow: If the native tax exceeds the offer amount
        SerializationFailure: If a payload cannot be encoded
    """
    belief_price = None if single else DECIMAL_MAX

    info = offer_asset.info
    if isinstance(info, NativeToken):
        tax = deps.tax.compute_tax(offer_asset)
        amount = (S(offer_asset.amount_int) - tax).value
        adjusted_offer = offer_asset.with_amount(amount)

        message = WasmExecuteMsg(
            contract_addr=pair_contract,
            funds=[Coin(denom=info.denom, amount=amount)],
            msg=to_binary(
                PairSwap(
                    offer_asset=adjusted_offer,
                    ask_asset_info=ask_asset_info,
                    belief_price=belief_price,
                    max_spread=max_spread,
                    to=to,
                )
            ),
        )
        logger.info(
            "swap_leg_built",
            settlement="native",
            pair=pair_contract,
            offer=str(adjusted_offer),
            tax=tax,
            ask=str(ask_asset_info),
            single=single,
        )
        return message
    elif isinstance(info, Token):
        hook = PairSwapHook(
            ask_asset_info=ask_asset_info,
            belief_price=belief_price,
            max_spread=max_spread,
            to=to,
        )
        message = WasmExecuteMsg(
            contract_addr=info.contract_addr,
            funds=[],
            msg=to_binary(
                TokenSend(
                    contract=pair_contract,
                    amount=offer_asset.amount,
                    msg=to_binary(hook),
                )
            ),
        )
        logger.info(
            "swap_leg_built",
            settlement="token",
            pair=pair_contract,
            offer=str(offer_asset),
            ask=str(ask_asset_info),
            single=single,
        )
        return message
    else:
        assert_never(info)


__all__ = ["execute_swap_operation", "asset_into_swap_msg"]

"""Router contract entry points: instantiate, execute, query.

A route (``ExecuteSwapOperations``) is split into one self-addressed
``ExecuteSwapOperation`` message per hop. The runtime dispatches them in
order, each after the previous one has settled, which is what lets every hop
offer the router's live balance.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

import structlog
from typing_extensions import assert_never

from swap_router.errors import (
    AssertionMinimumReceive,
    InvalidOperations,
    MustProvideOperations,
    SwapLimitExceeded,
)
from swap_router.models.asset import NativeToken, Token
from swap_router.models.contract import (
    AssertMinimumReceive,
    ExecuteMsg,
    ExecuteSwapOperation,
    ExecuteSwapOperations,
    InstantiateMsg,
)
from swap_router.models.messages import Response, WasmExecuteMsg, to_binary
from swap_router.models.operations import SwapOperation
from swap_router.operations import execute_swap_operation
from swap_router.querier import Deps, Env, MessageInfo, query_asset_balance
from swap_router.safe_int import S
from swap_router.settings import DEFAULT_SETTINGS, RouterSettings
from swap_router.state import CONFIG, Config

logger = structlog.get_logger()


def instantiate(deps: Deps, env: Env, info: MessageInfo, msg: InstantiateMsg) -> Response:
    """Store the router config."""
    CONFIG.save(deps.storage, Config(factory_addr=msg.factory_addr))
    logger.info(
        "router_instantiated",
        contract=env.contract_address,
        factory_addr=msg.factory_addr,
        sender=info.sender,
    )
    return Response().add_attribute("action", "instantiate")


def execute(
    deps: Deps,
    env: Env,
    info: MessageInfo,
    msg: ExecuteMsg,
    settings: RouterSettings = DEFAULT_SETTINGS,
) -> Response:
    """Dispatch an execute message to its handler."""
    if isinstance(msg, ExecuteSwapOperations):
        return execute_swap_operations(
            deps,
            env,
            info,
            msg.operations,
            minimum_receive=int(msg.minimum_receive) if msg.minimum_receive is not None else None,
            to=msg.to,
            max_spread=msg.max_spread,
            settings=settings,
        )
    elif isinstance(msg, ExecuteSwapOperation):
        return execute_swap_operation(
            deps,
            env,
            info,
            msg.operation,
            to=msg.to,
            max_spread=msg.max_spread,
            single=msg.single,
        )
    elif isinstance(msg, AssertMinimumReceive):
        return assert_minimum_receive(
            deps,
            msg.asset_info,
            prev_balance=int(msg.prev_balance),
            minimum_receive=int(msg.minimum_receive),
            receiver=msg.receiver,
        )
    else:
        assert_never(msg)


def assert_operations(operations: Sequence[SwapOperation]) -> None:
    """Check that the hops form a connected path.

    Raises:
        InvalidOperations: If a hop swaps an asset into itself or its ask
            asset is not the next hop's offer asset
    """
    for index, operation in enumerate(operations):
        if operation.offer == operation.ask:
            raise InvalidOperations(f"Operation {index} swaps {operation.offer} into itself")
        if index + 1 < len(operations):
            following = operations[index + 1]
            if operation.ask != following.offer:
                raise InvalidOperations(
                    f"Operation {index} asks {operation.ask} "
                    f"but operation {index + 1} offers {following.offer}"
                )


def execute_swap_operations(
    deps: Deps,
    env: Env,
    info: MessageInfo,
    operations: Sequence[SwapOperation],
    minimum_receive: int | None = None,
    to: str | None = None,
    max_spread: Decimal | None = None,
    settings: RouterSettings = DEFAULT_SETTINGS,
) -> Response:
    """Split a route into per-hop self messages.

    Only the last hop names the recipient (``to``, defaulting to the
    sender); earlier hops pay out to the router so the next hop can offer
    the proceeds. ``single`` is set only for one-hop routes.

    Args:
        deps: Storage and queriers
        env: Contract environment
        info: Caller information
        operations: Hops in execution order
        minimum_receive: If set, append a final check that the recipient
            received at least this much of the last ask asset
        to: Final recipient (default: the sender)
        max_spread: Max spread forwarded to every hop
        settings: Router settings (hop limit)

    Returns:
        Response with one message per hop, plus the optional assertion

    Raises:
        MustProvideOperations: If ``operations`` is empty
        SwapLimitExceeded: If there are more hops than allowed
        InvalidOperations: If the hops do not connect
    """
    operations_len = len(operations)
    if operations_len == 0:
        raise MustProvideOperations()
    if operations_len > settings.max_swap_operations:
        raise SwapLimitExceeded(
            f"Route has {operations_len} operations, limit is {settings.max_swap_operations}"
        )
    assert_operations(operations)

    recipient = to or info.sender
    target_asset_info = operations[-1].ask
    single = operations_len == 1

    response = Response().add_attribute("action", "execute_swap_operations")
    for index, operation in enumerate(operations):
        is_last = index == operations_len - 1
        response.add_message(
            _self_message(
                env,
                ExecuteSwapOperation(
                    operation=operation,
                    to=recipient if is_last else None,
                    max_spread=max_spread,
                    single=single,
                ),
            )
        )

    if minimum_receive is not None:
        prev_balance = query_asset_balance(deps.balances, target_asset_info, recipient)
        response.add_message(
            _self_message(
                env,
                AssertMinimumReceive(
                    asset_info=target_asset_info,
                    prev_balance=prev_balance,
                    minimum_receive=minimum_receive,
                    receiver=recipient,
                ),
            )
        )

    logger.info(
        "route_planned",
        hops=operations_len,
        recipient=recipient,
        target=str(target_asset_info),
        minimum_receive=minimum_receive,
    )
    return response


def assert_minimum_receive(
    deps: Deps,
    asset_info: NativeToken | Token,
    prev_balance: int,
    minimum_receive: int,
    receiver: str,
) -> Response:
    """Fail unless ``receiver`` gained at least ``minimum_receive``.

    Raises:
        ArithmeticUnderflow: If the receiver's balance dropped below ``prev_balance``
        AssertionMinimumReceive: If the gain is smaller than ``minimum_receive``
    """
    receiver_balance = query_asset_balance(deps.balances, asset_info, receiver)
    swap_amount = S(receiver_balance) - prev_balance

    if swap_amount < minimum_receive:
        logger.warning(
            "minimum_receive_not_met",
            receiver=receiver,
            asset=str(asset_info),
            received=swap_amount.value,
            minimum_receive=minimum_receive,
        )
        raise AssertionMinimumReceive(
            f"Assertion failed; minimum receive amount: {minimum_receive}, "
            f"swap amount: {swap_amount.value}"
        )
    return Response()


def query_config(deps: Deps) -> Config:
    """Return the stored router config."""
    return CONFIG.load(deps.storage)


def _self_message(env: Env, payload: ExecuteSwapOperation | AssertMinimumReceive) -> WasmExecuteMsg:
    return WasmExecuteMsg(contract_addr=env.contract_address, funds=[], msg=to_binary(payload))


__all__ = [
    "instantiate",
    "execute",
    "execute_swap_operations",
    "assert_operations",
    "assert_minimum_receive",
    "query_config",
]

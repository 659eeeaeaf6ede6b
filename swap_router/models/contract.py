"""Inbound messages accepted by the router contract."""

from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, Discriminator, Field, Tag, TypeAdapter

from swap_router.models.asset import AssetInfo
from swap_router.models.messages import WirePayload
from swap_router.models.operations import SwapOperation
from swap_router.models.types import Addr, FixedDecimal, Uint128


class InstantiateMsg(BaseModel):
    """Parameters fixed when the router is instantiated."""

    factory_addr: Addr


class ExecuteSwapOperations(WirePayload):
    """Execute a full route. Callable by anyone."""

    wire_name: ClassVar[str] = "execute_swap_operations"

    kind: Literal["execute_swap_operations"] = "execute_swap_operations"
    operations: list[SwapOperation] = Field(default_factory=list)
    minimum_receive: Uint128 | None = None
    to: Addr | None = None
    max_spread: FixedDecimal | None = None


class ExecuteSwapOperation(WirePayload):
    """Execute one hop. Only the router itself may send this."""

    wire_name: ClassVar[str] = "execute_swap_operation"

    kind: Literal["execute_swap_operation"] = "execute_swap_operation"
    operation: SwapOperation
    to: Addr | None = None
    max_spread: FixedDecimal | None = None
    single: bool


class AssertMinimumReceive(WirePayload):
    """Check that ``receiver`` gained at least ``minimum_receive`` since ``prev_balance``."""

    wire_name: ClassVar[str] = "assert_minimum_receive"

    kind: Literal["assert_minimum_receive"] = "assert_minimum_receive"
    asset_info: AssetInfo
    prev_balance: Uint128
    minimum_receive: Uint128
    receiver: Addr


def _get_execute_kind(
    v: dict[str, Any] | ExecuteSwapOperations | ExecuteSwapOperation | AssertMinimumReceive,
) -> str:
    if isinstance(v, dict):
        return str(v.get("kind", ""))
    return v.kind


ExecuteMsg = Annotated[
    Annotated[ExecuteSwapOperations, Tag("execute_swap_operations")]
    | Annotated[ExecuteSwapOperation, Tag("execute_swap_operation")]
    | Annotated[AssertMinimumReceive, Tag("assert_minimum_receive")],
    Discriminator(_get_execute_kind),
]

_EXECUTE_MSG_ADAPTER: TypeAdapter[ExecuteMsg] = TypeAdapter(ExecuteMsg)


def parse_execute_msg(data: dict[str, Any]) -> ExecuteMsg:
    """Parse an externally tagged execute message (``{"execute_swap_operation": {...}}``).

    Raises:
        ValueError: If the object does not have exactly one tag
        pydantic.ValidationError: If the body does not match the tagged message
    """
    if len(data) != 1:
        raise ValueError(f"Execute message must have exactly one tag, got {list(data)}")
    ((name, body),) = data.items()
    if not isinstance(body, dict):
        raise ValueError(f"Execute message body for '{name}' must be an object")
    return _EXECUTE_MSG_ADAPTER.validate_python({**body, "kind": name})


__all__ = [
    "InstantiateMsg",
    "ExecuteSwapOperations",
    "ExecuteSwapOperation",
    "AssertMinimumReceive",
    "ExecuteMsg",
    "parse_execute_msg",
]

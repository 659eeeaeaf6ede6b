"""Pydantic models for router data structures."""

from swap_router.models.asset import Asset, AssetInfo, NativeToken, PairInfo, PairType, Token
from swap_router.models.contract import (
    AssertMinimumReceive,
    ExecuteMsg,
    ExecuteSwapOperation,
    ExecuteSwapOperations,
    InstantiateMsg,
    parse_execute_msg,
)
from swap_router.models.messages import (
    Coin,
    PairSwap,
    PairSwapHook,
    Response,
    TokenSend,
    WasmExecuteMsg,
    from_binary,
    to_binary,
)
from swap_router.models.operations import NativeSwap, ProtocolSwap, SwapOperation
from swap_router.models.types import DECIMAL_MAX, Addr, Binary, FixedDecimal, Uint128

__all__ = [
    # Types
    "Addr",
    "Binary",
    "FixedDecimal",
    "Uint128",
    "DECIMAL_MAX",
    # Assets
    "Asset",
    "AssetInfo",
    "NativeToken",
    "Token",
    "PairInfo",
    "PairType",
    # Operations
    "SwapOperation",
    "ProtocolSwap",
    "NativeSwap",
    # Outbound messages
    "Coin",
    "PairSwap",
    "PairSwapHook",
    "TokenSend",
    "WasmExecuteMsg",
    "Response",
    "to_binary",
    "from_binary",
    # Contract messages
    "InstantiateMsg",
    "ExecuteMsg",
    "ExecuteSwapOperation",
    "ExecuteSwapOperations",
    "AssertMinimumReceive",
    "parse_execute_msg",
]

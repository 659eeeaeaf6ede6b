"""Pydantic models for outbound instructions and their payloads.

Payloads are encoded the way the contract runtime expects them: an externally
tagged JSON object (``{"swap": {...}}``) serialized compactly and base64
encoded. ``None`` fields are left out of the payload entirely.
"""

import base64
import binascii
import json
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, Field
from pydantic_core import PydanticSerializationError

from swap_router.errors import SerializationFailure
from swap_router.models.asset import Asset, AssetInfo
from swap_router.models.types import Addr, Binary, Denom, FixedDecimal, Uint128


class Coin(BaseModel):
    """Native funds attached to a message."""

    denom: Denom
    amount: Uint128

    model_config = {"frozen": True}


class WirePayload(BaseModel):
    """Base for payload models; ``wire_name`` is the external tag.

    A ``kind`` field, where a subclass has one, is left out of the encoded
    body since the external tag already names the message.
    """

    wire_name: ClassVar[str]


class PairSwap(WirePayload):
    """Swap request executed directly on a pair contract (native offers)."""

    wire_name: ClassVar[str] = "swap"

    offer_asset: Asset
    ask_asset_info: AssetInfo | None = None
    belief_price: FixedDecimal | None = None
    max_spread: FixedDecimal | None = None
    to: Addr | None = None


class PairSwapHook(WirePayload):
    """Swap request delivered to a pair contract through a token send."""

    wire_name: ClassVar[str] = "swap"

    ask_asset_info: AssetInfo | None = None
    belief_price: FixedDecimal | None = None
    max_spread: FixedDecimal | None = None
    to: Addr | None = None


class TokenSend(WirePayload):
    """Token transfer to a contract, invoking its receive hook with ``msg``."""

    wire_name: ClassVar[str] = "send"

    contract: Addr
    amount: Uint128
    msg: Binary


def to_binary(payload: WirePayload) -> str:
    """Encode a payload as base64 JSON.

    Raises:
        SerializationFailure: If the payload cannot be serialized
    """
    try:
        body = {
            payload.wire_name: payload.model_dump(mode="json", exclude={"kind"}, exclude_none=True)
        }
        raw = json.dumps(body, separators=(",", ":"))
    except (PydanticSerializationError, TypeError, ValueError) as err:
        raise SerializationFailure(f"Cannot encode {type(payload).__name__}: {err}") from err
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def from_binary(data: str) -> dict[str, Any]:
    """Decode a base64 JSON payload back into a dict.

    Raises:
        SerializationFailure: If the data is not base64-encoded JSON
    """
    try:
        decoded = json.loads(base64.b64decode(data, validate=True))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as err:
        raise SerializationFailure(f"Cannot decode payload: {err}") from err
    if not isinstance(decoded, dict):
        raise SerializationFailure("Payload must decode to a JSON object")
    return decoded


class WasmExecuteMsg(BaseModel):
    """Outbound instruction: execute ``msg`` on ``contract_addr`` with ``funds`` attached."""

    kind: Literal["wasm_execute"] = "wasm_execute"
    contract_addr: Addr
    funds: list[Coin] = Field(default_factory=list)
    msg: Binary

    def decode_msg(self) -> dict[str, Any]:
        """Decode the payload (mostly useful in tests and dry runs)."""
        return from_binary(self.msg)


class Response(BaseModel):
    """Messages emitted by one contract call, dispatched in order."""

    messages: list[WasmExecuteMsg] = Field(default_factory=list)
    attributes: dict[str, str] = Field(default_factory=dict)

    def add_message(self, message: WasmExecuteMsg) -> "Response":
        self.messages.append(message)
        return self

    def add_attribute(self, key: str, value: str) -> "Response":
        self.attributes[key] = value
        return self


__all__ = [
    "Coin",
    "WirePayload",
    "PairSwap",
    "PairSwapHook",
    "TokenSend",
    "WasmExecuteMsg",
    "Response",
    "to_binary",
    "from_binary",
]

"""Shared type definitions for router models.

These types are used across asset, operation and message models.
"""

import decimal
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

# Maximum Uint128 value
UINT128_MAX = 2**128 - 1

# Fixed-point decimals carry 18 fractional digits
DECIMAL_PLACES = 18
DECIMAL_FRACTIONAL = 10**DECIMAL_PLACES

# 39 significant digits do not fit the default 28-digit context
DECIMAL_CONTEXT = decimal.Context(prec=78)

# Largest representable decimal: (2^128 - 1) / 10^18
DECIMAL_MAX = Decimal("340282366920938463463.374607431768211455")


def validate_uint128(value: Any) -> str:
    """Validate that a value is a valid Uint128 decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid Uint128 as decimal string

    Raises:
        ValueError: If value is not a non-negative integer within Uint128 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint128 must be string or int, got bool")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint128 must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Uint128 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Uint128 cannot be negative: {value}")
    if int_value > UINT128_MAX:
        raise ValueError(f"Uint128 overflow: {value} > 2^128-1")

    return str(int_value)


def validate_decimal(value: Any) -> Decimal:
    """Validate a fixed-point decimal (non-negative, 18 fractional digits max).

    Floats are rejected: "0.1" must be sent as a string to stay exact.
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise ValueError(f"Decimal must be string, int or Decimal, got {type(value).__name__}")
    if isinstance(value, int):
        value = Decimal(value)
    elif isinstance(value, str):
        try:
            value = Decimal(value)
        except decimal.InvalidOperation as err:
            raise ValueError(f"Invalid decimal string: '{value}'") from err
    elif not isinstance(value, Decimal):
        raise ValueError(f"Decimal must be string, int or Decimal, got {type(value).__name__}")

    if not value.is_finite():
        raise ValueError(f"Decimal must be finite: {value}")
    with decimal.localcontext(DECIMAL_CONTEXT):
        if value < 0:
            raise ValueError(f"Decimal cannot be negative: {value}")
        if value > DECIMAL_MAX:
            raise ValueError(f"Decimal overflow: {value}")
        exponent = value.as_tuple().exponent
        if isinstance(exponent, int) and exponent < -DECIMAL_PLACES:
            raise ValueError(f"Decimal has more than {DECIMAL_PLACES} fractional digits: {value}")
    return value


def format_decimal(value: Decimal) -> str:
    """Render a decimal without exponent or trailing zeros ("0.01", "100")."""
    with decimal.localcontext(DECIMAL_CONTEXT):
        text = format(value.normalize(), "f")
    return text


def decimal_atomics(value: Decimal) -> int:
    """Return the decimal as an integer count of 10^-18 units."""
    with decimal.localcontext(DECIMAL_CONTEXT):
        return int(value.scaleb(DECIMAL_PLACES))


# Contract or account address
Addr = Annotated[str, Field(min_length=1)]

# Native denomination ("uusd", "uluna", "ibc/...")
Denom = Annotated[str, Field(min_length=1)]

# 128-bit unsigned integer as decimal string (validated)
Uint128 = Annotated[
    str,
    BeforeValidator(validate_uint128),
    Field(description="128-bit unsigned integer as decimal string"),
]

# Fixed-point decimal, serialized as a string
FixedDecimal = Annotated[
    Decimal,
    BeforeValidator(validate_decimal),
    PlainSerializer(format_decimal, return_type=str, when_used="json"),
]

# Base64-encoded JSON payload
Binary = Annotated[str, Field(description="Base64-encoded JSON message")]

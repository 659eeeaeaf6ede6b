"""Safe integer wrapper for arithmetic on asset amounts.

Amounts on the pair protocol are Uint128 values. SafeInt makes the
operations the router needs safe by default:
- Subtraction underflow raises Underflow (never wraps)
- Division by zero raises DivisionByZero
- Uint128 overflow is caught on conversion

Usage pattern:
    from swap_router.safe_int import S

    def deduct(amount: int, tax: int) -> int:
        # Raises Underflow if tax > amount
        return (S(amount) - tax).to_uint128()
"""

from __future__ import annotations

from swap_router.errors import ArithmeticUnderflow
from swap_router.models.types import UINT128_MAX


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError, ArithmeticUnderflow):
    """Subtraction would produce a negative result."""

    pass


class Uint128Overflow(SafeIntError):
    """Value does not fit in a Uint128."""

    pass


class SafeInt:
    """Integer with checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def multiply_ratio(self, numerator: SafeInt | int, denominator: SafeInt | int) -> SafeInt:
        """Compute floor(self * numerator / denominator) without intermediate rounding.

        Raises:
            DivisionByZero: If denominator is zero
        """
        return (self * numerator) // denominator

    def min(self, other: SafeInt | int) -> SafeInt:
        """Return minimum of self and other."""
        return SafeInt(min(self._value, _extract_value(other)))

    def checked_sub(self, other: SafeInt | int) -> SafeInt | None:
        """Subtract, returning None on underflow instead of raising."""
        result = self._value - _extract_value(other)
        if result < 0:
            return None
        return SafeInt(result)

    def to_uint128(self) -> int:
        """Convert to int, validating Uint128 bounds.

        Raises:
            Uint128Overflow: If value is negative or exceeds 2^128-1
        """
        if self._value < 0:
            raise Uint128Overflow(f"Negative value cannot be Uint128: {self._value}")
        if self._value > UINT128_MAX:
            raise Uint128Overflow(f"Value exceeds Uint128 max: {self._value}")
        return self._value


def _extract_value(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt

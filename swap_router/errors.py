"""Router error classes.

Every error carries a stable ``code`` so callers (and the HTTP layer) can
report the failure kind without parsing messages. None of these errors are
retried inside the router; they abort the enclosing transaction.
"""

from typing import ClassVar


class RouterError(Exception):
    """Base error for router operations."""

    code: ClassVar[str] = "router_error"
    default_message: ClassVar[str] = "Router error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class Unauthorized(RouterError):
    """Caller is not allowed to perform this operation."""

    code = "unauthorized"
    default_message = "Unauthorized"


class NativeSwapNotSupported(RouterError):
    """Native-to-native swaps are handled by a different mechanism."""

    code = "native_swap_not_supported"
    default_message = "Native swap operations are not supported"


class PairNotFound(RouterError):
    """The factory has no pair for the requested asset infos."""

    code = "pair_not_found"
    default_message = "Pair not found"


class ArithmeticUnderflow(RouterError, ArithmeticError):
    """Checked subtraction on an amount went below zero."""

    code = "arithmetic_underflow"
    default_message = "Arithmetic underflow"


class SerializationFailure(RouterError):
    """An outbound payload could not be encoded."""

    code = "serialization_failure"
    default_message = "Failed to serialize message payload"


class ConfigNotFound(RouterError):
    """The contract config was never saved."""

    code = "config_not_found"
    default_message = "Config not found"


class MustProvideOperations(RouterError):
    """A route needs at least one swap operation."""

    code = "must_provide_operations"
    default_message = "Must provide swap operations to execute"


class SwapLimitExceeded(RouterError):
    """A route has more hops than the configured limit."""

    code = "swap_limit_exceeded"
    default_message = "The swap operation limit was exceeded"


class InvalidOperations(RouterError):
    """Consecutive hops do not connect (ask asset != next offer asset)."""

    code = "invalid_operations"
    default_message = "Invalid swap operations"


class AssertionMinimumReceive(RouterError):
    """The route delivered less than the requested minimum."""

    code = "assertion_minimum_receive"
    default_message = "Received less than the minimum amount"


__all__ = [
    "RouterError",
    "Unauthorized",
    "NativeSwapNotSupported",
    "PairNotFound",
    "ArithmeticUnderflow",
    "SerializationFailure",
    "ConfigNotFound",
    "MustProvideOperations",
    "SwapLimitExceeded",
    "InvalidOperations",
    "AssertionMinimumReceive",
]

"""Router settings."""

import os
from dataclasses import dataclass
from decimal import Decimal

from swap_router.models.types import validate_decimal

# Upper bound on hops in one route
MAX_SWAP_OPERATIONS = 50

# Denominations that never pay transfer tax
DEFAULT_TAX_EXEMPT_DENOMS = frozenset({"uluna"})


@dataclass(frozen=True)
class RouterSettings:
    """Centralized configuration for routing and dry-run simulation.

    Attributes:
        max_swap_operations: Maximum number of hops accepted in a route
        tax_rate: Native transfer tax rate used when a request does not
            provide its own (default: 0)
        tax_exempt_denoms: Native denominations that are never taxed
    """

    max_swap_operations: int = MAX_SWAP_OPERATIONS
    tax_rate: Decimal = Decimal(0)
    tax_exempt_denoms: frozenset[str] = DEFAULT_TAX_EXEMPT_DENOMS

    @classmethod
    def from_env(cls) -> "RouterSettings":
        """Build settings from ROUTER_* environment variables."""
        exempt = os.environ.get("ROUTER_TAX_EXEMPT_DENOMS")
        return cls(
            max_swap_operations=int(
                os.environ.get("ROUTER_MAX_SWAP_OPERATIONS", str(MAX_SWAP_OPERATIONS))
            ),
            tax_rate=validate_decimal(os.environ.get("ROUTER_TAX_RATE", "0")),
            tax_exempt_denoms=(
                frozenset(d for d in exempt.split(",") if d)
                if exempt is not None
                else DEFAULT_TAX_EXEMPT_DENOMS
            ),
        )


# Default settings instance
DEFAULT_SETTINGS = RouterSettings()

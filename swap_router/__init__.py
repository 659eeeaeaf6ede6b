"""Multi-hop swap router for a DEX pair protocol."""

from swap_router.contract import execute, execute_swap_operations, instantiate, query_config
from swap_router.operations import asset_into_swap_msg, execute_swap_operation

__version__ = "0.1.0"
__all__ = [
    "instantiate",
    "execute",
    "execute_swap_operations",
    "execute_swap_operation",
    "asset_into_swap_msg",
    "query_config",
    "__version__",
]

"""In-memory pair registry standing in for the factory contract.

Pairs are indexed by the unordered set of their two asset infos, so a lookup
for (A, B) and (B, A) resolves to the same pair contract.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from swap_router.errors import PairNotFound
from swap_router.models.asset import NativeToken, PairInfo, Token

logger = structlog.get_logger()


class PairRegistry:
    """Registry of pair contracts created by one factory.

    Implements the ``PairQuerier`` protocol for that factory address; lookups
    against any other factory fail with PairNotFound.
    """

    def __init__(self, factory_addr: str, pairs: Iterable[PairInfo] | None = None) -> None:
        """Initialize the registry with optional pairs.

        Args:
            factory_addr: Address of the factory this registry represents
            pairs: Initial pairs. If None, starts empty.
        """
        self.factory_addr = factory_addr
        self._pairs: dict[frozenset[NativeToken | Token], PairInfo] = {}

        if pairs:
            for pair in pairs:
                self.add_pair(pair)

    @staticmethod
    def _pair_key(asset_infos: Sequence[NativeToken | Token]) -> frozenset[NativeToken | Token]:
        return frozenset(asset_infos)

    def add_pair(self, pair: PairInfo) -> None:
        """Add a pair. A pair already registered for the same assets is replaced."""
        key = self._pair_key(pair.asset_infos)
        if key in self._pairs:
            logger.debug(
                "pair_replaced",
                old_contract=self._pairs[key].contract_addr,
                new_contract=pair.contract_addr,
                assets=[str(info) for info in pair.asset_infos],
            )
        self._pairs[key] = pair

    def get_pair(self, asset_a: NativeToken | Token, asset_b: NativeToken | Token) -> PairInfo | None:
        """Get the pair for two assets (order independent), or None."""
        return self._pairs.get(self._pair_key((asset_a, asset_b)))

    def query_pair_info(
        self,
        factory_addr: str,
        asset_infos: Sequence[NativeToken | Token],
    ) -> PairInfo:
        """Resolve the pair contract for ``asset_infos``.

        Raises:
            PairNotFound: If ``factory_addr`` is not this factory or no pair exists
        """
        names = [str(info) for info in asset_infos]
        if factory_addr != self.factory_addr:
            logger.warning(
                "unknown_factory",
                factory_addr=factory_addr,
                expected=self.factory_addr,
            )
            raise PairNotFound(f"Unknown factory {factory_addr}")

        pair = self._pairs.get(self._pair_key(asset_infos)) if len(asset_infos) == 2 else None
        if pair is None:
            raise PairNotFound(f"No pair for assets {names}")
        return pair

    @property
    def pair_count(self) -> int:
        return len(self._pairs)


__all__ = ["PairRegistry"]

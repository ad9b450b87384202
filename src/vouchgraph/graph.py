"""Vouch graph construction.

Walks outward from a start address through received vouches, recording an
edge for every voucher seen and expanding each address at most once, until
the depth bound or a root of trust is reached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Iterator, List, Optional, Set

from vouchgraph.address import shorten_address
from vouchgraph.lookup import fetch_voucher_addresses
from vouchgraph.models import GraphResult, VouchEdge
from vouchgraph.protocols import VoucherLookup

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """One expanded address whose vouchers are still being processed."""
    address: str
    depth: int
    pending: Iterator[str]


class GraphBuilder:
    """Depth-bounded, depth-first walk over received vouches.

    The visited set is shared by the whole walk rather than tracked per
    path: an address reached through several vouchers gets an edge from
    each of them, but is expanded only once, at the depth where it was
    first discovered. The resulting shape therefore depends on the order
    the lookup returns vouchers in.

    Roots are leaves: they are marked visited when seen as a voucher and
    never expanded. The start address is always expanded, root or not.
    """

    def __init__(self, lookup: VoucherLookup, root_set: AbstractSet[str]):
        self.lookup = lookup
        self.root_set = frozenset(root_set)

    async def build(self, start: str, max_depth: int) -> GraphResult:
        """Walk from `start` and return the edges and visited addresses.

        Args:
            start: Canonical address to start from (depth 0).
            max_depth: Number of hops to expand; must be at least 1.

        Returns:
            GraphResult with edges in discovery order.

        Raises:
            ValueError: If max_depth is less than 1.
        """
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1 (got {max_depth})")

        edges: List[VouchEdge] = []
        visited: Set[str] = set()
        stack: List[_Frame] = []

        frame = await self._expand(start, 0, max_depth, visited)
        if frame is not None:
            stack.append(frame)

        while stack:
            top = stack[-1]
            voucher = next(top.pending, None)
            if voucher is None:
                stack.pop()
                continue

            edges.append(VouchEdge(from_address=voucher, to_address=top.address))

            if voucher in self.root_set:
                visited.add(voucher)
                continue

            frame = await self._expand(voucher, top.depth + 1, max_depth, visited)
            if frame is not None:
                stack.append(frame)

        logger.info(
            "Vouch graph for %s: %d addresses, %d edges",
            shorten_address(start),
            len(visited),
            len(edges),
        )
        return GraphResult(start=start, edges=edges, visited=visited)

    async def _expand(
        self,
        address: str,
        depth: int,
        max_depth: int,
        visited: Set[str],
    ) -> Optional[_Frame]:
        """Mark `address` visited and fetch its vouchers, unless pruned."""
        if address in visited:
            return None
        if depth >= max_depth:
            return None

        visited.add(address)
        logger.debug("Expanding %s at depth %d", shorten_address(address), depth)
        vouchers = await fetch_voucher_addresses(self.lookup, address, "graph walk")
        return _Frame(address=address, depth=depth, pending=iter(vouchers))


async def build_graph(
    lookup: VoucherLookup,
    start: str,
    max_depth: int,
    root_set: AbstractSet[str],
) -> GraphResult:
    """Convenience wrapper around GraphBuilder.build()."""
    return await GraphBuilder(lookup, root_set).build(start, max_depth)

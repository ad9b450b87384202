"""Trust scoring over a discovered vouch graph.

Every root of trust carries a fixed score. Every other address earns, for
each simple vouch path leading back from it to a root, the root score
halved once per hop; contributions from all such paths are summed.

Scoring walks BACKWARD from each target through received vouches, so the
people who vouch for an address sit one hop closer to a root. The search
is exponential in the branching of the vouch relation; it is kept in check
only by the depth bound and by never leaving the known address set.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import AbstractSet, Deque, Dict, FrozenSet, Tuple

from vouchgraph.address import shorten_address
from vouchgraph.config.defaults import DEFAULT_SCORE_CONCURRENCY, ROOT_SCORE
from vouchgraph.lookup import fetch_voucher_addresses
from vouchgraph.models import ScoreMap
from vouchgraph.protocols import VoucherLookup

logger = logging.getLogger(__name__)

# (address, hops from target, addresses already on this path)
_QueueEntry = Tuple[str, int, FrozenSet[str]]


def path_contribution(depth: int, root_score: int = ROOT_SCORE) -> int:
    """Score contributed by a root reached `depth` hops from the target."""
    return root_score // (2 ** depth)


class ScoreEngine:
    """Compute trust scores for a set of addresses.

    Args:
        lookup: Source of received vouches.
        root_set: Roots of trust; fixed for the whole computation.
        root_score: Score carried by a root.
        concurrency: How many target searches may run at once. Each search
            owns its own queue, so results do not depend on this value.
    """

    def __init__(
        self,
        lookup: VoucherLookup,
        root_set: AbstractSet[str],
        root_score: int = ROOT_SCORE,
        concurrency: int = DEFAULT_SCORE_CONCURRENCY,
    ):
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1 (got {concurrency})")
        self.lookup = lookup
        self.root_set = frozenset(root_set)
        self.root_score = root_score
        self.concurrency = concurrency

    async def compute(self, address_set: AbstractSet[str], score_depth: int = 0) -> ScoreMap:
        """Score every address in `address_set`.

        Args:
            address_set: Addresses known from the graph walk. Searches never
                step outside this set.
            score_depth: Maximum hops from a target to a root; 0 = unlimited.

        Returns:
            Mapping with an entry for every address in `address_set`.

        Raises:
            ValueError: If score_depth is negative.
        """
        if score_depth < 0:
            raise ValueError(f"score_depth must be >= 0 (got {score_depth})")

        known = frozenset(address_set)
        scores: Dict[str, int] = {address: 0 for address in address_set}

        targets = []
        for address in address_set:
            if address in self.root_set:
                scores[address] = self.root_score
            else:
                targets.append(address)

        semaphore = asyncio.Semaphore(self.concurrency)

        async def _bounded(target: str) -> Tuple[str, int]:
            async with semaphore:
                return target, await self.score_target(target, known, score_depth)

        if self.concurrency == 1:
            for target in targets:
                scores[target] = await self.score_target(target, known, score_depth)
        else:
            for target, score in await asyncio.gather(*(_bounded(t) for t in targets)):
                scores[target] = score

        logger.info(
            "Scored %d addresses (%d roots, %d reached a root)",
            len(scores),
            len(scores) - len(targets),
            sum(1 for t in targets if scores[t] > 0),
        )
        return scores

    async def score_target(
        self,
        target: str,
        address_set: AbstractSet[str],
        score_depth: int = 0,
    ) -> int:
        """Breadth-first search from `target` back to the roots.

        Every simple path that reaches a root within `score_depth` hops
        contributes ``root_score // 2**hops``.
        """
        logger.debug("Calculating score for %s", shorten_address(target))

        total = 0
        queue: Deque[_QueueEntry] = deque([(target, 0, frozenset((target,)))])

        while queue:
            address, depth, path = queue.popleft()

            if score_depth > 0 and depth >= score_depth:
                continue

            if address in self.root_set:
                contribution = path_contribution(depth, self.root_score)
                total += contribution
                logger.debug(
                    "Found path to root %s at depth %d, contributing %d to %s",
                    shorten_address(address),
                    depth,
                    contribution,
                    shorten_address(target),
                )
                continue

            vouchers = await fetch_voucher_addresses(self.lookup, address, "scoring")
            for voucher in vouchers:
                if voucher in address_set and voucher not in path:
                    queue.append((voucher, depth + 1, path | {voucher}))

        return total


async def compute_scores(
    lookup: VoucherLookup,
    root_set: AbstractSet[str],
    address_set: AbstractSet[str],
    score_depth: int = 0,
    concurrency: int = DEFAULT_SCORE_CONCURRENCY,
) -> ScoreMap:
    """Convenience wrapper around ScoreEngine.compute()."""
    engine = ScoreEngine(lookup, root_set, concurrency=concurrency)
    return await engine.compute(address_set, score_depth)

"""End-to-end vouch graph analysis: roots, graph walk, then scores."""

from __future__ import annotations

import logging
from typing import FrozenSet

from vouchgraph.address import shorten_address
from vouchgraph.config.defaults import (
    DEFAULT_SCORE_CONCURRENCY,
    DEFAULT_SCORE_DEPTH,
    DEFAULT_VOUCH_DEPTH,
)
from vouchgraph.errors import FatalInputError, LedgerLookupError
from vouchgraph.graph import GraphBuilder
from vouchgraph.lookup import CachedVoucherLookup
from vouchgraph.models import VouchGraphReport
from vouchgraph.protocols import RootProvider, VoucherLookup
from vouchgraph.scoring import ScoreEngine

logger = logging.getLogger(__name__)


async def fetch_root_set(provider: RootProvider) -> FrozenSet[str]:
    """Fetch the root set once for a run.

    Raises:
        FatalInputError: If the roots cannot be fetched; no root-aware walk
            is possible without them.
    """
    try:
        roots = await provider.get_root_addresses()
    except LedgerLookupError as e:
        raise FatalInputError(f"Could not fetch root addresses: {e}") from e
    return frozenset(roots)


async def analyze_vouch_graph(
    root_provider: RootProvider,
    lookup: VoucherLookup,
    start: str,
    vouch_depth: int = DEFAULT_VOUCH_DEPTH,
    score_depth: int = DEFAULT_SCORE_DEPTH,
    concurrency: int = DEFAULT_SCORE_CONCURRENCY,
    use_cache: bool = True,
) -> VouchGraphReport:
    """Build the vouch graph around `start` and score every address in it.

    Args:
        root_provider: Source of the root set (fetched once).
        lookup: Source of received vouches.
        start: Canonical start address.
        vouch_depth: Hops to expand from `start` (>= 1).
        score_depth: Hops from a target to a root when scoring (0 = unlimited).
        concurrency: Parallel target searches while scoring.
        use_cache: Share one lookup per address between walk and scoring.

    Raises:
        FatalInputError: If the root set is unavailable.
        ValueError: On out-of-range depths or concurrency.
    """
    if vouch_depth < 1:
        raise ValueError(f"vouch_depth must be >= 1 (got {vouch_depth})")
    if score_depth < 0:
        raise ValueError(f"score_depth must be >= 0 (got {score_depth})")

    logger.info("Fetching root addresses...")
    root_set = await fetch_root_set(root_provider)
    logger.info("Found %d root addresses", len(root_set))

    if use_cache:
        lookup = CachedVoucherLookup(lookup)

    graph = await GraphBuilder(lookup, root_set).build(start, vouch_depth)

    logger.info("Calculating trust scores for %s...", shorten_address(start))
    engine = ScoreEngine(lookup, root_set, concurrency=concurrency)
    scores = await engine.compute(graph.addresses, score_depth)

    if isinstance(lookup, CachedVoucherLookup):
        logger.debug(
            "Vouch lookup cache: %d addresses, %d hits, %d misses",
            len(lookup),
            lookup.hits,
            lookup.misses,
        )

    return VouchGraphReport(graph=graph, root_set=root_set, scores=scores)

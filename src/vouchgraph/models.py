"""
Shared dataclasses for the vouch graph and trust scores.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set

# Address -> trust score
ScoreMap = Dict[str, int]


@dataclass(frozen=True)
class VouchEdge:
    """`from_address` vouches for `to_address`."""
    from_address: str
    to_address: str


@dataclass(frozen=True)
class Vouch:
    """A single received vouch as reported by the ledger."""
    address: str
    epoch: int


@dataclass
class GraphResult:
    """Output of a graph walk.

    Attributes:
        start: Address the walk started from
        edges: Edges in discovery order
        visited: Addresses expanded during the walk, plus roots reached
    """
    start: str
    edges: List[VouchEdge] = field(default_factory=list)
    visited: Set[str] = field(default_factory=set)

    @property
    def addresses(self) -> Set[str]:
        """Every address that appears in the graph (start and edge endpoints)."""
        addresses = {self.start}
        for edge in self.edges:
            addresses.add(edge.from_address)
            addresses.add(edge.to_address)
        return addresses


@dataclass
class VouchGraphReport:
    """Graph and scores computed for one start address."""
    graph: GraphResult
    root_set: frozenset
    scores: ScoreMap

    @property
    def start(self) -> str:
        return self.graph.start

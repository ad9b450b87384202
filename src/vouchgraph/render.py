"""Mermaid rendering of a scored vouch graph."""

from __future__ import annotations

from typing import AbstractSet, Dict, List, Mapping, Optional, Sequence

from vouchgraph.address import shorten_address
from vouchgraph.models import ScoreMap, VouchEdge

START_FILL = "#f9f"
ROOT_FILL = "#9f9"


def format_score(score: int) -> str:
    """Format a score for display (e.g., 500000 -> "500K")."""
    if score >= 1_000_000:
        return f"{score // 1_000_000}M"
    if score >= 1_000:
        return f"{score // 1_000}K"
    return str(score)


def _node_label(address: str, scores: ScoreMap, names: Optional[Mapping[str, str]]) -> str:
    score = scores.get(address, 0)
    score_text = f" ({format_score(score)})" if score > 0 else ""
    name = names.get(address.lower()) if names else None
    name_text = f"<br/>{name}" if name else ""
    return f"{shorten_address(address)}{score_text}{name_text}"


def generate_mermaid_graph(
    edges: Sequence[VouchEdge],
    start: str,
    root_set: AbstractSet[str],
    scores: ScoreMap,
    names: Optional[Mapping[str, str]] = None,
) -> str:
    """Render the graph as a fenced Mermaid ``graph TD`` block.

    The start node is pink, roots are green; node labels carry the short
    address, the score when positive, and the display name when known.
    """
    if not edges:
        fill = ROOT_FILL if start in root_set else START_FILL
        return (
            "```mermaid\n"
            "graph TD\n"
            f'    {start}["{_node_label(start, scores, names)}"]\n'
            f"    style {start} fill:{fill},stroke:#333,stroke-width:4px\n"
            "```\n"
        )

    # Unique addresses in first-seen order
    addresses: Dict[str, None] = {start: None}
    for edge in edges:
        addresses.setdefault(edge.from_address, None)
        addresses.setdefault(edge.to_address, None)

    lines: List[str] = ["```mermaid", "graph TD"]

    for address in addresses:
        lines.append(f'    {address}["{_node_label(address, scores, names)}"]')

    lines.append(f"    style {start} fill:{START_FILL},stroke:#333,stroke-width:4px")

    for address in addresses:
        if address in root_set and address != start:
            lines.append(f"    style {address} fill:{ROOT_FILL},stroke:#333,stroke-width:2px")

    for edge in edges:
        lines.append(f"    {edge.from_address} --> {edge.to_address}")

    lines.append("```")
    return "\n".join(lines) + "\n"

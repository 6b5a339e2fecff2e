"""Graph assembler - degree computation and pruning of disconnected units."""

from collections import defaultdict
from dataclasses import replace

from componentgraph.graph.types import AnalysisResult


def compute_degrees(edges) -> dict[str, int]:
    """Edges touching each unit id; source and target both count."""
    degrees: dict[str, int] = defaultdict(int)
    for edge in edges:
        degrees[edge.source_unit_id] += 1
        degrees[edge.target_unit_id] += 1
    return degrees


def assemble(units, edges, state_slots) -> AnalysisResult:
    """Fold edges into degrees and drop units no edge touches.

    Input units are left untouched; the result holds copies carrying the
    computed degree, so assembling the same input twice gives the same graph.
    """
    degrees = compute_degrees(edges)
    nodes = [
        replace(unit, degree=degrees[unit.id])
        for unit in units
        if degrees.get(unit.id, 0) > 0
    ]
    return AnalysisResult(
        nodes=nodes,
        links=list(edges),
        state_variables=list(state_slots),
    )

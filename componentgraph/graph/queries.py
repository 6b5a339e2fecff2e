"""Read-only queries over an assembled graph.

These back the filtering side of the CLI: searching units by name or path,
and narrowing the graph to one state slot's owner and consumers.
"""

from collections import defaultdict

from componentgraph.graph.types import Edge, StateSlot, Unit


def search_units(nodes: list[Unit], query: str) -> list[Unit]:
    """Units whose display name or file path contains query, case-insensitive.

    An empty query returns every unit.
    """
    needle = query.strip().lower()
    if not needle:
        return list(nodes)
    return [
        node for node in nodes
        if needle in node.display_name.lower() or needle in node.file_path.lower()
    ]


def state_flow_unit_ids(slot: StateSlot) -> list[str]:
    """Owner first, then consumers in sorted order."""
    consumers = sorted(slot.consumer_unit_ids - {slot.owner_unit_id})
    return [slot.owner_unit_id, *consumers]


def group_state_slots_by_owner(slots: list[StateSlot]) -> dict[str, list[StateSlot]]:
    """Slots keyed by owner display name, owners in first-seen order."""
    grouped: dict[str, list[StateSlot]] = defaultdict(list)
    for slot in slots:
        grouped[slot.owner_display_name].append(slot)
    return dict(grouped)


def resolve_links(nodes: list[Unit], links: list[Edge]) -> list[tuple[Unit, Unit, Edge]]:
    """Pair each link with its endpoint units, skipping links to missing ids."""
    by_id = {node.id: node for node in nodes}
    resolved = []
    for link in links:
        source = by_id.get(link.source_unit_id)
        target = by_id.get(link.target_unit_id)
        if source is None or target is None:
            continue
        resolved.append((source, target, link))
    return resolved

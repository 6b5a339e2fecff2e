"""Tests for read-only graph queries."""

from componentgraph import analyze_files
from componentgraph.graph.queries import (
    group_state_slots_by_owner,
    resolve_links,
    search_units,
    state_flow_unit_ids,
)
from componentgraph.graph.types import Edge, StateSlot


def test_search_units_by_name_and_path(sample_records):
    nodes = analyze_files(sample_records).nodes

    assert [n.display_name for n in search_units(nodes, "HEADER")] == ["Header"]
    assert [n.display_name for n in search_units(nodes, "hooks/")] == ["useAuth"]
    assert len(search_units(nodes, "  ")) == len(nodes)
    assert search_units(nodes, "nothing-like-this") == []


def test_state_flow_unit_ids_puts_owner_first():
    slot = StateSlot("user", "setUser", "src/App", "App", {"src/Nav", "src/Header", "src/App"})
    assert state_flow_unit_ids(slot) == ["src/App", "src/Header", "src/Nav"]


def test_group_state_slots_by_owner():
    slots = [
        StateSlot("a", "setA", "src/App", "App"),
        StateSlot("b", "setB", "src/Nav", "Nav"),
        StateSlot("c", "setC", "src/App", "App"),
    ]
    grouped = group_state_slots_by_owner(slots)
    assert list(grouped) == ["App", "Nav"]
    assert [s.value_name for s in grouped["App"]] == ["a", "c"]


def test_resolve_links_skips_missing_ids(sample_records):
    result = analyze_files(sample_records)
    links = result.links + [Edge("src/App", "src/Gone")]

    resolved = resolve_links(result.nodes, links)

    assert len(resolved) == len(result.links)
    source, target, _link = resolved[0]
    assert (source.display_name, target.display_name) == ("App", "Header")

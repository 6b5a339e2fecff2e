"""Graph package - data model and read-only queries for the component graph."""

from .queries import group_state_slots_by_owner, resolve_links, search_units, state_flow_unit_ids
from .types import AnalysisResult, Edge, SourceFile, StateSlot, Unit, UnitKind, unit_id_for_path

__all__ = [
    "AnalysisResult",
    "Edge",
    "SourceFile",
    "StateSlot",
    "Unit",
    "UnitKind",
    "unit_id_for_path",
    "group_state_slots_by_owner",
    "resolve_links",
    "search_units",
    "state_flow_unit_ids",
]

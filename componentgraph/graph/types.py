"""Shared data structures for the component graph.

This module contains the core data types used by:
- The classifier and import extractor (first pass)
- The usage linker and state-flow tracer (second pass)
- The assembler and the query helpers

Extracted to prevent circular imports between the analysis modules.

Architecture:
- SourceFile: One input file (path + text), read-only
- Unit: A detected component, hook or utility
- Edge: A directed import/render relationship between two units
- StateSlot: A [value, setValue] pair and the units it flows into
"""

import posixpath
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class UnitKind(str, Enum):
    """Kind of declarable unit found in a file."""

    COMPONENT = "component"
    HOOK = "hook"
    UTILITY = "utility"


def unit_id_for_path(path: str) -> str:
    """Derive a unit id from a file path by dropping the final extension.

    Only the last path segment is considered, so directories with dots
    are left alone:

        >>> unit_id_for_path("src/components/Header.tsx")
        'src/components/Header'
        >>> unit_id_for_path("src/v1.2/api")
        'src/v1.2/api'
    """
    root, _ext = posixpath.splitext(path.replace("\\", "/"))
    return root


@dataclass(frozen=True)
class SourceFile:
    """A single input file supplied by the retrieval collaborator."""

    path: str
    name: str
    raw_text: str

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "SourceFile | None":
        """Build from a ``{path, name, content}`` record.

        Returns None when content is absent or empty; such records do not
        participate in analysis.
        """
        content = record.get("content")
        if not content:
            return None
        path = record["path"]
        name = record.get("name") or posixpath.basename(path)
        return cls(path=path, name=name, raw_text=content)


@dataclass
class Unit:
    """Represents a detected component, hook or utility module."""

    id: str
    display_name: str
    kind: UnitKind
    file_path: str
    imported_names: list[str] = field(default_factory=list)
    exported_names: list[str] = field(default_factory=list)
    uses_state: bool = False
    uses_effectful_lifecycle: bool = False
    uses_external_parameters: bool = False
    degree: int = 0  # Only meaningful after assembly

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "displayName": self.display_name,
            "kind": self.kind.value,
            "filePath": self.file_path,
            "importedNames": list(self.imported_names),
            "exportedNames": list(self.exported_names),
            "usesState": self.uses_state,
            "usesEffectfulLifecycle": self.uses_effectful_lifecycle,
            "usesExternalParameters": self.uses_external_parameters,
            "degree": self.degree,
        }


@dataclass(frozen=True)
class Edge:
    """Directed relationship from a source unit to a target unit."""

    source_unit_id: str
    target_unit_id: str
    passed_parameter_names: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "sourceUnitId": self.source_unit_id,
            "targetUnitId": self.target_unit_id,
        }
        if self.passed_parameter_names is not None:
            data["passedParameterNames"] = list(self.passed_parameter_names)
        return data


@dataclass
class StateSlot:
    """A state value/updater pair declared inside a unit."""

    value_name: str
    updater_name: str
    owner_unit_id: str
    owner_display_name: str
    consumer_unit_ids: set[str] = field(default_factory=set)

    def add_consumer(self, unit_id: str) -> None:
        """Record a consumer. The set only ever grows."""
        self.consumer_unit_ids.add(unit_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valueName": self.value_name,
            "updaterName": self.updater_name,
            "ownerUnitId": self.owner_unit_id,
            "ownerDisplayName": self.owner_display_name,
            "consumerUnitIds": sorted(self.consumer_unit_ids),
        }


@dataclass
class AnalysisResult:
    """Final graph handed to visualization and filtering consumers."""

    nodes: list[Unit] = field(default_factory=list)
    links: list[Edge] = field(default_factory=list)
    state_variables: list[StateSlot] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links],
            "stateVariables": [slot.to_dict() for slot in self.state_variables],
        }

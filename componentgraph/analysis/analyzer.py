"""Analyzer - two-pass construction of the component graph.

First pass (file-local, read-only): classify each file, extract its local
imports and detect its state slots. The result is frozen into a snapshot.

Second pass (needs the COMPLETE first-pass snapshot): link every source unit
against every other unit and trace state slots into edge targets.

Final pass: assemble degrees and prune disconnected units.

The analyzer performs no I/O and never raises on unrecognised text. An empty
result is the only signal that nothing was found.
"""

from dataclasses import dataclass

from componentgraph.analysis.assembler import assemble
from componentgraph.analysis.classifier import classify
from componentgraph.analysis.config import IGNORED_PARAMETERS, LOCAL_IMPORT_PREFIXES
from componentgraph.analysis.imports import extract_imports
from componentgraph.analysis.linker import link_usages
from componentgraph.analysis.state_flow import detect_state_slots, trace_consumers
from componentgraph.graph.types import AnalysisResult, SourceFile, StateSlot, Unit
from componentgraph.utils.logging import logger


@dataclass(frozen=True)
class AnalysisOptions:
    """Tunables for one analysis run."""

    local_prefixes: tuple[str, ...] = LOCAL_IMPORT_PREFIXES
    ignored_parameters: frozenset[str] = IGNORED_PARAMETERS

    @classmethod
    def from_config(cls, cfg: dict) -> "AnalysisOptions":
        """Build from the ``analysis`` section of a runtime config."""
        section = cfg.get("analysis", {})
        return cls(
            local_prefixes=tuple(section.get("local_prefixes", LOCAL_IMPORT_PREFIXES)),
            ignored_parameters=frozenset(section.get("ignored_parameters", IGNORED_PARAMETERS)),
        )


@dataclass(frozen=True)
class FirstPass:
    """Immutable snapshot shared by every second-pass step."""

    sources: tuple[tuple[SourceFile, Unit], ...] = ()
    state_slots: tuple[StateSlot, ...] = ()

    @property
    def units(self) -> tuple[Unit, ...]:
        return tuple(unit for _source, unit in self.sources)


def coerce_sources(files) -> list[SourceFile]:
    """Accept SourceFile objects or ``{path, name, content}`` records.

    Records with absent or empty content are dropped.
    """
    sources = []
    for item in files:
        if isinstance(item, SourceFile):
            source = item if item.raw_text else None
        else:
            source = SourceFile.from_record(item)
        if source is not None:
            sources.append(source)
    return sources


class ComponentGraphAnalyzer:
    """Build a component/hook/utility graph from in-memory source files."""

    def __init__(self, options: AnalysisOptions | None = None):
        self.options = options or AnalysisOptions()

    def first_pass(self, sources: list[SourceFile]) -> FirstPass:
        pairs = []
        slots = []
        seen_ids = set()

        for source in sources:
            unit = classify(source.raw_text, source.path)
            if unit is None:
                logger.debug(f"No declarations recognised in {source.path}")
                continue
            if unit.id in seen_ids:
                logger.warning(
                    f"Skipping {source.path}: unit id '{unit.id}' already taken by another file"
                )
                continue
            seen_ids.add(unit.id)

            unit.imported_names = extract_imports(source.raw_text, self.options.local_prefixes)
            unit_slots = detect_state_slots(source.raw_text, unit)
            logger.debug(
                f"{source.path}: {unit.kind.value} '{unit.display_name}', "
                f"{len(unit.imported_names)} local imports, {len(unit_slots)} state slots"
            )
            pairs.append((source, unit))
            slots.extend(unit_slots)

        return FirstPass(sources=tuple(pairs), state_slots=tuple(slots))

    def second_pass(self, snapshot: FirstPass) -> list:
        units = snapshot.units
        by_id = {unit.id: unit for unit in units}
        edges = []

        for source, unit in snapshot.sources:
            source_edges = link_usages(
                source, unit, units, self.options.ignored_parameters
            )
            for edge in source_edges:
                target = by_id[edge.target_unit_id]
                for slot in trace_consumers(source.raw_text, target, snapshot.state_slots):
                    slot.add_consumer(target.id)
            edges.extend(source_edges)

        return edges

    def analyze(self, files) -> AnalysisResult:
        sources = coerce_sources(files)
        snapshot = self.first_pass(sources)

        if not snapshot.sources:
            logger.warning(
                f"No components, hooks or utilities recognised in {len(sources)} files"
            )
            return AnalysisResult()

        edges = self.second_pass(snapshot)
        result = assemble(snapshot.units, edges, snapshot.state_slots)
        logger.info(
            f"Analyzed {len(sources)} files: {len(snapshot.units)} units, "
            f"{len(result.nodes)} connected, {len(result.links)} links, "
            f"{len(result.state_variables)} state slots"
        )
        return result


def analyze_files(files, options: AnalysisOptions | None = None) -> AnalysisResult:
    """Analyze an ordered collection of source files into a component graph."""
    return ComponentGraphAnalyzer(options).analyze(files)

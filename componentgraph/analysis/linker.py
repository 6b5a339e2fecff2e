"""Usage linker - infers edges from one source file to every other unit.

An edge source -> target fires when EITHER:
- the target's display name is among the source's local imports, OR
- the source text contains a markup invocation ``<Target`` followed by
  whitespace, ``/`` or ``>``.

Default exports are often rendered under a name that never shows up as a
named import, so import evidence alone under-detects. The markup test picks
those up at the cost of occasional same-name false positives.

Passed parameters are read from the FIRST invocation only.
"""

from componentgraph.analysis.config import IGNORED_PARAMETERS
from componentgraph.analysis.lexer import find_markup_invocations
from componentgraph.graph.types import Edge, SourceFile, Unit
from componentgraph.utils.logging import logger


def passed_parameters(text: str, target_name: str, ignored=IGNORED_PARAMETERS) -> tuple[str, ...] | None:
    """Parameter names at the first invocation of target_name, None if there are none."""
    invocations = find_markup_invocations(text, target_name)
    if not invocations:
        return None
    names = tuple(
        name for name in invocations[0].parameter_names() if name not in ignored
    )
    return names or None


def link_usages(
    source_file: SourceFile,
    source_unit: Unit,
    units,
    ignored_parameters=IGNORED_PARAMETERS,
) -> list[Edge]:
    """Edges from source_unit to each other unit with import or markup evidence.

    At most one edge per target; both kinds of evidence collapse into it.
    """
    imported = set(source_unit.imported_names)
    edges = []

    for target in units:
        if target.id == source_unit.id:
            continue

        is_imported = target.display_name in imported
        invocations = find_markup_invocations(source_file.raw_text, target.display_name)
        if not is_imported and not invocations:
            continue

        parameters = passed_parameters(
            source_file.raw_text, target.display_name, ignored_parameters
        )
        edges.append(Edge(
            source_unit_id=source_unit.id,
            target_unit_id=target.id,
            passed_parameter_names=parameters,
        ))
        logger.debug(
            f"Link {source_unit.id} -> {target.id} "
            f"(imported={is_imported}, invocations={len(invocations)})"
        )

    return edges

"""componentgraph - dependency graphs of components, hooks and utilities.

Feed it (path, text) pairs from a UI codebase and get back the units it
declares, the import/render links between them and the state slots passed
from owners into consumers:

    from componentgraph import analyze_files

    result = analyze_files([{"path": "src/App.tsx", "name": "App.tsx", "content": text}])
    result.to_dict()  # {"nodes": [...], "links": [...], "stateVariables": [...]}
"""

__version__ = "0.3.0"

from componentgraph.analysis.analyzer import (  # noqa: E402
    AnalysisOptions,
    ComponentGraphAnalyzer,
    analyze_files,
)
from componentgraph.graph.types import (  # noqa: E402
    AnalysisResult,
    Edge,
    SourceFile,
    StateSlot,
    Unit,
    UnitKind,
)

__all__ = [
    "__version__",
    "AnalysisOptions",
    "AnalysisResult",
    "ComponentGraphAnalyzer",
    "Edge",
    "SourceFile",
    "StateSlot",
    "Unit",
    "UnitKind",
    "analyze_files",
]

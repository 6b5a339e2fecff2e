"""Shared plumbing for cgraph commands: config, loading and analysis."""

from componentgraph.analysis.analyzer import AnalysisOptions, analyze_files
from componentgraph.config_runtime import load_runtime_config
from componentgraph.exceptions import EmptyGraphError
from componentgraph.graph.types import AnalysisResult
from componentgraph.sources import load_source_files


def run_analysis(root: str, max_files: int | None = None) -> tuple[AnalysisResult, dict]:
    """Load sources under root and analyze them.

    Raises:
        SourceLoadError: root is not a readable directory
        EmptyGraphError: no components, hooks or utilities were recognised
    """
    cfg = load_runtime_config(root)
    if max_files is not None:
        cfg["sources"]["max_files"] = max_files

    files = load_source_files(root, cfg)
    result = analyze_files(files, AnalysisOptions.from_config(cfg))
    if result.is_empty:
        raise EmptyGraphError(
            f"No components, hooks or utilities found in {len(files)} files under {root}",
            file_count=len(files),
        )
    return result, cfg

"""Central UI handler for componentgraph.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

The console writes to stderr: stdout is reserved for the graph JSON so it
can be piped into other tools.

Usage:
    from componentgraph.ui import console, print_header, print_error

    console.print("[success]Graph written[/success]")
    print_header("COMPONENT GRAPH")
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from componentgraph.graph.types import AnalysisResult, UnitKind

CGRAPH_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "component": "bold magenta",
    "hook": "bold blue",
    "utility": "cyan",
    "path": "bold cyan",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=CGRAPH_THEME,
    stderr=True,
    force_terminal=sys.stderr.isatty(),
)


def print_header(title: str) -> None:
    """Print a styled section header with horizontal rules."""
    console.rule(f"[bold]{title}[/bold]")


def print_error(msg: str) -> None:
    console.print(f"[error]ERROR:[/error] {msg}")


def print_success(msg: str) -> None:
    console.print(f"[success]OK:[/success] {msg}")


def summary_table(result: AnalysisResult) -> Table:
    """Per-kind unit counts plus link and state slot totals."""
    table = Table(title="Component Graph", show_header=True, header_style="bold")
    table.add_column("Kind")
    table.add_column("Units", justify="right")
    table.add_column("Max degree", justify="right")

    for kind in UnitKind:
        units = [node for node in result.nodes if node.kind is kind]
        max_degree = max((node.degree for node in units), default=0)
        table.add_row(f"[{kind.value}]{kind.value}[/{kind.value}]", str(len(units)), str(max_degree))

    table.add_section()
    table.add_row("links", str(len(result.links)), "")
    table.add_row("state slots", str(len(result.state_variables)), "")
    return table

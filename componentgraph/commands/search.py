"""Find units in the graph by name or path."""

import sys

import click

from componentgraph.commands.common import run_analysis
from componentgraph.exceptions import EmptyGraphError, SourceLoadError
from componentgraph.graph.queries import search_units
from componentgraph.ui import print_error
from componentgraph.utils.error_handler import handle_exceptions
from componentgraph.utils.exit_codes import ExitCodes


@click.command("search")
@click.argument("root", type=click.Path(file_okay=False))
@click.argument("query")
@handle_exceptions
def search(root, query):
    """Search connected units by display name or file path (case-insensitive).

    Prints one tab-separated line per match: kind, name, path, degree.

    EXAMPLES:
      cgraph search ./my-app header
      cgraph search ./my-app hooks/
    """
    try:
        result, _cfg = run_analysis(root)
    except SourceLoadError as e:
        raise click.BadParameter(str(e), param_hint="ROOT") from e
    except EmptyGraphError as e:
        print_error(str(e))
        sys.exit(ExitCodes.NO_UNITS)

    matches = search_units(result.nodes, query)
    if not matches:
        print_error(f"No units match '{query}'")
        sys.exit(ExitCodes.NOT_FOUND)

    for unit in matches:
        click.echo(f"{unit.kind.value}\t{unit.display_name}\t{unit.file_path}\t{unit.degree}")

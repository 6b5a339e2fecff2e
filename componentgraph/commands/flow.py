"""Show how state slots flow from their owner into consumers."""

import sys

import click
from rich.table import Table

from componentgraph.commands.common import run_analysis
from componentgraph.exceptions import EmptyGraphError, SourceLoadError
from componentgraph.graph.queries import group_state_slots_by_owner, state_flow_unit_ids
from componentgraph.ui import console, print_error, print_header
from componentgraph.utils.error_handler import handle_exceptions
from componentgraph.utils.exit_codes import ExitCodes


@click.command("flow")
@click.argument("root", type=click.Path(file_okay=False), default=".")
@click.option("--state", "state_name", help="Only show slots with this value name")
@handle_exceptions
def flow(root, state_name):
    """List state slots by owner, or trace one slot to its consumers.

    EXAMPLES:
      cgraph flow ./my-app
      cgraph flow ./my-app --state user
    """
    try:
        result, _cfg = run_analysis(root)
    except SourceLoadError as e:
        raise click.BadParameter(str(e), param_hint="ROOT") from e
    except EmptyGraphError as e:
        print_error(str(e))
        sys.exit(ExitCodes.NO_UNITS)

    slots = result.state_variables
    if state_name:
        slots = [slot for slot in slots if slot.value_name == state_name]
        if not slots:
            print_error(f"No state slot named '{state_name}'")
            sys.exit(ExitCodes.NOT_FOUND)

        for slot in slots:
            print_header(f"{slot.owner_display_name}.{slot.value_name}")
            for index, unit_id in enumerate(state_flow_unit_ids(slot)):
                role = "owner" if index == 0 else "consumer"
                click.echo(f"{role}\t{unit_id}")
        return

    for owner, owned in group_state_slots_by_owner(slots).items():
        table = Table(title=owner, show_header=True, header_style="bold")
        table.add_column("State")
        table.add_column("Updater")
        table.add_column("Consumers", justify="right")
        for slot in owned:
            table.add_row(slot.value_name, slot.updater_name, str(len(slot.consumer_unit_ids)))
        console.print(table)

"""componentgraph CLI - main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click

from componentgraph import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cgraph")
@click.help_option("-h", "--help")
def cli():
    """componentgraph - component, hook and state-flow graphs for UI codebases

    \b
    QUICK START:
      cgraph analyze ./my-app            # Graph JSON on stdout
      cgraph flow ./my-app --state user  # Who receives `user`?
      cgraph search ./my-app header      # Find units by name/path

    \b
    For detailed options: cgraph <command> --help"""
    pass


from componentgraph.commands.analyze import analyze
from componentgraph.commands.flow import flow
from componentgraph.commands.search import search

cli.add_command(analyze)
cli.add_command(flow)
cli.add_command(search)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()

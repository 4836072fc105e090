"""csvout CLI main entry point with global options."""

import logging
import sys

import click


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log dispatch details to stderr")
@click.version_option(package_name="csvout")
def cli(verbose):
    """csvout - write CSV to files, streams and callbacks."""
    setup_logging(verbose)


# Register commands at module level so tests can import cli with commands attached
from .commands.write import write

cli.add_command(write)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

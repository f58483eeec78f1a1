"""Command-line interface for timezone based geolocation.

Prints the local timezone name or the approximate coordinates of a timezone,
as found in the system's zone tables.
"""

import os
import re
import sys

import click
from munch import Munch

from tzloc.errors import MalformedCoordinateError
from tzloc.geo.local_tz import get_local_tz_name
from tzloc.geo.zone_tab import lookup_tz_coords, zone_tab_paths
from tzloc.utils.trace_utils import str_exc
from tzloc.utils.yaml_utils import yaml_dump_plain

EXIT_NOT_FOUND = 1
EXIT_MALFORMED = 2


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Report skipped zone tables and failed lookups on stderr")
@click.pass_context
def cli(ctx, verbose):
    """Timezone geolocation CLI.

    Local coordinates: tzloc  (or: tzloc coords)
    Timezone coordinates: tzloc coords Europe/Budapest
    Local timezone name: tzloc name
    """
    ctx.obj = Munch(verbose=verbose)


@cli.command(name="name")
@click.pass_obj
def cli_command_name(cliopt):
    """Print the local IANA timezone name."""
    tz_name = get_local_tz_name(verbose=cliopt.verbose)
    if not tz_name:
        click.echo("Could not determine the local timezone name.", err=True)
        sys.exit(EXIT_NOT_FOUND)
    click.echo(tz_name)


@cli.command(name="coords")
@click.argument("tz_name", required=False)
@click.pass_obj
def cli_command_coords(cliopt, tz_name):
    """Print approximate coordinates of a timezone (default: the local one).

    Examples:
        tzloc coords
        tzloc coords America/Vancouver
    """
    tz_name = tz_name or get_local_tz_name(verbose=cliopt.verbose)
    if not tz_name:
        click.echo("Could not determine the local timezone name.", err=True)
        sys.exit(EXIT_NOT_FOUND)
    try:
        coords = lookup_tz_coords(tz_name, verbose=cliopt.verbose)
    except MalformedCoordinateError as e:
        click.echo(str_exc(e), err=True)
        sys.exit(EXIT_MALFORMED)
    if coords is None:
        click.echo(f"No zone table entry for {tz_name}.", err=True)
        sys.exit(EXIT_NOT_FOUND)
    click.echo(yaml_dump_plain({"tz": tz_name, "lat": coords.lat, "lon": coords.lon}))


@cli.command(name="paths")
def cli_command_paths():
    """List candidate zone table files in search order."""
    click.echo(yaml_dump_plain([{"path": path, "exists": os.path.isfile(path)} for path in zone_tab_paths()]))


def main():
    """Entry point that adds default 'coords' subcommand if needed.

    This allows: tzloc Europe/Budapest  (instead of requiring: tzloc coords Europe/Budapest)
    """
    args = sys.argv[1:]
    if not any(re.search(r"^(-h|--help)$", arg) for arg in args):
        positional = [i for i, arg in enumerate(args) if not arg.startswith("-")]
        if not positional:
            sys.argv.append("coords")
        elif args[positional[0]] not in cli.commands:
            sys.argv.insert(positional[0] + 1, "coords")
    cli()


# entry point `tzloc` is defined in pyproject.toml
if __name__ == "__main__":
    main()

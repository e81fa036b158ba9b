"""Click CLI entry point."""

from __future__ import annotations

import json

import click
from rich.console import Console

from . import __version__
from .config import DecodeConfig, ReportConfig

console = Console()


@click.group()
@click.version_option(__version__, prog_name="shapematch")
def cli() -> None:
    """shapematch — check that JSON documents contain an expected shape."""


@cli.command()
@click.argument("pattern_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.argument("actual_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--decimals", is_flag=True, help="Decode JSON floats as exact decimals.")
@click.option("--datetimes", is_flag=True, help="Decode ISO-8601 strings as timestamps.")
@click.option("--no-markers", is_flag=True, help="Treat $wildcard/$empty_list/$unsorted as plain data.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Only set the exit code.")
@click.option("--max-repr", default=200, type=click.IntRange(min=20), help="Truncate values in the report.")
def check(
    pattern_file: str,
    actual_file: str,
    decimals: bool,
    datetimes: bool,
    no_markers: bool,
    as_json: bool,
    quiet: bool,
    max_repr: int,
) -> None:
    """Check that ACTUAL_FILE contains everything in PATTERN_FILE.

    Exits 0 on a match, 1 when the pattern is not satisfied.
    """
    from .decoding import PatternDecodeError, load_file
    from .engine import evaluate
    from .reporting import ConsoleReporter

    if pattern_file == "-" and actual_file == "-":
        raise click.UsageError("Only one of PATTERN_FILE and ACTUAL_FILE can be read from stdin.")

    decode_config = DecodeConfig(decimals=decimals, datetimes=datetimes, markers=not no_markers)
    report_config = ReportConfig(max_repr_length=max_repr)

    try:
        pattern = load_file(pattern_file, decode_config, pattern=True)
        actual = load_file(actual_file, decode_config)
    except PatternDecodeError as e:
        raise click.UsageError(str(e))

    result = evaluate(pattern, actual)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif not quiet:
        if result.matched:
            console.print("[green]match[/]")
        else:
            ConsoleReporter(report_config, console=console)(result)

    if not result.matched:
        raise SystemExit(1)

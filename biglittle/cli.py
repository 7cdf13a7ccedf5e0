"""Command-line interface for biglittle.

Loads the anchor ("Big") and dependent ("Little") CSV tables, runs the
matching and prints the result.
"""

import contextlib
import importlib.metadata
import json
import sys

import click

import biglittle.instance
import biglittle.io
from biglittle.errors import BigLittleError

__all__ = ["main"]

try:
  __version__ = importlib.metadata.version("biglittle")
except importlib.metadata.PackageNotFoundError:
  __version__ = "0.1.0"


@click.command()
@click.version_option(version=__version__, prog_name="biglittle")
@click.argument("anchor_input", type=click.Path(exists=True, dir_okay=False))
@click.argument("dependent_input", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the result as JSON to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def main(anchor_input, dependent_input, output_format, output, verbose):
  """Match Littles (dependents) to Bigs (anchors).

  ANCHOR_INPUT and DEPENDENT_INPUT are CSV files with a `Name` column
  followed by rank columns naming the other side, most preferred first.

  Examples
  --------
      biglittle bigs.csv littles.csv
      biglittle bigs.csv littles.csv --format json -o matching.json
  """
  try:
    if verbose:
      click.echo("Loading {0} and {1}".format(anchor_input, dependent_input),
                 err=True)
    ins = biglittle.io.load_instance(anchor_input, dependent_input)
    if verbose:
      click.echo(repr(ins), err=True)
    # engine progress goes to stderr so stdout stays parseable
    with contextlib.redirect_stdout(sys.stderr):
      sol = biglittle.instance.solve(ins, verbose=verbose)
  except (BigLittleError, ValueError, OSError) as e:
    click.secho("Error: {0}".format(e), fg="red", err=True)
    sys.exit(1)

  if output_format == "json":
    click.echo(json.dumps(sol.to_dict(), indent=2))
  else:
    click.echo(sol.display())

  if output:
    biglittle.io.save_result_json(sol, output)
    if verbose:
      click.echo("Wrote result to {0}".format(output), err=True)


if __name__ == "__main__":
  main()

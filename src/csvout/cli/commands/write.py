"""Write command - re-emit CSV from stdin to a file or stdout."""

import csv
import sys

import click

from ...models import LINE_BREAKS
from ...pipeline import Pipeline
from ...streams import IOStream


def _split_columns(ctx, param, value):
    if not value:
        return None
    return [column.strip() for column in value.split(",") if column.strip()]


@click.command()
@click.argument("destination", required=False)
@click.option("--delimiter", default=",", help="Output field delimiter")
@click.option("--quote", default='"', help="Output quote character")
@click.option("--escape", default='"', help="Output escape character")
@click.option("--quoted", is_flag=True, help="Quote every field")
@click.option(
    "--columns",
    callback=_split_columns,
    help="Comma separated column names for the header row",
)
@click.option(
    "--header/--no-header",
    default=False,
    help="Write the column names on the first line",
)
@click.option(
    "--line-breaks",
    type=click.Choice(sorted(LINE_BREAKS)),
    default="auto",
    envvar="CSVOUT_LINE_BREAKS",
    show_default=True,
    help="Record separator",
)
@click.option("--append", is_flag=True, help="Append to DESTINATION instead of overwriting")
@click.option("--input-delimiter", default=",", help="Field delimiter of stdin")
def write(
    destination,
    delimiter,
    quote,
    escape,
    quoted,
    columns,
    header,
    line_breaks,
    append,
    input_delimiter,
):
    """Read CSV from stdin, write it to DESTINATION or stdout.

    Examples:
        cat data.csv | csvout write out.csv --delimiter ";"
        cat data.csv | csvout write out.csv --append
        cat data.csv | csvout write --line-breaks windows --quoted
        cat data.tsv | csvout write --input-delimiter "$(printf '\\t')"
    """
    errors = []
    options = {
        "delimiter": delimiter,
        "quote": quote,
        "escape": escape,
        "quoted": quoted,
        "columns": columns,
        "header": header,
        "line_breaks": line_breaks,
        "flags": "a" if append else "w",
    }

    pipeline = Pipeline()
    pipeline.on("error", errors.append)
    pipeline.to.options(options)
    if errors:
        _fail(errors)

    try:
        if destination in (None, "-"):
            pipeline.to.stream(IOStream(sys.stdout))
        else:
            pipeline.to.path(destination)

        pipeline.run(csv.reader(sys.stdin, delimiter=input_delimiter))
    except (csv.Error, TypeError) as e:
        errors.append(e)

    if errors:
        _fail(errors)


def _fail(errors):
    for error in errors:
        click.echo(f"Error: {error}", err=True)
    sys.exit(1)

"""URL parse command."""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..codec import parse, serialize
from ..utils import format_field

console = Console()


@click.command("parse")
@click.argument("url")
@click.option("--default", "default", default=None,
              help='Value for missing fields (use "*" to read URL as a mask)')
@click.option("--json", "as_json", is_flag=True, help="Print fields as JSON")
def parse_cmd(url, default, as_json):
    """Split a URL or URL mask into its eight fields."""
    record = parse(url, default=default)

    if as_json:
        click.echo(json.dumps(record.to_dict(), indent=2))
        return

    table = Table(title="URL Fields")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    for name, value in record.to_dict().items():
        table.add_row(name, escape(format_field(value)))

    console.print(table)
    console.print(f"[dim]Canonical:[/dim] {escape(serialize(record, default=default))}")

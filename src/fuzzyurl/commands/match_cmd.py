"""Mask match command."""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import load_config
from ..matching import as_mask, as_url, match_scores
from ..protocols import NO_PORTS
from ..utils import format_field, format_score

console = Console()

SCORE_COLORS = {
    1: "green",
    0: "yellow",
    None: "red",
}


@click.command("match")
@click.argument("mask")
@click.argument("url")
@click.option("--no-port-inference", is_flag=True,
              help="Don't infer a missing port or protocol from default ports")
@click.pass_context
def match_cmd(ctx, mask, url, no_port_inference):
    """Match URL against MASK and show per-field scores.

    Exits with status 1 if the mask does not match.
    """
    cfg = load_config(ctx.obj.get("config_path") if ctx.obj else None)
    ports = NO_PORTS if no_port_inference else cfg.get_port_table()

    mask_record = as_mask(mask)
    url_record = as_url(url)
    scores = match_scores(mask_record, url_record, ports=ports)

    table = Table(title="Match Scores")
    table.add_column("Field", style="cyan")
    table.add_column("Mask")
    table.add_column("URL")
    table.add_column("Result")

    for name, score in scores.to_dict().items():
        color = SCORE_COLORS[score]
        table.add_row(
            name,
            escape(format_field(getattr(mask_record, name), 30)),
            escape(format_field(getattr(url_record, name), 30)),
            f"[{color}]{format_score(score)}[/{color}]",
        )

    console.print(table)

    if not scores.matched:
        console.print("[red]No match[/red]")
        sys.exit(1)

    console.print(f"[green]Match[/green] score: [bold]{scores.total}[/bold]")

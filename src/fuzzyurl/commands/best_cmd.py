"""Best mask selection command."""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import load_config
from ..matching import rank_matches

console = Console()


@click.command("best")
@click.argument("url")
@click.argument("masks", nargs=-1)
@click.option("--all", "show_all", is_flag=True, help="Show every matching mask")
@click.pass_context
def best(ctx, url, masks, show_all):
    """Pick the mask that best matches URL.

    MASKS are tried in order and the first one wins on equal scores. Without
    MASKS, the `masks` list from the config file is used.
    """
    cfg = load_config(ctx.obj.get("config_path") if ctx.obj else None)
    candidates = list(masks) or cfg.masks

    if not candidates:
        console.print("[yellow]No masks given.[/yellow]")
        console.print("[dim]Pass masks as arguments or set 'masks' in fuzzyurl.yaml.[/dim]")
        sys.exit(1)

    ranked = rank_matches(candidates, url, ports=cfg.get_port_table())

    if not ranked:
        console.print("[red]No mask matches.[/red]")
        sys.exit(1)

    if show_all:
        table = Table(title="Matching Masks")
        table.add_column("#", style="dim", width=4)
        table.add_column("Mask", style="cyan")
        table.add_column("Score", style="bold")
        for index, score in ranked:
            table.add_row(str(index), escape(candidates[index]), str(score))
        console.print(table)

    index, score = ranked[0]
    console.print(f"[green]Best match[/green] #{index}: [cyan]{escape(candidates[index])}[/cyan] (score {score})")

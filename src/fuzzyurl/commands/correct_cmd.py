"""URL typo correction command."""

import sys

import click
from rich.console import Console

from ..config import load_config
from ..errors import CorrectionError
from ..normalize import correct_url

console = Console()


@click.command("correct")
@click.argument("text")
@click.pass_context
def correct(ctx, text):
    """Fix common typos in a URL and print the result."""
    cfg = load_config(ctx.obj.get("config_path") if ctx.obj else None)

    try:
        corrected = correct_url(
            text,
            valid_tlds=cfg.get_valid_tlds(),
            common_sites=set(cfg.common_sites),
            default_protocol=cfg.default_protocol,
        )
    except CorrectionError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    click.echo(corrected)

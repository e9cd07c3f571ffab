"""Config management commands."""

from __future__ import annotations

import sys
from dataclasses import asdict
from io import StringIO
from pathlib import Path

import click
from rich.console import Console
from rich.syntax import Syntax
from ruamel.yaml import YAML

from ..config import (
    find_config_path,
    get_default_config_yaml,
    load_config,
    validate_config,
)

console = Console()

DEFAULT_FILENAME = "fuzzyurl.yaml"


def _config_path(ctx) -> str | None:
    return ctx.obj.get("config_path") if ctx.obj else None


@click.group("config")
def config():
    """Manage fuzzyurl configuration.

    View, create, and validate fuzzyurl.yaml settings.
    """


@config.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config file")
@click.option("--filename", default=DEFAULT_FILENAME,
              help="Config filename (default: fuzzyurl.yaml)")
def init(force, filename):
    """Create a default fuzzyurl.yaml config file in the current directory."""
    target = Path.cwd() / filename

    if target.exists() and not force:
        console.print(f"[yellow]Config file already exists:[/yellow] {target}")
        console.print("[dim]Use --force to overwrite.[/dim]")
        return

    target.write_text(get_default_config_yaml(), encoding="utf-8")
    console.print(f"[green]Config file created:[/green] {target}")


@config.command()
@click.pass_context
def show(ctx):
    """Show the effective configuration (defaults + config file)."""
    config_path = _config_path(ctx)
    cfg = load_config(config_path)

    data = asdict(cfg)
    data["default_ports"] = cfg.get_port_table().to_dict()

    yaml = YAML()
    yaml.default_flow_style = False
    buf = StringIO()
    yaml.dump({"fuzzyurl": data}, buf)

    console.print(Syntax(buf.getvalue(), "yaml", theme="monokai", line_numbers=False))

    if config_path:
        console.print(f"\n[dim]Config file: {Path(config_path).resolve()}[/dim]")
    else:
        found = find_config_path()
        if found:
            console.print(f"\n[dim]Config file: {found}[/dim]")
        else:
            console.print("\n[dim]No config file found (using defaults)[/dim]")


@config.command()
@click.pass_context
def validate(ctx):
    """Validate the config file for errors.

    Checks YAML syntax, key names, and value types.
    """
    config_path = _config_path(ctx)
    path = Path(config_path) if config_path else find_config_path()

    if path is None:
        console.print("[yellow]No config file found.[/yellow]")
        console.print("[dim]Run 'fuzzyurl config init' to create one.[/dim]")
        return

    if not path.exists():
        console.print(f"[red]Config file not found:[/red] {path}")
        sys.exit(1)

    errors = validate_config(path)

    if not errors:
        console.print(f"[green]Config is valid:[/green] {path}")
    else:
        console.print(f"[red]Config has {len(errors)} error(s):[/red] {path}")
        for err in errors:
            console.print(f"  [red]-[/red] {err}")
        sys.exit(1)


@config.command()
def path():
    """Print the path to the active config file."""
    found = find_config_path()
    if found:
        click.echo(str(found))
    else:
        console.print("[dim]No config file found.[/dim]")
        sys.exit(1)

"""fuzzyurl CLI entry point."""

import click

from .commands import best, config, correct, match_cmd, parse_cmd, version
from .utils import setup_logging


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Config file path (fuzzyurl.yaml)")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx, config_path, verbose):
    """fuzzyurl - parse URLs and match them against wildcard masks.

    Masks use "*" wildcards: "*.example.com" and "**.example.com" for
    hostnames, "/api/*" and "/api/**" for paths.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(parse_cmd)
main.add_command(match_cmd)
main.add_command(best)
main.add_command(correct)
main.add_command(config)
main.add_command(version)


if __name__ == "__main__":
    main()

"""Configuration commands.

Show the effective configuration and write a default config file.
"""

from typing import Annotated

import tomli_w
import typer
from rich.markup import escape

from pathtree.cli.types import get_config
from pathtree.core.config import (
    ConfigError,
    PathTreeConfig,
    config_to_dict,
    save_config,
)
from pathtree.core.paths import get_config_path
from pathtree.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the pathtree configuration.",
    no_args_is_help=True,
)


@app.command("show")
def show_config(ctx: typer.Context) -> None:
    """Print the effective configuration as TOML."""
    config = get_config(ctx)
    obj = ctx.obj or {}
    source = obj.get("config_path") or get_config_path()

    console.print(f"[dim]# {escape(str(source))}[/dim]", highlight=False)
    console.print(tomli_w.dumps(config_to_dict(config)), markup=False, highlight=False)


@app.command("init")
def init_config(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    obj = ctx.obj or {}
    target = obj.get("config_path") or get_config_path()

    if target.exists() and not force:
        print_info(f"Config already exists: {target} (use --force to overwrite)")
        return

    try:
        saved = save_config(PathTreeConfig(), target)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default config to {saved}")

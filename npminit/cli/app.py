"""
Main CLI application for npminit.

Defines the Typer application structure and command routing.
"""
from typing import Optional

import typer

from npminit.cli.commands.init import init_command


app = typer.Typer(help="npminit - interactive package.json initializer")

app.command("init", help="Create or update package.json, optionally checking the name on npm.")(init_command)


# Running npminit with no subcommand starts the interactive init
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """npminit - interactive package.json initializer.

    Run 'npminit' or 'npminit init' in your project directory.
    """
    # Top-level flags also apply to an explicit 'init'
    ctx.obj = {"config_path": config_path, "verbose": verbose}
    if ctx.invoked_subcommand is None:
        ctx.invoke(init_command, ctx=ctx, config_path=config_path, verbose=verbose)

"""
Init command implementation.

Thin wrapper around InitializerService that handles CLI argument parsing
and delegates the workflow to the service layer.
"""
import sys
from typing import Optional

import typer

from npminit.core.config_manager import ConfigManager
from npminit.core.initializer import InitializerService
from npminit.rich_utils.ui_helpers import get_console
from npminit.utils.logging_config import configure_logging


def init_command(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Create or update package.json, optionally checking the name on npm."""

    parent_options = ctx.obj or {}
    config_path = config_path or parent_options.get("config_path")
    verbose = verbose or parent_options.get("verbose", False)

    console = get_console()
    try:
        config = ConfigManager().discover_and_load_config(config_path)
    except FileNotFoundError as e:
        console.print(f"❌ {e}", style="red", markup=False)
        sys.exit(1)

    logging_config = config.get("logging", {})
    configure_logging(
        level=logging_config.get("level", "WARNING"),
        log_file=logging_config.get("file"),
        verbose=verbose,
    )

    try:
        exit_code = InitializerService(config=config, console=console).execute()
    except (KeyboardInterrupt, typer.Abort):
        console.print("\n⚠️ Initialization interrupted by user", style="yellow", markup=False)
        sys.exit(130)

    if exit_code != 0:
        sys.exit(exit_code)

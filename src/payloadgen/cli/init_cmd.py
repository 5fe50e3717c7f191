"""Init command - write a default configuration file."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from payloadgen.config.loader import DEFAULT_CONFIG_PATH, save_config
from payloadgen.config.schema import PayloadgenConfig

console = Console()


def init_command(force: bool = False, config_path: str | None = None) -> None:
    """Create a config file populated with defaults.

    Args:
        force: Overwrite existing config if present
        config_path: Destination path, defaults to DEFAULT_CONFIG_PATH
    """
    path = Path(config_path).expanduser() if config_path else DEFAULT_CONFIG_PATH

    if path.exists() and not force:
        console.print(f"\n[yellow]Config already exists at {path}[/yellow]")
        console.print("Use [bold]--force[/bold] to overwrite.")
        raise typer.Exit(0)

    save_config(PayloadgenConfig(), path)

    console.print(
        Panel.fit(
            f"[green]✓ Configuration saved to {path}[/green]\n"
            "Edit it, then run [bold]payloadgen generate[/bold].",
            border_style="green",
        )
    )

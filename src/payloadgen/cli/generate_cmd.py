"""Generate command - produce payloads from config and CLI options."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from payloadgen.config.loader import ConfigError, load_config
from payloadgen.generator import PayloadError, SlidingBufferGenerator
from payloadgen.log import configure_logging

console = Console()


def generate_command(
    size: int | None = None,
    kind: str | None = None,
    count: int | None = None,
    calc_hash: bool | None = None,
    output: str | None = None,
    config_path: str | None = None,
) -> None:
    """Generate payloads.

    Options given on the command line override the config file.

    Args:
        size: Payload size in bytes
        kind: Content kind
        count: Number of payloads
        calc_hash: Compute SHA-256 of each payload
        output: File to append raw payload bytes to
        config_path: Path to config file
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    configure_logging(config.logging.level, config.logging.format)

    payload_cfg = config.payload
    size = size if size is not None else payload_cfg.size
    kind = kind if kind is not None else payload_cfg.kind
    count = count if count is not None else payload_cfg.count
    calc_hash = calc_hash if calc_hash is not None else payload_cfg.hash

    try:
        generator = SlidingBufferGenerator(size, kind)
    except PayloadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    if output:
        path = Path(output).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "ab") as f:
            for _ in range(count):
                f.write(generator.generate_payload(calc_hash).data)
        console.print(f"[green]✓[/green] Wrote {count} x {size} bytes to {path}")
        return

    table = Table(title="Generated Payloads", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("SHA-256", style="dim", overflow="fold")

    for i in range(1, count + 1):
        payload = generator.generate_payload(calc_hash)
        table.add_row(str(i), str(payload.size), payload.hash or "-")

    console.print(table)

"""Main CLI application using Typer."""

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from payloadgen import __version__

# Create Typer app
app = typer.Typer(
    name="payloadgen",
    help="Payloadgen - Sliding-window payload generator for load testing",
    no_args_is_help=True,
)

console = Console()


@app.command()
def version():
    """Show payloadgen version."""
    console.print(f"payloadgen version {__version__}")


@app.command()
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Where to write the config (default: ~/.payloadgen/payloadgen.yaml)",
    ),
):
    """Write a default configuration file."""
    from payloadgen.cli.init_cmd import init_command

    init_command(force=force, config_path=config_path)


@app.command()
def generate(
    size: int = typer.Option(None, "--size", "-s", help="Payload size in bytes"),
    kind: str = typer.Option(None, "--kind", "-k", help="Content kind: random or text"),
    count: int = typer.Option(None, "--count", "-n", help="Number of payloads", min=1),
    calc_hash: Optional[bool] = typer.Option(
        None, "--hash/--no-hash", help="Compute SHA-256 hash of each payload (default: payload.hash)"
    ),
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Append raw payload bytes to this file instead of printing a summary",
    ),
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.payloadgen/payloadgen.yaml)",
    ),
):
    """Generate payloads and print their sizes and hashes."""
    from payloadgen.cli.generate_cmd import generate_command

    generate_command(
        size=size,
        kind=kind,
        count=count,
        calc_hash=calc_hash,
        output=output,
        config_path=config_path,
    )


@app.command()
def bench(
    size: int = typer.Option(1024, "--size", "-s", help="Payload size in bytes"),
    kind: str = typer.Option("random", "--kind", "-k", help="Content kind: random or text"),
    iterations: int = typer.Option(
        10000, "--iterations", "-i", help="Number of payloads to generate", min=1
    ),
    calc_hash: bool = typer.Option(False, "--hash", help="Compute SHA-256 hash of each payload"),
):
    """Measure generator throughput."""
    from payloadgen.cli.bench_cmd import bench_command

    bench_command(size=size, kind=kind, iterations=iterations, calc_hash=calc_hash)


def main():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Bench command - measure generator throughput."""

import time

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from payloadgen.generator import PayloadError, SlidingBufferGenerator

console = Console()


def run_bench(size: int, kind: str, iterations: int, calc_hash: bool = False) -> dict:
    """Generate *iterations* payloads and collect timing statistics.

    Returns:
        Dictionary with elapsed seconds, throughput and generator metrics
    """
    generator = SlidingBufferGenerator(size, kind)

    start = time.perf_counter()
    for _ in range(iterations):
        generator.generate_payload(calc_hash)
    elapsed = time.perf_counter() - start

    metrics = generator.metrics
    return {
        "iterations": iterations,
        "elapsed_seconds": elapsed,
        "mb_per_second": (metrics.bytes_served / (1024 * 1024)) / elapsed if elapsed > 0 else 0.0,
        "mean_us_per_call": (elapsed / iterations) * 1_000_000,
        **metrics.to_dict(),
    }


def bench_command(size: int, kind: str, iterations: int, calc_hash: bool = False) -> None:
    """Run the benchmark and print a summary table."""
    try:
        result = run_bench(size, kind, iterations, calc_hash)
    except PayloadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    table = Table(title=f"Generator Benchmark ({kind}, {size} bytes)", header_style="bold cyan")
    table.add_column("Metric", style="white")
    table.add_column("Value", justify="right")

    table.add_row("Iterations", f"{result['iterations']:,}")
    table.add_row("Rebuilds", f"{result['rebuilds']:,}")
    table.add_row("Slices per rebuild", f"{result['slices_per_rebuild']:.1f}")
    table.add_row("Build time", f"{result['build_seconds'] * 1000:.2f} ms")
    table.add_row("Throughput", f"{result['mb_per_second']:.1f} MB/s")
    table.add_row("Mean per call", f"{result['mean_us_per_call']:.2f} µs")
    if calc_hash:
        table.add_row("Hashes", f"{result['hashes']:,}")

    console.print(table)

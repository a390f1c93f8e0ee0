"""Command-line interface for PoissonGen."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from poissongen import __version__
from poissongen.core import Config, GenerationResult, PointSetGenerator, load_config
from poissongen.processing import save_frames, save_raster, write_points
from poissongen.sampling import SamplingFactory
from poissongen.utils import create_cache_manager, setup_logging

app = typer.Typer(
    name="poissongen",
    help="Generate blue-noise and low-discrepancy 2-D point sets",
    add_completion=False,
)
console = Console()


def _build_config(
    config: Optional[Path],
    num_points: Optional[int],
    method: Optional[str],
    shape: Optional[str],
    distance: Optional[float],
    k_candidates: Optional[int],
    seed: Optional[int],
    shuffle: Optional[bool],
    verbose: bool,
) -> Config:
    """Load configuration and apply command line overrides."""
    cfg = load_config(config)
    cfg = cfg.with_overrides(
        "sampling",
        num_points=num_points,
        method=method,
        shape=shape,
        min_distance=distance,
        k_candidates=k_candidates,
        seed=seed,
        shuffle=shuffle,
    )
    if verbose:
        cfg = cfg.with_overrides("logging", level="DEBUG")
    setup_logging(cfg.logging)
    return cfg


def _print_summary(result: GenerationResult) -> None:
    """Print a table describing a generation result."""
    table = Table(title="Point Set", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Method", result.method)
    table.add_row("Requested", f"{result.requested:,}")
    table.add_row("Generated", f"{len(result.points):,}")
    if result.min_distance is not None:
        table.add_row("Min Distance", f"{result.min_distance:.6f}")
    if "nn_distance_min" in result.metrics:
        table.add_row("Nearest Neighbour (min)", f"{result.metrics['nn_distance_min']:.6f}")
        table.add_row("Nearest Neighbour (mean)", f"{result.metrics['nn_distance_mean']:.6f}")
    if "sampling_time" in result.metrics:
        table.add_row("Sampling Time", f"{result.metrics['sampling_time']:.3f}s")
    table.add_row("From Cache", "yes" if result.from_cache else "no")

    console.print(table)

    if result.saturated:
        console.print(
            f"[yellow]Domain saturated: {len(result.points):,} of "
            f"{result.requested:,} points placed[/yellow]"
        )


@app.command()
def generate(
    num_points: Optional[int] = typer.Option(
        None, "--points", "-n", help="Number of points to generate"
    ),
    method: Optional[str] = typer.Option(
        None, "--method", "-m", help="Sampling method"
    ),
    shape: Optional[str] = typer.Option(
        None, "--shape", "-s", help="Domain shape: circle or square"
    ),
    distance: Optional[float] = typer.Option(
        None, "--distance", "-d", help="Minimum distance (negative = auto)"
    ),
    k_candidates: Optional[int] = typer.Option(
        None, "--k", help="Candidates per active point"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    shuffle: Optional[bool] = typer.Option(
        None, "--shuffle/--no-shuffle", help="Shuffle the output order"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Text file for the point coordinates"
    ),
    fmt: Optional[str] = typer.Option(
        None, "--format", "-f", help="Text format: raw or array"
    ),
    image: Optional[Path] = typer.Option(
        None, "--image", "-i", help="Raster image output (PNG/BMP)"
    ),
    size: Optional[int] = typer.Option(None, "--size", help="Raster size in pixels"),
    density: Optional[Path] = typer.Option(
        None, "--density", help="Grayscale density map for thinning the raster"
    ),
    plot: Optional[Path] = typer.Option(
        None, "--plot", "-p", help="Save a scatter plot of the points"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Generate a point set and write it out."""
    try:
        cfg = _build_config(
            config, num_points, method, shape, distance, k_candidates, seed, shuffle, verbose
        )
        cfg = cfg.with_overrides("raster", image_size=size, density_map=density)
        cfg = cfg.with_overrides("export", format=fmt)

        sampling = cfg.sampling
        generator = PointSetGenerator(config=cfg)

        with console.status(
            f"Generating {sampling.num_points:,} points using {sampling.method} method..."
        ):
            result = generator.generate()

        console.print(f"✅ Generated {len(result.points):,} points")
        _print_summary(result)

        if output:
            write_points(
                result.points,
                output,
                fmt=cfg.export.format,
                name=cfg.export.array_name,
            )
            console.print(f"💾 Saved points to [cyan]{output}[/cyan]")

        if image:
            save_raster(generator.render(result), image)
            console.print(f"🖼️  Saved raster to [cyan]{image}[/cyan]")

        if plot:
            from poissongen.visualization import plot_point_set

            plot_point_set(
                result.points,
                title=f"{sampling.method} ({sampling.shape})",
                save_path=plot,
                shape=sampling.shape,
            )
            console.print(f"📊 Saved plot to [cyan]{plot}[/cyan]")

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def animate(
    frames_dir: Path = typer.Argument(..., help="Directory for the PNG frame sequence"),
    num_points: Optional[int] = typer.Option(
        None, "--points", "-n", help="Number of points to generate"
    ),
    method: Optional[str] = typer.Option(
        None, "--method", "-m", help="Sampling method"
    ),
    shape: Optional[str] = typer.Option(
        None, "--shape", "-s", help="Domain shape: circle or square"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    shuffle: Optional[bool] = typer.Option(
        None, "--shuffle/--no-shuffle", help="Reveal points in random order"
    ),
    every: Optional[int] = typer.Option(
        None, "--every", "-e", help="Emit a frame every N points"
    ),
    size: Optional[int] = typer.Option(None, "--size", help="Frame size in pixels"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Replay point discovery as a PNG frame sequence."""
    try:
        cfg = _build_config(
            config, num_points, method, shape, None, None, seed, shuffle, verbose
        )
        cfg = cfg.with_overrides("animation", frame_every=every, frame_size=size)
        generator = PointSetGenerator(config=cfg)

        with console.status("Generating points..."):
            result = generator.generate()

        with console.status("Rendering frames..."):
            paths = save_frames(generator.frames(result), frames_dir)

        console.print(
            f"🎞️  Wrote {len(paths)} frames for {len(result.points):,} points "
            f"to [cyan]{frames_dir}[/cyan]"
        )

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def info() -> None:
    """Display information about PoissonGen."""
    console.print("\n[cyan]PoissonGen[/cyan] - Blue-noise Point Set Generator")
    console.print(f"Version: {__version__}")
    console.print("\nFeatures:")
    console.print("  • 🎯 Poisson disk sampling with a minimum distance guarantee")
    console.print("  • 🌻 Vogel spiral, jittered grid and Hammersley sets")
    console.print("  • 🖼️  Raster output with density map thinning")
    console.print("  • 🎞️  Frame sequences of the discovery order")

    methods = SamplingFactory.available_methods()
    console.print(f"\nAvailable sampling methods: {', '.join(methods)}")


@app.command()
def cache(
    action: str = typer.Argument(
        ...,
        help="Cache action: stats, clear, or evict"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file"
    ),
) -> None:
    """Manage the cache of seeded point sets."""
    cfg = load_config(config)
    cache_mgr = create_cache_manager(cfg.cache)

    if action == "stats":
        stats = cache_mgr.get_stats()

        if not stats.get("enabled", False):
            console.print("[yellow]Cache is disabled[/yellow]")
            return

        table = Table(title="Cache Statistics", show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Location", stats.get("location", "N/A"))
        table.add_row("Size Limit", f"{stats.get('size_limit_gb', 0):.1f} GB")
        table.add_row("Entries", f"{stats.get('entries', 0):,}")
        table.add_row("Size", f"{stats.get('size_mb', 0):.1f} MB")
        table.add_row("Hits", f"{stats.get('hits', 0):,}")
        table.add_row("Misses", f"{stats.get('misses', 0):,}")
        table.add_row("Hit Rate", f"{stats.get('hit_rate', 0):.1%}")

        console.print(table)

    elif action == "clear":
        if typer.confirm("Are you sure you want to clear the cache?"):
            cache_mgr.clear()
            console.print("[green]Cache cleared successfully[/green]")
        else:
            console.print("[yellow]Cache clear cancelled[/yellow]")

    elif action == "evict":
        count = cache_mgr.evict_expired()
        console.print(f"[green]Evicted {count} expired entries[/green]")

    else:
        console.print(f"[red]Unknown action: {action}[/red]")
        console.print("Valid actions: stats, clear, evict")
        raise typer.Exit(1)


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()

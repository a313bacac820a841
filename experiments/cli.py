"""CLI interface for running experiments."""

from __future__ import annotations

from typing import Optional

import typer

from experiments.config import ExperimentConfig, load_config, save_config
from experiments.runner import ExperimentRunner
from knapsack.errors import KnapsackLoadError
from knapsack.generators import generate_random_knapsack
from knapsack.loader import knapsack_summary, load_knapsack, save_knapsack
from knapsack.scoring import score as cliff_score

app = typer.Typer(help="Knapsack cliff-scoring experiment CLI")


def _parse_choices(bits: str) -> list[bool]:
    if not bits or any(bit not in "01" for bit in bits):
        raise ValueError(f"Choices must be a string of 0s and 1s, got '{bits}'")
    return [bit == "1" for bit in bits]


@app.command()
def run(
    config_path: str = typer.Argument(..., help="Path to experiment YAML config"),
    runs: Optional[int] = typer.Option(
        None,
        "--runs",
        min=1,
        help="Number of independent repeats (overrides the config)",
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Hide the generation progress bar"),
) -> None:
    """Run a complete experiment from config file."""
    try:
        config = load_config(config_path)
    except FileNotFoundError as e:
        typer.secho(f"❌ Config file not found: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.secho(f"❌ Invalid config: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if runs is not None:
        config.runs = runs
    if quiet:
        config.show_progress = False

    try:
        summary = ExperimentRunner(config).run()
    except KnapsackLoadError as e:
        typer.secho(f"❌ Failed to load knapsack: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.secho(f"❌ Experiment failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if summary.get("status") == "completed":
        typer.secho("\n✅ Experiment completed successfully!", fg=typer.colors.GREEN)
    else:
        typer.secho("\n⚠️  Experiment incomplete", fg=typer.colors.YELLOW)

    for run_summary in summary.get("runs", []):
        best = run_summary["best_in_run"]
        if best is None:
            continue
        typer.echo(
            f"   Run {run_summary['run_index'] + 1} (seed {run_summary['seed']}): "
            f"{best['score']} at generation {best['generation']}"
        )


@app.command()
def describe(
    knapsack_path: str = typer.Argument(..., help="Path to a knapsack instance file"),
) -> None:
    """Print a summary of a knapsack instance."""
    try:
        knapsack = load_knapsack(knapsack_path)
    except KnapsackLoadError as e:
        typer.secho(f"❌ Failed to load knapsack: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    typer.echo(knapsack_summary(knapsack, name=knapsack_path))


@app.command()
def generate(
    output_path: str = typer.Argument(..., help="Where to write the instance file"),
    items: int = typer.Option(20, "--items", min=0, help="Number of items"),
    max_value: int = typer.Option(100, "--max-value", min=1, help="Largest item value"),
    max_weight: int = typer.Option(100, "--max-weight", min=1, help="Largest item weight"),
    capacity_ratio: float = typer.Option(
        0.5,
        "--capacity-ratio",
        min=0.0,
        max=1.0,
        help="Capacity as a fraction of the total item weight",
    ),
    seed: int = typer.Option(42, "--seed", help="Random seed"),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Also write an experiment config that runs on the new instance",
    ),
) -> None:
    """Write a random knapsack instance file."""
    knapsack = generate_random_knapsack(
        num_items=items,
        max_value=max_value,
        max_weight=max_weight,
        capacity_ratio=capacity_ratio,
        seed=seed,
    )
    path = save_knapsack(knapsack, output_path)
    typer.secho(f"✅ Instance written to {path}", fg=typer.colors.GREEN)
    typer.echo(knapsack_summary(knapsack))

    if config_path is not None:
        config = ExperimentConfig(
            run_id=f"knapsack_{path.stem}",
            seed=seed,
            knapsack_path=str(path),
        )
        written = save_config(config, config_path)
        typer.secho(f"✅ Config written to {written}", fg=typer.colors.GREEN)


@app.command()
def score(
    knapsack_path: str = typer.Argument(..., help="Path to a knapsack instance file"),
    choices: str = typer.Argument(..., help="Choice bits, e.g. 0110"),
) -> None:
    """Score a single choice string against an instance."""
    try:
        knapsack = load_knapsack(knapsack_path)
        bits = _parse_choices(choices)
    except KnapsackLoadError as e:
        typer.secho(f"❌ Failed to load knapsack: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.secho(f"❌ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if len(bits) != knapsack.num_items:
        typer.secho(
            f"⚠️  {len(bits)} choice bits for {knapsack.num_items} items; "
            "the shorter of the two is used",
            fg=typer.colors.YELLOW,
            err=True,
        )

    typer.echo(f"Weight: {knapsack.weight(bits)} / {knapsack.capacity}")
    typer.echo(f"Value:  {knapsack.value(bits)}")
    typer.echo(f"Score:  {cliff_score(knapsack, bits)}")


if __name__ == "__main__":
    app()

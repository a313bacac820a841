#!/usr/bin/env python3
"""
Knapsack quick-start script (cross-platform)

Usage:
  python run.py                                   # tiny sample instance
  python run.py --knapsack knapsacks/big.txt      # another instance file
  python run.py --tournament-size 8 --runs 30     # 30 independent repeats
  python run.py --generations 200 --population 500
  python run.py --help                            # show help
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path


def build_config(args):
    """Build an experiment config from command line flags."""
    from experiments.config import ExperimentConfig

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = args.run_id or f"knapsack_{Path(args.knapsack).stem}_{timestamp}"

    return ExperimentConfig(
        run_id=run_id,
        seed=args.seed,
        knapsack_path=args.knapsack,
        max_generations=args.generations,
        population_size=args.population,
        tournament_size=args.tournament_size,
        mutation_rate=args.mutation_rate,
        runs=args.runs,
        show_progress=not args.quiet,
    )


def print_config(config):
    print("📋 Experiment configuration:")
    print(f"   Run ID:          {config.run_id}")
    print(f"   Knapsack:        {config.knapsack_path}")
    print(f"   Generations:     {config.max_generations}")
    print(f"   Population size: {config.population_size}")
    print(f"   Tournament size: {config.tournament_size}")
    mutation = "1/L" if config.mutation_rate is None else config.mutation_rate
    print(f"   Mutation rate:   {mutation}")
    print(f"   Runs:            {config.runs}")
    print()


def main():
    parser = argparse.ArgumentParser(
        description="Knapsack cliff-scoring quick start",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--knapsack", "-k",
        default="knapsacks/tiny.txt",
        help="Knapsack instance file (default: knapsacks/tiny.txt)",
    )
    parser.add_argument(
        "--generations", "-g",
        type=int,
        default=1000,
        help="Maximum number of generations (default: 1000)",
    )
    parser.add_argument(
        "--population", "-p",
        type=int,
        default=1000,
        help="Population size (default: 1000)",
    )
    parser.add_argument(
        "--tournament-size", "-t",
        type=int,
        default=2,
        help="Tournament size for parent selection (default: 2)",
    )
    parser.add_argument(
        "--mutation-rate",
        type=float,
        default=None,
        help="Per-bit flip probability (default: 1 / number of items)",
    )
    parser.add_argument(
        "--runs", "-n",
        type=int,
        default=1,
        help="Number of independent repeats (default: 1)",
    )
    parser.add_argument("--seed", "-s", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--run-id", "-r", type=str, default="", help="Run identifier")
    parser.add_argument("--quiet", "-q", action="store_true", help="Hide the progress bar")

    args = parser.parse_args()

    from pydantic import ValidationError

    from experiments.runner import ExperimentRunner
    from knapsack.errors import KnapsackLoadError

    try:
        config = build_config(args)
    except ValidationError as e:
        print(f"❌ Invalid arguments: {e}")
        sys.exit(1)

    print_config(config)

    try:
        summary = ExperimentRunner(config).run()
    except KnapsackLoadError as e:
        print(f"❌ Failed to load knapsack: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"❌ Experiment failed: {e}")
        sys.exit(1)

    print()
    for run_summary in summary["runs"]:
        best = run_summary["best_in_run"]
        if best is not None:
            print(f"Run {run_summary['run_index'] + 1}: {best['score']} ({best['genome']})")


if __name__ == "__main__":
    main()

"""Experiment runner orchestrating all components."""

from __future__ import annotations

import logging
import random
from typing import Any, Callable

from tqdm import tqdm

from evolution.optimizer import GenerationalOptimizer, Individual
from evolution.tracker import BestRecord, GenerationTracker
from experiments.config import ExperimentConfig
from knapsack.instance import Knapsack
from knapsack.loader import load_knapsack
from knapsack.scoring import CliffScorer

logger = logging.getLogger(__name__)


def _record_to_dict(record: BestRecord | None) -> dict[str, Any] | None:
    if record is None:
        return None
    return {
        "score": str(record.score),
        "value": record.score.value,
        "overloaded": record.score.is_overloaded,
        "generation": record.generation,
        "genome": record.bitstring(),
    }


class ExperimentRunner:
    """Coordinates loading, optimization and reporting for a complete run.

    The knapsack is loaded before any generation executes, so a malformed
    instance aborts the experiment without running anything.
    """

    def __init__(
        self,
        config: ExperimentConfig,
        echo: Callable[[str], None] = tqdm.write,
    ) -> None:
        self.config = config
        self.echo = echo
        self.knapsack: Knapsack | None = None

    def run(self) -> dict[str, Any]:
        """Run every configured repeat.

        Returns:
            Summary dictionary with the best-ever record of each repeat
        """
        self.knapsack = load_knapsack(self.config.knapsack_path)

        self.echo(f"Running on knapsack at: {self.config.knapsack_path}")
        self.echo(f"Running with tournament size: {self.config.tournament_size}")
        logger.info(
            "Experiment %s: %d items, capacity %d, %d run(s)",
            self.config.run_id,
            self.knapsack.num_items,
            self.knapsack.capacity,
            self.config.runs,
        )

        runs: list[dict[str, Any]] = []
        for run_index in range(self.config.runs):
            if self.config.runs > 1:
                self.echo(f"This is run number {run_index + 1}")
            runs.append(self._run_single(self.knapsack, run_index))

        return {
            "status": "completed",
            "run_id": self.config.run_id,
            "knapsack_path": self.config.knapsack_path,
            "num_items": self.knapsack.num_items,
            "capacity": self.knapsack.capacity,
            "runs": runs,
        }

    def _run_single(self, knapsack: Knapsack, run_index: int) -> dict[str, Any]:
        seed = self.config.seed + run_index
        # DEAP's operators draw from the global generator.
        random.seed(seed)

        tracker = GenerationTracker(echo=self.echo)

        def inspector(generation_number: int, population: list[Individual]) -> None:
            _ = tracker.observe(generation_number, population)

        optimizer = GenerationalOptimizer(
            bit_length=knapsack.num_items,
            population_size=self.config.population_size,
            max_generations=self.config.max_generations,
            scorer=CliffScorer(knapsack),
            tournament_size=self.config.tournament_size,
            mutation_rate=self.config.mutation_rate,
            crossover_rate=self.config.crossover_rate,
            inspector=inspector,
            show_progress=self.config.show_progress,
        )
        final_population = optimizer.run()
        final_best = tracker.summary(final_population)

        return {
            "run_index": run_index,
            "seed": seed,
            "evaluations": optimizer.evaluations,
            "best_in_final_generation": _record_to_dict(final_best),
            "best_in_run": _record_to_dict(tracker.best_in_run),
        }

"""Generational bitstring optimizer built from DEAP operators.

Selection, recombination and mutation are DEAP's own (tournament selection,
uniform crossover and bit-flip mutation); this module only wires them into a
generational loop around a problem-specific scorer and an inspector hook.

DEAP draws from the global ``random`` module, so callers that need
reproducible runs seed it before calling ``run``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence
from typing import Callable

from deap import base, tools
from tqdm import tqdm

from knapsack.scoring import CliffScore

logger = logging.getLogger(__name__)

Scorer = Callable[[Sequence[bool]], CliffScore]
Inspector = Callable[[int, list["Individual"]], None]


class Individual(list):
    """A boolean genome with the score it was last evaluated to."""

    def __init__(self, genome: Iterable[bool] = ()) -> None:
        super().__init__(genome)
        self.score: CliffScore | None = None

    def __repr__(self) -> str:
        bits = "".join("1" if bit else "0" for bit in self)
        return f"Individual({bits}, score={self.score})"


class GenerationalOptimizer:
    """Evolves fixed-length boolean genomes against a scorer.

    Each generation is rebuilt from scratch: two parents are picked by
    tournament, recombined with uniform crossover, mutated by flipping bits
    and scored, until the new population is full. The inspector is called
    once the whole generation has been scored.
    """

    def __init__(
        self,
        bit_length: int,
        population_size: int,
        max_generations: int,
        scorer: Scorer,
        tournament_size: int = 2,
        mutation_rate: float | None = None,
        crossover_rate: float = 0.5,
        inspector: Inspector | None = None,
        show_progress: bool = True,
    ) -> None:
        if bit_length < 0:
            raise ValueError("bit_length must not be negative")
        if population_size <= 0:
            raise ValueError("population_size must be positive")
        if max_generations <= 0:
            raise ValueError("max_generations must be positive")
        if tournament_size <= 0:
            raise ValueError("tournament_size must be positive")
        if mutation_rate is None:
            # On average one flipped bit per child; an empty genome has none.
            mutation_rate = 1.0 / bit_length if bit_length else 0.0
        if not 0.0 <= mutation_rate <= 1.0:
            raise ValueError("mutation_rate must be between 0 and 1")
        if not 0.0 <= crossover_rate <= 1.0:
            raise ValueError("crossover_rate must be between 0 and 1")

        self.bit_length: int = bit_length
        self.population_size: int = population_size
        self.max_generations: int = max_generations
        self.tournament_size: int = tournament_size
        self.mutation_rate: float = mutation_rate
        self.crossover_rate: float = crossover_rate
        self.inspector: Inspector | None = inspector
        self.show_progress: bool = show_progress
        self.evaluations: int = 0

        self.toolbox = base.Toolbox()
        self.toolbox.register("attr_bool", random.choice, (False, True))
        self.toolbox.register(
            "individual", tools.initRepeat, Individual, self.toolbox.attr_bool, bit_length
        )
        self.toolbox.register("population", tools.initRepeat, list, self.toolbox.individual)
        self.toolbox.register("evaluate", scorer)
        self.toolbox.register(
            "select", tools.selTournament, tournsize=tournament_size, fit_attr="score"
        )
        self.toolbox.register("mate", tools.cxUniform, indpb=crossover_rate)
        self.toolbox.register("mutate", tools.mutFlipBit, indpb=mutation_rate)

    def run(self) -> list[Individual]:
        """Run every generation and return the final population."""
        population = self.toolbox.population(n=self.population_size)
        self._evaluate(population)

        generations = tqdm(
            range(self.max_generations),
            desc="Generations",
            leave=False,
            ncols=80,
            disable=not self.show_progress,
        )
        for generation_number in generations:
            population = self.next_generation(population)
            if self.inspector is not None:
                self.inspector(generation_number, population)

        logger.debug(
            "Finished %d generations with %d evaluations",
            self.max_generations,
            self.evaluations,
        )
        return population

    def next_generation(self, population: list[Individual]) -> list[Individual]:
        """Breed and score a full replacement population."""
        offspring: list[Individual] = []
        while len(offspring) < self.population_size:
            parents = self.toolbox.select(population, 2)
            first, second = (self.toolbox.clone(parent) for parent in parents)
            child, _ = self.toolbox.mate(first, second)
            (child,) = self.toolbox.mutate(child)
            child.score = None
            offspring.append(child)
        self._evaluate(offspring)
        return offspring

    def _evaluate(self, population: list[Individual]) -> None:
        scores = list(self.toolbox.map(self.toolbox.evaluate, population))
        for individual, score in zip(population, scores):
            individual.score = score
        self.evaluations += len(population)

"""Per-generation reporting and best-ever tracking."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Callable, Protocol

from tqdm import tqdm

from knapsack.scoring import CliffScore

from .statistics import population_entropy

logger = logging.getLogger(__name__)


class ScoredCandidate(Protocol):
    """A choice vector carrying the score it was evaluated to."""

    score: CliffScore

    def __iter__(self) -> Iterator[bool]:
        ...


@dataclass(frozen=True)
class BestRecord:
    genome: tuple[bool, ...]
    score: CliffScore
    generation: int

    def bitstring(self) -> str:
        return "".join("1" if bit else "0" for bit in self.genome)

    def __str__(self) -> str:
        return f"{self.score} at generation {self.generation}: {self.bitstring()}"


@dataclass(frozen=True)
class GenerationReport:
    generation: int
    best_score: CliffScore
    entropy: float
    improved: bool


def select_best(population: Sequence[ScoredCandidate]) -> ScoredCandidate:
    """Return the first member with the highest score."""
    if not population:
        raise ValueError("population must be non-empty")
    return max(population, key=attrgetter("score"))


class GenerationTracker:
    """Reports each generation and keeps the best candidate of the run.

    The tracker owns the best-ever record. ``observe`` is its only writer and
    must be called once per generation, after every member of the population
    has been scored.
    """

    def __init__(
        self,
        select_best: Callable[[Sequence[ScoredCandidate]], ScoredCandidate] = select_best,
        entropy: Callable[[Sequence[ScoredCandidate]], float] = population_entropy,
        echo: Callable[[str], None] = tqdm.write,
    ) -> None:
        self._select_best = select_best
        self._entropy = entropy
        self._echo = echo
        self.best_in_run: BestRecord | None = None
        self.last_report: GenerationReport | None = None

    def observe(
        self,
        generation: int,
        population: Sequence[ScoredCandidate],
    ) -> GenerationReport:
        best = self._select_best(population)
        self._echo(f"Best score in generation {generation} was {best.score}")

        entropy = self._entropy(population)
        self._echo(f"\tEntropy of the population was {entropy}")

        improved = self._update_best(generation, best)
        if improved:
            logger.debug("New best in run at generation %d: %s", generation, best.score)

        report = GenerationReport(
            generation=generation,
            best_score=best.score,
            entropy=entropy,
            improved=improved,
        )
        self.last_report = report
        return report

    def _update_best(self, generation: int, best: ScoredCandidate) -> bool:
        if self.best_in_run is not None and not best.score > self.best_in_run.score:
            return False
        self.best_in_run = BestRecord(
            genome=tuple(bool(bit) for bit in best),
            score=best.score,
            generation=generation,
        )
        return True

    def summary(self, final_population: Sequence[ScoredCandidate]) -> BestRecord:
        """Report the best of the final population and the best of the run.

        Returns the best member of the final population as a record.
        """
        best = self._select_best(final_population)
        generation = self.last_report.generation if self.last_report is not None else 0
        final_best = BestRecord(
            genome=tuple(bool(bit) for bit in best),
            score=best.score,
            generation=generation,
        )
        self._echo(f"Best in final generation: {final_best}")
        if self.best_in_run is None:
            self._echo("Best in overall run: none")
        else:
            self._echo(f"Best in overall run: {self.best_in_run}")
        return final_best

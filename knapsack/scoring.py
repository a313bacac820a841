"""Cliff scoring for knapsack choice vectors.

A choice whose total weight exceeds the capacity scores ``Overloaded``; any
other choice scores ``Value(n)`` with ``n`` its total value. ``Overloaded``
is worse than every ``Value``, including ``Value(0)``, so there is a sharp
cliff at the capacity boundary instead of a graded penalty.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import total_ordering
from typing import Literal

from .instance import Knapsack

ScoreKind = Literal["overloaded", "value"]

# Rank of each variant in the order; higher is better.
_KIND_RANK: dict[str, int] = {"overloaded": 0, "value": 1}


@total_ordering
@dataclass(frozen=True)
class CliffScore:
    """Ordered result of scoring a choice vector.

    Build instances with ``CliffScore.overloaded()`` or ``CliffScore.of(n)``.
    ``total`` is only meaningful for the ``value`` variant and is always 0
    for ``overloaded``.
    """

    kind: ScoreKind
    total: int = 0

    def __post_init__(self) -> None:
        if self.kind not in _KIND_RANK:
            raise ValueError(f"Unknown score kind: {self.kind!r}")
        if isinstance(self.total, bool) or not isinstance(self.total, int):
            raise ValueError("total must be an integer")
        if self.total < 0:
            raise ValueError("total must be non-negative")
        if self.kind == "overloaded" and self.total != 0:
            raise ValueError("an overloaded score carries no total")

    @classmethod
    def overloaded(cls) -> "CliffScore":
        return cls("overloaded")

    @classmethod
    def of(cls, total: int) -> "CliffScore":
        return cls("value", total)

    @property
    def is_overloaded(self) -> bool:
        return self.kind == "overloaded"

    @property
    def value(self) -> int | None:
        """The total value, or None for an overloaded score."""
        return None if self.is_overloaded else self.total

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CliffScore):
            return NotImplemented
        if self.kind != other.kind:
            return _KIND_RANK[self.kind] < _KIND_RANK[other.kind]
        return self.total < other.total

    def __str__(self) -> str:
        return "Overloaded" if self.is_overloaded else f"Value({self.total})"

    def __repr__(self) -> str:
        return f"CliffScore.{'overloaded()' if self.is_overloaded else f'of({self.total})'}"


OVERLOADED = CliffScore.overloaded()


def score(knapsack: Knapsack, choices: Sequence[bool]) -> CliffScore:
    """Score ``choices`` against ``knapsack`` with the cliff policy."""
    if knapsack.weight(choices) > knapsack.capacity:
        return OVERLOADED
    return CliffScore.of(knapsack.value(choices))


class CliffScorer:
    """Callable scorer bound to a single knapsack instance.

    Holds no mutable state, so one scorer may be shared by every worker
    evaluating a population.
    """

    def __init__(self, knapsack: Knapsack) -> None:
        self.knapsack: Knapsack = knapsack

    def __call__(self, choices: Sequence[bool]) -> CliffScore:
        return score(self.knapsack, choices)

    def __repr__(self) -> str:
        return f"CliffScorer({self.knapsack!r})"

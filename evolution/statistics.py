from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence


def population_entropy(population: Sequence[Iterable[bool]]) -> float:
    """Shannon entropy, in bits, of the distinct genomes in a population.

    0.0 means every member has the same genome; ``log2(len(population))``
    means every genome is unique.
    """
    if not population:
        return 0.0
    counts = Counter(tuple(bool(bit) for bit in genome) for genome in population)
    total = len(population)
    entropy = 0.0
    for count in counts.values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy

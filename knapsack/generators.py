"""Deterministic random knapsack instances."""

from __future__ import annotations

import random

from .instance import Knapsack
from .items import Item


def generate_random_knapsack(
    num_items: int,
    max_value: int = 100,
    max_weight: int = 100,
    capacity_ratio: float = 0.5,
    seed: int = 42,
) -> Knapsack:
    """Generate an instance with uniformly distributed values and weights.

    Args:
        num_items: Number of items to generate.
        max_value: Upper bound (inclusive) for item values; values start at 1.
        max_weight: Upper bound (inclusive) for item weights; weights start at 1.
        capacity_ratio: Capacity as a fraction of the total item weight.
        seed: Random seed for reproducibility.

    Returns:
        A Knapsack whose items are numbered 1..num_items.
    """
    if num_items < 0:
        raise ValueError("num_items must be non-negative")
    if max_value < 1 or max_weight < 1:
        raise ValueError("max_value and max_weight must be at least 1")
    if not 0.0 <= capacity_ratio <= 1.0:
        raise ValueError("capacity_ratio must be between 0 and 1")

    rng = random.Random(seed)
    items = [
        Item(i + 1, rng.randint(1, max_value), rng.randint(1, max_weight))
        for i in range(num_items)
    ]
    total_weight = sum(item.weight for item in items)
    capacity = int(total_weight * capacity_ratio)
    return Knapsack(items, capacity)

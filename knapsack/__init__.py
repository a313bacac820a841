"""
Knapsack Module

Problem definition and fitness evaluation for 0/1 knapsack instances.

This module provides:
- Immutable item records
- The knapsack instance with value/weight aggregation over choice vectors
- The plain-text instance file format (loading and writing)
- Cliff scoring: a total order that ranks every overloaded choice below
  every feasible one
- Seeded random instance generation
"""

__version__ = "0.1.0"

from .generators import generate_random_knapsack
from .instance import Knapsack
from .items import Item
from .loader import (
    KnapsackFormatError,
    KnapsackIOError,
    KnapsackLoadError,
    format_knapsack,
    knapsack_summary,
    load_knapsack,
    parse_knapsack,
    parse_knapsack_text,
    save_knapsack,
)
from .scoring import OVERLOADED, CliffScore, CliffScorer, score

__all__ = [
    "Item",
    "Knapsack",
    "KnapsackLoadError",
    "KnapsackIOError",
    "KnapsackFormatError",
    "load_knapsack",
    "parse_knapsack",
    "parse_knapsack_text",
    "format_knapsack",
    "save_knapsack",
    "knapsack_summary",
    "generate_random_knapsack",
    "CliffScore",
    "CliffScorer",
    "OVERLOADED",
    "score",
]

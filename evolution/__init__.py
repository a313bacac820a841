"""
Evolution Module

Generation bookkeeping around an external evolutionary optimizer.

This module provides:
- Per-generation reporting and best-ever tracking
- Population diversity (genome entropy)
- A DEAP-backed generational optimizer for boolean genomes
"""

__version__ = "0.1.0"

from .optimizer import GenerationalOptimizer, Individual
from .statistics import population_entropy
from .tracker import BestRecord, GenerationReport, GenerationTracker, select_best

__all__ = [
    "BestRecord",
    "GenerationReport",
    "GenerationTracker",
    "GenerationalOptimizer",
    "Individual",
    "population_entropy",
    "select_best",
]

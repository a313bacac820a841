"""
Experiments Module

Experiment configuration and CLI.

This module provides:
- YAML-based configuration loading
- CLI for running experiments and inspecting instances
- Seed management for reproducible repeats
- One-click experiment execution
"""

__version__ = "0.1.0"

"""Experiment configuration with YAML support."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import Field

from evolution.schemas import RunConfig


class ExperimentConfig(RunConfig):
    """Run configuration plus the instance to solve and output options."""

    # Instance file in the plain-text knapsack format
    knapsack_path: str

    # Independent repeats; repeat i runs with seed + i
    runs: int = Field(default=1, gt=0)

    show_progress: bool = True


def load_config(yaml_path: str | Path) -> ExperimentConfig:
    """Load experiment configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        ExperimentConfig instance

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is invalid or missing required fields
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

    if not data:
        raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

    try:
        return ExperimentConfig.from_dict(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {yaml_path}: {e}") from e


def save_config(config: ExperimentConfig, yaml_path: str | Path) -> Path:
    """Write a config as YAML that ``load_config`` reads back unchanged.

    Unset optional fields are left out so the file only lists what the
    run actually depends on.
    """
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(exclude_none=True), f, sort_keys=False)
    return yaml_path

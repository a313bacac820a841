from pathlib import Path
from unittest.mock import patch

import yaml
from typer.testing import CliRunner

from experiments.cli import app
from experiments.config import load_config
from knapsack.loader import load_knapsack

runner = CliRunner()

TINY = "3\n1 3 8\n2 2 8\n3 9 1\n10\n"


def _tiny(tmp_path: Path) -> Path:
    path = tmp_path / "tiny.txt"
    path.write_text(TINY)
    return path


def _config_file(tmp_path: Path, knapsack_path: Path) -> Path:
    config_data = {
        "run_id": "test_run",
        "seed": 42,
        "knapsack_path": str(knapsack_path),
        "max_generations": 2,
        "population_size": 6,
    }
    config_file = tmp_path / "config.yaml"
    with open(config_file, "w") as f:
        yaml.dump(config_data, f)
    return config_file


def test_cli_run_passes_overrides_to_runner(tmp_path: Path) -> None:
    config_file = _config_file(tmp_path, _tiny(tmp_path))

    with patch("experiments.cli.ExperimentRunner") as mock_runner:
        mock_runner.return_value.run.return_value = {"status": "completed", "runs": []}
        result = runner.invoke(app, ["run", str(config_file), "--runs", "30", "--quiet"])

    assert result.exit_code == 0
    args, _kwargs = mock_runner.call_args
    config = args[0]
    assert config.runs == 30
    assert config.show_progress is False
    assert "Experiment completed successfully" in result.output


def test_cli_run_end_to_end(tmp_path: Path) -> None:
    config_file = _config_file(tmp_path, _tiny(tmp_path))

    result = runner.invoke(app, ["run", str(config_file), "--quiet"])

    assert result.exit_code == 0
    assert "Best score in generation 0 was" in result.output
    assert "Best in overall run:" in result.output
    assert "Run 1 (seed 42):" in result.output


def test_cli_run_missing_config(tmp_path: Path) -> None:
    result = runner.invoke(app, ["run", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1


def test_cli_run_malformed_knapsack(tmp_path: Path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("2\n1 2 3\n")
    config_file = _config_file(tmp_path, bad)

    result = runner.invoke(app, ["run", str(config_file)])

    assert result.exit_code == 1
    assert "Best score in generation" not in result.output


def test_cli_describe(tmp_path: Path) -> None:
    result = runner.invoke(app, ["describe", str(_tiny(tmp_path))])
    assert result.exit_code == 0
    assert "Items: 3" in result.output
    assert "Capacity: 10" in result.output


def test_cli_describe_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["describe", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1


def test_cli_generate(tmp_path: Path) -> None:
    output = tmp_path / "generated" / "random.txt"
    result = runner.invoke(app, ["generate", str(output), "--items", "12", "--seed", "5"])

    assert result.exit_code == 0
    knapsack = load_knapsack(output)
    assert knapsack.num_items == 12


def test_cli_score_feasible(tmp_path: Path) -> None:
    result = runner.invoke(app, ["score", str(_tiny(tmp_path)), "101"])
    assert result.exit_code == 0
    assert "Weight: 9 / 10" in result.output
    assert "Score:  Value(12)" in result.output


def test_cli_score_overloaded(tmp_path: Path) -> None:
    result = runner.invoke(app, ["score", str(_tiny(tmp_path)), "111"])
    assert result.exit_code == 0
    assert "Score:  Overloaded" in result.output


def test_cli_score_rejects_bad_bits(tmp_path: Path) -> None:
    result = runner.invoke(app, ["score", str(_tiny(tmp_path)), "10x"])
    assert result.exit_code == 1


def test_cli_run_empty_knapsack(tmp_path: Path) -> None:
    empty = tmp_path / "empty.txt"
    empty.write_text("0\n5\n")
    config_file = _config_file(tmp_path, empty)

    result = runner.invoke(app, ["run", str(config_file), "--quiet"])

    assert result.exit_code == 0
    assert "Best score in generation 1 was Value(0)" in result.output
    assert "Run 1 (seed 42): Value(0)" in result.output


def test_cli_run_reports_runner_failure_separately(tmp_path: Path) -> None:
    config_file = _config_file(tmp_path, _tiny(tmp_path))

    with patch("experiments.cli.ExperimentRunner") as mock_runner:
        mock_runner.return_value.run.side_effect = ValueError("population collapsed")
        result = runner.invoke(app, ["run", str(config_file)])

    assert result.exit_code == 1
    assert "Experiment failed: population collapsed" in result.output
    assert "Invalid config" not in result.output


def test_cli_run_invalid_config(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.dump({"run_id": "r", "seed": 1}))

    with patch("experiments.cli.ExperimentRunner") as mock_runner:
        result = runner.invoke(app, ["run", str(config_file)])

    assert result.exit_code == 1
    assert "Invalid config" in result.output
    mock_runner.assert_not_called()


def test_cli_generate_writes_runnable_config(tmp_path: Path) -> None:
    output = tmp_path / "random.txt"
    config_path = tmp_path / "configs" / "random.yaml"

    result = runner.invoke(
        app, ["generate", str(output), "--items", "6", "--seed", "11", "--config", str(config_path)]
    )

    assert result.exit_code == 0
    config = load_config(config_path)
    assert config.knapsack_path == str(output)
    assert config.seed == 11
    assert config.run_id == "knapsack_random"

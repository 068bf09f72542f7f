"""Tests for the command-line interface."""

import pandas as pd
import yaml
from click.testing import CliRunner

from percolation_stats import __version__
from percolation_stats.cli.main import cli


class TestRunCommand:
    """Tests for `percolation-stats run`."""

    def test_prints_statistics(self):
        """Mean, stddev and the confidence interval are printed."""
        runner = CliRunner()
        result = runner.invoke(cli, ['run', '10', '5', '--seed', '1'])

        assert result.exit_code == 0
        assert "mean                    = " in result.output
        assert "stddev                  = " in result.output
        assert "95% confidence interval = " in result.output

    def test_single_trial_reports_nan(self):
        """One trial gives NaN for stddev."""
        runner = CliRunner()
        result = runner.invoke(cli, ['run', '5', '1', '--seed', '1'])

        assert result.exit_code == 0
        assert "stddev                  = nan" in result.output

    def test_writes_samples_csv(self, tmp_path):
        """--samples-csv writes one row per trial."""
        output_file = tmp_path / "samples.csv"
        runner = CliRunner()
        result = runner.invoke(cli, ['run', '5', '3', '--seed', '2',
                                     '--samples-csv', str(output_file)])

        assert result.exit_code == 0
        assert len(pd.read_csv(output_file)) == 3

    def test_rejects_non_positive_arguments(self):
        """N and T must be positive integers."""
        runner = CliRunner()

        assert runner.invoke(cli, ['run', '0', '5']).exit_code != 0
        assert runner.invoke(cli, ['run', '5', '-1']).exit_code != 0
        assert runner.invoke(cli, ['run', 'ten', '5']).exit_code != 0

    def test_version(self):
        """--version prints the package version."""
        runner = CliRunner()
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestRunConfigCommand:
    """Tests for `percolation-stats run-config`."""

    def test_runs_from_yaml(self, tmp_path):
        """The experiment and output path come from the config file."""
        config_file = tmp_path / "run.yaml"
        config_file.write_text(yaml.safe_dump({
            "run_name": "cli_run",
            "experiment": {"grid_size": 6, "trials": 4, "seed": 11},
            "output": {"samples_csv": "samples.csv"},
        }))

        runner = CliRunner()
        result = runner.invoke(cli, ['run-config', '--config', str(config_file)])

        assert result.exit_code == 0
        assert "mean                    = " in result.output
        assert (tmp_path / "samples.csv").exists()

    def test_invalid_config(self, tmp_path):
        """A config missing required keys exits with an error."""
        config_file = tmp_path / "run.yaml"
        config_file.write_text(yaml.safe_dump({"run_name": "broken"}))

        runner = CliRunner()
        result = runner.invoke(cli, ['run-config', '--config', str(config_file)])

        assert result.exit_code == 1
        assert "experiment" in result.output

    def test_non_positive_config_values(self, tmp_path):
        """Non-positive grid sizes from a config exit with an error."""
        config_file = tmp_path / "run.yaml"
        config_file.write_text(yaml.safe_dump({
            "run_name": "bad",
            "experiment": {"grid_size": 0, "trials": 4},
        }))

        runner = CliRunner()
        result = runner.invoke(cli, ['run-config', '--config', str(config_file)])

        assert result.exit_code == 1
        assert "Grid size" in result.output

    def test_malformed_config_values(self, tmp_path):
        """Malformed config values exit cleanly with the key named."""
        cases = [
            ("experiment: 5\n", "experiment"),
            ("experiment:\n  grid_size: abc\n  trials: 2\n", "grid_size"),
            ("experiment:\n  grid_size: 3\n  trials: 2\n  seed: -1\n", "seed"),
        ]
        runner = CliRunner()
        for body, key in cases:
            config_file = tmp_path / "run.yaml"
            config_file.write_text("run_name: bad\n" + body)

            result = runner.invoke(cli, ['run-config', '--config', str(config_file)])

            assert result.exit_code == 1
            assert isinstance(result.exception, SystemExit)
            assert key in result.output

    def test_empty_output_section(self, tmp_path):
        """An empty output section runs without writing samples."""
        config_file = tmp_path / "run.yaml"
        config_file.write_text(
            "run_name: no_output\n"
            "experiment:\n"
            "  grid_size: 3\n"
            "  trials: 2\n"
            "  seed: 0\n"
            "output:\n"
        )

        runner = CliRunner()
        result = runner.invoke(cli, ['run-config', '--config', str(config_file)])

        assert result.exit_code == 0
        assert "mean                    = " in result.output


class TestSeedOption:
    """Tests for --seed validation."""

    def test_negative_seed_rejected(self):
        """A negative seed is a usage error, not a crash."""
        runner = CliRunner()
        result = runner.invoke(cli, ['run', '3', '2', '--seed', '-1'])

        assert result.exit_code == 2
        assert isinstance(result.exception, SystemExit)
        assert "--seed" in result.output

    def test_same_seed_same_output(self):
        """The printed statistics depend only on the seed, not the worker count."""
        runner = CliRunner()
        serial = runner.invoke(cli, ['run', '5', '3', '--seed', '9'])
        parallel = runner.invoke(cli, ['run', '5', '3', '--seed', '9', '--workers', '2'])

        assert serial.exit_code == 0
        assert parallel.exit_code == 0
        mean_line = [line for line in serial.output.splitlines() if line.startswith("mean")]
        assert mean_line[0] in parallel.output

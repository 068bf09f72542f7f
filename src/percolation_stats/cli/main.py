"""
Command-line interface for percolation_stats.

Commands:
    percolation-stats run N T [--seed S] [--workers W] [--samples-csv PATH]
    percolation-stats run-config --config config/example_run.yaml
"""

import sys
import time

import click
import yaml

from .. import __version__
from ..exceptions import InvalidArgumentError
from ..percolation.stats import PercolationStats
from ..utils.timing import format_duration


@click.group()
@click.version_option(version=__version__)
def cli():
    """Percolation Stats - Monte Carlo estimation of the percolation threshold."""
    pass


def _run_and_report(n, trials, seed, workers, samples_csv):
    """Run the experiment and print the threshold statistics."""
    try:
        stats = PercolationStats(n, trials, seed=seed, workers=workers)
    except InvalidArgumentError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    start = time.time()
    stats.run()
    elapsed = time.time() - start

    click.echo(f"mean                    = {stats.mean()}")
    click.echo(f"stddev                  = {stats.stddev()}")
    click.echo(f"95% confidence interval = {stats.confidence_lo()}, {stats.confidence_hi()}")
    click.echo(f"Completed {trials} trials on a {n}x{n} grid in {format_duration(elapsed)}", err=True)

    if samples_csv is not None:
        output_file = stats.save_samples(samples_csv)
        click.echo(f"✓ Saved samples to {output_file}", err=True)

    return stats


@cli.command('run')
@click.argument('n', type=click.IntRange(min=1))
@click.argument('trials', type=click.IntRange(min=1))
@click.option('--seed', '-s', type=click.IntRange(min=0), default=None,
              help='Random seed (non-negative)')
@click.option('--workers', '-w', type=click.IntRange(min=1), default=1,
              help='Number of worker processes')
@click.option('--samples-csv', type=click.Path(), default=None,
              help='Write per-trial open fractions to this CSV file')
def run(n, trials, seed, workers, samples_csv):
    """Estimate the percolation threshold of an N-by-N grid over TRIALS trials."""
    _run_and_report(n, trials, seed, workers, samples_csv)


@cli.command('run-config')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run config YAML file')
def run_config(config_path):
    """Run an experiment described by a YAML config."""
    from ..run.config import RunConfig

    try:
        config = RunConfig.from_yaml(config_path)
    except (ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Run: {config.run_name}", err=True)
    _run_and_report(config.grid_size, config.trials, config.seed,
                    config.workers, config.samples_csv)


if __name__ == '__main__':
    cli()

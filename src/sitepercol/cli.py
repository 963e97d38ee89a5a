"""
Command-line interface for sitepercol.

    sitepercol stats 200 100 --seed 1
    sitepercol grid moves.txt
    echo "3 open 1 1 isFull 1 1" | sitepercol grid
"""

from __future__ import annotations

import click

from .grid import Percolation
from .stats import PercolationStats


def _flag(value: bool) -> str:
    return "true" if value else "false"


@click.group()
@click.version_option(package_name="sitepercol")
def cli():
    """Site percolation on an n-by-n grid."""
    pass


@cli.command('stats')
@click.argument('n', type=click.IntRange(min=1))
@click.argument('trials', type=click.IntRange(min=1))
@click.option('--seed', type=int, default=None, help='Seed for the random draws')
@click.option('--jobs', '-j', 'n_jobs', type=int, default=None,
              help='Parallel workers (joblib convention, -1 for all CPUs)')
@click.option('--verbose', '-v', is_flag=True, help='Report progress')
def stats_command(n, trials, seed, n_jobs, verbose):
    """Estimate the percolation threshold of an N-by-N grid over TRIALS runs."""
    if n_jobs == 0:
        raise click.BadParameter("must not be 0", param_hint="--jobs")
    stats = PercolationStats(n, trials, seed=seed, n_jobs=n_jobs, verbose=verbose)
    lo, hi = stats.confidence_interval()
    click.echo(f"mean                    = {stats.mean()}")
    click.echo(f"stddev                  = {stats.stddev()}")
    click.echo(f"95% confidence interval = [{lo}, {hi}]")


@cli.command('grid')
@click.argument('commands', type=click.File('r'), default='-')
def grid_command(commands):
    """Replay open/isOpen/isFull commands against a grid.

    The input starts with the grid size followed by ``command row col``
    triples, whitespace separated.
    """
    tokens = commands.read().split()
    if not tokens:
        raise click.UsageError("expected the grid size as the first token")
    try:
        perc = Percolation(int(tokens[0]))
    except ValueError as exc:
        raise click.UsageError(f"invalid grid size {tokens[0]!r}: {exc}") from exc

    body = tokens[1:]
    if len(body) % 3:
        raise click.UsageError("commands must come as 'command row col' triples")

    for i in range(0, len(body), 3):
        name = body[i]
        try:
            row, col = int(body[i + 1]), int(body[i + 2])
        except ValueError as exc:
            raise click.UsageError(f"invalid coordinates in {' '.join(body[i:i + 3])!r}") from exc
        prefix = f"{name}({row}, {col}): "
        try:
            if name == "open":
                perc.open(row, col)
                result = "void"
            elif name == "isOpen":
                result = _flag(perc.is_open(row, col))
            elif name == "isFull":
                result = _flag(perc.is_full(row, col))
            else:
                result = "unknown"
        except ValueError as exc:
            raise click.UsageError(f"{prefix}{exc}") from exc
        click.echo(prefix + result)

    click.echo(f"numberOfOpenSites(): {perc.number_of_open_sites()}")
    click.echo(f"percolates(): {_flag(perc.percolates())}")


if __name__ == "__main__":
    cli()

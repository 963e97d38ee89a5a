"""Small demonstration of the percolation threshold estimate."""

from __future__ import annotations

from sitepercol import Percolation, PercolationStats


def show_grid(perc: Percolation) -> None:
    for row in range(1, perc.n + 1):
        line = []
        for col in range(1, perc.n + 1):
            if perc.is_full(row, col):
                line.append("~")
            elif perc.is_open(row, col):
                line.append(".")
            else:
                line.append("#")
        print("".join(line))


def main() -> None:
    perc = Percolation(5)
    for row in range(1, 6):
        perc.open(row, 3)
    perc.open(2, 2)
    perc.open(4, 5)
    show_grid(perc)
    print(f"open sites: {perc.number_of_open_sites()}, percolates: {perc.percolates()}")

    # Prefer all cores for the larger run; results only depend on the seed.
    stats = PercolationStats(50, 200, seed=2024, n_jobs=-1, verbose=True)
    lo, hi = stats.confidence_interval()
    print(f"threshold ~ {stats.mean():.4f} (stddev {stats.stddev():.4f}), 95% CI [{lo:.4f}, {hi:.4f}]")


if __name__ == "__main__":
    main()

"""Tests for the command-line interface."""

import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from click.testing import CliRunner

from sitepercol.cli import cli


def test_stats_prints_summary():
    result = CliRunner().invoke(cli, ["stats", "10", "20", "--seed", "4"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith("mean                    = ")
    assert lines[1].startswith("stddev                  = ")
    assert lines[2].startswith("95% confidence interval = [")
    mean = float(lines[0].split("=")[1])
    assert 0.0 < mean < 1.0


def test_stats_rejects_zero_trials():
    result = CliRunner().invoke(cli, ["stats", "10", "0"])
    assert result.exit_code == 2


def test_stats_rejects_zero_jobs():
    result = CliRunner().invoke(cli, ["stats", "10", "3", "--jobs", "0"])
    assert result.exit_code == 2


def test_grid_replays_commands():
    commands = "2\nopen 1 1\nisFull 1 1\nopen 2 1\nisFull 2 2\nisOpen 2 1\nflood 1 1\n"
    result = CliRunner().invoke(cli, ["grid"], input=commands)
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "open(1, 1): void",
        "isFull(1, 1): true",
        "open(2, 1): void",
        "isFull(2, 2): false",
        "isOpen(2, 1): true",
        "flood(1, 1): unknown",
        "numberOfOpenSites(): 2",
        "percolates(): true",
    ]


def test_grid_reads_file(tmp_path):
    path = tmp_path / "moves.txt"
    path.write_text("3 open 2 2\n")
    result = CliRunner().invoke(cli, ["grid", str(path)])
    assert result.exit_code == 0, result.output
    assert "numberOfOpenSites(): 1" in result.output
    assert "percolates(): false" in result.output


def test_grid_out_of_range_is_usage_error():
    result = CliRunner().invoke(cli, ["grid"], input="2 open 3 1")
    assert result.exit_code == 2
    assert "row 3 is not between 1 and 2" in result.output


def test_grid_bad_size_is_usage_error():
    result = CliRunner().invoke(cli, ["grid"], input="0")
    assert result.exit_code == 2


def test_stats_verbose_reports_start_once():
    result = CliRunner().invoke(cli, ["stats", "4", "3", "--seed", "1", "--verbose"])
    assert result.exit_code == 0, result.output
    starts = [line for line in result.output.splitlines() if line.startswith("Starting")]
    assert starts == ["Starting 3 trials on a 4x4 grid (1 worker(s))"]

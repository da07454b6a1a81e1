"""Mini README: Tests for the Typer command-line entry point.

Runs the commands in-process with Typer's ``CliRunner`` against snapshot
files in ``tmp_path``.
"""

from __future__ import annotations

from typer.testing import CliRunner

from flight_network_cli import cli

runner = CliRunner()


def test_seed_then_search(tmp_path) -> None:
    snapshot = tmp_path / "demo.json"
    seeded = runner.invoke(cli, ["seed-demo", "--snapshot", str(snapshot)])
    assert seeded.exit_code == 0
    assert snapshot.exists()

    result = runner.invoke(cli, ["search", "JFK", "LHR", "--snapshot", str(snapshot)])
    assert result.exit_code == 0
    assert "JFK -> LHR" in result.output
    assert "Total: $500.00" in result.output


def test_search_reports_missing_route(tmp_path) -> None:
    snapshot = tmp_path / "demo.json"
    runner.invoke(cli, ["seed-demo", "--snapshot", str(snapshot)])

    result = runner.invoke(
        cli, ["search", "JFK", "NRT", "--direct-only", "--snapshot", str(snapshot)]
    )
    assert result.exit_code == 1
    assert "No route found" in result.output


def test_airports_lists_codes(tmp_path) -> None:
    snapshot = tmp_path / "demo.json"
    runner.invoke(cli, ["seed-demo", "--snapshot", str(snapshot)])

    result = runner.invoke(cli, ["airports", "--snapshot", str(snapshot)])
    assert result.exit_code == 0
    assert "LAX (Los Angeles International, United States)" in result.output


def test_missing_snapshot_exits_with_error(tmp_path) -> None:
    result = runner.invoke(cli, ["airports", "--snapshot", str(tmp_path / "absent.json")])
    assert result.exit_code == 2

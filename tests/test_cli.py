"""Mini README: Tests for the Typer launcher's summary command."""

from typer.testing import CliRunner

from main_food_corner import cli


def test_summary_command_prints_ledger():
    result = CliRunner().invoke(cli, ["summary"])

    assert result.exit_code == 0
    assert "Food Sales: $1000.00" in result.stdout
    assert "Total Expense: $2700.00" in result.stdout
    assert "Profit: 1.82%" in result.stdout

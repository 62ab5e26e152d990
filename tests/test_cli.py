from __future__ import annotations

from typer.testing import CliRunner

from squaremat import cli


def _invoke(*args: str):
    runner = CliRunner()
    return runner.invoke(cli.app, list(args))


def test_show_sequence() -> None:
    result = _invoke("--order", "2", "show", "sequence", "--start", "1", "--step", "1")
    if result.exception:
        raise result.exception
    assert result.exit_code == 0
    assert result.output == "1 2\n3 4\n"


def test_show_random_is_reproducible() -> None:
    first = _invoke("--order", "3", "show", "random", "--seed", "42")
    second = _invoke("--order", "3", "show", "random", "--seed", "42")
    assert first.exit_code == 0
    assert first.output == second.output == "175 400 17869\n30056 16083 12879\n8016 7644 15809\n"


def test_power_command() -> None:
    result = _invoke(
        "--order", "2", "power", "sequence", "--start", "1", "--step", "1", "--exponent", "4"
    )
    assert result.exit_code == 0
    assert result.output == "199 290\n435 634\n"


def test_power_zero_prints_identity() -> None:
    result = _invoke("--order", "3", "--nthreads", "2", "power", "uniform", "--value", "5", "-e", "0")
    assert result.exit_code == 0
    assert result.output == "1 0 0\n0 1 0\n0 0 1\n"


def test_stats_table() -> None:
    result = _invoke("--order", "2", "stats", "uniform", "--value", "7", "--frequency-of", "7")
    assert result.exit_code == 0
    assert "trace" in result.output
    assert "28" in result.output
    assert "14" in result.output
    assert "frequency(7)" in result.output


def test_invalid_order_is_rejected() -> None:
    result = _invoke("--order", "0", "show", "zero")
    assert result.exit_code != 0


def test_negative_exponent_is_rejected() -> None:
    result = _invoke("--order", "2", "power", "identity", "--exponent", "-1")
    assert result.exit_code != 0


def test_out_of_range_value_is_rejected() -> None:
    result = _invoke("--order", "2", "show", "uniform", "--value", str(2**32))
    assert result.exit_code != 0


def test_power_linear_method() -> None:
    result = _invoke(
        "--order", "2", "power", "sequence", "--start", "1", "--step", "1", "-e", "4", "--method", "linear"
    )
    assert result.exit_code == 0
    assert result.output == "199 290\n435 634\n"


def test_unknown_power_method_is_rejected_by_parser() -> None:
    result = _invoke("--order", "2", "power", "identity", "-e", "2", "--method", "strassen")
    assert result.exit_code == 2

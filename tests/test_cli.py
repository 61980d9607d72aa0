# cli wiring through typer's runner, no subprocesses

from pathlib import Path
import pytest
from typer.testing import CliRunner
from codekata.cli import app

DATA = Path(__file__).parent / "data" / "weather.dat"
runner = CliRunner()


@pytest.fixture(autouse=True)
def _plain_env(monkeypatch):
    for name in ("CODEKATA_LOG_FORMAT", "CODEKATA_LOG_LEVEL", "CODEKATA_INTEGRAL_TEMPERATURES"):
        monkeypatch.delenv(name, raising=False)


def test_munge_prints_one_line():
    result = runner.invoke(app, ["munge", "--file", str(DATA)])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip().splitlines() == ["Day 14 has the smallest temperature spread of 2."]


def test_munge_short_option_and_integral(tmp_path):
    path = tmp_path / "w.dat"
    path.write_text("1 10.5 10\n2 30 20\n", encoding="utf-8")

    result = runner.invoke(app, ["munge", "-f", str(path)])
    assert result.exit_code == 0, result.output
    assert "Day 1 has the smallest temperature spread of 0.5." in result.stdout

    # the fractional line no longer counts
    result = runner.invoke(app, ["munge", "-f", str(path), "--integral"])
    assert result.exit_code == 0, result.output
    assert "Day 2 has the smallest temperature spread of 10." in result.stdout


def test_munge_requires_file_option():
    result = runner.invoke(app, ["munge"])
    assert result.exit_code == 2


def test_munge_rejects_blank_path():
    result = runner.invoke(app, ["munge", "--file", " "])
    assert result.exit_code == 2


def test_munge_missing_file_fails(tmp_path):
    result = runner.invoke(app, ["munge", "--file", str(tmp_path / "missing.dat")])
    assert result.exit_code == 1


def test_munge_without_valid_lines_fails(tmp_path):
    path = tmp_path / "empty.dat"
    path.write_text("  Dy MxT MnT\n\n", encoding="utf-8")
    result = runner.invoke(app, ["munge", "--file", str(path), "--log-format", "json"])
    assert result.exit_code == 1
    assert "No valid lines" in result.output


def test_munge_rejects_unknown_log_format():
    result = runner.invoke(app, ["munge", "--file", str(DATA), "--log-format", "xml"])
    assert result.exit_code == 2


def test_chop_demo():
    result = runner.invoke(app, ["chop"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "chop(5, [1, 3, 5, 7]): 2"


@pytest.mark.parametrize(
    "args, expected",
    [
        (["8", "1", "3", "5", "7"], "chop(8, [1, 3, 5, 7]): 3"),
        (["2.5", "1", "2.5"], "chop(2.5, [1, 2.5]): 1"),
        (["4"], "chop(4, []): 0"),
    ],
)
def test_chop_with_arguments(args, expected):
    result = runner.invoke(app, ["chop", *args])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected

# connects command line input to the two katas and prints the result in the required format

from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import structlog
import typer

from .chop import chop
from .config import ConfigError, LogSettings, MungeConfig
from .logs import setup_logging
from .models import EmptyInputError, format_number
from .reader import DataFileError
from .service import format_result, munge_file

app = typer.Typer(add_completion=False, help="Code kata exercises: karate chop and data munging")
log = structlog.get_logger()

# classic kata example, printed when chop gets no arguments
DEMO_TARGET = 5
DEMO_VALUES = [1, 3, 5, 7]


def _configure_logging(log_format: Optional[str]) -> None:
    try:
        settings = LogSettings.from_env(log_format)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-format / CODEKATA_LOG_*") from exc
    setup_logging(settings)


@app.command()
def munge(
    file: Path = typer.Option(..., "--file", "-f", help="Weather data file, one day per line"),
    integral: bool = typer.Option(
        False,
        "--integral",
        envvar="CODEKATA_INTEGRAL_TEMPERATURES",
        help="Only accept whole-number temperatures, lines with decimals are skipped",
    ),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="auto, json or plain"),
) -> None:
    """Report the day with the smallest temperature spread."""
    _configure_logging(log_format)

    try:
        config = MungeConfig.from_options(file, integral=integral)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--file") from exc

    try:
        result = munge_file(config)
    except (DataFileError, EmptyInputError) as exc:
        log.error("munge.failed", path=str(config.file), error=str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(format_result(result))


@app.command("chop")
def chop_command(
    target: Optional[float] = typer.Argument(None, help="Value to look for"),
    values: Optional[List[float]] = typer.Argument(None, help="Ascending values to search"),
) -> None:
    """Binary chop TARGET in VALUES; without arguments runs chop(5, [1, 3, 5, 7])."""
    _configure_logging(None)

    if target is None:
        target, values = DEMO_TARGET, DEMO_VALUES
    values = list(values or [])

    if any(a > b for a, b in zip(values, values[1:])):
        # chop still answers, but the index means little for unsorted input
        log.warning("chop.unsorted", values=values)

    index = chop(target, values)
    shown = ", ".join(format_number(v) for v in values)
    typer.echo(f"chop({format_number(target)}, [{shown}]): {index}")


if __name__ == "__main__":
    app()

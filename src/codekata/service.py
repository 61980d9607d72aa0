# orchestration and business rules for the data munging kata
# pipeline: read text -> parse lines -> drop malformed -> minimum by (spread, line index) -> format

from __future__ import annotations
from typing import Iterable, Iterator, Optional, Tuple
import structlog

from .config import MungeConfig
from .models import (
    Day,
    EmptyInputError,
    SpreadResult,
    format_number,
    parse_day_number,
    parse_temperature,
)
from .reader import WeatherFile

log = structlog.get_logger()


# one line -> Day, or None when the line is not a day record (headers, summaries, blanks)
def parse_day(line: str, integral: bool = False) -> Optional[Day]:
    words = line.split()
    if len(words) < 3:
        return None

    day_number = parse_day_number(words[0])
    max_temperature = parse_temperature(words[1], integral=integral)
    min_temperature = parse_temperature(words[2], integral=integral)
    if day_number is None or max_temperature is None or min_temperature is None:
        return None

    return Day(
        day_number=day_number,
        max_temperature=max_temperature,
        min_temperature=min_temperature,
    )


# lazy: yields (original line index, day) and silently skips what does not parse
def parse_days(lines: Iterable[str], integral: bool = False) -> Iterator[Tuple[int, Day]]:
    for idx, line in enumerate(lines):
        day = parse_day(line, integral=integral)
        if day is None:
            log.debug("line.skipped", line_index=idx, line=line.strip()[:80])
            continue
        yield idx, day


def day_with_smallest_spread(lines: Iterable[str], integral: bool = False) -> SpreadResult:
    # the line index in the key makes the earliest line win a tie
    best = min(
        parse_days(lines, integral=integral),
        key=lambda item: (item[1].temperature_spread, item[0]),
        default=None,
    )
    if best is None:
        raise EmptyInputError("No valid lines")

    idx, day = best
    return SpreadResult(day_number=day.day_number, spread=day.temperature_spread, line_index=idx)


def munge_text(text: str, integral: bool = False) -> SpreadResult:
    return day_with_smallest_spread(text.splitlines(), integral=integral)


# single file path: read -> munge, errors from the reader propagate untouched
def munge_file(config: MungeConfig) -> SpreadResult:
    text = WeatherFile(config.file).read_text()
    result = munge_text(text, integral=config.integral)
    log.info(
        "munge.done",
        path=str(config.file),
        day=result.day_number,
        spread=result.spread,
        line_index=result.line_index,
    )
    return result


def format_result(result: SpreadResult) -> str:
    return f"Day {result.day_number} has the smallest temperature spread of {format_number(result.spread)}."

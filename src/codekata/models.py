# models and tiny numeric helpers to keep record shapes explicit and reusable across the app

from __future__ import annotations
import math
import re
from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]

# day numbers are plain unsigned decimals, "+3" or "1_0" do not count
_UNSIGNED_INT = re.compile(r"[0-9]+")
_SIGNED_INT = re.compile(r"[+-]?[0-9]+")


class EmptyInputError(ValueError):
    # raised when not a single line of the input parses into a day
    pass


@dataclass(frozen=True)
class Day:
    # immutable value object for one parsed line of the data file
    day_number: int
    max_temperature: Number
    min_temperature: Number

    @property
    def temperature_spread(self) -> Number:
        # not validated, min > max gives a negative spread
        return self.max_temperature - self.min_temperature


@dataclass(frozen=True)
class SpreadResult:
    # output value object used by consumers and cli
    day_number: int
    spread: Number
    line_index: int


def parse_day_number(token: str) -> Optional[int]:
    if not _UNSIGNED_INT.fullmatch(token):
        return None
    return int(token)


def parse_temperature(token: str, integral: bool = False) -> Optional[Number]:
    # integral mode only takes whole numbers, otherwise any finite decimal
    if integral:
        return int(token) if _SIGNED_INT.fullmatch(token) else None
    if _SIGNED_INT.fullmatch(token):
        return int(token)
    try:
        value = float(token)
    except ValueError:
        return None
    # "nan" and "inf" parse as floats but cannot take part in a minimum
    if not math.isfinite(value) or "_" in token:
        return None
    return value


def format_number(value: Number) -> str:
    # 2.0 prints as "2", 1.5 stays "1.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

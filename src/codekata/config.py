# configuration validated once at the boundary, the core only ever sees MungeConfig

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
from dotenv import load_dotenv

load_dotenv()  # a local .env is handy for log settings, real environment variables win

LOG_FORMATS = ("auto", "json", "plain")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    pass


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class LogSettings:
    format: str = "auto"
    level: str = "WARNING"

    @classmethod
    def from_env(cls, format_override: Optional[str] = None) -> "LogSettings":
        fmt = (format_override or os.getenv("CODEKATA_LOG_FORMAT") or "auto").strip().lower()
        level = (os.getenv("CODEKATA_LOG_LEVEL") or "WARNING").strip().upper()
        if fmt not in LOG_FORMATS:
            raise ConfigError(f"log format must be one of {', '.join(LOG_FORMATS)} (got {fmt!r})")
        if level not in LOG_LEVELS:
            raise ConfigError(f"log level must be one of {', '.join(LOG_LEVELS)} (got {level!r})")
        return cls(format=fmt, level=level)


@dataclass(frozen=True)
class MungeConfig:
    file: Path
    integral: bool = False

    @classmethod
    def from_options(cls, file: Union[str, Path, None], integral: Optional[bool] = None) -> "MungeConfig":
        # reject a blank path here instead of letting it surface as a confusing read error
        if file is None or not str(file).strip():
            raise ConfigError("--file expects a file path")

        if integral is None:
            integral = env_flag("CODEKATA_INTEGRAL_TEMPERATURES")

        # resolved without strict=True, a missing file is the reader's error to report
        path = Path(file).expanduser().resolve()
        return cls(file=path, integral=integral)

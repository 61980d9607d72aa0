# OOP boundary for file i/o
# all filesystem access lives here, so the parsing and reduction code stays pure and testable

from __future__ import annotations
from pathlib import Path
from typing import List, Union
import structlog

log = structlog.get_logger()


class DataFileError(RuntimeError):
    # single error type used to propagate clear messages from this layer
    pass


class WeatherFile:
    # encapsulates where the data lives and how it is decoded
    DEFAULT_ENCODING = "utf-8"

    def __init__(self, path: Union[str, Path], encoding: str = DEFAULT_ENCODING):
        self.path = Path(path)
        self.encoding = encoding

    def read_text(self) -> str:
        # one blocking read of the whole file, no partial results
        try:
            text = self.path.read_text(encoding=self.encoding)
        except OSError as exc:
            # missing file, permission denied, path is a directory ...
            raise DataFileError(f"Cannot read {str(self.path)!r}: {exc.strerror or exc}") from exc
        except UnicodeDecodeError as exc:
            raise DataFileError(f"{str(self.path)!r} is not valid {self.encoding} text: {exc}") from exc

        log.debug("file.read", path=str(self.path), chars=len(text))
        return text

    def lines(self) -> List[str]:
        return self.read_text().splitlines()

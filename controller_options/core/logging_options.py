"""
Logging options for the controller process.
"""

import json
import logging
import sys
from typing import Dict, Optional

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_FORMATS = ("text", "json")

MAX_VERBOSITY = 10


class JSONFormatter(logging.Formatter):
    """Render each log record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


class LoggingOptions:
    """Log format, verbosity and optional log file."""

    def __init__(
        self, format: str = "text", verbosity: int = 0, file: Optional[str] = None
    ):
        self.format = format
        self.verbosity = verbosity
        self.file = file

    @classmethod
    def from_dict(cls, config: Optional[Dict]) -> "LoggingOptions":
        """Build logging options from the ``logging`` section of a config."""
        config = config or {}
        return cls(
            format=config.get("format", "text"),
            verbosity=config.get("v", 0),
            file=config.get("file"),
        )

    def validate(self) -> None:
        """
        Check the logging options.

        Raises:
            ValueError: If the format is unknown or the verbosity is out of range
        """
        if self.format not in LOG_FORMATS:
            raise ValueError(
                f"unsupported log format {self.format!r}, "
                f"expected one of {sorted(LOG_FORMATS)}"
            )

        if (
            not isinstance(self.verbosity, int)
            or isinstance(self.verbosity, bool)
            or not 0 <= self.verbosity <= MAX_VERBOSITY
        ):
            raise ValueError(
                f"invalid log verbosity {self.verbosity!r}: "
                f"must be between 0 and {MAX_VERBOSITY}"
            )

    @property
    def level(self) -> int:
        return logging.DEBUG if self.verbosity > 0 else logging.INFO

    def formatter(self) -> logging.Formatter:
        if self.format == "json":
            return JSONFormatter()
        return logging.Formatter(TEXT_FORMAT)

    def apply(self) -> None:
        """Configure the root logger."""
        handlers = [logging.StreamHandler(sys.stdout)]
        if self.file:
            handlers.append(logging.FileHandler(self.file))

        for handler in handlers:
            handler.setFormatter(self.formatter())

        logging.basicConfig(level=self.level, handlers=handlers, force=True)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LoggingOptions):
            return NotImplemented
        return (self.format, self.verbosity, self.file) == (
            other.format,
            other.verbosity,
            other.file,
        )

    def __repr__(self) -> str:
        return (
            f"LoggingOptions(format={self.format!r}, "
            f"verbosity={self.verbosity!r}, file={self.file!r})"
        )

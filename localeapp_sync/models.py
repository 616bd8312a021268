"""
Data Models for Localeapp Sync

Typed records passed between the pipeline steps:

    TaskConfig   -> what to pull and where to publish it
    LocaleBatch  -> what ``localeapp pull`` produced
    Metadata     -> the ``_meta`` block injected into JSON/JS outputs
    OutputFormat -> which formatter variant runs

Example:
    batch = LocaleBatch(polled_at=1404208800, updated_at=1404205200,
                        files=["en-US.yml"], tool_version="localeapp version 0.8.0")
    Metadata.from_batch(batch).as_dict()
    # {"polledAt": "Tue Jul 01 2014 10:00:00 GMT+0000", ...}
"""

from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from localeapp_sync.errors import UnsupportedFormatError

DEFAULT_COMMAND = "localeapp"
DATE_DISPLAY_FORMAT = "%a %b %d %Y %H:%M:%S GMT%z"


class OutputFormat(Enum):
    """Output shapes supported by the formatter."""

    YML = "yml"
    YAML = "yaml"
    JSON = "json"
    JS = "js"

    @classmethod
    def supported(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: Optional[str]) -> "OutputFormat":
        """
        Convert a raw format name into an OutputFormat.

        Args:
            value: Format name from the task configuration (e.g. "json")

        Returns:
            The matching OutputFormat member

        Raises:
            UnsupportedFormatError: If value is not one of yml, yaml, json, js
        """
        for member in cls:
            if member.value == value:
                return member
        raise UnsupportedFormatError(
            f"There is no support for {value} yet. "
            f"Please use one of the following : {', '.join(cls.supported())}."
        )

    @property
    def is_structured(self) -> bool:
        """True for the variants that rewrite YAML into JSON."""
        return self in (OutputFormat.JSON, OutputFormat.JS)

    @property
    def extension(self) -> str:
        if self is OutputFormat.JSON:
            return "json"
        if self is OutputFormat.JS:
            return "js"
        return "yml"


@dataclass(frozen=True)
class CommandResult:
    """Captured result of one external tool invocation."""

    returncode: int
    stdout: str


@dataclass(frozen=True)
class LocaleBatch:
    """
    Result of a ``localeapp pull`` run.

    Attributes:
        polled_at: Unix epoch seconds of the poll, from log/localeapp.yml
        updated_at: Unix epoch seconds of the last remote update
        files: Pulled filenames in listing order, e.g. ["en-US.yml", "fr-FR.yml"]
        tool_version: Full ``localeapp -v`` output, e.g. "localeapp version 0.8.0"
    """

    polled_at: int
    updated_at: int
    files: List[str] = field(default_factory=list)
    tool_version: str = ""


@dataclass(frozen=True)
class Metadata:
    """Human readable ``_meta`` block attached to JSON and JS outputs."""

    polled_at: str
    updated_at: str
    gem: str

    @classmethod
    def from_batch(cls, batch: LocaleBatch, tz: Optional[tzinfo] = None) -> "Metadata":
        return cls(
            polled_at=format_timestamp(batch.polled_at, tz),
            updated_at=format_timestamp(batch.updated_at, tz),
            gem=batch.tool_version,
        )

    def as_dict(self) -> Dict[str, str]:
        return {
            "polledAt": self.polled_at,
            "updatedAt": self.updated_at,
            "gem": self.gem,
        }


@dataclass(frozen=True)
class TaskConfig:
    """
    One named sync target.

    Attributes:
        name: Target name, used in console output
        key: localeapp project API key
        output_format: Formatter variant to apply
        dest: Directory receiving the final locale files
        command: Executable name of the localeapp gem
        work_dir: Root under which the config/locales and log working
            directories are created and removed
    """

    name: str
    key: str
    output_format: OutputFormat
    dest: Path
    command: str = DEFAULT_COMMAND
    work_dir: Path = field(default_factory=Path.cwd)


def format_timestamp(epoch_seconds: int, tz: Optional[tzinfo] = None) -> str:
    """
    Render Unix epoch seconds as a display string.

    Uses the local timezone unless tz is given.

    Example:
        format_timestamp(0, timezone.utc)
        # "Thu Jan 01 1970 00:00:00 GMT+0000"
    """
    moment = datetime.fromtimestamp(epoch_seconds, tz)
    if tz is None:
        moment = moment.astimezone()
    return moment.strftime(DATE_DISPLAY_FORMAT)

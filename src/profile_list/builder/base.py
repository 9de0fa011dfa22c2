"""Base classes for the list builder.

BuildConfig declares where profiles are read from and where the list is
written. BuildResult describes a finished run.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


DEFAULT_INPUT_DIR = Path("public") / "assets" / "data"
DEFAULT_OUTPUT_PATH = Path("public") / "list.json"


class ProfileParseError(ValueError):
    """A profile file does not contain valid JSON."""

    def __init__(self, path: Path | str, reason: str, line: int | None = None, column: int | None = None):
        self.path = Path(path)
        self.reason = reason
        self.line = line
        self.column = column

        location = f"{self.path}"
        if line is not None:
            location += f":{line}:{column}"
        super().__init__(f"Invalid JSON in {location}: {reason}")


class BuildConfig(BaseModel):
    """Configuration for a list build."""

    input_dir: Path = Field(
        default=DEFAULT_INPUT_DIR,
        description="Directory holding one JSON profile per file"
    )
    output_path: Path = Field(
        default=DEFAULT_OUTPUT_PATH,
        description="File the aggregated list is written to"
    )
    sort: bool = Field(
        default=False,
        description="Order profiles by file name instead of directory listing order"
    )
    pretty_print: bool = Field(default=False, description="Indent the output JSON")
    encoding: str = Field(default="utf-8", description="Text encoding of input and output files")

    def resolve_paths(self, base_dir: Path | str) -> "BuildConfig":
        """Return a copy with relative paths anchored at base_dir."""
        base_dir = Path(base_dir)
        updates = {}
        if not self.input_dir.is_absolute():
            updates["input_dir"] = base_dir / self.input_dir
        if not self.output_path.is_absolute():
            updates["output_path"] = base_dir / self.output_path
        return self.model_copy(update=updates)


class BuildResult:
    """Result of a build run."""

    def __init__(
        self,
        config: BuildConfig,
        sources: list[Path],
        records: list[Any],
        start_time: datetime,
        end_time: datetime,
        output_path: Path | None = None,
    ):
        self.config = config
        self.sources = sources
        self.records = records
        self.start_time = start_time
        self.end_time = end_time
        self.output_path = output_path

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def duration_seconds(self) -> float:
        return (self.end_time - self.start_time).total_seconds()

    @property
    def written(self) -> bool:
        return self.output_path is not None

    def summary(self) -> dict[str, Any]:
        return {
            "input_dir": str(self.config.input_dir),
            "output_path": str(self.output_path) if self.output_path else None,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "duration_seconds": self.duration_seconds,
            "count": self.count,
            "sources": [source.name for source in self.sources],
        }

"""List Builder - aggregates profile files into one list file.

A build runs in four sequential steps:
- Enumerate the entries directly inside the input directory
- Load each entry as JSON
- Aggregate the parsed documents in enumeration order
- Persist the aggregate as a single JSON array

Every failure propagates. Loading finishes for all files before anything is
written, so a bad input never touches an existing output file.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any
import json
import os

from profile_list.builder.base import BuildConfig, BuildResult, ProfileParseError
from profile_list.builder.config import load_config


class ListBuilder:
    """Builds the profile list described by a BuildConfig."""

    def __init__(self, config: BuildConfig | None = None):
        self.config = config if config is not None else BuildConfig()

    def enumerate_files(self) -> list[Path]:
        """List every entry directly inside the input directory.

        Entries come back in directory listing order unless the config asks
        for them sorted by name. Nothing is filtered out.
        """
        directory = self.config.input_dir
        if not directory.exists():
            raise FileNotFoundError(f"Input directory not found: {directory}")
        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")

        names = os.listdir(directory)
        if self.config.sort:
            names.sort()

        return [directory / name for name in names]

    def load_file(self, path: Path | str) -> Any:
        """Read one profile file and parse it as JSON."""
        path = Path(path)

        with open(path, encoding=self.config.encoding) as f:
            content = f.read()

        def reject_constant(name: str) -> Any:
            raise ProfileParseError(path, f"{name} is not a valid JSON value")

        try:
            return json.loads(content, parse_constant=reject_constant)
        except json.JSONDecodeError as e:
            raise ProfileParseError(path, e.msg, line=e.lineno, column=e.colno) from e

    def load_all(self, paths: list[Path]) -> list[Any]:
        """Load every path, keeping the given order."""
        return [self.load_file(path) for path in paths]

    def collect(self) -> tuple[list[Path], list[Any]]:
        """Enumerate and load without writing anything.

        Returns:
            Tuple of (source files, parsed records), index-aligned
        """
        sources = self.enumerate_files()
        return sources, self.load_all(sources)

    def serialize(self, records: list[Any], ensure_ascii: bool = False) -> str:
        """Encode records as a single JSON array."""
        if self.config.pretty_print:
            return json.dumps(records, indent=2, ensure_ascii=ensure_ascii, allow_nan=False)
        return json.dumps(
            records,
            separators=(",", ":"),
            ensure_ascii=ensure_ascii,
            allow_nan=False,
        )

    def encode(self, records: list[Any]) -> bytes:
        """Serialize records to bytes in the configured encoding.

        Text the encoding cannot represent, such as lone surrogates, falls
        back to \\u escapes.
        """
        try:
            return self.serialize(records).encode(self.config.encoding)
        except UnicodeEncodeError:
            return self.serialize(records, ensure_ascii=True).encode(self.config.encoding)

    def write_list(self, records: list[Any]) -> Path:
        """Write records to the output path, replacing any previous content.

        The parent directory must already exist. The payload is fully encoded
        before the file is opened.
        """
        output_path = self.config.output_path
        payload = self.encode(records)

        with open(output_path, "wb") as f:
            f.write(payload)

        return output_path

    def build(self) -> BuildResult:
        """Run a full build: enumerate, load, aggregate and persist."""
        start_time = datetime.now(timezone.utc)

        sources, records = self.collect()
        output_path = self.write_list(records)

        return BuildResult(
            config=self.config,
            sources=sources,
            records=records,
            start_time=start_time,
            end_time=datetime.now(timezone.utc),
            output_path=output_path,
        )

    def dry_run(self) -> BuildResult:
        """Enumerate and load, reporting what a build would write."""
        start_time = datetime.now(timezone.utc)

        sources, records = self.collect()

        return BuildResult(
            config=self.config,
            sources=sources,
            records=records,
            start_time=start_time,
            end_time=datetime.now(timezone.utc),
        )


def build_list(
    input_dir: Path | str | None = None,
    output_path: Path | str | None = None,
    **options: Any,
) -> BuildResult:
    """Convenience function to run a build.

    Args:
        input_dir: Directory of profile files (default: public/assets/data)
        output_path: Output list file (default: public/list.json)
        **options: Further BuildConfig fields (sort, pretty_print, encoding)

    Returns:
        The BuildResult of the run
    """
    config = load_config(input_dir=input_dir, output_path=output_path, **options)
    return ListBuilder(config).build()

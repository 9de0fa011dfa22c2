"""
Profile List - Aggregates a directory of JSON profile documents into a single list file.

A one-shot build step: every file in the input directory is parsed and the
parsed documents are written out together as one JSON array.
"""

__version__ = "0.1.0"

from profile_list.builder.base import BuildConfig, BuildResult, ProfileParseError
from profile_list.builder.list_builder import ListBuilder, build_list

__all__ = [
    "BuildConfig",
    "BuildResult",
    "ProfileParseError",
    "ListBuilder",
    "build_list",
]

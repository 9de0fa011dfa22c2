"""Builder module - turns a directory of profile files into one list file.

Contains:
- BuildConfig: where to read from, where to write to, output options
- ConfigLoader: YAML configuration files
- ListBuilder: enumerate, load, aggregate and persist
"""

from profile_list.builder.base import BuildConfig, BuildResult, ProfileParseError
from profile_list.builder.config import ConfigLoader, load_config
from profile_list.builder.list_builder import ListBuilder, build_list

__all__ = [
    "BuildConfig",
    "BuildResult",
    "ProfileParseError",
    "ConfigLoader",
    "load_config",
    "ListBuilder",
    "build_list",
]

"""Config Loader for loading build settings from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from profile_list.builder.base import BuildConfig
from profile_list.utils.helpers import merge_dicts, drop_none


class ConfigLoader:
    """Loads build configurations from YAML files."""

    def load_file(self, path: Path | str) -> BuildConfig:
        """Load a build configuration from a YAML file.

        Relative paths in the file are resolved against the directory the
        file lives in.

        Args:
            path: Path to the YAML file

        Returns:
            Loaded BuildConfig instance
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return self._parse_config(data).resolve_paths(path.parent)

    def load_from_string(self, content: str) -> BuildConfig:
        """Load a build configuration from a YAML string.

        Args:
            content: YAML content as string

        Returns:
            Loaded BuildConfig instance
        """
        data = yaml.safe_load(content)
        return self._parse_config(data)

    def read_file(self, path: Path | str) -> dict[str, Any]:
        """Read a config file into a plain dict with paths already resolved."""
        return self.load_file(path).model_dump(exclude_unset=True)

    def _parse_config(self, data: Any) -> BuildConfig:
        """Parse config data from YAML structure."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Config must be a YAML mapping")

        return BuildConfig(**data)

    def save_file(self, config: BuildConfig, path: Path | str) -> None:
        """Save a build configuration to a YAML file.

        Args:
            config: The configuration to save
            path: Path for the output file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self._config_to_dict(config)

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def _config_to_dict(self, config: BuildConfig) -> dict[str, Any]:
        """Convert a BuildConfig to a dictionary for YAML serialization."""
        return {
            "input_dir": config.input_dir.as_posix(),
            "output_path": config.output_path.as_posix(),
            "sort": config.sort,
            "pretty_print": config.pretty_print,
            "encoding": config.encoding,
        }


def load_config(path: Path | str | None = None, **overrides: Any) -> BuildConfig:
    """Build a configuration from defaults, an optional YAML file and overrides.

    Overrides whose value is None are ignored, so unset command line options
    leave the file's values alone.

    Args:
        path: Optional path to a YAML config file
        **overrides: BuildConfig fields taking precedence over the file

    Returns:
        Merged BuildConfig instance
    """
    data: dict[str, Any] = {}
    if path is not None:
        data = ConfigLoader().read_file(path)

    data = merge_dicts(data, drop_none(overrides))
    return BuildConfig(**data)

"""Utility helper functions."""

from typing import Any


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values in override take precedence over base.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def drop_none(d: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of d without the keys whose value is None."""
    return {key: value for key, value in d.items() if value is not None}

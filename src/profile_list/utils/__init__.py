"""Utility functions for Profile List."""

from profile_list.utils.helpers import merge_dicts, drop_none

__all__ = [
    "merge_dicts",
    "drop_none",
]

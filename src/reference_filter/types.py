"""Shared types and exceptions for reference filters."""

from enum import Enum


class RangeNotation(str, Enum):
    """Separator between the two endpoints of a commit range."""

    TWO_DOT = ".."  # excludes the left endpoint's own changes
    THREE_DOT = "..."

    @property
    def excludes_start(self) -> bool:
        return self is RangeNotation.TWO_DOT


class FilterError(Exception):
    """Base exception for reference filter errors."""

    pass


class MissingContextError(FilterError, ValueError):
    """A required key is missing from the filter context."""

    def __init__(self, filter_name: str, keys: list[str]):
        self.filter_name = filter_name
        self.keys = keys
        missing = ", ".join(f"'{key}'" for key in keys)
        super().__init__(f"Missing context keys for {filter_name}: {missing}")

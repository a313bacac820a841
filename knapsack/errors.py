"""Errors raised while loading knapsack instances."""

from __future__ import annotations


class KnapsackLoadError(Exception):
    """Base class for every failure while loading an instance."""


class KnapsackIOError(KnapsackLoadError):
    """The instance file could not be opened or read."""


class KnapsackFormatError(KnapsackLoadError, ValueError):
    """The instance text does not follow the expected format.

    ``line_number`` is 1-based and ``line`` is the offending content, when
    the failure can be pinned to a single line.
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        super().__init__(message)
        self.line_number: int | None = line_number
        self.line: str | None = line

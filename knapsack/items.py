"""Knapsack item records and their one-line text encoding."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import KnapsackFormatError

MAX_UNSIGNED = 2**64 - 1
ITEM_FIELD_COUNT = 3


def parse_unsigned(token: str) -> int:
    """Parse a decimal unsigned integer token.

    Accepts an optional leading ``+`` and ASCII digits only, so tokens such
    as ``-1``, ``1.5`` or ``1_000`` are rejected.
    """
    digits = token[1:] if token.startswith("+") else token
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"'{token}' is not an unsigned integer")
    value = int(digits)
    if value > MAX_UNSIGNED:
        raise ValueError(f"'{token}' is too large for an unsigned 64-bit integer")
    return value


def _check_unsigned(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0 or value > MAX_UNSIGNED:
        raise ValueError(f"{name} must be in [0, {MAX_UNSIGNED}], got {value}")


@dataclass(frozen=True)
class Item:
    """A single item with an id, a value and a weight.

    The id is informational only; scoring never looks at it.
    """

    id: int
    value: int
    weight: int

    def __post_init__(self) -> None:
        _check_unsigned("id", self.id)
        _check_unsigned("value", self.value)
        _check_unsigned("weight", self.weight)

    @classmethod
    def from_line(cls, line: str) -> "Item":
        """Parse an ``<id> <value> <weight>`` line.

        Raises:
            KnapsackFormatError: If the line does not hold exactly three
                unsigned integers.
        """
        fields = line.split()
        try:
            values = [parse_unsigned(field) for field in fields]
        except ValueError as e:
            raise KnapsackFormatError(
                f"The item specification line '{line}' has a non-numeric field: {e}",
                line=line,
            ) from e
        if len(values) != ITEM_FIELD_COUNT:
            raise KnapsackFormatError(
                f"The item specification line '{line}' should have had "
                f"{ITEM_FIELD_COUNT} whitespace separated fields, found {len(values)}",
                line=line,
            )
        return cls(values[0], values[1], values[2])

    def to_line(self) -> str:
        return f"{self.id} {self.value} {self.weight}"

"""The knapsack problem instance."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from .items import Item, _check_unsigned


class Knapsack:
    """A capacity together with the ordered items to choose from.

    Item ``i`` corresponds to bit ``i`` of every choice vector evaluated
    against this instance. Instances are never mutated after construction,
    so they can be shared freely between concurrent scorers.
    """

    def __init__(self, items: Iterable[Item], capacity: int) -> None:
        _check_unsigned("capacity", capacity)
        self._items: tuple[Item, ...] = tuple(items)
        self._capacity: int = capacity

    @classmethod
    def from_file_path(cls, file_path: str | Path) -> "Knapsack":
        """Load an instance from a text file; see ``knapsack.loader``."""
        from .loader import load_knapsack

        return load_knapsack(file_path)

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def num_items(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        """Maximum total weight the knapsack can hold."""
        return self._capacity

    @property
    def total_value(self) -> int:
        return sum(item.value for item in self._items)

    @property
    def total_weight(self) -> int:
        return sum(item.weight for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Knapsack):
            return NotImplemented
        return self._items == other._items and self._capacity == other._capacity

    def __hash__(self) -> int:
        return hash((self._items, self._capacity))

    def __repr__(self) -> str:
        return f"Knapsack(items={self.num_items}, capacity={self._capacity})"

    def get_item(self, index: int) -> Item | None:
        """Return the item at ``index``, or None when it is out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def value(self, choices: Sequence[bool]) -> int:
        """Total value of the chosen items.

        Items and choices are zipped, so whichever sequence is longer is
        truncated to the length of the other.
        """
        return sum(item.value for item, chosen in zip(self._items, choices) if chosen)

    def weight(self, choices: Sequence[bool]) -> int:
        """Total weight of the chosen items, with the same truncation as ``value``."""
        return sum(item.weight for item, chosen in zip(self._items, choices) if chosen)

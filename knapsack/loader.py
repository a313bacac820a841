"""Plain-text knapsack instance format.

The format follows https://github.com/JorikJooken/knapsackProblemInstances/:

```text
3
1 3 8
2 2 8
3 9 1
10
```

- The first line is the number of items ``N``.
- The next ``N`` lines each hold one item: ``<id> <value> <weight>``.
- The following line is the capacity ``C`` of the knapsack.

Lines are consumed strictly in order; anything after the capacity line is
ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import KnapsackFormatError, KnapsackIOError, KnapsackLoadError
from .instance import Knapsack
from .items import Item, parse_unsigned

logger = logging.getLogger(__name__)

__all__ = [
    "KnapsackLoadError",
    "KnapsackIOError",
    "KnapsackFormatError",
    "load_knapsack",
    "parse_knapsack",
    "parse_knapsack_text",
    "format_knapsack",
    "save_knapsack",
    "knapsack_summary",
]


def _strip_newline(line: str) -> str:
    return line.rstrip("\r\n")


def parse_knapsack(lines: Iterable[str], source: str = "<input>") -> Knapsack:
    """Parse an instance from an iterable of lines.

    Args:
        lines: Lines of the instance, with or without trailing newlines.
        source: Name used in error messages (usually the file path).

    Raises:
        KnapsackFormatError: If the content is malformed or truncated.
    """
    line_iter = iter(lines)

    first = next(line_iter, None)
    if first is None:
        raise KnapsackFormatError(f"The input {source} was empty")
    first = _strip_newline(first)
    try:
        num_items = parse_unsigned(first.strip())
    except ValueError as e:
        raise KnapsackFormatError(
            f"The first line of {source} should be the number of items: {e}",
            line_number=1,
            line=first,
        ) from e

    items: list[Item] = []
    for n in range(num_items):
        raw = next(line_iter, None)
        if raw is None:
            raise KnapsackFormatError(
                f"Expected {num_items} item lines in {source} but only found {n}; "
                "is the number of items on the first line correct?"
            )
        line = _strip_newline(raw)
        try:
            items.append(Item.from_line(line))
        except KnapsackFormatError as e:
            raise KnapsackFormatError(
                f"Failed to parse line {n + 2} of {source} into an item: {e}",
                line_number=n + 2,
                line=line,
            ) from e

    raw_capacity = next(line_iter, None)
    if raw_capacity is None:
        raise KnapsackFormatError(
            f"There was no capacity line in {source}\n"
            "This might be because the number of items was set incorrectly."
        )
    capacity_line = _strip_newline(raw_capacity)
    try:
        capacity = parse_unsigned(capacity_line.strip())
    except ValueError as e:
        raise KnapsackFormatError(
            f"The capacity line of {source} should be an unsigned integer: {e}",
            line_number=num_items + 2,
            line=capacity_line,
        ) from e

    return Knapsack(items, capacity)


def parse_knapsack_text(text: str, source: str = "<string>") -> Knapsack:
    """Parse an instance held in a string."""
    return parse_knapsack(text.splitlines(), source=source)


def load_knapsack(file_path: str | Path) -> Knapsack:
    """Load an instance from a text file.

    Raises:
        KnapsackIOError: If the file cannot be opened or decoded.
        KnapsackFormatError: If the file contents have the wrong format.
    """
    file_path = Path(file_path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            knapsack = parse_knapsack(f, source=str(file_path))
    except (OSError, UnicodeDecodeError) as e:
        raise KnapsackIOError(f"Failed to read knapsack file {file_path}: {e}") from e

    logger.debug(
        "Loaded %d items with capacity %d from %s",
        knapsack.num_items,
        knapsack.capacity,
        file_path,
    )
    return knapsack


def format_knapsack(knapsack: Knapsack) -> str:
    """Render an instance in the text format, ending with a newline."""
    lines = [str(knapsack.num_items)]
    lines.extend(item.to_line() for item in knapsack)
    lines.append(str(knapsack.capacity))
    return "\n".join(lines) + "\n"


def save_knapsack(knapsack: Knapsack, file_path: str | Path) -> Path:
    """Write an instance file, creating parent directories as needed."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(format_knapsack(knapsack))
    return file_path


def knapsack_summary(knapsack: Knapsack, name: str | None = None) -> str:
    """Generate a short human-readable summary of an instance."""
    header = f"Knapsack: {name}" if name else "Knapsack"
    if knapsack.num_items == 0:
        return f"{header}: no items, capacity={knapsack.capacity}"

    weights = [item.weight for item in knapsack]
    lines = [
        header,
        f"  Items: {knapsack.num_items}",
        f"  Capacity: {knapsack.capacity}",
        f"  Total value: {knapsack.total_value}",
        f"  Total weight: {knapsack.total_weight}",
        f"  Item weights: min={min(weights)}, max={max(weights)}, "
        f"avg={sum(weights) / len(weights):.1f}",
    ]
    return "\n".join(lines)

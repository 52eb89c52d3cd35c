"""Small numeric and string helpers."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Sequence

GARDEN_GREETING = "hello I'm garden vegetables Asparagus."


def _halve_toward_zero(value: int) -> int:
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def median_and_mode(numbers: Iterable[int]) -> tuple[int, int]:
    """Return the integer median and the most frequent value.

    An even count averages the two middle values, truncating toward zero.
    Ties for the mode go to the smallest value.
    """
    ordered = sorted(numbers)
    if not ordered:
        raise ValueError("median and mode need at least one number")
    middle = len(ordered) // 2
    if len(ordered) % 2 == 1:
        median = ordered[middle]
    else:
        median = _halve_toward_zero(ordered[middle - 1] + ordered[middle])
    mode = Counter(ordered).most_common(1)[0][0]
    return median, mode


def longest(x: str, y: str) -> str:
    """Return the longer string by UTF-8 length; ``y`` on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


def add_two(x: int) -> int:
    return x + 2


def hello_garden() -> str:
    """Print the garden greeting and return it."""
    print(GARDEN_GREETING)
    return GARDEN_GREETING


def main(argv: Sequence[str] | None = None) -> int:
    print("app")
    result = longest("abcd", "xyz")
    print(f"The longest string is {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Text patterns of stars and numbers."""

from __future__ import annotations


def pyramid(rows: int) -> str:
    """Centred triangle of ``"* "`` cells; line ``i`` (from 0) holds ``i`` stars."""
    return "".join(
        " " * (rows - 1 - i) + "* " * i + "\n" for i in range(max(rows, 0))
    )


def star_pyramid(rows: int = 5) -> str:
    """Rows of ``" * "`` cells indented by the rows minus the stars drawn so far."""
    lines = []
    drawn = 0
    for stars in range(1, rows + 1):
        lines.append(" " * max(0, rows - drawn) + " * " * stars + "\n")
        drawn += stars
    return "".join(lines)


def _square_row(n: int, value: int) -> list[int]:
    left = list(range(n, value - 1, -1))
    middle = [value] * max(0, 2 * value - 3)
    right = list(range(max(value, 2), n + 1))
    return left + middle + right


def number_square(n: int) -> str:
    """Concentric square of numbers, ``n`` on the border down to 1 in the centre."""
    if n < 1:
        return ""
    values = [*range(n, 0, -1), *range(2, n + 1)]
    return "".join(
        "".join(f"{number} " for number in _square_row(n, value)) + "\n"
        for value in values
    )


def hourglass(size: int = 5) -> str:
    """Left-aligned star rows shrinking from ``size`` to 1 and growing back."""
    counts = [*range(size, 0, -1), *range(1, size + 1)]
    return "".join("*" * count + "\n" for count in counts)